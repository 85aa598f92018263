"""
槽位默认落点 - 新建槽位的初始Frame

规则：
1. 按槽位类型查百分比尺寸规则，宽高取画布百分比
2. 先应用最小值钳制，再应用最大值钳制
3. 在画布上居中，四个字段取整
4. 按名称的启发式在基础Frame上调整位置/尺寸，按固定优先级首个命中生效：
   headline/title -> subhead/subtitle -> cta/button -> logo -> bg/background -> subject/hero

画布尺寸与 Frame 同处归一化编辑空间。
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from ..geometry.rounding import round_half_up
from ..models import Frame, SlotSizeConfig, SlotType

SLOT_SIZE_DEFAULTS: Mapping[SlotType, SlotSizeConfig] = MappingProxyType({
    SlotType.TEXT: SlotSizeConfig(width_percent=70, height_percent=10, min_width=200, min_height=40),
    SlotType.IMAGE: SlotSizeConfig(width_percent=50, height_percent=50, min_width=150, min_height=150),
    SlotType.BUTTON: SlotSizeConfig(
        width_percent=30, height_percent=8, min_width=120, min_height=40, max_height=60
    ),
    SlotType.SHAPE: SlotSizeConfig(width_percent=40, height_percent=40, min_width=100, min_height=100),
})

DEFAULT_STACK_OFFSET = 20


def _snap(x: float, y: float, width: float, height: float) -> Frame:
    return Frame(
        x=round_half_up(x),
        y=round_half_up(y),
        width=round_half_up(width),
        height=round_half_up(height),
    )


def get_default_slot_frame(
    slot_type: SlotType | str, canvas_width: float, canvas_height: float
) -> Frame:
    """按类型计算默认Frame（居中）"""
    config = SLOT_SIZE_DEFAULTS[SlotType(slot_type)]

    width = canvas_width * config.width_percent / 100
    height = canvas_height * config.height_percent / 100

    if config.min_width is not None:
        width = max(width, config.min_width)
    if config.min_height is not None:
        height = max(height, config.min_height)
    if config.max_width is not None:
        width = min(width, config.max_width)
    if config.max_height is not None:
        height = min(height, config.max_height)

    return _snap((canvas_width - width) / 2, (canvas_height - height) / 2, width, height)


# 名称启发式：(关键字, 调整函数)，顺序即优先级
_NameRule = Callable[[Frame, float, float], Frame]

_NAME_RULES: tuple[tuple[tuple[str, ...], _NameRule], ...] = (
    (("headline", "title"), lambda f, cw, ch: _snap(f.x, ch * 0.15, f.width, f.height)),
    (("subhead", "subtitle"), lambda f, cw, ch: _snap(f.x, ch * 0.35, f.width, f.height)),
    (("cta", "button"), lambda f, cw, ch: _snap(f.x, ch * 0.75, f.width, f.height)),
    (
        ("logo",),
        lambda f, cw, ch: _snap(cw * 0.05, ch * 0.05, min(f.width, cw * 0.2), min(f.height, ch * 0.15)),
    ),
    (("bg", "background"), lambda f, cw, ch: _snap(0, 0, cw, ch)),
    (("subject", "hero"), lambda f, cw, ch: _snap(f.x, f.y, cw * 0.6, ch * 0.6)),
)


def get_default_slot_frame_by_name(
    slot_name: str, slot_type: SlotType | str, canvas_width: float, canvas_height: float
) -> Frame:
    """
    按名称约定计算默认Frame

    注意 "subtitle" 同时包含 "title"，按优先级落到标题位置。
    """
    base_frame = get_default_slot_frame(slot_type, canvas_width, canvas_height)
    lower_name = slot_name.lower()

    for keywords, rule in _NAME_RULES:
        if any(k in lower_name for k in keywords):
            return rule(base_frame, canvas_width, canvas_height)

    return base_frame


def get_stacked_slot_offset(
    base_frame: Frame, stack_index: int, offset_amount: float = DEFAULT_STACK_OFFSET
) -> Frame:
    """连续添加多个槽位时按序号错开位置"""
    return base_frame.model_copy(update={
        "x": base_frame.x + stack_index * offset_amount,
        "y": base_frame.y + stack_index * offset_amount,
    })
