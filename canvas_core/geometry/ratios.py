"""
比例解析器 - 将比例标识映射为导出尺寸、归一化编辑尺寸与缩放因子

比例标识只有两种合法格式：
1. 字面像素 "728x90"（导出尺寸即字面值）
2. 宽高比 "16:9"（导出尺寸取标准宽度：方形1080，横向1920，纵向1080）
其它任何输入（含0分量、超出数值范围的分量）均视为无法识别，回退到 1:1 / 1080×1080，不抛异常。

归一化空间：长边固定2000，短边不小于320（极端比例如1:20时按短边反推长边）。

导出缩放与归一化缩放各自由两组尺寸独立计算，不通过取倒数得到，
往返误差只受一次浮点除法精度影响。
"""

from __future__ import annotations

import logging
import math
import re
from types import MappingProxyType
from typing import TYPE_CHECKING

from ..models import Dimensions, ParsedRatio, RatioKind, ScaleFactor
from .rounding import round_half_up

if TYPE_CHECKING:
    from ..config import RuntimeConfig

logger = logging.getLogger(__name__)

NORMALIZED_LONG_EDGE = 2000
NORMALIZED_MIN_SHORT_EDGE = 320
MIN_ASPECT = 0.0001

EXPORT_SQUARE_SIZE = 1080
EXPORT_LANDSCAPE_WIDTH = 1920
EXPORT_PORTRAIT_WIDTH = 1080

NORMALIZATION_METADATA = MappingProxyType({
    "long_edge": NORMALIZED_LONG_EDGE,
    "min_short_edge": NORMALIZED_MIN_SHORT_EDGE,
})

_LITERAL_RE = re.compile(r"(\d+)x(\d+)")
_ASPECT_RE = re.compile(r"(\d+):(\d+)")


def _component(text: str) -> int | None:
    """数字串 -> 正整数分量；为0或超出整数/浮点可表示范围时为None"""
    try:
        value = int(text)
        float(value)
    except (ValueError, OverflowError):
        return None
    return value or None


def parse_ratio_id(ratio_id: str) -> ParsedRatio:
    """
    解析比例标识

    Returns:
        LITERAL / ASPECT 携带 (w, h)；任何分量为0、数值溢出或格式不符时为 UNRECOGNIZED
    """
    if not isinstance(ratio_id, str):
        return ParsedRatio(kind=RatioKind.UNRECOGNIZED)

    for kind, pattern in ((RatioKind.LITERAL, _LITERAL_RE), (RatioKind.ASPECT, _ASPECT_RE)):
        match = pattern.fullmatch(ratio_id)
        if match:
            w, h = _component(match.group(1)), _component(match.group(2))
            if w is None or h is None:
                break
            return ParsedRatio(kind=kind, w=w, h=h)

    return ParsedRatio(kind=RatioKind.UNRECOGNIZED)


def _scale(numerator: Dimensions, denominator: Dimensions) -> ScaleFactor:
    return ScaleFactor(
        scale_x=float(numerator.w) / float(denominator.w),
        scale_y=float(numerator.h) / float(denominator.h),
    )


class RatioResolver:
    """比例解析器（纯计算，无共享可变状态）"""

    def __init__(
        self,
        long_edge: int = NORMALIZED_LONG_EDGE,
        min_short_edge: int = NORMALIZED_MIN_SHORT_EDGE,
        min_aspect: float = MIN_ASPECT,
        square_size: int = EXPORT_SQUARE_SIZE,
        landscape_width: int = EXPORT_LANDSCAPE_WIDTH,
        portrait_width: int = EXPORT_PORTRAIT_WIDTH,
    ) -> None:
        self.long_edge = long_edge
        self.min_short_edge = min_short_edge
        self.min_aspect = min_aspect
        self.square_size = square_size
        self.landscape_width = landscape_width
        self.portrait_width = portrait_width

    @classmethod
    def from_config(cls, config: RuntimeConfig) -> RatioResolver:
        """由运行期配置构造"""
        return cls(
            long_edge=config.normalization.long_edge,
            min_short_edge=config.normalization.min_short_edge,
            min_aspect=config.normalization.min_aspect,
            square_size=config.export.square_size,
            landscape_width=config.export.landscape_width,
            portrait_width=config.export.portrait_width,
        )

    @property
    def metadata(self) -> dict[str, int]:
        return {"long_edge": self.long_edge, "min_short_edge": self.min_short_edge}

    def _parse(self, ratio_id: str) -> ParsedRatio:
        parsed = parse_ratio_id(ratio_id)
        if not parsed.recognized:
            logger.debug(f"无法识别的比例标识 {ratio_id!r}，按1:1处理")
        return parsed

    def parse_aspect_ratio(self, ratio_id: str) -> float:
        """宽/高比，无法识别时为1"""
        parsed = self._parse(ratio_id)
        if not parsed.recognized:
            return 1.0
        return float(parsed.w) / float(parsed.h)

    def get_export_dimensions(self, ratio_id: str) -> Dimensions:
        """导出像素尺寸"""
        parsed = self._parse(ratio_id)

        if parsed.kind is RatioKind.LITERAL:
            return Dimensions(w=parsed.w, h=parsed.h)

        if parsed.kind is RatioKind.ASPECT:
            w, h = parsed.w, parsed.h
            if w == h:
                return Dimensions(w=self.square_size, h=self.square_size)
            base_width = self.landscape_width if w > h else self.portrait_width
            height = base_width * (float(h) / float(w))
            if math.isfinite(height):
                # 极端横向比例（如 5000:1）高度不足半像素时取1
                return Dimensions(w=base_width, h=max(1, round_half_up(height)))
            logger.debug(f"比例标识 {ratio_id!r} 导出高度超出数值范围，按1:1处理")

        return Dimensions(w=self.square_size, h=self.square_size)

    def _normalized_extent(self, aspect: float) -> tuple[float, float]:
        if aspect >= 1:
            width = float(self.long_edge)
            height = self.long_edge / aspect
            if height < self.min_short_edge:
                height = float(self.min_short_edge)
                width = height * aspect
        else:
            width = self.long_edge * aspect
            height = float(self.long_edge)
            if width < self.min_short_edge:
                width = float(self.min_short_edge)
                height = width / aspect
        return width, height

    def get_normalized_dimensions(self, ratio_id: str) -> Dimensions:
        """归一化编辑尺寸（与导出尺寸无关，保证编辑面视觉密度一致）"""
        aspect = max(self.parse_aspect_ratio(ratio_id), self.min_aspect)
        width, height = self._normalized_extent(aspect)
        if not (math.isfinite(width) and math.isfinite(height)):
            logger.debug(f"比例标识 {ratio_id!r} 归一化尺寸超出数值范围，按1:1处理")
            width, height = self._normalized_extent(1.0)

        return Dimensions(w=round_half_up(width), h=round_half_up(height))

    def get_export_scale(self, ratio_id: str) -> ScaleFactor:
        """导出缩放（归一化 -> 导出像素）"""
        return _scale(self.get_export_dimensions(ratio_id), self.get_normalized_dimensions(ratio_id))

    def get_normalization_scale(self, ratio_id: str) -> ScaleFactor:
        """归一化缩放（导出像素 -> 归一化）"""
        return _scale(self.get_normalized_dimensions(ratio_id), self.get_export_dimensions(ratio_id))


_default_resolver = RatioResolver()


def get_default_resolver() -> RatioResolver:
    """内置常量构造的解析器"""
    return _default_resolver


# 便捷函数
def parse_aspect_ratio(ratio_id: str) -> float:
    return _default_resolver.parse_aspect_ratio(ratio_id)


def get_export_dimensions(ratio_id: str) -> Dimensions:
    return _default_resolver.get_export_dimensions(ratio_id)


def get_normalized_dimensions(ratio_id: str) -> Dimensions:
    return _default_resolver.get_normalized_dimensions(ratio_id)


def get_export_scale(ratio_id: str) -> ScaleFactor:
    return _default_resolver.get_export_scale(ratio_id)


def get_normalization_scale(ratio_id: str) -> ScaleFactor:
    return _default_resolver.get_normalization_scale(ratio_id)
