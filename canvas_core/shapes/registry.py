"""
形状注册表 - 形状ID -> 形状定义（标签/分类/默认尺寸/几何生成函数）

几何生成函数为纯函数：(width, height, slot) -> ShapeGeometry。
- width/height 为槽位当前渲染尺寸
- 实例选项取自 slot.shape.options，缺失或非数值时回退到形状默认选项
- 多边形族（triangle/regularPolygon/star）半径 min(w,h)/2，中心 (w/2,h/2)，委托几何内核
- 装饰/流程图形状只返回资源键引用，路径数据由外部资源表提供

选项越界一律静默钳制（边数>=3、角数>=2、内径比[0.05,0.95]），不视为错误。
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..config import load_assets
from ..geometry import points_to_polygon_attribute, regular_polygon, star
from ..interfaces import IAssetTable
from ..models import (
    AssetGeometry,
    EllipseGeometry,
    LineGeometry,
    PolygonGeometry,
    RectGeometry,
    ShapeAsset,
    ShapeGeometry,
    Slot,
)

logger = logging.getLogger(__name__)

GeometryFn = Callable[[float, float, "Slot | None", "ShapeDefinition"], ShapeGeometry]

MIN_SIDES = 3
MIN_STAR_POINTS = 2
INNER_RATIO_RANGE = (0.05, 0.95)


@dataclass(frozen=True)
class ShapeDefinition:
    """形状定义（静态注册项）"""
    id: str
    label: str
    category: str
    default_size: tuple[int, int]  # (width, height)，导出空间约定
    geometry: GeometryFn
    defaults: Mapping[str, Any] = field(default_factory=dict)
    default_options: Mapping[str, Any] = field(default_factory=dict)
    keywords: tuple[str, ...] = ()

    def build(self, width: float, height: float, slot: Slot | None = None) -> ShapeGeometry:
        """按当前尺寸生成几何描述（每次重新计算，缺省选项取自本定义）"""
        return self.geometry(width, height, slot, self)


@dataclass(frozen=True)
class ShapeCategoryGroup:
    """形状分类分组"""
    id: str
    label: str
    shapes: tuple[str, ...]


def _number_option(slot: Slot | None, definition: ShapeDefinition, key: str) -> float:
    """读取数值选项，缺失/非数值/非有限值回退到定义的 default_options"""
    default = definition.default_options[key]
    raw = slot.get_option(key) if slot is not None else None
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.debug(f"形状选项 {key}={raw!r} 不是数值，使用默认值 {default}")
        return default
    return value if math.isfinite(value) else default


def _polygon_radius(width: float, height: float) -> float:
    return min(width, height) / 2


# ============================================================================
# 几何生成函数
# ============================================================================

def _rect(width: float, height: float, slot: Slot | None, definition: ShapeDefinition) -> ShapeGeometry:
    return RectGeometry()


def _rounded_rect(width: float, height: float, slot: Slot | None, definition: ShapeDefinition) -> ShapeGeometry:
    rx = slot.rx if slot is not None and slot.rx is not None else None
    ry = slot.ry if slot is not None and slot.ry is not None else rx
    return RectGeometry(
        rx=rx if rx is not None else definition.defaults["rx"],
        ry=ry if ry is not None else definition.defaults["ry"],
    )


def _ellipse(width: float, height: float, slot: Slot | None, definition: ShapeDefinition) -> ShapeGeometry:
    return EllipseGeometry()


def _triangle(width: float, height: float, slot: Slot | None, definition: ShapeDefinition) -> ShapeGeometry:
    rotation = _number_option(slot, definition, "rotation")
    vertices = regular_polygon(3, width / 2, height / 2, _polygon_radius(width, height), rotation)
    return PolygonGeometry(points=points_to_polygon_attribute(vertices))


def _regular_polygon(width: float, height: float, slot: Slot | None, definition: ShapeDefinition) -> ShapeGeometry:
    sides = max(MIN_SIDES, int(_number_option(slot, definition, "sides")))
    rotation = _number_option(slot, definition, "rotation")
    vertices = regular_polygon(sides, width / 2, height / 2, _polygon_radius(width, height), rotation)
    return PolygonGeometry(points=points_to_polygon_attribute(vertices))


def _star(width: float, height: float, slot: Slot | None, definition: ShapeDefinition) -> ShapeGeometry:
    point_count = max(MIN_STAR_POINTS, int(_number_option(slot, definition, "points")))
    low, high = INNER_RATIO_RANGE
    inner_ratio = max(low, min(high, _number_option(slot, definition, "innerRatio")))
    rotation = _number_option(slot, definition, "rotation")
    r_outer = _polygon_radius(width, height)
    vertices = star(point_count, width / 2, height / 2, r_outer, r_outer * inner_ratio, rotation)
    return PolygonGeometry(points=points_to_polygon_attribute(vertices))


def _horizontal_line(width: float, height: float, slot: Slot | None, definition: ShapeDefinition) -> ShapeGeometry:
    y = height / 2
    return LineGeometry(x1=0, y1=y, x2=width, y2=y)


def _asset(width: float, height: float, slot: Slot | None, definition: ShapeDefinition) -> ShapeGeometry:
    return AssetGeometry(asset_key=definition.id)


# ============================================================================
# 注册表
# ============================================================================

def _define(
    shape_id: str,
    label: str,
    category: str,
    default_size: tuple[int, int],
    geometry: GeometryFn = _asset,
    **extra: Any,
) -> ShapeDefinition:
    return ShapeDefinition(
        id=shape_id,
        label=label,
        category=category,
        default_size=default_size,
        geometry=geometry,
        defaults=MappingProxyType(extra.get("defaults", {})),
        default_options=MappingProxyType(extra.get("default_options", {})),
        keywords=tuple(extra.get("keywords", ())),
    )


_DEFINITIONS = (
    _define("rectangle", "Rectangle", "basic", (120, 120), _rect, keywords=("square", "box")),
    _define(
        "roundedRectangle", "Rounded Rectangle", "basic", (120, 120), _rounded_rect,
        defaults={"rx": 16, "ry": 16},
        keywords=("card", "pill"),
    ),
    _define("ellipse", "Ellipse", "basic", (120, 120), _ellipse, keywords=("circle", "oval")),
    _define(
        "triangle", "Triangle", "basic", (120, 120), _triangle,
        default_options={"rotation": -90},
    ),
    _define(
        "regularPolygon", "Polygon", "basic", (120, 120), _regular_polygon,
        default_options={"sides": 5, "rotation": -90},
        keywords=("pentagon", "hexagon"),
    ),
    _define(
        "star", "Star", "basic", (140, 140), _star,
        default_options={"points": 5, "innerRatio": 0.5, "rotation": -90},
    ),
    _define("line", "Line", "connectors", (160, 4), _horizontal_line, defaults={"fill": "none"}),
    _define(
        "arrow", "Arrow", "connectors", (160, 4), _horizontal_line,
        defaults={"fill": "none", "markerEnd": True},
    ),
    _define("heart", "Heart", "assets", (140, 140), keywords=("love",)),
    _define("cloud", "Cloud", "assets", (160, 120)),
    _define("banner", "Banner", "assets", (200, 100), keywords=("ribbon",)),
    _define("speechBubble", "Speech Bubble", "assets", (180, 140), keywords=("quote", "chat")),
    _define("flowchart/start", "Start/End", "flowchart", (160, 100)),
    _define("flowchart/process", "Process", "flowchart", (160, 100)),
    _define("flowchart/decision", "Decision", "flowchart", (160, 160)),
)

SHAPE_REGISTRY: Mapping[str, ShapeDefinition] = MappingProxyType({d.id: d for d in _DEFINITIONS})

SHAPE_CATEGORIES: tuple[ShapeCategoryGroup, ...] = (
    ShapeCategoryGroup(
        "basic", "Basic Shapes",
        ("rectangle", "roundedRectangle", "ellipse", "triangle", "regularPolygon", "star"),
    ),
    ShapeCategoryGroup("connectors", "Connectors", ("line", "arrow")),
    ShapeCategoryGroup("assets", "Decorative", ("heart", "cloud", "banner", "speechBubble")),
    ShapeCategoryGroup(
        "flowchart", "Flowchart",
        ("flowchart/start", "flowchart/process", "flowchart/decision"),
    ),
)

ASSET_SHAPE_IDS: tuple[str, ...] = tuple(
    d.id for d in _DEFINITIONS if d.category in ("assets", "flowchart")
)


def get_shape_definition(shape_id: str) -> ShapeDefinition | None:
    """按ID查找形状定义"""
    return SHAPE_REGISTRY.get(shape_id)


def list_shapes(category: str | None = None) -> list[ShapeDefinition]:
    """列出形状（可按分类过滤，保持注册顺序）"""
    return [d for d in _DEFINITIONS if category is None or d.category == category]


def resolve_shape_geometry(
    slot: Slot, width: float | None = None, height: float | None = None
) -> ShapeGeometry | None:
    """
    解析槽位的形状几何

    Args:
        slot: 形状槽位（读取 shape.id / shape.options / rx / ry）
        width, height: 当前渲染尺寸，缺省时取槽位自身尺寸，再缺省取形状默认尺寸

    Returns:
        几何描述；槽位无形状或形状ID未注册时返回None
    """
    if slot.shape is None:
        return None

    definition = SHAPE_REGISTRY.get(slot.shape.id)
    if definition is None:
        logger.warning(f"未注册的形状: {slot.shape.id} (slot={slot.name})")
        return None

    default_w, default_h = definition.default_size
    w = width if width is not None else (slot.width if slot.width is not None else default_w)
    h = height if height is not None else (slot.height if slot.height is not None else default_h)
    return definition.build(w, h, slot)


def resolve_asset_paths(geometry: AssetGeometry, table: IAssetTable | None = None) -> ShapeAsset | None:
    """
    查找资源形状的路径数据（渲染层使用）

    Args:
        geometry: 资源引用描述
        table: 外部资源表，缺省按运行期配置加载（assets.table_path）
    """
    if table is None:
        table = load_assets()
    return table.get(geometry.asset_key)
