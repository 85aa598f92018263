"""
数据模型层 - 定义系统核心数据结构

所有模块通过这些模型交互，实现解耦：
- Dimensions/ScaleFactor/Frame: 坐标空间与对象位置
- ParsedRatio: 比例标识解析结果
- *Geometry: 交给渲染层的形状几何描述
- Slot/SlotSizeConfig: 模板槽位与默认尺寸规则
"""

from .frame import Dimensions, Frame, ParsedRatio, RatioKind, ScaleFactor
from .shape import (
    AssetGeometry,
    EllipseGeometry,
    LineGeometry,
    PolygonGeometry,
    RectGeometry,
    ShapeAsset,
    ShapeGeometry,
)
from .slot import Slot, SlotShape, SlotSizeConfig, SlotType

__all__ = [
    "Dimensions",
    "Frame",
    "ParsedRatio",
    "RatioKind",
    "ScaleFactor",
    "AssetGeometry",
    "EllipseGeometry",
    "LineGeometry",
    "PolygonGeometry",
    "RectGeometry",
    "ShapeAsset",
    "ShapeGeometry",
    "Slot",
    "SlotShape",
    "SlotSizeConfig",
    "SlotType",
]
