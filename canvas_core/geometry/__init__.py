"""
几何模块 - 比例解析/Frame变换/多边形内核

子模块：
- ratios: 比例标识 -> 导出尺寸、归一化尺寸、缩放因子
- transform: Frame 归一化/反归一化与等比缩放
- kernel: 正多边形与星形顶点生成
- rounding: 与浏览器端一致的取整规则
"""

from .kernel import points_to_polygon_attribute, regular_polygon, star
from .ratios import (
    NORMALIZATION_METADATA,
    RatioResolver,
    get_export_dimensions,
    get_export_scale,
    get_normalization_scale,
    get_normalized_dimensions,
    parse_aspect_ratio,
    parse_ratio_id,
)
from .transform import (
    denormalize_frame,
    denormalize_frames,
    fill_min_size,
    fit_to_max_size,
    get_aspect_ratio,
    has_same_aspect_ratio,
    lock_aspect_ratio,
    normalize_frame,
    normalize_frames,
)

__all__ = [
    "points_to_polygon_attribute",
    "regular_polygon",
    "star",
    "NORMALIZATION_METADATA",
    "RatioResolver",
    "get_export_dimensions",
    "get_export_scale",
    "get_normalization_scale",
    "get_normalized_dimensions",
    "parse_aspect_ratio",
    "parse_ratio_id",
    "denormalize_frame",
    "denormalize_frames",
    "fill_min_size",
    "fit_to_max_size",
    "get_aspect_ratio",
    "has_same_aspect_ratio",
    "lock_aspect_ratio",
    "normalize_frame",
    "normalize_frames",
]
