"""
Frame 变换 - 归一化空间 <-> 导出空间，以及等比缩放工具

normalize_frame / denormalize_frame 不做任何取整；需要像素对齐的调用方在边界处自行取整。
rotation 与缩放无关，原样透传。
"""

from __future__ import annotations

import math

from ..models import Frame
from .ratios import RatioResolver, get_default_resolver


def normalize_frame(frame: Frame, ratio_id: str, resolver: RatioResolver | None = None) -> Frame:
    """导出像素坐标 -> 归一化坐标"""
    resolver = resolver or get_default_resolver()
    return frame.scaled(resolver.get_normalization_scale(ratio_id))


def denormalize_frame(frame: Frame, ratio_id: str, resolver: RatioResolver | None = None) -> Frame:
    """归一化坐标 -> 导出像素坐标"""
    resolver = resolver or get_default_resolver()
    return frame.scaled(resolver.get_export_scale(ratio_id))


def normalize_frames(
    frames: dict[str, Frame], ratio_id: str, resolver: RatioResolver | None = None
) -> dict[str, Frame]:
    """对同一比例下的全部槽位Frame做归一化（page.frames[ratio]）"""
    resolver = resolver or get_default_resolver()
    scale = resolver.get_normalization_scale(ratio_id)
    return {name: frame.scaled(scale) for name, frame in frames.items()}


def denormalize_frames(
    frames: dict[str, Frame], ratio_id: str, resolver: RatioResolver | None = None
) -> dict[str, Frame]:
    """对同一比例下的全部槽位Frame做反归一化"""
    resolver = resolver or get_default_resolver()
    scale = resolver.get_export_scale(ratio_id)
    return {name: frame.scaled(scale) for name, frame in frames.items()}


# ============================================================================
# 等比缩放
# ============================================================================

def get_aspect_ratio(frame: Frame) -> float:
    """宽/高，高为0时返回1"""
    if frame.height == 0:
        return 1.0
    return frame.width / frame.height


def lock_aspect_ratio(
    frame: Frame, new_width: float | None = None, new_height: float | None = None
) -> Frame:
    """
    锁定宽高比调整尺寸

    同时给出宽高时以宽为准；都不给出时原样返回。
    """
    ratio = get_aspect_ratio(frame)

    if new_width is not None:
        return frame.model_copy(update={"width": new_width, "height": new_width / ratio})

    if new_height is not None:
        return frame.model_copy(update={"width": new_height * ratio, "height": new_height})

    return frame


def fit_to_max_size(frame: Frame, max_width: float, max_height: float) -> Frame:
    """等比缩小到不超过最大尺寸"""
    if frame.width <= max_width and frame.height <= max_height:
        return frame

    scale = min(
        max_width / frame.width if frame.width > 0 else math.inf,
        max_height / frame.height if frame.height > 0 else math.inf,
    )
    return frame.model_copy(update={"width": frame.width * scale, "height": frame.height * scale})


def fill_min_size(frame: Frame, min_width: float, min_height: float) -> Frame:
    """等比放大到不小于最小尺寸"""
    if frame.width >= min_width and frame.height >= min_height:
        return frame

    if frame.width <= 0 or frame.height <= 0:
        # 退化尺寸无法等比放大
        return frame.model_copy(update={"width": max(frame.width, min_width), "height": max(frame.height, min_height)})

    scale = max(min_width / frame.width, min_height / frame.height)
    return frame.model_copy(update={"width": frame.width * scale, "height": frame.height * scale})


def has_same_aspect_ratio(frame_a: Frame, frame_b: Frame, tolerance: float = 0.01) -> bool:
    """两个Frame宽高比是否一致（容差内）"""
    return abs(get_aspect_ratio(frame_a) - get_aspect_ratio(frame_b)) < tolerance
