"""
布局模块 - 新建槽位的默认落点
"""

from .slot_defaults import (
    SLOT_SIZE_DEFAULTS,
    get_default_slot_frame,
    get_default_slot_frame_by_name,
    get_stacked_slot_offset,
)

__all__ = [
    "SLOT_SIZE_DEFAULTS",
    "get_default_slot_frame",
    "get_default_slot_frame_by_name",
    "get_stacked_slot_offset",
]
