"""
槽位模型 - 模板 Slot 中核心模块需要读取的子集

完整 schema 归模板层所有；此处只声明 name/type/尺寸/圆角/shape.options，
其余字段原样保留（extra="allow"）。
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class SlotType(str, Enum):
    """槽位类型"""
    IMAGE = "image"
    TEXT = "text"
    BUTTON = "button"
    SHAPE = "shape"


class SlotShape(BaseModel):
    """槽位的形状引用"""
    id: str
    options: dict[str, Any] = Field(default_factory=dict)


class Slot(BaseModel):
    """模板槽位"""
    name: str
    type: SlotType = SlotType.SHAPE
    width: float | None = None
    height: float | None = None
    rx: float | None = None
    ry: float | None = None
    shape: SlotShape | None = None

    model_config = {"extra": "allow"}

    def get_option(self, key: str) -> Any:
        """读取 shape.options 中的值（不存在返回None）"""
        if self.shape is None:
            return None
        return self.shape.options.get(key)


class SlotSizeConfig(BaseModel):
    """按画布百分比定义的默认尺寸规则（静态配置，不可变）"""
    width_percent: float
    height_percent: float
    min_width: float | None = None
    min_height: float | None = None
    max_width: float | None = None
    max_height: float | None = None

    model_config = {"frozen": True}
