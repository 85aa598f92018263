"""
坐标模型 - 尺寸、缩放因子与对象Frame

Frame 本身不记录所处坐标空间（归一化空间 / 导出空间），由调用方负责跟踪。
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Dimensions(BaseModel):
    """像素尺寸（取整后恒为正整数）"""
    w: int
    h: int

    @property
    def aspect(self) -> float:
        return self.w / self.h if self.h else 1.0


class ScaleFactor(BaseModel):
    """两个坐标空间之间的逐轴缩放因子"""
    scale_x: float = Field(..., gt=0)
    scale_y: float = Field(..., gt=0)


class Frame(BaseModel):
    """已放置对象的位置/尺寸/旋转"""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    rotation: float | None = Field(None, description="旋转角度(度)，缩放时原样透传")

    def scaled(self, scale: ScaleFactor) -> Frame:
        """按逐轴缩放因子生成新Frame（不取整）"""
        return Frame(
            x=self.x * scale.scale_x,
            y=self.y * scale.scale_y,
            width=self.width * scale.scale_x,
            height=self.height * scale.scale_y,
            rotation=self.rotation,
        )


class RatioKind(str, Enum):
    """比例标识的解析类别"""
    LITERAL = "literal"            # "728x90" 字面像素
    ASPECT = "aspect"              # "16:9" 宽高比
    UNRECOGNIZED = "unrecognized"  # 其它一律视为无法识别


class ParsedRatio(BaseModel):
    """比例标识解析结果（是否回退到1:1由调用方决定）"""
    kind: RatioKind
    w: int = 0
    h: int = 0

    @property
    def recognized(self) -> bool:
        return self.kind is not RatioKind.UNRECOGNIZED
