"""
形状几何描述模型 - 渲染层契约

type 标签（rect / ellipse / polygon / line / asset）是与渲染层之间的稳定契约，
不得更改。描述对象每次按需重新生成，不缓存、不原地修改。
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class RectGeometry(BaseModel):
    """矩形（可选圆角）"""
    type: Literal["rect"] = "rect"
    rx: float | None = None
    ry: float | None = None


class EllipseGeometry(BaseModel):
    """椭圆（充满包围盒）"""
    type: Literal["ellipse"] = "ellipse"


class PolygonGeometry(BaseModel):
    """多边形，points 为 "x,y x,y ..." 格式"""
    type: Literal["polygon"] = "polygon"
    points: str


class LineGeometry(BaseModel):
    """线段"""
    type: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float


class AssetGeometry(BaseModel):
    """静态路径资源引用（不携带计算几何）"""
    type: Literal["asset"] = "asset"
    asset_key: str


ShapeGeometry = Annotated[
    Union[RectGeometry, EllipseGeometry, PolygonGeometry, LineGeometry, AssetGeometry],
    Field(discriminator="type"),
]


class ShapeAsset(BaseModel):
    """外部路径数据表中的一项"""
    view_box: str = Field(..., alias="viewBox")
    d: str

    model_config = {"populate_by_name": True}

    def view_box_numbers(self) -> tuple[float, float, float, float]:
        """解析 viewBox 为 (x, y, w, h)"""
        parts = [float(p) for p in self.view_box.split()]
        if len(parts) != 4:
            raise ValueError(f"viewBox 需要4个数值: {self.view_box!r}")
        return parts[0], parts[1], parts[2], parts[3]
