"""
几何内核 - 解析生成正多边形与星形顶点

约定：
- 角度参数 rotation 以度为单位，从 rotation 起按索引递增方向（cos/sin 标准参数化）排列
- 每个坐标保留3位小数，保证序列化输出紧凑且稳定
- 结构性前置条件不满足时抛 InvalidGeometryError，不生成退化形状
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from ..interfaces import InvalidGeometryError
from .rounding import format_number, round_fixed

Point = tuple[float, float]

DEG2RAD = math.pi / 180


def _vertex(cx: float, cy: float, radius: float, angle: float) -> Point:
    return (
        round_fixed(cx + radius * math.cos(angle)),
        round_fixed(cy + radius * math.sin(angle)),
    )


def regular_polygon(points: int, cx: float, cy: float, r: float, rotation: float = 0) -> list[Point]:
    """
    正多边形顶点

    Args:
        points: 边数（>= 3）
        cx, cy: 中心
        r: 外接圆半径
        rotation: 起始角（度）

    Raises:
        InvalidGeometryError: points < 3
    """
    if points < 3:
        raise InvalidGeometryError(f"正多边形至少需要3个顶点: points={points}")

    angle_step = (math.pi * 2) / points
    rotation_rad = rotation * DEG2RAD

    return [_vertex(cx, cy, r, angle_step * index + rotation_rad) for index in range(points)]


def star(
    points: int, cx: float, cy: float, r_outer: float, r_inner: float, rotation: float = 0
) -> list[Point]:
    """
    星形顶点（外/内半径交替，索引0为外顶点，共 2*points 个）

    Raises:
        InvalidGeometryError: points < 2 或任一半径不为正
    """
    if points < 2:
        raise InvalidGeometryError(f"星形至少需要2个角: points={points}")
    if r_inner <= 0 or r_outer <= 0:
        raise InvalidGeometryError(f"星形半径必须为正: r_outer={r_outer}, r_inner={r_inner}")

    angle_step = math.pi / points
    rotation_rad = rotation * DEG2RAD

    return [
        _vertex(cx, cy, r_outer if index % 2 == 0 else r_inner, angle_step * index + rotation_rad)
        for index in range(points * 2)
    ]


def points_to_polygon_attribute(points: Iterable[Point]) -> str:
    """序列化为渲染层使用的 "x,y x,y ..." 文本"""
    return " ".join(f"{format_number(x)},{format_number(y)}" for x, y in points)
