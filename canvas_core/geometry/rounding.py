"""
取整规则 - 与浏览器端保持一致的取整

- round_half_up: 等价于 Math.round（.5 向正无穷方向），用于像素对齐的尺寸/Frame
- round_fixed: 等价于 Number(x.toFixed(n))（按二进制精确值四舍五入，.5 远离零），用于几何坐标
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """整数取整（Math.round 语义）"""
    return int(math.floor(value + 0.5))


def round_fixed(value: float, digits: int = 3) -> float:
    """保留 digits 位小数"""
    if not math.isfinite(value):
        return value
    quant = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quant, rounding=ROUND_HALF_UP))


def format_number(value: float, digits: int = 3) -> str:
    """紧凑数值文本：最多 digits 位小数，去掉尾随0；整数不带小数点；-0 输出为 0"""
    rounded = round_fixed(value, digits)
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)
