"""
模块接口契约 - 定义外部依赖的抽象接口与异常

设计原则：
1. 形状注册表只依赖资源表协议，不直接依赖具体加载实现
2. 便于单元测试和mock替换

使用方式：
    from canvas_core.interfaces import IAssetTable

    class MemoryAssetTable:
        def get(self, key: str) -> ShapeAsset | None:
            ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import ShapeAsset


# ============================================================================
# 外部协作方接口
# ============================================================================

class IAssetTable(Protocol):
    """静态形状路径数据表（只读）"""

    def get(self, key: str) -> ShapeAsset | None:
        """按资源键查找路径数据，不存在返回None"""
        ...

    def keys(self) -> list[str]:
        """全部资源键"""
        ...


# ============================================================================
# 异常定义
# ============================================================================

class CanvasCoreError(Exception):
    """基础异常"""
    pass


class InvalidGeometryError(CanvasCoreError, ValueError):
    """几何生成参数不满足结构性前置条件"""
    pass


class AssetTableError(CanvasCoreError):
    """资源表格式错误"""
    pass
