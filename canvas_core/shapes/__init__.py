"""
形状模块 - 形状注册表与几何描述生成

- registry: 形状ID -> 定义/几何生成函数
- assets.yaml: 装饰/流程图形状的路径数据（经 config.asset_loader 读取）
"""

from .registry import (
    ASSET_SHAPE_IDS,
    SHAPE_CATEGORIES,
    SHAPE_REGISTRY,
    ShapeCategoryGroup,
    ShapeDefinition,
    get_shape_definition,
    list_shapes,
    resolve_asset_paths,
    resolve_shape_geometry,
)

__all__ = [
    "ASSET_SHAPE_IDS",
    "SHAPE_CATEGORIES",
    "SHAPE_REGISTRY",
    "ShapeCategoryGroup",
    "ShapeDefinition",
    "get_shape_definition",
    "list_shapes",
    "resolve_asset_paths",
    "resolve_shape_geometry",
]
