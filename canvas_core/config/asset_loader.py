"""
资源表加载器 - 读取形状路径数据表（assets.yaml）

职责：
- 解析YAML并提供类型安全访问
- 缓存加载结果（避免重复解析）
- 资源键与形状注册表中的ID一致（heart / cloud / flowchart/start ...）

使用方式：
    table = AssetLoader.load()
    heart = table.get("heart")
    x, y, w, h = heart.view_box_numbers()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..interfaces import AssetTableError
from ..models import ShapeAsset
from .runtime_config import get_config

logger = logging.getLogger(__name__)

BUNDLED_TABLE = "assets.yaml"


class AssetTable(BaseModel):
    """形状路径数据表（只读）"""
    assets: dict[str, ShapeAsset] = Field(default_factory=dict)

    def get(self, key: str) -> ShapeAsset | None:
        """按资源键查找，不存在时记录告警并返回None"""
        asset = self.assets.get(key)
        if asset is None:
            logger.warning(f"资源表中缺少资源: {key}")
        return asset

    def keys(self) -> list[str]:
        return list(self.assets)

    def __contains__(self, key: object) -> bool:
        return key in self.assets


def _parse(raw: object, source: str) -> AssetTable:
    if not isinstance(raw, dict) or not isinstance(raw.get("assets"), dict):
        raise AssetTableError(f"资源表缺少 assets 映射: {source}")
    try:
        return AssetTable(**raw)
    except ValidationError as e:
        raise AssetTableError(f"资源表格式错误: {source}: {e}") from e


class AssetLoader:
    """资源表加载器（缓存）"""

    @classmethod
    @lru_cache(maxsize=4)
    def load(cls, table_path: str | Path | None = None) -> AssetTable:
        """加载并缓存资源表；table_path 为空时使用包内资源表"""
        if table_path is None:
            text = resources.files("canvas_core.shapes").joinpath(BUNDLED_TABLE).read_text(encoding="utf-8")
            return _parse(yaml.safe_load(text), BUNDLED_TABLE)

        path = Path(table_path)
        if not path.exists():
            raise FileNotFoundError(f"资源表文件不存在: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        table = _parse(data, str(path))
        logger.debug(f"已加载资源表 {path}: {len(table.assets)} 项")
        return table

    @classmethod
    def reload(cls, table_path: str | Path | None = None) -> AssetTable:
        """强制重新加载（清除缓存）"""
        cls.load.cache_clear()
        return cls.load(table_path)


# 便捷函数
def load_assets(table_path: str | Path | None = None) -> AssetTable:
    """加载形状路径资源表；未指定路径时取运行期配置 assets.table_path，仍为空则用包内资源表"""
    if table_path is None:
        table_path = get_config().assets.table_path
    return AssetLoader.load(table_path)


def get_shape_asset(key: str, table_path: str | Path | None = None) -> ShapeAsset | None:
    """查找单个形状资源"""
    return load_assets(table_path).get(key)
