"""
配置层 - 运行期配置、资源表与日志

职责：
- 加载 config/canvas_runtime.yaml（运行期参数）
- 加载形状路径资源表 assets.yaml
- 提供类型安全的配置访问接口
"""

from .asset_loader import AssetLoader, AssetTable, get_shape_asset, load_assets
from .logging_setup import configure_logging
from .runtime_config import RuntimeConfig, get_config, reload_config

__all__ = [
    "AssetLoader",
    "AssetTable",
    "get_shape_asset",
    "load_assets",
    "configure_logging",
    "RuntimeConfig",
    "get_config",
    "reload_config",
]
