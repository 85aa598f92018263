"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(resolver, sample_frame):
        assert resolver.get_export_dimensions("16:9").w == 1920
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from canvas_core.config import AssetLoader, RuntimeConfig
from canvas_core.geometry import RatioResolver
from canvas_core.models import Frame, Slot, SlotShape, SlotType


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置（默认值）"""
    return RuntimeConfig()


@pytest.fixture
def resolver() -> RatioResolver:
    """内置常量的比例解析器"""
    return RatioResolver()


@pytest.fixture(autouse=True)
def _clear_asset_cache() -> Generator[None, None, None]:
    """每个用例前后清除资源表缓存"""
    AssetLoader.load.cache_clear()
    yield
    AssetLoader.load.cache_clear()


@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """用例结束后恢复根日志器的级别与处理器"""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


# ============================================================================
# 数据模型 Fixtures
# ============================================================================

@pytest.fixture
def sample_frame() -> Frame:
    """示例Frame（导出空间）"""
    return Frame(x=100, y=50, width=300, height=200, rotation=15)


def make_shape_slot(shape_id: str, **options: object) -> Slot:
    """构造形状槽位"""
    return Slot(
        name=f"{shape_id}-slot",
        type=SlotType.SHAPE,
        shape=SlotShape(id=shape_id, options=dict(options)),
    )


@pytest.fixture
def shape_slot():
    """形状槽位工厂"""
    return make_shape_slot


@pytest.fixture
def star_slot() -> Slot:
    """五角星槽位"""
    return make_shape_slot("star", points=5, innerRatio=0.5)


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_asset_table(temp_dir: Path) -> Path:
    """外部资源表YAML"""
    path = temp_dir / "assets.yaml"
    path.write_text(
        """assets:
  heart:
    viewBox: "0 0 24 24"
    d: "M12 21 L3 12 L12 3 L21 12 Z"
""",
        encoding="utf-8",
    )
    return path
