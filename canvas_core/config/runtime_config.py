"""
运行期配置 - 读取 config/canvas_runtime.yaml

职责：
- 加载归一化空间/导出尺寸/资源表/日志等参数
- 提供环境变量覆盖机制（CANVAS_ 前缀）
- 类型安全的配置访问
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

DEFAULT_RUNTIME_PATH = Path("config/canvas_runtime.yaml")


class NormalizationConfig(BaseModel):
    """归一化编辑空间配置"""

    long_edge: int = Field(2000, gt=0)
    min_short_edge: int = Field(320, gt=0)
    min_aspect: float = Field(0.0001, gt=0)


class ExportConfig(BaseModel):
    """宽高比标识对应的标准导出尺寸"""

    square_size: int = Field(1080, gt=0)
    landscape_width: int = Field(1920, gt=0)
    portrait_width: int = Field(1080, gt=0)


class AssetsConfig(BaseModel):
    """形状路径资源表配置"""

    table_path: Path | None = None  # None 使用包内自带资源表


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_file: Path | None = None


class RuntimeConfig(BaseSettings):
    """运行期配置（环境变量 > YAML文件 > 内置默认值）"""

    normalization: NormalizationConfig = Field(default_factory=NormalizationConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    assets: AssetsConfig = Field(default_factory=AssetsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "CANVAS_",
        "env_nested_delimiter": "__",
        "arbitrary_types_allowed": True,
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # 环境变量优先于 from_yaml 传入的文件值，按嵌套键逐项合并
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置（CANVAS_<SECTION>__<KEY> 环境变量仍可覆盖单项）"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        # 以字典传入，便于与环境变量按键合并
        config = cls(
            normalization=cls._extract(runtime_opts, "normalization"),
            export=cls._extract(runtime_opts, "export"),
            assets=cls._extract(runtime_opts, "assets"),
            logging=cls._extract(runtime_opts, "logging"),
        )

        config._resolve_paths(base_dir=path.parent)
        return config

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def _resolve_paths(self, base_dir: Path) -> None:
        """解析相对路径配置为绝对路径（基于配置文件所在目录）"""
        if self.assets.table_path and not self.assets.table_path.is_absolute():
            self.assets.table_path = (base_dir / self.assets.table_path).resolve()
        if self.logging.log_file and not self.logging.log_file.is_absolute():
            self.logging.log_file = (base_dir / self.logging.log_file).resolve()


# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_RUNTIME_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or DEFAULT_RUNTIME_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config
