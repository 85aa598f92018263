"""
比例标识检查：打印导出尺寸、归一化尺寸与双向缩放因子。

示例：
    python tools/inspect_ratio.py 16:9 1:20 728x90 bogus
"""

from __future__ import annotations

import argparse

from canvas_core.config import configure_logging, get_config, reload_config
from canvas_core.geometry import RatioResolver, parse_ratio_id


def main() -> int:
    parser = argparse.ArgumentParser(description="Inspect ratio id resolution.")
    parser.add_argument("ratio_ids", nargs="+", help="比例标识，如 16:9 / 728x90")
    parser.add_argument("--config", default="", help="可选：运行期配置YAML")
    parser.add_argument("--log-level", default="", help="覆盖配置中的日志级别")
    args = parser.parse_args()

    config = reload_config(args.config) if args.config else get_config()
    configure_logging(args.log_level or config.logging.log_level, config.logging.log_file)
    resolver = RatioResolver.from_config(config)

    for ratio_id in args.ratio_ids:
        parsed = parse_ratio_id(ratio_id)
        exported = resolver.get_export_dimensions(ratio_id)
        normalized = resolver.get_normalized_dimensions(ratio_id)
        export_scale = resolver.get_export_scale(ratio_id)
        norm_scale = resolver.get_normalization_scale(ratio_id)
        print(
            f"{ratio_id}: kind={parsed.kind.value} "
            f"export={exported.w}x{exported.h} normalized={normalized.w}x{normalized.h} "
            f"export_scale=({export_scale.scale_x:.6f}, {export_scale.scale_y:.6f}) "
            f"normalization_scale=({norm_scale.scale_x:.6f}, {norm_scale.scale_y:.6f})"
        )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
