"""
形状几何导出：按给定尺寸与选项打印形状几何描述（JSON）。

示例：
    python tools/dump_shape_geometry.py star --size 140x140 --option points=6 --option innerRatio=0.4
    python tools/dump_shape_geometry.py heart --with-asset
"""

from __future__ import annotations

import argparse
import json

from canvas_core.models import AssetGeometry, Slot, SlotShape, SlotType
from canvas_core.shapes import SHAPE_REGISTRY, resolve_asset_paths, resolve_shape_geometry


def _parse_size(text: str) -> tuple[float, float]:
    w, _, h = text.partition("x")
    return float(w), float(h)


def _parse_options(pairs: list[str]) -> dict[str, str]:
    options: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise SystemExit(f"选项格式应为 key=value: {pair}")
        options[key] = value
    return options


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump shape geometry descriptor.")
    parser.add_argument("shape_id", choices=sorted(SHAPE_REGISTRY))
    parser.add_argument("--size", default="", help="WxH，默认使用形状默认尺寸")
    parser.add_argument("--option", action="append", default=[], help="形状选项 key=value")
    parser.add_argument("--with-asset", action="store_true", help="资源形状同时输出路径数据")
    args = parser.parse_args()

    slot = Slot(
        name=args.shape_id,
        type=SlotType.SHAPE,
        shape=SlotShape(id=args.shape_id, options=_parse_options(args.option)),
    )
    width, height = _parse_size(args.size) if args.size else (None, None)
    geometry = resolve_shape_geometry(slot, width, height)
    if geometry is None:
        print("未生成几何")
        return 1

    payload = geometry.model_dump(exclude_none=True)
    if args.with_asset and isinstance(geometry, AssetGeometry):
        asset = resolve_asset_paths(geometry)
        if asset is not None:
            payload["asset"] = asset.model_dump(by_alias=True)

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
