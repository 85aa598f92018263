"""
形状注册表单元测试

每个模块完成后必须运行：pytest tests/unit/test_registry.py -v
"""

import logging
import math
from dataclasses import replace
from pathlib import Path

import pytest
from pydantic import TypeAdapter

from canvas_core.config import reload_config
from canvas_core.models import (
    AssetGeometry,
    EllipseGeometry,
    LineGeometry,
    PolygonGeometry,
    RectGeometry,
    ShapeAsset,
    ShapeGeometry,
    Slot,
    SlotType,
)
from canvas_core.shapes import (
    ASSET_SHAPE_IDS,
    SHAPE_CATEGORIES,
    SHAPE_REGISTRY,
    get_shape_definition,
    list_shapes,
    resolve_asset_paths,
    resolve_shape_geometry,
)

EXPECTED_IDS = {
    "rectangle",
    "roundedRectangle",
    "ellipse",
    "triangle",
    "regularPolygon",
    "star",
    "line",
    "arrow",
    "heart",
    "cloud",
    "banner",
    "speechBubble",
    "flowchart/start",
    "flowchart/process",
    "flowchart/decision",
}


def _parse_points(text: str) -> list[tuple[float, float]]:
    return [tuple(float(v) for v in token.split(",")) for token in text.split(" ")]


class TestRegistryTable:
    """注册表结构测试"""

    def test_ids(self):
        assert set(SHAPE_REGISTRY) == EXPECTED_IDS
        for shape_id, definition in SHAPE_REGISTRY.items():
            assert definition.id == shape_id

    def test_categories_cover_registry(self):
        """测试分类分组恰好覆盖全部形状"""
        grouped = [shape_id for group in SHAPE_CATEGORIES for shape_id in group.shapes]
        assert sorted(grouped) == sorted(EXPECTED_IDS)
        for group in SHAPE_CATEGORIES:
            for shape_id in group.shapes:
                assert SHAPE_REGISTRY[shape_id].category == group.id

    def test_read_only(self):
        with pytest.raises(TypeError):
            SHAPE_REGISTRY["hexagon"] = SHAPE_REGISTRY["rectangle"]  # type: ignore[index]

    def test_default_options(self):
        assert dict(SHAPE_REGISTRY["star"].default_options) == {
            "points": 5,
            "innerRatio": 0.5,
            "rotation": -90,
        }
        assert SHAPE_REGISTRY["regularPolygon"].default_options["sides"] == 5
        assert SHAPE_REGISTRY["star"].default_size == (140, 140)
        assert SHAPE_REGISTRY["arrow"].defaults["markerEnd"] is True

    def test_list_shapes(self):
        assert [d.id for d in list_shapes("connectors")] == ["line", "arrow"]
        assert len(list_shapes()) == len(EXPECTED_IDS)
        assert get_shape_definition("nope") is None


class TestPolygonShapes:
    """多边形族形状测试"""

    def test_star_scenario(self, star_slot: Slot):
        """140×140 五角星：10个顶点，到中心距离在70/35之间交替"""
        geometry = resolve_shape_geometry(star_slot, 140, 140)
        assert isinstance(geometry, PolygonGeometry)
        points = _parse_points(geometry.points)
        assert len(points) == 10
        for index, (x, y) in enumerate(points):
            expected = 70 if index % 2 == 0 else 35
            assert math.hypot(x - 70, y - 70) == pytest.approx(expected, abs=1e-2)

    def test_triangle_default(self, shape_slot):
        geometry = SHAPE_REGISTRY["triangle"].build(120, 120, shape_slot("triangle"))
        assert geometry == PolygonGeometry(points="60,0 111.962,90 8.038,90")

    def test_radius_uses_short_edge(self, shape_slot):
        """测试半径取 min(w,h)/2，中心为包围盒中心"""
        geometry = SHAPE_REGISTRY["regularPolygon"].build(200, 100, shape_slot("regularPolygon", sides=4))
        for x, y in _parse_points(geometry.points):
            assert math.hypot(x - 100, y - 50) == pytest.approx(50, abs=1e-2)

    @pytest.mark.parametrize("sides,expected", [(6, 6), (2, 3), (-4, 3), (7.9, 7), ("8", 8), ("abc", 5), (None, 5)])
    def test_polygon_sides(self, shape_slot, sides, expected: int):
        """测试边数钳制与非数值回退"""
        slot = shape_slot("regularPolygon", sides=sides)
        geometry = resolve_shape_geometry(slot, 120, 120)
        assert len(_parse_points(geometry.points)) == expected

    def test_polygon_without_options(self):
        slot = Slot(name="poly", type=SlotType.SHAPE, shape={"id": "regularPolygon"})
        assert len(_parse_points(resolve_shape_geometry(slot, 120, 120).points)) == 5

    def test_star_points_floor(self, shape_slot):
        geometry = resolve_shape_geometry(shape_slot("star", points=1), 140, 140)
        assert len(_parse_points(geometry.points)) == 4

    @pytest.mark.parametrize("ratio,inner", [(2, 66.5), (0, 3.5), (-1, 3.5), (0.4, 28)])
    def test_star_inner_ratio_clamp(self, shape_slot, ratio: float, inner: float):
        """测试内径比钳制到[0.05, 0.95]"""
        geometry = resolve_shape_geometry(shape_slot("star", innerRatio=ratio), 140, 140)
        x, y = _parse_points(geometry.points)[1]
        assert math.hypot(x - 70, y - 70) == pytest.approx(inner, abs=1e-2)

    def test_rotation_option(self, shape_slot):
        geometry = resolve_shape_geometry(shape_slot("triangle", rotation=0), 120, 120)
        assert _parse_points(geometry.points)[0] == (120, 60)


class TestOtherShapes:
    """矩形/线段/资源形状测试"""

    def test_rectangle(self, shape_slot):
        geometry = resolve_shape_geometry(shape_slot("rectangle"), 100, 50)
        assert geometry == RectGeometry()
        assert geometry.rx is None

    def test_rounded_rectangle(self, shape_slot):
        slot = shape_slot("roundedRectangle")
        assert resolve_shape_geometry(slot, 100, 50) == RectGeometry(rx=16, ry=16)

        slot.rx = 8
        assert resolve_shape_geometry(slot, 100, 50) == RectGeometry(rx=8, ry=8)

        slot.ry = 4
        assert resolve_shape_geometry(slot, 100, 50) == RectGeometry(rx=8, ry=4)

    def test_ellipse(self, shape_slot):
        assert resolve_shape_geometry(shape_slot("ellipse"), 10, 20) == EllipseGeometry()

    @pytest.mark.parametrize("shape_id", ["line", "arrow"])
    def test_line(self, shape_slot, shape_id: str):
        geometry = resolve_shape_geometry(shape_slot(shape_id), 160, 4)
        assert geometry == LineGeometry(x1=0, y1=2, x2=160, y2=2)

    @pytest.mark.parametrize("shape_id", ASSET_SHAPE_IDS)
    def test_assets(self, shape_slot, shape_id: str):
        """测试装饰/流程图形状只返回资源键"""
        geometry = resolve_shape_geometry(shape_slot(shape_id), 100, 100)
        assert geometry == AssetGeometry(asset_key=shape_id)


class TestResolveShapeGeometry:
    """槽位几何解析测试"""

    def test_uses_slot_size(self, shape_slot):
        slot = shape_slot("regularPolygon", sides=4, rotation=0)
        slot.width, slot.height = 40, 40
        geometry = resolve_shape_geometry(slot)
        assert _parse_points(geometry.points)[0] == (40, 20)

    def test_falls_back_to_default_size(self, shape_slot):
        geometry = resolve_shape_geometry(shape_slot("line"))
        assert geometry == LineGeometry(x1=0, y1=2, x2=160, y2=2)

    def test_no_shape(self):
        assert resolve_shape_geometry(Slot(name="headline", type=SlotType.TEXT)) is None

    def test_unknown_shape(self, shape_slot, caplog):
        with caplog.at_level(logging.WARNING, logger="canvas_core.shapes.registry"):
            assert resolve_shape_geometry(shape_slot("hexagram"), 10, 10) is None
        assert "hexagram" in caplog.text

    def test_fresh_descriptor(self, star_slot: Slot):
        """测试每次重新计算，不共享对象"""
        first = resolve_shape_geometry(star_slot, 140, 140)
        second = resolve_shape_geometry(star_slot, 140, 140)
        assert first == second
        assert first is not second

        star_slot.shape.options["points"] = 6
        third = resolve_shape_geometry(star_slot, 140, 140)
        assert len(_parse_points(third.points)) == 12

    def test_descriptor_union(self):
        """测试按 type 标签反序列化"""
        adapter = TypeAdapter(ShapeGeometry)
        geometry = adapter.validate_python({"type": "polygon", "points": "0,0 1,1 1,0"})
        assert isinstance(geometry, PolygonGeometry)
        assert isinstance(adapter.validate_python({"type": "asset", "asset_key": "heart"}), AssetGeometry)


class MemoryAssetTable:
    """内存资源表（满足 IAssetTable 协议）"""

    def __init__(self, assets: dict[str, ShapeAsset]):
        self._assets = assets

    def get(self, key: str) -> ShapeAsset | None:
        return self._assets.get(key)

    def keys(self) -> list[str]:
        return list(self._assets)


class TestResolveAssetPaths:
    """资源路径查找测试"""

    def test_bundled_table(self, shape_slot):
        geometry = resolve_shape_geometry(shape_slot("flowchart/decision"), 160, 160)
        asset = resolve_asset_paths(geometry)
        assert asset is not None
        assert asset.view_box_numbers() == (0, 0, 160, 160)

    def test_external_table(self):
        table = MemoryAssetTable({"cloud": ShapeAsset(viewBox="0 0 1 1", d="M0 0 L1 1")})
        asset = resolve_asset_paths(AssetGeometry(asset_key="cloud"), table)
        assert asset.d == "M0 0 L1 1"
        assert resolve_asset_paths(AssetGeometry(asset_key="heart"), table) is None

    def test_configured_table_path(self, temp_dir: Path, sample_asset_table: Path):
        """测试运行期配置 assets.table_path 指定的资源表生效"""
        runtime_yaml = temp_dir / "runtime.yaml"
        runtime_yaml.write_text(
            f"runtime_options:\n  assets:\n    table_path: {sample_asset_table.name}\n",
            encoding="utf-8",
        )
        try:
            reload_config(runtime_yaml)
            asset = resolve_asset_paths(AssetGeometry(asset_key="heart"))
            assert asset is not None
            assert asset.view_box == "0 0 24 24"
            assert resolve_asset_paths(AssetGeometry(asset_key="cloud")) is None
        finally:
            reload_config(temp_dir / "missing.yaml")


class TestDefaultOptionsSource:
    """默认选项来源测试"""

    def test_generator_reads_definition_defaults(self):
        """测试缺省选项取自注册项的 default_options"""
        slot = Slot(name="poly", type=SlotType.SHAPE, shape={"id": "regularPolygon"})
        hexagon = replace(SHAPE_REGISTRY["regularPolygon"], default_options={"sides": 6, "rotation": -90})
        assert len(_parse_points(hexagon.build(120, 120, slot).points)) == 6

    def test_star_defaults(self, shape_slot):
        sparse = replace(SHAPE_REGISTRY["star"], default_options={"points": 3, "innerRatio": 0.2, "rotation": 0})
        points = _parse_points(sparse.build(140, 140, shape_slot("star", innerRatio="bad")).points)
        assert len(points) == 6
        assert points[0] == (140, 70)
        assert math.hypot(points[1][0] - 70, points[1][1] - 70) == pytest.approx(14, abs=1e-2)

    def test_rounded_rect_defaults(self, shape_slot):
        card = replace(SHAPE_REGISTRY["roundedRectangle"], defaults={"rx": 4, "ry": 6})
        assert card.build(100, 50, shape_slot("roundedRectangle")) == RectGeometry(rx=4, ry=6)
