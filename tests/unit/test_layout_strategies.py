"""Unit tests for the tiling strategies and their factory.

These tests verify:
- Every roof shape maps to a strategy
- Grid counts for the rectangular strategy
- Tapered rows for triangles, with grid fallback for other outlines
- Full-rectangle containment for the complex scan
"""

import pytest

from rooflayout.application.strategies import (
    STRATEGY_BY_SHAPE,
    ComplexTiling,
    RectangularTiling,
    TilingStrategy,
    TilingStrategyFactory,
    TriangularTiling,
    cell_count,
    fit_count,
)
from rooflayout.domain.entities import Panel, RoofRegion
from rooflayout.domain.services import point_in_polygon
from rooflayout.domain.value_objects import PanelSpec, RoofShape, SpacingSpec


def _overlap(a: Panel, b: Panel) -> bool:
    return a.bounds.west < b.bounds.east and b.bounds.west < a.bounds.east and (
        a.bounds.south < b.bounds.north and b.bounds.south < a.bounds.north
    )


def _assert_no_overlaps(panels: list[Panel]) -> None:
    for i, a in enumerate(panels):
        for b in panels[i + 1 :]:
            assert not _overlap(a, b), f"{a.id} overlaps {b.id}"


class TestCounting:
    """Tests for fit_count and cell_count."""

    def test_fit_count(self) -> None:
        assert fit_count(40.0, 5.9) == 6
        assert fit_count(30.0, 3.75) == 8

    def test_fit_count_absorbs_float_noise(self) -> None:
        assert fit_count(30.0 - 1e-9, 3.75) == 8

    def test_fit_count_zero_span(self) -> None:
        assert fit_count(0.0, 1.0) == 0
        assert fit_count(-3.0, 1.0) == 0

    def test_fit_count_rejects_non_positive_step(self) -> None:
        with pytest.raises(ValueError):
            fit_count(10.0, 0.0)

    def test_cell_count_rounds_up(self) -> None:
        assert cell_count(40.0, 1.625) == 25
        assert cell_count(3.25, 1.625) == 2


class TestTilingStrategyFactory:
    """Tests for TilingStrategyFactory."""

    def test_every_shape_is_mapped(self) -> None:
        assert set(STRATEGY_BY_SHAPE) == set(RoofShape)

    @pytest.mark.parametrize(
        "shape,expected",
        [
            (RoofShape.RECTANGULAR, RectangularTiling),
            (RoofShape.QUADRILATERAL, RectangularTiling),
            (RoofShape.TRIANGULAR, TriangularTiling),
            (RoofShape.COMPLEX, ComplexTiling),
            (RoofShape.UNKNOWN, RectangularTiling),
        ],
    )
    def test_create_strategy(self, shape: RoofShape, expected: type) -> None:
        strategy = TilingStrategyFactory().create_strategy(shape)
        assert isinstance(strategy, expected)
        assert isinstance(strategy, TilingStrategy)

    def test_accepts_shape_value(self) -> None:
        strategy = TilingStrategyFactory().create_strategy("triangular")  # type: ignore[arg-type]
        assert isinstance(strategy, TriangularTiling)

    def test_unknown_value_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown roof shape"):
            TilingStrategyFactory().create_strategy("hexagonal")  # type: ignore[arg-type]


class TestRectangularTiling:
    """Tests for RectangularTiling."""

    def test_grid_on_40_by_30_roof(
        self, rect_region: RoofRegion, panel_spec: PanelSpec, spacing: SpacingSpec
    ) -> None:
        panels = RectangularTiling().generate(rect_region, panel_spec, spacing)
        assert len(panels) == 48
        assert {p.row_index for p in panels} == set(range(8))
        assert {p.col_index for p in panels} == set(range(6))

    def test_grid_starts_at_north_west_corner(
        self, rect_region: RoofRegion, panel_spec: PanelSpec, spacing: SpacingSpec
    ) -> None:
        first = RectangularTiling().generate(rect_region, panel_spec, spacing)[0]
        assert first.id == "panel_0_0"
        assert first.center.x == pytest.approx(2.7)
        assert first.center.y == pytest.approx(28.375)

    def test_ids_unique_and_no_overlaps(
        self, rect_region: RoofRegion, panel_spec: PanelSpec, spacing: SpacingSpec
    ) -> None:
        panels = RectangularTiling().generate(rect_region, panel_spec, spacing)
        assert len({p.id for p in panels}) == len(panels)
        _assert_no_overlaps(panels)

    def test_panels_inherit_roof_orientation(
        self, rect_region: RoofRegion, panel_spec: PanelSpec, spacing: SpacingSpec
    ) -> None:
        for panel in RectangularTiling().generate(rect_region, panel_spec, spacing):
            assert panel.azimuth_deg == rect_region.azimuth_deg
            assert panel.tilt_deg == rect_region.pitch_deg
            assert 0.1 <= panel.effective_efficiency <= 1.0

    def test_panel_larger_than_roof(self, rect_region: RoofRegion, spacing: SpacingSpec) -> None:
        spec = PanelSpec(width=50.0, height=3.0)
        assert RectangularTiling().generate(rect_region, spec, spacing) == []

    def test_centers_inside_quadrilateral(self, analyzer, panel_spec, spacing) -> None:
        region = analyzer.analyze_points([(0, 0), (40, 0), (60, 30), (20, 30)])
        assert region.shape is RoofShape.QUADRILATERAL
        panels = RectangularTiling().generate(region, panel_spec, spacing)
        assert panels
        assert all(point_in_polygon(p.center, region.boundary) for p in panels)


class TestTriangularTiling:
    """Tests for TriangularTiling."""

    def test_rows_shrink_toward_apex(
        self, triangle_region: RoofRegion, panel_spec: PanelSpec, spacing: SpacingSpec
    ) -> None:
        panels = TriangularTiling().generate(triangle_region, panel_spec, spacing)
        assert panels
        per_row: dict[int, int] = {}
        for panel in panels:
            per_row[panel.row_index] = per_row.get(panel.row_index, 0) + 1
        counts = [per_row[r] for r in sorted(per_row)]
        assert counts == sorted(counts, reverse=True)
        assert counts[0] <= 6

    def test_first_row_sits_on_base(
        self, triangle_region: RoofRegion, panel_spec: PanelSpec, spacing: SpacingSpec
    ) -> None:
        panels = TriangularTiling().generate(triangle_region, panel_spec, spacing)
        assert min(p.center.y for p in panels) == pytest.approx(panel_spec.height / 2)

    def test_centers_inside_and_no_overlaps(
        self, triangle_region: RoofRegion, panel_spec: PanelSpec, spacing: SpacingSpec
    ) -> None:
        panels = TriangularTiling().generate(triangle_region, panel_spec, spacing)
        assert all(point_in_polygon(p.center, triangle_region.boundary) for p in panels)
        assert len({p.id for p in panels}) == len(panels)
        _assert_no_overlaps(panels)

    def test_vertical_base_fills_from_base(self, analyzer, panel_spec, spacing) -> None:
        flat = analyzer.analyze_points([(0, 0), (40, 0), (20, 15)])
        upright = analyzer.analyze_points([(0, 0), (0, 40), (15, 20)])
        flat_panels = TriangularTiling().generate(flat, panel_spec, spacing)
        panels = TriangularTiling().generate(upright, panel_spec, spacing)
        assert len(flat_panels) == 12
        assert len(panels) == 12
        # Rows run north-south, stacked eastward from the base at x = 0
        assert sorted({round(p.center.x, 6) for p in panels}) == [2.7, 8.6]
        assert {p.row_index for p in panels if p.center.x < 3} == {0}
        assert min(p.center.y for p in panels) < 10 < max(p.center.y for p in panels)
        assert all(point_in_polygon(p.center, upright.boundary) for p in panels)
        _assert_no_overlaps(panels)

    def test_slanted_base_rows_taper(self, analyzer, panel_spec, spacing) -> None:
        region = analyzer.analyze_points([(0, 0), (30, 30), (0, 30)])
        panels = TriangularTiling().generate(region, panel_spec, spacing)
        per_row: dict[int, int] = {}
        for panel in panels:
            per_row[panel.row_index] = per_row.get(panel.row_index, 0) + 1
        assert [per_row[r] for r in sorted(per_row)] == [5, 3, 1]
        assert all(point_in_polygon(p.center, region.boundary) for p in panels)
        _assert_no_overlaps(panels)

    def test_slanted_rows_move_away_from_base(self, analyzer, panel_spec, spacing) -> None:
        region = analyzer.analyze_points([(0, 0), (30, 30), (0, 30)])
        panels = TriangularTiling().generate(region, panel_spec, spacing)
        # Distance to the base line y = x grows with the row index
        distance = {p.row_index: (p.center.y - p.center.x) / 2**0.5 for p in panels}
        rows = sorted(distance)
        assert all(distance[a] < distance[b] for a, b in zip(rows, rows[1:]))
        assert distance[0] == pytest.approx((5.4 + 3.25) / 2**0.5 / 2)

    def test_non_triangle_falls_back_to_grid(
        self, rect_region: RoofRegion, panel_spec: PanelSpec, spacing: SpacingSpec
    ) -> None:
        tri = TriangularTiling().generate(rect_region, panel_spec, spacing)
        grid = RectangularTiling().generate(rect_region, panel_spec, spacing)
        assert tri == grid


class TestComplexTiling:
    """Tests for ComplexTiling."""

    def test_every_corner_inside_l_shape(
        self, l_shape_region: RoofRegion, panel_spec: PanelSpec, spacing: SpacingSpec
    ) -> None:
        panels = ComplexTiling().generate(l_shape_region, panel_spec, spacing)
        assert panels
        for panel in panels:
            assert point_in_polygon(panel.center, l_shape_region.boundary)
            for corner in panel.corners:
                assert point_in_polygon(corner, l_shape_region.boundary)

    def test_no_panel_in_the_notch(
        self, l_shape_region: RoofRegion, panel_spec: PanelSpec, spacing: SpacingSpec
    ) -> None:
        for panel in ComplexTiling().generate(l_shape_region, panel_spec, spacing):
            b = panel.bounds
            assert not (b.east > 20 and b.north > 15)

    def test_ignores_spacing(
        self, l_shape_region: RoofRegion, panel_spec: PanelSpec
    ) -> None:
        tight = ComplexTiling().generate(l_shape_region, panel_spec, SpacingSpec(0, 0))
        loose = ComplexTiling().generate(l_shape_region, panel_spec, SpacingSpec(2, 2))
        assert tight == loose

    def test_ids_unique_and_no_overlaps(
        self, l_shape_region: RoofRegion, panel_spec: PanelSpec, spacing: SpacingSpec
    ) -> None:
        panels = ComplexTiling().generate(l_shape_region, panel_spec, spacing)
        assert len({p.id for p in panels}) == len(panels)
        _assert_no_overlaps(panels)
