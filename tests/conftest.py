"""Pytest configuration and shared fixtures for roof layout tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from rooflayout.application.services import LayoutPlanner
from rooflayout.domain import (
    GeoPoint,
    Obstacle,
    ObstacleKind,
    PanelSpec,
    Point,
    RoofRegion,
    SpacingSpec,
)
from rooflayout.domain.services import LocalFrame, RoofAnalyzer


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests through projection, planning and export"
    )


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def analyzer() -> RoofAnalyzer:
    return RoofAnalyzer()


@pytest.fixture
def planner() -> LayoutPlanner:
    return LayoutPlanner()


@pytest.fixture
def panel_spec() -> PanelSpec:
    """Default 5.4 x 3.25 ft, 400 W, 20% panel."""
    return PanelSpec()


@pytest.fixture
def spacing() -> SpacingSpec:
    """Default 0.5 ft gaps."""
    return SpacingSpec()


@pytest.fixture
def rect_region(analyzer: RoofAnalyzer) -> RoofRegion:
    """South-facing 40 x 30 ft rectangle at 30 degrees pitch."""
    return analyzer.analyze_points(
        [(0, 0), (40, 0), (40, 30), (0, 30)],
        azimuth_deg=180.0,
        pitch_deg=30.0,
    )


@pytest.fixture
def triangle_region(analyzer: RoofAnalyzer) -> RoofRegion:
    """Isosceles triangle with a 40 ft base along the south edge."""
    return analyzer.analyze_points(
        [(0, 0), (40, 0), (20, 30)],
        azimuth_deg=180.0,
        pitch_deg=30.0,
    )


@pytest.fixture
def l_shape_region(analyzer: RoofAnalyzer) -> RoofRegion:
    """L-shaped roof: 40 x 30 with the north-east 20 x 15 quarter cut away."""
    return analyzer.analyze_points(
        [(0, 0), (40, 0), (40, 15), (20, 15), (20, 30), (0, 30)],
        azimuth_deg=180.0,
        pitch_deg=30.0,
    )


@pytest.fixture
def chimney() -> Obstacle:
    """2 x 2 ft chimney with a 3 ft buffer at the center of the 40 x 30 roof."""
    return Obstacle.of_kind(ObstacleKind.CHIMNEY, Point(20, 15), width=2.0, height=2.0)


@pytest.fixture
def geo_origin() -> GeoPoint:
    return GeoPoint(lat=37.7749, lng=-122.4194)


@pytest.fixture
def geo_rectangle(geo_origin: GeoPoint) -> list[GeoPoint]:
    """Latitude/longitude corners of a 40 x 30 ft rectangle centered on geo_origin."""
    frame = LocalFrame(geo_origin)
    return [
        frame.to_geographic(Point(x, y))
        for x, y in [(-20, -15), (20, -15), (20, 15), (-20, 15)]
    ]


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def config_data() -> dict[str, Any]:
    """Minimal valid planar configuration for the 40 x 30 roof."""
    return {
        "schema_version": "1.0",
        "roof": {
            "points": [
                {"x": 0, "y": 0},
                {"x": 40, "y": 0},
                {"x": 40, "y": 30},
                {"x": 0, "y": 30},
            ],
            "azimuth": 180,
            "pitch": 30,
        },
    }


@pytest.fixture
def config_file(tmp_path: Path, config_data: dict[str, Any]) -> Path:
    path = tmp_path / "roof.json"
    path.write_text(json.dumps(config_data), encoding="utf-8")
    return path
