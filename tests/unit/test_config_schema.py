"""Unit tests for the layout configuration schema.

These tests verify:
- Defaults for panel, spacing, production and output sections
- Exactly one outline form per roof
- Obstacle positions and geographic/planar consistency
- Schema version acceptance
"""

from typing import Any

import pytest
from pydantic import ValidationError

from rooflayout.application.config import (
    SUPPORTED_VERSIONS,
    LayoutConfiguration,
    ObstacleConfig,
    PanelConfig,
    ProductionConfig,
    RoofConfig,
)
from rooflayout.domain.value_objects import ObstacleKind

SQUARE = [{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 10, "y": 10}, {"x": 0, "y": 10}]


class TestRoofConfig:
    """Tests for RoofConfig."""

    def test_points_outline(self) -> None:
        roof = RoofConfig.model_validate({"points": SQUARE})
        assert not roof.is_geographic
        assert roof.pitch == 30.0
        assert roof.azimuth is None

    def test_coordinates_outline(self) -> None:
        roof = RoofConfig.model_validate(
            {"coordinates": [{"lat": 37.0, "lng": -122.0}, {"lat": 37.1, "lng": -122.0}]}
        )
        assert roof.is_geographic

    def test_requires_an_outline(self) -> None:
        with pytest.raises(ValidationError, match="exactly one"):
            RoofConfig.model_validate({})

    def test_rejects_both_outlines(self) -> None:
        with pytest.raises(ValidationError, match="exactly one"):
            RoofConfig.model_validate(
                {"points": SQUARE, "coordinates": [{"lat": 0, "lng": 0}]}
            )

    @pytest.mark.parametrize(
        "field,value",
        [("azimuth", 360), ("azimuth", -1), ("pitch", 91), ("area_sqft", -5)],
    )
    def test_range_checks(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            RoofConfig.model_validate({"points": SQUARE, field: value})

    def test_rejects_nan(self) -> None:
        with pytest.raises(ValidationError):
            RoofConfig.model_validate({"points": [{"x": float("nan"), "y": 0}]})

    def test_latitude_range(self) -> None:
        with pytest.raises(ValidationError):
            RoofConfig.model_validate({"coordinates": [{"lat": 91, "lng": 0}]})

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RoofConfig.model_validate({"points": SQUARE, "slope": 20})


class TestObstacleConfig:
    """Tests for ObstacleConfig."""

    def test_defaults(self) -> None:
        obstacle = ObstacleConfig.model_validate({"x": 1, "y": 2})
        assert obstacle.kind is ObstacleKind.OTHER
        assert obstacle.width is None
        assert not obstacle.is_geographic

    def test_kind_from_string(self) -> None:
        obstacle = ObstacleConfig.model_validate({"kind": "hvac", "x": 1, "y": 2})
        assert obstacle.kind is ObstacleKind.HVAC

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValidationError):
            ObstacleConfig.model_validate({"kind": "antenna", "x": 1, "y": 2})

    def test_needs_one_position(self) -> None:
        with pytest.raises(ValidationError):
            ObstacleConfig.model_validate({"kind": "vent"})
        with pytest.raises(ValidationError):
            ObstacleConfig.model_validate({"x": 1, "y": 2, "lat": 1, "lng": 2})

    def test_positive_dimensions(self) -> None:
        with pytest.raises(ValidationError):
            ObstacleConfig.model_validate({"x": 1, "y": 2, "width": 0})
        with pytest.raises(ValidationError):
            ObstacleConfig.model_validate({"x": 1, "y": 2, "buffer": -1})


class TestSectionDefaults:
    def test_panel_defaults(self) -> None:
        panel = PanelConfig()
        assert (panel.width, panel.height, panel.power, panel.efficiency) == (
            5.4,
            3.25,
            400.0,
            0.20,
        )

    def test_panel_efficiency_bound(self) -> None:
        with pytest.raises(ValidationError):
            PanelConfig(efficiency=1.5)

    def test_production_seasonal_factors(self) -> None:
        assert ProductionConfig().seasonal_factors is None
        with pytest.raises(ValidationError, match="non-negative"):
            ProductionConfig(seasonal_factors={"winter": -0.1})


class TestLayoutConfiguration:
    """Tests for the root configuration model."""

    def test_minimal(self, config_data: dict[str, Any]) -> None:
        config = LayoutConfiguration.model_validate(config_data)
        assert config.obstacles == []
        assert config.panel == PanelConfig()
        assert config.output.format == "summary"

    @pytest.mark.parametrize("version", sorted(SUPPORTED_VERSIONS) + ["1.7"])
    def test_supported_versions(self, config_data: dict[str, Any], version: str) -> None:
        config_data["schema_version"] = version
        assert LayoutConfiguration.model_validate(config_data).schema_version == version

    def test_unsupported_major_version(self, config_data: dict[str, Any]) -> None:
        config_data["schema_version"] = "2.0"
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            LayoutConfiguration.model_validate(config_data)

    def test_malformed_version(self, config_data: dict[str, Any]) -> None:
        config_data["schema_version"] = "one"
        with pytest.raises(ValidationError):
            LayoutConfiguration.model_validate(config_data)

    def test_geographic_obstacle_on_planar_roof(self, config_data: dict[str, Any]) -> None:
        config_data["obstacles"] = [{"kind": "vent", "lat": 37.0, "lng": -122.0}]
        with pytest.raises(ValidationError, match="obstacles\\[0\\]"):
            LayoutConfiguration.model_validate(config_data)

    def test_unknown_output_format(self, config_data: dict[str, Any]) -> None:
        config_data["output"] = {"format": "svg"}
        with pytest.raises(ValidationError):
            LayoutConfiguration.model_validate(config_data)
