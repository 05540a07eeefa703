"""Conversion from validated configuration models to domain objects."""

from __future__ import annotations

from rooflayout.application.config.schema import (
    LayoutConfiguration,
    ObstacleConfig,
)
from rooflayout.domain import (
    GeoPoint,
    Obstacle,
    PanelSpec,
    Point,
    RoofRegion,
    SpacingSpec,
)
from rooflayout.domain.services import (
    LocalFrame,
    ProductionAssumptions,
    RoofAnalyzer,
)

__all__ = [
    "config_to_assumptions",
    "config_to_obstacle",
    "config_to_panel_spec",
    "config_to_region",
    "config_to_spacing",
]


def config_to_obstacle(obstacle: ObstacleConfig, frame: LocalFrame | None) -> Obstacle:
    """Convert an ObstacleConfig, projecting lat/lng through ``frame``.

    Raises:
        ValueError: If the obstacle is geographic and there is no frame.
    """
    if obstacle.is_geographic:
        if frame is None:
            raise ValueError("Geographic obstacle requires a geographic roof outline")
        center = frame.to_local(GeoPoint(obstacle.lat, obstacle.lng))  # type: ignore[arg-type]
    else:
        center = Point(obstacle.x, obstacle.y)  # type: ignore[arg-type]
    return Obstacle.of_kind(
        obstacle.kind,
        center,
        width=obstacle.width,
        height=obstacle.height,
        buffer_margin=obstacle.buffer,
        name=obstacle.name,
    )


def config_to_region(
    config: LayoutConfiguration,
    analyzer: RoofAnalyzer | None = None,
) -> tuple[RoofRegion, LocalFrame | None]:
    """Build the classified roof region, obstacles included.

    Returns:
        The region and the local frame (None for a planar outline).

    Raises:
        ValueError: If the outline cannot be projected.
    """
    analyzer = analyzer or RoofAnalyzer()
    roof = config.roof
    options = {
        "area_sqft": roof.area_sqft,
        "azimuth_deg": roof.azimuth,
        "pitch_deg": roof.pitch,
    }
    frame: LocalFrame | None = None
    if roof.coordinates is not None:
        coords = [GeoPoint(c.lat, c.lng) for c in roof.coordinates]
        region, frame = analyzer.analyze_geographic(coords, **options)
    else:
        region = analyzer.analyze_points(
            [(p.x, p.y) for p in roof.points or []], **options
        )
    obstacles = [config_to_obstacle(o, frame) for o in config.obstacles]
    return region.with_obstacles(obstacles), frame


def config_to_panel_spec(config: LayoutConfiguration) -> PanelSpec:
    panel = config.panel
    return PanelSpec(
        width=panel.width,
        height=panel.height,
        rated_power_watts=panel.power,
        rated_efficiency=panel.efficiency,
    )


def config_to_spacing(config: LayoutConfiguration) -> SpacingSpec:
    return SpacingSpec(
        horizontal_gap=config.spacing.horizontal,
        vertical_gap=config.spacing.vertical,
    )


def config_to_assumptions(config: LayoutConfiguration) -> ProductionAssumptions:
    """Build production assumptions; unset seasonal factors keep the defaults."""
    production = config.production
    values = production.model_dump(exclude={"seasonal_factors"})
    if production.seasonal_factors is not None:
        values["seasonal_factors"] = dict(production.seasonal_factors)
    return ProductionAssumptions(**values)
