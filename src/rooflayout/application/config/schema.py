"""Pydantic models for JSON layout configuration files.

A configuration file describes one roof: its outline (geographic or planar),
its obstacles, the panel template, spacing and the production assumptions
used for the estimate. Every model forbids unknown keys so that typos are
reported instead of silently ignored.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from rooflayout.domain.value_objects import ObstacleKind

# Version 1.0: Initial schema (roof, obstacles, panel, spacing, output)
# Version 1.1: Added production assumptions
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class GeoPointConfig(BaseModel):
    """A latitude/longitude vertex in degrees."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class PointConfig(BaseModel):
    """A planar vertex in feet (x east, y north)."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    x: float
    y: float


class RoofConfig(BaseModel):
    """Roof outline and orientation.

    Attributes:
        coordinates: Outline as latitude/longitude vertices.
        points: Outline as planar vertices in feet.
        area_sqft: Optional area override; computed from the outline if omitted.
        azimuth: Optional facing in degrees; estimated from the outline if omitted.
        pitch: Roof slope in degrees from horizontal.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    coordinates: list[GeoPointConfig] | None = None
    points: list[PointConfig] | None = None
    area_sqft: float | None = Field(default=None, ge=0)
    azimuth: float | None = Field(default=None, ge=0, lt=360)
    pitch: float = Field(default=30.0, ge=0, le=90)

    @model_validator(mode="after")
    def validate_outline(self) -> "RoofConfig":
        """Require exactly one of coordinates or points."""
        if (self.coordinates is None) == (self.points is None):
            raise ValueError("Provide exactly one of 'coordinates' or 'points'")
        return self

    @property
    def is_geographic(self) -> bool:
        return self.coordinates is not None


class ObstacleConfig(BaseModel):
    """Configuration for a rooftop obstacle.

    Position is either ``x``/``y`` in feet or ``lat``/``lng``. Omitted sizes
    and buffer use the defaults for the obstacle kind.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    kind: ObstacleKind = ObstacleKind.OTHER
    x: float | None = None
    y: float | None = None
    lat: float | None = Field(default=None, ge=-90, le=90)
    lng: float | None = Field(default=None, ge=-180, le=180)
    width: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    buffer: float | None = Field(default=None, ge=0)
    name: str | None = None

    @model_validator(mode="after")
    def validate_position(self) -> "ObstacleConfig":
        planar = self.x is not None and self.y is not None
        geographic = self.lat is not None and self.lng is not None
        if planar == geographic:
            raise ValueError("Obstacle needs either 'x'/'y' or 'lat'/'lng'")
        return self

    @property
    def is_geographic(self) -> bool:
        return self.lat is not None and self.lng is not None


class PanelConfig(BaseModel):
    """Panel template. Dimensions in feet, power in watts."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    width: float = Field(default=5.4, gt=0)
    height: float = Field(default=3.25, gt=0)
    power: float = Field(default=400.0, gt=0)
    efficiency: float = Field(default=0.20, gt=0, le=1)


class SpacingConfig(BaseModel):
    """Gaps between neighbouring panels in feet."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    horizontal: float = Field(default=0.5, ge=0)
    vertical: float = Field(default=0.5, ge=0)


class ProductionConfig(BaseModel):
    """Production and financial assumptions.

    Omitted fields keep the estimator's defaults.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    sun_hours_per_day: float = Field(default=4.2, ge=0, le=24)
    system_efficiency: float = Field(default=0.85, gt=0, le=1)
    electricity_rate: float = Field(default=0.12, ge=0)
    annual_rate_increase: float = Field(default=0.03, ge=0)
    lifetime_years: int = Field(default=25, ge=1, le=100)
    emissions_kg_per_kwh: float = Field(default=0.610, ge=0)
    co2_kg_per_tree_year: float = Field(default=21.77, gt=0)
    cost_per_watt: float = Field(default=3.50, ge=0)
    seasonal_factors: dict[str, float] | None = None

    @field_validator("seasonal_factors")
    @classmethod
    def validate_seasonal_factors(cls, v: dict[str, float] | None) -> dict[str, float] | None:
        if v is not None and any(factor < 0 for factor in v.values()):
            raise ValueError("Seasonal factors must be non-negative")
        return v


class OutputConfig(BaseModel):
    """Output settings used when the CLI is not given explicit flags."""

    model_config = ConfigDict(extra="forbid")

    format: Literal["summary", "panels", "json", "report"] = "summary"
    output_path: str | None = None


class LayoutConfiguration(BaseModel):
    """Root configuration model for a layout file.

    Example:
        >>> config = LayoutConfiguration(
        ...     schema_version="1.0",
        ...     roof=RoofConfig(points=[PointConfig(x=0, y=0), PointConfig(x=40, y=0),
        ...                             PointConfig(x=40, y=30), PointConfig(x=0, y=30)]),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    roof: RoofConfig
    obstacles: list[ObstacleConfig] = Field(default_factory=list)
    panel: PanelConfig = Field(default_factory=PanelConfig)
    spacing: SpacingConfig = Field(default_factory=SpacingConfig)
    production: ProductionConfig = Field(default_factory=ProductionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_obstacle_frames(self) -> "LayoutConfiguration":
        """Geographic obstacles need a geographic roof outline to project into."""
        if not self.roof.is_geographic:
            for i, obstacle in enumerate(self.obstacles):
                if obstacle.is_geographic:
                    raise ValueError(
                        f"obstacles[{i}] is given in lat/lng but the roof outline is planar"
                    )
        return self
