"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rooflayout.domain import (
    GeoPoint,
    LayoutResult,
    ObstacleKind,
    PanelSpec,
    Point,
    RoofRegion,
    SpacingSpec,
)
from rooflayout.domain.services import LocalFrame, ProductionEstimate


def _all_finite(*values: float | None) -> bool:
    return all(v is None or math.isfinite(v) for v in values)


@dataclass
class RoofInput:
    """Input DTO for a roof outline.

    Exactly one of ``coordinates`` ((lat, lng) pairs) or ``points``
    ((x, y) pairs in feet) is given.
    """

    coordinates: list[tuple[float, float]] | None = None
    points: list[tuple[float, float]] | None = None
    area_sqft: float | None = None
    azimuth: float | None = None
    pitch: float = 30.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if (self.coordinates is None) == (self.points is None):
            errors.append("Provide exactly one of coordinates or points")
        outline = self.coordinates if self.coordinates is not None else self.points or []
        if not all(_all_finite(a, b) for a, b in outline):
            errors.append("Outline coordinates must be finite")
        if self.coordinates is not None:
            for lat, lng in self.coordinates:
                if not (-90 <= lat <= 90 and -180 <= lng <= 180):
                    errors.append(f"Coordinate out of range: ({lat}, {lng})")
                    break
        if self.area_sqft is not None and (
            not _all_finite(self.area_sqft) or self.area_sqft < 0
        ):
            errors.append("Area must be a non-negative number")
        if self.azimuth is not None and (
            not _all_finite(self.azimuth) or not 0 <= self.azimuth < 360
        ):
            errors.append("Azimuth must be in [0, 360)")
        if not _all_finite(self.pitch) or not 0 <= self.pitch <= 90:
            errors.append("Pitch must be in [0, 90]")
        return errors

    @property
    def is_geographic(self) -> bool:
        return self.coordinates is not None

    def to_geo_points(self) -> list[GeoPoint]:
        return [GeoPoint(lat, lng) for lat, lng in self.coordinates or []]

    def to_points(self) -> list[Point]:
        return [Point(x, y) for x, y in self.points or []]


@dataclass
class ObstacleInput:
    """Input DTO for an obstacle.

    Position is either ``x``/``y`` (local feet) or ``lat``/``lng``. Missing
    size and buffer fall back to the defaults for the kind.
    """

    kind: str = "other"
    x: float | None = None
    y: float | None = None
    lat: float | None = None
    lng: float | None = None
    width: float | None = None
    height: float | None = None
    buffer: float | None = None
    name: str | None = None

    def validate(self) -> list[str]:
        errors: list[str] = []
        label = self.name or self.kind
        valid_kinds = [k.value for k in ObstacleKind]
        if self.kind not in valid_kinds:
            errors.append(f"Obstacle kind must be one of: {', '.join(valid_kinds)}")
        planar = self.x is not None and self.y is not None
        geographic = self.lat is not None and self.lng is not None
        if planar == geographic:
            errors.append(f"Obstacle '{label}' needs either x/y or lat/lng")
        if not _all_finite(self.x, self.y, self.lat, self.lng, self.width, self.height, self.buffer):
            errors.append(f"Obstacle '{label}' values must be finite")
        if (self.width is not None and self.width <= 0) or (
            self.height is not None and self.height <= 0
        ):
            errors.append(f"Obstacle '{label}' dimensions must be positive")
        if self.buffer is not None and self.buffer < 0:
            errors.append(f"Obstacle '{label}' buffer must be non-negative")
        return errors


@dataclass
class PanelSpecInput:
    """Input DTO for the panel template."""

    width: float = 5.4
    height: float = 3.25
    power: float = 400.0
    efficiency: float = 0.20

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not _all_finite(self.width, self.height, self.power, self.efficiency):
            errors.append("Panel values must be finite")
            return errors
        if self.width <= 0:
            errors.append("Panel width must be positive")
        if self.height <= 0:
            errors.append("Panel height must be positive")
        if self.power <= 0:
            errors.append("Panel power must be positive")
        if not 0 < self.efficiency <= 1:
            errors.append("Panel efficiency must be in (0, 1]")
        return errors

    def to_panel_spec(self) -> PanelSpec:
        """Convert to PanelSpec value object."""
        return PanelSpec(
            width=self.width,
            height=self.height,
            rated_power_watts=self.power,
            rated_efficiency=self.efficiency,
        )


@dataclass
class SpacingInput:
    """Input DTO for panel spacing."""

    horizontal: float = 0.5
    vertical: float = 0.5

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not _all_finite(self.horizontal, self.vertical):
            errors.append("Spacing values must be finite")
        elif self.horizontal < 0 or self.vertical < 0:
            errors.append("Spacing gaps cannot be negative")
        return errors

    def to_spacing_spec(self) -> SpacingSpec:
        return SpacingSpec(horizontal_gap=self.horizontal, vertical_gap=self.vertical)


@dataclass
class LayoutOutput:
    """Output DTO containing the generated layout.

    Attributes:
        region: The classified roof region, obstacles included.
        layout: Placed panels and aggregate statistics.
        panel_spec: Panel template the layout was generated with.
        spacing: Spacing the layout was generated with.
        production: Production and financial estimate for the layout.
        frame: Local frame for geographic input, None for planar input.
        errors: List of error messages if generation failed.
    """

    region: RoofRegion | None = None
    layout: LayoutResult | None = None
    panel_spec: PanelSpec | None = None
    spacing: SpacingSpec | None = None
    production: ProductionEstimate | None = None
    frame: LocalFrame | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the output is valid (no errors)."""
        return len(self.errors) == 0 and self.layout is not None
