"""Immutable value types for the roof layout domain.

All planar quantities are in feet, measured in the region's local frame
(x grows east, y grows north). Geographic points are in decimal degrees.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


def _require_finite(name: str, *values: float) -> None:
    for value in values:
        if not math.isfinite(value):
            raise ValueError(f"{name} coordinates must be finite, got {value!r}")


class RoofShape(str, Enum):
    """Shape category of a roof outline.

    Attributes:
        RECTANGULAR: Four vertices, every interior angle within 15 degrees of 90.
        QUADRILATERAL: Four vertices that do not qualify as rectangular.
        TRIANGULAR: Three vertices.
        COMPLEX: More than four vertices.
        UNKNOWN: Fewer than three vertices; not a usable outline.
    """

    RECTANGULAR = "rectangular"
    QUADRILATERAL = "quadrilateral"
    TRIANGULAR = "triangular"
    COMPLEX = "complex"
    UNKNOWN = "unknown"


class ObstacleKind(str, Enum):
    """Kinds of rooftop obstructions panels must keep clear of."""

    CHIMNEY = "chimney"
    VENT = "vent"
    SKYLIGHT = "skylight"
    HVAC = "hvac"
    OTHER = "other"


@dataclass(frozen=True)
class Point:
    """Planar point in the local roof frame (feet)."""

    x: float
    y: float

    def __post_init__(self) -> None:
        _require_finite("Point", self.x, self.y)

    def offset(self, dx: float, dy: float) -> "Point":
        """Return a new point shifted by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class GeoPoint:
    """Geographic coordinate in decimal degrees."""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        _require_finite("GeoPoint", self.lat, self.lng)
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude must be within [-90, 90], got {self.lat}")
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(f"Longitude must be within [-180, 180], got {self.lng}")


@dataclass(frozen=True)
class Polygon:
    """Implicitly closed outline; the last point connects back to the first.

    Consecutive duplicate points, including a closing point that repeats the
    first one, are collapsed on construction. Winding order is not assumed.
    Fewer than three points is representable so that it can be classified,
    see ``is_degenerate``.
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        cleaned: list[Point] = []
        for point in self.points:
            if not isinstance(point, Point):
                raise TypeError(f"Polygon points must be Point, got {type(point).__name__}")
            if cleaned and cleaned[-1] == point:
                continue
            cleaned.append(point)
        while len(cleaned) > 1 and cleaned[0] == cleaned[-1]:
            cleaned.pop()
        object.__setattr__(self, "points", tuple(cleaned))

    @classmethod
    def from_xy(cls, coords: list[tuple[float, float]]) -> "Polygon":
        """Build a polygon from (x, y) pairs."""
        return cls(tuple(Point(x, y) for x, y in coords))

    @property
    def vertex_count(self) -> int:
        return len(self.points)

    @property
    def is_degenerate(self) -> bool:
        """True when the outline has fewer than three distinct vertices."""
        return len(self.points) < 3

    def edges(self) -> list[tuple[Point, Point]]:
        """Edges in order, including the closing edge."""
        n = len(self.points)
        if n < 2:
            return []
        return [(self.points[i], self.points[(i + 1) % n]) for i in range(n)]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned extents of a polygon.

    Always derived from its source polygon; never stored on its own.
    """

    north: float
    south: float
    east: float
    west: float

    def __post_init__(self) -> None:
        if self.north < self.south:
            raise ValueError("north must not be below south")
        if self.east < self.west:
            raise ValueError("east must not be west of west")

    @property
    def width(self) -> float:
        """East-west extent."""
        return self.east - self.west

    @property
    def height(self) -> float:
        """North-south extent."""
        return self.north - self.south

    @property
    def center(self) -> Point:
        return Point((self.west + self.east) / 2, (self.north + self.south) / 2)

    @property
    def half_diagonal(self) -> float:
        """Distance from the center to any corner."""
        return math.hypot(self.width, self.height) / 2


@dataclass(frozen=True)
class PanelSpec:
    """Panel template shared by every panel of a layout.

    Attributes:
        width: Panel width in feet (east-west when placed).
        height: Panel height in feet (north-south when placed).
        rated_power_watts: Nameplate power of one panel.
        rated_efficiency: Nameplate conversion efficiency, in (0, 1].
    """

    width: float = 5.4
    height: float = 3.25
    rated_power_watts: float = 400.0
    rated_efficiency: float = 0.20

    def __post_init__(self) -> None:
        _require_finite(
            "PanelSpec",
            self.width,
            self.height,
            self.rated_power_watts,
            self.rated_efficiency,
        )
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Panel dimensions must be positive")
        if self.rated_power_watts <= 0:
            raise ValueError("Panel rated power must be positive")
        if not 0 < self.rated_efficiency <= 1:
            raise ValueError("Panel rated efficiency must be in (0, 1]")

    @property
    def area(self) -> float:
        """Footprint of one panel in square feet."""
        return self.width * self.height


@dataclass(frozen=True)
class SpacingSpec:
    """Gaps left between neighbouring panels, in feet."""

    horizontal_gap: float = 0.5
    vertical_gap: float = 0.5

    def __post_init__(self) -> None:
        _require_finite("SpacingSpec", self.horizontal_gap, self.vertical_gap)
        if self.horizontal_gap < 0 or self.vertical_gap < 0:
            raise ValueError("Spacing gaps must be non-negative")


@dataclass(frozen=True)
class PanelBounds:
    """Axis-aligned rectangle occupied by a panel."""

    west: float
    east: float
    south: float
    north: float

    @classmethod
    def around(cls, center: Point, width: float, height: float) -> "PanelBounds":
        """Rectangle of the given size centered on ``center``."""
        half_w = width / 2
        half_h = height / 2
        return cls(
            west=center.x - half_w,
            east=center.x + half_w,
            south=center.y - half_h,
            north=center.y + half_h,
        )


@dataclass(frozen=True)
class ObstacleZone:
    """Exclusion rectangle of an obstacle, buffer included.

    Attributes:
        west: West edge of the zone.
        east: East edge of the zone.
        south: South edge of the zone.
        north: North edge of the zone.
    """

    west: float
    east: float
    south: float
    north: float

    @property
    def width(self) -> float:
        return self.east - self.west

    @property
    def height(self) -> float:
        return self.north - self.south

    @property
    def area(self) -> float:
        return self.width * self.height

    def overlaps(self, other: PanelBounds) -> bool:
        """Check if this zone overlaps a panel rectangle.

        Two rectangles overlap if neither is completely to the west, east,
        north or south of the other. Rectangles that only share an edge do
        not overlap.

        Args:
            other: The panel bounds to check.

        Returns:
            True if the interiors intersect, False otherwise.
        """
        return not (
            self.east <= other.west
            or self.west >= other.east
            or self.north <= other.south
            or self.south >= other.north
        )


@dataclass(frozen=True)
class RoofClassification:
    """Derived shape category and scores of a roof outline.

    The scores are ``None`` when the outline is degenerate and they cannot be
    computed.

    Attributes:
        shape: Shape category used to pick a tiling strategy.
        complexity: Outline complexity in [0, 1].
        suitability: Overall suitability for panels in [0, 1].
        sun_exposure: Directional exposure factor. Not clamped, so very poor
            orientations keep their relative ordering (may be negative).
    """

    shape: RoofShape
    complexity: float | None
    suitability: float | None
    sun_exposure: float | None

    @property
    def is_computable(self) -> bool:
        return self.complexity is not None

    @classmethod
    def uncomputable(cls) -> "RoofClassification":
        """Classification for an outline with fewer than three vertices."""
        return cls(
            shape=RoofShape.UNKNOWN,
            complexity=None,
            suitability=None,
            sun_exposure=None,
        )


# Default footprint (width, height) and buffer margin per obstacle kind, in feet.
DEFAULT_OBSTACLE_SIZES: dict[ObstacleKind, tuple[float, float]] = {
    ObstacleKind.CHIMNEY: (4.0, 4.0),
    ObstacleKind.VENT: (2.0, 2.0),
    ObstacleKind.SKYLIGHT: (6.0, 8.0),
    ObstacleKind.HVAC: (8.0, 6.0),
    ObstacleKind.OTHER: (3.0, 3.0),
}

DEFAULT_BUFFER_MARGINS: dict[ObstacleKind, float] = {
    ObstacleKind.CHIMNEY: 3.0,
    ObstacleKind.VENT: 2.0,
    ObstacleKind.SKYLIGHT: 2.0,
    ObstacleKind.HVAC: 4.0,
    ObstacleKind.OTHER: 2.0,
}


__all__ = [
    "BoundingBox",
    "DEFAULT_BUFFER_MARGINS",
    "DEFAULT_OBSTACLE_SIZES",
    "GeoPoint",
    "ObstacleKind",
    "ObstacleZone",
    "PanelBounds",
    "PanelSpec",
    "Point",
    "Polygon",
    "RoofClassification",
    "RoofShape",
    "SpacingSpec",
]
