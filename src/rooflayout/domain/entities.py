"""Domain entities for roof layout planning."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .value_objects import (
    DEFAULT_BUFFER_MARGINS,
    DEFAULT_OBSTACLE_SIZES,
    GeoPoint,
    ObstacleKind,
    ObstacleZone,
    PanelBounds,
    Point,
    Polygon,
    RoofClassification,
    RoofShape,
)


@dataclass(frozen=True)
class Obstacle:
    """A rooftop obstruction that panels must keep clear of.

    Attributes:
        kind: What the obstruction is (chimney, vent, ...).
        center: Center of the obstruction in the roof's local frame.
        width: East-west size in feet.
        height: North-south size in feet.
        buffer_margin: Clearance kept on every side, in feet.
        name: Optional identifier for the obstacle.
    """

    kind: ObstacleKind
    center: Point
    width: float
    height: float
    buffer_margin: float = 0.0
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate obstacle dimensions."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Obstacle dimensions must be positive")
        if self.buffer_margin < 0:
            raise ValueError("Obstacle buffer margin must be non-negative")

    @classmethod
    def of_kind(
        cls,
        kind: ObstacleKind,
        center: Point,
        width: float | None = None,
        height: float | None = None,
        buffer_margin: float | None = None,
        name: str | None = None,
    ) -> "Obstacle":
        """Create an obstacle, filling unspecified sizes with the kind's defaults.

        Args:
            kind: The obstacle kind.
            center: Center point in the local frame.
            width: Optional width override.
            height: Optional height override.
            buffer_margin: Optional buffer override.
            name: Optional identifier.

        Returns:
            A new Obstacle.
        """
        default_width, default_height = DEFAULT_OBSTACLE_SIZES[kind]
        return cls(
            kind=kind,
            center=center,
            width=default_width if width is None else width,
            height=default_height if height is None else height,
            buffer_margin=(
                DEFAULT_BUFFER_MARGINS[kind] if buffer_margin is None else buffer_margin
            ),
            name=name,
        )

    def zone(self) -> ObstacleZone:
        """Exclusion zone: the footprint grown by the buffer on every side."""
        half_w = self.width / 2 + self.buffer_margin
        half_h = self.height / 2 + self.buffer_margin
        return ObstacleZone(
            west=self.center.x - half_w,
            east=self.center.x + half_w,
            south=self.center.y - half_h,
            north=self.center.y + half_h,
        )


@dataclass(frozen=True)
class RoofRegion:
    """A roof plane outline with its derived classification.

    Classification is computed once when the region is built (see
    ``RoofAnalyzer``). A new boundary means a new region. Obstacles can be
    added and removed without re-deriving the classification.

    Attributes:
        boundary: Outline in the local planar frame (feet).
        area_sqft: Plan area of the outline.
        azimuth_deg: Compass direction the roof faces, in [0, 360).
        pitch_deg: Roof slope from horizontal.
        classification: Derived shape and scores.
        obstacles: Obstructions owned by this region.
        origin: Geographic origin of the local frame, if the outline was
            supplied in latitude/longitude.
    """

    boundary: Polygon
    area_sqft: float
    azimuth_deg: float
    pitch_deg: float
    classification: RoofClassification
    obstacles: tuple[Obstacle, ...] = ()
    origin: GeoPoint | None = None

    def __post_init__(self) -> None:
        if self.area_sqft < 0:
            raise ValueError("Roof area must be non-negative")
        if not 0 <= self.azimuth_deg < 360:
            raise ValueError(f"Azimuth must be in [0, 360), got {self.azimuth_deg}")

    @property
    def shape(self) -> RoofShape:
        return self.classification.shape

    def with_obstacle(self, obstacle: Obstacle) -> "RoofRegion":
        """Return a copy of this region with one more obstacle."""
        return replace(self, obstacles=self.obstacles + (obstacle,))

    def with_obstacles(self, obstacles: list[Obstacle] | tuple[Obstacle, ...]) -> "RoofRegion":
        """Return a copy of this region with its obstacle set replaced."""
        return replace(self, obstacles=tuple(obstacles))

    def without_obstacle(self, index: int) -> "RoofRegion":
        """Return a copy of this region without the obstacle at ``index``.

        Raises:
            IndexError: If ``index`` does not name an obstacle.
        """
        if not 0 <= index < len(self.obstacles):
            raise IndexError(f"No obstacle at index {index}")
        remaining = self.obstacles[:index] + self.obstacles[index + 1 :]
        return replace(self, obstacles=remaining)


@dataclass(frozen=True)
class Panel:
    """A single placed panel.

    Attributes:
        id: Identifier ``panel_{row}_{col}``, unique within one layout.
        center: Center point in the local frame.
        row_index: Row in the strategy's scan order.
        col_index: Column in the strategy's scan order.
        width: Width taken from the panel spec.
        height: Height taken from the panel spec.
        rated_power_watts: Nameplate power taken from the panel spec.
        azimuth_deg: Facing inherited from the roof.
        tilt_deg: Tilt inherited from the roof pitch.
        effective_efficiency: Scored efficiency in [0.1, 1.0].
        is_selected: UI selection flag; never read by the engine.
    """

    id: str
    center: Point
    row_index: int
    col_index: int
    width: float
    height: float
    rated_power_watts: float
    azimuth_deg: float
    tilt_deg: float
    effective_efficiency: float
    is_selected: bool = False

    @property
    def bounds(self) -> PanelBounds:
        return PanelBounds.around(self.center, self.width, self.height)

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corner points ordered north-west, north-east, south-east, south-west."""
        b = self.bounds
        return (
            Point(b.west, b.north),
            Point(b.east, b.north),
            Point(b.east, b.south),
            Point(b.west, b.south),
        )

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class LayoutResult:
    """Placed panels plus aggregate statistics.

    Always rebuilt as a whole; a new generation, filter pass or edit yields a
    new instance.

    Attributes:
        panels: Panels in placement order.
        total_panels: Number of panels.
        total_rated_power_watts: Sum of panel nameplate power.
        average_efficiency: Mean effective efficiency, 0 when empty.
        utilization_ratio: Panel area as a percentage of roof area, 0 when the
            roof area is 0.
    """

    panels: tuple[Panel, ...] = field(default_factory=tuple)
    total_panels: int = 0
    total_rated_power_watts: float = 0.0
    average_efficiency: float = 0.0
    utilization_ratio: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.panels

    @property
    def total_rated_power_kw(self) -> float:
        return self.total_rated_power_watts / 1000

    def panel(self, panel_id: str) -> Panel | None:
        """Look up a panel by id."""
        for candidate in self.panels:
            if candidate.id == panel_id:
                return candidate
        return None


__all__ = [
    "LayoutResult",
    "Obstacle",
    "Panel",
    "RoofRegion",
]
