"""Panel construction and containment substeps shared by every tiling strategy."""

from __future__ import annotations

from ..entities import Panel, RoofRegion
from ..value_objects import PanelBounds, PanelSpec, Point
from .geometry import bounding_box, point_in_polygon
from .scoring import LayoutScorer

__all__ = ["PanelBuilder"]


class PanelBuilder:
    """Creates scored panels for one region and tests their containment.

    One builder serves a single planning pass; it caches the region's
    bounding box so scoring does not recompute it per candidate.
    """

    def __init__(
        self,
        region: RoofRegion,
        spec: PanelSpec,
        scorer: LayoutScorer | None = None,
    ) -> None:
        self.region = region
        self.spec = spec
        self.scorer = scorer or LayoutScorer()
        self.bbox = bounding_box(region.boundary)

    def center_inside(self, center: Point) -> bool:
        """Center-only containment test."""
        return point_in_polygon(center, self.region.boundary)

    def fits_entirely(self, center: Point) -> bool:
        """True when all four corners of a panel at ``center`` are inside."""
        b = PanelBounds.around(center, self.spec.width, self.spec.height)
        corners = (
            Point(b.west, b.north),
            Point(b.east, b.north),
            Point(b.east, b.south),
            Point(b.west, b.south),
        )
        return all(point_in_polygon(c, self.region.boundary) for c in corners)

    def build(self, center: Point, row: int, col: int) -> Panel:
        """Create a scored panel at ``center``."""
        return Panel(
            id=f"panel_{row}_{col}",
            center=center,
            row_index=row,
            col_index=col,
            width=self.spec.width,
            height=self.spec.height,
            rated_power_watts=self.spec.rated_power_watts,
            azimuth_deg=self.region.azimuth_deg,
            tilt_deg=self.region.pitch_deg,
            effective_efficiency=self.scorer.panel_efficiency(
                center, self.region, self.spec, bbox=self.bbox
            ),
        )
