"""Per-panel efficiency and layout aggregate statistics."""

from __future__ import annotations

from typing import Iterable

from ..entities import LayoutResult, Panel, RoofRegion
from ..value_objects import BoundingBox, PanelSpec, Point
from .geometry import bounding_box, planar_distance

__all__ = [
    "EFFICIENCY_CEILING",
    "EFFICIENCY_FLOOR",
    "LayoutScorer",
]

EFFICIENCY_FLOOR = 0.1
EFFICIENCY_CEILING = 1.0
POSITION_WEIGHT = 0.1


class LayoutScorer:
    """Scores panels and aggregates a layout.

    Efficiency of a panel is the rated efficiency scaled by the roof's sun
    exposure and a small position factor favouring the middle of the roof.
    """

    def position_factor(self, center: Point, bbox: BoundingBox) -> float:
        """1 at the bounding-box center, falling to 0.9 at its corners."""
        radius = bbox.half_diagonal
        if radius == 0:
            return 1.0
        return 1.0 - (planar_distance(center, bbox.center) / radius) * POSITION_WEIGHT

    def panel_efficiency(
        self,
        center: Point,
        region: RoofRegion,
        spec: PanelSpec,
        bbox: BoundingBox | None = None,
    ) -> float:
        """Effective efficiency of a panel centered at ``center``.

        Args:
            center: Panel center in the local frame.
            region: The roof region; its sun exposure scales the result.
            spec: Panel template providing the rated efficiency.
            bbox: Precomputed region bounding box, if the caller has one.

        Returns:
            Efficiency clamped to [0.1, 1.0].
        """
        exposure = region.classification.sun_exposure
        if exposure is None:
            exposure = 0.0
        bbox = bbox or bounding_box(region.boundary)
        value = spec.rated_efficiency * exposure * self.position_factor(center, bbox)
        return max(EFFICIENCY_FLOOR, min(EFFICIENCY_CEILING, value))

    def summarize(
        self,
        panels: Iterable[Panel],
        region_area: float,
        spec: PanelSpec,
    ) -> LayoutResult:
        """Aggregate a panel set into a LayoutResult.

        Args:
            panels: Panels in placement order.
            region_area: Roof area used for the utilization ratio.
            spec: Panel template providing the per-panel footprint.

        Returns:
            A new LayoutResult. Averages and ratios are 0 instead of dividing
            by zero.
        """
        panel_tuple = tuple(panels)
        count = len(panel_tuple)
        total_power = sum(p.rated_power_watts for p in panel_tuple)
        average = (
            sum(p.effective_efficiency for p in panel_tuple) / count if count else 0.0
        )
        utilization = (
            count * spec.width * spec.height / region_area * 100 if region_area > 0 else 0.0
        )
        return LayoutResult(
            panels=panel_tuple,
            total_panels=count,
            total_rated_power_watts=total_power,
            average_efficiency=average,
            utilization_ratio=utilization,
        )
