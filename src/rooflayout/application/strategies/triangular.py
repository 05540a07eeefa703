"""Tapered-row tiling for triangular outlines."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from rooflayout.domain.services import (
    LayoutScorer,
    PanelBuilder,
    horizontal_span,
    longest_edge,
    planar_distance,
)
from rooflayout.domain.value_objects import Point, Polygon

from .base import fit_count
from .rectangular import RectangularTiling

if TYPE_CHECKING:
    from rooflayout.domain.entities import Panel, RoofRegion
    from rooflayout.domain.value_objects import PanelSpec, SpacingSpec

logger = logging.getLogger(__name__)


class BaseFrame:
    """Planar frame with the triangle's base on the s axis and its apex at t > 0.

    ``u`` runs along the base, oriented west to east (south to north for a
    vertical base), and ``v`` is the unit normal pointing at the apex.
    """

    def __init__(self, base_a: Point, base_b: Point, apex: Point) -> None:
        length = planar_distance(base_a, base_b)
        ux, uy = (base_b.x - base_a.x) / length, (base_b.y - base_a.y) / length
        if ux < 0 or (ux == 0 and uy < 0):
            base_a, base_b = base_b, base_a
            ux, uy = -ux, -uy
        vx, vy = -uy, ux
        if (apex.x - base_a.x) * vx + (apex.y - base_a.y) * vy < 0:
            vx, vy = -vx, -vy
        self.origin = base_a
        self.u = (ux, uy)
        self.v = (vx, vy)

    def to_frame(self, point: Point) -> Point:
        dx, dy = point.x - self.origin.x, point.y - self.origin.y
        return Point(dx * self.u[0] + dy * self.u[1], dx * self.v[0] + dy * self.v[1])

    def to_plane(self, point: Point) -> Point:
        return Point(
            self.origin.x + point.x * self.u[0] + point.y * self.v[0],
            self.origin.y + point.x * self.u[1] + point.y * self.v[1],
        )

    def extent(self, width: float, height: float) -> tuple[float, float]:
        """Extent of an axis-aligned width x height panel along u and along v."""
        along_u = abs(self.u[0]) * width + abs(self.u[1]) * height
        along_v = abs(self.v[0]) * width + abs(self.v[1]) * height
        return along_u, along_v


class TriangularTiling:
    """Rows whose panel budget shrinks linearly from the base to the apex.

    The longest edge is the base and the remaining vertex the apex. Rows run
    parallel to the base and stack from it toward the apex, whatever the
    base's orientation. Panels stay axis-aligned, so the panel footprint along
    and across the base is that of the axis-aligned panel projected onto the
    base direction and its normal. The number of rows is how many
    footprint-plus-gap heights fit the perpendicular distance from apex to
    base. Row ``r`` of ``n`` gets ``floor(base_capacity * (1 - r / n))``
    panels, further capped by how many fit the outline's chord at that row,
    and spread evenly across that chord.
    """

    def __init__(self, scorer: LayoutScorer | None = None) -> None:
        self._scorer = scorer or LayoutScorer()

    def generate(
        self,
        region: "RoofRegion",
        spec: "PanelSpec",
        spacing: "SpacingSpec",
    ) -> list["Panel"]:
        boundary = region.boundary
        if boundary.vertex_count != 3:
            logger.debug(
                f"Triangular tiling got {boundary.vertex_count} vertices; using the grid"
            )
            return RectangularTiling(self._scorer).generate(region, spec, spacing)

        i, j = longest_edge(boundary)
        base_a, base_b = boundary.points[i], boundary.points[j]
        apex = next(p for k, p in enumerate(boundary.points) if k not in (i, j))
        base_length = planar_distance(base_a, base_b)
        if base_length == 0:
            return []

        frame = BaseFrame(base_a, base_b, apex)
        local = Polygon(tuple(frame.to_frame(p) for p in boundary.points))
        height = frame.to_frame(apex).y
        along, across = frame.extent(spec.width, spec.height)
        step_along = along + spacing.horizontal_gap
        step_across = across + spacing.vertical_gap

        builder = PanelBuilder(region, spec, self._scorer)
        max_in_base = fit_count(base_length, step_along)
        num_rows = fit_count(height, step_across)

        panels: list["Panel"] = []
        for row in range(num_rows):
            budget = math.floor(max_in_base * (1 - row / num_rows))
            t = row * step_across + across / 2
            span = horizontal_span(local, t)
            if span is None:
                continue
            start, end = span
            chord = end - start
            count = min(budget, fit_count(chord, step_along))
            for col in range(count):
                center = frame.to_plane(Point(start + chord * (col + 0.5) / count, t))
                if builder.center_inside(center):
                    panels.append(builder.build(center, row, col))

        logger.debug(
            f"Triangular rows: {num_rows} rows, base capacity {max_in_base}, "
            f"{len(panels)} panels placed"
        )
        return panels


__all__ = [
    "BaseFrame",
    "TriangularTiling",
]
