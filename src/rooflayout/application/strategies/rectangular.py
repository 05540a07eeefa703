"""Grid tiling for rectangular outlines.

Also the fallback for quadrilateral and unknown outlines.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rooflayout.domain.services import LayoutScorer, PanelBuilder
from rooflayout.domain.value_objects import Point

from .base import fit_count

if TYPE_CHECKING:
    from rooflayout.domain.entities import Panel, RoofRegion
    from rooflayout.domain.value_objects import PanelSpec, SpacingSpec

logger = logging.getLogger(__name__)


class RectangularTiling:
    """Regular grid over the outline's bounding box.

    The grid starts at the north-west corner of the box. Panels per row and
    per column are the whole number of panel-plus-gap steps that fit the box
    width and height. A grid cell becomes a panel when its center lies inside
    the outline; corners are not checked.
    """

    def __init__(self, scorer: LayoutScorer | None = None) -> None:
        self._scorer = scorer or LayoutScorer()

    def generate(
        self,
        region: "RoofRegion",
        spec: "PanelSpec",
        spacing: "SpacingSpec",
    ) -> list["Panel"]:
        builder = PanelBuilder(region, spec, self._scorer)
        bbox = builder.bbox
        step_x = spec.width + spacing.horizontal_gap
        step_y = spec.height + spacing.vertical_gap
        per_row = fit_count(bbox.width, step_x)
        per_column = fit_count(bbox.height, step_y)

        panels: list["Panel"] = []
        for row in range(per_column):
            y = bbox.north - row * step_y - spec.height / 2
            for col in range(per_row):
                center = Point(bbox.west + col * step_x + spec.width / 2, y)
                if builder.center_inside(center):
                    panels.append(builder.build(center, row, col))

        logger.debug(
            f"Rectangular grid {per_row}x{per_column}: "
            f"{len(panels)} of {per_row * per_column} cells inside the outline"
        )
        return panels


__all__ = [
    "RectangularTiling",
]
