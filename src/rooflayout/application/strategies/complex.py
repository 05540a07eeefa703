"""Fine-grid scan for complex (more than four vertices) outlines."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rooflayout.domain.services import LayoutScorer, PanelBuilder
from rooflayout.domain.value_objects import Point

from .base import cell_count

if TYPE_CHECKING:
    from rooflayout.domain.entities import Panel, RoofRegion
    from rooflayout.domain.value_objects import PanelSpec, SpacingSpec

logger = logging.getLogger(__name__)


class ComplexTiling:
    """Scan a fine grid, stepping a whole panel at a time.

    The grid cell is half the smaller panel dimension. The scan advances by
    the number of cells covering a panel's height (rows) and width (columns),
    so panels butt against each other; spacing gaps are not applied. A panel
    is kept only when its center and all four corners are inside the outline,
    which rejects panels reaching across concave notches.

    Row indices advance with every scanned row, column indices with every
    accepted panel in that row.
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
        cell = min(spec.width, spec.height) / 2
        cols = cell_count(bbox.width, cell)
        rows = cell_count(bbox.height, cell)
        row_step = max(1, cell_count(spec.height, cell))
        col_step = max(1, cell_count(spec.width, cell))

        panels: list["Panel"] = []
        panel_row = 0
        for grid_row in range(0, rows, row_step):
            y = bbox.north - grid_row * cell - spec.height / 2
            panel_col = 0
            for grid_col in range(0, cols, col_step):
                center = Point(bbox.west + grid_col * cell + spec.width / 2, y)
                if builder.center_inside(center) and builder.fits_entirely(center):
                    panels.append(builder.build(center, panel_row, panel_col))
                    panel_col += 1
            panel_row += 1

        logger.debug(
            f"Complex scan over {cols}x{rows} cells of {cell:.3f} ft: "
            f"{len(panels)} panels fit entirely"
        )
        return panels


__all__ = [
    "ComplexTiling",
]
