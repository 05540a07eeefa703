"""Strategy protocols for panel tiling.

This module defines the contract every tiling strategy fulfils. The Strategy
pattern lets the planner pick an approach per roof shape (grid, tapered
rows, fine-grid scan) without the planner knowing how each one works.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from rooflayout.domain.entities import Panel, RoofRegion
    from rooflayout.domain.value_objects import PanelSpec, SpacingSpec


@runtime_checkable
class TilingStrategy(Protocol):
    """Protocol for candidate panel generation strategies.

    Implementations:
    - RectangularTiling: Regular grid over the bounding box
    - TriangularTiling: Rows that shrink from the base toward the apex
    - ComplexTiling: Fine-grid scan with full-rectangle containment

    Strategies only produce candidates that pass their containment test.
    Obstacle filtering and aggregation happen afterwards, in the planner.

    Example:
        ```python
        class MyTiling:
            def generate(self, region, spec, spacing) -> list[Panel]:
                ...
        ```
    """

    def generate(
        self,
        region: "RoofRegion",
        spec: "PanelSpec",
        spacing: "SpacingSpec",
    ) -> list["Panel"]:
        """Generate candidate panels for a region.

        Args:
            region: Classified roof region.
            spec: Panel template.
            spacing: Gaps between panels.

        Returns:
            Candidate panels in scan order, ids unique within the list.
        """
        ...


__all__ = [
    "TilingStrategy",
]
