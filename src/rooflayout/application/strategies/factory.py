"""Factory for creating tiling strategies.

The TilingStrategyFactory keeps the shape-to-strategy mapping in one place.
Every RoofShape member must have an entry; a missing one fails at import
rather than at planning time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rooflayout.domain.services import LayoutScorer
from rooflayout.domain.value_objects import RoofShape

from .complex import ComplexTiling
from .rectangular import RectangularTiling
from .triangular import TriangularTiling

if TYPE_CHECKING:
    from rooflayout.contracts.strategies import TilingStrategy


STRATEGY_BY_SHAPE: dict[RoofShape, type] = {
    RoofShape.RECTANGULAR: RectangularTiling,
    RoofShape.QUADRILATERAL: RectangularTiling,
    RoofShape.TRIANGULAR: TriangularTiling,
    RoofShape.COMPLEX: ComplexTiling,
    RoofShape.UNKNOWN: RectangularTiling,
}

_unmapped = set(RoofShape) - set(STRATEGY_BY_SHAPE)
if _unmapped:
    raise RuntimeError(
        f"No tiling strategy for shapes: {sorted(s.value for s in _unmapped)}"
    )


class TilingStrategyFactory:
    """Creates the tiling strategy for a roof shape.

    Example:
        ```python
        factory = TilingStrategyFactory()
        strategy = factory.create_strategy(region.shape)
        candidates = strategy.generate(region, spec, spacing)
        ```
    """

    def __init__(self, scorer: LayoutScorer | None = None) -> None:
        """Initialize with a scorer.

        Args:
            scorer: Service scoring each panel. All strategy instances share it.
        """
        self._scorer = scorer or LayoutScorer()

    def create_strategy(self, shape: RoofShape) -> "TilingStrategy":
        """Create the strategy registered for ``shape``.

        Raises:
            ValueError: If ``shape`` is not a RoofShape.
        """
        try:
            strategy_cls = STRATEGY_BY_SHAPE[RoofShape(shape)]
        except ValueError as e:
            raise ValueError(f"Unknown roof shape: {shape!r}") from e
        return strategy_cls(scorer=self._scorer)


__all__ = [
    "STRATEGY_BY_SHAPE",
    "TilingStrategyFactory",
]
