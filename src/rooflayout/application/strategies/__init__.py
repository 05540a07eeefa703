"""Tiling strategies for panel placement.

This package implements the Strategy pattern for candidate generation, one
strategy per roof shape category.

Available Strategies:
    - RectangularTiling: Regular grid, center containment (also the fallback)
    - TriangularTiling: Rows tapering from base to apex
    - ComplexTiling: Fine-grid scan, full-rectangle containment

Factory:
    - TilingStrategyFactory: Picks the strategy for a RoofShape

Example:
    ```python
    from rooflayout.application.strategies import TilingStrategyFactory

    strategy = TilingStrategyFactory().create_strategy(region.shape)
    candidates = strategy.generate(region, spec, spacing)
    ```
"""

from .base import TilingStrategy, cell_count, fit_count
from .complex import ComplexTiling
from .factory import STRATEGY_BY_SHAPE, TilingStrategyFactory
from .rectangular import RectangularTiling
from .triangular import TriangularTiling

__all__ = [
    # Protocol and helpers
    "TilingStrategy",
    "cell_count",
    "fit_count",
    # Factory
    "STRATEGY_BY_SHAPE",
    "TilingStrategyFactory",
    # Strategies
    "ComplexTiling",
    "RectangularTiling",
    "TriangularTiling",
]
