"""Base module for tiling strategies.

Re-exports the TilingStrategy protocol and provides the counting helpers the
strategies share.
"""

from __future__ import annotations

import math

# Re-export the protocol for convenience
from rooflayout.contracts.strategies import TilingStrategy

# Absorbs floating-point noise from projection, so a 30 ft span holds exactly
# eight 3.75 ft rows rather than seven.
FIT_TOLERANCE = 1e-6


def fit_count(span: float, step: float) -> int:
    """How many whole steps fit in a span.

    Raises:
        ValueError: If ``step`` is not positive.
    """
    if step <= 0:
        raise ValueError(f"Step must be positive, got {step}")
    if span <= 0:
        return 0
    return max(0, math.floor(span / step + FIT_TOLERANCE))


def cell_count(span: float, cell: float) -> int:
    """How many grid cells are needed to cover a span."""
    if cell <= 0:
        raise ValueError(f"Cell size must be positive, got {cell}")
    if span <= 0:
        return 0
    return max(0, math.ceil(span / cell - FIT_TOLERANCE))


__all__ = [
    "FIT_TOLERANCE",
    "TilingStrategy",
    "cell_count",
    "fit_count",
]
