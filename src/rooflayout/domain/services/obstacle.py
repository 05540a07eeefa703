"""Obstacle handling services for panel layout.

This module detects conflicts between panel rectangles and obstacle
exclusion zones, and filters conflicting panels out of a candidate set.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..entities import Obstacle, Panel
from ..value_objects import ObstacleZone, PanelBounds

__all__ = [
    "ObstacleCollisionService",
    "conflicts",
    "filter_conflicting",
]

logger = logging.getLogger(__name__)


def conflicts(panel_bounds: PanelBounds, obstacle: Obstacle) -> bool:
    """Check whether a panel rectangle intrudes on an obstacle's zone.

    The zone is the obstacle footprint grown by its buffer margin on every
    side. Rectangles that only touch along an edge do not conflict.
    """
    return obstacle.zone().overlaps(panel_bounds)


def filter_conflicting(
    panels: Iterable[Panel],
    obstacles: Sequence[Obstacle],
) -> list[Panel]:
    """Drop every panel that conflicts with any obstacle.

    Order of the surviving panels is preserved. An empty result is valid.
    """
    if not obstacles:
        return list(panels)
    zones = [obstacle.zone() for obstacle in obstacles]
    return [
        panel
        for panel in panels
        if not any(zone.overlaps(panel.bounds) for zone in zones)
    ]


class ObstacleCollisionService:
    """Detects collisions between panels and obstacles.

    Provides:
    - Zone computation for an obstacle set
    - Per-panel collision checks
    - Filtering of a candidate panel set
    - Keepout area totals for usable-area reporting
    """

    def get_obstacle_zones(self, obstacles: Sequence[Obstacle]) -> list[ObstacleZone]:
        """Exclusion zones for the given obstacles, in the same order."""
        return [obstacle.zone() for obstacle in obstacles]

    def check_collision(self, panel: Panel, obstacles: Sequence[Obstacle]) -> list[Obstacle]:
        """Obstacles whose zone the panel intrudes on.

        Returns:
            Conflicting obstacles; empty if the panel is clear.
        """
        bounds = panel.bounds
        return [obstacle for obstacle in obstacles if conflicts(bounds, obstacle)]

    def filter_panels(
        self,
        panels: Sequence[Panel],
        obstacles: Sequence[Obstacle],
    ) -> list[Panel]:
        """Remove conflicting panels, logging how many were dropped."""
        kept = filter_conflicting(panels, obstacles)
        removed = len(panels) - len(kept)
        if removed:
            logger.debug(
                f"Removed {removed} of {len(panels)} panels conflicting with "
                f"{len(obstacles)} obstacle(s)"
            )
        return kept

    def keepout_area(self, obstacles: Sequence[Obstacle]) -> float:
        """Total area of the exclusion zones, buffers included (sq ft).

        Overlapping zones are counted once per obstacle.
        """
        return sum(zone.area for zone in self.get_obstacle_zones(obstacles))
