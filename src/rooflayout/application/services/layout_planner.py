"""Layout planning: strategy dispatch, obstacle filtering and aggregation."""

from __future__ import annotations

import logging

from rooflayout.application.strategies import TilingStrategyFactory
from rooflayout.domain.entities import LayoutResult, RoofRegion
from rooflayout.domain.services import LayoutScorer, ObstacleCollisionService
from rooflayout.domain.value_objects import PanelSpec, SpacingSpec

__all__ = ["LayoutPlanner"]

logger = logging.getLogger(__name__)


class LayoutPlanner:
    """Runs one full planning pass for a roof region.

    A pass never mutates its inputs and always returns a fresh LayoutResult,
    so running it twice on the same inputs yields equal results in the same
    order. Callers re-run it after any change to the region, its obstacles,
    the panel spec or the spacing.
    """

    def __init__(
        self,
        strategy_factory: TilingStrategyFactory | None = None,
        collision_service: ObstacleCollisionService | None = None,
        scorer: LayoutScorer | None = None,
    ) -> None:
        self.scorer = scorer or LayoutScorer()
        self.strategy_factory = strategy_factory or TilingStrategyFactory(self.scorer)
        self.collision_service = collision_service or ObstacleCollisionService()

    def plan(
        self,
        region: RoofRegion,
        spec: PanelSpec,
        spacing: SpacingSpec,
    ) -> LayoutResult:
        """Generate, filter and score panels for ``region``.

        Args:
            region: Classified roof region with its obstacles.
            spec: Panel template.
            spacing: Gaps between panels.

        Returns:
            The new LayoutResult. Empty when the outline is degenerate, when
            nothing fits, or when obstacles remove every candidate.
        """
        if region.boundary.is_degenerate:
            logger.warning("Degenerate roof outline; returning an empty layout")
            return self.scorer.summarize((), region.area_sqft, spec)

        strategy = self.strategy_factory.create_strategy(region.shape)
        logger.debug(f"Planning {region.shape.value} roof with {type(strategy).__name__}")
        candidates = strategy.generate(region, spec, spacing)
        panels = self.collision_service.filter_panels(candidates, region.obstacles)
        if candidates and not panels:
            logger.debug("Obstacles removed every candidate panel")

        result = self.scorer.summarize(panels, region.area_sqft, spec)
        logger.debug(
            f"Layout: {result.total_panels} panels, "
            f"{result.total_rated_power_watts:.0f} W, "
            f"utilization {result.utilization_ratio:.1f}%"
        )
        return result
