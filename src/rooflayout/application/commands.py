"""Application commands (use cases) for roof layout generation."""

from __future__ import annotations

import logging

from rooflayout.domain import (
    GeoPoint,
    Obstacle,
    ObstacleKind,
    PanelSpec,
    Point,
    RoofRegion,
    SpacingSpec,
)
from rooflayout.domain.services import (
    LocalFrame,
    ProductionEstimator,
    RoofAnalyzer,
)

from .dtos import (
    LayoutOutput,
    ObstacleInput,
    PanelSpecInput,
    RoofInput,
    SpacingInput,
)
from .services import LayoutPlanner

logger = logging.getLogger(__name__)


class GenerateLayoutCommand:
    """Command to generate a complete panel layout.

    Regeneration is always an explicit call: build new inputs, call
    ``execute`` (or ``execute_region``) again, and use the returned output in
    place of the old one.
    """

    def __init__(
        self,
        analyzer: RoofAnalyzer | None = None,
        planner: LayoutPlanner | None = None,
        estimator: ProductionEstimator | None = None,
    ) -> None:
        self.analyzer = analyzer or RoofAnalyzer()
        self.planner = planner or LayoutPlanner()
        self.estimator = estimator or ProductionEstimator()

    def execute(
        self,
        roof_input: RoofInput,
        panel_input: PanelSpecInput | None = None,
        spacing_input: SpacingInput | None = None,
        obstacle_inputs: list[ObstacleInput] | None = None,
    ) -> LayoutOutput:
        """Execute the layout generation command.

        Args:
            roof_input: Roof outline and orientation.
            panel_input: Panel template; defaults to a 5.4 x 3.25 ft 400 W panel.
            spacing_input: Panel gaps; defaults to 0.5 ft each way.
            obstacle_inputs: Obstacles on the roof.

        Returns:
            LayoutOutput with the region, layout and production estimate, or
            with ``errors`` set if the inputs were invalid.
        """
        panel_input = panel_input or PanelSpecInput()
        spacing_input = spacing_input or SpacingInput()
        obstacle_inputs = obstacle_inputs or []

        errors = roof_input.validate() + panel_input.validate() + spacing_input.validate()
        for obstacle_input in obstacle_inputs:
            errors.extend(obstacle_input.validate())
        if errors:
            return LayoutOutput(errors=errors)

        try:
            region, frame = self._build_region(roof_input)
            obstacles = [self._build_obstacle(o, frame) for o in obstacle_inputs]
        except ValueError as e:
            return LayoutOutput(errors=[str(e)])

        return self.execute_region(
            region.with_obstacles(obstacles),
            panel_input.to_panel_spec(),
            spacing_input.to_spacing_spec(),
            frame=frame,
        )

    def execute_region(
        self,
        region: RoofRegion,
        panel_spec: PanelSpec,
        spacing: SpacingSpec,
        frame: LocalFrame | None = None,
    ) -> LayoutOutput:
        """Plan and estimate a layout for an already-built region."""
        if frame is None and region.origin is not None:
            frame = LocalFrame(region.origin)
        layout = self.planner.plan(region, panel_spec, spacing)
        return LayoutOutput(
            region=region,
            layout=layout,
            panel_spec=panel_spec,
            spacing=spacing,
            production=self.estimator.estimate(layout),
            frame=frame,
        )

    def _build_region(self, roof_input: RoofInput) -> tuple[RoofRegion, LocalFrame | None]:
        options = {
            "area_sqft": roof_input.area_sqft,
            "azimuth_deg": roof_input.azimuth,
            "pitch_deg": roof_input.pitch,
        }
        if roof_input.is_geographic:
            return self.analyzer.analyze_geographic(roof_input.to_geo_points(), **options)
        return self.analyzer.analyze_points(roof_input.to_points(), **options), None

    @staticmethod
    def _build_obstacle(obstacle_input: ObstacleInput, frame: LocalFrame | None) -> Obstacle:
        if obstacle_input.lat is not None and obstacle_input.lng is not None:
            if frame is None:
                raise ValueError(
                    f"Obstacle '{obstacle_input.name or obstacle_input.kind}' is given in "
                    "lat/lng but the roof outline is planar"
                )
            center = frame.to_local(GeoPoint(obstacle_input.lat, obstacle_input.lng))
        else:
            center = Point(obstacle_input.x, obstacle_input.y)  # type: ignore[arg-type]
        return Obstacle.of_kind(
            ObstacleKind(obstacle_input.kind),
            center,
            width=obstacle_input.width,
            height=obstacle_input.height,
            buffer_margin=obstacle_input.buffer,
            name=obstacle_input.name,
        )
