"""Layout generation endpoints."""

from dataclasses import asdict

from fastapi import APIRouter

from rooflayout.application import GenerateLayoutCommand, LayoutOutput
from rooflayout.application.config import (
    config_to_assumptions,
    config_to_panel_spec,
    config_to_region,
    config_to_spacing,
    load_config_from_dict,
)
from rooflayout.domain.services import ProductionEstimator
from rooflayout.web.dependencies import LayoutPlannerDep, RoofAnalyzerDep
from rooflayout.web.exceptions import LayoutGenerationError
from rooflayout.web.schemas.requests import LayoutRequest
from rooflayout.web.schemas.responses import (
    GeoPointSchema,
    LayoutResponseSchema,
    LayoutSummarySchema,
    PanelSchema,
    PointSchema,
    RoofSummarySchema,
)

router = APIRouter(prefix="/layout", tags=["layout"])


def _layout_output_to_schema(output: LayoutOutput, include_geo: bool) -> LayoutResponseSchema:
    """Convert LayoutOutput to response schema."""
    region = output.region
    layout = output.layout
    assert region is not None and layout is not None
    classification = region.classification
    frame = output.frame if include_geo else None

    origin = None
    if output.frame is not None:
        origin = GeoPointSchema(lat=output.frame.origin.lat, lng=output.frame.origin.lng)

    panels = []
    for panel in layout.panels:
        position = None
        if frame is not None:
            geo = frame.to_geographic(panel.center)
            position = GeoPointSchema(lat=geo.lat, lng=geo.lng)
        panels.append(
            PanelSchema(
                id=panel.id,
                row=panel.row_index,
                col=panel.col_index,
                center=PointSchema(x=panel.center.x, y=panel.center.y),
                position=position,
                width=panel.width,
                height=panel.height,
                rated_power_watts=panel.rated_power_watts,
                efficiency=panel.effective_efficiency,
            )
        )

    return LayoutResponseSchema(
        is_valid=output.is_valid,
        errors=output.errors,
        roof=RoofSummarySchema(
            shape=region.shape.value,
            area_sqft=region.area_sqft,
            azimuth=region.azimuth_deg,
            pitch=region.pitch_deg,
            complexity=classification.complexity,
            suitability=classification.suitability,
            sun_exposure=classification.sun_exposure,
            obstacle_count=len(region.obstacles),
            origin=origin,
        ),
        layout=LayoutSummarySchema(
            total_panels=layout.total_panels,
            total_rated_power_watts=layout.total_rated_power_watts,
            average_efficiency=layout.average_efficiency,
            utilization_ratio=layout.utilization_ratio,
        ),
        panels=panels,
        production=asdict(output.production) if output.production else None,
    )


@router.post("", response_model=LayoutResponseSchema)
async def generate_layout(
    request: LayoutRequest,
    planner: LayoutPlannerDep,
    analyzer: RoofAnalyzerDep,
) -> LayoutResponseSchema:
    """Generate a panel layout from a full configuration.

    Raises:
        ConfigError: If the configuration does not match the schema (422).
        LayoutGenerationError: If the outline cannot be turned into a region (422).
    """
    config = load_config_from_dict(request.config)
    try:
        region, frame = config_to_region(config, analyzer)
    except ValueError as e:
        raise LayoutGenerationError([str(e)]) from e

    command = GenerateLayoutCommand(
        analyzer=analyzer,
        planner=planner,
        estimator=ProductionEstimator(config_to_assumptions(config)),
    )
    output = command.execute_region(
        region,
        config_to_panel_spec(config),
        config_to_spacing(config),
        frame=frame,
    )
    if not output.is_valid:
        raise LayoutGenerationError(output.errors)

    return _layout_output_to_schema(output, request.include_geo)
