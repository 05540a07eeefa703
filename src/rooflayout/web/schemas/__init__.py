"""Pydantic schemas for the REST API."""

from rooflayout.web.schemas.requests import ConfigValidateRequest, LayoutRequest
from rooflayout.web.schemas.responses import (
    GeoPointSchema,
    LayoutResponseSchema,
    LayoutSummarySchema,
    PanelSchema,
    PointSchema,
    RoofSummarySchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "LayoutRequest",
    # Responses
    "GeoPointSchema",
    "LayoutResponseSchema",
    "LayoutSummarySchema",
    "PanelSchema",
    "PointSchema",
    "RoofSummarySchema",
    "ValidationResultSchema",
]
