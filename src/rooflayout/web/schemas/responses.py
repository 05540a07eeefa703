"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PointSchema(BaseModel):
    x: float = Field(..., description="East offset in feet")
    y: float = Field(..., description="North offset in feet")


class GeoPointSchema(BaseModel):
    lat: float = Field(..., description="Latitude in degrees")
    lng: float = Field(..., description="Longitude in degrees")


class RoofSummarySchema(BaseModel):
    """Classified roof region."""

    shape: str = Field(..., description="Roof shape category")
    area_sqft: float = Field(..., description="Roof area in square feet")
    azimuth: float = Field(..., description="Roof facing in degrees")
    pitch: float = Field(..., description="Roof pitch in degrees")
    complexity: float | None = Field(default=None, description="Outline complexity")
    suitability: float | None = Field(default=None, description="Suitability score")
    sun_exposure: float | None = Field(default=None, description="Sun exposure factor")
    obstacle_count: int = Field(default=0, description="Number of obstacles")
    origin: GeoPointSchema | None = Field(
        default=None, description="Geographic origin of the local frame"
    )


class PanelSchema(BaseModel):
    """A placed panel."""

    id: str = Field(..., description="Panel identifier")
    row: int = Field(..., description="Row index")
    col: int = Field(..., description="Column index")
    center: PointSchema = Field(..., description="Center in local feet")
    position: GeoPointSchema | None = Field(
        default=None, description="Center in lat/lng for geographic roofs"
    )
    width: float
    height: float
    rated_power_watts: float
    efficiency: float = Field(..., description="Effective efficiency")


class LayoutSummarySchema(BaseModel):
    total_panels: int
    total_rated_power_watts: float
    average_efficiency: float
    utilization_ratio: float = Field(..., description="Panel area as a percentage of roof area")


class LayoutResponseSchema(BaseModel):
    """Response for layout generation."""

    is_valid: bool = Field(..., description="Whether generation was successful")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    roof: RoofSummarySchema | None = None
    layout: LayoutSummarySchema | None = None
    panels: list[PanelSchema] = Field(default_factory=list)
    production: dict[str, Any] | None = Field(
        default=None, description="Energy, financial and environmental estimate"
    )


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )
