"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class LayoutRequest(BaseModel):
    """Request for generating a layout from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full layout configuration JSON")
    include_geo: bool = Field(
        default=True, description="Include lat/lng for panels of geographic roofs"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Layout configuration JSON")
