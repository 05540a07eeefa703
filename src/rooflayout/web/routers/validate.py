"""Configuration validation endpoints."""

from fastapi import APIRouter

from rooflayout.application.config import load_config_from_dict, validate_config
from rooflayout.web.schemas.requests import ConfigValidateRequest
from rooflayout.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a layout configuration without generating.

    Schema errors are raised as ConfigError and answered with 422 by the
    registered handler; advisory results come back with 200.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
