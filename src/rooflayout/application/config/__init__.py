"""Configuration loading, validation and conversion for layout files."""

from rooflayout.application.config.adapter import (
    config_to_assumptions,
    config_to_obstacle,
    config_to_panel_spec,
    config_to_region,
    config_to_spacing,
)
from rooflayout.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from rooflayout.application.config.schema import (
    SUPPORTED_VERSIONS,
    GeoPointConfig,
    LayoutConfiguration,
    ObstacleConfig,
    OutputConfig,
    PanelConfig,
    PointConfig,
    ProductionConfig,
    RoofConfig,
    SpacingConfig,
)
from rooflayout.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_roof_advisories,
    validate_config,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "GeoPointConfig",
    "LayoutConfiguration",
    "ObstacleConfig",
    "OutputConfig",
    "PanelConfig",
    "PointConfig",
    "ProductionConfig",
    "RoofConfig",
    "SpacingConfig",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_roof_advisories",
    "validate_config",
    # Adapters
    "config_to_assumptions",
    "config_to_obstacle",
    "config_to_panel_spec",
    "config_to_region",
    "config_to_spacing",
]
