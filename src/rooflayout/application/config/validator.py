"""Validation structures and roof layout advisory checks.

Schema-level problems are caught by pydantic while loading. The checks here
need the classified roof: they report outlines that cannot hold any panel as
errors and report orientations or placements that will give a poor layout as
warnings.
"""

from dataclasses import dataclass, field
from typing import Any

from rooflayout.application.config.adapter import (
    config_to_panel_spec,
    config_to_region,
)
from rooflayout.application.config.schema import LayoutConfiguration
from rooflayout.domain.services import bounding_box, point_in_polygon

# Roofs below this area rarely hold a useful array.
SMALL_ROOF_AREA_SQFT: float = 200.0

# Facing more than this many degrees away from due south counts as north-facing.
MAX_AZIMUTH_DEVIATION: float = 90.0


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "roof.points")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def validate_config(config: LayoutConfiguration) -> ValidationResult:
    """Perform full validation of a layout configuration.

    Args:
        config: A LayoutConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    outline_path = "roof.coordinates" if config.roof.is_geographic else "roof.points"

    try:
        region, _ = config_to_region(config)
    except ValueError as e:
        return result.add_error(outline_path, str(e))

    if region.boundary.is_degenerate:
        return result.add_error(
            outline_path,
            "Roof outline needs at least 3 distinct vertices",
            value=region.boundary.vertex_count,
        )
    if region.area_sqft <= 0:
        return result.add_error(
            outline_path, "Roof outline encloses no area", value=region.area_sqft
        )

    result.merge(check_roof_advisories(config))
    return result


def check_roof_advisories(config: LayoutConfiguration) -> ValidationResult:
    """Check orientation, size and obstacle placement against layout rules of thumb."""
    result = ValidationResult()
    region, _ = config_to_region(config)
    spec = config_to_panel_spec(config)

    deviation = abs(region.azimuth_deg - 180.0)
    if deviation > MAX_AZIMUTH_DEVIATION:
        result.add_warning(
            path="roof.azimuth",
            message=(
                f"Roof faces {region.azimuth_deg:.0f} degrees, "
                f"{deviation:.0f} degrees away from south"
            ),
            suggestion="North-facing roofs produce much less; consider another roof face",
        )

    if region.area_sqft < SMALL_ROOF_AREA_SQFT:
        result.add_warning(
            path="roof",
            message=f"Roof area of {region.area_sqft:.0f} sq ft is very small",
            suggestion=f"Roofs under {SMALL_ROOF_AREA_SQFT:.0f} sq ft rarely hold a useful array",
        )

    bbox = bounding_box(region.boundary)
    if spec.width > bbox.width or spec.height > bbox.height:
        result.add_warning(
            path="panel",
            message=(
                f"Panel ({spec.width} x {spec.height} ft) is larger than the roof "
                f"extent ({bbox.width:.1f} x {bbox.height:.1f} ft)"
            ),
            suggestion="No panel will be placed; check panel dimensions and units",
        )

    for i, obstacle in enumerate(region.obstacles):
        if not point_in_polygon(obstacle.center, region.boundary):
            result.add_warning(
                path=f"obstacles[{i}]",
                message=(
                    f"Obstacle '{obstacle.name or obstacle.kind.value}' is outside "
                    "the roof outline"
                ),
                suggestion="Check the obstacle position; it will not affect the layout",
            )

    return result
