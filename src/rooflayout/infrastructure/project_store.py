"""Saving and loading layout projects as JSON documents.

A project document stores everything needed to rebuild a layout: the local
roof outline and its geographic origin, the roof orientation, obstacles, the
panel template and spacing, and the placed panels with their selection
state. Classification is not stored; it is re-derived from the outline when
the region is rebuilt.
"""

from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from rooflayout.application.config.loader import extract_validation_errors
from rooflayout.application.config.schema import (
    GeoPointConfig,
    PanelConfig,
    PointConfig,
    SpacingConfig,
)
from rooflayout.domain import (
    GeoPoint,
    LayoutResult,
    Obstacle,
    ObstacleKind,
    Panel,
    PanelSpec,
    Point,
    Polygon,
    RoofRegion,
    SpacingSpec,
)
from rooflayout.domain.services import LocalFrame, RoofAnalyzer

logger = logging.getLogger(__name__)

PROJECT_FORMAT_VERSION = "1.0"
REQUIRED_PROJECT_FIELDS: tuple[str, ...] = ("id", "name", "created_at")


class ProjectError(Exception):
    """Exception raised when a project file cannot be saved or loaded.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, invalid_project, ...)
        path: Path to the project file (if applicable)
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ObstacleRecord(BaseModel):
    """An obstacle in the project's local frame, with sizes resolved."""

    model_config = ConfigDict(extra="forbid")

    kind: ObstacleKind
    x: float
    y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    buffer: float = Field(default=0.0, ge=0)
    name: str | None = None


class PanelRecord(BaseModel):
    """A placed panel as stored in a project file."""

    model_config = ConfigDict(extra="forbid")

    id: str
    row: int = Field(ge=0)
    col: int = Field(ge=0)
    x: float
    y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    rated_power_watts: float = Field(gt=0)
    azimuth: float
    tilt: float
    efficiency: float
    is_selected: bool = False


class LayoutSummaryRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    total_panels: int = Field(default=0, ge=0)
    total_rated_power_watts: float = Field(default=0.0, ge=0)
    average_efficiency: float = Field(default=0.0, ge=0)
    utilization_ratio: float = Field(default=0.0, ge=0)


class ProjectDocument(BaseModel):
    """A saved layout project.

    Attributes:
        id: Unique project identifier.
        name: Display name.
        version: Project file format version.
        created_at: Creation timestamp (UTC).
        last_modified: Last save timestamp (UTC).
        notes: Free-form notes.
        tags: Free-form tags.
        origin: Geographic origin of the local frame, None for planar roofs.
        boundary: Roof outline in local feet.
        area_sqft: Roof area used for utilization.
        azimuth: Roof facing in degrees.
        pitch: Roof slope in degrees.
        obstacles: Obstacles in local feet.
        panel: Panel template.
        spacing: Panel spacing.
        panels: Placed panels, in placement order.
        summary: Layout aggregates at save time.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=lambda: uuid.uuid4().hex, min_length=1)
    name: str = Field(min_length=1)
    version: str = PROJECT_FORMAT_VERSION
    created_at: datetime = Field(default_factory=_now)
    last_modified: datetime = Field(default_factory=_now)
    notes: str = ""
    tags: list[str] = Field(default_factory=list)

    origin: GeoPointConfig | None = None
    boundary: list[PointConfig] = Field(default_factory=list)
    area_sqft: float = Field(default=0.0, ge=0)
    azimuth: float = Field(default=180.0, ge=0, lt=360)
    pitch: float = Field(default=30.0, allow_inf_nan=False)
    obstacles: list[ObstacleRecord] = Field(default_factory=list)
    panel: PanelConfig = Field(default_factory=PanelConfig)
    spacing: SpacingConfig = Field(default_factory=SpacingConfig)
    panels: list[PanelRecord] = Field(default_factory=list)
    summary: LayoutSummaryRecord = Field(default_factory=LayoutSummaryRecord)

    @classmethod
    def from_state(
        cls,
        name: str,
        region: RoofRegion,
        panel_spec: PanelSpec,
        spacing: SpacingSpec,
        layout: LayoutResult,
        *,
        notes: str = "",
        tags: list[str] | None = None,
    ) -> "ProjectDocument":
        """Capture a region, its generation inputs and a layout as a new document.

        Raises:
            ProjectError: If a captured value is not storable, e.g. a blank name.
        """
        origin = region.origin
        try:
            return cls(
                name=name,
                notes=notes,
                tags=list(tags or []),
                origin=GeoPointConfig(lat=origin.lat, lng=origin.lng) if origin else None,
                boundary=[PointConfig(x=p.x, y=p.y) for p in region.boundary],
                area_sqft=region.area_sqft,
                azimuth=region.azimuth_deg,
                pitch=region.pitch_deg,
                obstacles=[
                    ObstacleRecord(
                        kind=o.kind,
                        x=o.center.x,
                        y=o.center.y,
                        width=o.width,
                        height=o.height,
                        buffer=o.buffer_margin,
                        name=o.name,
                    )
                    for o in region.obstacles
                ],
                panel=PanelConfig(
                    width=panel_spec.width,
                    height=panel_spec.height,
                    power=panel_spec.rated_power_watts,
                    efficiency=panel_spec.rated_efficiency,
                ),
                spacing=SpacingConfig(
                    horizontal=spacing.horizontal_gap,
                    vertical=spacing.vertical_gap,
                ),
                panels=_panel_records(layout),
                summary=_summary_record(layout),
            )
        except PydanticValidationError as e:
            details = extract_validation_errors(e)
            raise ProjectError(
                message="Cannot capture project: "
                + "; ".join(f"{d['path']}: {d['message']}" for d in details),
                error_type="validation",
                details=details,
            ) from e

    def to_region(self, analyzer: RoofAnalyzer | None = None) -> RoofRegion:
        """Rebuild the roof region; classification is derived again from the outline."""
        analyzer = analyzer or RoofAnalyzer()
        return analyzer.analyze(
            Polygon(tuple(Point(p.x, p.y) for p in self.boundary)),
            area_sqft=self.area_sqft,
            azimuth_deg=self.azimuth,
            pitch_deg=self.pitch,
            obstacles=[
                Obstacle(
                    kind=o.kind,
                    center=Point(o.x, o.y),
                    width=o.width,
                    height=o.height,
                    buffer_margin=o.buffer,
                    name=o.name,
                )
                for o in self.obstacles
            ],
            origin=GeoPoint(self.origin.lat, self.origin.lng) if self.origin else None,
        )

    def to_frame(self) -> LocalFrame | None:
        if self.origin is None:
            return None
        return LocalFrame(GeoPoint(self.origin.lat, self.origin.lng))

    def to_panel_spec(self) -> PanelSpec:
        return PanelSpec(
            width=self.panel.width,
            height=self.panel.height,
            rated_power_watts=self.panel.power,
            rated_efficiency=self.panel.efficiency,
        )

    def to_spacing(self) -> SpacingSpec:
        return SpacingSpec(
            horizontal_gap=self.spacing.horizontal,
            vertical_gap=self.spacing.vertical,
        )

    def to_layout(self) -> LayoutResult:
        """Rebuild the saved layout, selection flags included."""
        panels = tuple(
            Panel(
                id=r.id,
                center=Point(r.x, r.y),
                row_index=r.row,
                col_index=r.col,
                width=r.width,
                height=r.height,
                rated_power_watts=r.rated_power_watts,
                azimuth_deg=r.azimuth,
                tilt_deg=r.tilt,
                effective_efficiency=r.efficiency,
                is_selected=r.is_selected,
            )
            for r in self.panels
        )
        return LayoutResult(
            panels=panels,
            total_panels=self.summary.total_panels,
            total_rated_power_watts=self.summary.total_rated_power_watts,
            average_efficiency=self.summary.average_efficiency,
            utilization_ratio=self.summary.utilization_ratio,
        )

    def with_layout(self, layout: LayoutResult) -> "ProjectDocument":
        """Copy of this document holding ``layout`` instead of the saved one."""
        return self.model_copy(
            update={
                "panels": _panel_records(layout),
                "summary": _summary_record(layout),
                "last_modified": _now(),
            }
        )


def _panel_records(layout: LayoutResult) -> list[PanelRecord]:
    return [
        PanelRecord(
            id=p.id,
            row=p.row_index,
            col=p.col_index,
            x=p.center.x,
            y=p.center.y,
            width=p.width,
            height=p.height,
            rated_power_watts=p.rated_power_watts,
            azimuth=p.azimuth_deg,
            tilt=p.tilt_deg,
            efficiency=p.effective_efficiency,
            is_selected=p.is_selected,
        )
        for p in layout.panels
    ]


def _summary_record(layout: LayoutResult) -> LayoutSummaryRecord:
    return LayoutSummaryRecord(
        total_panels=layout.total_panels,
        total_rated_power_watts=layout.total_rated_power_watts,
        average_efficiency=layout.average_efficiency,
        utilization_ratio=layout.utilization_ratio,
    )


def validate_project_data(data: Any) -> list[str]:
    """Check that raw project data has the fields every project needs.

    Returns:
        Error messages; empty when the data can be loaded.
    """
    if not isinstance(data, dict):
        return ["Project data must be a JSON object"]
    errors = []
    for name in REQUIRED_PROJECT_FIELDS:
        if data.get(name) in (None, ""):
            errors.append(f"Missing required project field: {name}")
    return errors


def save_project(document: ProjectDocument, path: Path) -> ProjectDocument:
    """Write a project document to ``path``.

    Returns:
        The document as written, with ``last_modified`` updated.

    Raises:
        ProjectError: If the file cannot be written.
    """
    document = document.model_copy(update={"last_modified": _now()})
    try:
        path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        raise ProjectError(
            message=f"Error writing project file: {path}: {e}",
            error_type="file_write_error",
            path=path,
        )
    logger.debug(f"Saved project {document.id} ({len(document.panels)} panels) to {path}")
    return document


def load_project(path: Path) -> ProjectDocument:
    """Load a project document from ``path``.

    Raises:
        ProjectError: If the file is missing, unreadable, not JSON, or not a
            valid project.
    """
    if not path.exists():
        raise ProjectError(
            message=f"Project file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProjectError(
            message=f"Error reading project file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ProjectError(
            message=f"Invalid JSON in project file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
        )

    missing = validate_project_data(data)
    if missing:
        raise ProjectError(
            message=f"Invalid project file: {path}: " + "; ".join(missing),
            error_type="invalid_project",
            path=path,
            details=[{"message": m} for m in missing],
        )

    try:
        return ProjectDocument.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ProjectError(
            message=f"Invalid project file: {path}: "
            + "; ".join(f"{d['path']}: {d['message']}" for d in details),
            error_type="validation",
            path=path,
            details=details,
        )


def duplicate_project(document: ProjectDocument) -> ProjectDocument:
    """Copy a project under a new id and a "(Copy)" name."""
    now = _now()
    return document.model_copy(
        update={
            "id": uuid.uuid4().hex,
            "name": f"{document.name} (Copy)",
            "created_at": now,
            "last_modified": now,
        },
        deep=True,
    )
