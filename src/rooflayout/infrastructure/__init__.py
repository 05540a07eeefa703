"""Infrastructure layer - formatters, exporters and project files."""

from .exporters import JsonExporter, layout_output_to_dict
from .formatters import (
    LayoutSummaryFormatter,
    PanelTableFormatter,
    ProductionReportFormatter,
)
from .project_store import (
    ProjectDocument,
    ProjectError,
    duplicate_project,
    load_project,
    save_project,
    validate_project_data,
)

__all__ = [
    # Formatters
    "LayoutSummaryFormatter",
    "PanelTableFormatter",
    "ProductionReportFormatter",
    # Exporters
    "JsonExporter",
    "layout_output_to_dict",
    # Projects
    "ProjectDocument",
    "ProjectError",
    "duplicate_project",
    "load_project",
    "save_project",
    "validate_project_data",
]
