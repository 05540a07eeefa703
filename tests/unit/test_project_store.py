"""Unit tests for project documents and project files.

These tests verify:
- Capturing a region, inputs and layout as a document
- Rebuilding the region with a re-derived classification
- Save and load through a JSON file, selection state included
- Error categories for missing, malformed and incomplete files
- Duplicating a project
"""

import json
from pathlib import Path

import pytest

from rooflayout.application.selection import toggle_selection
from rooflayout.application.services import LayoutPlanner
from rooflayout.domain.entities import LayoutResult, Obstacle, RoofRegion
from rooflayout.domain.services import RoofAnalyzer
from rooflayout.domain.value_objects import PanelSpec, SpacingSpec
from rooflayout.infrastructure import (
    ProjectDocument,
    ProjectError,
    duplicate_project,
    load_project,
    save_project,
    validate_project_data,
)


@pytest.fixture
def document(
    planner: LayoutPlanner,
    rect_region: RoofRegion,
    chimney: Obstacle,
    panel_spec: PanelSpec,
    spacing: SpacingSpec,
) -> ProjectDocument:
    region = rect_region.with_obstacle(chimney)
    layout = toggle_selection(planner.plan(region, panel_spec, spacing), "panel_0_0")
    return ProjectDocument.from_state(
        "Garage roof", region, panel_spec, spacing, layout, notes="south face", tags=["garage"]
    )


class TestProjectDocument:
    """Tests for ProjectDocument construction and conversion."""

    def test_from_state(self, document: ProjectDocument) -> None:
        assert document.name == "Garage roof"
        assert document.id
        assert document.origin is None
        assert len(document.boundary) == 4
        assert document.summary.total_panels == 39
        assert len(document.panels) == 39
        assert document.obstacles[0].buffer == 3.0

    def test_to_region_rederives_classification(
        self, document: ProjectDocument, rect_region: RoofRegion
    ) -> None:
        region = document.to_region()
        assert region.classification == rect_region.classification
        assert region.area_sqft == rect_region.area_sqft
        assert len(region.obstacles) == 1

    def test_to_layout_keeps_selection(self, document: ProjectDocument) -> None:
        layout = document.to_layout()
        assert layout.total_panels == 39
        assert layout.panel("panel_0_0").is_selected

    def test_regenerating_matches_saved_layout(
        self, document: ProjectDocument, planner: LayoutPlanner
    ) -> None:
        regenerated = planner.plan(
            document.to_region(), document.to_panel_spec(), document.to_spacing()
        )
        assert [p.id for p in regenerated.panels] == [p.id for p in document.panels]

    def test_with_layout(self, document: ProjectDocument) -> None:
        emptied = document.with_layout(LayoutResult())
        assert emptied.panels == []
        assert emptied.summary.total_panels == 0
        assert emptied.id == document.id

    def test_planar_project_has_no_frame(self, document: ProjectDocument) -> None:
        assert document.to_frame() is None

    def test_blank_name_raises_project_error(
        self,
        planner: LayoutPlanner,
        rect_region: RoofRegion,
        panel_spec: PanelSpec,
        spacing: SpacingSpec,
    ) -> None:
        layout = planner.plan(rect_region, panel_spec, spacing)
        with pytest.raises(ProjectError) as exc_info:
            ProjectDocument.from_state("", rect_region, panel_spec, spacing, layout)
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "name"


class TestSteepPitch:
    """Any pitch the analyzer accepts can be saved and reloaded."""

    @pytest.mark.parametrize("pitch", [0.0, 90.0, 100.0])
    def test_round_trip(
        self,
        pitch: float,
        analyzer: RoofAnalyzer,
        planner: LayoutPlanner,
        panel_spec: PanelSpec,
        spacing: SpacingSpec,
        tmp_path: Path,
    ) -> None:
        region = analyzer.analyze_points(
            [(0, 0), (40, 0), (40, 30), (0, 30)], azimuth_deg=180.0, pitch_deg=pitch
        )
        layout = planner.plan(region, panel_spec, spacing)
        assert layout.total_panels == 48

        document = ProjectDocument.from_state("Steep", region, panel_spec, spacing, layout)
        path = tmp_path / "steep.json"
        save_project(document, path)
        loaded = load_project(path)

        assert loaded.pitch == pitch
        replayed = planner.plan(loaded.to_region(), loaded.to_panel_spec(), loaded.to_spacing())
        assert replayed == layout


class TestSaveAndLoad:
    """Tests for save_project and load_project."""

    def test_round_trip(self, document: ProjectDocument, tmp_path: Path) -> None:
        path = tmp_path / "project.json"
        saved = save_project(document, path)
        loaded = load_project(path)
        assert loaded == saved
        assert saved.last_modified >= document.last_modified

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ProjectError) as exc_info:
            load_project(tmp_path / "nope.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ProjectError) as exc_info:
            load_project(path)
        assert exc_info.value.error_type == "json_parse"

    def test_missing_required_fields(self, tmp_path: Path) -> None:
        path = tmp_path / "incomplete.json"
        path.write_text(json.dumps({"name": "x"}), encoding="utf-8")
        with pytest.raises(ProjectError) as exc_info:
            load_project(path)
        assert exc_info.value.error_type == "invalid_project"
        assert "id" in str(exc_info.value)

    def test_schema_violation(self, document: ProjectDocument, tmp_path: Path) -> None:
        data = json.loads(document.model_dump_json())
        data["azimuth"] = 400
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ProjectError) as exc_info:
            load_project(path)
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "azimuth"

    def test_write_error(self, document: ProjectDocument, tmp_path: Path) -> None:
        with pytest.raises(ProjectError) as exc_info:
            save_project(document, tmp_path / "missing-dir" / "project.json")
        assert exc_info.value.error_type == "file_write_error"


class TestValidateProjectData:
    def test_complete(self) -> None:
        assert validate_project_data({"id": "a", "name": "b", "created_at": "c"}) == []

    def test_not_an_object(self) -> None:
        assert validate_project_data([1, 2]) == ["Project data must be a JSON object"]

    def test_blank_fields(self) -> None:
        errors = validate_project_data({"id": "", "name": "roof"})
        assert errors == [
            "Missing required project field: id",
            "Missing required project field: created_at",
        ]


class TestDuplicateProject:
    def test_duplicate(self, document: ProjectDocument) -> None:
        copy = duplicate_project(document)
        assert copy.id != document.id
        assert copy.name == "Garage roof (Copy)"
        assert copy.panels == document.panels
        assert copy.created_at >= document.created_at
