"""Unit tests for configuration loading and error reporting."""

import json
from pathlib import Path
from typing import Any

import pytest

from rooflayout.application.config import (
    ConfigError,
    LayoutConfiguration,
    load_config,
    load_config_from_dict,
)
from rooflayout.application.config.loader import format_json_path


class TestFormatJsonPath:
    @pytest.mark.parametrize(
        "loc,expected",
        [
            (("roof", "pitch"), "roof.pitch"),
            (("obstacles", 0, "width"), "obstacles[0].width"),
            (("roof", "points", 2, "x"), "roof.points[2].x"),
            ((0,), "[0]"),
            ((), ""),
        ],
    )
    def test_format(self, loc: tuple, expected: str) -> None:
        assert format_json_path(loc) == expected


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_valid_file(self, config_file: Path) -> None:
        config = load_config(config_file)
        assert isinstance(config, LayoutConfiguration)
        assert len(config.roof.points) == 4

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.0",\n  "roof": }', encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 2
        assert "line 2" in str(error)

    def test_schema_violation_reports_paths(
        self, tmp_path: Path, config_data: dict[str, Any]
    ) -> None:
        config_data["roof"]["pitch"] = 120
        config_data["obstacles"] = [{"kind": "vent", "x": 1, "y": 1, "width": -2}]
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(config_data), encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "validation"
        paths = {d["path"] for d in error.details}
        assert "roof.pitch" in paths
        assert "obstacles[0].width" in paths
        assert "(got: 120)" in error.message

    def test_directory_is_a_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.error_type == "file_read_error"


class TestLoadConfigFromDict:
    def test_valid(self, config_data: dict[str, Any]) -> None:
        assert load_config_from_dict(config_data).roof.pitch == 30

    def test_invalid(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"roof": {"points": []}})
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.path is None
        assert any(d["path"] == "schema_version" for d in error.details)
