"""JSON export of generated layouts."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from rooflayout.application.dtos import LayoutOutput
from rooflayout.domain import Panel
from rooflayout.domain.services import LocalFrame


def _panel_to_dict(panel: Panel, frame: LocalFrame | None) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": panel.id,
        "row": panel.row_index,
        "col": panel.col_index,
        "center": {"x": panel.center.x, "y": panel.center.y},
        "corners": [{"x": c.x, "y": c.y} for c in panel.corners],
        "width": panel.width,
        "height": panel.height,
        "rated_power_watts": panel.rated_power_watts,
        "azimuth": panel.azimuth_deg,
        "tilt": panel.tilt_deg,
        "efficiency": panel.effective_efficiency,
        "is_selected": panel.is_selected,
    }
    if frame is not None:
        geo = frame.to_geographic(panel.center)
        data["position"] = {"lat": geo.lat, "lng": geo.lng}
        data["geo_corners"] = [
            {"lat": g.lat, "lng": g.lng}
            for g in (frame.to_geographic(c) for c in panel.corners)
        ]
    return data


def layout_output_to_dict(output: LayoutOutput) -> dict[str, Any]:
    """Plain-data view of a LayoutOutput, shared by the JSON exporter and the API."""
    if not output.is_valid:
        return {"errors": list(output.errors)}

    region = output.region
    layout = output.layout
    assert region is not None and layout is not None
    classification = region.classification

    data: dict[str, Any] = {
        "roof": {
            "shape": region.shape.value,
            "area_sqft": region.area_sqft,
            "azimuth": region.azimuth_deg,
            "pitch": region.pitch_deg,
            "complexity": classification.complexity,
            "suitability": classification.suitability,
            "sun_exposure": classification.sun_exposure,
            "boundary": [{"x": p.x, "y": p.y} for p in region.boundary],
            "obstacles": [
                {
                    "kind": o.kind.value,
                    "name": o.name,
                    "center": {"x": o.center.x, "y": o.center.y},
                    "width": o.width,
                    "height": o.height,
                    "buffer": o.buffer_margin,
                }
                for o in region.obstacles
            ],
        },
        "layout": {
            "total_panels": layout.total_panels,
            "total_rated_power_watts": layout.total_rated_power_watts,
            "average_efficiency": layout.average_efficiency,
            "utilization_ratio": layout.utilization_ratio,
            "panels": [_panel_to_dict(p, output.frame) for p in layout.panels],
        },
    }
    if output.frame is not None:
        origin = output.frame.origin
        data["roof"]["origin"] = {"lat": origin.lat, "lng": origin.lng}
    if output.production is not None:
        data["production"] = asdict(output.production)
    return data


class JsonExporter:
    """Exports layout data as JSON."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def export(self, output: LayoutOutput) -> str:
        """Export layout output as JSON string."""
        return json.dumps(layout_output_to_dict(output), indent=self.indent)
