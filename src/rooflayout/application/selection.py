"""Panel selection and editing on a finished layout.

Selection flags are the only panel fields callers may change without a
regeneration. Every function returns a new LayoutResult and leaves the one
passed in untouched.
"""

from __future__ import annotations

from dataclasses import replace

from rooflayout.domain.entities import LayoutResult, Panel
from rooflayout.domain.services import LayoutScorer
from rooflayout.domain.value_objects import PanelSpec

__all__ = [
    "delete_selected",
    "deselect_all",
    "select_all",
    "selected_panels",
    "toggle_selection",
]


def _with_panels(result: LayoutResult, panels: tuple[Panel, ...]) -> LayoutResult:
    # Selection does not change any aggregate.
    return replace(result, panels=panels)


def toggle_selection(result: LayoutResult, panel_id: str) -> LayoutResult:
    """Flip the selection flag of one panel.

    Raises:
        KeyError: If no panel has ``panel_id``.
    """
    if result.panel(panel_id) is None:
        raise KeyError(f"No panel with id {panel_id!r}")
    panels = tuple(
        replace(p, is_selected=not p.is_selected) if p.id == panel_id else p
        for p in result.panels
    )
    return _with_panels(result, panels)


def select_all(result: LayoutResult) -> LayoutResult:
    return _with_panels(result, tuple(replace(p, is_selected=True) for p in result.panels))


def deselect_all(result: LayoutResult) -> LayoutResult:
    return _with_panels(result, tuple(replace(p, is_selected=False) for p in result.panels))


def selected_panels(result: LayoutResult) -> list[Panel]:
    return [p for p in result.panels if p.is_selected]


def delete_selected(
    result: LayoutResult,
    region_area: float,
    spec: PanelSpec,
    scorer: LayoutScorer | None = None,
) -> LayoutResult:
    """Remove the selected panels and re-aggregate what is left.

    Args:
        result: Current layout.
        region_area: Roof area for the utilization ratio.
        spec: Panel template for the utilization ratio.
        scorer: Scorer used for aggregation.

    Returns:
        A new LayoutResult without the selected panels.
    """
    scorer = scorer or LayoutScorer()
    remaining = [p for p in result.panels if not p.is_selected]
    return scorer.summarize(remaining, region_area, spec)
