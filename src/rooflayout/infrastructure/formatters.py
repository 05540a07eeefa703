"""Plain-text formatters for layouts and production estimates."""

from __future__ import annotations

from rooflayout.application.dtos import LayoutOutput
from rooflayout.domain import LayoutResult
from rooflayout.domain.services import ProductionEstimate


class LayoutSummaryFormatter:
    """Formats the roof classification and layout totals."""

    def format(self, output: LayoutOutput) -> str:
        if not output.is_valid:
            return "\n".join(["Layout generation failed:"] + [f"  - {e}" for e in output.errors])

        region = output.region
        layout = output.layout
        assert region is not None and layout is not None
        classification = region.classification

        lines = [
            "ROOF LAYOUT",
            "=" * 50,
            f"Shape:          {region.shape.value}",
            f"Area:           {region.area_sqft:.1f} sq ft",
            f"Azimuth:        {region.azimuth_deg:.1f} deg",
            f"Pitch:          {region.pitch_deg:.1f} deg",
        ]
        if classification.is_computable:
            lines.append(f"Complexity:     {classification.complexity:.2f}")
            lines.append(f"Suitability:    {classification.suitability:.2f}")
            lines.append(f"Sun exposure:   {classification.sun_exposure:.2f}")
        else:
            lines.append("Scores:         n/a (degenerate outline)")
        if region.obstacles:
            lines.append(f"Obstacles:      {len(region.obstacles)}")

        lines.extend(
            [
                "-" * 50,
                f"Panels:         {layout.total_panels}",
                f"Rated power:    {layout.total_rated_power_kw:.2f} kW",
                f"Avg efficiency: {layout.average_efficiency:.1%}",
                f"Utilization:    {layout.utilization_ratio:.1f}%",
            ]
        )
        return "\n".join(lines)


class PanelTableFormatter:
    """Formats placed panels as a table, one row per panel."""

    def format(self, layout: LayoutResult) -> str:
        if layout.is_empty:
            return "No panels placed."

        lines = [
            "PANELS",
            "=" * 64,
            f"{'Id':<14} {'Row':>4} {'Col':>4} {'X (ft)':>10} {'Y (ft)':>10} {'Eff':>8} {'Sel':>5}",
            "-" * 64,
        ]
        for panel in layout.panels:
            lines.append(
                f"{panel.id:<14} {panel.row_index:>4} {panel.col_index:>4} "
                f"{panel.center.x:>10.2f} {panel.center.y:>10.2f} "
                f"{panel.effective_efficiency:>8.2%} {'*' if panel.is_selected else '':>5}"
            )
        lines.append("-" * 64)
        lines.append(
            f"{'TOTAL':<14} {layout.total_panels:>4} panels, "
            f"{layout.total_rated_power_watts:.0f} W"
        )
        return "\n".join(lines)


class ProductionReportFormatter:
    """Formats energy, financial and environmental estimates."""

    def format(self, estimate: ProductionEstimate) -> str:
        energy = estimate.energy
        financial = estimate.financial
        environmental = estimate.environmental

        lines = [
            "PRODUCTION ESTIMATE",
            "=" * 50,
            f"System size:    {estimate.system_size_kw:.2f} kW",
            "",
            "Energy",
            f"  Daily:        {energy.daily_kwh:,.1f} kWh",
            f"  Monthly:      {energy.monthly_kwh:,.0f} kWh",
            f"  Yearly:       {energy.yearly_kwh:,.0f} kWh",
            "",
            "Financial",
            f"  System cost:  ${financial.system_cost:,.0f}",
            f"  Monthly:      ${financial.monthly_savings:,.2f}",
            f"  Yearly:       ${financial.yearly_savings:,.2f}",
            f"  Lifetime:     ${financial.lifetime_savings:,.0f}",
            f"  Payback:      {financial.payback_years:.1f} years",
            f"  ROI:          {financial.roi_percent:.0f}%",
            "",
            "Environmental",
            f"  CO2 avoided:  {environmental.co2_avoided_kg_per_year:,.0f} kg/year",
            f"  Trees:        {environmental.trees_equivalent:,.0f} equivalent",
        ]
        if estimate.seasonal:
            lines.append("")
            lines.append("Seasonal (daily average)")
            for season in estimate.seasonal:
                lines.append(f"  {season.season.title():<12}  {season.daily_average_kwh:,.1f} kWh")
        return "\n".join(lines)
