"""Energy production, savings and environmental estimates for a layout.

The numbers are deliberately simple rules of thumb: a flat number of peak sun
hours, a single system-loss factor and a compounding electricity price.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..entities import LayoutResult

__all__ = [
    "DEFAULT_SEASONAL_FACTORS",
    "EnergyProduction",
    "EnvironmentalImpact",
    "FinancialEstimate",
    "PanelPerformance",
    "ProductionAssumptions",
    "ProductionEstimate",
    "ProductionEstimator",
    "SeasonalProduction",
]

DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365

DEFAULT_SEASONAL_FACTORS: dict[str, float] = {
    "winter": 0.6,
    "spring": 1.1,
    "summer": 1.3,
    "fall": 0.9,
}


@dataclass(frozen=True)
class ProductionAssumptions:
    """Site and market assumptions behind a production estimate.

    Attributes:
        sun_hours_per_day: Annual average of peak sun hours.
        system_efficiency: Inverter, wiring and soiling losses folded into one factor.
        electricity_rate: Price per kWh.
        annual_rate_increase: Yearly electricity price growth (0.03 = 3%).
        lifetime_years: System lifetime used for lifetime savings and ROI.
        emissions_kg_per_kwh: Grid emissions avoided per kWh produced.
        co2_kg_per_tree_year: CO2 one tree absorbs per year.
        cost_per_watt: Installed cost per watt of rated power.
        seasonal_factors: Daily production multiplier per season.
    """

    sun_hours_per_day: float = 4.2
    system_efficiency: float = 0.85
    electricity_rate: float = 0.12
    annual_rate_increase: float = 0.03
    lifetime_years: int = 25
    emissions_kg_per_kwh: float = 0.610
    co2_kg_per_tree_year: float = 21.77
    cost_per_watt: float = 3.50
    seasonal_factors: dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_SEASONAL_FACTORS)
    )

    def __post_init__(self) -> None:
        if self.sun_hours_per_day < 0:
            raise ValueError("Sun hours must be non-negative")
        if not 0 < self.system_efficiency <= 1:
            raise ValueError("System efficiency must be in (0, 1]")
        if self.electricity_rate < 0 or self.cost_per_watt < 0:
            raise ValueError("Rates and costs must be non-negative")
        if self.lifetime_years < 1:
            raise ValueError("Lifetime must be at least 1 year")
        if self.co2_kg_per_tree_year <= 0:
            raise ValueError("Tree absorption must be positive")


@dataclass(frozen=True)
class EnergyProduction:
    daily_kwh: float = 0.0
    monthly_kwh: float = 0.0
    yearly_kwh: float = 0.0


@dataclass(frozen=True)
class FinancialEstimate:
    monthly_savings: float = 0.0
    yearly_savings: float = 0.0
    lifetime_savings: float = 0.0
    system_cost: float = 0.0
    payback_years: float = 0.0
    roi_percent: float = 0.0


@dataclass(frozen=True)
class EnvironmentalImpact:
    co2_avoided_kg_per_year: float = 0.0
    co2_avoided_kg_lifetime: float = 0.0
    trees_equivalent: float = 0.0


@dataclass(frozen=True)
class SeasonalProduction:
    season: str
    daily_average_kwh: float
    monthly_average_kwh: float


@dataclass(frozen=True)
class PanelPerformance:
    """Spread of efficiency and power across the panels of a layout."""

    min_efficiency: float = 0.0
    max_efficiency: float = 0.0
    avg_efficiency: float = 0.0
    min_power_watts: float = 0.0
    max_power_watts: float = 0.0
    avg_power_watts: float = 0.0
    total_panels: int = 0


@dataclass(frozen=True)
class ProductionEstimate:
    """Everything derived from a layout's rated power and efficiency."""

    system_size_kw: float
    energy: EnergyProduction
    financial: FinancialEstimate
    environmental: EnvironmentalImpact
    seasonal: tuple[SeasonalProduction, ...]
    performance: PanelPerformance


class ProductionEstimator:
    """Estimates production and savings from a LayoutResult."""

    def __init__(self, assumptions: ProductionAssumptions | None = None) -> None:
        self.assumptions = assumptions or ProductionAssumptions()

    def estimate(self, layout: LayoutResult) -> ProductionEstimate:
        """Build the full estimate. An empty layout estimates to all zeros."""
        energy = self.energy(layout)
        return ProductionEstimate(
            system_size_kw=layout.total_rated_power_kw,
            energy=energy,
            financial=self.financial(layout, energy),
            environmental=self.environmental(energy),
            seasonal=self.seasonal(energy),
            performance=self.performance(layout),
        )

    def energy(self, layout: LayoutResult) -> EnergyProduction:
        """Daily kWh = kW x sun hours x average efficiency x system efficiency."""
        if layout.total_rated_power_watts == 0:
            return EnergyProduction()
        a = self.assumptions
        daily = (
            layout.total_rated_power_kw
            * a.sun_hours_per_day
            * layout.average_efficiency
            * a.system_efficiency
        )
        return EnergyProduction(
            daily_kwh=daily,
            monthly_kwh=daily * DAYS_PER_MONTH,
            yearly_kwh=daily * DAYS_PER_YEAR,
        )

    def financial(self, layout: LayoutResult, energy: EnergyProduction) -> FinancialEstimate:
        if energy.yearly_kwh == 0:
            return FinancialEstimate()
        a = self.assumptions
        yearly = energy.yearly_kwh * a.electricity_rate

        lifetime = 0.0
        rate = a.electricity_rate
        for _ in range(a.lifetime_years):
            lifetime += energy.yearly_kwh * rate
            rate *= 1 + a.annual_rate_increase

        system_cost = layout.total_rated_power_watts * a.cost_per_watt
        payback = system_cost / yearly if yearly > 0 else 0.0
        if payback == 0 or payback > a.lifetime_years or system_cost == 0:
            roi = 0.0
        else:
            roi = (lifetime - system_cost) / system_cost * 100
        return FinancialEstimate(
            monthly_savings=yearly / 12,
            yearly_savings=yearly,
            lifetime_savings=lifetime,
            system_cost=system_cost,
            payback_years=payback,
            roi_percent=roi,
        )

    def environmental(self, energy: EnergyProduction) -> EnvironmentalImpact:
        if energy.yearly_kwh == 0:
            return EnvironmentalImpact()
        a = self.assumptions
        co2 = energy.yearly_kwh * a.emissions_kg_per_kwh
        return EnvironmentalImpact(
            co2_avoided_kg_per_year=co2,
            co2_avoided_kg_lifetime=co2 * a.lifetime_years,
            trees_equivalent=co2 / a.co2_kg_per_tree_year,
        )

    def seasonal(self, energy: EnergyProduction) -> tuple[SeasonalProduction, ...]:
        return tuple(
            SeasonalProduction(
                season=season,
                daily_average_kwh=energy.daily_kwh * factor,
                monthly_average_kwh=energy.daily_kwh * factor * DAYS_PER_MONTH,
            )
            for season, factor in self.assumptions.seasonal_factors.items()
        )

    @staticmethod
    def performance(layout: LayoutResult) -> PanelPerformance:
        if not layout.panels:
            return PanelPerformance()
        efficiencies = [p.effective_efficiency for p in layout.panels]
        powers = [p.rated_power_watts for p in layout.panels]
        return PanelPerformance(
            min_efficiency=min(efficiencies),
            max_efficiency=max(efficiencies),
            avg_efficiency=sum(efficiencies) / len(efficiencies),
            min_power_watts=min(powers),
            max_power_watts=max(powers),
            avg_power_watts=sum(powers) / len(powers),
            total_panels=len(layout.panels),
        )
