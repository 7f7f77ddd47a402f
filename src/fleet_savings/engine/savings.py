"""Savings derivation — fleet configuration → yearly savings breakdown.

Pure arithmetic.  Each restriction contributes independently; the five
contributions are summed into the total.  Missing or non-positive optional
inputs zero their own contribution instead of raising.
"""

from __future__ import annotations

from fleet_savings.config.assumptions import SavingsAssumptions
from fleet_savings.config.fleet import FleetConfiguration
from fleet_savings.config.restrictions import RestrictionKind
from fleet_savings.models.results import SavingsBreakdown

_DEFAULT_ASSUMPTIONS = SavingsAssumptions()


def compute_budget_savings(config: FleetConfiguration, a: SavingsAssumptions) -> float:
    """Savings from a monthly charging budget per car."""
    budget = config.monthly_charging_budget
    if not config.has(RestrictionKind.MONTHLY_BUDGET) or budget is None or budget <= 0:
        return 0.0

    # Unrestricted cost/car/year vs budgeted cost/car/year.
    # Clamped per car: a budget above the unrestricted cost saves nothing.
    unrestricted_cost_per_car = config.yearly_mileage_allowed * a.kwh_per_km * a.average_kwh_price
    budgeted_cost_per_car = 12 * budget
    return max(0.0, unrestricted_cost_per_car - budgeted_cost_per_car) * config.car_count


def compute_price_cap_savings(config: FleetConfiguration, a: SavingsAssumptions) -> float:
    """Savings from refusing to pay more than ``kwh_price_cap`` per kWh."""
    cap = config.kwh_price_cap
    if not config.has(RestrictionKind.PRICE_CAP) or cap is None or cap <= 0:
        return 0.0

    per_car = (a.reference_kwh_price - cap) * config.yearly_mileage_allowed * a.kwh_per_km
    return per_car * config.car_count


def compute_country_restriction_savings(config: FleetConfiguration, a: SavingsAssumptions) -> float:
    """Savings from allowing charging in the home country only.

    Depends on the country list alone: exactly ``[home_country]`` saves the
    foreign charging of the share of drivers that would go abroad; any
    other list (empty, foreign, or several countries) saves nothing.
    """
    if config.country_restrictions != (a.home_country.upper(),):
        return 0.0

    return (
        config.car_count
        * a.abroad_driver_share
        * a.abroad_km_per_year
        * a.kwh_per_km
        * a.abroad_kwh_price
    )


def compute_fast_charging_savings(config: FleetConfiguration, a: SavingsAssumptions) -> float:
    """Savings from blocking fast chargers (their price premium is avoided)."""
    if not config.has(RestrictionKind.FAST_CHARGING):
        return 0.0

    return (
        config.yearly_mileage_allowed
        * a.fast_charging_share
        * a.kwh_per_km
        * a.fast_charging_premium
        * config.car_count
    )


def compute_fraud_savings(config: FleetConfiguration, a: SavingsAssumptions) -> float:
    """Fraud detection savings — independent of any restriction."""
    return config.car_count * a.fraud_savings_per_car


def compute_savings(
    config: FleetConfiguration,
    assumptions: SavingsAssumptions | None = None,
) -> SavingsBreakdown:
    """Compute the full savings breakdown for one configuration.

    Deterministic and side-effect free: the same inputs always produce an
    identical breakdown, and ``config`` is never modified.  Figures are not
    rounded here; rounding is a display concern.
    """
    a = assumptions if assumptions is not None else _DEFAULT_ASSUMPTIONS

    budget = compute_budget_savings(config, a)
    price_cap = compute_price_cap_savings(config, a)
    country = compute_country_restriction_savings(config, a)
    fast_charging = compute_fast_charging_savings(config, a)
    fraud = compute_fraud_savings(config, a)

    total = budget + price_cap + country + fast_charging + fraud

    # ── Secondary metrics ──────────────────────────────────────────────
    yearly_subscription = 12 * a.subscription_per_car_per_month * config.car_count
    return_on_investment = total - yearly_subscription
    spared_working_days = config.car_count / a.cars_per_working_day
    avoided_complaints = total / a.savings_per_avoided_complaint

    return SavingsBreakdown(
        budget_savings=budget,
        price_cap_savings=price_cap,
        country_restriction_savings=country,
        fast_charging_savings=fast_charging,
        fraud_savings=fraud,
        total_savings=total,
        return_on_investment_approx=return_on_investment,
        spared_working_days_approx=spared_working_days,
        avoided_complaints_approx=avoided_complaints,
    )
