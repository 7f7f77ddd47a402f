"""Result types — the contract between the engine, the controller and the host.

Everything here is a plain value object: built on each evaluation, never
updated in place.
"""

from __future__ import annotations

from pydantic import BaseModel

from fleet_savings.config.restrictions import RestrictionKind


# ═══════════════════════════════════════════════════════════════════════════
# Savings
# ═══════════════════════════════════════════════════════════════════════════

class SavingsBreakdown(BaseModel):
    """Projected yearly savings for one fleet configuration (€/year)."""

    budget_savings: float
    """max(0, mileage × kWh/km × avg price − 12 × monthly budget) × cars."""

    price_cap_savings: float
    """(reference price − cap) × mileage × kWh/km × cars."""

    country_restriction_savings: float
    """Non-zero only when charging is restricted to the home country alone."""

    fast_charging_savings: float
    """mileage × fast share × kWh/km × fast premium × cars."""

    fraud_savings: float
    """cars × fraud savings per car — always present."""

    total_savings: float
    """Sum of the five components above."""

    # --- Secondary metrics (rough approximations) ---
    return_on_investment_approx: float
    """total − 12 × subscription × cars."""

    spared_working_days_approx: float
    """cars / cars_per_working_day."""

    avoided_complaints_approx: float
    """total / savings_per_avoided_complaint."""


# ═══════════════════════════════════════════════════════════════════════════
# Restriction selection
# ═══════════════════════════════════════════════════════════════════════════

class RestrictionOption(BaseModel):
    """One entry of the restriction selector."""

    kind: RestrictionKind
    label: str
    disabled: bool = False


class RestrictionSelection(BaseModel):
    """Outcome of applying a requested restriction set."""

    selected: frozenset[RestrictionKind]
    """The requested set, unchanged."""

    availability: dict[RestrictionKind, bool]
    """Per kind: True when it can currently be selected."""

    options: list[RestrictionOption]
    """Selector entries in display order, with ``disabled`` flags."""
