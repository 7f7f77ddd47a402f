"""Tests for engine/savings.py — hand-calculated expected values."""

from __future__ import annotations

import pytest

from fleet_savings.config import FleetConfiguration, RestrictionKind, SavingsAssumptions
from fleet_savings.engine.savings import (
    compute_budget_savings,
    compute_country_restriction_savings,
    compute_price_cap_savings,
    compute_savings,
)


# ═══════════════════════════════════════════════════════════════════════════
# Worked scenarios
# ═══════════════════════════════════════════════════════════════════════════

def test_no_restrictions_only_fraud(plain_fleet: FleetConfiguration):
    s = compute_savings(plain_fleet)
    # 10 × 78 = 780
    assert s.fraud_savings == 780
    assert s.total_savings == 780
    assert s.budget_savings == 0
    assert s.price_cap_savings == 0
    assert s.country_restriction_savings == 0
    assert s.fast_charging_savings == 0


def test_monthly_budget(budget_fleet: FleetConfiguration):
    s = compute_savings(budget_fleet)
    # (20000 × 0.2 × 0.45 − 12 × 50) × 10 = (1800 − 600) × 10 = 12000
    assert s.budget_savings == pytest.approx(12_000)
    assert s.total_savings == pytest.approx(12_780)


def test_price_cap(price_cap_fleet: FleetConfiguration):
    s = compute_savings(price_cap_fleet)
    # (0.65 − 0.30) × 20000 × 0.2 × 10 = 14000
    assert s.price_cap_savings == pytest.approx(14_000)
    assert s.total_savings == pytest.approx(14_780)


def test_belgium_only(belgium_fleet: FleetConfiguration):
    s = compute_savings(belgium_fleet)
    # 100 × 0.1 × 2500 × 0.2 × 0.85 = 4250
    assert s.country_restriction_savings == pytest.approx(4_250)
    assert s.fraud_savings == 7_800
    assert s.total_savings == pytest.approx(12_050)


def test_fast_charging(fast_charging_fleet: FleetConfiguration):
    s = compute_savings(fast_charging_fleet)
    # 15000 × 0.3 × 0.2 × 0.4 × 5 = 1800
    assert s.fast_charging_savings == pytest.approx(1_800)
    assert s.total_savings == pytest.approx(2_190)


def test_all_compatible_restrictions_add_up():
    config = FleetConfiguration(
        car_count=10,
        yearly_mileage_allowed=20_000,
        restrictions={
            RestrictionKind.MONTHLY_BUDGET,
            RestrictionKind.COUNTRY_RESTRICTION,
            RestrictionKind.FAST_CHARGING,
        },
        country_restrictions=["BE"],
        monthly_charging_budget=50,
    )
    s = compute_savings(config)
    # budget 12000 + country 425 + fast 20000×0.3×0.2×0.4×10 = 4800 + fraud 780
    assert s.country_restriction_savings == pytest.approx(425)
    assert s.fast_charging_savings == pytest.approx(4_800)
    assert s.total_savings == pytest.approx(12_000 + 425 + 4_800 + 780)


# ═══════════════════════════════════════════════════════════════════════════
# Budget
# ═══════════════════════════════════════════════════════════════════════════

class TestBudget:

    def test_budget_above_cost_clamps_to_zero(self):
        config = FleetConfiguration(
            car_count=10,
            yearly_mileage_allowed=20_000,
            restrictions={RestrictionKind.MONTHLY_BUDGET},
            monthly_charging_budget=500,  # 6000/year > 1800 unrestricted
        )
        assert compute_savings(config).budget_savings == 0

    @pytest.mark.parametrize("budget", [1, 10, 149, 150, 151, 1_000, 50_000])
    def test_never_negative(self, budget: float):
        config = FleetConfiguration(
            car_count=3,
            yearly_mileage_allowed=20_000,
            restrictions={RestrictionKind.MONTHLY_BUDGET},
            monthly_charging_budget=budget,
        )
        assert compute_savings(config).budget_savings >= 0

    def test_missing_budget_is_zero(self):
        config = FleetConfiguration(
            car_count=10,
            yearly_mileage_allowed=20_000,
            restrictions={RestrictionKind.MONTHLY_BUDGET},
        )
        s = compute_savings(config)
        assert s.budget_savings == 0
        assert s.total_savings == 780

    def test_budget_ignored_without_restriction(self, assumptions: SavingsAssumptions):
        config = FleetConfiguration(
            car_count=10, yearly_mileage_allowed=20_000, monthly_charging_budget=50,
        )
        assert compute_budget_savings(config, assumptions) == 0


# ═══════════════════════════════════════════════════════════════════════════
# Price cap
# ═══════════════════════════════════════════════════════════════════════════

class TestPriceCap:

    def test_cap_at_reference_price_saves_nothing(self):
        config = FleetConfiguration(
            car_count=10,
            yearly_mileage_allowed=20_000,
            restrictions={RestrictionKind.PRICE_CAP},
            kwh_price_cap=0.65,
        )
        assert compute_savings(config).price_cap_savings == pytest.approx(0)

    def test_missing_cap_is_zero(self, assumptions: SavingsAssumptions):
        config = FleetConfiguration(
            car_count=10,
            yearly_mileage_allowed=20_000,
            restrictions={RestrictionKind.PRICE_CAP},
        )
        assert compute_price_cap_savings(config, assumptions) == 0

    def test_lower_cap_saves_more(self):
        def savings(cap: float) -> float:
            return compute_savings(FleetConfiguration(
                car_count=4,
                yearly_mileage_allowed=10_000,
                restrictions={RestrictionKind.PRICE_CAP},
                kwh_price_cap=cap,
            )).price_cap_savings

        assert savings(0.20) > savings(0.40) > savings(0.60)

    def test_budget_and_cap_never_both_positive(self, budget_fleet, price_cap_fleet):
        for config in (budget_fleet, price_cap_fleet):
            s = compute_savings(config)
            assert not (s.budget_savings > 0 and s.price_cap_savings > 0)


# ═══════════════════════════════════════════════════════════════════════════
# Country restriction
# ═══════════════════════════════════════════════════════════════════════════

class TestCountryRestriction:

    @pytest.mark.parametrize(
        "countries, expected",
        [
            ([], 0.0),
            (["BE"], 100 * 0.1 * 2_500 * 0.2 * 0.85),
            (["NL"], 0.0),
            (["BE", "NL"], 0.0),
            (["BE", "BE"], 0.0),
            (["BE", "FR", "DE"], 0.0),
        ],
    )
    def test_cliff_shape(self, countries: list[str], expected: float):
        config = FleetConfiguration(
            car_count=100,
            yearly_mileage_allowed=20_000,
            restrictions={RestrictionKind.COUNTRY_RESTRICTION},
            country_restrictions=countries,
        )
        assert compute_savings(config).country_restriction_savings == pytest.approx(expected)

    def test_lower_case_code_counts_as_belgium(self):
        config = FleetConfiguration(
            car_count=100, yearly_mileage_allowed=20_000, country_restrictions=["be"],
        )
        assert compute_savings(config).country_restriction_savings == pytest.approx(4_250)

    def test_independent_of_restriction_flag(self, assumptions: SavingsAssumptions):
        """Only the country list matters, not whether the kind is selected."""
        config = FleetConfiguration(
            car_count=100, yearly_mileage_allowed=20_000, country_restrictions=["BE"],
        )
        assert compute_country_restriction_savings(config, assumptions) == pytest.approx(4_250)

    def test_other_home_country(self):
        a = SavingsAssumptions(home_country="NL")
        be = FleetConfiguration(car_count=100, yearly_mileage_allowed=1, country_restrictions=["BE"])
        nl = FleetConfiguration(car_count=100, yearly_mileage_allowed=1, country_restrictions=["NL"])
        assert compute_savings(be, a).country_restriction_savings == 0
        assert compute_savings(nl, a).country_restriction_savings == pytest.approx(4_250)


# ═══════════════════════════════════════════════════════════════════════════
# Secondary metrics
# ═══════════════════════════════════════════════════════════════════════════

class TestSecondaryMetrics:

    def test_values(self, budget_fleet: FleetConfiguration):
        s = compute_savings(budget_fleet)
        # ROI = 12780 − 5 × 12 × 10 = 12180
        assert s.return_on_investment_approx == pytest.approx(12_180)
        assert s.spared_working_days_approx == 10 / 24
        # 12780 / 160 = 79.875
        assert s.avoided_complaints_approx == pytest.approx(79.875)

    def test_roi_can_be_negative(self):
        a = SavingsAssumptions(subscription_per_car_per_month=20)
        s = compute_savings(FleetConfiguration(car_count=1, yearly_mileage_allowed=1), a)
        # 78 − 240
        assert s.return_on_investment_approx == pytest.approx(-162)

    def test_overridden_constants(self, plain_fleet: FleetConfiguration):
        a = SavingsAssumptions(cars_per_working_day=10, savings_per_avoided_complaint=78)
        s = compute_savings(plain_fleet, a)
        assert s.spared_working_days_approx == pytest.approx(1.0)
        assert s.avoided_complaints_approx == pytest.approx(10.0)


# ═══════════════════════════════════════════════════════════════════════════
# Purity
# ═══════════════════════════════════════════════════════════════════════════

class TestPurity:

    def test_idempotent(self, budget_fleet: FleetConfiguration):
        assert compute_savings(budget_fleet) == compute_savings(budget_fleet)

    def test_does_not_mutate_input(self, belgium_fleet: FleetConfiguration):
        before = belgium_fleet.model_dump()
        compute_savings(belgium_fleet)
        assert belgium_fleet.model_dump() == before

    def test_total_is_sum_of_components(self, belgium_fleet, fast_charging_fleet, budget_fleet):
        for config in (belgium_fleet, fast_charging_fleet, budget_fleet):
            s = compute_savings(config)
            parts = (
                s.budget_savings + s.price_cap_savings + s.country_restriction_savings
                + s.fast_charging_savings + s.fraud_savings
            )
            assert s.total_savings == parts

    def test_total_exact_with_fractional_inputs(self):
        config = FleetConfiguration(
            car_count=1,
            yearly_mileage_allowed=1_784.37,
            restrictions={RestrictionKind.MONTHLY_BUDGET, RestrictionKind.FAST_CHARGING},
            monthly_charging_budget=13.3,
        )
        s = compute_savings(config)
        parts = (
            s.budget_savings + s.price_cap_savings + s.country_restriction_savings
            + s.fast_charging_savings + s.fraud_savings
        )
        assert s.total_savings == parts
        # 1784.37 × 0.3 × 0.2 × 0.4 = 42.82488, not cut to cents
        assert s.fast_charging_savings == pytest.approx(42.82488)
