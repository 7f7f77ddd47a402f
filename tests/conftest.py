"""Shared test fixtures — small fleets used across the engine tests."""

from __future__ import annotations

import pytest

from fleet_savings.config import FleetConfiguration, RestrictionKind, SavingsAssumptions


@pytest.fixture
def assumptions() -> SavingsAssumptions:
    return SavingsAssumptions()


@pytest.fixture
def plain_fleet() -> FleetConfiguration:
    """10 cars, 20 000 km/year, no restrictions."""
    return FleetConfiguration(car_count=10, yearly_mileage_allowed=20_000)


@pytest.fixture
def budget_fleet() -> FleetConfiguration:
    return FleetConfiguration(
        car_count=10,
        yearly_mileage_allowed=20_000,
        restrictions={RestrictionKind.MONTHLY_BUDGET},
        monthly_charging_budget=50,
    )


@pytest.fixture
def price_cap_fleet() -> FleetConfiguration:
    return FleetConfiguration(
        car_count=10,
        yearly_mileage_allowed=20_000,
        restrictions={RestrictionKind.PRICE_CAP},
        kwh_price_cap=0.30,
    )


@pytest.fixture
def belgium_fleet() -> FleetConfiguration:
    return FleetConfiguration(
        car_count=100,
        yearly_mileage_allowed=20_000,
        restrictions={RestrictionKind.COUNTRY_RESTRICTION},
        country_restrictions=["BE"],
    )


@pytest.fixture
def fast_charging_fleet() -> FleetConfiguration:
    return FleetConfiguration(
        car_count=5,
        yearly_mileage_allowed=15_000,
        restrictions={RestrictionKind.FAST_CHARGING},
    )
