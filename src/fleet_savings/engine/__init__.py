"""Engine — savings derivation, restriction selection, configurator session."""

from fleet_savings.engine.savings import (
    compute_budget_savings,
    compute_country_restriction_savings,
    compute_fast_charging_savings,
    compute_fraud_savings,
    compute_price_cap_savings,
    compute_savings,
)
from fleet_savings.engine.restrictions import (
    RestrictionSetController,
    build_options,
    compute_option_availability,
)
from fleet_savings.engine.configurator import ConfiguratorSession

__all__ = [
    "compute_savings",
    "compute_budget_savings",
    "compute_price_cap_savings",
    "compute_country_restriction_savings",
    "compute_fast_charging_savings",
    "compute_fraud_savings",
    "compute_option_availability",
    "build_options",
    "RestrictionSetController",
    "ConfiguratorSession",
]
