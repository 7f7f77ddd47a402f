"""Configuration models — restriction vocabulary, fleet snapshot, assumptions."""

from fleet_savings.config.restrictions import (
    EUROPEAN_COUNTRIES,
    EXCLUSIVE_PAIR,
    HOME_COUNTRY,
    RESTRICTION_LABELS,
    RestrictionKind,
)
from fleet_savings.config.fleet import MAX_KWH_PRICE_CAP, FleetConfiguration
from fleet_savings.config.assumptions import SavingsAssumptions

__all__ = [
    "RestrictionKind",
    "RESTRICTION_LABELS",
    "EXCLUSIVE_PAIR",
    "EUROPEAN_COUNTRIES",
    "HOME_COUNTRY",
    "FleetConfiguration",
    "MAX_KWH_PRICE_CAP",
    "SavingsAssumptions",
]
