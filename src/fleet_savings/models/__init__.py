"""Result models — engine and controller output contracts."""

from fleet_savings.models.results import (
    RestrictionOption,
    RestrictionSelection,
    SavingsBreakdown,
)

__all__ = [
    "RestrictionOption",
    "RestrictionSelection",
    "SavingsBreakdown",
]
