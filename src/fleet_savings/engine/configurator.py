"""Configurator session — the host-side loop around the savings engine.

A form edits one field at a time.  The session keeps those raw values,
routes restriction changes through the :class:`RestrictionSetController`,
and re-runs :func:`compute_savings` whenever the resulting snapshot
differs from the last one evaluated.

Until both car count and yearly mileage are filled in there is *no*
result (``breakdown is None``), which is different from a zero result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from fleet_savings.config.assumptions import SavingsAssumptions
from fleet_savings.config.fleet import FleetConfiguration
from fleet_savings.config.restrictions import RestrictionKind
from fleet_savings.engine.restrictions import RestrictionSetController
from fleet_savings.engine.savings import compute_savings
from fleet_savings.models.results import RestrictionSelection, SavingsBreakdown

logger = logging.getLogger(__name__)

INPUT_FIELDS = (
    "car_count",
    "yearly_mileage_allowed",
    "restrictions",
    "country_restrictions",
    "monthly_charging_budget",
    "kwh_price_cap",
)


class ConfiguratorSession:
    """Raw form state plus the latest savings breakdown."""

    def __init__(self, assumptions: SavingsAssumptions | None = None) -> None:
        self.assumptions = assumptions if assumptions is not None else SavingsAssumptions()
        self.controller = RestrictionSetController()
        self._values: dict[str, Any] = {
            "car_count": None,
            "yearly_mileage_allowed": None,
            "country_restrictions": (),
            "monthly_charging_budget": None,
            "kwh_price_cap": None,
        }
        self._last_snapshot: FleetConfiguration | None = None
        self._breakdown: SavingsBreakdown | None = None
        self.evaluations = 0

    # ── Inputs ─────────────────────────────────────────────────────────

    def update(self, **fields: Any) -> SavingsBreakdown | None:
        """Set one or more input fields, then recompute if anything changed.

        ``None`` clears a field.  Raises ``TypeError`` for unknown field names
        and ``pydantic.ValidationError`` when the resulting snapshot is invalid.
        On error nothing is applied: values, selection and breakdown stay as
        they were before the call.
        """
        unknown = set(fields) - set(INPUT_FIELDS)
        if unknown:
            raise TypeError(f"unknown configurator field(s): {', '.join(sorted(unknown))}")

        previous_values = dict(self._values)
        previous_restrictions = self.controller.selected

        for name, value in fields.items():
            if name == "restrictions":
                self.controller.apply_selection(value or ())
            elif name == "country_restrictions":
                self._values[name] = tuple(value or ())
            else:
                self._values[name] = value

        try:
            return self.recompute()
        except ValidationError:
            self._values = previous_values
            self.controller.apply_selection(previous_restrictions)
            raise

    def select_restrictions(
        self, requested: Iterable[RestrictionKind | str],
    ) -> RestrictionSelection:
        """Apply a restriction selection and return the selector state."""
        self.update(restrictions=requested)
        return self.controller.selection

    # ── Evaluation ─────────────────────────────────────────────────────

    @property
    def is_ready(self) -> bool:
        """Both mandatory numeric fields are present."""
        return all(
            isinstance(self._values[name], (int, float)) and not isinstance(self._values[name], bool)
            for name in ("car_count", "yearly_mileage_allowed")
        )

    def snapshot(self) -> FleetConfiguration | None:
        """Validated configuration for the current values, or None when not ready."""
        if not self.is_ready:
            return None
        return FleetConfiguration(restrictions=self.controller.selected, **self._values)

    def recompute(self) -> SavingsBreakdown | None:
        """Run the engine if the current snapshot differs from the last one."""
        snapshot = self.snapshot()
        if snapshot is None:
            self._last_snapshot = None
            self._breakdown = None
            return None

        if snapshot == self._last_snapshot and self._breakdown is not None:
            return self._breakdown

        self._breakdown = compute_savings(snapshot, self.assumptions)
        self._last_snapshot = snapshot
        self.evaluations += 1
        logger.debug(
            "recomputed savings for %d cars: total=%.2f",
            snapshot.car_count,
            self._breakdown.total_savings,
        )
        return self._breakdown

    @property
    def breakdown(self) -> SavingsBreakdown | None:
        return self._breakdown

    @property
    def values(self) -> dict[str, Any]:
        """Current raw field values, restrictions included."""
        return {**self._values, "restrictions": self.controller.selected}
