"""Restriction selection — which restrictions are chosen, which can still be chosen.

The selector behaves like a multi-select: every change hands over the whole
requested set.  Membership is never altered here; the monthly budget and
the price cap are kept apart by disabling the other option once one of
them is selected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fleet_savings.config.restrictions import RESTRICTION_LABELS, RestrictionKind
from fleet_savings.models.results import RestrictionOption, RestrictionSelection

logger = logging.getLogger(__name__)


def _as_kinds(requested: Iterable[RestrictionKind | str]) -> frozenset[RestrictionKind]:
    return frozenset(RestrictionKind(r) for r in requested)


def compute_option_availability(
    requested: Iterable[RestrictionKind | str],
) -> dict[RestrictionKind, bool]:
    """Map every restriction kind to whether it is selectable given ``requested``."""
    kinds = _as_kinds(requested)
    availability = {kind: True for kind in RESTRICTION_LABELS}

    if RestrictionKind.MONTHLY_BUDGET in kinds:
        availability[RestrictionKind.PRICE_CAP] = False
    elif RestrictionKind.PRICE_CAP in kinds:
        availability[RestrictionKind.MONTHLY_BUDGET] = False

    return availability


def build_options(availability: dict[RestrictionKind, bool]) -> list[RestrictionOption]:
    """Selector entries in display order."""
    return [
        RestrictionOption(kind=kind, label=label, disabled=not availability[kind])
        for kind, label in RESTRICTION_LABELS.items()
    ]


class RestrictionSetController:
    """Holds the current restriction selection across user interactions."""

    def __init__(self, initial: Iterable[RestrictionKind | str] = ()) -> None:
        self._selection = self._resolve(initial)

    @staticmethod
    def _resolve(requested: Iterable[RestrictionKind | str]) -> RestrictionSelection:
        kinds = _as_kinds(requested)
        availability = compute_option_availability(kinds)
        return RestrictionSelection(
            selected=kinds,
            availability=availability,
            options=build_options(availability),
        )

    def apply_selection(self, requested: Iterable[RestrictionKind | str]) -> RestrictionSelection:
        """Replace the selection with ``requested`` and recompute availability."""
        selection = self._resolve(requested)
        disabled = sorted(k.value for k, ok in selection.availability.items() if not ok)
        logger.debug(
            "restrictions=%s disabled=%s",
            sorted(k.value for k in selection.selected),
            disabled,
        )
        self._selection = selection
        return selection

    @property
    def selection(self) -> RestrictionSelection:
        return self._selection

    @property
    def selected(self) -> frozenset[RestrictionKind]:
        return self._selection.selected

    @property
    def availability(self) -> dict[RestrictionKind, bool]:
        return dict(self._selection.availability)

    @property
    def options(self) -> list[RestrictionOption]:
        return list(self._selection.options)
