"""Restriction vocabulary — policy kinds, display labels, allowed countries."""

from enum import Enum


class RestrictionKind(str, Enum):
    """A charging policy restriction a fleet manager can impose on drivers."""

    MONTHLY_BUDGET = "monthly_charging_budget"
    PRICE_CAP = "kwh_price_cap"
    COUNTRY_RESTRICTION = "country_restriction"
    FAST_CHARGING = "fast_charging"


# Only one of these two may be active at a time.
EXCLUSIVE_PAIR: tuple[RestrictionKind, RestrictionKind] = (
    RestrictionKind.MONTHLY_BUDGET,
    RestrictionKind.PRICE_CAP,
)

# Option order as presented by the selector.
RESTRICTION_LABELS: dict[RestrictionKind, str] = {
    RestrictionKind.MONTHLY_BUDGET: "Monthly charging budget",
    RestrictionKind.PRICE_CAP: "Price cap per kWh",
    RestrictionKind.COUNTRY_RESTRICTION: "Country restriction",
    RestrictionKind.FAST_CHARGING: "Block fast charging",
}

HOME_COUNTRY = "BE"

# ISO 3166-1 alpha-2: EU/EEA members plus Switzerland and the UK.
EUROPEAN_COUNTRIES: tuple[str, ...] = (
    "AT", "BE", "BG", "CH", "CY", "CZ", "DE", "DK", "EE", "ES",
    "FI", "FR", "GB", "GR", "HR", "HU", "IE", "IS", "IT", "LI",
    "LT", "LU", "LV", "MT", "NL", "NO", "PL", "PT", "RO", "SE",
    "SI", "SK",
)
