"""Fleet configuration — the snapshot handed to the savings engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fleet_savings.config.restrictions import EUROPEAN_COUNTRIES, EXCLUSIVE_PAIR, RestrictionKind

MAX_KWH_PRICE_CAP = 0.65


class FleetConfiguration(BaseModel):
    """One immutable set of fleet inputs, built fresh for every evaluation.

    ``monthly_charging_budget`` and ``kwh_price_cap`` may be left unset even
    when their restriction is selected — the engine then contributes zero
    for that restriction.  Use :meth:`missing_required_fields` to find out
    which values a form still has to ask for.
    """

    model_config = ConfigDict(frozen=True)

    car_count: int = Field(ge=1, description="Number of cars in the fleet")
    yearly_mileage_allowed: float = Field(
        ge=1, description="Leasing contract mileage allowance per car (km/year)",
    )
    restrictions: frozenset[RestrictionKind] = Field(
        default_factory=frozenset, description="Active charging restrictions",
    )
    country_restrictions: tuple[str, ...] = Field(
        default=(), description="ISO country codes drivers are allowed to charge in",
    )
    monthly_charging_budget: float | None = Field(
        default=None, gt=0,
        description="Charging budget per car per month (€). Used with the monthly budget restriction.",
    )
    kwh_price_cap: float | None = Field(
        default=None, gt=0, le=MAX_KWH_PRICE_CAP,
        description="Maximum accepted price per kWh (€). Used with the price cap restriction.",
    )

    @field_validator("country_restrictions")
    @classmethod
    def known_countries(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Upper-case every code and check it against the allowed list.

        Entries are kept as given, duplicates included: savings depend on
        how many entries the list holds.
        """
        codes: list[str] = []
        for raw in v:
            code = raw.strip().upper()
            if code not in EUROPEAN_COUNTRIES:
                raise ValueError(f"unknown country code {raw!r}")
            codes.append(code)
        return tuple(codes)

    @model_validator(mode="after")
    def budget_and_price_cap_exclusive(self) -> FleetConfiguration:
        if all(kind in self.restrictions for kind in EXCLUSIVE_PAIR):
            raise ValueError(
                "monthly charging budget and kWh price cap cannot be combined"
            )
        return self

    def has(self, kind: RestrictionKind) -> bool:
        """True when ``kind`` is among the active restrictions."""
        return kind in self.restrictions

    def missing_required_fields(self) -> list[str]:
        """Names of values that an active restriction needs but that are unset."""
        missing: list[str] = []
        if self.has(RestrictionKind.MONTHLY_BUDGET) and self.monthly_charging_budget is None:
            missing.append("monthly_charging_budget")
        if self.has(RestrictionKind.PRICE_CAP) and self.kwh_price_cap is None:
            missing.append("kwh_price_cap")
        return missing
