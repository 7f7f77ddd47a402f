"""Savings assumptions — the business constants behind every formula.

These are rough commercial estimates, not measured values.  They are kept
as named, overridable fields so that a sales conversation can tweak them
without touching the engine.
"""

from pydantic import BaseModel, Field

from fleet_savings.config.restrictions import HOME_COUNTRY


class SavingsAssumptions(BaseModel):
    """Constants used by the savings engine and the secondary metrics."""

    # --- Energy & price ---
    kwh_per_km: float = Field(default=0.2, gt=0, description="Average EV consumption (kWh/km)")
    average_kwh_price: float = Field(
        default=0.45, gt=0,
        description="Average unrestricted charging price (€/kWh). Drives the budget formula.",
    )
    reference_kwh_price: float = Field(
        default=0.65, gt=0,
        description="Uncapped reference price (€/kWh). A price cap saves the difference to this.",
    )

    # --- Country restriction ---
    abroad_driver_share: float = Field(
        default=0.1, ge=0, le=1.0,
        description="Share of the fleet that charges abroad when not restricted.",
    )
    abroad_km_per_year: float = Field(
        default=2_500, ge=0, description="Distance driven abroad per such car (km/year)",
    )
    abroad_kwh_price: float = Field(
        default=0.85, ge=0, description="Charging price abroad (€/kWh)",
    )
    home_country: str = Field(
        default=HOME_COUNTRY, min_length=2, max_length=2,
        description="The single allowed country for which the restriction yields savings.",
    )

    # --- Fast charging ---
    fast_charging_share: float = Field(
        default=0.3, ge=0, le=1.0,
        description="Share of mileage charged on fast chargers when not blocked.",
    )
    fast_charging_premium: float = Field(
        default=0.4, ge=0,
        description="Extra price paid per kWh on a fast charger (€/kWh).",
    )

    # --- Fraud ---
    fraud_savings_per_car: float = Field(
        default=78.0, ge=0, description="Yearly fraud savings per car (€)",
    )

    # --- Secondary metrics ---
    subscription_per_car_per_month: float = Field(
        default=5.0, ge=0,
        description="Subscription price per car per month (€). Subtracted for the ROI estimate.",
    )
    cars_per_working_day: float = Field(
        default=24.0, gt=0,
        description="Cars whose charging admin takes one working day per year.",
    )
    savings_per_avoided_complaint: float = Field(
        default=160.0, gt=0,
        description="Savings (€) that correspond to one avoided driver complaint.",
    )
