"""Sensitivity / tornado analysis over the savings engine.

Vary one input or assumption at a time, measure the swing in total savings.
Produces tornado chart data sorted by impact.

Default sweep set:
  - config.yearly_mileage_allowed ± 20%
  - config.car_count ± 25%
  - assumptions.average_kwh_price ± 10%
  - assumptions.fraud_savings_per_car ± 20%
  - assumptions.fast_charging_share ± 20%
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pydantic import BaseModel, ValidationError

from fleet_savings.config.assumptions import SavingsAssumptions
from fleet_savings.config.fleet import FleetConfiguration
from fleet_savings.engine.savings import compute_savings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """'config.<field>' or 'assumptions.<field>'."""

    base_value: float
    low_value: float
    high_value: float

    total_at_low: float
    """Total savings when param = low_value."""

    total_at_high: float
    """Total savings when param = high_value."""

    delta_total: float
    """abs(total_at_high − total_at_low) — total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    base_total: float
    """Total savings of the unmodified inputs."""

    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta_total (descending)."""


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Yearly mileage", "config.yearly_mileage_allowed", -0.20, 0.20),
    ("Fleet size", "config.car_count", -0.25, 0.25),
    ("Average kWh price", "assumptions.average_kwh_price", -0.10, 0.10),
    ("Fraud savings per car", "assumptions.fraud_savings_per_car", -0.20, 0.20),
    ("Fast-charging share", "assumptions.fast_charging_share", -0.20, 0.20),
]


def _with_value(model: BaseModel, name: str, value: float) -> BaseModel:
    """Validated copy of ``model`` with one field replaced.

    Int fields are rounded first so that fractional sweeps stay valid.
    """
    field_info = type(model).model_fields[name]
    if field_info.annotation is int:
        value = round(value)
    return type(model).model_validate({**model.model_dump(), name: value})


def run_sensitivity(
    config: FleetConfiguration,
    assumptions: SavingsAssumptions | None = None,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> SensitivityResult:
    """Run a one-at-a-time sensitivity analysis on total savings.

    Parameters
    ----------
    config : FleetConfiguration
        Base fleet inputs.
    assumptions : SavingsAssumptions | None
        Base assumptions. None = defaults.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by impact on total savings.  Sweeps whose base
        value is unset, or whose swept values fail validation, are skipped.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS
    if assumptions is None:
        assumptions = SavingsAssumptions()

    base_total = compute_savings(config, assumptions).total_savings
    bars: list[TornadoBar] = []

    for name, path, low_pct, high_pct in sweeps:
        target, _, attr = path.partition(".")
        if target not in ("config", "assumptions"):
            raise ValueError(f"sweep path must start with 'config.' or 'assumptions.': {path!r}")
        model: BaseModel = config if target == "config" else assumptions

        base_val = getattr(model, attr)
        if base_val is None:
            logger.debug("skipping sweep %s: no base value", path)
            continue
        base_val = float(base_val)

        low_val = base_val * (1 + low_pct)
        high_val = base_val * (1 + high_pct)

        totals: list[float] = []
        try:
            for val in (low_val, high_val):
                swept = _with_value(model, attr, val)
                if target == "config":
                    totals.append(compute_savings(swept, assumptions).total_savings)
                else:
                    totals.append(compute_savings(config, swept).total_savings)
        except ValidationError:
            logger.debug("skipping sweep %s: swept value out of bounds", path)
            continue

        total_low, total_high = totals
        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=round(base_val, 4),
            low_value=round(low_val, 4),
            high_value=round(high_val, 4),
            total_at_low=round(total_low, 2),
            total_at_high=round(total_high, 2),
            delta_total=round(abs(total_high - total_low), 2),
        ))

    bars.sort(key=lambda b: b.delta_total, reverse=True)

    return SensitivityResult(base_total=base_total, bars=bars)
