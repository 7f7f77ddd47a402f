"""Savings summary — plain-text rendering of a ``SavingsBreakdown``.

The total is always shown; a restriction line only appears when that
restriction actually saves something.  Amounts are whole euros.
"""

from __future__ import annotations

from fleet_savings.models.results import SavingsBreakdown

TITLE = "Estimated savings"

# (attribute, label) in display order, after the total.
COMPONENT_LINES: list[tuple[str, str]] = [
    ("budget_savings", "Savings by monthly budget"),
    ("price_cap_savings", "Savings by kWh price cap"),
    ("country_restriction_savings", "Savings by country restriction"),
    ("fast_charging_savings", "Savings by blocking fast charging"),
]


def format_euro(amount: float) -> str:
    """``12780.4`` → ``'€12,780'``, ``-450`` → ``'-€450'``."""
    sign = "-" if round(amount) < 0 else ""
    return f"{sign}€{abs(amount):,.0f}"


def summary_lines(breakdown: SavingsBreakdown) -> list[tuple[str, str]]:
    """(label, formatted amount) pairs — total first, then non-zero components."""
    lines = [("Total savings", format_euro(breakdown.total_savings))]
    for attr, label in COMPONENT_LINES:
        value = getattr(breakdown, attr)
        if value > 0:
            lines.append((label, format_euro(value)))
    return lines


def generate_summary(breakdown: SavingsBreakdown) -> str:
    """Titled text block with the savings lines and the secondary metrics."""
    sections: list[str] = [TITLE, "=" * 48]
    for label, amount in summary_lines(breakdown):
        sections.append(f"{label:36s}{amount:>12s}")

    sections.append("")
    sections.append(f"Fraud savings included: {format_euro(breakdown.fraud_savings)}")
    sections.append(
        f"Return on investment (approx): {format_euro(breakdown.return_on_investment_approx)}"
    )
    sections.append(f"Working days spared (approx): {breakdown.spared_working_days_approx:.1f}")
    sections.append(f"Complaints avoided (approx): {breakdown.avoided_complaints_approx:.0f}")
    return "\n".join(sections)
