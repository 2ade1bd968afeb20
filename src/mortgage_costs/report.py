from __future__ import annotations

from typing import List, Tuple

from .schemas import CostBreakdown

DISCLAIMER = (
    "Note: This is an estimate. Actual costs may vary based on specific lender "
    "terms, property taxes, and other factors."
)


def format_currency(value: float) -> str:
    """USD with two decimals and thousands grouping, e.g. ``$1,520.06``."""
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${value:,.2f}"


def monthly_rows(breakdown: CostBreakdown) -> List[Tuple[str, float]]:
    return [
        ("Principal & Interest", breakdown.mortgage_payment),
        ("PMI", breakdown.monthly_pmi),
        ("Insurance", breakdown.monthly_insurance),
        ("Property Tax", breakdown.monthly_property_tax),
        ("Maintenance", breakdown.monthly_maintenance),
        ("Total Monthly Payment", breakdown.total_monthly_payment),
    ]


def lifetime_rows(breakdown: CostBreakdown) -> List[Tuple[str, float]]:
    return [
        ("Principal", breakdown.principal),
        ("Total Interest", breakdown.total_interest),
        ("Total PMI", breakdown.total_pmi),
        ("Total Insurance", breakdown.total_insurance),
        ("Total Property Taxes Paid", breakdown.total_property_tax),
        ("Total Cost", breakdown.total_cost),
        ("Adjusted Monthly Payment", breakdown.adjusted_monthly_payment),
    ]


def render_report(breakdown: CostBreakdown) -> List[str]:
    lines = [
        f"Monthly Mortgage Payment: {format_currency(breakdown.mortgage_payment)}",
        f"Total Cost: {format_currency(breakdown.total_cost)}",
        "",
        "Monthly Breakdown",
    ]
    lines.extend(_format_rows(monthly_rows(breakdown)))
    lines.extend(["", "Lifetime Costs"])
    lines.extend(_format_rows(lifetime_rows(breakdown)))
    lines.extend(["", DISCLAIMER])
    return lines


def _format_rows(rows: List[Tuple[str, float]]) -> List[str]:
    width = max(len(label) for label, _ in rows) + 1
    return [
        f"  {label + ':':<{width}} {format_currency(value):>16}"
        for label, value in rows
    ]
