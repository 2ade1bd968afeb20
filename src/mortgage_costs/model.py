from __future__ import annotations

import math

from .schemas import CostBreakdown, LoanInputs

# Yearly repairs/upkeep estimate, as a percent of principal. Not user configurable.
MAINTENANCE_RATE_PCT = 3.0


def true_cost_of_home(inputs: LoanInputs) -> CostBreakdown:
    """Monthly and lifetime cost of carrying the loan.

    PMI is charged at a flat rate for the whole term. Maintenance is part of
    the monthly total but is left out of ``total_cost``.
    """
    principal = inputs.principal
    months = inputs.number_of_payments

    mortgage_payment = monthly_mortgage_payment(
        principal, inputs.interest_rate, inputs.loan_term_years
    )
    monthly_pmi = annual_pct_to_monthly_amount(principal, inputs.pmi_rate)
    monthly_insurance = annual_pct_to_monthly_amount(principal, inputs.insurance_rate)

    yearly_property_tax = principal * inputs.property_tax_rate / 100
    monthly_property_tax = yearly_property_tax / 12
    total_property_tax = yearly_property_tax * inputs.loan_term_years

    yearly_maintenance = principal * MAINTENANCE_RATE_PCT / 100
    monthly_maintenance = yearly_maintenance / 12

    total_principal_and_interest = mortgage_payment * months
    total_pmi = monthly_pmi * months
    total_insurance = monthly_insurance * months

    total_monthly_payment = (
        mortgage_payment
        + monthly_pmi
        + monthly_insurance
        + monthly_property_tax
        + monthly_maintenance
    )
    total_cost = (
        total_principal_and_interest + total_pmi + total_insurance + total_property_tax
    )

    return CostBreakdown(
        principal=principal,
        loan_term_years=inputs.loan_term_years,
        mortgage_payment=mortgage_payment,
        monthly_pmi=monthly_pmi,
        monthly_insurance=monthly_insurance,
        monthly_property_tax=monthly_property_tax,
        monthly_maintenance=monthly_maintenance,
        yearly_property_tax=yearly_property_tax,
        yearly_maintenance=yearly_maintenance,
        total_principal_and_interest=total_principal_and_interest,
        total_interest=total_principal_and_interest - principal,
        total_pmi=total_pmi,
        total_insurance=total_insurance,
        total_property_tax=total_property_tax,
        total_monthly_payment=total_monthly_payment,
        total_cost=total_cost,
    )


def monthly_mortgage_payment(
    principal: float, annual_rate_pct: float, loan_term_years: int
) -> float:
    if loan_term_years <= 0:
        raise ValueError("loan_term_years must be positive")
    term_months = loan_term_years * 12
    monthly_rate = annual_to_monthly_rate(annual_rate_pct)
    if monthly_rate == 0:
        return principal / term_months
    # (1 + i)^n - 1, without losing precision when i is tiny
    growth = math.expm1(term_months * math.log1p(monthly_rate))
    if growth == 0:
        return principal / term_months
    return principal * monthly_rate * (growth + 1) / growth


def annual_to_monthly_rate(annual_rate_pct: float) -> float:
    if annual_rate_pct < 0:
        raise ValueError("annual rate cannot be negative")
    return annual_rate_pct / 100.0 / 12.0


def annual_pct_to_monthly_amount(principal: float, annual_rate_pct: float) -> float:
    return principal * annual_rate_pct / 100 / 12
