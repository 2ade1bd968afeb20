"""
Mortgage cost calculator.

Derives the monthly and lifetime cost of a fixed-rate mortgage, including
PMI, homeowner's insurance, property tax and an upkeep estimate, with a
bundled table of effective property tax rates by U.S. state.
"""

from .schemas import CostBreakdown, LoanInputs
from .model import monthly_mortgage_payment, true_cost_of_home
from .property_taxes import (
    PROPERTY_TAX_RATES,
    PropertyTaxRateNotFound,
    PropertyTaxTable,
    lookup_effective_tax_rate,
)
from .inputs import InvalidLoanInput, parse_loan_inputs

__all__ = [
    "CostBreakdown",
    "LoanInputs",
    "monthly_mortgage_payment",
    "true_cost_of_home",
    "PROPERTY_TAX_RATES",
    "PropertyTaxRateNotFound",
    "PropertyTaxTable",
    "lookup_effective_tax_rate",
    "InvalidLoanInput",
    "parse_loan_inputs",
]
