"""
Form-side parsing of loan parameters.

Users type rates as strings ("4.5", "0.35"); this module turns raw form values
into a :class:`~mortgage_costs.schemas.LoanInputs` and rejects anything the
calculator should never see. The calculator itself trusts its inputs.
"""

from __future__ import annotations

import math
from typing import Dict, Union

from .schemas import LoanInputs

RawValue = Union[str, int, float]

MIN_PRINCIPAL = 1_000
MAX_INTEREST_RATE_PCT = 30
MAX_LOAN_TERM_YEARS = 50

FORM_DEFAULTS: Dict[str, RawValue] = {
    "principal": 300000,
    "interest_rate": "4.5",
    "loan_term_years": 30,
    "pmi_rate": "0.5",
    "insurance_rate": "0.35",
    "property_tax_rate": "0.35",
}


class InvalidLoanInput(ValueError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


def parse_loan_inputs(
    principal: RawValue,
    interest_rate: RawValue,
    loan_term_years: RawValue,
    pmi_rate: RawValue,
    insurance_rate: RawValue,
    property_tax_rate: RawValue,
) -> LoanInputs:
    amount = _parse_number("principal", principal, "Amount must be a number")
    if amount <= 0:
        raise InvalidLoanInput("principal", "Amount must be positive")
    if amount < MIN_PRINCIPAL:
        raise InvalidLoanInput("principal", "Minimum loan amount is $1,000")

    rate = _parse_number(
        "interest_rate", interest_rate, "Interest rate must be positive"
    )
    if rate <= 0:
        raise InvalidLoanInput("interest_rate", "Interest rate must be positive")
    if rate > MAX_INTEREST_RATE_PCT:
        raise InvalidLoanInput("interest_rate", "Interest rate cannot exceed 30%")

    term = _parse_term(loan_term_years)
    if term <= 0:
        raise InvalidLoanInput("loan_term_years", "Loan term must be positive")
    if term > MAX_LOAN_TERM_YEARS:
        raise InvalidLoanInput("loan_term_years", "Maximum term is 50 years")

    return LoanInputs(
        principal=amount,
        interest_rate=rate,
        loan_term_years=term,
        pmi_rate=_parse_rate("pmi_rate", pmi_rate, "PMI rate cannot be negative"),
        insurance_rate=_parse_rate(
            "insurance_rate", insurance_rate, "Insurance rate cannot be negative"
        ),
        property_tax_rate=_parse_rate(
            "property_tax_rate",
            property_tax_rate,
            "Property tax rate cannot be negative",
        ),
    )


def _parse_number(field: str, value: RawValue, message: str) -> float:
    if isinstance(value, bool):
        raise InvalidLoanInput(field, message)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidLoanInput(field, message) from None
    if not math.isfinite(number):
        raise InvalidLoanInput(field, message)
    return number


def _parse_rate(field: str, value: RawValue, message: str) -> float:
    rate = _parse_number(field, value, message)
    if rate < 0:
        raise InvalidLoanInput(field, message)
    return rate


def _parse_term(value: RawValue) -> int:
    term = _parse_number("loan_term_years", value, "Loan term must be a whole number")
    if not term.is_integer():
        raise InvalidLoanInput("loan_term_years", "Loan term must be a whole number")
    return int(term)
