from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class LoanInputs:
    """Loan parameters handed to the cost estimator.

    Rates are annual percentages, e.g. ``4.5`` for 4.5%. Values are trusted;
    validation happens in :mod:`mortgage_costs.inputs`.
    """

    principal: float
    interest_rate: float
    loan_term_years: int = 30
    pmi_rate: float = 0.0
    insurance_rate: float = 0.0
    property_tax_rate: float = 0.0

    @property
    def number_of_payments(self) -> int:
        return self.loan_term_years * 12


@dataclass(frozen=True)
class CostBreakdown:
    principal: float
    loan_term_years: int
    mortgage_payment: float  # principal & interest, monthly
    monthly_pmi: float
    monthly_insurance: float
    monthly_property_tax: float
    monthly_maintenance: float
    yearly_property_tax: float
    yearly_maintenance: float
    total_principal_and_interest: float
    total_interest: float
    total_pmi: float
    total_insurance: float
    total_property_tax: float
    total_monthly_payment: float
    total_cost: float  # excludes maintenance

    @property
    def adjusted_monthly_payment(self) -> float:
        """Lifetime cost spread evenly over every month of the term."""
        return self.total_cost / self.loan_term_years / 12

    def as_dict(self) -> Dict[str, float]:
        payload = asdict(self)
        payload["adjusted_monthly_payment"] = self.adjusted_monthly_payment
        return payload
