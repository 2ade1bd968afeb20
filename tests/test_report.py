import pytest

from mortgage_costs.model import true_cost_of_home
from mortgage_costs.report import DISCLAIMER, format_currency, render_report
from mortgage_costs.schemas import LoanInputs


@pytest.mark.parametrize(
    "value,expected",
    [
        (1520.055929, "$1,520.06"),
        (0, "$0.00"),
        (1234567.891, "$1,234,567.89"),
        (-12, "-$12.00"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_render_report_sections():
    breakdown = true_cost_of_home(
        LoanInputs(
            principal=300000,
            interest_rate=4.5,
            loan_term_years=30,
            pmi_rate=0.5,
            insurance_rate=0.35,
            property_tax_rate=0.35,
        )
    )
    lines = render_report(breakdown)

    assert lines[0] == "Monthly Mortgage Payment: $1,520.06"
    assert lines[1].startswith("Total Cost: $")
    assert "Monthly Breakdown" in lines
    assert "Lifetime Costs" in lines
    assert lines[-1] == DISCLAIMER

    text = "\n".join(lines)
    assert "$125.00" in text  # PMI
    assert "$87.50" in text  # insurance and property tax
    assert "$750.00" in text  # maintenance
    assert "$300,000.00" in text
    assert "Adjusted Monthly Payment:" in text
