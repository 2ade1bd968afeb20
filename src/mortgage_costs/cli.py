from __future__ import annotations

import json
import logging
import os
from typing import Optional

import typer

from .inputs import FORM_DEFAULTS, InvalidLoanInput, parse_loan_inputs
from .model import true_cost_of_home
from .property_taxes import (
    PROPERTY_TAX_RATES,
    PropertyTaxRateNotFound,
    available_states,
    lookup_effective_tax_rate,
)
from .report import render_report

logger = logging.getLogger(__name__)

app = typer.Typer(help="Estimate the true monthly and lifetime cost of a mortgage.")

OPTION_NAMES = {
    "principal": "--principal",
    "interest_rate": "--interest-rate",
    "loan_term_years": "--loan-term",
    "pmi_rate": "--pmi-rate",
    "insurance_rate": "--insurance-rate",
    "property_tax_rate": "--property-tax-rate",
}


def _default_state() -> Optional[str]:
    return os.environ.get("MORTGAGE_COSTS_STATE")


def _default_log_level() -> str:
    return os.environ.get("MORTGAGE_COSTS_LOG_LEVEL", "WARNING")


@app.callback()
def main(
    log_level: str = typer.Option(
        default_factory=_default_log_level,
        help="Logging level (env MORTGAGE_COSTS_LOG_LEVEL if omitted).",
    ),
) -> None:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown logging level {log_level!r}", param_hint="'--log-level'"
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def calculate(
    principal: str = typer.Option(
        str(FORM_DEFAULTS["principal"]), help="Amount borrowed, in dollars."
    ),
    interest_rate: str = typer.Option(
        FORM_DEFAULTS["interest_rate"], help="Annual interest rate in percent."
    ),
    loan_term: str = typer.Option(
        str(FORM_DEFAULTS["loan_term_years"]), help="Loan term in years."
    ),
    pmi_rate: str = typer.Option(
        FORM_DEFAULTS["pmi_rate"], help="Annual PMI rate in percent of principal."
    ),
    insurance_rate: str = typer.Option(
        FORM_DEFAULTS["insurance_rate"],
        help="Annual homeowner's insurance rate in percent of principal.",
    ),
    property_tax_rate: Optional[str] = typer.Option(
        None,
        help="Annual property tax rate in percent. Filled from --state when omitted.",
    ),
    state: Optional[str] = typer.Option(
        default_factory=_default_state,
        help="U.S. state whose effective tax rate fills --property-tax-rate "
        "(env MORTGAGE_COSTS_STATE if omitted).",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the breakdown as a JSON object."
    ),
) -> None:
    """
    Validate the loan parameters and print the cost breakdown.
    """
    if property_tax_rate is None:
        if state:
            try:
                property_tax_rate = str(lookup_effective_tax_rate(state))
            except PropertyTaxRateNotFound as exc:
                typer.echo(f"Error: {exc}", err=True)
                raise typer.Exit(code=1)
            logger.info("Using %s property tax rate %s%%", state, property_tax_rate)
        else:
            property_tax_rate = FORM_DEFAULTS["property_tax_rate"]

    try:
        inputs = parse_loan_inputs(
            principal=principal,
            interest_rate=interest_rate,
            loan_term_years=loan_term,
            pmi_rate=pmi_rate,
            insurance_rate=insurance_rate,
            property_tax_rate=property_tax_rate,
        )
    except InvalidLoanInput as exc:
        raise typer.BadParameter(
            exc.message, param_hint=f"'{OPTION_NAMES[exc.field]}'"
        ) from exc

    breakdown = true_cost_of_home(inputs)

    if as_json:
        typer.echo(json.dumps(breakdown.as_dict(), indent=2))
        return

    for line in render_report(breakdown):
        typer.echo(line)


@app.command()
def states() -> None:
    """
    List the effective property tax rate for every state in the table.
    """
    typer.echo(f"Effective property tax rates ({PROPERTY_TAX_RATES.year})")
    for name in available_states():
        typer.echo(f"{name}: {lookup_effective_tax_rate(name):.2f}%")


if __name__ == "__main__":
    app()
