import json

import pytest
from typer.testing import CliRunner

from mortgage_costs.cli import app

runner = CliRunner()


def _calculate_json(*args):
    result = runner.invoke(app, ["calculate", "--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


def test_calculate_defaults_prints_report():
    result = runner.invoke(app, ["calculate"])

    assert result.exit_code == 0, result.output
    assert "Monthly Mortgage Payment: $1,520.06" in result.output
    assert "Lifetime Costs" in result.output


def test_calculate_json_defaults():
    payload = _calculate_json()

    assert payload["mortgage_payment"] == pytest.approx(1520.06, abs=0.01)
    assert payload["monthly_pmi"] == pytest.approx(125.0)
    assert payload["monthly_insurance"] == pytest.approx(87.5)
    assert payload["monthly_property_tax"] == pytest.approx(87.5)
    assert payload["adjusted_monthly_payment"] == pytest.approx(payload["total_cost"] / 360)


def test_state_fills_property_tax_rate():
    payload = _calculate_json("--state", "Texas")
    assert payload["yearly_property_tax"] == pytest.approx(300000 * 1.74 / 100)


def test_explicit_property_tax_rate_wins_over_state():
    payload = _calculate_json("--state", "Texas", "--property-tax-rate", "1")
    assert payload["yearly_property_tax"] == pytest.approx(3000.0)


def test_state_from_environment(monkeypatch):
    monkeypatch.setenv("MORTGAGE_COSTS_STATE", "New Jersey")
    payload = _calculate_json()
    assert payload["monthly_property_tax"] == pytest.approx(300000 * 2.47 / 100 / 12)


def test_unknown_state_exits_with_error():
    result = runner.invoke(app, ["calculate", "--state", "Atlantis"])

    assert result.exit_code == 1
    assert "Atlantis" in result.output


def test_invalid_input_is_a_usage_error():
    result = runner.invoke(app, ["calculate", "--interest-rate", "45"])

    assert result.exit_code == 2
    assert "cannot exceed 30%" in result.output


def test_custom_loan():
    payload = _calculate_json(
        "--principal",
        "200000",
        "--interest-rate",
        "6",
        "--loan-term",
        "15",
        "--pmi-rate",
        "0",
    )
    assert payload["mortgage_payment"] == pytest.approx(1687.71, abs=0.01)
    assert payload["total_pmi"] == 0.0
    assert payload["loan_term_years"] == 15


def test_states_lists_table():
    result = runner.invoke(app, ["states"])

    assert result.exit_code == 0, result.output
    assert "(2023)" in result.output
    assert "Alabama: 0.41%" in result.output
    assert "Wyoming:" in result.output


def test_tiny_interest_rate_pays_down_principal_evenly():
    payload = _calculate_json("--interest-rate", "1e-15")
    assert payload["mortgage_payment"] == pytest.approx(300000 / 360, rel=1e-9)


def test_unknown_log_level_is_a_usage_error():
    result = runner.invoke(app, ["--log-level", "loud", "calculate"])

    assert result.exit_code == 2
    assert "loud" in result.output


def test_log_level_is_case_insensitive():
    result = runner.invoke(app, ["--log-level", "debug", "states"])
    assert result.exit_code == 0, result.output
