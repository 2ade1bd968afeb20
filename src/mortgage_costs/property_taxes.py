from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Union

logger = logging.getLogger(__name__)

DATA_PACKAGE = "mortgage_costs.data"
DEFAULT_TABLE_FILE = "property_tax_rates_2023.json"


class PropertyTaxRateNotFound(LookupError):
    """Raised when a state has no row in the rate table.

    The table is expected to cover every state the caller can offer, so this
    points at a data problem rather than bad user input.
    """

    def __init__(self, state: str, year: int) -> None:
        super().__init__(f"No {year} effective property tax rate for state {state!r}")
        self.state = state
        self.year = year


@dataclass(frozen=True)
class PropertyTaxTable:
    """Effective property tax rates (annual percent) keyed by state name."""

    year: int
    rates: Mapping[str, float]

    def __len__(self) -> int:
        return len(self.rates)

    def __contains__(self, state: object) -> bool:
        return state in self.rates


def _to_float(value: Union[str, float, int], state: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"Could not convert property tax rate '{value}' for {state} to float"
        ) from exc


def load_property_tax_table(
    path: Optional[Union[str, Path]] = None,
) -> PropertyTaxTable:
    """Read a rate table from ``path``, or the bundled 2023 table by default."""
    if path is None:
        raw = (
            resources.files(DATA_PACKAGE)
            .joinpath(DEFAULT_TABLE_FILE)
            .read_text(encoding="utf-8")
        )
        source = DEFAULT_TABLE_FILE
    else:
        raw = Path(path).read_text(encoding="utf-8")
        source = str(path)

    payload = json.loads(raw)
    year = int(payload["year"])
    rates = {}
    for row in payload["rates"]:
        state = row["state"]
        if state in rates:
            raise ValueError(f"Duplicate state {state!r} in {source}")
        rates[state] = _to_float(row["effective_tax_rate"], state)

    logger.debug(
        "Loaded %d property tax rates for %d from %s", len(rates), year, source
    )
    return PropertyTaxTable(year=year, rates=MappingProxyType(rates))


PROPERTY_TAX_RATES = load_property_tax_table()


def lookup_effective_tax_rate(
    state: str, table: PropertyTaxTable = PROPERTY_TAX_RATES
) -> float:
    """Effective annual property tax rate, in percent, for a state's full name."""
    try:
        return table.rates[state]
    except KeyError:
        logger.error("State %r missing from %d property tax table", state, table.year)
        raise PropertyTaxRateNotFound(state, table.year) from None


def available_states(table: PropertyTaxTable = PROPERTY_TAX_RATES) -> List[str]:
    return sorted(table.rates)
