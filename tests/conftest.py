"""Shared fixtures.

Canonical debt: 40,000 over 6 yearly periods at 12% per period (30/360).
"""

import pytest
from decimal import Decimal

from debtcalc.engine.amortization import AmortizedDebt
from debtcalc.engine.time_units import LENGTH_YEAR_360_30


@pytest.fixture
def canonical_debt() -> AmortizedDebt:
    return AmortizedDebt(
        principal=Decimal("40000"),
        period_count=6,
        period_length_days=LENGTH_YEAR_360_30,
        interest_rate=Decimal("0.12"),
    )


@pytest.fixture
def mortgage_debt() -> AmortizedDebt:
    """400K over 360 monthly periods at 0.5% per month."""
    return AmortizedDebt(
        principal=Decimal("400000"),
        period_count=360,
        period_length_days=Decimal("30"),
        interest_rate=Decimal("0.005"),
    )
