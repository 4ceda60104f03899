from decimal import Decimal

import pytest

from debtcalc.engine.decimal_math import DecimalMath, round_money
from debtcalc.engine.errors import InvalidArgumentError
from debtcalc.engine.factories import (
    PRESETS,
    new_daily_debt_amortization,
    new_debt_amortization_custom_period_length,
    new_monthly_debt_amortization,
    new_yearly_debt_amortization,
)
from debtcalc.engine.time_units import DayCountConvention

ALL_FACTORIES = [
    new_yearly_debt_amortization,
    new_monthly_debt_amortization,
    new_daily_debt_amortization,
    lambda p, n, i: new_debt_amortization_custom_period_length(p, n, i, 360),
]


class TestPresets:
    @pytest.mark.parametrize("factory", ALL_FACTORIES)
    def test_same_schedule_whatever_the_period_length(self, factory):
        debt = factory(40000, 6, "0.12")
        assert debt.principal == Decimal("40000")
        assert debt.period_count == 6
        assert round_money(debt.repayments[0].principal_amount) == Decimal("4929.03")
        assert round_money(debt.repayments[-1].principal_amount) == Decimal("8686.63")

    def test_yearly(self):
        debt = new_yearly_debt_amortization(40000, 6, "0.12")
        assert debt.period_length_in_days == Decimal("360")
        assert debt.duration_in_years == Decimal("6")

    def test_monthly(self):
        debt = new_monthly_debt_amortization(40000, 6, "0.12")
        assert debt.period_length_in_months == Decimal("1")
        assert debt.period_length_in_years == DecimalMath().div(30, 360)
        assert debt.duration_in_months == Decimal("6")

    def test_daily(self):
        debt = new_daily_debt_amortization(40000, 6, "0.12")
        assert debt.period_length_in_days == Decimal("1")
        assert debt.duration_in_days == Decimal("6")

    def test_yearly_follows_convention(self):
        debt = new_yearly_debt_amortization(
            40000, 6, "0.12", convention=DayCountConvention(days_in_year=Decimal("365"))
        )
        assert debt.period_length_in_days == Decimal("365")
        assert debt.period_length_in_years == Decimal("1")

    def test_preset_registry(self):
        assert set(PRESETS) == {"yearly", "monthly", "daily"}

    def test_invalid_input_propagates(self):
        with pytest.raises(InvalidArgumentError):
            new_monthly_debt_amortization(40000, 6, "0")
