from decimal import Decimal

import pytest

from debtcalc.engine.decimal_math import DecimalMath, round_money, to_decimal
from debtcalc.engine.errors import InvalidArgumentError


class TestToDecimal:
    def test_float_goes_through_str(self):
        assert to_decimal(0.12) == Decimal("0.12")

    def test_string_and_int(self):
        assert to_decimal(" 40000 ") == Decimal("40000")
        assert to_decimal(6) == Decimal("6")

    @pytest.mark.parametrize("bad", ["abc", "", True, None, [1], "Infinity", "NaN"])
    def test_rejects_non_numbers(self, bad):
        with pytest.raises(InvalidArgumentError):
            to_decimal(bad, "amount")


class TestDecimalMath:
    def test_precision_applies_to_division(self):
        assert DecimalMath(10).div(1, 3) == Decimal("0.3333333333")

    def test_basic_operations(self):
        math = DecimalMath()
        assert math.add("0.1", "0.2") == Decimal("0.3")
        assert math.sub(1, "0.12") == Decimal("0.88")
        assert math.mul("0.12", 40000) == Decimal("4800.00")

    def test_integral_power_is_exact(self):
        assert DecimalMath().pow(Decimal("1.12"), 2) == Decimal("1.2544")
        assert DecimalMath().pow(Decimal("1.12"), 6) == Decimal("1.973822685184")

    def test_does_not_touch_global_context(self):
        a = Decimal(1) / Decimal(3)
        DecimalMath(5).div(1, 3)
        assert Decimal(1) / Decimal(3) == a

    @pytest.mark.parametrize("bad", [0, -1, True])
    def test_rejects_bad_precision(self, bad):
        with pytest.raises(InvalidArgumentError):
            DecimalMath(bad)


class TestRoundMoney:
    def test_half_up(self):
        assert round_money(Decimal("2.675")) == Decimal("2.68")
        assert round_money(Decimal("2.665")) == Decimal("2.67")

    def test_pads_to_places(self):
        assert str(round_money("1042.4")) == "1042.40"

    def test_custom_places(self):
        assert round_money(Decimal("1.23456"), 3) == Decimal("1.235")
