"""Input checks for debt parameters."""

from decimal import Decimal

from debtcalc.engine.decimal_math import Number, to_decimal
from debtcalc.engine.errors import InvalidArgumentError


def check_positive_number(value: Number, name: str) -> Decimal:
    """Return ``value`` as a Decimal, or raise InvalidArgumentError if it is not > 0."""
    number = to_decimal(value, name)
    if number <= 0:
        raise InvalidArgumentError(name, value)
    return number


def check_positive_integer(value: Number, name: str) -> int:
    """Like check_positive_number, but the value must also be integral (``"6"`` and ``6.0`` pass)."""
    number = check_positive_number(value, name)
    if number != number.to_integral_value():
        raise InvalidArgumentError(name, value, "must be a positive integer")
    return int(number)
