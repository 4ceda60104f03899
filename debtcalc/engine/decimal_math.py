"""Exact decimal arithmetic used by the amortization engine.

All operations run in a private ``decimal.Context`` so the precision is an
explicit parameter rather than process-wide state. Binary floats never take
part in a computation: they are converted through ``str()`` on the way in.
"""

from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_EVEN, ROUND_HALF_UP

from debtcalc.engine.errors import InvalidArgumentError

DEFAULT_PRECISION = 50  # Significant digits
TWO_PLACES = Decimal("0.01")

Number = Decimal | int | float | str


def to_decimal(value: Number, name: str = "value") -> Decimal:
    """Coerce an int/str/float/Decimal to a finite Decimal."""
    if isinstance(value, bool):
        raise InvalidArgumentError(name, value, "must be a number")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation:
            raise InvalidArgumentError(name, value, "must be a number") from None
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        raise InvalidArgumentError(name, value, "must be a number")

    if not result.is_finite():
        raise InvalidArgumentError(name, value, "must be a finite number")
    return result


def round_money(value: Number, places: int = 2) -> Decimal:
    """Round for display. Never used inside the schedule computation."""
    quantum = Decimal(1).scaleb(-places)
    return to_decimal(value).quantize(quantum, ROUND_HALF_UP)


class DecimalMath:
    """add/sub/mul/div/pow over Decimals at a fixed number of significant digits."""

    def __init__(self, precision: int = DEFAULT_PRECISION):
        if isinstance(precision, bool) or not isinstance(precision, int) or precision <= 0:
            raise InvalidArgumentError("precision", precision, "must be a positive integer")
        self.precision = precision
        self.context = Context(prec=precision, rounding=ROUND_HALF_EVEN)

    def __repr__(self) -> str:
        return f"DecimalMath(precision={self.precision})"

    def add(self, a: Number, b: Number) -> Decimal:
        return self.context.add(to_decimal(a), to_decimal(b))

    def sub(self, a: Number, b: Number) -> Decimal:
        return self.context.subtract(to_decimal(a), to_decimal(b))

    def mul(self, a: Number, b: Number) -> Decimal:
        return self.context.multiply(to_decimal(a), to_decimal(b))

    def div(self, a: Number, b: Number) -> Decimal:
        return self.context.divide(to_decimal(a), to_decimal(b))

    def pow(self, base: Number, exponent: int) -> Decimal:
        """Raise to an integral power; exact up to the context precision."""
        return self.context.power(to_decimal(base), exponent)
