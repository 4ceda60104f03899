"""Day-count conversions (30/360 convention by default).

The convention is a plain value passed in by callers; nothing here reads
global configuration.
"""

from dataclasses import dataclass
from decimal import Decimal

from debtcalc.engine.decimal_math import DecimalMath, Number
from debtcalc.engine.validation import check_positive_number

LENGTH_YEAR_360_30 = Decimal("360")
LENGTH_MONTH_360_30 = Decimal("30")
LENGTH_DAY = Decimal("1")


@dataclass(frozen=True)
class DayCountConvention:
    """How many days make a year/month/day. Not calendar-accurate."""
    days_in_year: Decimal = LENGTH_YEAR_360_30
    days_in_month: Decimal = LENGTH_MONTH_360_30
    days_in_day: Decimal = LENGTH_DAY

    def __post_init__(self):
        for name in ("days_in_year", "days_in_month", "days_in_day"):
            check_positive_number(getattr(self, name), name)


DAY_COUNT_360_30 = DayCountConvention()


def years_from_days(
    days: Number,
    convention: DayCountConvention = DAY_COUNT_360_30,
    math: DecimalMath | None = None,
) -> Decimal:
    math = math or DecimalMath()
    return math.div(days, convention.days_in_year)


def months_from_days(
    days: Number,
    convention: DayCountConvention = DAY_COUNT_360_30,
    math: DecimalMath | None = None,
) -> Decimal:
    math = math or DecimalMath()
    return math.div(days, convention.days_in_month)


def days_from_days(
    days: Number,
    convention: DayCountConvention = DAY_COUNT_360_30,
    math: DecimalMath | None = None,
) -> Decimal:
    math = math or DecimalMath()
    return math.div(days, convention.days_in_day)
