"""Preset constructors for AmortizedDebt (yearly, monthly, daily, custom period length)."""

from debtcalc.engine.amortization import AmortizedDebt
from debtcalc.engine.decimal_math import DEFAULT_PRECISION, Number
from debtcalc.engine.time_units import DAY_COUNT_360_30, DayCountConvention


def new_debt_amortization_custom_period_length(
    principal: Number,
    period_count: Number,
    interest_rate: Number,
    period_length_days: Number,
    convention: DayCountConvention = DAY_COUNT_360_30,
    precision: int = DEFAULT_PRECISION,
) -> AmortizedDebt:
    return AmortizedDebt(
        principal,
        period_count,
        period_length_days,
        interest_rate,
        convention=convention,
        precision=precision,
    )


def new_yearly_debt_amortization(
    principal: Number,
    period_count: Number,
    interest_rate: Number,
    convention: DayCountConvention = DAY_COUNT_360_30,
    precision: int = DEFAULT_PRECISION,
) -> AmortizedDebt:
    """One period = one convention year (360 days under 30/360)."""
    return new_debt_amortization_custom_period_length(
        principal, period_count, interest_rate, convention.days_in_year, convention, precision
    )


def new_monthly_debt_amortization(
    principal: Number,
    period_count: Number,
    interest_rate: Number,
    convention: DayCountConvention = DAY_COUNT_360_30,
    precision: int = DEFAULT_PRECISION,
) -> AmortizedDebt:
    return new_debt_amortization_custom_period_length(
        principal, period_count, interest_rate, convention.days_in_month, convention, precision
    )


def new_daily_debt_amortization(
    principal: Number,
    period_count: Number,
    interest_rate: Number,
    convention: DayCountConvention = DAY_COUNT_360_30,
    precision: int = DEFAULT_PRECISION,
) -> AmortizedDebt:
    return new_debt_amortization_custom_period_length(
        principal, period_count, interest_rate, convention.days_in_day, convention, precision
    )


PRESETS = {
    "yearly": new_yearly_debt_amortization,
    "monthly": new_monthly_debt_amortization,
    "daily": new_daily_debt_amortization,
}
