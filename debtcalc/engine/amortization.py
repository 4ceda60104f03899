"""Amortized debt: level payment and principal/interest schedule.

Pure functions plus a small stateful wrapper. Decimal in, dataclass out. No I/O.
Nothing is rounded here; rounding to cents happens at the reporting boundary.
"""

import logging
from dataclasses import dataclass
from decimal import MAX_PREC, Context, Decimal

from debtcalc.engine.decimal_math import DEFAULT_PRECISION, DecimalMath, Number
from debtcalc.engine.errors import InvalidArgumentError
from debtcalc.engine.time_units import (
    DAY_COUNT_360_30,
    DayCountConvention,
    days_from_days,
    months_from_days,
    years_from_days,
)
from debtcalc.engine.validation import check_positive_integer, check_positive_number

logger = logging.getLogger(__name__)

_EXACT = Context(prec=MAX_PREC)  # Sum of two finite decimals without rounding


@dataclass(frozen=True)
class RepaymentRecord:
    principal_amount: Decimal
    interest_amount: Decimal

    @property
    def total_amount(self) -> Decimal:
        return _EXACT.add(self.principal_amount, self.interest_amount)


def check_interest_rate(rate: Number, math: DecimalMath) -> Decimal:
    """Positive rate that still moves ``1 + i`` away from 1 at the working precision."""
    rate = check_positive_number(rate, "interest_rate")
    if math.add(1, rate) == 1:
        raise InvalidArgumentError("interest_rate", rate, "is below the configured precision")
    return rate


def discount_factor(rate: Decimal, math: DecimalMath) -> Decimal:
    """v = 1 / (1 + i). Assumes a validated positive rate."""
    return math.div(1, math.add(1, rate))


def level_payment(principal: Decimal, rate: Decimal, period_count: int, math: DecimalMath) -> Decimal:
    """Single repayment of an amortized annuity.

    K = PV / ((1 - v^n) / i)
    """
    rate = check_interest_rate(rate, math)
    v = discount_factor(rate, math)
    annuity_factor = math.div(math.sub(1, math.pow(v, period_count)), rate)
    if annuity_factor == 0:
        raise InvalidArgumentError("interest_rate", rate, "is below the configured precision")
    return math.div(principal, annuity_factor)


def repayment_schedule(
    principal: Decimal,
    rate: Decimal,
    period_count: int,
    math: DecimalMath,
) -> list[RepaymentRecord]:
    """Split each level payment into interest on the unpaid balance and principal.

    Records are in period order (period 1 first). Full precision is carried
    from one period to the next and the last period is not reconciled.
    """
    payment = level_payment(principal, rate, period_count, math)
    unpaid_balance = principal

    repayments: list[RepaymentRecord] = []
    for _ in range(period_count):
        interest_amount = math.mul(rate, unpaid_balance)
        principal_amount = math.sub(payment, interest_amount)
        repayments.append(RepaymentRecord(principal_amount, interest_amount))
        unpaid_balance = math.sub(unpaid_balance, principal_amount)

    return repayments


class AmortizedDebt:
    """A fixed-rate debt repaid in equal installments.

    Setting ``principal``, ``period_count`` or ``interest_rate`` rebuilds the
    whole schedule. Setting ``period_length_days`` does not: period length only
    feeds the duration and unit conversions.

    Args:
        principal: Amount owed at period 0
        period_count: Number of compounding (and repayment) periods
        period_length_days: Length of one period in days
        interest_rate: Rate per period as a multiplier (0.12 for 12%), not annualized
        convention: Day-count convention for the month/year figures
        precision: Significant digits used for every computation
    """

    def __init__(
        self,
        principal: Number,
        period_count: Number,
        period_length_days: Number,
        interest_rate: Number,
        *,
        convention: DayCountConvention = DAY_COUNT_360_30,
        precision: int = DEFAULT_PRECISION,
    ):
        self._math = DecimalMath(precision)
        self._convention = convention
        self._principal = check_positive_number(principal, "principal")
        self._period_count = check_positive_integer(period_count, "period_count")
        self._period_length_days = check_positive_number(period_length_days, "period_length_days")
        self._interest_rate = check_interest_rate(interest_rate, self._math)
        self._repayments: tuple[RepaymentRecord, ...] = ()
        self._recalculate()

    def __repr__(self) -> str:
        return (
            f"AmortizedDebt(principal={self._principal}, period_count={self._period_count}, "
            f"period_length_days={self._period_length_days}, interest_rate={self._interest_rate})"
        )

    def _recalculate(self) -> None:
        self._repayments = tuple(
            repayment_schedule(self._principal, self._interest_rate, self._period_count, self._math)
        )
        logger.debug(
            "Recalculated %d repayments (principal=%s, rate=%s)",
            self._period_count, self._principal, self._interest_rate,
        )

    # ---- Stored parameters ----

    @property
    def principal(self) -> Decimal:
        return self._principal

    @principal.setter
    def principal(self, value: Number) -> None:
        self._principal = check_positive_number(value, "principal")
        self._recalculate()

    @property
    def period_count(self) -> int:
        return self._period_count

    @period_count.setter
    def period_count(self, value: Number) -> None:
        self._period_count = check_positive_integer(value, "period_count")
        self._recalculate()

    @property
    def interest_rate(self) -> Decimal:
        return self._interest_rate

    @interest_rate.setter
    def interest_rate(self, value: Number) -> None:
        self._interest_rate = check_interest_rate(value, self._math)
        self._recalculate()

    @property
    def period_length_days(self) -> Decimal:
        return self._period_length_days

    @period_length_days.setter
    def period_length_days(self, value: Number) -> None:
        # Split of principal/interest does not depend on period length
        self._period_length_days = check_positive_number(value, "period_length_days")

    @property
    def convention(self) -> DayCountConvention:
        return self._convention

    @property
    def precision(self) -> int:
        return self._math.precision

    # ---- Derived figures ----

    @property
    def discount_factor(self) -> Decimal:
        return discount_factor(self._interest_rate, self._math)

    @property
    def single_repayment(self) -> Decimal:
        return level_payment(self._principal, self._interest_rate, self._period_count, self._math)

    @property
    def period_length_in_years(self) -> Decimal:
        return years_from_days(self._period_length_days, self._convention, self._math)

    @property
    def period_length_in_months(self) -> Decimal:
        return months_from_days(self._period_length_days, self._convention, self._math)

    @property
    def period_length_in_days(self) -> Decimal:
        return days_from_days(self._period_length_days, self._convention, self._math)

    def _duration_days(self) -> Decimal:
        return self._math.mul(self._period_count, self._period_length_days)

    @property
    def duration_in_years(self) -> Decimal:
        return years_from_days(self._duration_days(), self._convention, self._math)

    @property
    def duration_in_months(self) -> Decimal:
        return months_from_days(self._duration_days(), self._convention, self._math)

    @property
    def duration_in_days(self) -> Decimal:
        return days_from_days(self._duration_days(), self._convention, self._math)

    # ---- Schedule ----

    @property
    def repayments(self) -> tuple[RepaymentRecord, ...]:
        """Repayments in period order; period 1 is ``repayments[0]``."""
        return self._repayments

    @property
    def total_principal_repaid(self) -> Decimal:
        total = Decimal("0")
        for r in self._repayments:
            total = self._math.add(total, r.principal_amount)
        return total

    @property
    def total_interest(self) -> Decimal:
        total = Decimal("0")
        for r in self._repayments:
            total = self._math.add(total, r.interest_amount)
        return total

    def repayments_as_dicts(self) -> dict[int, dict[str, Decimal]]:
        """Repayments keyed by period number (1-indexed)."""
        return {
            period: {
                "principal_amount": r.principal_amount,
                "interest_amount": r.interest_amount,
                "total_amount": r.total_amount,
            }
            for period, r in enumerate(self._repayments, start=1)
        }

    def result_as_dict(self) -> dict:
        """Nested export of every stored and derived figure."""
        return {
            "debt_principal": self.principal,
            "debt_no_of_compounding_periods": self.period_count,
            "debt_period_length": {
                "years": self.period_length_in_years,
                "months": self.period_length_in_months,
                "days": self.period_length_in_days,
            },
            "debt_interest": self.interest_rate,
            "debt_discount_factor": self.discount_factor,
            "debt_duration": {
                "years": self.duration_in_years,
                "months": self.duration_in_months,
                "days": self.duration_in_days,
            },
            "debt_single_repayment": self.single_repayment,
            "debt_repayments": self.repayments_as_dicts(),
        }
