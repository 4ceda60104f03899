"""CLI for printing an amortization schedule.

Usage:
    python -m debtcalc.cli 40000 6 0.12
    python -m debtcalc.cli 40000 6 0.12 --period monthly
    python -m debtcalc.cli 40000 6 0.12 --period-length 90 --json
"""

import argparse
import json
import logging
import sys

from debtcalc.config import settings
from debtcalc.engine.amortization import AmortizedDebt
from debtcalc.engine.decimal_math import round_money
from debtcalc.engine.errors import InvalidArgumentError
from debtcalc.engine.factories import PRESETS, new_debt_amortization_custom_period_length

logger = logging.getLogger(__name__)


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def print_schedule(debt: AmortizedDebt, places: int) -> None:
    def fmt(v) -> str:
        return f"{round_money(v, places):,}"

    _header("Amortized Debt")
    print(f"  Principal:          {fmt(debt.principal)}")
    print(f"  Periods:            {debt.period_count}")
    print(f"  Rate per period:    {debt.interest_rate}")
    print(f"  Period length:      {debt.period_length_in_days} days")
    print(f"  Duration:           {debt.duration_in_years} years")
    print(f"  Single repayment:   {fmt(debt.single_repayment)}")
    print(f"  Total interest:     {fmt(debt.total_interest)}")

    _header("Repayments")
    print(f"  {'Period':>6}  {'Principal':>16}  {'Interest':>16}  {'Total':>16}")
    for period, r in enumerate(debt.repayments, start=1):
        print(
            f"  {period:>6}  {fmt(r.principal_amount):>16}"
            f"  {fmt(r.interest_amount):>16}  {fmt(r.total_amount):>16}"
        )
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Amortized debt repayment schedule")
    parser.add_argument("principal", help="Amount owed at period 0")
    parser.add_argument("periods", help="Number of compounding periods")
    parser.add_argument("rate", help="Interest rate per period as a multiplier, e.g. 0.12")
    length = parser.add_mutually_exclusive_group()
    length.add_argument("--period", choices=sorted(PRESETS), default="yearly", help="Period length preset (default: yearly)")
    length.add_argument("--period-length", dest="period_length", help="Custom period length in days")
    parser.add_argument("--precision", type=int, default=settings.decimal_precision, help="Significant digits")
    parser.add_argument("--places", type=int, default=settings.display_places, help="Display decimal places")
    parser.add_argument("--json", action="store_true", help="Print the full-precision export as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    convention = settings.day_count_convention()
    try:
        if args.period_length is not None:
            debt = new_debt_amortization_custom_period_length(
                args.principal, args.periods, args.rate, args.period_length,
                convention=convention, precision=args.precision,
            )
        else:
            debt = PRESETS[args.period](
                args.principal, args.periods, args.rate,
                convention=convention, precision=args.precision,
            )
    except InvalidArgumentError as e:
        logger.warning("Invalid argument: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(debt.result_as_dict(), default=str, indent=2))
    else:
        print_schedule(debt, args.places)
    return 0


if __name__ == "__main__":
    sys.exit(main())
