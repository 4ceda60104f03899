"""Amortization routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from debtcalc.api.deps import get_settings
from debtcalc.api.schemas import (
    AmortizeRequest,
    AmortizationResponse,
    RepaymentResponse,
    UnitsResponse,
)
from debtcalc.config import Settings
from debtcalc.engine.amortization import AmortizedDebt
from debtcalc.engine.decimal_math import round_money
from debtcalc.engine.errors import InvalidArgumentError
from debtcalc.engine.factories import PRESETS, new_debt_amortization_custom_period_length

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["amortization"])


def _build_debt(req: AmortizeRequest, cfg: Settings) -> AmortizedDebt:
    if req.period is not None and req.period_length_days is not None:
        raise HTTPException(
            status_code=400,
            detail="Provide either period or period_length_days, not both.",
        )

    convention = cfg.day_count_convention()
    if req.period_length_days is not None:
        return new_debt_amortization_custom_period_length(
            req.principal,
            req.period_count,
            req.interest_rate,
            req.period_length_days,
            convention=convention,
            precision=cfg.decimal_precision,
        )

    preset = PRESETS[req.period or "yearly"]
    return preset(
        req.principal,
        req.period_count,
        req.interest_rate,
        convention=convention,
        precision=cfg.decimal_precision,
    )


def _debt_to_response(debt: AmortizedDebt, places: int) -> AmortizationResponse:
    """Convert an AmortizedDebt to the API response."""
    repayments = [
        RepaymentResponse(
            period=period,
            principal_amount=r.principal_amount,
            interest_amount=r.interest_amount,
            total_amount=r.total_amount,
            principal_amount_rounded=round_money(r.principal_amount, places),
            interest_amount_rounded=round_money(r.interest_amount, places),
            total_amount_rounded=round_money(r.total_amount, places),
        )
        for period, r in enumerate(debt.repayments, start=1)
    ]

    single_repayment = debt.single_repayment
    return AmortizationResponse(
        principal=debt.principal,
        period_count=debt.period_count,
        interest_rate=debt.interest_rate,
        discount_factor=debt.discount_factor,
        single_repayment=single_repayment,
        single_repayment_rounded=round_money(single_repayment, places),
        total_interest=debt.total_interest,
        period_length=UnitsResponse(
            years=debt.period_length_in_years,
            months=debt.period_length_in_months,
            days=debt.period_length_in_days,
        ),
        duration=UnitsResponse(
            years=debt.duration_in_years,
            months=debt.duration_in_months,
            days=debt.duration_in_days,
        ),
        repayments=repayments,
    )


@router.post("/amortize", response_model=AmortizationResponse)
async def amortize(req: AmortizeRequest, cfg: Settings = Depends(get_settings)):
    """Level payment and full repayment schedule for one debt."""
    try:
        debt = _build_debt(req, cfg)
    except InvalidArgumentError as e:
        logger.warning("Rejected amortization request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return _debt_to_response(debt, cfg.display_places)
