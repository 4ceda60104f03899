"""Pydantic schemas for API request/response models."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class AmortizeRequest(BaseModel):
    principal: Decimal = Field(..., description="Amount owed at period 0")
    period_count: int = Field(..., description="Number of compounding periods")
    interest_rate: Decimal = Field(..., description="Rate per period as a multiplier, e.g. 0.12")

    # Period length: explicit days, or a preset. Defaults to yearly.
    period: Literal["yearly", "monthly", "daily"] | None = None
    period_length_days: Decimal | None = None


# ---- Response schemas ----

class UnitsResponse(BaseModel):
    years: Decimal
    months: Decimal
    days: Decimal


class RepaymentResponse(BaseModel):
    period: int
    principal_amount: Decimal
    interest_amount: Decimal
    total_amount: Decimal

    # Rounded to display places
    principal_amount_rounded: Decimal
    interest_amount_rounded: Decimal
    total_amount_rounded: Decimal


class AmortizationResponse(BaseModel):
    principal: Decimal
    period_count: int
    interest_rate: Decimal
    discount_factor: Decimal
    single_repayment: Decimal
    single_repayment_rounded: Decimal
    total_interest: Decimal
    period_length: UnitsResponse
    duration: UnitsResponse
    repayments: list[RepaymentResponse]
