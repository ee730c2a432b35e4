"""Discount installment endpoints."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from paytrack.engine.discounts import allocate_installments, sum_discounts
from paytrack.models.discount import DateRange, Discount, Installment

router = APIRouter(tags=["discounts"])


class InstallmentsRequest(BaseModel):
    discount: Discount
    period: Optional[DateRange] = None
    include_all_if_no_filter: bool = True


class TotalRequest(BaseModel):
    discounts: list[Discount]
    period: Optional[DateRange] = None


class TotalResponse(BaseModel):
    total: Decimal
    discount_count: int


@router.post("/installments")
async def installments(body: InstallmentsRequest) -> list[Installment]:
    return allocate_installments(
        body.discount, body.period, include_all_if_no_filter=body.include_all_if_no_filter
    )


@router.post("/total")
async def total(body: TotalRequest) -> TotalResponse:
    return TotalResponse(
        total=sum_discounts(body.discounts, body.period),
        discount_count=len(body.discounts),
    )
