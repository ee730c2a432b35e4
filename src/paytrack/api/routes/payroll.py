"""Payroll endpoints: net pay, team summary and payment history.

Employee snapshots and discounts arrive in the request body; roles and bonus
rules come from the application state.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from paytrack.core.formatting import format_currency, format_percent
from paytrack.models.discount import DateRange, Discount
from paytrack.models.employee import Employee
from paytrack.models.payroll import MonthlyNetPay, TeamSummary
from paytrack.services.payroll import PayrollService

router = APIRouter(tags=["payroll"])


class _SnapshotEmployees:
    """IEmployeeSource over per-month snapshots sent by the client."""

    def __init__(self, snapshots: Iterable[MonthSnapshot] = ()) -> None:
        self._by_month = {s.month.replace(day=1): s.employees for s in snapshots}

    def list_employees(self, period: DateRange | None = None) -> list[Employee]:
        if period is None or period.start is None:
            return []
        return list(self._by_month.get(period.start.replace(day=1), []))


class _PayloadDiscounts:
    """IDiscountSource returning the same request discounts for the one employee."""

    def __init__(self, employee_id: str, discounts: list[Discount]) -> None:
        self._employee_id = employee_id
        self._discounts = discounts

    def list_discounts(self, employee_id: str) -> list[Discount]:
        return list(self._discounts) if employee_id == self._employee_id else []


def _service(request: Request, employees=None, discounts=None) -> PayrollService:
    return PayrollService(
        roles=request.app.state.role_source,
        employees=employees or _SnapshotEmployees(),
        discounts=discounts or _PayloadDiscounts("", []),
        rules=request.app.state.rules,
    )


class MonthSnapshot(BaseModel):
    month: date
    employees: list[Employee] = Field(default_factory=list)


class NetPayRequest(BaseModel):
    employee: Employee
    discounts: list[Discount] = Field(default_factory=list)
    period: Optional[DateRange] = None


class NetPayResponse(BaseModel):
    employee_id: str
    gross: Decimal
    discounts: Decimal
    net: Decimal
    display: dict[str, str]


class TeamSummaryRequest(BaseModel):
    employees: list[Employee]


class TeamSummaryResponse(BaseModel):
    summary: TeamSummary
    display: dict[str, str]


class HistoryRequest(BaseModel):
    employee_id: str
    months: int = Field(default=6, ge=1, le=36)
    today: date
    snapshots: list[MonthSnapshot] = Field(default_factory=list)
    discounts: list[Discount] = Field(default_factory=list)


@router.post("/net")
async def net_pay(body: NetPayRequest, request: Request) -> NetPayResponse:
    discounts = _PayloadDiscounts(body.employee.id, body.discounts)
    result = _service(request, discounts=discounts).net_pay(body.employee, body.period)
    return NetPayResponse(
        employee_id=result.employee_id,
        gross=result.compensation.total,
        discounts=result.discounts,
        net=result.net,
        display={
            "gross": format_currency(result.compensation.total),
            "discounts": format_currency(result.discounts),
            "net": format_currency(result.net),
        },
    )


@router.post("/team-summary")
async def team_summary(body: TeamSummaryRequest, request: Request) -> TeamSummaryResponse:
    summary = _service(request).team_summary(body.employees)
    return TeamSummaryResponse(
        summary=summary,
        display={
            "total": format_currency(summary.total),
            "bonuses": format_currency(summary.bonuses),
            "total_quarterly_revenue": format_currency(summary.total_quarterly_revenue),
            "average_performance": format_percent(summary.average_performance),
        },
    )


@router.post("/history")
async def history(body: HistoryRequest, request: Request) -> list[MonthlyNetPay]:
    service = _service(
        request,
        employees=_SnapshotEmployees(body.snapshots),
        discounts=_PayloadDiscounts(body.employee_id, body.discounts),
    )
    return service.payment_history(body.employee_id, body.months, body.today)
