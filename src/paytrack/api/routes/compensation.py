"""Compensation endpoints: breakdown for an employee snapshot and simulation."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from paytrack.core.exceptions import RoleNotFoundError
from paytrack.engine.compensation import (
    compute_compensation,
    get_health_coverage,
    get_role_performance_status,
    simulate_compensation,
)
from paytrack.models.compensation import Compensation, SimulationResult
from paytrack.models.employee import Employee
from paytrack.models.roles import PerformanceStatus, RoleConfig

router = APIRouter(tags=["compensation"])


class CompensationRequest(BaseModel):
    employee: Employee
    role: Optional[RoleConfig] = None  # Looked up by employee.role when omitted


class CompensationResponse(BaseModel):
    employee_id: str
    compensation: Compensation
    status: PerformanceStatus
    health_coverage: str


class SimulationRequest(BaseModel):
    role_id: str
    demand: Decimal
    quarterly_revenue: Decimal = Decimal("0")


def _resolve_role(request: Request, role_id: str) -> RoleConfig:
    role = request.app.state.role_source.get_role(role_id)
    if role is None:
        raise RoleNotFoundError(role_id)
    return role


@router.post("/compensation")
async def compensation(body: CompensationRequest, request: Request) -> CompensationResponse:
    employee = body.employee
    role = body.role or _resolve_role(request, employee.role)
    return CompensationResponse(
        employee_id=employee.id,
        compensation=compute_compensation(employee, role, rules=request.app.state.rules),
        status=get_role_performance_status(employee, role),
        health_coverage=get_health_coverage(employee.tenure),
    )


@router.post("/compensation/simulate")
async def simulate(body: SimulationRequest, request: Request) -> SimulationResult:
    role = _resolve_role(request, body.role_id)
    return simulate_compensation(role, body.demand, body.quarterly_revenue)
