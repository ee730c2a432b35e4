"""Aggregated payroll views built on top of per-employee compensation."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from paytrack.models.compensation import Compensation
from paytrack.models.roles import PerformanceStatus


class NetPay(BaseModel):
    """Gross compensation minus the discounts that fall in a period."""

    employee_id: str
    compensation: Compensation
    discounts: Decimal = Decimal("0")

    @property
    def net(self) -> Decimal:
        return self.compensation.total - self.discounts


class MonthlyNetPay(BaseModel):
    month: date  # First day of the month
    gross: Decimal = Decimal("0")
    discounts: Decimal = Decimal("0")
    net: Decimal = Decimal("0")


class TeamSummary(BaseModel):
    """Team-wide totals shown on the overview and financial summary panels."""

    headcount: int = 0
    base_salary: Decimal = Decimal("0")
    variable_pay: Decimal = Decimal("0")
    bonuses: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
    total_quarterly_revenue: Decimal = Decimal("0")
    average_performance: Decimal = Decimal("0")  # Percent of stay goal
    status_counts: dict[PerformanceStatus, int] = Field(
        default_factory=lambda: {status: 0 for status in PerformanceStatus}
    )
