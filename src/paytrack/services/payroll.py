"""PayrollService — composes the compensation engine with its data sources.

Loads roles, employees and discounts through injected sources, runs the pure
engine functions and presents gross, discounted and net figures.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from paytrack.core.exceptions import RoleNotFoundError
from paytrack.core.protocols import IDiscountSource, IEmployeeSource, IRoleSource
from paytrack.engine.compensation import (
    BonusRules,
    compute_compensation,
    get_role_performance_status,
)
from paytrack.engine.discounts import add_months, sum_discounts
from paytrack.models.compensation import Compensation
from paytrack.models.discount import DateRange, Discount
from paytrack.models.employee import Employee
from paytrack.models.payroll import MonthlyNetPay, NetPay, TeamSummary
from paytrack.models.roles import RoleConfig

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


class PayrollService:
    """Per-employee and team-level pay views.

    All sources are injected at construction time; the service holds no
    state of its own between calls.
    """

    def __init__(
        self,
        *,
        roles: IRoleSource,
        employees: IEmployeeSource,
        discounts: IDiscountSource,
        rules: Optional[BonusRules] = None,
    ) -> None:
        self._roles = roles
        self._employees = employees
        self._discounts = discounts
        self._rules = rules

    def role_for(self, employee: Employee) -> RoleConfig:
        role = self._roles.get_role(employee.role)
        if role is None:
            raise RoleNotFoundError(employee.role)
        return role

    def compensation_for(self, employee: Employee) -> Compensation:
        return compute_compensation(employee, self.role_for(employee), rules=self._rules)

    def _load_discounts(self, employee_id: str) -> list[Discount] | None:
        try:
            return self._discounts.list_discounts(employee_id)
        except Exception:
            logger.warning(
                "Could not load discounts for employee %s; treating as none",
                employee_id, exc_info=True,
            )
            return None

    def net_pay(self, employee: Employee, period: Optional[DateRange]) -> NetPay:
        """Gross pay minus the installments falling in ``period``."""
        compensation = self.compensation_for(employee)
        discounts = self._load_discounts(employee.id) or []
        return NetPay(
            employee_id=employee.id,
            compensation=compensation,
            discounts=sum_discounts(discounts, period),
        )

    def team_summary(self, employees: Iterable[Employee]) -> TeamSummary:
        summary = TeamSummary()
        performance_sum = ZERO
        for employee in employees:
            role = self.role_for(employee)
            comp = compute_compensation(employee, role, rules=self._rules)

            summary.headcount += 1
            summary.base_salary += comp.base_salary
            summary.variable_pay += comp.variable_pay
            summary.bonuses += comp.bonuses
            summary.total += comp.total
            summary.total_quarterly_revenue += employee.quarterly_revenue
            summary.status_counts[get_role_performance_status(employee, role)] += 1

            if role.quarterly_stay:
                performance_sum += employee.quarterly_revenue / role.quarterly_stay * HUNDRED
            else:
                performance_sum += HUNDRED

        if summary.headcount:
            summary.average_performance = performance_sum / summary.headcount
        return summary

    def payment_history(self, employee_id: str, months: int, today: date) -> list[MonthlyNetPay]:
        """Net pay for each of the last ``months`` months, oldest first.

        The month containing ``today`` is the last entry. Months in which the
        employee does not appear in the source are reported as zeros.
        """
        history: list[MonthlyNetPay] = []
        discounts: list[Discount] | None = None
        for offset in range(months - 1, -1, -1):
            month = add_months(today, -offset)
            period = DateRange.month_of(month)
            employee = next(
                (e for e in self._employees.list_employees(period) if e.id == employee_id),
                None,
            )
            if employee is None:
                history.append(MonthlyNetPay(month=month))
                continue

            gross = self.compensation_for(employee).total
            if discounts is None:
                discounts = self._load_discounts(employee_id) or []
            monthly_discounts = sum_discounts(discounts, period)
            history.append(
                MonthlyNetPay(
                    month=month,
                    gross=gross,
                    discounts=monthly_discounts,
                    net=gross - monthly_discounts,
                )
            )
        return history
