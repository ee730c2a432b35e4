"""Compensation engine: base salary, variable pay and leadership bonuses.

Variable pay has two modes, chosen per employee:

    tiered  (primary)   implantados_atual > 0
        percent = variable_max if metric >= demand_max else variable_min
    linear  (fallback)  otherwise, on current_demand
        percent = variable_min + clamp(metric - demand_min) / range * (variable_max - variable_min)

    variable_pay = percent / 100 * metric   (raw metric, never the clamped one)

Bonuses are dispatched on the employee's career path. Specialists get none;
leaders get the team bonus (tech leader tiers), the promotion add-on and the
unit add-on (unit manager tier), each only when its input is set.

Every function here is pure. Malformed, missing or negative inputs degrade to
zero, so the total never falls below the base salary.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Optional, Sequence

from pydantic import BaseModel

from paytrack.catalog.roles import (
    HEALTH_COVERAGE,
    NOT_ELIGIBLE,
    TEAM_BONUS_TIERS,
    UNIT_ADD_ON_TIERS,
    UNIT_ADD_ONS,
)
from paytrack.models.compensation import Compensation, SimulationResult
from paytrack.models.employee import Employee
from paytrack.models.roles import CareerLevel, CareerPath, PerformanceStatus, RoleConfig

ZERO = Decimal("0")
HUNDRED = Decimal("100")


class BonusRules(BaseModel):
    """Amounts and eligibility tables for the leadership bonuses."""

    team_bonus_floor: Decimal = Decimal("500")
    team_bonus_ceiling: Decimal = Decimal("900")
    promotion_per_member: Decimal = Decimal("300")
    assumed_team_performance: Decimal = Decimal("80")
    unit_add_ons: tuple[tuple[Decimal, Decimal], ...] = UNIT_ADD_ONS
    team_bonus_tiers: frozenset[CareerLevel] = TEAM_BONUS_TIERS
    unit_add_on_tiers: frozenset[CareerLevel] = UNIT_ADD_ON_TIERS

    model_config = {"frozen": True}


DEFAULT_RULES = BonusRules()


# ---------------------------------------------------------------------------
# Variable pay
# ---------------------------------------------------------------------------

def compute_variable_pay_linear(role: RoleConfig, metric: Decimal) -> Decimal:
    """Variable pay with the percentage interpolated across the demand band."""
    metric = max(metric, ZERO)
    if role.demand_min is None or role.demand_max is None:
        return ZERO

    demand_range = role.demand_max - role.demand_min
    if demand_range == 0:
        # Degenerate band: any demand saturates to the top percentage.
        percent = role.variable_max
    else:
        position = min(max(metric - role.demand_min, ZERO), demand_range)
        percent = role.variable_min + (position / demand_range) * (
            role.variable_max - role.variable_min
        )
    return percent / HUNDRED * metric


def select_variable_percent(role: RoleConfig, metric: Decimal) -> Decimal:
    """Fixed percentage for the tiered mode: the band's top or its floor."""
    if role.demand_max is not None and metric >= role.demand_max:
        return role.variable_max
    return role.variable_min


def compute_variable_pay_tiered(role: RoleConfig, metric: Decimal) -> Decimal:
    """Variable pay with a fixed percentage chosen by threshold."""
    if metric <= 0:
        return ZERO
    if role.demand_min is None or role.demand_max is None:
        return ZERO
    return select_variable_percent(role, metric) / HUNDRED * metric


def compute_variable_pay(employee: Employee, role: RoleConfig) -> Decimal:
    """Pick the mode from the metrics available on the employee."""
    if employee.implantados_atual:
        return compute_variable_pay_tiered(role, employee.implantados_atual)
    return compute_variable_pay_linear(role, employee.current_demand)


# ---------------------------------------------------------------------------
# Leadership bonuses
# ---------------------------------------------------------------------------

def compute_team_bonus(
    team_size: int,
    avg_performance_percent: Decimal,
    *,
    floor: Decimal = DEFAULT_RULES.team_bonus_floor,
    ceiling: Decimal = DEFAULT_RULES.team_bonus_ceiling,
) -> Decimal:
    """Scale between ``floor`` (0% team performance) and ``ceiling`` (>= 100%).

    ``team_size`` gates eligibility at the call site; the amount itself does
    not grow with headcount.
    """
    multiplier = min(max(Decimal(avg_performance_percent) / HUNDRED, ZERO), Decimal("1"))
    return floor + (ceiling - floor) * multiplier


def compute_promotion_add_on(
    promoted_count: int,
    *,
    per_member: Decimal = DEFAULT_RULES.promotion_per_member,
) -> Decimal:
    return Decimal(max(promoted_count, 0)) * per_member


def compute_unit_add_on(
    unit_revenue: Decimal,
    table: Sequence[tuple[Decimal, Decimal]] = UNIT_ADD_ONS,
) -> Decimal:
    """Add-on of the highest threshold not exceeding ``unit_revenue``."""
    for threshold, add_on in sorted(table, reverse=True):
        if unit_revenue >= threshold:
            return add_on
    return ZERO


BonusRule = Callable[[Employee, BonusRules], tuple[Decimal, Decimal, Decimal]]


def _no_bonuses(employee: Employee, rules: BonusRules) -> tuple[Decimal, Decimal, Decimal]:
    return ZERO, ZERO, ZERO


def _leadership_bonuses(
    employee: Employee, rules: BonusRules
) -> tuple[Decimal, Decimal, Decimal]:
    team_bonus = promotion_add_on = unit_add_on = ZERO
    if employee.team_size and employee.role in rules.team_bonus_tiers:
        team_bonus = compute_team_bonus(
            employee.team_size,
            rules.assumed_team_performance,
            floor=rules.team_bonus_floor,
            ceiling=rules.team_bonus_ceiling,
        )
    if employee.promoted_members:
        promotion_add_on = compute_promotion_add_on(
            employee.promoted_members, per_member=rules.promotion_per_member
        )
    if employee.unit_revenue and employee.role in rules.unit_add_on_tiers:
        unit_add_on = compute_unit_add_on(employee.unit_revenue, rules.unit_add_ons)
    return team_bonus, promotion_add_on, unit_add_on


BONUS_RULES_BY_PATH: dict[CareerPath, BonusRule] = {
    CareerPath.SPECIALIST: _no_bonuses,
    CareerPath.LEADERSHIP: _leadership_bonuses,
}


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------

def compute_compensation(
    employee: Employee,
    role: RoleConfig,
    *,
    rules: Optional[BonusRules] = None,
) -> Compensation:
    """Full monthly breakdown for ``employee`` under ``role``.

    ``role`` must be the employee's tier configuration; resolving it is the
    caller's job.
    """
    rules = rules or DEFAULT_RULES
    team_bonus, promotion_add_on, unit_add_on = BONUS_RULES_BY_PATH[employee.path](
        employee, rules
    )
    return Compensation.from_parts(
        base_salary=role.base_salary,
        variable_pay=compute_variable_pay(employee, role),
        team_bonus=team_bonus,
        promotion_add_on=promotion_add_on,
        unit_add_on=unit_add_on,
    )


# ---------------------------------------------------------------------------
# Goals and benefits
# ---------------------------------------------------------------------------

def get_performance_status(
    revenue: Decimal,
    stay_threshold: Optional[Decimal] = None,
    promotion_threshold: Optional[Decimal] = None,
) -> PerformanceStatus:
    """Classify quarterly revenue against the tier's goals.

    Promotion is checked first, so it wins even over an inconsistent pair of
    thresholds. A zero threshold counts as unset.
    """
    if promotion_threshold and revenue >= promotion_threshold:
        return PerformanceStatus.ELIGIBLE_PROMOTION
    if stay_threshold and revenue < stay_threshold:
        return PerformanceStatus.AT_RISK
    return PerformanceStatus.SAFE


def get_role_performance_status(employee: Employee, role: RoleConfig) -> PerformanceStatus:
    return get_performance_status(
        employee.quarterly_revenue, role.quarterly_stay, role.quarterly_promotion
    )


def get_health_coverage(tenure: Decimal) -> str:
    for min_tenure, coverage in reversed(HEALTH_COVERAGE):
        if tenure >= min_tenure:
            return coverage
    return NOT_ELIGIBLE


def simulate_compensation(
    role: RoleConfig, demand: Decimal, quarterly_revenue: Decimal = ZERO
) -> SimulationResult:
    """What-if pay at a hypothetical demand, using the interpolated mode."""
    variable_pay = compute_variable_pay_linear(role, demand)
    return SimulationResult(
        role_id=role.id.value,
        demand=demand,
        base_salary=role.base_salary,
        variable_pay=variable_pay,
        total=role.base_salary + variable_pay,
        status=get_performance_status(
            quarterly_revenue, role.quarterly_stay, role.quarterly_promotion
        ),
    )
