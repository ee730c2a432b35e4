"""Computed pay breakdown."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from paytrack.models.roles import PerformanceStatus


class Compensation(BaseModel):
    """Monthly pay for one employee. ``total`` is always the sum of the parts."""

    base_salary: Decimal = Decimal("0")
    variable_pay: Decimal = Decimal("0")
    team_bonus: Decimal = Decimal("0")
    promotion_add_on: Decimal = Decimal("0")
    unit_add_on: Decimal = Decimal("0")
    total: Decimal = Decimal("0")

    model_config = {"frozen": True}

    @classmethod
    def from_parts(
        cls,
        base_salary: Decimal,
        variable_pay: Decimal = Decimal("0"),
        team_bonus: Decimal = Decimal("0"),
        promotion_add_on: Decimal = Decimal("0"),
        unit_add_on: Decimal = Decimal("0"),
    ) -> Compensation:
        return cls(
            base_salary=base_salary,
            variable_pay=variable_pay,
            team_bonus=team_bonus,
            promotion_add_on=promotion_add_on,
            unit_add_on=unit_add_on,
            total=base_salary + variable_pay + team_bonus + promotion_add_on + unit_add_on,
        )

    @property
    def bonuses(self) -> Decimal:
        return self.team_bonus + self.promotion_add_on + self.unit_add_on


class SimulationResult(BaseModel):
    """What-if pay for a tier at a hypothetical demand and quarterly revenue."""

    role_id: str
    demand: Decimal
    base_salary: Decimal
    variable_pay: Decimal
    total: Decimal
    status: PerformanceStatus
