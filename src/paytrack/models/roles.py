"""Career tier models: paths, levels and per-tier compensation rules."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from paytrack.core.exceptions import InvalidRoleConfigError


class CareerPath(StrEnum):
    SPECIALIST = "specialist"
    LEADERSHIP = "leadership"


class CareerLevel(StrEnum):
    LEVEL1 = "level1"
    LEVEL2 = "level2"
    LEVEL3 = "level3"
    LEVEL4 = "level4"
    LEVEL5 = "level5"
    TECH_LEADER_1 = "tech_leader_1"
    TECH_LEADER_2 = "tech_leader_2"
    CONTRACT_MANAGER = "contract_manager"
    UNIT_MANAGER = "unit_manager"


class PerformanceStatus(StrEnum):
    SAFE = "safe"
    AT_RISK = "at_risk"
    ELIGIBLE_PROMOTION = "eligible_promotion"


class RoleConfig(BaseModel):
    """Compensation rules for one career tier.

    ``demand_min``/``demand_max`` bound the monthly production metric that
    drives variable pay; a tier without them earns no variable pay.
    ``quarterly_stay``/``quarterly_promotion`` are the quarterly revenue goals
    used for retention and promotion status.
    """

    id: CareerLevel
    name: str = ""
    path: CareerPath = CareerPath.SPECIALIST
    base_salary: Decimal = Field(default=Decimal("0"), ge=0)
    variable_min: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    variable_max: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    demand_min: Optional[Decimal] = None
    demand_max: Optional[Decimal] = None
    quarterly_stay: Optional[Decimal] = None
    quarterly_promotion: Optional[Decimal] = None
    description: str = ""
    is_active: Optional[bool] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_ranges(self) -> RoleConfig:
        if self.variable_min > self.variable_max:
            raise InvalidRoleConfigError(
                f"{self.id}: variable_min {self.variable_min} > variable_max {self.variable_max}"
            )
        if (
            self.demand_min is not None
            and self.demand_max is not None
            and self.demand_min > self.demand_max
        ):
            raise InvalidRoleConfigError(
                f"{self.id}: demand_min {self.demand_min} > demand_max {self.demand_max}"
            )
        if (
            self.quarterly_stay is not None
            and self.quarterly_promotion is not None
            and self.quarterly_stay > self.quarterly_promotion
        ):
            raise InvalidRoleConfigError(
                f"{self.id}: quarterly_stay {self.quarterly_stay} > "
                f"quarterly_promotion {self.quarterly_promotion}"
            )
        return self

    @property
    def has_variable_pay(self) -> bool:
        return self.demand_min is not None and self.demand_max is not None
