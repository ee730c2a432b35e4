"""Employee snapshot as consumed by the compensation engine."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from paytrack.models.roles import CareerLevel, CareerPath


class Employee(BaseModel):
    """One salesperson's performance snapshot for a reporting period."""

    # --- Identity ---
    id: str
    name: str = ""
    picture: str = ""
    role: CareerLevel = CareerLevel.LEVEL1
    path: CareerPath = CareerPath.SPECIALIST

    # --- Production metrics ---
    implantados_atual: Decimal = Decimal("0")  # Realized production, primary metric
    assinados_atual: Decimal = Decimal("0")
    meta_implantados: Decimal = Decimal("0")
    meta_assinados: Decimal = Decimal("0")
    current_demand: Decimal = Decimal("0")  # Legacy fallback metric
    ultima_sincronizacao: str = ""

    # --- Goal tracking ---
    quarterly_revenue: Decimal = Decimal("0")
    tenure: Decimal = Decimal("0")  # Years

    # --- Leadership bonus inputs ---
    team_size: Optional[int] = None
    promoted_members: Optional[int] = None
    unit_revenue: Optional[Decimal] = None

    model_config = {"str_strip_whitespace": True}
