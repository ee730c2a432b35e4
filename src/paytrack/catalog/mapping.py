"""Tolerant mapping of remote role and employee payloads onto Paytrack models.

The dashboard API has shipped several field spellings over time (snake_case
and camelCase, ``perfil`` profile names instead of tier ids, paginated
envelopes). Everything here accepts the known variants and fills defaults
instead of failing.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional

from paytrack.catalog.roles import LEADERSHIP_TIERS
from paytrack.core.numbers import to_decimal
from paytrack.models.employee import Employee
from paytrack.models.roles import CareerLevel, CareerPath, RoleConfig

PROFILE_TO_LEVEL: dict[str, CareerLevel] = {
    "VENDEDOR": CareerLevel.LEVEL1,
    "MASTER": CareerLevel.LEVEL5,
    "LIDER": CareerLevel.TECH_LEADER_1,
    "LÍDER": CareerLevel.TECH_LEADER_1,
    "GERENTE": CareerLevel.UNIT_MANAGER,
    "GERENTE CONTRATO": CareerLevel.CONTRACT_MANAGER,
    "CONTRACT_MANAGER": CareerLevel.CONTRACT_MANAGER,
    "TECNICO2": CareerLevel.TECH_LEADER_2,
    "TECNICO1": CareerLevel.TECH_LEADER_1,
    "ESPECIALISTA3": CareerLevel.LEVEL3,
    "ESPECIALISTA4": CareerLevel.LEVEL4,
    "ESPECIALISTA5": CareerLevel.LEVEL5,
}

_ENVELOPE_KEYS = ("results", "data", "items")
_LEVEL_IDS = frozenset(level.value for level in CareerLevel)


def _first(raw: Mapping[str, Any], *keys: str) -> Any:
    """First value among ``keys`` that is not None."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _first_truthy(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = raw.get(key)
        if value:
            return value
    return None


# ---------------------------------------------------------------------------
# Roles
# ---------------------------------------------------------------------------

def parse_role_record(raw: Mapping[str, Any]) -> RoleConfig | None:
    """Map one remote role payload onto a RoleConfig.

    Returns None when the record has no recognizable tier id or no name.
    """
    role_id = str(_first_truthy(raw, "id", "role_id", "slug", "pk") or "")
    name = str(raw.get("name") or "")
    if not name or role_id not in _LEVEL_IDS:
        return None

    is_active = _first(raw, "is_active", "isActive")
    return RoleConfig(
        id=CareerLevel(role_id),
        name=name,
        path=CareerPath.LEADERSHIP if raw.get("path") == "leadership" else CareerPath.SPECIALIST,
        base_salary=to_decimal(_first(raw, "base_salary", "baseSalary"), Decimal("0")),
        variable_min=to_decimal(_first(raw, "variable_min", "variableMin"), Decimal("0")),
        variable_max=to_decimal(_first(raw, "variable_max", "variableMax"), Decimal("0")),
        demand_min=to_decimal(_first(raw, "demand_min", "demandMin")),
        demand_max=to_decimal(_first(raw, "demand_max", "demandMax")),
        quarterly_stay=to_decimal(_first(raw, "quarterly_stay", "quarterlyStay")),
        quarterly_promotion=to_decimal(_first(raw, "quarterly_promotion", "quarterlyPromotion")),
        description=str(raw.get("description") or ""),
        is_active=bool(is_active) if is_active is not None else None,
    )


# ---------------------------------------------------------------------------
# Employees
# ---------------------------------------------------------------------------

def map_profile_to_level(raw: Any) -> CareerLevel:
    """Resolve a tier id or legacy profile name; unknown values fall back to level1."""
    value = str(raw if raw is not None else "").strip()
    if value in _LEVEL_IDS:
        return CareerLevel(value)
    return PROFILE_TO_LEVEL.get(value.upper(), CareerLevel.LEVEL1)


def _resolve_path(raw: Mapping[str, Any], level: CareerLevel) -> CareerPath:
    details = raw.get("role_details") or raw.get("roleDetails") or {}
    declared = _first(raw, "role_path", "rolePath")
    if declared is None and isinstance(details, Mapping):
        declared = details.get("path")
    if declared is None:
        declared = raw.get("path")
    if declared in (CareerPath.LEADERSHIP.value, CareerPath.SPECIALIST.value):
        return CareerPath(declared)
    return CareerPath.LEADERSHIP if level in LEADERSHIP_TIERS else CareerPath.SPECIALIST


def _team_size(raw: Mapping[str, Any]) -> Optional[int]:
    if not (raw.get("team_size") or raw.get("team")):
        return None
    if raw.get("team_size") is not None:
        size = to_decimal(raw["team_size"])
        return int(size) if size is not None else None
    team = raw.get("team")
    return len(team) if isinstance(team, (Mapping, list)) else 0


def _optional_int(value: Any) -> Optional[int]:
    number = to_decimal(value)
    return int(number) if number is not None else None


def parse_employee_record(raw: Mapping[str, Any]) -> Employee:
    """Map one dashboard-summary (or users) payload onto an Employee."""
    employee_id = _first(raw, "id", "user_id", "pk", "moskit_id", "username")
    email = raw.get("email") if isinstance(raw.get("email"), str) else ""
    name = _first_truthy(raw, "nome", "name", "full_name", "username") or (
        email.split("@")[0] if email else ""
    )
    level = map_profile_to_level(_first_truthy(raw, "role", "role_id", "roleId", "perfil"))
    zero = Decimal("0")

    return Employee(
        id=str(employee_id) if employee_id is not None else "",
        name=str(name),
        picture=str(_first_truthy(raw, "picture_url", "picture", "photo") or ""),
        role=level,
        path=_resolve_path(raw, level),
        implantados_atual=to_decimal(raw.get("implantados_atual"), zero),
        assinados_atual=to_decimal(raw.get("assinados_atual"), zero),
        meta_implantados=to_decimal(raw.get("meta_implantados"), zero),
        meta_assinados=to_decimal(raw.get("meta_assinados"), zero),
        ultima_sincronizacao=str(raw.get("ultima_sincronizacao") or ""),
        current_demand=to_decimal(
            _first_truthy(raw, "current_demand", "monthly_target", "revenue"), zero
        ),
        quarterly_revenue=to_decimal(
            _first_truthy(raw, "quarterly_revenue", "total_revenue", "sales"), zero
        ),
        tenure=to_decimal(_first_truthy(raw, "tenure", "years_working"), zero),
        team_size=_team_size(raw),
        promoted_members=_optional_int(raw.get("promoted_members")),
        unit_revenue=to_decimal(raw.get("unit_revenue")),
    )


def parse_employee_records(payload: Any) -> list[Employee]:
    """Map a list or a paginated envelope of employee payloads.

    Records that resolve to an empty id are dropped.
    """
    records: list[Any] | None = None
    if isinstance(payload, list):
        records = payload
    elif isinstance(payload, Mapping):
        for key in _ENVELOPE_KEYS:
            if isinstance(payload.get(key), list):
                records = payload[key]
                break
        else:
            records = next((v for v in payload.values() if isinstance(v, list)), None)
    if not records:
        return []
    employees = [parse_employee_record(r) for r in records if isinstance(r, Mapping)]
    return [e for e in employees if e.id]
