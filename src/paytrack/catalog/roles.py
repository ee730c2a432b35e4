"""Default career tier table and the RoleCatalog lookup.

The tables in this module are configuration data: the nine tiers of the
sales career plan, the unit manager add-on steps and the health plan
coverage by tenure.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Iterable, Iterator, Mapping

from paytrack.core.exceptions import RoleNotFoundError
from paytrack.models.roles import CareerLevel, CareerPath, RoleConfig

logger = logging.getLogger(__name__)

_D = Decimal

DEFAULT_ROLES: dict[CareerLevel, RoleConfig] = {
    role.id: role
    for role in (
        RoleConfig(
            id=CareerLevel.LEVEL1, name="Nível 1", path=CareerPath.SPECIALIST,
            base_salary=_D("2500"), variable_min=_D("5"), variable_max=_D("10"),
            demand_min=_D("5000"), demand_max=_D("10000"),
            description="Entrada - Foco em onboarding e aprendizado",
        ),
        RoleConfig(
            id=CareerLevel.LEVEL2, name="Nível 2", path=CareerPath.SPECIALIST,
            base_salary=_D("2500"), variable_min=_D("10"), variable_max=_D("10"),
            description="Transição para Nível 3 após Demanda 2",
        ),
        RoleConfig(
            id=CareerLevel.LEVEL3, name="Nível 3", path=CareerPath.SPECIALIST,
            base_salary=_D("3000"), variable_min=_D("10"), variable_max=_D("40"),
            demand_min=_D("6000"), demand_max=_D("20000"),
            quarterly_stay=_D("21000"), quarterly_promotion=_D("45000"),
            description="Intermediário - Crescimento de demanda",
        ),
        RoleConfig(
            id=CareerLevel.LEVEL4, name="Nível 4 / Líder Técnico 1", path=CareerPath.SPECIALIST,
            base_salary=_D("4000"), variable_min=_D("15"), variable_max=_D("50"),
            quarterly_stay=_D("45000"), quarterly_promotion=_D("60000"),
            description="Sênior - Alta performance",
        ),
        RoleConfig(
            id=CareerLevel.LEVEL5, name="Nível 5 / Especialista", path=CareerPath.SPECIALIST,
            base_salary=_D("5000"), variable_min=_D("15"), variable_max=_D("60"),
            demand_min=_D("10000"), demand_max=_D("30000"),
            quarterly_stay=_D("60000"),
            description="Expert - Referência técnica",
        ),
        RoleConfig(
            id=CareerLevel.TECH_LEADER_1, name="Líder Técnico Nível 1", path=CareerPath.LEADERSHIP,
            base_salary=_D("4000"), variable_min=_D("15"), variable_max=_D("50"),
            quarterly_stay=_D("45000"), quarterly_promotion=_D("60000"),
            description="Liderança inicial - Bônus de equipe R$500-R$900",
        ),
        RoleConfig(
            id=CareerLevel.TECH_LEADER_2, name="Líder Técnico Nível 2", path=CareerPath.LEADERSHIP,
            base_salary=_D("5000"), variable_min=_D("15"), variable_max=_D("60"),
            quarterly_stay=_D("60000"),
            description="Gestão de projetos complexos",
        ),
        RoleConfig(
            id=CareerLevel.CONTRACT_MANAGER, name="Gerente de Contrato", path=CareerPath.LEADERSHIP,
            base_salary=_D("7000"), variable_min=_D("0"), variable_max=_D("0"),
            demand_min=_D("100000"), demand_max=_D("200000"),
            description="Bônus R$2.000-R$8.000 - Promoção com R$1.2M em 6 meses",
        ),
        RoleConfig(
            id=CareerLevel.UNIT_MANAGER, name="Gerente Técnico de Unidade", path=CareerPath.LEADERSHIP,
            base_salary=_D("10000"), variable_min=_D("0"), variable_max=_D("0"),
            description="Add-ons por receita da unidade",
        ),
    )
}

# (unit revenue threshold, monthly add-on), ascending and distinct
UNIT_ADD_ONS: tuple[tuple[Decimal, Decimal], ...] = (
    (_D("200000"), _D("10000")),
    (_D("350000"), _D("21000")),
    (_D("500000"), _D("30000")),
)

# (minimum tenure in years, health plan coverage), ascending
HEALTH_COVERAGE: tuple[tuple[Decimal, str], ...] = (
    (_D("1"), "Titular"),
    (_D("2"), "Titular + 1 dependente"),
    (_D("3"), "Titular + 2 dependentes"),
    (_D("4"), "Titular + 3 dependentes"),
)
NOT_ELIGIBLE = "Não elegível"

TEAM_BONUS_TIERS: frozenset[CareerLevel] = frozenset(
    {CareerLevel.TECH_LEADER_1, CareerLevel.TECH_LEADER_2}
)
UNIT_ADD_ON_TIERS: frozenset[CareerLevel] = frozenset({CareerLevel.UNIT_MANAGER})
LEADERSHIP_TIERS: frozenset[CareerLevel] = frozenset(
    role.id for role in DEFAULT_ROLES.values() if role.path is CareerPath.LEADERSHIP
)


class RoleCatalog:
    """Lookup of RoleConfig by career tier. Satisfies IRoleSource."""

    def __init__(self, roles: Iterable[RoleConfig] | Mapping[Any, RoleConfig] | None = None) -> None:
        if roles is None:
            roles = DEFAULT_ROLES.values()
        elif isinstance(roles, Mapping):
            roles = roles.values()
        self._roles: dict[str, RoleConfig] = {str(role.id): role for role in roles}

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> RoleCatalog:
        """Build a catalog from remote role payloads, skipping unusable ones."""
        from paytrack.catalog.mapping import parse_role_record

        roles: list[RoleConfig] = []
        for record in records:
            role = parse_role_record(record)
            if role is None:
                logger.debug("Skipping role record without a known id or name: %r", record)
                continue
            roles.append(role)
        return cls(roles)

    def get(self, role_id: str) -> RoleConfig | None:
        return self._roles.get(str(role_id))

    def require(self, role_id: str) -> RoleConfig:
        role = self.get(role_id)
        if role is None:
            raise RoleNotFoundError(str(role_id))
        return role

    # ---- IRoleSource methods ----

    def get_role(self, role_id: str) -> RoleConfig | None:
        return self.get(role_id)

    def list_roles(self) -> list[RoleConfig]:
        return list(self._roles.values())

    def __contains__(self, role_id: object) -> bool:
        return str(role_id) in self._roles

    def __iter__(self) -> Iterator[RoleConfig]:
        return iter(self._roles.values())

    def __len__(self) -> int:
        return len(self._roles)
