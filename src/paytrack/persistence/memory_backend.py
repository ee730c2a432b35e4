"""In-memory backends for unit tests — dict-backed fakes."""

from __future__ import annotations

from typing import Iterable, Optional

from paytrack.core.exceptions import DirectoryError
from paytrack.models.discount import DateRange, Discount
from paytrack.models.employee import Employee
from paytrack.models.roles import RoleConfig


class MemoryRoleSource:
    """Dict-backed IRoleSource for unit tests."""

    def __init__(self, roles: Iterable[RoleConfig] = ()) -> None:
        self._roles: dict[str, RoleConfig] = {str(r.id): r for r in roles}

    def add(self, role: RoleConfig) -> None:
        self._roles[str(role.id)] = role

    def get_role(self, role_id: str) -> RoleConfig | None:
        return self._roles.get(str(role_id))

    def list_roles(self) -> list[RoleConfig]:
        return list(self._roles.values())


class MemoryEmployeeSource:
    """IEmployeeSource returning canned snapshots, optionally per period."""

    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._default: list[Employee] = list(employees)
        self._by_period: dict[tuple, list[Employee]] = {}
        self.requested_periods: list[Optional[DateRange]] = []

    def set_for_period(self, period: DateRange, employees: Iterable[Employee]) -> None:
        self._by_period[(period.start, period.end)] = list(employees)

    def list_employees(self, period: DateRange | None = None) -> list[Employee]:
        self.requested_periods.append(period)
        if period is not None:
            return self._by_period.get((period.start, period.end), self._default)
        return self._default


class MemoryDiscountSource:
    """Dict-backed IDiscountSource; ``fail_for`` simulates an unreachable API."""

    def __init__(self) -> None:
        self._discounts: dict[str, list[Discount]] = {}
        self.fail_for: set[str] = set()

    def add(self, employee_id: str, *discounts: Discount) -> None:
        self._discounts.setdefault(employee_id, []).extend(discounts)

    def list_discounts(self, employee_id: str) -> list[Discount]:
        if employee_id in self.fail_for:
            raise ConnectionError(f"discount source unavailable for {employee_id}")
        return list(self._discounts.get(employee_id, []))


class MemoryCacheBackend:
    """Dict-backed ICacheBackend for unit tests."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def setex(self, key: str, ttl: int, value: str) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)


class MemoryUserDirectory:
    """IUserDirectory with canned external-id → internal-id answers."""

    def __init__(self, users: dict[str, list[str]] | None = None) -> None:
        self._users = dict(users or {})
        self.calls: list[str] = []
        self.fail = False

    def find_user_ids(self, external_id: str) -> list[str]:
        self.calls.append(external_id)
        if self.fail:
            raise DirectoryError(f"directory lookup failed for {external_id!r}")
        return list(self._users.get(external_id, []))
