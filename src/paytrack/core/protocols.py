"""Protocol interfaces for all Paytrack collaborators.

The compensation core only ever sees plain models; everything that fetches
them sits behind these Protocols, so tests can swap in dict-backed fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from paytrack.models.discount import DateRange, Discount
    from paytrack.models.employee import Employee
    from paytrack.models.roles import RoleConfig


# ---------------------------------------------------------------------------
# Role source
# ---------------------------------------------------------------------------

@runtime_checkable
class IRoleSource(Protocol):
    """Supplies RoleConfig records keyed by career tier."""

    def get_role(self, role_id: str) -> RoleConfig | None: ...

    def list_roles(self) -> list[RoleConfig]: ...


# ---------------------------------------------------------------------------
# Employee source
# ---------------------------------------------------------------------------

@runtime_checkable
class IEmployeeSource(Protocol):
    """Supplies Employee snapshots, optionally scoped to a reporting period."""

    def list_employees(self, period: DateRange | None = None) -> list[Employee]: ...


# ---------------------------------------------------------------------------
# Discount source
# ---------------------------------------------------------------------------

@runtime_checkable
class IDiscountSource(Protocol):
    """Supplies raw discount/advance records for one employee."""

    def list_discounts(self, employee_id: str) -> list[Discount]: ...


# ---------------------------------------------------------------------------
# Cache backend
# ---------------------------------------------------------------------------

@runtime_checkable
class ICacheBackend(Protocol):
    """Redis-compatible cache interface."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def setex(self, key: str, ttl: int, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


# ---------------------------------------------------------------------------
# User directory
# ---------------------------------------------------------------------------

@runtime_checkable
class IUserDirectory(Protocol):
    """Looks up internal user ids by external CRM id."""

    def find_user_ids(self, external_id: str) -> list[str]: ...
