"""Paytrack exception hierarchy."""

from __future__ import annotations


class PaytrackError(Exception):
    """Base exception for all Paytrack errors."""


class RoleNotFoundError(PaytrackError):
    """No role configuration exists for the requested career tier."""

    def __init__(self, role_id: str) -> None:
        self.role_id = role_id
        super().__init__(f"No role configuration for tier {role_id!r}")


class InvalidRoleConfigError(PaytrackError, ValueError):
    """Role configuration violates its range invariants."""


class CacheError(PaytrackError):
    """Redis cache operation failed."""


class RoleStoreError(PaytrackError):
    """Remote role catalog (DynamoDB) operation failed."""


class DirectoryError(PaytrackError):
    """User directory lookup failed."""
