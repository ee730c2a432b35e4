"""Lenient numeric coercion for values arriving from remote payloads."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, overload


@overload
def to_decimal(value: Any, default: Decimal) -> Decimal: ...


@overload
def to_decimal(value: Any, default: None = None) -> Decimal | None: ...


def to_decimal(value: Any, default: Decimal | None = None) -> Decimal | None:
    """Convert ``value`` to a finite Decimal, or return ``default``.

    Accepts ints, floats, Decimals and numeric strings. ``None``, blanks,
    booleans, NaN and infinities all yield ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return default
    if not result.is_finite():
        return default
    return result


def to_positive_int(value: Any, default: int = 1) -> int:
    """Convert ``value`` to an int >= 1, falling back to ``default``."""
    number = to_decimal(value)
    if number is None:
        return default
    count = int(number)
    return count if count >= 1 else default
