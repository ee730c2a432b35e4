"""Presentation helpers for money and percentages (pt-BR conventions)."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def quantize_money(value: Decimal) -> Decimal:
    """Round to whole cents, half-up."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal | int | float) -> str:
    """Render ``1234.5`` as ``R$ 1.234,50``."""
    amount = quantize_money(Decimal(str(value)))
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(amount):,.2f}"
    # swap the en-US separators for pt-BR ones
    grouped = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {grouped}"


def format_percent(value: Decimal | int | float) -> str:
    return f"{Decimal(str(value)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}%"
