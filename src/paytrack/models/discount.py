"""Discount (advance/deduction) records and their monthly installments."""

from __future__ import annotations

import calendar
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel


class Discount(BaseModel):
    """Raw discount as delivered by the discount source.

    ``created_at``, ``installments_count`` and ``total_discount`` are kept as
    delivered; the allocator decides what to make of malformed values so a
    single bad record never rejects a whole batch.
    """

    id: Optional[str] = None
    seller: str = ""
    discount_type: str = ""
    created_at: Any = None  # ISO string, date or datetime
    installments_count: Any = None
    total_discount: Any = None
    notes: str = ""
    is_active: bool = True

    model_config = {"extra": "allow"}


class Installment(BaseModel):
    """One monthly slice of a discount."""

    index: int  # 1-based
    total_installments: int
    value: Decimal
    total_value: Decimal
    due_month: date  # First day of the month the installment falls in


class DateRange(BaseModel):
    """Inclusive reporting period. Only acts as a filter when both ends are set."""

    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    @classmethod
    def month_of(cls, day: date) -> DateRange:
        """The calendar month containing ``day``."""
        last = calendar.monthrange(day.year, day.month)[1]
        return cls(start=day.replace(day=1), end=day.replace(day=last))
