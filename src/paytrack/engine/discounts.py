"""Discount installment allocation.

A discount of ``total_discount`` split into ``installments_count`` equal
monthly installments, the first falling in the month the discount was
created. Installment ``i`` (0-based) is due in the creation month advanced by
``i`` calendar months. At most ``MAX_INSTALLMENTS`` installments are produced;
larger counts are capped and the total is split over the capped count.

A reporting period selects the installments whose due month overlaps it:

    month_start <= period.end and month_end >= period.start

Callers disagree on what "no period" means. Listing views show every
installment; period totals show nothing. ``include_all_if_no_filter`` makes
the choice explicit at each call site.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Optional

from paytrack.core.numbers import to_decimal, to_positive_int
from paytrack.models.discount import DateRange, Discount, Installment

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
# Upper bound on installments per discount (30 years of monthly slices).
MAX_INSTALLMENTS = 360


def parse_anchor_date(value: Any) -> Optional[date]:
    """Creation date of a discount, or None when absent or unparseable."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError:
            return None
    return None


def add_months(day: date, months: int) -> date:
    """First day of the month ``months`` after ``day``'s month."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_end(month_start: date) -> date:
    return month_start.replace(day=calendar.monthrange(month_start.year, month_start.month)[1])


def _overlaps(month_start: date, start: date, end: date) -> bool:
    return month_start <= end and month_end(month_start) >= start


def _effective(period: Optional[DateRange]) -> Optional[DateRange]:
    if period is None or not period.is_complete:
        return None
    return period


def allocate_installments(
    discount: Discount,
    period: Optional[DateRange] = None,
    *,
    include_all_if_no_filter: bool = True,
) -> list[Installment]:
    """Installments of ``discount`` that fall in ``period``.

    Args:
        discount: Raw discount record.
        period: Reporting period. A period missing either end is ignored.
        include_all_if_no_filter: With no effective period, return every
            installment (True) or none (False).

    Returns:
        Installments in due order. Empty when the creation date is missing
        or unparseable.
    """
    created = parse_anchor_date(discount.created_at)
    if created is None:
        if discount.created_at not in (None, ""):
            logger.warning(
                "Discount %s has unparseable created_at %r; no installments allocated",
                discount.id, discount.created_at,
            )
        return []

    period = _effective(period)
    if period is None and not include_all_if_no_filter:
        return []

    count = to_positive_int(discount.installments_count)
    if count > MAX_INSTALLMENTS:
        logger.warning(
            "Discount %s has %d installments; capping at %d",
            discount.id, count, MAX_INSTALLMENTS,
        )
        count = MAX_INSTALLMENTS
    total = to_decimal(discount.total_discount, ZERO)
    value = total / count

    installments: list[Installment] = []
    for i in range(count):
        due_month = add_months(created, i)
        if period is not None and not _overlaps(due_month, period.start, period.end):
            continue
        installments.append(
            Installment(
                index=i + 1,
                total_installments=count,
                value=value,
                total_value=total,
                due_month=due_month,
            )
        )
    return installments


def installment_for_period(discount: Discount, period: Optional[DateRange]) -> Optional[Installment]:
    """First installment whose whole due month lies inside ``period``."""
    period = _effective(period)
    if period is None:
        return None
    for installment in allocate_installments(discount, period):
        start = installment.due_month
        if start >= period.start and month_end(start) <= period.end:
            return installment
    return None


def sum_discounts(
    discounts: Iterable[Discount],
    period: Optional[DateRange] = None,
    *,
    include_all_if_no_filter: bool = False,
) -> Decimal:
    """Total of the installments of ``discounts`` falling in ``period``.

    Period totals use the filter-required convention: without a complete
    period the total is zero unless ``include_all_if_no_filter`` is set.
    """
    total = ZERO
    for discount in discounts:
        for installment in allocate_installments(
            discount, period, include_all_if_no_filter=include_all_if_no_filter
        ):
            total += installment.value
    return total


def lifetime_discount_total(discounts: Iterable[Discount]) -> Decimal:
    """Face value of all discounts, ignoring installments and dates."""
    return sum((to_decimal(d.total_discount, ZERO) for d in discounts), ZERO)
