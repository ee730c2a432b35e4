"""Tests for numeric coercion and presentation helpers."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from paytrack.core.formatting import format_currency, format_percent, quantize_money
from paytrack.core.logging import configure_logging
from paytrack.core.numbers import to_decimal, to_positive_int


@pytest.mark.parametrize(
    "raw, expected",
    [
        (10, Decimal("10")),
        (2.5, Decimal("2.5")),
        ("  300.10 ", Decimal("300.10")),
        (Decimal("7"), Decimal("7")),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
        ("NaN", None),
        (float("inf"), None),
    ],
)
def test_to_decimal(raw, expected):
    assert to_decimal(raw) == expected


def test_to_decimal_default():
    assert to_decimal("x", Decimal("0")) == Decimal("0")


@pytest.mark.parametrize("raw, expected", [(3, 3), ("4", 4), (0, 1), (None, 1), ("-1", 1), (2.9, 2)])
def test_to_positive_int(raw, expected):
    assert to_positive_int(raw) == expected


def test_quantize_money_half_up():
    assert quantize_money(Decimal("33.335")) == Decimal("33.34")


@pytest.mark.parametrize(
    "value, expected",
    [(1234.5, "R$ 1.234,50"), (Decimal("1000000"), "R$ 1.000.000,00"), (-10, "-R$ 10,00"), (0, "R$ 0,00")],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_percent():
    assert format_percent(25) == "25.0%"
    assert format_percent(Decimal("12.36")) == "12.4%"


def test_configure_logging_sets_level():
    configure_logging("debug")
    assert logging.getLogger("paytrack").level == logging.DEBUG
    configure_logging("nonsense")
    assert logging.getLogger("paytrack").level == logging.INFO
