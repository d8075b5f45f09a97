"""Tests for field validation helpers."""

from __future__ import annotations

import datetime

import pytest

from cqrs_ddd_conditions.validation import (
    validate_in,
    validate_in_range,
    validate_is_boolean,
    validate_is_date,
    validate_is_number,
    validate_is_text,
)

# -- validate_in --------------------------------------------------------------


def test_validate_in_member() -> None:
    assert validate_in("title", ["title", "comments"]) == "title"


def test_validate_in_non_member() -> None:
    assert validate_in("unknown_col", ["title", "comments"]) is None


def test_validate_in_absent_value() -> None:
    assert validate_in(None, ["title"]) is None


def test_validate_in_absent_allowed_set() -> None:
    assert validate_in("title", None) is None


def test_validate_in_unhashable_value() -> None:
    assert validate_in(["title"], frozenset({"title"})) is None


# -- shape checks -------------------------------------------------------------


@pytest.mark.parametrize("value", ["Milk", ""])
def test_validate_is_text_accepts_strings(value: str) -> None:
    assert validate_is_text(value) == value


@pytest.mark.parametrize("value", [None, 1, 1.5, True, ["Milk"], b"Milk"])
def test_validate_is_text_rejects_non_strings(value: object) -> None:
    assert validate_is_text(value) is None


@pytest.mark.parametrize("value", [0, 42, -3, 1.5])
def test_validate_is_number_accepts_numbers(value: float) -> None:
    assert validate_is_number(value) == value


@pytest.mark.parametrize(
    "value", [True, False, "42", None, float("nan"), float("inf")]
)
def test_validate_is_number_rejects(value: object) -> None:
    assert validate_is_number(value) is None


def test_validate_is_number_integer_only() -> None:
    assert validate_is_number(1.5, allow_decimal=False) is None
    integral = validate_is_number(2.0, allow_decimal=False)
    assert integral == 2
    assert isinstance(integral, int)
    assert validate_is_number(7, allow_decimal=False) == 7


def test_validate_in_range() -> None:
    assert validate_in_range(5, (1, 10)) == 5
    assert validate_in_range(1, (1, 10)) == 1
    assert validate_in_range(10, (1, 10)) == 10
    assert validate_in_range(11, (1, 10)) is None
    assert validate_in_range(11, None) == 11
    assert validate_in_range(None, (1, 10)) is None


def test_validate_is_boolean() -> None:
    assert validate_is_boolean(True) is True
    assert validate_is_boolean(False) is False
    assert validate_is_boolean(0) is None
    assert validate_is_boolean("true") is None


def test_validate_is_date_accepts_iso_strings_and_dates() -> None:
    assert validate_is_date("2024-02-29") == "2024-02-29"
    today = datetime.date(2024, 1, 1)
    assert validate_is_date(today) is today


@pytest.mark.parametrize(
    "value",
    [
        "2023-02-29",
        "20240101",
        "2024-1-1",
        "yesterday",
        datetime.datetime(2024, 1, 1, 12, 0),
        20240101,
        None,
    ],
)
def test_validate_is_date_rejects(value: object) -> None:
    assert validate_is_date(value) is None
