"""Unit tests for date utilities"""

import pytest
from datetime import date, datetime, timedelta
from lease_payments.domain.exceptions import InvalidDateError
from lease_payments.utils.date_utils import (
    add_days,
    add_months,
    last_day_of_month,
    shift_date,
    to_date,
    to_optional_date,
    with_clamped_day,
)


@pytest.mark.parametrize(
    "value",
    ["2024-03-05", "20240305", " 2024-03-05 ", date(2024, 3, 5), datetime(2024, 3, 5, 17, 30)],
)
def test_to_date_accepts_date_likes(value):
    assert to_date(value) == date(2024, 3, 5)


@pytest.mark.parametrize("value", ["2024-13-45", "05/03/2024", "", "not a date"])
def test_to_date_rejects_malformed_strings(value):
    with pytest.raises(InvalidDateError):
        to_date(value)


def test_to_date_rejects_unsupported_types():
    """Test timestamps and other types are rejected, not guessed"""
    with pytest.raises(InvalidDateError):
        to_date(1704067200)

    # Still a ValueError for callers catching the builtin
    with pytest.raises(ValueError):
        to_date(None)


def test_to_optional_date():
    assert to_optional_date(None) is None
    assert to_optional_date("2024-01-01") == date(2024, 1, 1)


def test_month_helpers():
    assert last_day_of_month(date(2024, 2, 10)) == date(2024, 2, 29)
    assert last_day_of_month(date(2023, 2, 10)) == date(2023, 2, 28)
    assert with_clamped_day(date(2024, 4, 1), 31) == date(2024, 4, 30)
    assert with_clamped_day(date(2024, 4, 1), 15) == date(2024, 4, 15)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)


def test_date_steps_past_supported_range():
    """Test stepping beyond 9999-12-31 raises the domain error, not OverflowError"""
    with pytest.raises(InvalidDateError):
        add_days(date(9999, 12, 31), 1)

    with pytest.raises(InvalidDateError):
        add_days(date(2024, 1, 10), 10**10)  # Too large for a timedelta

    with pytest.raises(InvalidDateError):
        add_months(date(9999, 12, 1), 1)

    with pytest.raises(InvalidDateError):
        shift_date(date(1, 1, 1), timedelta(days=-1))

    assert add_days(date(9999, 12, 30), 1) == date(9999, 12, 31)
