"""Date manipulation utilities"""

import calendar
from datetime import date, datetime, timedelta
from typing import Union

from dateutil.relativedelta import relativedelta

from lease_payments.domain.exceptions import InvalidDateError

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[date, datetime, str]
DateOffset = Union[timedelta, relativedelta]


def to_date(value: DateLike) -> date:
    """
    Normalize a date-like value to a date.

    Accepts date, datetime, 'YYYY-MM-DD' and 'YYYYMMDD' strings.

    Raises:
        InvalidDateError: On malformed strings or unsupported types
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(value.strip(), fmt).date()
            except ValueError:
                continue
        raise InvalidDateError(f"Unsupported date string format: {value!r}")
    raise InvalidDateError(f"Unsupported type for date: {type(value).__name__}")


def to_optional_date(value: DateLike | None) -> date | None:
    """Like to_date, but passes None through"""
    return None if value is None else to_date(value)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def last_day_of_month(day: date) -> date:
    """Last calendar day of the month containing day"""
    return day.replace(day=days_in_month(day.year, day.month))


def with_clamped_day(day: date, target_day: int) -> date:
    """Move to target_day within the same month, clamped to the month length"""
    return day.replace(day=min(target_day, days_in_month(day.year, day.month)))


def shift_date(from_date: date, offset: DateOffset) -> date:
    """
    from_date + offset.

    Raises:
        InvalidDateError: If the result falls outside year 1..9999
    """
    try:
        return from_date + offset
    except (OverflowError, ValueError) as e:
        raise InvalidDateError(f"Date out of range: {from_date.isoformat()} + {offset!r}") from e


def add_months(from_date: date, months: int) -> date:
    """Calendar month addition; the day is clamped to the resulting month (Jan 31 + 1 -> Feb 28/29)"""
    return shift_date(from_date, relativedelta(months=months))



def add_days(from_date: date, days: int) -> date:
    """Day addition with the same out-of-range handling as shift_date"""
    try:
        offset = timedelta(days=days)
    except OverflowError as e:
        raise InvalidDateError(f"Day offset out of range: {days}") from e
    return shift_date(from_date, offset)
