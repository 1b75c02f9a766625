"""
Date utilities for recurring monthly billing cycles.

Every function that depends on the current date takes an optional ``today``
argument and falls back to ``date.today()`` when it is omitted.
"""

import calendar
from datetime import date, datetime
from typing import Optional, Union

from money_cycle_mcp.core.exceptions import InvalidDateError, InvalidDayOfMonthError

DateLike = Union[date, datetime, str]

# Fixed English names; calendar.month_name follows the process locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _resolve_today(today: Optional[date]) -> date:
    if today is None:
        return date.today()
    return _to_date(today)


def _to_date(value: DateLike) -> date:
    """
    Coerce a date, datetime or ISO-8601 string to a date.

    Raises:
        InvalidDateError: If the value is not a well-formed calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError:
            raise InvalidDateError(f"Invalid date provided: {value!r}") from None
    raise InvalidDateError(f"Invalid date provided: {value!r}")


def validate_day_of_month(day: int) -> int:
    """
    Check that a day-of-month setting is within 1-31.

    Raises:
        InvalidDayOfMonthError: If day is not an integer between 1 and 31
    """
    if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= 31:
        raise InvalidDayOfMonthError(
            f"Invalid day of month: {day!r}. Must be between 1 and 31."
        )
    return day


def days_in_month(year: int, month: int) -> int:
    """
    Get the number of days in a month.

    Raises:
        ValueError: If month is not in valid range (1-12)
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    _, last_day = calendar.monthrange(year, month)
    return last_day


def day_of_month(value: DateLike) -> int:
    """
    Get the day of the month from a date.

    Args:
        value: Date, datetime or ISO-8601 string

    Returns:
        Day of the month (1-31)

    Raises:
        InvalidDateError: If the value is not a valid date
    """
    day = _to_date(value).day
    if not 1 <= day <= 31:
        raise InvalidDateError(f"Invalid day of month: {day}")
    return day


def date_from_day_of_month(day: int, today: Optional[date] = None) -> date:
    """
    Resolve a day of the month against the current month and year.

    Days past the end of the month resolve to the month's last day
    (e.g. 31 in April gives April 30).

    Raises:
        InvalidDayOfMonthError: If day is outside 1-31
    """
    validate_day_of_month(day)
    today = _resolve_today(today)
    last_day = days_in_month(today.year, today.month)
    return today.replace(day=min(day, last_day))


def next_cutoff_date(cutoff_day: int, today: Optional[date] = None) -> date:
    """
    Get the next credit card statement cutoff date.

    The cutoff day itself still counts as this month's occurrence. Once it
    has passed, the next month's date is returned, rolling December over to
    January of the following year. Months shorter than cutoff_day use their
    last day.

    Args:
        cutoff_day: Day of the month (1-31) the statement is generated
        today: Reference date (default: today)

    Returns:
        Date of the next cutoff

    Raises:
        InvalidDayOfMonthError: If cutoff_day is outside 1-31
    """
    validate_day_of_month(cutoff_day)
    today = _resolve_today(today)

    target_year = today.year
    target_month = today.month
    if today.day > cutoff_day:
        target_month += 1
        if target_month > 12:
            target_month = 1
            target_year += 1

    last_day = days_in_month(target_year, target_month)
    return date(target_year, target_month, min(cutoff_day, last_day))


def next_payment_due_date(payment_due_day: int, today: Optional[date] = None) -> date:
    """Get the next payment due date. Same rules as next_cutoff_date."""
    return next_cutoff_date(payment_due_day, today)


def days_between(start: DateLike, end: DateLike) -> int:
    """
    Count calendar days from start to end.

    Time of day is ignored. The result is negative when end is before start.
    """
    return (_to_date(end) - _to_date(start)).days


def days_until_next_payment(payment_due_day: int, today: Optional[date] = None) -> int:
    """
    Get the number of days left until the next payment due date.

    Returns 0 on the due day itself.

    Raises:
        InvalidDayOfMonthError: If payment_due_day is outside 1-31
    """
    today = _resolve_today(today)
    return days_between(today, next_payment_due_date(payment_due_day, today))


def format_readable_date(
    value: DateLike, separator: str = "-", numeric_month: bool = False
) -> str:
    """
    Format a date as day, month and year joined by a separator.

    Args:
        value: Date, datetime or ISO-8601 string
        separator: Text placed between the parts (e.g., "-", "/", ".")
        numeric_month: Show the month as "06" instead of "June"

    Returns:
        Formatted date (e.g., "20-June-2027" or "20/06/2027")

    Raises:
        InvalidDateError: If the value is not a valid date
    """
    resolved = _to_date(value)
    if numeric_month:
        month = f"{resolved.month:02d}"
    else:
        month = MONTH_NAMES[resolved.month - 1]
    return separator.join([f"{resolved.day:02d}", month, f"{resolved.year:04d}"])
