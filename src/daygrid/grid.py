# SPDX-License-Identifier: MIT

import datetime
import re
from typing import Sequence, Union

import pendulum

from daygrid.model.layout import DateRange

DAYS_IN_WEEK = 7
MAX_CALENDAR_CELLS = 42

_DATE_KEY_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

DateLike = Union[pendulum.DateTime, datetime.datetime, datetime.date]


def _local_fields(date: DateLike) -> tuple[int, int, int]:
    if isinstance(date, pendulum.DateTime):
        date = date.in_tz("local")
    elif isinstance(date, datetime.datetime) and date.tzinfo is not None:
        date = pendulum.instance(date).in_tz("local")
    return date.year, date.month, date.day


def local_midnight(date: DateLike) -> pendulum.DateTime:
    year, month, day = _local_fields(date)
    return pendulum.local(year, month, day)


def format_date(date: DateLike) -> str:
    """Return the local calendar date as 'YYYY-MM-DD'; the key used wherever days are compared."""
    year, month, day = _local_fields(date)
    return f"{year:04d}-{month:02d}-{day:02d}"


def parse_date(date_str: str) -> pendulum.DateTime:
    """
    Parse 'YYYY-MM-DD' to local midnight of that day.

    Raises:
        ValueError: If the string is not a valid calendar date in that format
    """
    match = _DATE_KEY_RE.match(date_str.strip())
    if match is None:
        raise ValueError(f"Date must be in YYYY-MM-DD format, got {date_str!r}")
    year, month, day = (int(part) for part in match.groups())
    # validates month/day ranges, raising ValueError
    datetime.date(year, month, day)
    return pendulum.local(year, month, day)


def is_same_day(a: DateLike, b: DateLike) -> bool:
    return _local_fields(a) == _local_fields(b)


def is_today(date: DateLike, now: DateLike) -> bool:
    return is_same_day(date, now)


def is_same_month(date: DateLike, month_index: int, year: int) -> bool:
    """Compare local month and year; month_index is 0-based (0 = January)."""
    date_year, date_month, _ = _local_fields(date)
    return date_month == month_index + 1 and date_year == year


def add_days(date: DateLike, days: int) -> pendulum.DateTime:
    if not isinstance(date, pendulum.DateTime):
        date = local_midnight(date)
    return date.add(days=days)


def get_start_of_week(date: DateLike) -> pendulum.DateTime:
    """Monday 00:00 of the week containing date."""
    midnight = local_midnight(date)
    # isoweekday: Monday = 1 ... Sunday = 7
    return midnight.subtract(days=midnight.isoweekday() - 1)


def get_start_of_month(date: DateLike) -> pendulum.DateTime:
    year, month, _ = _local_fields(date)
    return pendulum.local(year, month, 1)


def get_week_dates(reference: DateLike) -> list[pendulum.DateTime]:
    """Return Monday through Sunday of the week containing reference, at local midnight."""
    start = get_start_of_week(reference)
    return [start.add(days=offset) for offset in range(DAYS_IN_WEEK)]


def get_month_calendar_dates(year: int, month_index: int) -> list[pendulum.DateTime]:
    """
    Build the Monday-start grid of dates covering a whole month.

    The grid begins on the Monday on or before the 1st and ends on the Sunday
    on or after the last day of the month. It never exceeds six weeks and is
    not padded to six weeks when the month fits in fewer.

    Args:
        year: Calendar year
        month_index: 0-based month (0 = January); values outside 0..11 roll
            over into neighbouring years

    Returns:
        Dates at local midnight, in order
    """
    year_offset, month_index = divmod(month_index, 12)
    first_day = pendulum.local(year + year_offset, month_index + 1, 1)
    last_day = first_day.end_of("month").start_of("day")

    grid_start = first_day.subtract(days=first_day.isoweekday() - 1)
    grid_end = last_day.add(days=DAYS_IN_WEEK - last_day.isoweekday())

    dates: list[pendulum.DateTime] = []
    current = grid_start
    for _ in range(MAX_CALENDAR_CELLS):
        if current > grid_end:
            break
        dates.append(current)
        current = current.add(days=1)
    return dates


def is_this_week(date_str: str, now: DateLike) -> bool:
    try:
        date = parse_date(date_str)
    except ValueError:
        return False
    start_of_week = get_start_of_week(now)
    end_of_week = start_of_week.add(days=DAYS_IN_WEEK)
    return start_of_week <= date < end_of_week


def is_this_month(date_str: str, now: DateLike) -> bool:
    try:
        date = parse_date(date_str)
    except ValueError:
        return False
    now_year, now_month, _ = _local_fields(now)
    return date.month == now_month and date.year == now_year


def day_range(day: DateLike) -> DateRange:
    midnight = local_midnight(day)
    return DateRange(start=midnight, end=midnight.end_of("day"))


def week_range(week_dates: Sequence[DateLike]) -> DateRange:
    """Range from midnight of the first date to the end of the last date."""
    if len(week_dates) == 0:
        raise ValueError("week_dates must not be empty")
    return DateRange(
        start=local_midnight(week_dates[0]),
        end=local_midnight(week_dates[-1]).end_of("day"),
    )
