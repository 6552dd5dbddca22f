# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional

import pendulum

from daygrid.log import get_logger

logger = get_logger(__name__)


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def python_to_pendulum_local(python_value: datetime.datetime) -> pendulum.DateTime:
    pendulum_value = pendulum.instance(python_value, tz="local")
    return pendulum_value.in_tz("local")


def datetime_from_str_local(datetime_str: str) -> pendulum.DateTime:
    """
    Parse an ISO-8601 string. Strings without an offset are local wall-clock time.

    A date-only string is local midnight of that day. Anything that would need
    the current clock to complete it (a bare time, "now") is rejected, as are
    durations and intervals.

    Raises:
        ValueError: If the string is not a date or a date and time
    """
    text = datetime_str.strip()
    if text.lower() == "now":
        raise ValueError(f"not a fixed instant: {datetime_str!r}")

    parsed = pendulum.parse(text, exact=True, tz="local")
    if isinstance(parsed, pendulum.DateTime):
        return parsed.in_tz("local")
    if isinstance(parsed, pendulum.Date):
        return pendulum.local(parsed.year, parsed.month, parsed.day)
    raise ValueError(f"not a date and time: {datetime_str!r}")


def to_instant(value: Any) -> Optional[pendulum.DateTime]:
    """
    Normalize a serialized or already-parsed instant to a local pendulum.DateTime.

    Returns None for missing values and for anything that cannot be read as
    an instant. Never raises.
    """
    if value is None or value == "":
        return None
    if isinstance(value, pendulum.DateTime):
        return value.in_tz("local")
    if isinstance(value, datetime.datetime):
        return python_to_pendulum_local(value)
    if isinstance(value, str):
        try:
            return datetime_from_str_local(value)
        except (ValueError, TypeError, OverflowError) as e:
            logger.debug("unparseable_instant", value=value, error=str(e))
            return None
    logger.debug("unsupported_instant_type", type=type(value).__name__)
    return None


def minutes_since_midnight(instant: pendulum.DateTime) -> int:
    local = instant.in_tz("local")
    return local.hour * 60 + local.minute


def minutes_between(start: pendulum.DateTime, end: pendulum.DateTime) -> float:
    return (end - start).total_seconds() / 60


def format_clock(value: Any) -> str:
    """Format an instant as zero-padded 24-hour HH:MM; invalid or missing input gives 00:00."""
    instant = to_instant(value)
    if instant is None:
        return "00:00"
    return f"{instant.hour:02d}:{instant.minute:02d}"
