# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional

import pendulum

from daygrid.grid import local_midnight, parse_date
from daygrid.log import get_logger
from daygrid.model.event import Event
from daygrid.model.placement import LegacyDated, Placement, Scheduled, Unplaceable
from daygrid.time import to_instant

logger = get_logger(__name__)


def to_legacy_day(value: Any) -> Optional[pendulum.DateTime]:
    """Read a legacy 'date' field as local midnight, or None if it cannot be placed."""
    if value is None:
        return None
    if isinstance(value, datetime.date):
        # YAML loads unquoted dates (and timestamps) as date/datetime objects
        return local_midnight(value)
    if isinstance(value, str):
        try:
            return parse_date(value)
        except ValueError as e:
            logger.debug("malformed_legacy_date", value=value, error=str(e))
            return None
    return None


def resolve_placement(event: Event) -> Placement:
    """
    Decide, once, how an event is placed in time.

    A present start_time always wins over a legacy date, even when it cannot
    be parsed. In that case the event is unplaceable rather than falling back
    to the date.
    """
    raw_start = event.get("start_time")
    if raw_start is not None and raw_start != "":
        start = to_instant(raw_start)
        if start is None:
            return Unplaceable(reason=f"unparseable start_time {raw_start!r}")
        return Scheduled(start=start, end=to_instant(event.get("end_time")))

    raw_date = event.get("date")
    if raw_date is not None and raw_date != "":
        time_of_day = event.get("time")
        return LegacyDated(
            day=to_legacy_day(raw_date),
            time_of_day=time_of_day if time_of_day else None,
        )

    return Unplaceable(reason="no start_time or date")


def placement_start(placement: Placement) -> Optional[pendulum.DateTime]:
    if isinstance(placement, Scheduled):
        return placement.start
    return None


def placement_day(placement: Placement) -> Optional[pendulum.DateTime]:
    """The local day an event is anchored to, or None when it cannot be placed."""
    match placement:
        case Scheduled(start=start):
            return start
        case LegacyDated(day=day):
            return day
    return None


def timed_span(
    placement: Placement,
) -> Optional[tuple[pendulum.DateTime, pendulum.DateTime]]:
    """The (start, end) pair of a fully timed event; None for anything else."""
    if isinstance(placement, Scheduled) and placement.end is not None:
        return placement.start, placement.end
    return None
