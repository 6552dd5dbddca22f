# SPDX-License-Identifier: MIT

"""Factories for event records used across the test suite."""

from typing import Any, Optional, cast

import pendulum

from daygrid.model.event import Event


def local(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0
) -> pendulum.DateTime:
    return pendulum.local(year, month, day, hour, minute)


def create_timed_event(
    id: str,
    start_time: Any,
    end_time: Any = None,
    title: Optional[str] = None,
    **fields: Any,
) -> Event:
    """Create an event placed by explicit start/end instants.

    Pass end_time=None to build an event with a start but no end.
    """
    event: dict[str, Any] = {
        "id": id,
        "title": title if title is not None else f"event {id}",
        "start_time": start_time,
    }
    if end_time is not None:
        event["end_time"] = end_time
    event.update(fields)
    return cast(Event, event)


def create_legacy_event(
    id: str,
    date: Any,
    time: Optional[str] = None,
    title: Optional[str] = None,
    **fields: Any,
) -> Event:
    """Create an event in the older date + optional time-of-day shape."""
    event: dict[str, Any] = {
        "id": id,
        "title": title if title is not None else f"event {id}",
        "date": date,
    }
    if time is not None:
        event["time"] = time
    event.update(fields)
    return cast(Event, event)


def ids(events: list[Event]) -> list[str]:
    return [event["id"] for event in events]
