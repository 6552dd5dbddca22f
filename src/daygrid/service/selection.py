# SPDX-License-Identifier: MIT

from typing import Optional, Sequence

import pendulum

from daygrid.grid import DateLike, format_date, week_range
from daygrid.model.event import Event
from daygrid.service.placement import (
    placement_day,
    placement_start,
    resolve_placement,
    timed_span,
)


def events_for_day(events: Sequence[Event], day: DateLike) -> list[Event]:
    """
    Select the events that belong to a local day, sorted by start.

    Timed events match on the local day of their start instant, legacy events
    on their date. Events that cannot be placed are left out.

    Args:
        events: All events, in any order
        day: The day to select

    Returns:
        Matching events ascending by start instant. Legacy events have no
        instant and keep the positions they hold in the input.
    """
    day_key = format_date(day)

    selected: list[tuple[Event, Optional[pendulum.DateTime]]] = []
    for event in events:
        placement = resolve_placement(event)
        anchor = placement_day(placement)
        if anchor is None or format_date(anchor) != day_key:
            continue
        selected.append((event, placement_start(placement)))

    return _sort_timed_in_place(selected)


def _sort_timed_in_place(
    selected: list[tuple[Event, Optional[pendulum.DateTime]]],
) -> list[Event]:
    timed = [
        (slot, event, start)
        for slot, (event, start) in enumerate(selected)
        if start is not None
    ]
    timed_sorted = sorted(timed, key=lambda item: item[2])

    result = [event for event, _ in selected]
    for (slot, _, _), (_, event, _) in zip(timed, timed_sorted):
        result[slot] = event
    return result


def events_for_week(events: Sequence[Event], week_dates: Sequence[DateLike]) -> list[Event]:
    """
    Select the events that fall inside a week, keeping input order.

    Args:
        events: All events
        week_dates: The week's dates, Monday through Sunday

    Returns:
        Events whose start instant (or legacy date) lies between midnight of
        the first date and the end of the last date, inclusive
    """
    week = week_range(week_dates)

    selected = []
    for event in events:
        anchor = placement_day(resolve_placement(event))
        if anchor is not None and anchor in week:
            selected.append(event)
    return selected


def events_by_day(
    events: Sequence[Event], week_dates: Sequence[DateLike]
) -> dict[str, list[Event]]:
    """Split a week selection into per-day columns keyed by 'YYYY-MM-DD'."""
    week_events = events_for_week(events, week_dates)
    anchors = [placement_day(resolve_placement(event)) for event in week_events]

    columns: dict[str, list[Event]] = {}
    for date in week_dates:
        date_key = format_date(date)
        columns[date_key] = [
            event
            for event, anchor in zip(week_events, anchors)
            if anchor is not None and format_date(anchor) == date_key
        ]
    return columns


def events_by_date(
    events: Sequence[Event], dates: Sequence[DateLike]
) -> dict[str, list[Event]]:
    """Day selections for a run of dates (a month grid), omitting empty days."""
    groups: dict[str, list[Event]] = {}
    for date in dates:
        day_events = events_for_day(events, date)
        if len(day_events) > 0:
            groups[format_date(date)] = day_events
    return groups


def timeline_events(events: Sequence[Event]) -> list[Event]:
    """Keep only events that have both a valid start and end, and so a place on the timeline."""
    return [event for event in events if timed_span(resolve_placement(event)) is not None]


def untimed_events(events: Sequence[Event]) -> list[Event]:
    return [event for event in events if timed_span(resolve_placement(event)) is None]
