# SPDX-License-Identifier: MIT

from typing import Any, Optional, Sequence

from daygrid.color import event_color
from daygrid.grid import DateLike, is_same_day
from daygrid.model.event import Event
from daygrid.model.layout import HorizontalSlot, TimelineBlock
from daygrid.service.conflict import ConflictGroup, group_conflicts, overlap
from daygrid.service.placement import placement_start, resolve_placement, timed_span
from daygrid.service.selection import events_by_day, events_for_day, timeline_events
from daygrid.time import minutes_between, minutes_since_midnight, to_instant

# 1 unit = 1 minute on a 1440-unit day axis
MIN_EXTENT = 30.0
DEFAULT_EXTENT = 60.0


def vertical_offset(start: Any) -> int:
    """Minutes since local midnight of start; 0 when start is missing or invalid."""
    instant = to_instant(start)
    if instant is None:
        return 0
    return minutes_since_midnight(instant)


def vertical_extent(start: Any, end: Any) -> float:
    """Minutes between start and end, never less than 30; 60 when either side is missing or invalid."""
    start_instant = to_instant(start)
    end_instant = to_instant(end)
    if start_instant is None or end_instant is None:
        return DEFAULT_EXTENT
    return max(MIN_EXTENT, minutes_between(start_instant, end_instant))


def horizontal_slot(
    group: Sequence[Event], index_in_group: int, gap: float = 0.0
) -> HorizontalSlot:
    """
    Column position of a group member as fractions of the available width.

    Args:
        group: The conflict group the event belongs to
        index_in_group: Position of the event within the group
        gap: Fraction of the width left empty between neighbouring members

    Returns:
        The member's left edge and width
    """
    size = len(group)
    width = (1.0 - gap * (size - 1)) / size
    return HorizontalSlot(left=index_in_group * (width + gap), width=width)


def now_offset(now: DateLike) -> int:
    return vertical_offset(now)


def is_now_visible(day: DateLike, now: DateLike) -> bool:
    return is_same_day(now, day)


def _seed_top(group: ConflictGroup) -> Optional[int]:
    start = placement_start(resolve_placement(group[0]))
    if start is None:
        return None
    return minutes_since_midnight(start)


def _group_bounds(group: ConflictGroup) -> Optional[tuple[float, float]]:
    top = float("inf")
    bottom = float("-inf")
    for event in group:
        span = timed_span(resolve_placement(event))
        if span is None:
            continue
        event_top = vertical_offset(span[0])
        top = min(top, event_top)
        bottom = max(bottom, event_top + vertical_extent(*span))
    if top == float("inf"):
        return None
    return top, bottom


def stack_offsets_by_seed(groups: Sequence[ConflictGroup]) -> dict[int, float]:
    """
    Push down groups whose seed starts at the same minute as an earlier
    group's seed that it does not overlap.

    Returns:
        Vertical offset per group index; groups that stay put are omitted
    """
    offsets: dict[int, float] = {}
    for group_index, group in enumerate(groups):
        if len(group) == 0:
            continue
        seed = group[0]
        seed_top = _seed_top(group)
        if seed_top is None:
            continue

        offset = 0.0
        for previous_index in range(group_index):
            previous_group = groups[previous_index]
            if len(previous_group) == 0:
                continue
            previous_seed = previous_group[0]
            previous_span = timed_span(resolve_placement(previous_seed))
            if previous_span is None:
                continue
            previous_top = vertical_offset(previous_span[0])
            previous_height = vertical_extent(*previous_span)

            if seed_top == previous_top and not overlap(seed, previous_seed):
                previous_offset = offsets.get(previous_index, 0.0)
                offset = max(offset, previous_height + previous_offset)

        if offset > 0:
            offsets[group_index] = offset
    return offsets


def stack_offsets_by_extent(groups: Sequence[ConflictGroup]) -> dict[int, float]:
    """
    Push down groups whose vertical extent intersects an earlier group's
    extent, so that they start below the earlier group as already shifted.

    Returns:
        Vertical offset per group index; groups that stay put are omitted
    """
    bounds = [_group_bounds(group) for group in groups]

    offsets: dict[int, float] = {}
    for group_index, group_bounds in enumerate(bounds):
        if group_bounds is None:
            continue
        top, bottom = group_bounds

        offset = 0.0
        for previous_index in range(group_index):
            previous_bounds = bounds[previous_index]
            if previous_bounds is None:
                continue
            previous_top, previous_bottom = previous_bounds
            shifted_bottom = previous_bottom + offsets.get(previous_index, 0.0)

            if top < previous_bottom and bottom > previous_top:
                if top < shifted_bottom:
                    offset = max(offset, shifted_bottom - top)

        if offset > 0:
            offsets[group_index] = offset
    return offsets


def layout_groups(
    groups: Sequence[ConflictGroup], offsets: dict[int, float], gap: float = 0.0
) -> list[TimelineBlock]:
    blocks: list[TimelineBlock] = []
    for group_index, group in enumerate(groups):
        group_offset = offsets.get(group_index, 0.0)
        for index_in_group, event in enumerate(group):
            span = timed_span(resolve_placement(event))
            if span is None:
                continue
            slot = horizontal_slot(group, index_in_group, gap)
            blocks.append(
                TimelineBlock(
                    event=event,
                    top=vertical_offset(span[0]) + group_offset,
                    height=vertical_extent(*span),
                    left=slot.left,
                    width=slot.width,
                    color=event_color(event.get("color"), event.get("routine_id")),
                    is_routine=bool(event.get("routine_id")),
                )
            )
    return blocks


def layout_day(
    events: Sequence[Event], day: DateLike, gap: float = 0.0
) -> list[TimelineBlock]:
    """Timeline blocks for a single day column, grouped in start order."""
    day_events = timeline_events(events_for_day(events, day))
    groups = group_conflicts(day_events)
    return layout_groups(groups, stack_offsets_by_seed(groups), gap)


def layout_week(
    events: Sequence[Event], week_dates: Sequence[DateLike], gap: float = 0.0
) -> dict[str, list[TimelineBlock]]:
    """Timeline blocks per day column of a week, keyed by 'YYYY-MM-DD'."""
    columns: dict[str, list[TimelineBlock]] = {}
    for date_key, column_events in events_by_day(events, week_dates).items():
        groups = group_conflicts(timeline_events(column_events))
        columns[date_key] = layout_groups(groups, stack_offsets_by_extent(groups), gap)
    return columns
