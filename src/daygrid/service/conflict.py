# SPDX-License-Identifier: MIT

from typing import Optional, Sequence

import pendulum

from daygrid.model.event import Event
from daygrid.service.placement import resolve_placement, timed_span

ConflictGroup = list[Event]

Span = tuple[pendulum.DateTime, pendulum.DateTime]


def _spans_overlap(span_1: Optional[Span], span_2: Optional[Span]) -> bool:
    if span_1 is None or span_2 is None:
        return False
    start_1, end_1 = span_1
    start_2, end_2 = span_2
    return start_1 < end_2 and start_2 < end_1


def overlap(event_1: Event, event_2: Event) -> bool:
    """
    Whether two events share some moment in time.

    Only fully timed events can overlap; an event without a valid start and
    end never overlaps anything, itself included. Touching endpoints do not
    overlap.
    """
    return _spans_overlap(
        timed_span(resolve_placement(event_1)),
        timed_span(resolve_placement(event_2)),
    )


def group_conflicts(events: Sequence[Event]) -> list[ConflictGroup]:
    """
    Partition events into groups that share horizontal space in a timeline.

    Each event not yet claimed seeds a new group. One pass over the whole
    input then pulls every other unclaimed event that overlaps the seed into
    the seed's group. Members are only compared with the seed, never with
    each other, so this is not a clique cover: an event overlapping a member
    but not the seed is left for a later seed.

    Args:
        events: Events in the order they should be considered

    Returns:
        Groups in seed order; within a group the seed comes first, followed
        by the other members in input order
    """
    spans = [timed_span(resolve_placement(event)) for event in events]

    claimed: set[str] = set()
    groups: list[ConflictGroup] = []

    for seed_index, seed in enumerate(events):
        if seed["id"] in claimed:
            continue
        group = [seed]
        claimed.add(seed["id"])

        for candidate_index, candidate in enumerate(events):
            if candidate["id"] in claimed:
                continue
            if _spans_overlap(spans[seed_index], spans[candidate_index]):
                group.append(candidate)
                claimed.add(candidate["id"])

        groups.append(group)

    return groups
