# SPDX-License-Identifier: MIT

"""Public scheduling and calendar-grid API consumed by renderers."""

from daygrid.grid import (
    add_days,
    day_range,
    format_date,
    get_month_calendar_dates,
    get_start_of_month,
    get_start_of_week,
    get_week_dates,
    is_same_day,
    is_same_month,
    is_this_month,
    is_this_week,
    is_today,
    parse_date,
    week_range,
)
from daygrid.service.conflict import group_conflicts, overlap
from daygrid.service.layout import (
    horizontal_slot,
    is_now_visible,
    layout_day,
    layout_week,
    now_offset,
    vertical_extent,
    vertical_offset,
)
from daygrid.service.placement import resolve_placement
from daygrid.service.selection import (
    events_by_date,
    events_by_day,
    events_for_day,
    events_for_week,
    timeline_events,
)
from daygrid.time import format_clock

__all__ = [
    "add_days",
    "day_range",
    "events_by_date",
    "events_by_day",
    "events_for_day",
    "events_for_week",
    "format_clock",
    "format_date",
    "get_month_calendar_dates",
    "get_start_of_month",
    "get_start_of_week",
    "get_week_dates",
    "group_conflicts",
    "horizontal_slot",
    "is_now_visible",
    "is_same_day",
    "is_same_month",
    "is_this_month",
    "is_this_week",
    "is_today",
    "layout_day",
    "layout_week",
    "now_offset",
    "overlap",
    "parse_date",
    "resolve_placement",
    "timeline_events",
    "vertical_extent",
    "vertical_offset",
    "week_range",
]
