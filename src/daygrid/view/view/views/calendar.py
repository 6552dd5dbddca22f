# SPDX-License-Identifier: MIT

from typing import Sequence

import pendulum
from rich import box
from rich.columns import Columns
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from daygrid.color import (
    NOW_LINE_STYLE,
    OTHER_MONTH_STYLE,
    TODAY_BORDER_STYLE,
    TODAY_STYLE,
    WEEKEND_STYLE,
    event_color,
    rich_color,
)
from daygrid.grid import (
    format_date,
    get_month_calendar_dates,
    get_week_dates,
    is_same_month,
    is_today,
)
from daygrid.locale import (
    format_date_full,
    format_date_relative,
    format_week_range,
    month_name,
    weekday_headers,
    weekday_long,
    weekday_short,
)
from daygrid.model.event import Event
from daygrid.model.layout import TimelineBlock
from daygrid.service.layout import is_now_visible, layout_day, layout_week, now_offset
from daygrid.service.selection import events_by_date, events_for_day, untimed_events
from daygrid.time import format_clock, to_instant
from daygrid.view.view.views.header import header

DAY_LANE_WIDTH = 24
WEEK_LANE_WIDTH = 4
MAX_EVENTS_PER_CELL = 3


def calendar_day_view(
    events: list[Event],
    date: pendulum.DateTime,
    now: pendulum.DateTime,
    locale: str = "en",
    gap: float = 0.0,
) -> None:
    """
    Display the timeline layout of a single day.

    Args:
        events: All events; the day's events are selected from them
        date: Any instant on the day to display
        now: The current instant, for the today label and the now marker
        locale: Locale used for day and month names
        gap: Fraction of the lane left between side-by-side events
    """
    day = date.in_tz("local").start_of("day")
    header("calendar-day", format_date_full(day, locale))

    console = Console()
    relative = format_date_relative(format_date(day), now, locale)
    console.print(f"\n[bold]{relative}[/bold] [dim]{weekday_long(day, locale)}[/dim]\n")

    # Events without a full start/end pair have no place on the timeline
    untimed = untimed_events(events_for_day(events, day))
    if untimed:
        for event in untimed:
            color = rich_color(event_color(event.get("color"), event.get("routine_id")))
            line = Text()
            line.append("■ ", style=color)
            time_of_day = event.get("time")
            if time_of_day:
                line.append(f"{time_of_day} ", style="dim")
            line.append(_title(event), style=color)
            console.print(line)
        console.print()

    blocks = sorted(layout_day(events, day, gap), key=lambda block: block.top)

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    table.add_column("Time", style="dim", no_wrap=True)
    table.add_column("Lane", no_wrap=True, width=DAY_LANE_WIDTH)
    table.add_column("Event")

    now_pending = is_now_visible(day, now)
    now_position = now_offset(now)
    for block in blocks:
        if now_pending and block.top > now_position:
            table.add_row(*_now_row(now))
            now_pending = False
        table.add_row(
            Text(_block_clock_range(block)),
            _lane(block, DAY_LANE_WIDTH),
            _block_title(block),
        )
    if now_pending:
        table.add_row(*_now_row(now))

    if table.row_count == 0:
        console.print("[dim]No timed events[/dim]")
        return
    console.print(table)


def calendar_week_view(
    events: list[Event],
    date: pendulum.DateTime,
    now: pendulum.DateTime,
    locale: str = "en",
    gap: float = 0.0,
    day_width: int = 24,
) -> None:
    """
    Display the Monday..Sunday week containing date as side-by-side day columns.

    Args:
        events: All events; the week's events are selected from them
        date: Any instant in the week to display
        now: The current instant, for highlighting today
        locale: Locale used for day and month names
        gap: Fraction of the lane left between side-by-side events
        day_width: Width of each day column in characters
    """
    week_dates = get_week_dates(date)
    header("calendar-week", format_week_range(week_dates, locale))

    console = Console()
    columns = layout_week(events, week_dates, gap)

    day_columns: list[RenderableType] = []
    for day in week_dates:
        blocks = sorted(columns[format_date(day)], key=lambda block: block.top)
        day_columns.append(_render_week_day(day, blocks, now, locale, day_width))

    console.print()
    console.print(Columns(day_columns, equal=False, expand=False, padding=(0, 0)))
    console.print()


def _render_week_day(
    day: pendulum.DateTime,
    blocks: Sequence[TimelineBlock],
    now: pendulum.DateTime,
    locale: str,
    day_width: int,
) -> Panel:
    lines: list[Text] = []
    now_pending = is_now_visible(day, now)
    now_position = now_offset(now)

    # day_width - borders (2) - padding (2) - lane - clock (6)
    max_title_len = day_width - 10 - WEEK_LANE_WIDTH
    for block in blocks:
        if now_pending and block.top > now_position:
            lines.append(_now_line(now, day_width))
            now_pending = False
        line = Text()
        line.append_text(_lane(block, WEEK_LANE_WIDTH))
        line.append(f" {format_clock(block.event.get('start_time'))} ", style="dim")
        line.append(
            _truncate(_title(block.event), max_title_len),
            style=rich_color(block.color),
        )
        lines.append(line)
    if now_pending:
        lines.append(_now_line(now, day_width))

    title = f"{weekday_short(day, locale)} {day.day}"
    return Panel(
        Text("\n").join(lines) if lines else Text(" "),
        title=title,
        border_style=TODAY_BORDER_STYLE if is_today(day, now) else "dim",
        width=day_width,
    )


def calendar_month_view(
    events: list[Event],
    date: pendulum.DateTime,
    now: pendulum.DateTime,
    locale: str = "en",
    cell_width: int = 18,
) -> None:
    """
    Display a month grid, Monday first, with up to three events per day.

    Args:
        events: All events; each day's events are selected from them
        date: Any instant in the month to display
        now: The current instant, for highlighting today
        locale: Locale used for day and month names
        cell_width: Width of each day cell in characters
    """
    local_date = date.in_tz("local")
    year = local_date.year
    month_index = local_date.month - 1

    header("calendar-month", f"{month_name(month_index, locale)} {year}")

    console = Console()
    dates = get_month_calendar_dates(year, month_index)
    events_by_day_key = events_by_date(events, dates)

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in weekday_headers(locale):
        table.add_column(day_name, style="bold", width=cell_width)

    week_cells: list[Text] = []
    for day in dates:
        in_month = is_same_month(day, month_index, year)
        day_events = events_by_day_key.get(format_date(day), [])
        week_cells.append(_render_month_cell(day, day_events, in_month, now, cell_width))

        if len(week_cells) == 7:
            table.add_row(*week_cells)
            week_cells = []

    console.print()
    console.print(table)


def _render_month_cell(
    day: pendulum.DateTime,
    day_events: Sequence[Event],
    in_month: bool,
    now: pendulum.DateTime,
    cell_width: int,
) -> Text:
    cell = Text()
    if not in_month:
        cell.append(f"{day.day:2d}\n", style=OTHER_MONTH_STYLE)
    elif is_today(day, now):
        cell.append(f"{day.day:2d}", style=TODAY_STYLE)
        cell.append("   \n", style=TODAY_STYLE)
    elif day.isoweekday() >= 6:
        cell.append(f"{day.day:2d}", style=WEEKEND_STYLE)
        cell.append("   \n", style=WEEKEND_STYLE)
    else:
        cell.append(f"{day.day:2d}\n", style="bold")

    for event in day_events[:MAX_EVENTS_PER_CELL]:
        color = rich_color(event_color(event.get("color"), event.get("routine_id")))
        if not in_month:
            color = OTHER_MONTH_STYLE

        start = to_instant(event.get("start_time"))
        if start is not None:
            # circle, space, time (5 chars), space
            cell.append("● ", style=color)
            cell.append(f"{format_clock(start)} ", style="dim")
            cell.append(f"{_truncate(_title(event), cell_width - 8)}\n", style=color)
        else:
            cell.append("■ ", style=color)
            cell.append(f"{_truncate(_title(event), cell_width - 2)}\n", style=color)

    if len(day_events) > MAX_EVENTS_PER_CELL:
        remaining = len(day_events) - MAX_EVENTS_PER_CELL
        cell.append(f"  +{remaining} more\n", style="dim")

    return cell


def _title(event: Event) -> str:
    title = event.get("title")
    if not title:
        return "[no title]"
    return title


def _truncate(text: str, max_len: int) -> str:
    if max_len < 4:
        return text[:max(max_len, 0)]
    if len(text) > max_len:
        return text[: max_len - 3] + "..."
    return text


def _block_clock_range(block: TimelineBlock) -> str:
    start = format_clock(block.event.get("start_time"))
    end = format_clock(block.event.get("end_time"))
    return f"{start}–{end}"


def _block_title(block: TimelineBlock) -> Text:
    text = Text()
    if block.is_routine:
        text.append("↻ ", style="dim")
    text.append(_title(block.event), style=rich_color(block.color))
    return text


def _lane(block: TimelineBlock, width: int) -> Text:
    """Draw the block's horizontal slot as a bar within a lane of width characters."""
    start = min(round(block.left * width), width - 1)
    end = max(start + 1, min(round((block.left + block.width) * width), width))
    lane = Text(" " * start)
    lane.append("█" * (end - start), style=rich_color(block.color))
    lane.append(" " * (width - end))
    return lane


def _now_row(now: pendulum.DateTime) -> tuple[Text, Text, Text]:
    return (
        Text(format_clock(now), style=NOW_LINE_STYLE),
        Text("─" * DAY_LANE_WIDTH, style=NOW_LINE_STYLE),
        Text("now", style=NOW_LINE_STYLE),
    )


def _now_line(now: pendulum.DateTime, day_width: int) -> Text:
    label = f" {format_clock(now)} "
    dashes = max(day_width - 4 - len(label), 0)
    return Text("─" * (dashes // 2) + label + "─" * (dashes - dashes // 2), style=NOW_LINE_STYLE)
