# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from daygrid.repository.configuration import CONFIGURATION_REPO
from daygrid.repository.event import EVENT_REPO
from daygrid.terminal.parse import parse_date_option
from daygrid.time import now_local
from daygrid.view.view.views.calendar import (
    calendar_day_view,
    calendar_month_view,
    calendar_week_view,
)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def cal_day(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--date", "-d", parser=parse_date_option, help=DATE_HELP),
    ] = None,
    gap: Annotated[
        Optional[float],
        typer.Option(
            "--gap",
            "-g",
            min=0.0,
            max=0.5,
            help="Fraction of the lane left between side-by-side events",
        ),
    ] = None,
) -> None:
    """Display the timeline of a single day."""
    config = CONFIGURATION_REPO.get_config()
    events = EVENT_REPO.get_all_events()
    now = now_local()

    calendar_day_view(
        events,
        date if date is not None else now,
        now,
        locale=config["locale"],
        gap=gap if gap is not None else config["event_gap"],
    )


def cal_week(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--date", "-d", parser=parse_date_option, help=DATE_HELP),
    ] = None,
    day_width: Annotated[
        Optional[int],
        typer.Option(
            "--day-width",
            "-w",
            min=12,
            help="Width of each day column in characters",
        ),
    ] = None,
) -> None:
    """Display the Monday to Sunday week containing a date."""
    config = CONFIGURATION_REPO.get_config()
    events = EVENT_REPO.get_all_events()
    now = now_local()

    calendar_week_view(
        events,
        date if date is not None else now,
        now,
        locale=config["locale"],
        gap=config["event_gap"],
        day_width=day_width if day_width is not None else config["week_day_width"],
    )


def cal_month(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--date", "-d", parser=parse_date_option, help=DATE_HELP),
    ] = None,
    cell_width: Annotated[
        Optional[int],
        typer.Option(
            "--cell-width",
            "-w",
            min=10,
            help="Width of each day cell in characters",
        ),
    ] = None,
) -> None:
    """Display the month grid containing a date."""
    config = CONFIGURATION_REPO.get_config()
    events = EVENT_REPO.get_all_events()
    now = now_local()

    calendar_month_view(
        events,
        date if date is not None else now,
        now,
        locale=config["locale"],
        cell_width=cell_width if cell_width is not None else config["month_cell_width"],
    )
