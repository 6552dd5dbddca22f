# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from daygrid.log import configure_logging
from daygrid.terminal import configuration
from daygrid.terminal.custom_typer import AliasedTyperGroup
from daygrid.terminal.view import cal_day, cal_month, cal_week
from daygrid.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="daygrid - Day, week and month calendar layouts in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="cal-day, cd")(cal_day)
app.command(name="cal-week, cw")(cal_week)
app.command(name="cal-month, cm")(cal_month)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log skipped and unplaceable events",
        ),
    ] = False,
) -> None:
    """
    daygrid - Day, week and month calendar layouts in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
