# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from daygrid.grid import parse_date


def parse_date_option(date_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Parse a --date option to local midnight of the chosen day.

    Accepts YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a day offset
    like 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return parse_date(date)
        except ValueError as e:
            raise typer.BadParameter(str(e))

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return pendulum.today("local").add(days=int(date))

    if date == "today" or date == "t":
        return pendulum.today("local")
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local")
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow("local")
    raise typer.BadParameter("Incorrect date format")

