# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from daygrid.view.state import get_show_header


def header(view_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the view name.

    Args:
        view_name: The name of the view being shown
        sub_header: Optional sub-header text to display, e.g. the date range
    """
    if not get_show_header():
        return

    print(Padding("[dark_orange]daygrid[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(f"[plum1]{view_name}[/plum1]", (0, 1)))
    if sub_header is not None:
        print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
