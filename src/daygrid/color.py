# SPDX-License-Identifier: MIT

from typing import Optional

from rich.color import Color, ColorParseError

# Fallback colors for events without one of their own
DEFAULT_EVENT_COLOR = "#4285F4"
ROUTINE_EVENT_COLOR = "#9C27B0"

# Rich styles for terminal calendar chrome
TODAY_STYLE = "bold black on bright_cyan"
TODAY_BORDER_STYLE = "bright_cyan"
WEEKEND_STYLE = "bold white on orange4"
OTHER_MONTH_STYLE = "dim"
NOW_LINE_STYLE = "bold red"


def event_color(color: Optional[str], routine_id: Optional[str]) -> str:
    """Resolve the display color of an event.

    Routine instances without an explicit color get the routine color.
    """
    if color:
        return color
    if routine_id:
        return ROUTINE_EVENT_COLOR
    return DEFAULT_EVENT_COLOR


def rich_color(color: str) -> str:
    """Return color if rich can draw it, otherwise the default event color."""
    try:
        Color.parse(color)
    except ColorParseError:
        return DEFAULT_EVENT_COLOR
    return color
