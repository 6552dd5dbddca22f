# SPDX-License-Identifier: MIT

from dataclasses import dataclass

import pendulum

from daygrid.model.event import Event


@dataclass(frozen=True)
class DateRange:
    """Closed interval [start, end] in local wall-clock time."""

    start: pendulum.DateTime
    end: pendulum.DateTime

    def __contains__(self, instant: pendulum.DateTime) -> bool:
        return self.start <= instant <= self.end


@dataclass(frozen=True)
class HorizontalSlot:
    left: float
    width: float


@dataclass(frozen=True)
class TimelineBlock:
    event: Event
    top: float
    height: float
    left: float
    width: float
    color: str
    is_routine: bool
