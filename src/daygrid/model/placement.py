# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import Optional, Union

import pendulum


@dataclass(frozen=True)
class Scheduled:
    """An event with an explicit start instant; end is None when missing or invalid."""

    start: pendulum.DateTime
    end: Optional[pendulum.DateTime]

    @property
    def is_timed(self) -> bool:
        return self.end is not None


@dataclass(frozen=True)
class LegacyDated:
    """An event stored with only a calendar date and an optional time-of-day string."""

    day: Optional[pendulum.DateTime]
    time_of_day: Optional[str]


@dataclass(frozen=True)
class Unplaceable:
    reason: str


Placement = Union[Scheduled, LegacyDated, Unplaceable]
