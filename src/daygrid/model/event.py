# SPDX-License-Identifier: MIT

import datetime
from typing import NotRequired, Optional, TypedDict, Union

import pendulum

InstantValue = Union[str, datetime.datetime, pendulum.DateTime]
LegacyDateValue = Union[str, datetime.date]


class Event(TypedDict):
    id: str
    title: NotRequired[str]
    description: NotRequired[Optional[str]]
    start_time: NotRequired[Optional[InstantValue]]
    end_time: NotRequired[Optional[InstantValue]]
    color: NotRequired[Optional[str]]
    icon: NotRequired[Optional[str]]
    completed: NotRequired[bool]
    routine_id: NotRequired[Optional[str]]
    # legacy shape, superseded by start_time/end_time
    date: NotRequired[Optional[LegacyDateValue]]
    time: NotRequired[Optional[str]]
