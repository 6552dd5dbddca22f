# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from daygrid import configuration
from daygrid.log import get_logger
from daygrid.model.event import Event

logger = get_logger(__name__)

# Keys as exported by the web app, mapped to record keys
CAMEL_CASE_KEYS = {
    "startTime": "start_time",
    "endTime": "end_time",
    "routineId": "routine_id",
}


class EventRepository:
    """Read-only store of the events listed in the data directory's events.yaml."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._events: Optional[list[Event]] = None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_EVENTS_PATH

    @property
    def events(self) -> list[Event]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def __load_data(self) -> None:
        self._events = []
        if not self.path.is_file():
            logger.debug("no_events_file", path=str(self.path))
            return

        raw_data = load(self.path.read_text(), Loader=Loader)
        if raw_data is None:
            return
        if not isinstance(raw_data, dict):
            raise ValueError(f"{self.path} must contain a mapping with an 'events' list")

        raw_events = raw_data.get("events")
        if raw_events is None:
            return
        if not isinstance(raw_events, list):
            raise ValueError(f"'events' in {self.path} must be a list")

        for index, raw_event in enumerate(raw_events):
            event = self.__convert_event_for_deserialization(raw_event, index)
            if event is not None:
                self._events.append(event)

    def __convert_event_for_deserialization(
        self, raw_event: Any, index: int
    ) -> Optional[Event]:
        if not isinstance(raw_event, dict):
            logger.warning(
                "skipped_event", index=index, path=str(self.path), reason="not a mapping"
            )
            return None
        if raw_event.get("id") is None:
            logger.warning(
                "skipped_event", index=index, path=str(self.path), reason="missing id"
            )
            return None

        event = dict(raw_event)
        event["id"] = str(event["id"])
        for camel_key, snake_key in CAMEL_CASE_KEYS.items():
            if camel_key in event and snake_key not in event:
                event[snake_key] = event.pop(camel_key)
        # start/end stay as loaded; the engine normalizes them
        return cast(Event, event)

    def get_all_events(self) -> list[Event]:
        return deepcopy(self.events)

    def reset(self) -> None:
        self._events = None


EVENT_REPO = EventRepository()
