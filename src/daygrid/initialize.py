# SPDX-License-Identifier: MIT

from typing import Any

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from daygrid import configuration
from daygrid.repository.configuration import CONFIGURATION_REPO
from daygrid.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(configuration.DEFAULT_CONFIGURATION), Dumper=Dumper)
        )


def __ensure_data_files() -> None:
    if not configuration.DATA_EVENTS_PATH.is_file():
        events: dict[str, Any] = {"events": []}
        configuration.DATA_EVENTS_PATH.write_text(dump(events, Dumper=Dumper))
