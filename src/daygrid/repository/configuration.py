# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from daygrid import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        self._config = deepcopy(configuration.DEFAULT_CONFIGURATION)
        if loaded is None:
            return
        if not isinstance(loaded, dict):
            raise ValueError(
                f"{configuration.APP_CONFIG_PATH} must contain a mapping of settings"
            )

        # Missing keys keep their defaults
        for key, value in loaded.items():
            if key in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def reset(self) -> None:
        self._config = None


CONFIGURATION_REPO = ConfigurationRepository()
