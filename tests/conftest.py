# SPDX-License-Identifier: MIT

"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Iterator

import pytest

from daygrid import configuration
from daygrid.repository.configuration import CONFIGURATION_REPO
from daygrid.repository.event import EVENT_REPO
from daygrid.view import state as view_state


@pytest.fixture
def app_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the config and data directories at a temporary location.

    The shared repositories are reset before and after, so each test reads
    the files it writes.
    """
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_EVENTS_PATH", data_path / "events.yaml")

    CONFIGURATION_REPO.reset()
    EVENT_REPO.reset()
    view_state.set_show_header(True)

    yield tmp_path

    CONFIGURATION_REPO.reset()
    EVENT_REPO.reset()
    view_state.set_show_header(True)


@pytest.fixture
def write_events(app_paths: Path):
    """Write an events.yaml body into the temporary data directory."""

    def _write(body: str) -> Path:
        configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
        configuration.DATA_EVENTS_PATH.write_text(body)
        EVENT_REPO.reset()
        return configuration.DATA_EVENTS_PATH

    return _write


@pytest.fixture
def write_config(app_paths: Path):
    """Write a config.yaml body into the temporary config directory."""

    def _write(body: str) -> Path:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(body)
        CONFIGURATION_REPO.reset()
        return configuration.APP_CONFIG_PATH

    return _write
