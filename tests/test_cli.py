# SPDX-License-Identifier: MIT

"""Tests for the command line views."""

import pendulum
import pytest
import typer
from typer.testing import CliRunner

from daygrid.terminal.app import app
from daygrid.terminal.parse import parse_date_option

runner = CliRunner()

EVENTS_YAML = """\
events:
  - id: standup
    title: Standup
    start_time: "2024-03-04T09:00:00"
    end_time: "2024-03-04T10:00:00"
  - id: review
    title: Review
    start_time: "2024-03-04T09:30:00"
    end_time: "2024-03-04T10:30:00"
    color: "#00aa00"
  - id: gym
    title: Gym
    date: "2024-03-04"
    time: "18:00"
  - id: broken
    title: Broken
    start_time: "not a time"
"""


class TestParseDateOption:
    """Test the --date option parser."""

    def test_iso_date(self):
        assert parse_date_option("2024-03-04") == pendulum.local(2024, 3, 4)

    def test_keywords_and_offsets(self):
        today = pendulum.today("local")

        assert parse_date_option("today") == today
        assert parse_date_option("t") == today
        assert parse_date_option("1") == today.add(days=1)
        assert parse_date_option("-1") == today.subtract(days=1)

    def test_none(self):
        assert parse_date_option(None) is None

    @pytest.mark.parametrize("value", ["2024-02-30", "next week", "03/04/2024"])
    def test_invalid(self, value):
        with pytest.raises(typer.BadParameter):
            parse_date_option(value)


class TestCalendarCommands:
    """Test the calendar views end to end against an events file."""

    @pytest.fixture(autouse=True)
    def events_file(self, write_events):
        write_events(EVENTS_YAML)

    def test_day_view(self):
        result = runner.invoke(app, ["cal-day", "--date", "2024-03-04"])

        assert result.exit_code == 0, result.output
        assert "calendar-day" in result.output
        assert "4 March 2024" in result.output
        assert "Standup" in result.output
        assert "Review" in result.output
        assert "09:00–10:00" in result.output
        assert "Gym" in result.output
        assert "Broken" not in result.output

    def test_day_view_alias(self):
        result = runner.invoke(app, ["cd", "-d", "2024-03-04"])

        assert result.exit_code == 0, result.output
        assert "Standup" in result.output

    def test_day_view_without_events(self):
        result = runner.invoke(app, ["--no-header", "cal-day", "--date", "2024-03-05"])

        assert result.exit_code == 0, result.output
        assert "No timed events" in result.output
        assert "calendar-day" not in result.output

    def test_week_view(self):
        result = runner.invoke(app, ["cal-week", "--date", "2024-03-06"])

        assert result.exit_code == 0, result.output
        assert "4–10 March" in result.output
        assert "Mon 4" in result.output
        assert "Sun 10" in result.output
        assert "Standup" in result.output

    def test_month_view(self):
        result = runner.invoke(app, ["cal-month", "--date", "2024-03-15"])

        assert result.exit_code == 0, result.output
        assert "March 2024" in result.output

    def test_invalid_date(self):
        result = runner.invoke(app, ["cal-day", "--date", "someday"])

        assert result.exit_code == 2

    def test_gap_out_of_range(self):
        result = runner.invoke(app, ["cal-day", "--date", "2024-03-04", "--gap", "0.9"])

        assert result.exit_code == 2


class TestConfigCommand:
    """Test the config view."""

    def test_config_view(self, write_config):
        write_config("locale: en\nevent_gap: 0.01\n")

        result = runner.invoke(app, ["config", "view"])

        assert result.exit_code == 0, result.output
        assert "event_gap" in result.output
        assert "0.01" in result.output

    def test_config_alias(self, app_paths):
        result = runner.invoke(app, ["c", "v"])

        assert result.exit_code == 0, result.output
        assert "locale" in result.output
