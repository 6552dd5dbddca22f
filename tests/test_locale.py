# SPDX-License-Identifier: MIT

"""Unit tests for localized date labels."""

from daygrid.grid import get_week_dates
from daygrid.locale import (
    format_date_full,
    format_date_relative,
    format_week_range,
    month_name,
    month_name_genitive,
    weekday_headers,
    weekday_long,
    weekday_short,
)
from tests.fixtures.events import local


class TestFormatDateRelative:
    """Test Today/Yesterday/Tomorrow labels against an explicit now."""

    NOW = local(2024, 3, 6, 10, 0)

    def test_relative_labels(self):
        assert format_date_relative("2024-03-06", self.NOW) == "Today"
        assert format_date_relative("2024-03-05", self.NOW) == "Yesterday"
        assert format_date_relative("2024-03-07", self.NOW) == "Tomorrow"

    def test_other_days_show_day_and_month(self):
        assert format_date_relative("2024-03-20", self.NOW) == "20 March"

    def test_relative_across_month_boundary(self):
        """Verify Yesterday is found across the start of a month."""
        now = local(2024, 3, 1, 0, 30)

        assert format_date_relative("2024-02-29", now) == "Yesterday"

    def test_other_locale_labels(self):
        assert format_date_relative("2024-03-06", self.NOW, locale="ru") == "Сегодня"
        assert format_date_relative("2024-03-07", self.NOW, locale="de") == "Morgen"

    def test_unknown_locale_falls_back_to_english_labels(self):
        assert format_date_relative("2024-03-06", self.NOW, locale="xx") == "Today"


class TestNames:
    """Test weekday and month names."""

    def test_format_date_full(self):
        assert format_date_full(local(2024, 3, 4, 15, 0)) == "4 March 2024"

    def test_weekday_names(self):
        monday = local(2024, 3, 4)

        assert weekday_short(monday) == "Mon"
        assert weekday_long(monday) == "Monday"

    def test_weekday_headers_start_on_monday(self):
        headers = weekday_headers()

        assert len(headers) == 7
        assert headers[0] == "Mon"
        assert headers[-1] == "Sun"

    def test_month_names_are_zero_based(self):
        assert month_name(0) == "January"
        assert month_name(1) == "February"
        assert month_name_genitive(2) == "March"

    def test_russian_month_forms_differ(self):
        """Verify the title form is nominative while dates keep the genitive."""
        assert month_name(2, "ru") == "Март"
        assert month_name(11, "ru") == "Декабрь"
        assert month_name_genitive(2, "ru") == "марта"
        assert format_week_range(get_week_dates(local(2024, 3, 6)), "ru") == "4–10 марта"


class TestFormatWeekRange:
    """Test the week title shown above a week view."""

    def test_week_within_one_month(self):
        week = get_week_dates(local(2024, 3, 6))

        assert format_week_range(week) == "4–10 March"

    def test_week_across_two_months(self):
        week = get_week_dates(local(2024, 2, 28))

        assert format_week_range(week) == "26 February – 3 March"

    def test_empty_week(self):
        assert format_week_range([]) == ""
