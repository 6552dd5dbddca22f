# SPDX-License-Identifier: MIT

from typing import Sequence

import pendulum

from daygrid.grid import (
    DateLike,
    add_days,
    is_same_day,
    local_midnight,
    parse_date,
)

DEFAULT_LOCALE = "en"

# pendulum has no words for relative day names, only for durations
RELATIVE_DAY_LABELS: dict[str, tuple[str, str, str]] = {
    "en": ("Today", "Yesterday", "Tomorrow"),
    "ru": ("Сегодня", "Вчера", "Завтра"),
    "de": ("Heute", "Gestern", "Morgen"),
    "fr": ("Aujourd'hui", "Hier", "Demain"),
}


# pendulum's "MMMM" is the genitive form in these locales; stand-alone names here
MONTH_NAMES_NOMINATIVE: dict[str, tuple[str, ...]] = {
    "ru": (
        "Январь",
        "Февраль",
        "Март",
        "Апрель",
        "Май",
        "Июнь",
        "Июль",
        "Август",
        "Сентябрь",
        "Октябрь",
        "Ноябрь",
        "Декабрь",
    ),
}


def _relative_labels(locale: str) -> tuple[str, str, str]:
    return RELATIVE_DAY_LABELS.get(locale, RELATIVE_DAY_LABELS[DEFAULT_LOCALE])


def format_date_relative(
    date_str: str, now: DateLike, locale: str = DEFAULT_LOCALE
) -> str:
    """Label a 'YYYY-MM-DD' key as Today/Yesterday/Tomorrow, otherwise 'D Month'."""
    date = parse_date(date_str)
    today_label, yesterday_label, tomorrow_label = _relative_labels(locale)

    if is_same_day(date, now):
        return today_label
    if is_same_day(date, add_days(now, -1)):
        return yesterday_label
    if is_same_day(date, add_days(now, 1)):
        return tomorrow_label
    return date.format("D MMMM", locale=locale)


def format_date_full(date: DateLike, locale: str = DEFAULT_LOCALE) -> str:
    return local_midnight(date).format("D MMMM YYYY", locale=locale)


def weekday_short(date: DateLike, locale: str = DEFAULT_LOCALE) -> str:
    return local_midnight(date).format("ddd", locale=locale)


def weekday_long(date: DateLike, locale: str = DEFAULT_LOCALE) -> str:
    return local_midnight(date).format("dddd", locale=locale)


def weekday_headers(locale: str = DEFAULT_LOCALE) -> list[str]:
    """Short weekday names Monday through Sunday."""
    # 2024-01-01 is a Monday
    monday = pendulum.local(2024, 1, 1)
    return [weekday_short(monday.add(days=offset), locale) for offset in range(7)]


def month_name(month_index: int, locale: str = DEFAULT_LOCALE) -> str:
    """Nominative month name for a 0-based month index, as used in a month title."""
    nominative = MONTH_NAMES_NOMINATIVE.get(locale)
    if nominative is not None:
        return nominative[month_index]
    return pendulum.local(2000, month_index + 1, 1).format("MMMM", locale=locale)


def month_name_genitive(month_index: int, locale: str = DEFAULT_LOCALE) -> str:
    """Month name as it reads after a day number ('4 March')."""
    day_and_month = pendulum.local(2000, month_index + 1, 1).format(
        "D MMMM", locale=locale
    )
    return day_and_month.split(" ", 1)[1]


def format_week_range(
    week_dates: Sequence[DateLike], locale: str = DEFAULT_LOCALE
) -> str:
    if len(week_dates) == 0:
        return ""
    start = local_midnight(week_dates[0])
    end = local_midnight(week_dates[-1])

    start_month = month_name_genitive(start.month - 1, locale)
    end_month = month_name_genitive(end.month - 1, locale)

    if start.month == end.month:
        return f"{start.day}–{end.day} {start_month}"
    return f"{start.day} {start_month} – {end.day} {end_month}"
