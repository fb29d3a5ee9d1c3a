"""Date comparison helpers.

``date`` and ``datetime`` values are both accepted. Helpers that compare
against "now" take an optional reference; without one they use the
configured reference date (see ``rulechain.settings``) for plain dates and
the wall clock for datetimes.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

from . import predicates, settings

EXPIRATION_REGEX = re.compile(r"(\d{1,2})/(\d{2})")


def _now_for(value: date) -> date:
    if isinstance(value, datetime):
        return datetime.now(value.tzinfo)
    return settings.today()


def is_past_date(value: date, now: date | None = None) -> bool:
    return value < (now if now is not None else _now_for(value))


def is_future_date(value: date, now: date | None = None) -> bool:
    return value > (now if now is not None else _now_for(value))


def is_same_day(first: date, second: date) -> bool:
    return (first.year, first.month, first.day) == (second.year, second.month, second.day)


def is_same_month(first: date, second: date) -> bool:
    return (first.year, first.month) == (second.year, second.month)


def is_same_year(first: date, second: date) -> bool:
    return first.year == second.year


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_date(value: Any) -> bool:
    """True for ``date``/``datetime`` instances and whole ISO8601 date or date-time strings.

    Slashes are accepted as date separators (``2024/02/29``); trailing text
    after the date or time makes the string invalid.
    """
    if isinstance(value, date):
        return True
    if not isinstance(value, str):
        return False
    return predicates.is_iso8601(value.strip())


def is_date_in_range(value: date, start: date, end: date) -> bool:
    """Inclusive on both ends."""
    return start <= value <= end


def parse_expiration(text: Any) -> tuple[int, int] | None:
    """Parse ``MM/YY`` into ``(month, two_digit_year)``.

    Returns None for anything that is not exactly one or two digits, a slash
    and two digits, or whose month is outside 1-12.
    """
    if not isinstance(text, str):
        return None
    match = EXPIRATION_REGEX.fullmatch(text.strip())
    if match is None:
        return None
    month, year = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        return None
    return month, year
