# tests/test_util_func.py

from __future__ import annotations

from datetime import date, datetime

import pytest
import pytz

from ramplo.utils.util_func import (
    calculate_current_week_and_day,
    get_business_days_between,
    is_morty_email,
    to_local_date,
)

MONDAY = date(2026, 10, 5)


@pytest.mark.parametrize(
    ("end", "expected"),
    [
        (date(2026, 10, 5), 1),  # same Monday
        (date(2026, 10, 9), 5),  # Friday
        (date(2026, 10, 11), 5),  # weekend adds nothing
        (date(2026, 10, 12), 6),  # next Monday
        (date(2026, 10, 4), 0),  # before start
    ],
)
def test_business_days_between(end: date, expected: int) -> None:
    assert get_business_days_between(MONDAY, end) == expected


def test_weekend_start_counts_from_monday() -> None:
    saturday = date(2026, 10, 3)
    assert get_business_days_between(saturday, saturday) == 0
    assert get_business_days_between(saturday, MONDAY) == 1


@pytest.mark.parametrize(
    ("elapsed", "expected"),
    [
        (-3, (1, 1)),
        (0, (1, 1)),
        (1, (1, 1)),
        (5, (1, 5)),
        (6, (2, 1)),
        (12, (3, 2)),
        (70, (14, 5)),
        (200, (14, 5)),
    ],
)
def test_week_and_day_from_business_days(elapsed: int, expected: tuple[int, int]) -> None:
    assert calculate_current_week_and_day(elapsed) == expected


def test_morty_domains() -> None:
    assert is_morty_email("a@morty.com")
    assert is_morty_email("a@GetMorty.com")
    assert is_morty_email("a@platform.morty.com")
    assert not is_morty_email("a@notmorty.com")
    assert not is_morty_email("no-at-sign")


def test_naive_datetimes_are_treated_as_utc() -> None:
    late_utc = datetime(2026, 10, 6, 3, 0)
    assert to_local_date(late_utc, "America/Chicago") == date(2026, 10, 5)
    assert to_local_date(pytz.utc.localize(late_utc), "Asia/Jakarta") == date(2026, 10, 6)
