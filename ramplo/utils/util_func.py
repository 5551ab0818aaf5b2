from datetime import date, datetime, timedelta
import math
import pytz

from ramplo.config import APP_TIMEZONE, DAYS_PER_WEEK, MAX_PROGRAM_WEEKS

MORTY_DOMAINS = ["morty.com", "platform.morty.com", "getmorty.com"]


def get_current_time(loc: str = APP_TIMEZONE):
    tz = pytz.timezone(loc)
    curr_time = datetime.now(tz)
    return curr_time


def to_local_date(value: datetime, loc: str = APP_TIMEZONE) -> date:
    """Calendar date of ``value`` in ``loc``; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    return value.astimezone(pytz.timezone(loc)).date()


def is_morty_email(email: str) -> bool:
    _, _, domain = email.partition("@")
    return domain.lower() in MORTY_DOMAINS


def get_business_days_between(start: date, end: date) -> int:
    """Count Monday-Friday dates from ``start`` through ``end`` inclusive."""
    if end < start:
        return 0
    business_days = 0
    current = start
    while current <= end:
        if current.weekday() < 5:
            business_days += 1
        current += timedelta(days=1)
    return business_days


def calculate_current_week_and_day(business_days_elapsed: int) -> tuple[int, int]:
    if business_days_elapsed <= 0:
        return 1, 1

    week = math.ceil(business_days_elapsed / DAYS_PER_WEEK)
    if week > MAX_PROGRAM_WEEKS:
        # Program finished; stay on its last day
        return MAX_PROGRAM_WEEKS, DAYS_PER_WEEK
    day = ((business_days_elapsed - 1) % DAYS_PER_WEEK) + 1
    return week, day
