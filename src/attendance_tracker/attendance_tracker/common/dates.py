from __future__ import annotations

from datetime import date, datetime

FORM_DATE_FORMAT = "%d-%m-%Y"
DAY_KEY_FORMAT = "%d-%m-%y"


def parse_form_date(value: str) -> date:
    """Parse DD-MM-YYYY string into date."""
    return datetime.strptime(value.strip(), FORM_DATE_FORMAT).date()


def format_form_date(value: date) -> str:
    return value.strftime(FORM_DATE_FORMAT)


def day_key(value: date) -> str:
    """DD-MM-YY key used to match stored records for a calendar day."""
    return value.strftime(DAY_KEY_FORMAT)


def parse_day_key(value: str) -> date:
    return datetime.strptime(value.strip(), DAY_KEY_FORMAT).date()


def is_sunday(value: date) -> bool:
    return value.weekday() == 6


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
