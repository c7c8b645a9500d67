from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.validators import collect, require_form_date, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Holiday
from .repository import HolidayRepository

logger = logging.getLogger(__name__)

DEFAULT_HOLIDAYS = (
    Holiday(holiday_date=date(2024, 5, 1), name="Labor Day"),
    Holiday(holiday_date=date(2024, 5, 15), name="Company Foundation Day"),
)


class HolidayService:
    """Use case: maintain the company holiday list."""

    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list(self) -> list[Holiday]:
        return sorted(self._holidays.list_all(), key=lambda h: h.holiday_date)

    def is_holiday(self, day: date) -> bool:
        return any(h.holiday_date == day for h in self._holidays.list_all())

    def add(self, *, date_s: Optional[str], name: Optional[str]) -> Holiday:
        holiday_date, name = collect(
            lambda: require_form_date(date_s, "date"),
            lambda: require_non_empty(name, "name", "Holiday name is required"),
        )
        if self.is_holiday(holiday_date):
            message = "A holiday already exists on this date"
            raise ValidationError(message, {"date": message})

        holiday = Holiday(holiday_date=holiday_date, name=name)
        self._holidays.add(holiday)
        logger.info("Holiday added: %s (%s)", name, date_s)
        return holiday

    def remove(self, date_s: Optional[str]) -> None:
        holiday_date = require_form_date(date_s, "date")
        if not self._holidays.delete(holiday_date):
            raise NotFoundError("Holiday not found")
        logger.info("Holiday removed: %s", date_s)
