from __future__ import annotations

from datetime import date
from typing import Iterable, Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def add(self, holiday: Holiday) -> None:
        raise NotImplementedError

    def delete(self, holiday_date: date) -> bool:
        raise NotImplementedError


class InMemoryHolidayRepository(HolidayRepository):
    def __init__(self, holidays: Iterable[Holiday] = ()):
        self._items: list[Holiday] = list(holidays)

    def list_all(self) -> Sequence[Holiday]:
        return list(self._items)

    def add(self, holiday: Holiday) -> None:
        self._items.append(holiday)

    def delete(self, holiday_date: date) -> bool:
        before = len(self._items)
        self._items = [h for h in self._items if h.holiday_date != holiday_date]
        return len(self._items) < before
