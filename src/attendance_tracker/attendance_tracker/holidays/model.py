from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.dates import format_form_date


@dataclass(frozen=True)
class Holiday:
    holiday_date: date
    name: str

    def to_dict(self) -> dict:
        return {"date": format_form_date(self.holiday_date), "name": self.name}
