from __future__ import annotations

from typing import Optional

from .factory import WorkingHoursStrategyFactory
from .strategies.base import HoursDecision


class WorkingHoursCalculator:
    """Credited working hours for one attendance entry, as HH:MM."""

    def __init__(self, factory: Optional[WorkingHoursStrategyFactory] = None):
        self._factory = factory or WorkingHoursStrategyFactory()

    def decide(
        self,
        in_time: Optional[str],
        out_time: Optional[str],
        allocated_hours: Optional[str],
        is_sunday: bool,
    ) -> HoursDecision:
        allocated_hours = allocated_hours or None
        strategy = self._factory.for_entry(
            in_time=in_time,
            out_time=out_time,
            allocated_hours=allocated_hours,
            is_sunday=is_sunday,
        )
        return strategy.decide(
            in_time=in_time,
            out_time=out_time,
            allocated_hours=allocated_hours,
            is_sunday=is_sunday,
        )

    def compute(
        self,
        in_time: Optional[str],
        out_time: Optional[str],
        allocated_hours: Optional[str],
        is_sunday: bool,
    ) -> str:
        return self.decide(in_time, out_time, allocated_hours, is_sunday).working_hours


_default = WorkingHoursCalculator()


def compute_working_hours(
    in_time: Optional[str],
    out_time: Optional[str],
    allocated_hours: Optional[str] = None,
    is_sunday: bool = False,
) -> str:
    return _default.compute(in_time, out_time, allocated_hours, is_sunday)
