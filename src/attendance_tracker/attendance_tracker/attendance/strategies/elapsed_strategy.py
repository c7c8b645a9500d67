from __future__ import annotations

from typing import Optional

from ...common.timeutils import elapsed_minutes, format_hhmm, parse_hhmm
from ...core.constants import TOLERANCE_MINUTES
from .base import HoursDecision, WorkingHoursStrategy


class ElapsedTimeStrategy(WorkingHoursStrategy):
    """Out minus in, wrapping past midnight, with the short-shift grace window.

    Falling short of the allocated hours by 1..tolerance minutes credits the
    allocated hours in full. Working longer than allocated never triggers it.
    """

    def __init__(self, tolerance_minutes: int = TOLERANCE_MINUTES):
        self._tolerance = int(tolerance_minutes)

    def decide(
        self,
        *,
        in_time: Optional[str],
        out_time: Optional[str],
        allocated_hours: Optional[str],
        is_sunday: bool,
    ) -> HoursDecision:
        worked = elapsed_minutes(parse_hhmm(in_time), parse_hhmm(out_time))

        allocated = parse_hhmm(allocated_hours)
        if allocated is not None and not is_sunday:
            shortfall = allocated - worked
            if 0 < shortfall <= self._tolerance:
                return HoursDecision(working_hours=allocated_hours, rule="tolerance")

        return HoursDecision(working_hours=format_hhmm(worked), rule="elapsed")
