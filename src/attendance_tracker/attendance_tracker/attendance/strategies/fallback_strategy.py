from __future__ import annotations

from typing import Optional

from ...core.constants import ZERO_DURATION
from .base import HoursDecision, WorkingHoursStrategy


class MissingTimesStrategy(WorkingHoursStrategy):
    """No usable check-in or check-out: allocated hours, else zero."""

    def decide(
        self,
        *,
        in_time: Optional[str],
        out_time: Optional[str],
        allocated_hours: Optional[str],
        is_sunday: bool,
    ) -> HoursDecision:
        return HoursDecision(working_hours=allocated_hours or ZERO_DURATION, rule="fallback")
