from __future__ import annotations

from typing import Optional

from .base import HoursDecision, WorkingHoursStrategy


class SundayCreditStrategy(WorkingHoursStrategy):
    """Sunday work is credited at the allocated rate, whatever the times."""

    def decide(
        self,
        *,
        in_time: Optional[str],
        out_time: Optional[str],
        allocated_hours: Optional[str],
        is_sunday: bool,
    ) -> HoursDecision:
        return HoursDecision(working_hours=allocated_hours, rule="sunday")
