from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.timeutils import parse_hhmm
from ..core.constants import TOLERANCE_MINUTES
from .strategies.base import WorkingHoursStrategy
from .strategies.elapsed_strategy import ElapsedTimeStrategy
from .strategies.fallback_strategy import MissingTimesStrategy
from .strategies.sunday_strategy import SundayCreditStrategy


@dataclass
class WorkingHoursStrategyFactory:
    """Factory Pattern: choose the crediting rule for an entry."""

    tolerance_minutes: int = TOLERANCE_MINUTES
    _elapsed: Optional[ElapsedTimeStrategy] = field(default=None, init=False, repr=False)

    def for_entry(
        self,
        *,
        in_time: Optional[str],
        out_time: Optional[str],
        allocated_hours: Optional[str],
        is_sunday: bool,
    ) -> WorkingHoursStrategy:
        if is_sunday and allocated_hours:
            return SundayCreditStrategy()

        if parse_hhmm(in_time) is None or parse_hhmm(out_time) is None:
            return MissingTimesStrategy()

        if self._elapsed is None:
            self._elapsed = ElapsedTimeStrategy(self.tolerance_minutes)
        return self._elapsed
