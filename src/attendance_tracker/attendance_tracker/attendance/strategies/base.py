from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HoursDecision:
    working_hours: str
    rule: str


class WorkingHoursStrategy(ABC):
    """Strategy Pattern: encapsulate how one entry's working hours are credited."""

    @abstractmethod
    def decide(
        self,
        *,
        in_time: Optional[str],
        out_time: Optional[str],
        allocated_hours: Optional[str],
        is_sunday: bool,
    ) -> HoursDecision:
        raise NotImplementedError
