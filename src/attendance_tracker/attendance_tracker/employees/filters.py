from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from ..core.constants import FILTER_ALL
from .model import Employee


@dataclass(frozen=True)
class EmployeeFilter:
    """Department / status / free-text filter over the roster.

    ``"all"`` (or an empty value) disables a criterion. The query matches
    case-insensitively against name or department.
    """

    department: str = FILTER_ALL
    status: str = FILTER_ALL
    query: str = ""

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "EmployeeFilter":
        return cls(
            department=args.get("department") or FILTER_ALL,
            status=args.get("status") or FILTER_ALL,
            query=(args.get("q") or "").strip(),
        )

    def matches(self, employee: Employee) -> bool:
        if self.department != FILTER_ALL and employee.department != self.department:
            return False
        if self.status != FILTER_ALL and employee.status.value != self.status:
            return False
        if self.query:
            q = self.query.lower()
            if q not in employee.name.lower() and q not in employee.department.lower():
                return False
        return True

    def apply(self, employees: Iterable[Employee]) -> list[Employee]:
        return [e for e in employees if self.matches(e)]


def unique_in_order(values: Iterable[str]) -> list[str]:
    seen: dict[str, None] = {}
    for v in values:
        seen.setdefault(v, None)
    return list(seen)
