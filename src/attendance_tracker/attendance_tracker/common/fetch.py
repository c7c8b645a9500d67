from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from ..core.enums import FetchState
from ..core.exceptions import DataUnavailableError

T = TypeVar("T")


@dataclass(frozen=True)
class Fetch(Generic[T]):
    """Result of a read from the upstream source: loading, ready or error."""

    state: FetchState
    data: Optional[T] = None
    reason: Optional[str] = None

    @classmethod
    def ready(cls, data: T) -> "Fetch[T]":
        return cls(state=FetchState.READY, data=data)

    @classmethod
    def error(cls, reason: str) -> "Fetch[T]":
        return cls(state=FetchState.ERROR, reason=reason)

    @property
    def is_ready(self) -> bool:
        return self.state == FetchState.READY

    def unwrap(self) -> T:
        if self.state == FetchState.LOADING:
            raise DataUnavailableError("Data is still loading")
        if self.state == FetchState.ERROR:
            raise DataUnavailableError(self.reason or "Data could not be loaded")
        return self.data


def guarded(read: Callable[[], T]) -> Fetch[T]:
    """Run a read and capture any failure as an ERROR fetch."""
    try:
        return Fetch.ready(read())
    except Exception as e:
        return Fetch.error(str(e) or e.__class__.__name__)
