from __future__ import annotations

import re
from typing import Optional

from ..core.constants import MINUTES_PER_DAY

_HHMM = re.compile(r"^\s*(\d+):(\d{1,2})\s*$")


def parse_hhmm(value: Optional[str]) -> Optional[int]:
    """Parse ``H:MM``/``HH:MM`` (or a longer ``HHH:MM`` total) into minutes.

    Returns None for empty or unparseable values. Ranges are not checked
    here: ``"25:99"`` parses to ``25 * 60 + 99``. Range checks belong to the
    form validators.
    """
    if value is None:
        return None
    m = _HHMM.match(str(value))
    if not m:
        return None
    return int(m.group(1)) * 60 + int(m.group(2))


def format_hhmm(minutes: int) -> str:
    """Zero-padded ``HH:MM``. Hours are not clamped to 23."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_total(minutes: int) -> str:
    """Aggregate ``H:MM`` with unpadded hours."""
    return f"{minutes // 60}:{minutes % 60:02d}"


def elapsed_minutes(start: int, end: int) -> int:
    """Minutes from start to end, wrapping past midnight."""
    minutes = end - start
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes

