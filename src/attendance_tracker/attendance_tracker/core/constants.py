"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
TOLERANCE_MINUTES = 10
OVERTIME_DAY_MINUTES = 8 * 60

DEFAULT_REPORT_PERIOD_DAYS = 30
DEFAULT_PAGE_SIZE = 10
CHART_LABEL_MAX_LENGTH = 8

ZERO_DURATION = "00:00"

DEPARTMENTS = (
    "MOULDING DEPT. (A & B SHIFT)",
    "FOILING & HOT STAMPING DEPT. DAY SHIFT",
    "REFILLING DEPT.",
    "EXTRUSION DEPT. (A & B SHIFT)",
    "PEN ASSEMBLING DEPT.",
    "DESPATCH DEPT. DAY SHIFT",
    "OFFICE STAFF",
    "SECURITY DEPT.NIGHT SHIFT",
)

FILTER_ALL = "all"
