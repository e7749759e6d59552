"""
Research utilities (non-stable API).

Only fee schedule tabulation lives here. This is NOT part of the stable
core API and may change without notice.
"""
from __future__ import annotations

from .schedule import (
    ScheduleConfig,
    SCHEDULE_CFG,
    ScheduleRow,
    SCHEDULE_COLUMNS,
    fee_schedule,
    schedule_to_frame,
    summarize_schedule,
    schedule_rows_to_text,
)

__all__ = [
    "ScheduleConfig",
    "SCHEDULE_CFG",
    "ScheduleRow",
    "SCHEDULE_COLUMNS",
    "fee_schedule",
    "schedule_to_frame",
    "summarize_schedule",
    "schedule_rows_to_text",
]
