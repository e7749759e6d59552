"""
Fee schedule tabulation (analysis helper, not part of the stable core API).

A schedule applies one fee to a grid of amounts and records, per amount, the
split and both reversal ranges. It is used to eyeball rounding behaviour at a
given fee ratio and to export it for review.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from ..core import U64_MAX, AmountRange, Fee, check_u64
from ..core.fmt import fmt_range

# Debug printing control
DEBUG_SCHEDULE = False

def _dbg(msg: str) -> None:
    if DEBUG_SCHEDULE:
        print(msg)


# -------------------------------
# Centralised schedule configuration (for reproducibility)
# -------------------------------

@dataclass(frozen=True)
class ScheduleConfig:
    """Default knobs for schedule tabulation.

    Callers can pass their own instance or override `SCHEDULE_CFG` at runtime.
    - `start`, `stop`, `step`: amount grid (stop inclusive).
    - `max_rows`: guard against accidentally tabulating a huge grid.
    """
    start: int = 0
    stop: int = 100
    step: int = 1
    max_rows: int = 100_000

    def __post_init__(self) -> None:
        check_u64(self.start, "start")
        check_u64(self.stop, "stop")
        if not isinstance(self.step, int) or isinstance(self.step, bool) or self.step <= 0:
            raise ValueError(f"step must be a positive int, got {self.step}")
        if self.stop < self.start:
            raise ValueError(f"stop must be >= start: {self.stop} < {self.start}")
        if self.max_rows <= 0:
            raise ValueError("max_rows must be positive")

    def amounts(self) -> range:
        return range(self.start, self.stop + 1, self.step)

    def row_count(self) -> int:
        return (self.stop - self.start) // self.step + 1


# Module-level default configuration
SCHEDULE_CFG = ScheduleConfig()


@dataclass(frozen=True)
class ScheduleRow:
    """One amount in a fee schedule.

    `rem`/`fee` are None when applying the fee overflowed; the reversal ranges
    are then None as well.
    """
    amount: int
    rem: Optional[int]
    fee: Optional[int]
    rev_rem: Optional[AmountRange]
    rev_fee: Optional[AmountRange]


SCHEDULE_COLUMNS = [
    "amount", "rem", "fee",
    "rev_rem_lo", "rev_rem_hi",
    "rev_fee_lo", "rev_fee_hi",
]


def fee_schedule(fee: Fee, cfg: ScheduleConfig = SCHEDULE_CFG) -> List[ScheduleRow]:
    """Tabulate `fee` over the amount grid of `cfg`."""
    count = cfg.row_count()
    if count > cfg.max_rows:
        raise ValueError(f"schedule would have {count} rows > max_rows={cfg.max_rows}")
    rows: List[ScheduleRow] = []
    for amount in cfg.amounts():
        aft = fee.apply(amount)
        if aft is None:
            rows.append(ScheduleRow(amount, None, None, None, None))
            continue
        rows.append(
            ScheduleRow(
                amount=amount,
                rem=aft.rem,
                fee=aft.fee,
                rev_rem=fee.reverse_from_rem(aft.rem),
                rev_fee=fee.reverse_from_fee(aft.fee),
            )
        )
    _dbg(f"fee_schedule: {fee} -> {len(rows)} rows")
    return rows


def schedule_to_frame(rows: Sequence[ScheduleRow]) -> pd.DataFrame:
    """Rows as a DataFrame. Columns hold Python ints (object dtype) since u64 exceeds int64."""
    def _lo(r: Optional[AmountRange]):
        return None if r is None else r.start

    def _hi(r: Optional[AmountRange]):
        return None if r is None else r.end

    records = [
        {
            "amount": r.amount,
            "rem": r.rem,
            "fee": r.fee,
            "rev_rem_lo": _lo(r.rev_rem),
            "rev_rem_hi": _hi(r.rev_rem),
            "rev_fee_lo": _lo(r.rev_fee),
            "rev_fee_hi": _hi(r.rev_fee),
        }
        for r in rows
    ]
    return pd.DataFrame(records, columns=SCHEDULE_COLUMNS, dtype=object)


def summarize_schedule(rows: Iterable[ScheduleRow]) -> dict:
    """Summary counters for a schedule (display/reporting only)."""
    n = 0
    overflowed = 0
    saturated = 0
    total_fee = 0
    for r in rows:
        n += 1
        if r.fee is None:
            overflowed += 1
            continue
        total_fee += r.fee
        if r.rev_rem is not None and r.rev_rem.end == U64_MAX:
            saturated += 1
    return {
        "rows": n,
        "overflowed": overflowed,
        "saturated_rem_ranges": saturated,
        "total_fee": total_fee,
    }


def schedule_rows_to_text(rows: Sequence[ScheduleRow]) -> str:
    """Plain aligned text rendering for terminals."""
    lines = ["amount\trem\tfee\trev_rem\trev_fee"]
    for r in rows:
        lines.append(
            "\t".join([
                str(r.amount),
                "none" if r.rem is None else str(r.rem),
                "none" if r.fee is None else str(r.fee),
                fmt_range(r.rev_rem),
                fmt_range(r.rev_fee),
            ])
        )
    return "\n".join(lines)


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
