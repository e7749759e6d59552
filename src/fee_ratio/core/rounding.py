"""
Rounded application of a Ratio to u64 amounts, and its exact reversal.

- Floor(r).apply(x) = floor(x * n / d); Ceil(r).apply(x) = ceil(x * n / d).
- A zero ratio maps every amount to 0.
- apply() returns None when the rounded result does not fit in u64.
- reverse(y) returns the closed AmountRange of every x with apply(x) == y,
  or None when no such x exists in u64. A maximum beyond u64 saturates to
  U64_MAX; a minimum beyond u64 means no preimage.

Floor and Ceil are separate classes: their inverses use different inequality
directions and off-by-one corrections.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .amounts import AmountRange, _ceil_div, _floor_div, check_u64, u64_checked
from .constants import U64_MAX
from .ratio import Ratio

# Debug printing control
DEBUG_ROUNDING = False

def _dbg(msg: str) -> None:
    if DEBUG_ROUNDING:
        print(msg)


def _bounded_range(lo: int, hi: int) -> Optional[AmountRange]:
    """Saturate a widened [lo, hi] into u64; None if lo overflows or the range is empty."""
    lo64 = u64_checked(lo)
    if lo64 is None:
        return None
    hi64 = u64_checked(hi)
    if hi64 is None:
        hi64 = U64_MAX
    if lo64 > hi64:
        return None
    return AmountRange(lo64, hi64)


@dataclass(frozen=True)
class Floor:
    """Ratio application rounding down."""
    ratio: Ratio

    def apply(self, amount: int) -> Optional[int]:
        check_u64(amount)
        if self.ratio.is_zero():
            return 0
        n, d = self.ratio.n, self.ratio.d
        return u64_checked(_floor_div(amount * n, d))

    def reverse(self, amt_after_apply: int) -> Optional[AmountRange]:
        """All x with floor(x*n/d) == y.

        From y <= x*n/d < y+1:
          x >= ceil(d*y / n)
          x <  (d*y + d) / n  ->  x <= (d*y + d) // n, minus 1 if the division is exact
        """
        check_u64(amt_after_apply, "amt_after_apply")
        if self.ratio.is_zero():
            return AmountRange.full() if amt_after_apply == 0 else None

        n, d = self.ratio.n, self.ratio.d
        dy = d * amt_after_apply
        lo = _ceil_div(dy, n)
        dy_plus_d = dy + d
        hi = dy_plus_d // n
        if dy_plus_d % n == 0:
            hi -= 1
        _dbg(f"Floor({self.ratio}).reverse({amt_after_apply}): lo={lo} hi={hi}")
        return _bounded_range(lo, hi)

    def __str__(self) -> str:
        return f"Floor({self.ratio})"


@dataclass(frozen=True)
class Ceil:
    """Ratio application rounding up."""
    ratio: Ratio

    def apply(self, amount: int) -> Optional[int]:
        check_u64(amount)
        if self.ratio.is_zero():
            return 0
        n, d = self.ratio.n, self.ratio.d
        return u64_checked(_ceil_div(amount * n, d))

    def reverse(self, amt_after_apply: int) -> Optional[AmountRange]:
        """All x with ceil(x*n/d) == y.

        From y-1 < x*n/d <= y:
          x >  (d*y - d) / n  ->  x >= (d*y - d) // n + 1
          x <= d*y / n        ->  x <= (d*y) // n
        y == 0 with a nonzero ratio is handled before the formula (d*y - d < 0).
        """
        check_u64(amt_after_apply, "amt_after_apply")
        if self.ratio.is_zero():
            return AmountRange.full() if amt_after_apply == 0 else None
        if amt_after_apply == 0:
            return AmountRange.single(0)

        n, d = self.ratio.n, self.ratio.d
        dy = d * amt_after_apply
        lo = _floor_div(dy - d, n) + 1
        hi = _floor_div(dy, n)
        _dbg(f"Ceil({self.ratio}).reverse({amt_after_apply}): lo={lo} hi={hi}")
        return _bounded_range(lo, hi)

    def __str__(self) -> str:
        return f"Ceil({self.ratio})"


__all__ = [
    "Floor",
    "Ceil",
]
