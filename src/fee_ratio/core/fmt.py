"""
Formatting helpers (non-core arithmetic).

Core arithmetic uses plain ints. Decimal here is only for display
(e.g., tests, logs, CLI output).
"""

from decimal import Decimal, getcontext, ROUND_DOWN
from typing import Optional

from .amounts import AftFee, AmountRange
from .constants import RATIO_QUANTUM
from .exc import RatioDomainError
from .fee import Fee
from .ratio import Ratio

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# Global Decimal precision (formatting only)
# ---------------------------------------------------------------------------

#: Enough significant digits to show a u64/u64 ratio to RATIO_QUANTUM.
DEFAULT_DECIMAL_PRECISION: int = 48
getcontext().prec = DEFAULT_DECIMAL_PRECISION


def fmt_dec(x: Decimal, places: int = 18) -> str:
    """Format a Decimal in scientific notation with fixed fractional digits.

      Decimal('1')     -> '1.000000000000000000E+0'
      Decimal('0.25')  -> '2.500000000000000000E-1'
    """
    return format(x, f".{places}E")


def ratio_to_decimal(r: Ratio, quantum: Decimal = RATIO_QUANTUM) -> Decimal:
    """Display value of a ratio, truncated to `quantum`. Zero encodings give 0."""
    if not isinstance(r, Ratio):
        raise RatioDomainError("ratio_to_decimal(): expected Ratio")
    if r.is_zero():
        return Decimal(0)
    _dbg(f"ratio_to_decimal: n={r.n}, d={r.d}")
    return (Decimal(r.n) / Decimal(r.d)).quantize(quantum, rounding=ROUND_DOWN)


def fee_to_bps(fee: Fee) -> Decimal:
    """Fee ratio expressed in basis points, for display only."""
    return ratio_to_decimal(fee.ratio) * Decimal(10_000)


def fmt_range(r: Optional[AmountRange]) -> str:
    """'[lo, hi]' or 'none' for an infeasible reversal."""
    return "none" if r is None else str(r)


def fmt_aft_fee(a: Optional[AftFee]) -> str:
    """'rem=<r> fee=<f>' or 'none' when application overflowed."""
    if a is None:
        return "none"
    return f"rem={a.rem} fee={a.fee}"


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "fmt_dec",
    "ratio_to_decimal",
    "fee_to_bps",
    "fmt_range",
    "fmt_aft_fee",
]
