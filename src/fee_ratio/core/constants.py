"""
Fee Ratio Core Constants (integer domain)
=========================================

Only integer-domain bounds live here. Decimal display helpers are in `fmt.py`.
"""

# NOTE: Amounts are always unsigned 64-bit. Ratio components may be narrower; see UintWidth.

from __future__ import annotations

from decimal import Decimal
from enum import Enum

# ---------------------------------------------------------------------------
# Amount domain
# ---------------------------------------------------------------------------

#: Largest representable amount (u64::MAX).
U64_MAX: int = (1 << 64) - 1

#: Largest cross product of two u64 components (bound of the widened type).
U128_MAX: int = (1 << 128) - 1


# ---------------------------------------------------------------------------
# Ratio component widths
# ---------------------------------------------------------------------------

class UintWidth(Enum):
    """Declared unsigned width of a ratio component."""

    U8 = 8
    U16 = 16
    U32 = 32
    U64 = 64

    @property
    def bits(self) -> int:
        return self.value

    @property
    def max(self) -> int:
        return (1 << self.value) - 1

    @staticmethod
    def wider(a: "UintWidth", b: "UintWidth") -> "UintWidth":
        """Return the wider of two widths (the "Max" arithmetic type)."""
        return a if a.value >= b.value else b

    @staticmethod
    def narrower(a: "UintWidth", b: "UintWidth") -> "UintWidth":
        """Return the narrower of two widths (the "Min" arithmetic type)."""
        return a if a.value <= b.value else b

    def __str__(self) -> str:
        return f"u{self.value}"


# ---------------------------------------------------------------------------
# Decimal quanta for display only
# ---------------------------------------------------------------------------

# Display step for ratio values rendered as Decimal.
RATIO_QUANTUM: Decimal = Decimal("1e-18")


__all__ = [
    "U64_MAX",
    "U128_MAX",
    "UintWidth",
    "RATIO_QUANTUM",
]
