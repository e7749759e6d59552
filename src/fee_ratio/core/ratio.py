"""
Ratio: a numerator/denominator pair over independently sized unsigned widths.

Semantics:
- A denominator of 0 denotes the zero ratio, exactly like a numerator of 0.
  Both encodings compare equal and hash equal.
- Ordering is by cross-multiplication (n1*d2 vs n2*d1) after the zero case is
  settled, so no zero-denominator product is ever formed.
- Hashing always uses the lowest form, so equal values hash equal.
- Components are validated against their declared UintWidth at construction.
  Python ints never overflow; the widths bound the domain, not the arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from .amounts import check_uint
from .constants import UintWidth


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm; `gcd(a, 0) == a`."""
    while b > 0:
        a, b = b, a % b
    return a


@dataclass(frozen=True, eq=False)
class Ratio:
    """Non-negative rational n/d with declared component widths (default u64/u64)."""

    n: int
    d: int
    n_width: UintWidth = UintWidth.U64
    d_width: UintWidth = UintWidth.U64

    def __post_init__(self):
        check_uint(self.n, self.n_width, "n")
        check_uint(self.d, self.d_width, "d")

    # ------------- constructors -------------

    @classmethod
    def zero(cls, n_width: UintWidth = UintWidth.U64, d_width: UintWidth = UintWidth.U64) -> "Ratio":
        return cls(0, 0, n_width, d_width)

    @classmethod
    def one(cls, n_width: UintWidth = UintWidth.U64, d_width: UintWidth = UintWidth.U64) -> "Ratio":
        return cls(1, 1, n_width, d_width)

    # ------------- arithmetic types -------------

    @property
    def max_width(self) -> UintWidth:
        return UintWidth.wider(self.n_width, self.d_width)

    @property
    def min_width(self) -> UintWidth:
        return UintWidth.narrower(self.n_width, self.d_width)

    @property
    def ext_bits(self) -> int:
        """Bits needed to hold a cross product without overflow."""
        return 2 * self.max_width.bits

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.n == 0 or self.d == 0

    def is_one(self) -> bool:
        return not self.is_zero() and self.n == self.d

    # ------------- normal form -------------

    def lowest_form(self) -> "Ratio":
        """Reduce by gcd; both components take the wider width. Zero reduces to 0/0."""
        w = self.max_width
        if self.is_zero():
            return Ratio.zero(w, w)
        g = gcd(self.d, self.n)
        return Ratio(self.n // g, self.d // g, w, w)

    # ------------- ordering -------------

    def cmp(self, other: "Ratio") -> int:
        """Three-way compare by value: -1, 0 or 1."""
        if not isinstance(other, Ratio):
            raise TypeError(f"cannot compare Ratio with {type(other).__name__}")
        a_zero, b_zero = self.is_zero(), other.is_zero()
        if a_zero and b_zero:
            return 0
        if a_zero:
            return -1
        if b_zero:
            return 1
        lhs = self.n * other.d
        rhs = other.n * self.d
        if lhs == rhs:
            return 0
        return -1 if lhs < rhs else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.cmp(other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.cmp(other) != 0

    def __lt__(self, other: "Ratio") -> bool:
        return self.cmp(other) < 0

    def __le__(self, other: "Ratio") -> bool:
        return self.cmp(other) <= 0

    def __gt__(self, other: "Ratio") -> bool:
        return self.cmp(other) > 0

    def __ge__(self, other: "Ratio") -> bool:
        return self.cmp(other) >= 0

    def __hash__(self) -> int:
        lf = self.lowest_form()
        return hash((lf.n, lf.d))

    # Optional helpers
    def as_fraction(self) -> Fraction:
        """Return the value as an exact Fraction (zero for either zero encoding)."""
        if self.is_zero():
            return Fraction(0, 1)
        return Fraction(self.n, self.d)

    def __str__(self) -> str:
        return f"{self.n}/{self.d}"


#: u64/u64 zero (0/0) and one (1/1).
ZERO = Ratio.zero()
ONE = Ratio.one()


__all__ = [
    "gcd",
    "Ratio",
    "ZERO",
    "ONE",
]
