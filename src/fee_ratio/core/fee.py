"""
Fee layer: a Floor/Ceil ratio constrained to [0, 1] that splits an amount into
(remainder, fee).

Alignment notes:
- The fee is computed with the wrapped rounding mode; the remainder is the
  checked difference, so `rem + fee == amount` always.
- Reversal from the remainder goes through the complementary ratio (1 - r)
  with the *opposite* rounding mode, by the exact identities
    x - ceil(x*r)  == floor(x*(1-r))
    x - floor(x*r) == ceil(x*(1-r))
- A zero-denominator ratio with a nonzero numerator is rejected so that
  "zero fee" has no second encoding beyond the zero numerator (and 0/0).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Type, Union

from .amounts import AftFee, AmountRange, BefFee
from .exc import FeeRatioError
from .ratio import Ratio
from .rounding import Ceil, Floor

# Debug printing control
DEBUG_FEE = False

def _dbg(msg: str) -> None:
    if DEBUG_FEE:
        print(msg)


Rounded = Union[Floor, Ceil]


def is_valid_fee_ratio(ratio: Ratio) -> bool:
    """True iff `ratio` is usable as a fee: value in [0, 1], no `x/0` with x != 0."""
    if ratio.d == 0:
        return ratio.n == 0
    return ratio.n <= ratio.d


@dataclass(frozen=True)
class Fee:
    """Base fee over a rounded ratio. Use FloorFee or CeilFee."""

    inner: Rounded

    _ROUNDING: ClassVar[Type[Rounded]]
    _COMPLEMENT: ClassVar[Type[Rounded]]

    def __post_init__(self):
        if type(self) is Fee:
            raise TypeError("Fee is abstract; use FloorFee or CeilFee")
        if not isinstance(self.inner, self._ROUNDING):
            raise TypeError(f"{type(self).__name__} wraps {self._ROUNDING.__name__}, got {type(self.inner).__name__}")
        if not is_valid_fee_ratio(self.inner.ratio):
            raise FeeRatioError(self.inner.ratio)

    # ------------- constructors -------------

    @classmethod
    def new(cls, fee_ratio: Ratio) -> Optional["Fee"]:
        """Build a fee from a ratio; None if the ratio is > 1 or of the form x/0 with x != 0."""
        if not is_valid_fee_ratio(fee_ratio):
            _dbg(f"{cls.__name__}.new: rejected {fee_ratio}")
            return None
        return cls(cls._ROUNDING(fee_ratio))

    # ------------- accessors -------------

    @property
    def ratio(self) -> Ratio:
        return self.inner.ratio

    # ------------- application -------------

    def apply(self, amount: int) -> Optional[AftFee]:
        """Levy the fee on `amount`."""
        fee = self.inner.apply(amount)
        if fee is None:
            return None
        return BefFee(amount).with_fee(fee)

    def one_minus_fee_ratio(self) -> Ratio:
        """Return 1 - r as (d - n)/d in the wider width; exactly one when r is zero."""
        r = self.ratio
        w = r.max_width
        if r.is_zero():
            return Ratio.one(w, w)
        return Ratio(r.d - r.n, r.d, w, w)

    # ------------- reversal -------------

    def reverse_from_rem(self, rem: int) -> Optional[AmountRange]:
        """All amounts whose remainder after this fee is `rem`."""
        if self.ratio.is_zero():
            return AmountRange.single(rem)
        return self._COMPLEMENT(self.one_minus_fee_ratio()).reverse(rem)

    def reverse_from_fee(self, fee: int) -> Optional[AmountRange]:
        """All amounts on which this fee charges exactly `fee`."""
        if self.ratio.is_one():
            return AmountRange.single(fee)
        return self.inner.reverse(fee)

    def __str__(self) -> str:
        return f"Fee({self.inner})"


@dataclass(frozen=True)
class FloorFee(Fee):
    """Fee rounded down (favours the payer); remainder reverses via Ceil(1 - r)."""

    _ROUNDING: ClassVar[Type[Rounded]] = Floor
    _COMPLEMENT: ClassVar[Type[Rounded]] = Ceil

    ZERO: ClassVar["FloorFee"]
    ONE: ClassVar["FloorFee"]


@dataclass(frozen=True)
class CeilFee(Fee):
    """Fee rounded up (favours the collector); remainder reverses via Floor(1 - r)."""

    _ROUNDING: ClassVar[Type[Rounded]] = Ceil
    _COMPLEMENT: ClassVar[Type[Rounded]] = Floor

    ZERO: ClassVar["CeilFee"]
    ONE: ClassVar["CeilFee"]


FloorFee.ZERO = FloorFee(Floor(Ratio(0, 1)))
FloorFee.ONE = FloorFee(Floor(Ratio(1, 1)))
CeilFee.ZERO = CeilFee(Ceil(Ratio(0, 1)))
CeilFee.ONE = CeilFee(Ceil(Ratio(1, 1)))


__all__ = [
    "is_valid_fee_ratio",
    "Fee",
    "FloorFee",
    "CeilFee",
]
