"""
Amount primitives: unsigned 64-bit amounts, inclusive amount ranges and the
before/after-fee pair.

- Amounts are plain Python ints validated into [0, U64_MAX] at the boundary.
- Non-negative domain: negative values are rejected at input.
- Rounding helpers are integer-only; Decimal is never used for arithmetic.
- AftFee is only produced through BefFee, by checked subtraction, so
  `rem + fee == before_fee()` always holds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import U64_MAX, UintWidth
from .exc import RatioDomainError, InvariantViolation

# Debug printing control
DEBUG_AMOUNTS = False

def _dbg(msg: str) -> None:
    if DEBUG_AMOUNTS:
        print(msg)


# ----------------------------
# Domain checks (centralised)
# ----------------------------

def _is_int(x) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def check_uint(x: int, width: UintWidth, name: str = "value") -> int:
    """Validate that `x` is an int representable in `width`; return it unchanged."""
    if not _is_int(x):
        raise RatioDomainError(f"{name} must be an int, got {type(x).__name__}")
    if x < 0:
        raise RatioDomainError(f"{name} must be >= 0, got {x}")
    if x > width.max:
        raise RatioDomainError(f"{name} exceeds {width}: {x}")
    return x


def check_u64(x: int, name: str = "amount") -> int:
    return check_uint(x, UintWidth.U64, name)


def u64_checked(x: int) -> Optional[int]:
    """Narrow a widened non-negative intermediate back to u64, or None if it does not fit."""
    if x > U64_MAX:
        return None
    return x


# ----------------------------
# Integer rounding helpers
# ----------------------------

def _ceil_div(a: int, b: int) -> int:
    if a < 0 or b <= 0:
        raise RatioDomainError("_ceil_div expects a>=0 and b>0")
    return 0 if a == 0 else -(-a // b)


def _floor_div(a: int, b: int) -> int:
    if a < 0 or b <= 0:
        raise RatioDomainError("_floor_div expects a>=0 and b>0")
    return a // b


# ----------------------------
# Inclusive amount range
# ----------------------------

@dataclass(frozen=True)
class AmountRange:
    """Closed range [start, end] of u64 amounts (start <= end)."""
    start: int
    end: int

    def __post_init__(self):
        check_u64(self.start, "start")
        check_u64(self.end, "end")
        if self.start > self.end:
            raise RatioDomainError(f"empty range: start={self.start} > end={self.end}")

    @classmethod
    def full(cls) -> "AmountRange":
        return cls(0, U64_MAX)

    @classmethod
    def single(cls, amount: int) -> "AmountRange":
        return cls(amount, amount)

    def __contains__(self, amount: object) -> bool:
        if not _is_int(amount):
            return False
        return self.start <= amount <= self.end

    def size(self) -> int:
        """Number of amounts in the range (may exceed sys.maxsize, hence no __len__)."""
        return self.end - self.start + 1

    def is_single(self) -> bool:
        return self.start == self.end

    def as_tuple(self) -> Tuple[int, int]:
        return self.start, self.end

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"


# ----------------------------
# Before / after fee pair
# ----------------------------

@dataclass(frozen=True)
class AftFee:
    """A token amount after the levying of fees and the fee levied.

    Invariant: `rem + fee == before_fee()` and the sum fits in u64.
    Build it with `BefFee.with_fee` or `BefFee.with_rem`.
    """
    rem: int
    fee: int

    def __post_init__(self):
        check_u64(self.rem, "rem")
        check_u64(self.fee, "fee")
        if self.rem + self.fee > U64_MAX:
            raise InvariantViolation(f"AftFee overflow: rem={self.rem} + fee={self.fee} > u64")

    def before_fee(self) -> int:
        """The original amount before fees: `rem + fee`."""
        return self.rem + self.fee

    # short alias kept alongside the long name
    bef_fee = before_fee

    def __str__(self) -> str:
        return f"AftFee(rem={self.rem}, fee={self.fee})"


@dataclass(frozen=True)
class BefFee:
    """A token amount before the levying of fees."""
    amount: int

    def __post_init__(self):
        check_u64(self.amount, "amount")

    def before_fee(self) -> int:
        return self.amount

    def with_fee(self, fee: int) -> Optional[AftFee]:
        """Split off `fee`; None if `fee > amount`."""
        check_u64(fee, "fee")
        if fee > self.amount:
            _dbg(f"with_fee: fee={fee} > amount={self.amount}")
            return None
        return AftFee(rem=self.amount - fee, fee=fee)

    def with_rem(self, rem: int) -> Optional[AftFee]:
        """Keep `rem` and charge the difference as fee; None if `rem > amount`."""
        check_u64(rem, "rem")
        if rem > self.amount:
            _dbg(f"with_rem: rem={rem} > amount={self.amount}")
            return None
        return AftFee(rem=rem, fee=self.amount - rem)


__all__ = [
    "check_uint",
    "check_u64",
    "u64_checked",
    "AmountRange",
    "AftFee",
    "BefFee",
]
