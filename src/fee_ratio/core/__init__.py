"""
Fee Ratio Core
==============

Unified exports for the integer-domain ratio engine and the fee layer built on it.
All arithmetic is exact integer arithmetic on the unsigned 64-bit amount domain.
Decimal helpers are provided *only* for I/O formatting.
"""

# NOTE:
#   Numeric infeasibility (u64 overflow, no preimage, subtraction underflow)
#   is reported as None. Exceptions from `exc` signal caller bugs only.

# Integer-domain constants
from .constants import (
    U64_MAX,
    U128_MAX,
    UintWidth,
    RATIO_QUANTUM,
)

# Amount primitives
from .amounts import (
    AmountRange,
    AftFee,
    BefFee,
    check_u64,
    u64_checked,
)

# Ratio
from .ratio import (
    gcd,
    Ratio,
    ZERO,
    ONE,
)

# Rounded application / reversal
from .rounding import (
    Floor,
    Ceil,
)

# Fee layer
from .fee import (
    is_valid_fee_ratio,
    Fee,
    FloorFee,
    CeilFee,
)

# Decimal formatting helpers (non-core arithmetic)
from .fmt import (
    DEFAULT_DECIMAL_PRECISION,
    fmt_dec,
    ratio_to_decimal,
    fee_to_bps,
    fmt_range,
    fmt_aft_fee,
)

# Core exceptions
from .exc import RatioDomainError, FeeRatioError, InvariantViolation

__all__ = [
    # constants
    "U64_MAX",
    "U128_MAX",
    "UintWidth",
    "RATIO_QUANTUM",
    # amounts
    "AmountRange",
    "AftFee",
    "BefFee",
    "check_u64",
    "u64_checked",
    # ratio
    "gcd",
    "Ratio",
    "ZERO",
    "ONE",
    # rounding
    "Floor",
    "Ceil",
    # fee
    "is_valid_fee_ratio",
    "Fee",
    "FloorFee",
    "CeilFee",
    # fmt
    "DEFAULT_DECIMAL_PRECISION",
    "fmt_dec",
    "ratio_to_decimal",
    "fee_to_bps",
    "fmt_range",
    "fmt_aft_fee",
    # exceptions
    "RatioDomainError",
    "FeeRatioError",
    "InvariantViolation",
]
