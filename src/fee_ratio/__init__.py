# Top-level API for fee_ratio (integer-domain).
"""
Top-level API for fee_ratio (integer-domain).

This module exposes the stable interface:
  - Ratio: numerator/denominator pair over declared unsigned widths
  - Floor / Ceil: rounded application of a ratio to u64 amounts, and its exact reversal
  - FloorFee / CeilFee: fee ratios in [0, 1] splitting an amount into (rem, fee)
  - BefFee / AftFee: the checked before/after-fee pair

Analysis helpers (fee schedules) live under the `fee_ratio.research`
subpackage and are **not** part of the stable API surface.
"""

from __future__ import annotations

from .core import (
    U64_MAX,
    UintWidth,
    Ratio,
    Floor,
    Ceil,
    Fee,
    FloorFee,
    CeilFee,
    AmountRange,
    AftFee,
    BefFee,
    RatioDomainError,
    FeeRatioError,
)

__all__ = [
    "U64_MAX",
    "UintWidth",
    "Ratio",
    "Floor",
    "Ceil",
    "Fee",
    "FloorFee",
    "CeilFee",
    "AmountRange",
    "AftFee",
    "BefFee",
    "RatioDomainError",
    "FeeRatioError",
]

# NOTE:
# Research utilities (fee schedules) are intentionally *not* imported at the top-level.
# Use: `from fee_ratio import research` and import from there.
