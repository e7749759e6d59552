"""
Core exception types for fee_ratio.core.

These are dependency-free and may be imported by all core modules.

Numeric infeasibility (overflow past u64, no preimage, subtraction underflow)
is never an exception: operations return None. The types below are reserved
for caller bugs and broken invariants.
"""

__all__ = [
    "RatioDomainError",
    "FeeRatioError",
    "InvariantViolation",
]


class RatioDomainError(ValueError):
    """Raised when inputs violate the unsigned domain or a declared component width."""
    pass


class FeeRatioError(RatioDomainError):
    """Raised when a fee is built directly from a ratio outside [0, 1].

    Attributes
    ----------
    ratio : Any
        The rejected ratio, for context.
    """

    def __init__(self, ratio, reason: str = "fee ratio must be in [0, 1]"):
        super().__init__(f"{reason}: {ratio}")
        self.ratio = ratio


class InvariantViolation(Exception):
    """Raised when arithmetic or guards would break core invariants."""
    pass
