# natural_numbers/errors.py
"""
Error types for natural_numbers.

Absence of a predecessor is not an error: Nat.pred() returns None for zero.
"""

from __future__ import annotations


class NatError(Exception):
    """Base class for natural number errors."""
    pass


class NatRangeError(NatError, ValueError):
    """Magnitude outside the representable range of a Nat type."""

    def __init__(self, magnitude: int, maximum: int) -> None:
        self.magnitude = magnitude
        self.maximum = maximum
        super().__init__(
            f"magnitude {magnitude} outside representable range [0, {maximum}]"
        )


class NatOverflowError(NatError, OverflowError):
    """succ() at the maximum magnitude under the 'raise' overflow policy."""

    def __init__(self, maximum: int) -> None:
        self.maximum = maximum
        super().__init__(f"successor of {maximum} overflows")
