# natural_numbers/core/u32.py
"""
U32Nat: a Nat stored as a 32-bit unsigned magnitude.

Every primitive is a pass-through to the underlying int. The only extra
work is keeping the magnitude inside [0, MAX]:

  - wrap() / U32Nat(n) reject anything outside the range,
  - succ() at MAX defers to the overflow policy (natural_numbers.config).

No ordering is defined on purpose; compare value()s if you need one.
"""

from __future__ import annotations

from typing import Any

from natural_numbers.config import OverflowPolicy, overflow_policy
from natural_numbers.errors import NatOverflowError, NatRangeError
from natural_numbers.core.nat import Nat

U32_BITS = 32
U32_MAX = (1 << U32_BITS) - 1


def _check_magnitude(n: Any, maximum: int) -> int:
    # bool is an int subclass, but True/False are not magnitudes.
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"magnitude must be int, got {type(n).__name__}")
    if n < 0 or n > maximum:
        raise NatRangeError(n, maximum)
    return n


class U32Nat(Nat):
    """Natural number in [0, 2**32 - 1]."""

    __slots__ = ("_n",)

    BITS = U32_BITS
    MAX = U32_MAX

    def __init__(self, n: int = 0) -> None:
        object.__setattr__(self, "_n", _check_magnitude(n, self.MAX))

    # ---------- primitives ----------

    def value(self) -> int:
        return self._n

    @classmethod
    def wrap(cls, n: int) -> "U32Nat":
        return cls(n)

    @classmethod
    def zero(cls) -> "U32Nat":
        return cls(0)

    def is_zero(self) -> bool:
        return self._n == 0

    def succ(self) -> "U32Nat":
        if self._n < self.MAX:
            return type(self)(self._n + 1)

        policy = overflow_policy()
        if policy is OverflowPolicy.WRAP:
            return type(self).zero()
        if policy is OverflowPolicy.SATURATE:
            return self
        raise NatOverflowError(self.MAX)

    # ---------- value semantics ----------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._n,))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._n == other._n  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._n))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._n})"

    def __int__(self) -> int:
        return self._n

    __index__ = __int__
