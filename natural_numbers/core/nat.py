# natural_numbers/core/nat.py
"""
Nat: natural numbers defined by the successor operation.

A concrete type supplies five primitives:

    value()    -> int          magnitude of this value
    wrap(n)    -> Nat          value with magnitude n   (classmethod)
    zero()     -> Nat          additive identity        (classmethod)
    is_zero()  -> bool
    succ()     -> Nat          one more than this value

and inherits the derived operations:

    pred()     -> Nat | None   None for zero
    add(other) -> Nat          Peano addition, built from succ/pred only

Example:

    from natural_numbers import U32Nat

    two = U32Nat.wrap(2)
    assert two.add(U32Nat.wrap(3)) == U32Nat.wrap(5)
    assert U32Nat.zero().pred() is None
"""

from __future__ import annotations

import abc
from typing import Optional, TypeVar

N = TypeVar("N", bound="Nat")


class Nat(abc.ABC):
    """Abstract natural number. Instances are immutable."""

    __slots__ = ()

    # ---------- required primitives ----------

    @abc.abstractmethod
    def value(self) -> int:
        """Magnitude of this value as a plain int."""

    @classmethod
    @abc.abstractmethod
    def wrap(cls: type[N], n: int) -> N:
        """Value whose magnitude is n."""

    @classmethod
    @abc.abstractmethod
    def zero(cls: type[N]) -> N:
        ...

    @abc.abstractmethod
    def is_zero(self) -> bool:
        ...

    @abc.abstractmethod
    def succ(self: N) -> N:
        """The successor of this value."""

    # ---------- derived operations ----------

    def pred(self: N) -> Optional[N]:
        """The value of which this is the successor, or None for zero."""
        n = self.value()
        if n == 0:
            return None
        return type(self).wrap(n - 1)

    def add(self: N, other: N) -> N:
        """
        Peano addition:

            a + 0       = a
            a + succ(b) = succ(a + b)

        Walks other's predecessor chain and applies succ once per step,
        which yields the same value as the recursive definition (overflow
        behaviour included) with constant stack depth. O(other).
        """
        if type(other) is not type(self):
            raise TypeError(
                f"add expects {type(self).__name__}, got {type(other).__name__}"
            )
        acc = self
        cur = other.pred()
        while cur is not None:
            acc = acc.succ()
            cur = cur.pred()
        return acc
