# natural_numbers/pretty.py
"""
Pretty-print helpers for Nat values.

This does NOT change Nat.__repr__ or any core behavior.
It renders a value as the successor chain it stands for:

    0          -> "0"
    2          -> "S(S(0))"
    9          -> "S^9(0)"     (beyond max_depth)

Usage:

    from natural_numbers import U32Nat
    from natural_numbers.pretty import pretty_nat

    print(pretty_nat(U32Nat.wrap(3)))   # S(S(S(0)))
"""

from __future__ import annotations

from typing import List, TypeVar

from natural_numbers.core.nat import Nat

N = TypeVar("N", bound=Nat)

SUCC_GLYPH = "S"
ZERO_GLYPH = "0"
DEFAULT_CHAIN_LIMIT = 64


def pretty_nat(n: Nat, *, max_depth: int = 6) -> str:
    """Render n as nested successors, collapsed to S^k(0) past max_depth."""
    if not isinstance(n, Nat):
        raise TypeError(f"pretty_nat expects a Nat, got {type(n).__name__}")
    if max_depth < 0:
        raise ValueError("max_depth must be >= 0")

    k = n.value()
    if k == 0:
        return ZERO_GLYPH
    if k > max_depth:
        return f"{SUCC_GLYPH}^{k}({ZERO_GLYPH})"
    return f"{SUCC_GLYPH}(" * k + ZERO_GLYPH + ")" * k


def succ_chain(n: N, *, limit: int = DEFAULT_CHAIN_LIMIT) -> List[N]:
    """
    Every value from zero up to n (inclusive), built with succ().

    Raises ValueError if the chain would be longer than limit + 1 entries.
    """
    k = n.value()
    if k > limit:
        raise ValueError(f"succ_chain: magnitude {k} exceeds limit {limit}")

    cur = type(n).zero()
    out: List[N] = [cur]
    while cur != n:
        cur = cur.succ()
        out.append(cur)
    return out
