# natural_numbers/parser.py
"""
Parser for natural number literals.

Accepted forms (whitespace allowed anywhere between tokens):

    7                 decimal magnitude
    0  zero  Z        zero
    S(x)  succ(x)     successor of x
    S^3(x)            three successors of x

e.g. "S(S(0))", "succ(zero)", "S^2(5)" all parse.

Successors are applied with succ(), so a literal that steps past the
representation's maximum follows the active overflow policy. A decimal
literal that is itself out of range raises NatRangeError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Type, TypeVar

from natural_numbers.core.nat import Nat
from natural_numbers.core.u32 import U32Nat
from natural_numbers.errors import NatRangeError

N = TypeVar("N", bound=Nat)

_ZERO_WORDS = ("zero", "Z")
_SUCC_WORDS = ("succ", "S")


@dataclass(frozen=True)
class _Cursor:
    s: str
    i: int = 0

    def eof(self) -> bool:
        return self.i >= len(self.s)

    def peek(self) -> str:
        return "" if self.eof() else self.s[self.i]

    def skip_ws(self) -> "_Cursor":
        i = self.i
        while i < len(self.s) and self.s[i].isspace():
            i += 1
        return _Cursor(self.s, i)

    def expect(self, ch: str) -> "_Cursor":
        c = self.skip_ws()
        if c.peek() != ch:
            got = "EOF" if c.eof() else repr(c.peek())
            raise ValueError(f"Expected {ch!r} at pos {c.i}, got {got}")
        return _Cursor(c.s, c.i + 1)

    def word(self) -> Tuple[str, "_Cursor"]:
        """Longest run of [A-Za-z_] at the cursor (may be empty)."""
        j = self.i
        while j < len(self.s) and (self.s[j].isalpha() or self.s[j] == "_"):
            j += 1
        return self.s[self.i:j], _Cursor(self.s, j)

    def digits(self) -> Tuple[int, "_Cursor"]:
        j = self.i
        while j < len(self.s) and self.s[j] in "0123456789":
            j += 1
        if j == self.i:
            got = "EOF" if self.eof() else repr(self.peek())
            raise ValueError(f"Expected digits at pos {self.i}, got {got}")
        return int(self.s[self.i:j]), _Cursor(self.s, j)


def parse_nat(text: str, cls: Type[N] = U32Nat) -> N:  # type: ignore[assignment]
    """
    Parse a natural number literal into a value of cls.
    Raises ValueError on invalid syntax.
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_nat expects str, got {type(text).__name__}")
    c = _Cursor(text).skip_ws()
    if c.eof():
        raise ValueError("Empty natural number literal")
    node, c2 = _parse_expr(c, cls)
    c2 = c2.skip_ws()
    if not c2.eof():
        raise ValueError(f"Trailing junk at pos {c2.i}: {c2.s[c2.i:]!r}")
    return node


def _parse_expr(c: _Cursor, cls: Type[N]) -> Tuple[N, _Cursor]:
    # Successor prefixes are counted iteratively; stack depth stays constant.
    total = 0
    depth = 0
    while True:
        c = c.skip_ws()

        if c.peek().isdigit():
            n, c = c.digits()
            base = cls.wrap(n)
            break

        start = c.i
        w, c = c.word()
        if w in _ZERO_WORDS:
            base = cls.zero()
            break
        if w not in _SUCC_WORDS:
            shown = w or ("EOF" if c.eof() else c.peek())
            raise ValueError(f"Expected number, zero or successor at pos {start}, got {shown!r}")

        times = 1
        c = c.skip_ws()
        if c.peek() == "^":
            c = _Cursor(c.s, c.i + 1).skip_ws()
            times, c = c.digits()

        c = c.expect("(")
        total += times
        depth += 1

    for _ in range(depth):
        c = c.expect(")")
    return succ_times(base, total), c


def succ_times(x: N, k: int) -> N:
    """
    x with succ() applied k times.

    Jumps straight to the target when it is representable; otherwise jumps
    to the maximum and takes the overflowing step with succ(), so the
    active overflow policy decides the outcome. Once that step has wrapped
    to zero, the remaining steps are reduced modulo MAX + 1.
    """
    if k < 0:
        raise ValueError("k must be >= 0")
    cls = type(x)
    while k:
        target = x.value() + k
        try:
            return cls.wrap(target)
        except NatRangeError as e:
            top = cls.wrap(e.maximum)
            k = target - e.maximum - 1
            nxt = top.succ()
            if nxt == top:
                return top
            if nxt.is_zero():
                k %= e.maximum + 1
            x = nxt
    return x
