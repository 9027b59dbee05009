# natural_numbers/demo.py
"""
Smallest possible demonstration: 0 + 1 == 1.

    python3 -m natural_numbers.demo
"""

from __future__ import annotations

from natural_numbers.core.u32 import U32Nat


def main() -> int:
    zero = U32Nat.zero()
    one = U32Nat.zero().succ()
    assert zero.add(one) == one
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
