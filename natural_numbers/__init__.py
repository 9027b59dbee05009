# natural_numbers/__init__.py
"""
natural_numbers public API surface.

    - Capability set: Nat
    - Concrete value: U32Nat, U32_MAX, U32_BITS
    - Errors: NatError, NatRangeError, NatOverflowError
    - Overflow policy: OverflowPolicy, overflow_policy,
                       overflow_policy_override
    - Text: pretty_nat, succ_chain, parse_nat
"""

from __future__ import annotations

from .core.nat import Nat
from .core.u32 import U32Nat, U32_MAX, U32_BITS
from .errors import NatError, NatRangeError, NatOverflowError
from .config import OverflowPolicy, overflow_policy, overflow_policy_override
from .pretty import pretty_nat, succ_chain
from .parser import parse_nat

__all__ = [
    # core
    "Nat",
    "U32Nat",
    "U32_MAX",
    "U32_BITS",

    # errors
    "NatError",
    "NatRangeError",
    "NatOverflowError",

    # config
    "OverflowPolicy",
    "overflow_policy",
    "overflow_policy_override",

    # text
    "pretty_nat",
    "succ_chain",
    "parse_nat",
]
