# natural_numbers/config.py
"""
Overflow policy configuration.

The policy decides what succ() does at a representation's maximum:

  raise     -> NatOverflowError (default)
  wrap      -> back to zero (modular arithmetic)
  saturate  -> stay at the maximum

Select it process-wide via:
  NAT_OVERFLOW=wrap

or for a block of code via overflow_policy_override(). The override wins
over the environment and is scoped per thread / task.
"""

from __future__ import annotations

import contextlib
import contextvars
import enum
import os
from typing import Iterator, Optional, Union

ENV_OVERFLOW = "NAT_OVERFLOW"


class OverflowPolicy(str, enum.Enum):
    RAISE = "raise"
    WRAP = "wrap"
    SATURATE = "saturate"


DEFAULT_OVERFLOW_POLICY = OverflowPolicy.RAISE

_override: contextvars.ContextVar[Optional[OverflowPolicy]] = contextvars.ContextVar(
    "nat_overflow_override", default=None
)


def coerce_policy(policy: Union[str, OverflowPolicy], *, source: str = "policy") -> OverflowPolicy:
    """Normalize a policy name ("Wrap ", "saturate", ...) to an OverflowPolicy."""
    if isinstance(policy, OverflowPolicy):
        return policy
    if not isinstance(policy, str):
        raise TypeError(f"{source} must be str, got {type(policy).__name__}")
    v = policy.strip().lower()
    try:
        return OverflowPolicy(v)
    except ValueError:
        allowed = ", ".join(p.value for p in OverflowPolicy)
        raise ValueError(f"{source}: unknown overflow policy {policy!r} (expected one of: {allowed})") from None


def overflow_policy() -> OverflowPolicy:
    """
    Current overflow policy.

    Priority:
      1) active overflow_policy_override()
      2) NAT_OVERFLOW environment variable (read on every call)
      3) DEFAULT_OVERFLOW_POLICY
    """
    forced = _override.get()
    if forced is not None:
        return forced
    raw = os.getenv(ENV_OVERFLOW, "").strip()
    if not raw:
        return DEFAULT_OVERFLOW_POLICY
    return coerce_policy(raw, source=ENV_OVERFLOW)


@contextlib.contextmanager
def overflow_policy_override(policy: Union[str, OverflowPolicy]) -> Iterator[OverflowPolicy]:
    """Force an overflow policy for the enclosed block."""
    p = coerce_policy(policy)
    token = _override.set(p)
    try:
        yield p
    finally:
        _override.reset(token)
