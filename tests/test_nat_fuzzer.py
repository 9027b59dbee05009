"""
Property-based tests for the Nat laws using Hypothesis.

add() costs O(other) successor steps, so the right-hand operand is kept
small; the left-hand operand ranges over the whole representation where
the property allows it.

Run with: pytest tests/test_nat_fuzzer.py --hypothesis-show-statistics -v
"""

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis required for fuzzer tests")

from hypothesis import given, strategies as st

from natural_numbers import NatOverflowError, U32Nat, U32_MAX, overflow_policy_override


# =============================================================================
# Strategies
# =============================================================================

magnitudes = st.integers(min_value=0, max_value=U32_MAX)
small = st.integers(min_value=0, max_value=300)


@st.composite
def addends(draw):
    """(a, b) with b small and a + b representable."""
    b = draw(small)
    a = draw(st.integers(min_value=0, max_value=U32_MAX - b))
    return a, b


# =============================================================================
# Primitive laws
# =============================================================================

@given(magnitudes)
def test_value_wrap_roundtrip(n: int) -> None:
    assert U32Nat.wrap(n).value() == n


@given(st.integers(min_value=1, max_value=U32_MAX))
def test_nonzero_is_not_zero(n: int) -> None:
    assert not U32Nat.wrap(n).is_zero()


@given(st.integers(min_value=0, max_value=U32_MAX - 1))
def test_succ_adds_one(n: int) -> None:
    assert U32Nat.wrap(n).succ().value() == n + 1


@given(st.integers(min_value=1, max_value=U32_MAX))
def test_pred_undoes_succ(n: int) -> None:
    prev = U32Nat.wrap(n - 1)
    assert prev.succ().pred() == prev


@given(st.integers(min_value=1, max_value=U32_MAX))
def test_succ_undoes_pred(n: int) -> None:
    v = U32Nat.wrap(n)
    p = v.pred()
    assert p is not None
    assert p.succ() == v


@given(magnitudes, magnitudes)
def test_equality_is_structural(a: int, b: int) -> None:
    assert (U32Nat.wrap(a) == U32Nat.wrap(b)) == (a == b)


# =============================================================================
# Addition laws
# =============================================================================

@given(addends())
def test_add_matches_native_sum(ab) -> None:
    a, b = ab
    assert U32Nat.wrap(a).add(U32Nat.wrap(b)).value() == a + b


@given(magnitudes)
def test_add_identity(a: int) -> None:
    v = U32Nat.wrap(a)
    assert v.add(U32Nat.zero()) == v


@given(small)
def test_add_left_identity(b: int) -> None:
    v = U32Nat.wrap(b)
    assert U32Nat.zero().add(v) == v


@given(small, small)
def test_add_commutative(a: int, b: int) -> None:
    x, y = U32Nat.wrap(a), U32Nat.wrap(b)
    assert x.add(y) == y.add(x)


@given(st.integers(min_value=0, max_value=U32_MAX - 600), small, small)
def test_add_associative(a: int, b: int, c: int) -> None:
    # a only ever appears on the left, so it can range over the whole type
    x, y, z = U32Nat.wrap(a), U32Nat.wrap(b), U32Nat.wrap(c)
    assert x.add(y).add(z) == x.add(y.add(z))


@given(st.integers(min_value=U32_MAX - 300, max_value=U32_MAX), small)
def test_add_near_max_matches_native_sum_or_raises(a: int, b: int) -> None:
    x, y = U32Nat.wrap(a), U32Nat.wrap(b)
    if a + b <= U32_MAX:
        assert x.add(y).value() == a + b
    else:
        with pytest.raises(NatOverflowError):
            x.add(y)


@given(small, st.integers(min_value=0, max_value=U32_MAX - 301))
def test_add_succ_law(b: int, a: int) -> None:
    # a + S(b) = S(a + b)
    x, y = U32Nat.wrap(a), U32Nat.wrap(b)
    assert x.add(y.succ()) == x.add(y).succ()



# =============================================================================
# Laws over a whole (narrow) representation, wrap and saturate policies
# =============================================================================

class U8Nat(U32Nat):
    __slots__ = ()

    BITS = 8
    MAX = 255


u8 = st.integers(min_value=0, max_value=U8Nat.MAX)
wrapping_policies = st.sampled_from(["wrap", "saturate"])


@given(u8, u8, wrapping_policies)
def test_u8_add_commutative(a: int, b: int, policy: str) -> None:
    x, y = U8Nat.wrap(a), U8Nat.wrap(b)
    with overflow_policy_override(policy):
        assert x.add(y) == y.add(x)


@given(u8, u8, u8, wrapping_policies)
def test_u8_add_associative(a: int, b: int, c: int, policy: str) -> None:
    x, y, z = U8Nat.wrap(a), U8Nat.wrap(b), U8Nat.wrap(c)
    with overflow_policy_override(policy):
        assert x.add(y).add(z) == x.add(y.add(z))


@given(u8, u8)
def test_u8_add_policies_match_native(a: int, b: int) -> None:
    x, y = U8Nat.wrap(a), U8Nat.wrap(b)
    with overflow_policy_override("wrap"):
        assert x.add(y).value() == (a + b) % (U8Nat.MAX + 1)
    with overflow_policy_override("saturate"):
        assert x.add(y).value() == min(a + b, U8Nat.MAX)
