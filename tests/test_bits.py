import pytest
from hypothesis import given
from hypothesis import strategies as st

from scenic_local.bits import ctz_u32, haszero_u32, ilog2_u32, roundup_pow2_u32

u32_nonzero = st.integers(min_value=1, max_value=0xFFFFFFFF)


@pytest.mark.parametrize("k", range(32))
def test_ilog2_of_power_of_two(k):
    assert ilog2_u32(1 << k) == k


@pytest.mark.parametrize("k", range(32))
def test_ctz_of_power_of_two(k):
    assert ctz_u32(1 << k) == k


@given(u32_nonzero)
def test_ilog2_bounds(value):
    n = ilog2_u32(value)
    assert (1 << n) <= value < (1 << (n + 1))


@given(u32_nonzero)
def test_ctz_invariant(value):
    n = ctz_u32(value)
    assert (value >> n) & 1 == 1
    assert value & ((1 << n) - 1) == 0


@pytest.mark.parametrize("func", [ilog2_u32, ctz_u32])
def test_zero_is_rejected(func):
    with pytest.raises(ValueError):
        func(0)


@pytest.mark.parametrize("func", [ilog2_u32, ctz_u32, roundup_pow2_u32, haszero_u32])
@pytest.mark.parametrize("value", [-1, 1 << 32])
def test_out_of_range_is_rejected(func, value):
    with pytest.raises(ValueError):
        func(value)


@given(st.integers(min_value=1, max_value=1 << 31))
def test_roundup_pow2(value):
    r = roundup_pow2_u32(value)
    assert r & (r - 1) == 0
    assert value <= r < 2 * value or r == value


@pytest.mark.parametrize("k", range(32))
def test_roundup_of_power_is_identity(k):
    assert roundup_pow2_u32(1 << k) == 1 << k


def test_roundup_wraps_above_top_bit():
    assert roundup_pow2_u32((1 << 31) + 1) == 0


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_haszero_matches_bytes(value):
    assert haszero_u32(value) == (0 in value.to_bytes(4, "little"))


def test_haszero_pinned():
    assert haszero_u32(0x01010101) is False
    assert haszero_u32(0x01000101) is True