import pytest
from hypothesis import given
from hypothesis import strategies as st

from ylibc.rand48 import Rand48, jrand48

words = st.lists(st.integers(0, 0xFFFF), min_size=3, max_size=3)
INT32_MIN = -(2**31)


def test_srand48_sets_state():
    gen = Rand48()
    gen.srand48(0x12345678)
    assert gen.state == (0x330E, 0x5678, 0x1234)


def test_unseeded_state_and_first_step():
    assert Rand48().state == (0, 0, 0)
    assert jrand48([0, 0, 0]) == (0, (0xB, 0, 0))


@given(st.integers(0, 2**32 - 1))
def test_srand_matches_srand48(seed):
    a = Rand48()
    b = Rand48()
    a.srand(seed)
    b.srand48(seed)
    assert a.state == b.state
    c = Rand48()
    c.srand(seed + 2**32)
    assert c.state == a.state


@given(words)
def test_jrand48_does_not_mutate_and_stays_in_range(xsubi):
    original = list(xsubi)
    value, state = jrand48(xsubi)
    assert xsubi == original
    assert INT32_MIN <= value < 2**31
    assert all(0 <= w <= 0xFFFF for w in state)
    assert value & 0xFFFFFFFF == state[1] | (state[2] << 16)


@given(st.integers(0, 2**32 - 1))
def test_mrand48_follows_jrand48(seed):
    gen = Rand48(seed)
    for _ in range(5):
        before = gen.state
        value = gen.mrand48()
        assert (value, gen.state) == jrand48(before)


@given(st.integers(0, 2**32 - 1))
def test_same_seed_same_sequence(seed):
    a = Rand48(seed)
    b = Rand48(seed)
    assert [a.mrand48() for _ in range(10)] == [b.mrand48() for _ in range(10)]


@given(st.integers(0, 2**32 - 1))
def test_rand_is_magnitude_of_mrand48(seed):
    signed = Rand48(seed)
    magnitude = Rand48(seed)
    for _ in range(20):
        m = signed.mrand48()
        r = magnitude.rand()
        assert r == abs(m) or (m == INT32_MIN and r == INT32_MIN)


@pytest.mark.parametrize("bad", [[], [1, 2], [1, 2, 3, 4]])
def test_jrand48_rejects_wrong_length(bad):
    with pytest.raises(ValueError):
        jrand48(bad)