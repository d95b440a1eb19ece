import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.numbers import (
    add_binary,
    binary_to_decimal,
    clear_bit,
    clear_last_bits,
    count_set_bits,
    decimal_to_binary,
    fast_power,
    friend_pairings,
    get_bit,
    is_armstrong,
    is_even,
    is_power_of_two,
    is_triangular_position,
    multifactorial,
    nth_prime,
    opposite_task,
    set_bit,
    tiling_ways,
    update_bit,
)


def test_single_digits_are_armstrong():
    assert all(is_armstrong(d) for d in range(10))


def test_armstrong_rejects_negative_and_two_digit_numbers():
    assert not is_armstrong(-5)
    assert not any(is_armstrong(n) for n in range(10, 100))


def test_armstrong_known_value():
    assert is_armstrong(153) is True
    assert is_armstrong(154) is False


def test_binary_conversions_pinned():
    assert binary_to_decimal(111111) == 63
    assert decimal_to_binary(63) == 111111


@given(st.integers(min_value=1, max_value=10**6))
def test_decimal_to_binary_matches_bin(n):
    assert decimal_to_binary(n) == int(bin(n)[2:])


@given(st.integers(min_value=0, max_value=10**6))
def test_binary_round_trip(n):
    assert binary_to_decimal(decimal_to_binary(n)) == n


def test_non_positive_conversions_are_zero():
    assert binary_to_decimal(-101) == 0
    assert decimal_to_binary(0) == 0


@given(st.integers(min_value=0, max_value=5000), st.integers(min_value=0, max_value=5000))
def test_add_binary_adds(a, b):
    total = add_binary(decimal_to_binary(a), decimal_to_binary(b))
    assert binary_to_decimal(total) == a + b


@given(st.integers(min_value=-10**6, max_value=10**6))
def test_is_even(n):
    assert is_even(n) == (n % 2 == 0)


@given(st.integers(min_value=0, max_value=2**30), st.integers(min_value=0, max_value=30))
def test_set_and_clear_bit(n, i):
    assert get_bit(set_bit(n, i), i) == 1
    assert get_bit(clear_bit(n, i), i) == 0
    assert clear_bit(set_bit(n, i), i) == clear_bit(n, i)
    assert get_bit(n, i) == (n >> i) & 1


def test_update_bit_pinned():
    assert update_bit(7, 3, 1) == 15


@given(
    st.integers(min_value=0, max_value=2**30),
    st.integers(min_value=0, max_value=30),
    st.sampled_from([0, 1]),
)
def test_update_bit_sets_value(n, i, value):
    updated = update_bit(n, i, value)
    assert get_bit(updated, i) == value
    assert clear_bit(updated, i) == clear_bit(n, i)


@given(st.integers(min_value=0, max_value=2**30), st.integers(min_value=0, max_value=30))
def test_clear_last_bits(n, i):
    cleared = clear_last_bits(n, i)
    assert cleared % (1 << i) == 0
    assert cleared >> i == n >> i


def test_power_of_two():
    assert all(is_power_of_two(1 << k) for k in range(40))
    assert not is_power_of_two(3)
    assert is_power_of_two(0)


@given(st.integers(min_value=0, max_value=2**40))
def test_count_set_bits(n):
    assert count_set_bits(n) == bin(n).count("1")


def test_count_set_bits_negative_is_zero():
    assert count_set_bits(-7) == 0


@given(st.integers(min_value=-20, max_value=20), st.integers(min_value=0, max_value=30))
def test_fast_power_matches_pow(base, exponent):
    assert fast_power(base, exponent) == base**exponent


def test_friend_pairings_recurrence():
    assert friend_pairings(1) == 1
    assert friend_pairings(2) == 2
    for n in range(3, 40):
        assert friend_pairings(n) == friend_pairings(n - 1) + friend_pairings(n - 2)


def test_friend_pairings_rejects_zero():
    with pytest.raises(ValueError):
        friend_pairings(0)


def test_tiling_ways_recurrence():
    assert tiling_ways(0) == 1
    assert tiling_ways(1) == 1
    assert tiling_ways(2) == 2
    for n in range(3, 40):
        assert tiling_ways(n) == tiling_ways(n - 1) + tiling_ways(n - 2)
        assert tiling_ways(n) == friend_pairings(n)


def test_tiling_ways_rejects_negative():
    with pytest.raises(ValueError):
        tiling_ways(-1)


@given(st.integers(min_value=-100, max_value=100))
def test_opposite_task(n):
    first, second = opposite_task(n)
    assert first + second == n
    assert first == (10 if n > 10 else 0)


@given(st.integers(min_value=0, max_value=60))
def test_multifactorial_step_one_is_factorial(n):
    assert multifactorial(n, 1) == math.factorial(n)


def test_multifactorial_step_larger_than_n():
    assert multifactorial(5, 7) == 5


def test_multifactorial_rejects_zero_step():
    with pytest.raises(ValueError):
        multifactorial(5, 0)


def _is_prime(n):
    return n > 1 and all(n % d for d in range(2, math.isqrt(n) + 1))


def test_nth_prime_sequence():
    assert nth_prime(1) == 2
    primes = [nth_prime(k) for k in range(1, 300)]
    assert primes == sorted(set(primes))
    assert all(_is_prime(p) for p in primes)
    assert [p for p in range(2, primes[-1] + 1) if _is_prime(p)] == primes


def test_nth_prime_upper_limit():
    last = nth_prime(15000)
    assert last < 200000
    assert _is_prime(last)


@pytest.mark.parametrize("n", [0, -1, 15001])
def test_nth_prime_out_of_range(n):
    with pytest.raises(ValueError):
        nth_prime(n)


def test_triangular_positions():
    positions = {1 + k * (k - 1) // 2 for k in range(1, 200)}
    limit = max(positions)
    for n in range(1, limit + 1):
        assert is_triangular_position(n) == (n in positions)


def test_triangular_position_non_positive():
    assert not is_triangular_position(0)
    assert not is_triangular_position(-3)