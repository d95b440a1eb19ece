"""Number puzzles: digit tricks, binary conversions, bit operations and small sequences."""

from __future__ import annotations

import math
from functools import lru_cache

_SIEVE_LIMIT = 200_000
_MAX_PRIMES = 15_000


def is_armstrong(n: int) -> bool:
    """Return True if ``n`` equals the sum of its digits raised to the digit count."""
    if n < 0:
        return False
    digits = str(n)
    return sum(int(d) ** len(digits) for d in digits) == n


def binary_to_decimal(digits: int) -> int:
    """Read the decimal digits of ``digits`` as a base-2 number.

    Non-positive input yields 0.
    """
    value = 0
    weight = 1
    while digits > 0:
        digits, last = divmod(digits, 10)
        value += last * weight
        weight *= 2
    return value


def decimal_to_binary(n: int) -> int:
    """Return an integer whose decimal digits spell ``n`` in base 2.

    Non-positive input yields 0.
    """
    result = 0
    weight = 1
    while n > 0:
        n, bit = divmod(n, 2)
        result += bit * weight
        weight *= 10
    return result


def add_binary(a: int, b: int) -> int:
    """Add two numbers written as binary digits and return the binary-digit sum."""
    return decimal_to_binary(binary_to_decimal(a) + binary_to_decimal(b))


def is_even(n: int) -> bool:
    """Return True if the lowest bit of ``n`` is clear."""
    return n & 1 == 0


def get_bit(num: int, i: int) -> int:
    """Return bit ``i`` of ``num`` as 0 or 1."""
    shifted = num >> i
    return shifted & 1


def set_bit(num: int, i: int) -> int:
    """Return ``num`` with bit ``i`` set."""
    return num | (1 << i)


def clear_bit(num: int, i: int) -> int:
    """Return ``num`` with bit ``i`` cleared."""
    return num & ~(1 << i)


def update_bit(num: int, i: int, value: int) -> int:
    """Return ``num`` with bit ``i`` replaced by ``value``."""
    return clear_bit(num, i) | (value << i)


def clear_last_bits(num: int, i: int) -> int:
    """Return ``num`` with its lowest ``i`` bits cleared."""
    return num & (~0 << i)


def is_power_of_two(num: int) -> bool:
    """Return True if ``num & (num - 1)`` is zero; this holds for 0 as well."""
    return num & (num - 1) == 0


def count_set_bits(num: int) -> int:
    """Count the one bits of a positive number; non-positive input yields 0."""
    return bin(num).count("1") if num > 0 else 0


def fast_power(base: int, exponent: int) -> int:
    """Raise ``base`` to ``exponent`` by repeated squaring; exponents below 1 give 1."""
    result = 1
    while exponent > 0:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def friend_pairings(n: int) -> int:
    """Count pairings by the recurrence f(n) = f(n-1) + f(n-2), f(1)=1, f(2)=2."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n <= 2:
        return n
    previous, current = 1, 2
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def tiling_ways(n: int) -> int:
    """Count the ways to tile a 2 x n board with 2 x 1 tiles."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def opposite_task(n: int) -> tuple[int, int]:
    """Split ``n`` into two numbers, the first being 10 when ``n`` exceeds 10, else 0."""
    return (10, n - 10) if n > 10 else (0, n)


def multifactorial(n: int, step: int) -> int:
    """Return n * (n - step) * (n - 2*step) * ... over the positive terms."""
    if step < 1:
        raise ValueError("step must be at least 1")
    return math.prod(range(n, 0, -step))


@lru_cache(maxsize=1)
def _primes() -> tuple[int, ...]:
    composite = bytearray(_SIEVE_LIMIT)
    found = [2]
    for i in range(3, _SIEVE_LIMIT, 2):
        if not composite[i]:
            found.append(i)
            if i * i < _SIEVE_LIMIT:
                composite[i * i :: 2 * i] = b"\x01" * len(range(i * i, _SIEVE_LIMIT, 2 * i))
        if len(found) >= _MAX_PRIMES:
            break
    return tuple(found)


def nth_prime(n: int) -> int:
    """Return the ``n``-th prime, counting from 1, for n up to 15000."""
    primes = _primes()
    if not 1 <= n <= len(primes):
        raise ValueError(f"n must be between 1 and {len(primes)}")
    return primes[n - 1]


def is_triangular_position(n: int) -> bool:
    """Return True if position ``n`` of 110100100010... holds a one."""
    value = 8 * n - 7
    if value < 0:
        return False
    root = math.isqrt(value)
    return root * root == value