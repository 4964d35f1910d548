"""Prime tests, prime divisors and least common multiples."""

from __future__ import annotations

from math import isqrt
from typing import Iterable


def is_prime(n: int) -> bool:
    """Return True when no integer in [2, n) divides n."""
    return not any(n % i == 0 for i in range(2, isqrt(n) + 1)) if n >= 2 else True


def _primes_up_to(n: int) -> list[int]:
    primes = [2]
    if n < 3:
        return primes
    sieve = bytearray([1]) * (n + 1)
    for p in range(2, isqrt(n) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytearray(len(range(p * p, n + 1, p)))
    primes.extend(p for p in range(3, n + 1) if sieve[p])
    return primes


def divisors(n: int) -> list[int]:
    """Return the prime divisors of n, or [n] when n is itself prime."""
    primes = _primes_up_to(n)
    if n in primes:
        return [n]
    return [p for p in primes if n % p == 0]


def ppcm(numbers: Iterable[int]) -> int:
    """Multiply together every prime divisor not already dividing the result."""
    result = 1
    for number in numbers:
        for divisor in divisors(number):
            if result % divisor != 0:
                result *= divisor
    return result