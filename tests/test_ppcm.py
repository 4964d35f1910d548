import pytest

from aoc2024.ppcm import divisors, is_prime, ppcm


def test_divisors_of_prime():
    assert divisors(4051)[0] == 4051


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97, 4051])
def test_prime_is_its_own_divisor(n):
    assert is_prime(n)
    assert divisors(n) == [n]


@pytest.mark.parametrize("n", [4, 6, 9, 15, 100, 4052])
def test_composite_not_prime(n):
    assert not is_prime(n)


@pytest.mark.parametrize("n", [6, 12, 30, 100, 4052])
def test_divisors_are_prime_and_divide(n):
    found = divisors(n)
    assert found
    for d in found:
        assert n % d == 0
        assert is_prime(d)


def test_divisors_of_twelve():
    assert divisors(12) == [2, 3]


def test_ppcm_empty_is_one():
    assert ppcm([]) == 1


@pytest.mark.parametrize("numbers", [[2, 3], [6, 10, 15], [7, 4051], [30, 42]])
def test_ppcm_divisible_by_every_prime_divisor(numbers):
    result = ppcm(numbers)
    for n in numbers:
        for d in divisors(n):
            assert result % d == 0


def test_ppcm_of_distinct_primes_is_product():
    assert ppcm([7, 4051]) == 7 * 4051