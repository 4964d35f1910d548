import pytest

from aoc2024.day_07 import Solution, is_valid, is_valid_with_concat

SAMPLE = """\
190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20"""


def test_part_one_sample():
    assert Solution.from_sample(SAMPLE).part_one() == 3749


def test_part_two_sample():
    assert Solution.from_sample(SAMPLE).part_two() == 11387


@pytest.mark.parametrize(
    "test, numbers, expected",
    [
        (190, [10, 19], True),
        (3267, [81, 40, 27], True),
        (83, [17, 5], False),
        (156, [15, 6], False),
        (292, [11, 6, 16, 20], True),
    ],
)
def test_is_valid(test, numbers, expected):
    assert is_valid(test, numbers) is expected


@pytest.mark.parametrize(
    "test, numbers, expected",
    [
        (156, [15, 6], True),
        (7290, [6, 8, 6, 15], True),
        (192, [17, 8, 14], True),
        (83, [17, 5], False),
    ],
)
def test_is_valid_with_concat(test, numbers, expected):
    assert is_valid_with_concat(test, numbers) is expected


def test_zero_divisor_is_rejected():
    assert is_valid(5, [0]) is False