import pytest

from aoc2024.day_11 import Solution, blink


def test_part_two_empty_input():
    assert Solution.from_sample("").part_two() == 0


def test_no_blink_keeps_one_stone():
    assert blink(12345, 0) == 1


@pytest.mark.parametrize(
    ("stone", "expected"),
    [(0, 1), (1, 1), (10, 2), (99, 2), (999, 1), (1000, 2)],
)
def test_single_blink(stone, expected):
    assert blink(stone, 1) == expected


def test_six_blinks_of_sample():
    assert blink(125, 6) + blink(17, 6) == 22


def test_part_two_grows_beyond_part_one():
    solution = Solution.from_sample("125 17")
    assert solution.part_two() > solution.part_one()