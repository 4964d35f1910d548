import pytest

from aoc2024.day_10 import Solution

SAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732"""


def test_part_one_sample():
    assert Solution.from_sample(SAMPLE).part_one() == 36


def test_part_two_sample():
    assert Solution.from_sample(SAMPLE).part_two() == 81


def test_single_straight_trail():
    solution = Solution(["0123456789"])
    assert solution.part_one() == 1
    assert solution.part_two() == 1


def test_no_trailhead():
    assert Solution(["123", "456"]).part_one() == 0


def test_non_digit_rejected():
    with pytest.raises(ValueError):
        Solution(["01.3"]).part_one()