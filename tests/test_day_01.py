from aoc2024.day_01 import Solution

SAMPLE = """\
3   4
4   3
2   5
1   3
3   9
3   3"""


def test_part_one_sample():
    assert Solution.from_sample(SAMPLE).part_one() == 11


def test_part_two_empty():
    assert Solution.from_sample("").part_two() == 0


def test_part_two_sample():
    assert Solution.from_sample(SAMPLE).part_two() == 31


def test_part_one_empty():
    assert Solution.from_sample("").part_one() == 0