from aoc2024.day_08 import Point, Solution

SAMPLE = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............"""


def test_part_one_sample():
    assert Solution.from_sample(SAMPLE).part_one() == 14


def test_part_two_sample():
    assert Solution.from_sample(SAMPLE).part_two() == 34


def test_resonate_inside():
    assert Point(1, 1).resonate(Point(2, 3), (10, 10)) == Point(3, 5)


def test_resonate_all():
    assert Point(0, 0).resonate_all(Point(1, 1), (3, 3)) == [Point(1, 1), Point(2, 2)]