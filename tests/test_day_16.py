from aoc2024.day_16 import Solution

FIRST = """###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############"""

SECOND = """#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################"""

CORRIDOR = "#####\n#S.E#\n#####"
CORNER = "#####\n#..E#\n#S###\n#####"


def test_part_one_sample():
    assert Solution.from_sample(FIRST).part_one() == 7036


def test_part_two_sample():
    assert Solution.from_sample(SECOND).part_two() == 64


def test_part_one_straight_corridor():
    assert Solution.from_sample(CORRIDOR).part_one() == 2


def test_part_one_counts_turns():
    assert Solution.from_sample(CORNER).part_one() == 2003


def test_part_one_without_end_is_zero():
    assert Solution.from_sample("###\n#S#\n###").part_one() == 0


def test_part_two_straight_corridor_tiles():
    assert Solution.from_sample(CORRIDOR).part_two() == 3


def test_part_two_corner_tiles():
    assert Solution.from_sample(CORNER).part_two() == 4