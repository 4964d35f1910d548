from aoc2024.day_12 import Solution

LARGE = """
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE"""

SMALL = """AAAA
BBCD
BBCC
EEEC"""


def _solution(text):
    return Solution([line for line in text.splitlines() if line])


def test_part_one_sample():
    assert _solution(LARGE).part_one() == 1930


def test_part_two_sample():
    assert _solution(LARGE).part_two() == 1206


def test_small_map_perimeter_price():
    assert _solution(SMALL).part_one() == 140


def test_small_map_side_price():
    assert _solution(SMALL).part_two() == 80


def test_single_row_region():
    solution = Solution(["AA"])
    assert solution.part_one() == 12
    assert solution.part_two() == 8


def test_enclosed_regions():
    solution = Solution(["OOOOO", "OXOXO", "OOOOO", "OXOXO", "OOOOO"])
    assert solution.part_one() == 772