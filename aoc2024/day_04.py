"""Ceres Search: a word search puzzle."""

from __future__ import annotations

from itertools import product
from typing import Sequence

from aoc2024.puzzle import Day

DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1), (1, 1), (1, -1), (-1, 1), (-1, -1))
_CROSS_ENDS = {"M", "S"}


def search_for(
    word: str, puzzle: Sequence[Sequence[str]], i: int, j: int, direction: tuple[int, int]
) -> bool:
    """True when word is spelled from (i, j) stepping by direction."""
    di, dj = direction
    for letter in word:
        if not (0 <= i < len(puzzle) and 0 <= j < len(puzzle[0])):
            return False
        if puzzle[i][j] != letter:
            return False
        i += di
        j += dj
    return True


class Solution(Day):
    """Day 4."""

    def part_one(self) -> int:
        grid = self.lines
        size = len(grid)
        return sum(
            1
            for i, j, direction in product(range(size), range(size), DIRECTIONS)
            if search_for("XMAS", grid, i, j, direction)
        )

    def part_two(self) -> int:
        grid = self.lines
        inner = range(1, len(grid) - 1)
        return sum(
            1
            for i, j in product(inner, inner)
            if grid[i][j] == "A"
            and {grid[i - 1][j - 1], grid[i + 1][j + 1]} == _CROSS_ENDS
            and {grid[i - 1][j + 1], grid[i + 1][j - 1]} == _CROSS_ENDS
        )