"""Hoof It: counting hiking trails on a topographic map."""

from __future__ import annotations

from typing import Iterator

from aoc2024.puzzle import Day

Grid = list[list[int]]
_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _parse(lines: list[str]) -> Grid:
    return [[int(c) for c in line] for line in lines]


def _uphill(grid: Grid, i: int, j: int) -> Iterator[tuple[int, int]]:
    height = grid[i][j] + 1
    for di, dj in _DIRECTIONS:
        ni, nj = i + di, j + dj
        if 0 <= ni < len(grid) and 0 <= nj < len(grid[0]) and grid[ni][nj] == height:
            yield ni, nj


def _summits(grid: Grid, i: int, j: int) -> set[tuple[int, int]]:
    if grid[i][j] == 9:
        return {(i, j)}
    reached: set[tuple[int, int]] = set()
    for ni, nj in _uphill(grid, i, j):
        reached |= _summits(grid, ni, nj)
    return reached


def _trails(grid: Grid, i: int, j: int) -> int:
    if grid[i][j] == 9:
        return 1
    return sum(_trails(grid, ni, nj) for ni, nj in _uphill(grid, i, j))


def _trailheads(grid: Grid) -> Iterator[tuple[int, int]]:
    for i, row in enumerate(grid):
        for j, height in enumerate(row):
            if height == 0:
                yield i, j


class Solution(Day):
    """Day 10."""

    def part_one(self) -> int:
        grid = _parse(self.lines)
        return sum(len(_summits(grid, i, j)) for i, j in _trailheads(grid))

    def part_two(self) -> int:
        grid = _parse(self.lines)
        return sum(_trails(grid, i, j) for i, j in _trailheads(grid))