"""Garden Groups: fencing regions of garden plots."""

from __future__ import annotations

from typing import Iterator, Sequence

from aoc2024.puzzle import Day

Position = tuple[int, int]
_NEIGHBOURS = ((-1, 0), (0, -1), (1, 0), (0, 1))
_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _regions(grid: Sequence[str]) -> Iterator[set[Position]]:
    """Yield the sets of same-letter cells connected side to side."""
    seen: set[Position] = set()
    for i, row in enumerate(grid):
        for j, plant in enumerate(row):
            if (i, j) in seen:
                continue
            region = {(i, j)}
            frontier = [(i, j)]
            while frontier:
                ci, cj = frontier.pop()
                for di, dj in _NEIGHBOURS:
                    ni, nj = ci + di, cj + dj
                    if (
                        0 <= ni < len(grid)
                        and 0 <= nj < len(grid[ni])
                        and (ni, nj) not in region
                        and grid[ni][nj] == plant
                    ):
                        region.add((ni, nj))
                        frontier.append((ni, nj))
            seen |= region
            yield region


def _perimeter(region: set[Position]) -> int:
    return sum(
        (i + di, j + dj) not in region for i, j in region for di, dj in _NEIGHBOURS
    )


def _sides(region: set[Position]) -> int:
    """Count straight fence sides as the number of region corners."""
    corners = 0
    for i, j in region:
        for di, dj in _DIAGONALS:
            vertical = (i + di, j) in region
            horizontal = (i, j + dj) in region
            diagonal = (i + di, j + dj) in region
            if not vertical and not horizontal:
                corners += 1
            elif vertical and horizontal and not diagonal:
                corners += 1
    return corners


class Solution(Day):
    """Day 12."""

    def part_one(self) -> int:
        return sum(len(region) * _perimeter(region) for region in _regions(self.lines))

    def part_two(self) -> int:
        return sum(len(region) * _sides(region) for region in _regions(self.lines))