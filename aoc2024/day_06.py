"""Guard Gallivant: following a patrolling guard around a lab."""

from __future__ import annotations

from typing import Optional, Sequence

from aoc2024.puzzle import Day

Position = tuple[int, int]

_STEP = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_TURN = {"^": ">", ">": "v", "v": "<", "<": "^"}


def _find_guard(grid: Sequence[str]) -> tuple[Position, str]:
    guard: Position = (0, 0)
    facing = "^"
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell not in ".#":
                guard = (i, j)
                facing = cell
    return guard, facing


def _walls(grid: Sequence[str]) -> set[Position]:
    return {(i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == "#"}


def _walk(
    walls: set[Position],
    height: int,
    width: int,
    start: Position,
    facing: str,
    obstacle: Optional[Position] = None,
) -> tuple[bool, set[Position]]:
    """Walk the guard; return whether it loops and the positions it stood on."""
    seen: set[tuple[int, int, str]] = set()
    visited: set[Position] = set()
    i, j = start
    while 0 <= i < height and 0 <= j < width:
        di, dj = _STEP[facing]
        ni, nj = i + di, j + dj
        if 0 <= ni < height and 0 <= nj < width and (
            (ni, nj) in walls or (ni, nj) == obstacle
        ):
            facing = _TURN[facing]
            continue
        state = (i, j, facing)
        if state in seen:
            return True, visited
        seen.add(state)
        visited.add((i, j))
        i, j = ni, nj
    return False, visited


class Solution(Day):
    """Day 6."""

    def part_one(self) -> int:
        grid = self.lines
        start, facing = _find_guard(grid)
        _, visited = _walk(_walls(grid), len(grid), len(grid[0]), start, facing)
        return len(visited)

    def part_two(self) -> int:
        grid = self.lines
        walls = _walls(grid)
        height, width = len(grid), len(grid[0])
        start, facing = _find_guard(grid)
        loops, path = _walk(walls, height, width, start, facing)

        count = 0
        for i, row in enumerate(grid):
            for j, cell in enumerate(row):
                if cell == "#":
                    continue
                if (i, j) not in path:
                    # An obstacle the guard never reaches leaves the walk unchanged.
                    count += loops
                elif _walk(walls, height, width, start, facing, (i, j))[0]:
                    count += 1
        return count