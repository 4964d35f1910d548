"""Race Condition: cheating through walls on a racetrack."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

from aoc2024.puzzle import Day

Position = tuple[int, int]
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _distances(grid: Sequence[str]) -> dict[Position, int]:
    """Steps from the start to every reachable track cell."""
    starts = [(i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == "S"]
    distance = {start: 0 for start in starts}
    queue = deque(starts)
    while queue:
        i, j = queue.popleft()
        for di, dj in _STEPS:
            ni, nj = i + di, j + dj
            if (
                0 <= ni < len(grid)
                and 0 <= nj < len(grid[ni])
                and grid[ni][nj] != "#"
                and (ni, nj) not in distance
            ):
                distance[(ni, nj)] = distance[(i, j)] + 1
                queue.append((ni, nj))
    return distance


class Solution(Day):
    """Day 20, counting cheats that save at least min_saving steps."""

    def __init__(self, lines: Iterable[str], min_saving: int = 100) -> None:
        super().__init__(lines)
        self.min_saving = min_saving

    def part_one(self) -> int:
        """Count inner wall cells whose removal joins track saving enough steps."""
        grid = self.lines
        distance = _distances(grid)

        def saves(first: Position, second: Position) -> bool:
            if first not in distance or second not in distance:
                return False
            return abs(distance[first] - distance[second]) - 2 >= self.min_saving

        count = 0
        for i in range(1, len(grid) - 1):
            for j in range(1, len(grid[i]) - 1):
                if grid[i][j] != "#":
                    continue
                if saves((i - 1, j), (i + 1, j)) or saves((i, j - 1), (i, j + 1)):
                    count += 1
        return count

    def part_two(self) -> int:
        """Count cheats of up to 20 steps that save enough steps."""
        radius = 20
        offsets = [
            (di, dj, abs(di) + abs(dj))
            for di in range(-radius, radius + 1)
            for dj in range(-radius, radius + 1)
            if 0 < abs(di) + abs(dj) <= radius
        ]
        distance = _distances(self.lines)
        count = 0
        for (i, j), here in distance.items():
            for di, dj, length in offsets:
                there = distance.get((i + di, j + dj))
                if there is not None and there - here - length >= self.min_saving:
                    count += 1
        return count