"""RAM Run: escaping a memory grid as bytes fall into it."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from aoc2024.puzzle import Day

Position = tuple[int, int]


class Solution(Day):
    """Day 18, on a square grid of the given size."""

    def __init__(self, lines: Iterable[str], size: int = 71, limit: int = 1024) -> None:
        super().__init__(lines)
        self.size = size
        self.limit = limit

    def _bytes(self) -> list[Position]:
        fallen = []
        for line in self.lines:
            x, y = (int(value) for value in line.split(","))
            if not (0 <= x < self.size and 0 <= y < self.size):
                raise ValueError(f"byte outside the grid: {line!r}")
            fallen.append((x, y))
        return fallen

    def _shortest(self, corrupted: set[Position]) -> int:
        """Steps from the top-left to the bottom-right corner, or -1."""
        goal = (self.size - 1, self.size - 1)
        distance = {(0, 0): 0}
        queue = deque([(0, 0)])
        while queue:
            x, y = queue.popleft()
            if (x, y) == goal:
                return distance[goal]
            for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                nx, ny = x + dx, y + dy
                if (
                    0 <= nx < self.size
                    and 0 <= ny < self.size
                    and (nx, ny) not in corrupted
                    and (nx, ny) not in distance
                ):
                    distance[(nx, ny)] = distance[(x, y)] + 1
                    queue.append((nx, ny))
        return -1

    def part_one(self) -> int:
        return self._shortest(set(self._bytes()[: self.limit]))

    def part_two(self) -> int:
        """Print the first byte that cuts off the exit; return 0."""
        fallen = self._bytes()
        if self._shortest(set(fallen)) != -1:
            raise ValueError("no byte cuts off the exit")
        low, high = self.limit, len(fallen)
        while low < high:
            middle = (low + high) // 2
            if self._shortest(set(fallen[:middle])) == -1:
                high = middle
            else:
                low = middle + 1
        print(self.lines[low - 1])
        return 0