"""Reindeer Maze: cheapest paths when turning costs a thousand points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from aoc2024.puzzle import Day

Position = tuple[int, int]

_ORDER = "^>v<"
_STEPS = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_BACK = {"^": (1, 0), ">": (0, -1), "v": (-1, 0), "<": (0, 1)}


def _cells(grid: Sequence[str], mark: str) -> Iterator[Position]:
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == mark:
                yield i, j


@dataclass
class _Arrival:
    """Lowest score reaching a cell, with the directions that reach it."""

    dirs: list[str]
    score: int

    def cost_to(self, direction: str) -> int:
        return self.score + (1 if direction in self.dirs else 1001)


@dataclass
class _Facing:
    """Lowest score to stand on a cell facing each direction."""

    scores: list[int]
    on_path: bool = field(default=False)

    @classmethod
    def arriving(cls, direction: str, score: int) -> "_Facing":
        scores = [score + 1000] * len(_ORDER)
        scores[_ORDER.index(direction)] = score
        return cls(scores)

    def score(self, direction: str) -> int:
        return self.scores[_ORDER.index(direction)]

    def best(self) -> list[str]:
        lowest = min(self.scores)
        return [d for d in _ORDER if self.score(d) == lowest]

    def relax(self, direction: str, score: int) -> bool:
        changed = False
        for index, d in enumerate(_ORDER):
            if d == direction and self.scores[index] > score:
                self.scores[index] = score
                changed = True
            elif self.scores[index] > score + 1000:
                self.scores[index] = score + 1000
                changed = True
        return changed


class Solution(Day):
    """Day 16."""

    def part_one(self) -> int:
        grid = self.lines
        best: dict[Position, _Arrival] = {}
        frontier: list[Position] = []
        for start in _cells(grid, "S"):
            best[start] = _Arrival([">"], 0)
            frontier.append(start)

        while frontier:
            next_frontier: list[Position] = []
            for i, j in frontier:
                for d, (di, dj) in _STEPS.items():
                    ni, nj = i + di, j + dj
                    if grid[ni][nj] == "#":
                        continue
                    score = best[(i, j)].cost_to(d)
                    current = best.get((ni, nj))
                    if current is None or current.score > score:
                        best[(ni, nj)] = _Arrival([d], score)
                        next_frontier.append((ni, nj))
                    elif current.score == score:
                        current.dirs.append(d)
                        next_frontier.append((ni, nj))
            frontier = next_frontier

        for end in _cells(grid, "E"):
            arrival = best.get(end)
            return arrival.score if arrival is not None else 0
        return 0

    def part_two(self) -> int:
        grid = self.lines
        best: dict[Position, _Facing] = {}
        frontier: list[Position] = []
        for start in _cells(grid, "S"):
            best[start] = _Facing.arriving(">", 0)
            frontier.append(start)

        while frontier:
            next_frontier: dict[Position, None] = {}
            for i, j in frontier:
                for d, (di, dj) in _STEPS.items():
                    ni, nj = i + di, j + dj
                    if grid[ni][nj] == "#":
                        continue
                    score = best[(i, j)].score(d) + 1
                    current = best.get((ni, nj))
                    if current is None:
                        best[(ni, nj)] = _Facing.arriving(d, score)
                        updated = True
                    else:
                        updated = current.relax(d, score)
                    if updated and grid[ni][nj] != "E":
                        next_frontier[(ni, nj)] = None
            frontier = list(next_frontier)

        trail = [(i, j, d) for i, j in _cells(grid, "E") for d in best[(i, j)].best()]
        while trail:
            next_trail: dict[tuple[int, int, str], None] = {}
            for i, j, d in trail:
                current = best[(i, j)]
                current.on_path = True
                di, dj = _BACK[d]
                ni, nj = i + di, j + dj
                if grid[ni][nj] == "#":
                    continue
                previous = best[(ni, nj)]
                if previous.on_path:
                    continue
                for dd in _ORDER:
                    step = 1 if dd == d else 1001
                    if current.score(dd) == previous.score(d) + step:
                        next_trail[(ni, nj, dd)] = None
            trail = list(next_trail)

        return sum(1 for facing in best.values() if facing.on_path)