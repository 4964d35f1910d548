"""Resonant Collinearity: antinodes of antenna pairs."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from itertools import permutations
from typing import Optional

from aoc2024.puzzle import Day


@dataclass(frozen=True)
class Point:
    """A cell of the map."""

    i: int
    j: int

    def resonate(self, other: "Point", size: tuple[int, int]) -> Optional["Point"]:
        """The antinode beyond other, away from self, if it lies on the map."""
        height, width = size
        ni = other.i + (other.i - self.i)
        nj = other.j + (other.j - self.j)
        if 0 <= ni < height and 0 <= nj < width:
            return Point(ni, nj)
        return None

    def resonate_all(self, other: "Point", size: tuple[int, int]) -> list["Point"]:
        """Every on-map cell from other onwards in steps of other - self."""
        height, width = size
        di, dj = other.i - self.i, other.j - self.j
        points = []
        i, j = other.i, other.j
        while 0 <= i < height and 0 <= j < width:
            points.append(Point(i, j))
            i += di
            j += dj
        return points


def _antennas(lines: list[str]) -> dict[str, list[Point]]:
    antennas: dict[str, list[Point]] = defaultdict(list)
    for i, row in enumerate(lines):
        for j, cell in enumerate(row):
            if cell != ".":
                antennas[cell].append(Point(i, j))
    return antennas


class Solution(Day):
    """Day 8."""

    def _size(self) -> tuple[int, int]:
        return len(self.lines), len(self.lines[0])

    def part_one(self) -> int:
        size = self._size()
        antinodes = {
            node
            for points in _antennas(self.lines).values()
            for a, b in permutations(points, 2)
            if (node := a.resonate(b, size)) is not None
        }
        return len(antinodes)

    def part_two(self) -> int:
        size = self._size()
        antinodes = {
            node
            for points in _antennas(self.lines).values()
            for a, b in permutations(points, 2)
            for node in a.resonate_all(b, size)
        }
        return len(antinodes)