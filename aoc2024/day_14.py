"""Restroom Redoubt: robots moving on a wrapping grid."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from math import prod
from typing import Iterable

from aoc2024.puzzle import Day

_ROBOT = re.compile(r"p=(-?[0-9]*),(-?[0-9]*) v=(-?[0-9]*),(-?[0-9]*)")


@dataclass(frozen=True)
class _Robot:
    px: int
    py: int
    vx: int
    vy: int

    def position(self, seconds: int, width: int, height: int) -> tuple[int, int]:
        return (self.px + seconds * self.vx) % width, (self.py + seconds * self.vy) % height


def _robots(lines: Iterable[str]) -> list[_Robot]:
    robots = []
    for line in lines:
        match = _ROBOT.search(line)
        if match is None:
            raise ValueError(f"unexpected line: {line!r}")
        robots.append(_Robot(*(int(value) for value in match.groups())))
    return robots


class Solution(Day):
    """Day 14, on a grid of the given size."""

    def __init__(self, lines: Iterable[str], width: int = 101, height: int = 103) -> None:
        super().__init__(lines)
        self.width = width
        self.height = height

    def part_one(self) -> int:
        mid_x, mid_y = self.width // 2, self.height // 2
        quadrants: Counter[tuple[bool, bool]] = Counter()
        for robot in _robots(self.lines):
            x, y = robot.position(100, self.width, self.height)
            if x != mid_x and y != mid_y:
                quadrants[(x > mid_x, y > mid_y)] += 1
        return prod(quadrants[(right, low)] for right in (False, True) for low in (False, True))

    def part_two(self) -> int:
        """Print every distinct arrangement; return how many there are."""
        robots = _robots(self.lines)
        period = self.width * self.height
        for turn in range(period):
            occupied = {robot.position(turn, self.width, self.height) for robot in robots}
            print(turn)
            for y in range(self.height):
                print("".join("#" if (x, y) in occupied else "." for x in range(self.width)))
        return period