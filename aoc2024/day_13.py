"""Claw Contraption: winning prizes with the fewest tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass

from aoc2024.puzzle import Day

_BUTTON = re.compile(r"Button [AB]: X\+(?P<x>[0-9]*), Y\+(?P<y>[0-9]*)")
_PRIZE = re.compile(r"Prize: X=(?P<x>[0-9]*), Y=(?P<y>[0-9]*)")
_FAR_OFFSET = 10_000_000_000_000


@dataclass(frozen=True)
class _Machine:
    a: tuple[int, int]
    b: tuple[int, int]
    prize: tuple[int, int]


def _coordinates(pattern: re.Pattern[str], line: str) -> tuple[int, int]:
    match = pattern.search(line)
    if match is None:
        raise ValueError(f"unexpected line: {line!r}")
    return int(match["x"]), int(match["y"])


def _machines(lines: list[str]) -> list[_Machine]:
    return [
        _Machine(
            _coordinates(_BUTTON, lines[start]),
            _coordinates(_BUTTON, lines[start + 1]),
            _coordinates(_PRIZE, lines[start + 2]),
        )
        for start in range(0, len(lines), 4)
    ]


def _tokens(machine: _Machine, offset: int) -> int:
    (ax, ay), (bx, by) = machine.a, machine.b
    px, py = machine.prize[0] + offset, machine.prize[1] + offset
    v = (py * ax - px * ay) // (by * ax - bx * ay)
    u = (py * bx - px * by) // (ay * bx - ax * by)
    if u * ax + v * bx == px and u * ay + v * by == py:
        return 3 * u + v
    return 0


class Solution(Day):
    """Day 13."""

    def part_one(self) -> int:
        return sum(_tokens(machine, 0) for machine in _machines(self.lines))

    def part_two(self) -> int:
        return sum(_tokens(machine, _FAR_OFFSET) for machine in _machines(self.lines))