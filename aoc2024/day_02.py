"""Red-Nosed Reports: checking level sequences."""

from __future__ import annotations

from typing import Sequence

from aoc2024.puzzle import Day


def is_safe(report: Sequence[int]) -> bool:
    """True when levels move monotonically by steps of 1 to 3."""
    pairs = zip(report, report[1:])
    if report[0] < report[1]:
        return all(0 < b - a <= 3 for a, b in pairs)
    return all(0 < a - b <= 3 for a, b in pairs)


def _reports(lines: list[str]) -> list[list[int]]:
    return [[int(n) for n in line.split(" ")] for line in lines]


def _safe_with_removal(report: list[int]) -> bool:
    return is_safe(report) or any(
        is_safe(report[:k] + report[k + 1 :]) for k in range(len(report))
    )


class Solution(Day):
    """Day 2."""

    def part_one(self) -> int:
        return sum(1 for report in _reports(self.lines) if is_safe(report))

    def part_two(self) -> int:
        return sum(1 for report in _reports(self.lines) if _safe_with_removal(report))