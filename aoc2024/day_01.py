"""Historian Hysteria: comparing two location lists."""

from __future__ import annotations

from collections import Counter

from aoc2024.puzzle import Day


def _columns(lines: list[str]) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        parts = line.split("   ")
        left.append(int(parts[0]))
        right.append(int(parts[1]))
    return left, right


class Solution(Day):
    """Day 1."""

    def part_one(self) -> int:
        left, right = _columns(self.lines)
        return sum(abs(b - a) for a, b in zip(sorted(left), sorted(right)))

    def part_two(self) -> int:
        left, right = _columns(self.lines)
        counts = Counter(right)
        return sum(value * counts[value] for value in left)