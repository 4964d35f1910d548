"""Linen Layout: building towel designs from stripe patterns."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable

from aoc2024.puzzle import Day


def _arrangement_counter(patterns: tuple[str, ...]) -> Callable[[str], int]:
    usable = tuple(pattern for pattern in patterns if pattern)

    @lru_cache(maxsize=None)
    def count(design: str) -> int:
        if not design:
            return 1
        return sum(
            count(design[len(pattern) :]) for pattern in usable if design.startswith(pattern)
        )

    return count


class Solution(Day):
    """Day 19."""

    def _counts(self) -> list[int]:
        count = _arrangement_counter(tuple(self.lines[0].split(", ")))
        return [count(design) for design in self.lines[2:]]

    def part_one(self) -> int:
        return sum(1 for ways in self._counts() if ways > 0)

    def part_two(self) -> int:
        return sum(self._counts())