"""Plutonian Pebbles: counting stones that split as you blink."""

from __future__ import annotations

from functools import lru_cache

from aoc2024.puzzle import Day


@lru_cache(maxsize=None)
def blink(stone: int, steps: int) -> int:
    """Number of stones that one engraved stone becomes after the given blinks."""
    if steps == 0:
        return 1
    if stone == 0:
        return blink(1, steps - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return blink(int(digits[:half]), steps - 1) + blink(int(digits[half:]), steps - 1)
    return blink(stone * 2024, steps - 1)


def _stones(lines: list[str]) -> list[int]:
    return [int(stone) for line in lines for stone in line.split(" ")]


class Solution(Day):
    """Day 11."""

    def part_one(self) -> int:
        return sum(blink(stone, 25) for stone in _stones(self.lines))

    def part_two(self) -> int:
        return sum(blink(stone, 75) for stone in _stones(self.lines))