"""Bridge Repair: finding operators that balance calibration equations."""

from __future__ import annotations

from typing import Sequence

from aoc2024.puzzle import Day


def is_valid(test: int, numbers: Sequence[int]) -> bool:
    """True when + and * between numbers, left to right, can give test."""
    if test == 0 and not numbers:
        return True
    if test == 0 or not numbers:
        return False
    *rest, last = numbers
    if is_valid(test - last, rest):
        return True
    return last != 0 and test % last == 0 and is_valid(test // last, rest)


def is_valid_with_concat(test: int, numbers: Sequence[int]) -> bool:
    """Like is_valid, with digit concatenation as a third operator."""
    if test == 0 and not numbers:
        return True
    if test == 0 or not numbers:
        return False
    *rest, last = numbers
    if is_valid_with_concat(test - last, rest):
        return True
    if last != 0 and test % last == 0 and is_valid_with_concat(test // last, rest):
        return True
    text, suffix = str(test), str(last)
    if text.endswith(suffix):
        head = text[: len(text) - len(suffix)]
        try:
            remainder = int(head)
        except ValueError:
            return False
        return is_valid_with_concat(remainder, rest)
    return False


def _equations(lines: list[str]) -> list[tuple[int, list[int]]]:
    equations = []
    for line in lines:
        target, numbers = line.split(": ")
        equations.append((int(target), [int(n) for n in numbers.split(" ")]))
    return equations


class Solution(Day):
    """Day 7."""

    def part_one(self) -> int:
        return sum(test for test, numbers in _equations(self.lines) if is_valid(test, numbers))

    def part_two(self) -> int:
        return sum(
            test
            for test, numbers in _equations(self.lines)
            if is_valid_with_concat(test, numbers)
        )