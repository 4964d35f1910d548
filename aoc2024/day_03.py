"""Mull It Over: summing products in corrupted memory."""

from __future__ import annotations

import re

from aoc2024.puzzle import Day

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_INSTRUCTION = re.compile(r"(do(n't)?\(\))|mul\((\d{1,3}),(\d{1,3})\)")


class Solution(Day):
    """Day 3."""

    def part_one(self) -> int:
        return sum(
            int(match.group(1)) * int(match.group(2))
            for line in self.lines
            for match in _MUL.finditer(line)
        )

    def part_two(self) -> int:
        total = 0
        enabled = True
        for line in self.lines:
            for match in _INSTRUCTION.finditer(line):
                toggle = match.group(1)
                if toggle == "do()":
                    enabled = True
                elif toggle == "don't()":
                    enabled = False
                elif enabled:
                    total += int(match.group(3)) * int(match.group(4))
        return total