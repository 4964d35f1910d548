"""Keypad Conundrum: chains of robots typing door codes."""

from __future__ import annotations

from typing import Iterable, Sequence

from aoc2024.puzzle import Day

Position = tuple[int, int]
Paths = dict[tuple[str, str], list[str]]

NUMERIC_KEYPAD = (
    "#####",
    "#789#",
    "#456#",
    "#123#",
    "##0A#",
    "#####",
)

DIRECTIONAL_KEYPAD = (
    "#####",
    "##^A#",
    "#<v>#",
    "#####",
)

_STEPS = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}


def _paths_between(keypad: Sequence[str], start: Position, end: Position) -> list[str]:
    """Every shortest key sequence from start to end avoiding gaps, ending with a press."""
    (i, j), (k, l) = start, end
    moves = []
    if i < k:
        moves.append("v")
    elif i > k:
        moves.append("^")
    if j < l:
        moves.append(">")
    elif j > l:
        moves.append("<")

    paths: list[str] = []
    for move in moves:
        di, dj = _STEPS[move]
        ni, nj = i + di, j + dj
        if keypad[ni][nj] == "#":
            continue
        if (ni, nj) == end:
            return [move + "A"]
        paths.extend(move + rest for rest in _paths_between(keypad, (ni, nj), end))
    return paths


def compute_paths(keypad: Sequence[str]) -> Paths:
    """Map each pair of keys to the shortest sequences moving between them and pressing."""
    keys = [
        (key, (i, j))
        for i, row in enumerate(keypad)
        for j, key in enumerate(row)
        if key != "#"
    ]
    paths: Paths = {}
    for source, start in keys:
        for target, end in keys:
            if start == end:
                paths[(source, target)] = ["A"]
            else:
                paths[(source, target)] = _paths_between(keypad, start, end)
    return paths


class _Expander:
    """Shortest length of a code once expanded through layers of directional keypads."""

    def __init__(self, paths: Paths) -> None:
        self.paths = paths
        self.cache: dict[tuple[str, int], int] = {}

    def length(self, code: str, depth: int) -> int:
        key = (code, depth)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        total = 0
        previous = "A"
        for key_char in code:
            options = self.paths[(previous, key_char)]
            if depth > 0:
                total += min(self.length(option, depth - 1) for option in options)
            else:
                total += min(len(option) for option in options)
            previous = key_char
        self.cache[key] = total
        return total


def _all_paths() -> Paths:
    paths = compute_paths(NUMERIC_KEYPAD)
    paths.update(compute_paths(DIRECTIONAL_KEYPAD))
    return paths


class Solution(Day):
    """Day 21, with depth directional keypads between door and human in part two."""

    def __init__(self, lines: Iterable[str], depth: int = 25) -> None:
        super().__init__(lines)
        self.depth = depth

    def _complexity(self, depth: int) -> int:
        expander = _Expander(_all_paths())
        return sum(
            int(code.rstrip("A")) * expander.length(code, depth) for code in self.lines
        )

    def part_one(self) -> int:
        return self._complexity(2)

    def part_two(self) -> int:
        return self._complexity(self.depth)