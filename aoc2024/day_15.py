"""Warehouse Woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from typing import Iterable

from aoc2024.puzzle import Day

Grid = list[list[str]]

_STEPS = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_WIDE = {"#": "##", "O": "[]", ".": "..", "@": "@."}


def _step(command: str) -> tuple[int, int]:
    try:
        return _STEPS[command]
    except KeyError:
        raise ValueError(f"unknown command {command!r}") from None


def _widen(line: str) -> str:
    try:
        return "".join(_WIDE[cell] for cell in line)
    except KeyError as error:
        raise ValueError(f"unexpected cell {error.args[0]!r}") from None


def _parse(lines: Iterable[str], wide: bool) -> tuple[Grid, str]:
    grid: Grid = []
    commands: list[str] = []
    for line in lines:
        if line.startswith("#"):
            grid.append(list(_widen(line) if wide else line))
        else:
            commands.append(line)
    return grid, "".join(commands)


def _find_robot(grid: Grid) -> tuple[int, int]:
    robot = (0, 0)
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "@":
                robot = (i, j)
    return robot


def _gps_total(grid: Grid, box: str) -> int:
    return sum(
        100 * i + j for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == box
    )


def _push(grid: Grid, i: int, j: int, di: int, dj: int) -> bool:
    """Move the content of (i, j) one step, pushing boxes ahead; False if blocked."""
    ni, nj = i + di, j + dj
    target = grid[ni][nj]
    if target == "#":
        return False
    if target == "O":
        if not _push(grid, ni, nj, di, dj):
            return False
    elif target != ".":
        raise ValueError(f"unexpected cell {target!r}")
    grid[ni][nj] = grid[i][j]
    grid[i][j] = "."
    return True


def _move_cell(grid: Grid, i: int, j: int, command: str, apply: bool) -> bool:
    """Check, and when apply is set perform, the move of one cell on a wide map."""
    di, dj = _step(command)
    ni, nj = i + di, j + dj
    target = grid[ni][nj]
    if target == ".":
        can = True
    elif target == "#":
        can = False
    elif command in ("<", ">"):
        can = _move_cell(grid, ni, nj, command, apply)
    elif target == "[":
        can = _move_box(grid, ni, nj, command, apply)
    elif target == "]":
        can = _move_box(grid, ni, nj - 1, command, apply)
    else:
        raise ValueError(f"unexpected cell {target!r}")
    if can and apply:
        grid[ni][nj] = grid[i][j]
        grid[i][j] = "."
    return can


def _move_box(grid: Grid, i: int, j: int, command: str, apply: bool) -> bool:
    """Check, and when apply is set perform, a vertical move of the box whose left half is (i, j)."""
    di, dj = _step(command)
    ni, nj = i + di, j + dj
    match (grid[ni][nj], grid[ni][nj + 1]):
        case (".", "."):
            can = True
        case ("#", _) | (_, "#"):
            can = False
        case ("[", "]"):
            can = _move_box(grid, ni, nj, command, apply)
        case ("]", "."):
            can = _move_box(grid, ni, nj - 1, command, apply)
        case (".", "["):
            can = _move_box(grid, ni, nj + 1, command, apply)
        case ("]", "["):
            can = _move_box(grid, ni, nj - 1, command, apply) and _move_box(
                grid, ni, nj + 1, command, apply
            )
        case (left, right):
            raise ValueError(f"unexpected cells {left!r}, {right!r}")
    if can and apply:
        grid[ni][nj] = grid[i][j]
        grid[ni][nj + 1] = grid[i][j + 1]
        grid[i][j] = "."
        grid[i][j + 1] = "."
    return can


class Solution(Day):
    """Day 15."""

    def part_one(self) -> int:
        grid, commands = _parse(self.lines, wide=False)
        i, j = _find_robot(grid)
        for command in commands:
            di, dj = _step(command)
            if _push(grid, i, j, di, dj):
                i, j = i + di, j + dj
        return _gps_total(grid, "O")

    def part_two(self) -> int:
        grid, commands = _parse(self.lines, wide=True)
        i, j = _find_robot(grid)
        for command in commands:
            if _move_cell(grid, i, j, command, apply=False):
                _move_cell(grid, i, j, command, apply=True)
                di, dj = _step(command)
                i, j = i + di, j + dj
        return _gps_total(grid, "[")