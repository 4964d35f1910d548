"""Command line entry point that runs one part of one day's puzzle."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import Optional, Sequence

from aoc2024 import (
    day_01,
    day_02,
    day_03,
    day_04,
    day_05,
    day_06,
    day_07,
    day_08,
    day_09,
    day_10,
    day_11,
    day_12,
    day_13,
    day_14,
    day_15,
    day_16,
    day_17,
    day_18,
    day_19,
    day_20,
    day_21,
)
from aoc2024.puzzle import Day

_SOLUTIONS: dict[int, type[Day]] = {
    1: day_01.Solution,
    2: day_02.Solution,
    3: day_03.Solution,
    4: day_04.Solution,
    5: day_05.Solution,
    6: day_06.Solution,
    7: day_07.Solution,
    8: day_08.Solution,
    9: day_09.Solution,
    10: day_10.Solution,
    11: day_11.Solution,
    12: day_12.Solution,
    13: day_13.Solution,
    14: day_14.Solution,
    15: day_15.Solution,
    16: day_16.Solution,
    17: day_17.Solution,
    18: day_18.Solution,
    19: day_19.Solution,
    20: day_20.Solution,
    21: day_21.Solution,
}

_PART_ERROR = "/!\\ The exercice part must be 1 or 2"

_UNITS = (
    (31_557_600 * 10**9, "year", True),
    (2_630_016 * 10**9, "month", True),
    (86_400 * 10**9, "day", True),
    (3_600 * 10**9, "h", False),
    (60 * 10**9, "m", False),
    (10**9, "s", False),
    (10**6, "ms", False),
    (10**3, "us", False),
    (1, "ns", False),
)


def load_day(day: int, filename: str | Path) -> Day:
    """Build the solution of the given day from an input file."""
    try:
        solution = _SOLUTIONS[day]
    except KeyError:
        raise ValueError(f"no solution for day {day}") from None
    return solution.from_file(filename)


def format_duration(seconds: float) -> str:
    """Format a duration as space-separated units, largest first."""
    remaining = round(seconds * 10**9)
    if remaining <= 0:
        return "0s"
    parts = []
    for size, name, plural in _UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            suffix = "s" if plural and count > 1 else ""
            parts.append(f"{count}{name}{suffix}")
    return " ".join(parts)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run one part of a day's puzzle.")
    parser.add_argument("part", type=int, help="the exercise part, 1 or 2")
    parser.add_argument("--day", type=int, required=True, help="the day to run")
    parser.add_argument("--input", help="input file (default: inputs/day-NN)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    filename = args.input or f"inputs/day-{args.day:02d}"

    print(f"\nDay {args.day} part {args.part}")

    day = load_day(args.day, filename)
    start = time.perf_counter()

    status = 0
    if args.part == 1:
        day.run_part_one()
    elif args.part == 2:
        day.run_part_two()
    else:
        print(_PART_ERROR)
        status = 2

    print(f"Duration : {format_duration(time.perf_counter() - start)}")
    return status


if __name__ == "__main__":
    raise SystemExit(main())