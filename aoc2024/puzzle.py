"""Common base for the daily puzzle solutions."""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Callable, Iterable, Optional


class Day(abc.ABC):
    """A puzzle whose input is a list of text lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.lines = list(lines)

    @classmethod
    def from_file(cls, filename: str | Path) -> "Day":
        """Build the puzzle from the lines of a file."""
        return cls(Path(filename).read_text().splitlines())

    @classmethod
    def from_sample(cls, sample: str) -> "Day":
        """Build the puzzle from the lines of a string."""
        return cls(sample.splitlines())

    @abc.abstractmethod
    def part_one(self) -> int:
        """Solve the first part of the puzzle."""

    @abc.abstractmethod
    def part_two(self) -> int:
        """Solve the second part of the puzzle."""

    def run_part_one(self) -> Optional[int]:
        """Solve the first part and print the outcome."""
        return self._run(self.part_one)

    def run_part_two(self) -> Optional[int]:
        """Solve the second part and print the outcome."""
        return self._run(self.part_two)

    @staticmethod
    def _run(part: Callable[[], int]) -> Optional[int]:
        try:
            result = part()
        except Exception as error:  # reported, not propagated
            print(f"\nError : {error!r}")
            return None
        print(f"\nResult : [{result}]\n")
        return result