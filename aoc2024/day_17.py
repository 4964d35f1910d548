"""Chronospatial Computer: a three-bit machine and a program that prints itself."""

from __future__ import annotations

from typing import Optional, Sequence

from aoc2024.puzzle import Day


def _combo(operand: int, a: int, b: int, c: int) -> int:
    if 0 <= operand <= 3:
        return operand
    if operand == 4:
        return a
    if operand == 5:
        return b
    if operand == 6:
        return c
    raise ValueError(f"invalid combo operand {operand}")


def _divide(value: int, exponent: int) -> int:
    """Divide by 2**exponent, truncating toward zero."""
    if exponent < 0:
        raise ValueError(f"negative exponent {exponent}")
    quotient = abs(value) >> exponent
    return quotient if value >= 0 else -quotient


def run_program(a: int, b: int, c: int, program: Sequence[int]) -> list[int]:
    """Run the program with the given registers and return what it outputs."""
    output: list[int] = []
    ptr = 0
    while ptr < len(program):
        opcode, operand = program[ptr], program[ptr + 1]
        if opcode == 0:
            a = _divide(a, _combo(operand, a, b, c))
        elif opcode == 1:
            b ^= operand
        elif opcode == 2:
            b = _combo(operand, a, b, c) % 8
        elif opcode == 3:
            if a != 0:
                ptr = operand
                continue
        elif opcode == 4:
            b ^= c
        elif opcode == 5:
            output.append(_combo(operand, a, b, c) % 8)
        elif opcode == 6:
            b = _divide(a, _combo(operand, a, b, c))
        elif opcode == 7:
            c = _divide(a, _combo(operand, a, b, c))
        else:
            raise ValueError(f"invalid opcode {opcode}")
        ptr += 2
    return output


def _register(line: str) -> int:
    return int(line.split(" ")[2])


def _parse(lines: list[str]) -> tuple[int, int, int, list[int]]:
    a, b, c = (_register(line) for line in lines[:3])
    program = [int(value) for value in lines[4].split(" ")[1].split(",")]
    return a, b, c, program


class Solution(Day):
    """Day 17."""

    def part_one(self) -> int:
        """Print the program's output; the answer is that text, so return 0."""
        a, b, c, program = _parse(self.lines)
        print(",".join(str(value) for value in run_program(a, b, c, program)))
        return 0

    def part_two(self) -> int:
        """Lowest value of register A for which the program outputs itself."""
        _, b, c, program = _parse(self.lines)

        def search(prefix: int, index: int) -> Optional[int]:
            for low in range(8):
                candidate = prefix * 8 + low
                if run_program(candidate, b, c, program) != program[index:]:
                    continue
                if index == 0:
                    return candidate
                found = search(candidate, index - 1)
                if found is not None:
                    return found
            return None

        found = search(0, len(program) - 1)
        if found is None:
            raise ValueError("no value of register A reproduces the program")
        print(found)
        return found