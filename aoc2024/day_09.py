"""Disk Fragmenter: compacting files on a disk map."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional

from aoc2024.puzzle import Day


@dataclass
class Sector:
    """A run of blocks holding one file, or free when file_id is None."""

    file_id: Optional[int]
    size: int
    start: int


def _checksum_by_blocks(line: str) -> int:
    sizes = deque(int(c) for c in line)

    def pop_back() -> int:
        return sizes.pop() if sizes else 0

    total = 0
    id_front = 0
    id_back = len(sizes) // 2
    pos = 0
    is_file = True
    while sizes:
        size = sizes.popleft()
        if is_file:
            for _ in range(size):
                total += id_front * pos
                pos += 1
            id_front += 1
        else:
            size_back = pop_back()
            for _ in range(size):
                if size_back > 0:
                    total += id_back * pos
                    size_back -= 1
                if size_back == 0:
                    pop_back()  # the free run before the next file
                    size_back = pop_back()
                    id_back -= 1
                pos += 1
            if size_back > 0:
                sizes.append(size_back)
        is_file = not is_file
    return total


def _layout(line: str) -> list[Sector]:
    disk = []
    file_id = 0
    pos = 0
    for index, char in enumerate(line):
        size = int(char)
        if index % 2 == 0:
            disk.append(Sector(file_id, size, pos))
            file_id += 1
        else:
            disk.append(Sector(None, size, pos))
        pos += size
    return disk


def _checksum_by_files(line: str) -> int:
    disk = _layout(line)
    for a in reversed(range(len(disk))):
        moving = disk[a]
        if moving.file_id is None:
            continue
        for b in range(a):
            target = disk[b]
            if target.file_id is not None or target.size < moving.size:
                continue
            free = Sector(None, target.size - moving.size, target.start + moving.size)
            target.file_id = moving.file_id
            target.size = moving.size
            moving.file_id = None
            if free.size > 0:
                disk.insert(b + 1, free)
            break

    total = 0
    pos = 0
    for sector in disk:
        if sector.file_id is not None:
            total += sector.file_id * sum(range(pos, pos + sector.size))
        pos += sector.size
    return total


class Solution(Day):
    """Day 9."""

    def part_one(self) -> int:
        return sum(_checksum_by_blocks(line) for line in self.lines)

    def part_two(self) -> int:
        return sum(_checksum_by_files(line) for line in self.lines)