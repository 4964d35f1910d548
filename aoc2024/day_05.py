"""Print Queue: ordering pages by precedence rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from aoc2024.puzzle import Day


@dataclass
class Rule:
    """Pages that must come after and before a given page."""

    must_be_before: set[int] = field(default_factory=set)
    must_be_after: set[int] = field(default_factory=set)


def compute_rules(rules: dict[int, Rule], update: Sequence[int]) -> dict[int, Rule]:
    """Restrict the rules to the pages of an update, closing them transitively."""
    members = set(update)
    result: dict[int, Rule] = {}
    changed: list[tuple[int, int]] = []

    for page in update:
        result[page] = Rule()
        rule = rules.get(page)
        if rule is None:
            continue
        for earlier in rule.must_be_after:
            if earlier in members and earlier not in result[page].must_be_after:
                result[page].must_be_after.add(earlier)
                changed.append((page, earlier))

    while changed:
        next_changed: list[tuple[int, int]] = []
        for page, earlier in changed:
            rule = rules.get(earlier)
            if rule is None:
                continue
            for further in rule.must_be_after:
                if further in members and further not in result[page].must_be_after:
                    result[page].must_be_after.add(further)
                    next_changed.append((page, further))
        changed = next_changed

    return result


def _parse(lines: list[str]) -> tuple[dict[int, Rule], list[list[int]]]:
    rules: dict[int, Rule] = {}
    updates: list[list[int]] = []
    in_updates = False
    for line in lines:
        if not line:
            in_updates = True
            continue
        if in_updates:
            updates.append([int(n) for n in line.split(",")])
            continue
        parts = line.split("|")
        first, second = int(parts[0]), int(parts[1])
        rules.setdefault(first, Rule()).must_be_before.add(second)
        rules.setdefault(second, Rule()).must_be_after.add(first)
    return rules, updates


def _first_violation(update: Sequence[int], applicable: dict[int, Rule]) -> Optional[int]:
    for position, (current, following) in enumerate(zip(update, update[1:])):
        if following in applicable[current].must_be_after:
            return position
    return None


class Solution(Day):
    """Day 5."""

    def part_one(self) -> int:
        rules, updates = _parse(self.lines)
        return sum(
            update[len(update) // 2]
            for update in updates
            if _first_violation(update, compute_rules(rules, update)) is None
        )

    def part_two(self) -> int:
        rules, updates = _parse(self.lines)
        total = 0
        for update in updates:
            applicable = compute_rules(rules, update)
            if _first_violation(update, applicable) is None:
                continue
            fixed = list(update)
            while (position := _first_violation(fixed, applicable)) is not None:
                fixed[position], fixed[position + 1] = fixed[position + 1], fixed[position]
            total += fixed[len(fixed) // 2]
        return total