import pytest

from aoc2024.day_14 import Solution

ROBOTS = [
    (0, 4, 3, -3),
    (6, 3, -1, -3),
    (10, 3, -1, 2),
    (2, 0, 2, -1),
    (0, 0, 1, 3),
    (3, 0, -2, -2),
    (7, 6, -1, -3),
    (3, 0, -1, -2),
    (9, 3, 2, 3),
    (7, 3, -1, 2),
    (2, 4, 2, -3),
    (9, 5, -3, -3),
]

SAMPLE = [f"p={px},{py} v={vx},{vy}" for px, py, vx, vy in ROBOTS]


def test_part_one_sample_on_small_grid():
    assert Solution(SAMPLE, width=11, height=7).part_one() == 12


def test_robots_on_middle_lines_are_ignored():
    lines = ["p=5,0 v=0,0", "p=0,3 v=0,0", "p=0,0 v=0,0"]
    assert Solution(lines, width=11, height=7).part_one() == 0


def test_one_robot_per_quadrant():
    lines = ["p=0,0 v=0,0", "p=10,0 v=0,0", "p=0,6 v=0,0", "p=10,6 v=0,0"]
    assert Solution(lines, width=11, height=7).part_one() == 1


def test_part_two_prints_every_arrangement(capsys):
    result = Solution(SAMPLE, width=11, height=7).part_two()
    lines = capsys.readouterr().out.splitlines()
    assert result == 77
    assert len(lines) == 77 * 8
    assert lines[0] == "0"
    assert lines[-8] == "76"


def test_part_two_first_frame_shows_start(capsys):
    Solution(["p=1,2 v=0,0"], width=3, height=3).part_two()
    lines = capsys.readouterr().out.splitlines()
    assert lines[:4] == ["0", "...", "...", ".#."]


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        Solution(["robot"], width=11, height=7).part_one()