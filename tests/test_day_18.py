import pytest

from aoc2024.day_18 import Solution

SAMPLE = """\
5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0"""


def test_part_one_sample():
    assert Solution(SAMPLE.splitlines(), size=7, limit=12).part_one() == 22


def test_part_one_empty_grid():
    assert Solution.from_sample("").part_one() == 140


def test_part_one_unreachable():
    assert Solution(["1,0", "0,1"], size=3, limit=2).part_one() == -1


def test_part_two_sample(capsys):
    assert Solution(SAMPLE.splitlines(), size=7, limit=12).part_two() == 0
    assert capsys.readouterr().out.strip() == "6,1"


def test_part_two_never_blocked():
    with pytest.raises(ValueError):
        Solution(["1,1"], size=3, limit=0).part_two()


def test_byte_outside_grid():
    with pytest.raises(ValueError):
        Solution(["9,9"], size=3, limit=1).part_one()