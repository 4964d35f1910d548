import pytest

from aoc2024.day_01 import Solution
from aoc2024.puzzle import Day

SAMPLE = "\n".join(
    f"{left}   {right}" for left, right in [(3, 4), (4, 3), (2, 5), (1, 3), (3, 9), (3, 3)]
)


def test_from_sample_splits_lines():
    day = Solution.from_sample("alpha\nbeta\ngamma")
    assert day.lines == ["alpha", "beta", "gamma"]


def test_from_sample_empty_gives_no_lines():
    assert Solution.from_sample("").lines == []


def test_from_file_matches_sample(tmp_path):
    text = "first\nsecond\n"
    path = tmp_path / "input"
    path.write_text(text)
    assert Solution.from_file(path).lines == ["first", "second"]


def test_from_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Solution.from_file(tmp_path / "absent")


def test_run_part_one_prints_result(capsys):
    result = Solution.from_sample(SAMPLE).run_part_one()
    assert result == 11
    assert "Result : [11]" in capsys.readouterr().out


def test_run_part_two_reports_error(capsys):
    result = Solution.from_sample("abc   def").run_part_two()
    assert result is None
    out = capsys.readouterr().out
    assert "Error" in out
    assert "abc" in out


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Day([])