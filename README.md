# aoc2024

Solutions to the 2024 Advent of Code puzzles for days 1 to 21. The package
needs only the Python standard library, and Python 3.10 or later.

## Installation

```
pip install .
```

## Running a puzzle

Put your puzzle inputs in an `inputs/` directory. There is one file per day,
named `day-01`, `day-02` and so on. Run a day and a part from the directory
that holds `inputs/`:

```
aoc2024 --day 5 1
aoc2024 --day 5 2
```

The positional argument is the part, `1` or `2`. `--day` is required. To
read the input from another file, pass `--input PATH`.

The command prints the day and the part, then the result as
`Result : [N]`, then how long the computation took, for example
`Duration : 12ms 345us 678ns`. If the part is not 1 or 2, the command prints
an error message and exits with status 2. If the solution raises an error,
the command prints `Error : ...` instead of a result.

A few answers are printed as text rather than returned as a number:

- Day 14, part two prints every arrangement of the robots over one full
  period of the grid. It returns the number of arrangements, and you look for
  the picture yourself.
- Day 17, part one prints the program's output and returns 0.
- Day 18, part two prints the coordinates of the first byte that cuts off the
  exit and returns 0.

## Using it from Python

Each day has its own module, from `aoc2024.day_01` to `aoc2024.day_21`. Each
module has a `Solution` class built on `aoc2024.puzzle.Day`:

```python
from aoc2024.day_01 import Solution

sample = """3   4
4   3
2   5
1   3
3   9
3   3"""

puzzle = Solution.from_sample(sample)
print(puzzle.part_one())  # 11
```

- `Day.from_file(filename)` builds a puzzle from the lines of a file.
- `Day.from_sample(text)` builds a puzzle from the lines of a string.
- `part_one()` and `part_two()` return the answers.
- `run_part_one()` and `run_part_two()` print the result the way the command
  does and return it. If the part raises an error, they print the error and
  return `None`.
- `aoc2024.cli.load_day(day, filename)` returns the solution for a day
  number, or raises `ValueError` when there is none.
- `aoc2024.cli.format_duration(seconds)` gives the duration text the command
  prints.

Some solutions take extra keyword arguments, so that the smaller examples
from the puzzle texts can be run:

| Solution | Arguments and defaults |
| --- | --- |
| `day_14.Solution` | `width=101`, `height=103` |
| `day_18.Solution` | `size=71`, `limit=1024` |
| `day_20.Solution` | `min_saving=100` |
| `day_21.Solution` | `depth=25`, the number of directional keypads used in part two |

A few helpers are public as well:

- `day_02.is_safe`
- `day_04.search_for`
- `day_05.compute_rules`
- `day_07.is_valid` and `day_07.is_valid_with_concat`
- `day_08.Point`
- `day_11.blink`
- `day_17.run_program`
- `day_21.compute_paths`

`aoc2024.ppcm` provides `is_prime`, `divisors` (the prime divisors of a
number) and `ppcm`. The `ppcm` function multiplies together the prime
divisors of the given numbers, counting each prime only once.

## What it does not do

There are no solutions for days 22 to 25. Asking the command for those days
raises `ValueError`. The package does not download puzzle inputs, so you must
supply them yourself.

## Tests

```
pip install .[test]
pytest
```