# adventsolve

Solvers for a set of daily programming puzzles from 2015, 2021 and 2022, plus
a few helpers for parsing puzzle input.

Every solver takes the puzzle input as a string, so you can read it however
you like:

```python
from pathlib import Path

from adventsolve.y2022_day01 import top_calories
from adventsolve.y2021_day06 import count_fish

text = Path("day01.input").read_text()
print(top_calories(text, 1))   # the elf carrying the most
print(top_calories(text, 3))   # the top three together

print(count_fish("3,4,3,1,2", 80))  # 5934
```

Malformed input generally raises `ValueError`.

## Text helpers

`adventsolve.text` holds the parsing helpers the solvers share:

- `trim(text, whitespace)`: strip the given characters from both ends.
- `read_lines(text, keep_empty=False, keep_spaces=False)`: yield trimmed
  lines, skipping empty ones unless `keep_empty` is set. With `keep_spaces`
  plain spaces are left in place.
- `read_numbers(text)`: yield one integer per non-empty line.
- `split(text, delimiter, skip_empty=False, limit=None)`: split on a
  delimiter, optionally dropping empty parts and capping the number of parts.
- `binary_to_number(bits, one="1")`: read a binary string whose first
  character is the lowest bit.
- `count_substrings(haystack, needle)`: count non-overlapping occurrences.

## Puzzle modules

There is one module for each puzzle, named `y<year>_day<nn>`:

| Module | Functions and classes |
| --- | --- |
| `y2015_day01` | `final_floor`, `basement_position` |
| `y2015_day02` | `wrapping_paper`, `ribbon` |
| `y2015_day05` | `is_nice1`, `is_nice2`, `count_nice1`, `count_nice2` |
| `y2021_day01` | `count_increases(text, window_width=1)` |
| `y2021_day02` | `dive`, `dive_with_aim` |
| `y2021_day03` | `power_consumption`, `life_support_rating` |
| `y2021_day06` | `simulate_fish`, `count_fish(text, num_days)` |
| `y2021_day07` | `parse_crabs`, `lowest_fuel_linear`, `lowest_fuel_progressive`, `lowest_fuel(text, progressive=False)` |
| `y2021_day08` | `Entry`, `parse_entries`, `count_easy`, `get_mapping`, `output_to_number`, `solve_line`, `sum_outputs` |
| `y2021_day10` | `line_score`, `syntax_error_score`, `autocomplete_score` |
| `y2022_day01` | `top_calories(text, num_elves=1)` |
| `y2022_day02` | `score_by_hand`, `score_by_outcome` |
| `y2022_day03` | `priority`, `shared_item_priorities`, `badge_priorities` |
| `y2022_day04` | `SectionRange`, `count_contained`, `count_overlapping` |
| `y2022_day05` | `rearrange(text, grab_multiple=False)` |
| `y2022_day06` | `all_different`, `find_marker(line, window_size)` |
| `y2022_day07` | `Node`, `parse_filesystem`, `sum_small_folders`, `smallest_deletable` |
| `y2022_day11` | `Monkey`, `parse_monkeys`, `monkey_business(text, num_rounds=20, num_average=2, relief_factor=3)` |
| `y2022_day13` | `parse_packet`, `compare_packets`, `sum_ordered_pairs`, `decoder_key` |

A few functions take a string that is not a whole input file:
`find_marker` takes a single datastream line, and `simulate_fish` takes an
iterable of fish timers. The 2021 day 8 helpers work on the `Entry` objects
that `parse_entries` returns.

## What the package does not do

- It has no command-line program. It does not read input files or print
  answers; you call the solvers from Python with the input text.
- Puzzle days that need grid or coordinate handling are not included, and
  there are no grid helpers.

## Running the tests

```
pip install -e ".[test]"
pytest
```