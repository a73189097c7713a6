# drillbook

Solved programming drills on numbers, strings and grids, graded in three
levels. Each drill is a plain Python function, and the `drillbook` command
reads a drill's input text and prints its answers in the numbered `#1 ...`
form.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### `drillbook.level1`

| Function | What it does |
| --- | --- |
| `countdown(n)` | List of the integers from `n` down to 0 |
| `diagonal_pattern(size=5)` | `size` strings of `+` with `#` on the main diagonal |
| `alphabet_positions(text)` | `ord(c) - 64` for each character, so `A` is 1 |
| `format_date(text)` | `YYYYMMDD` to `YYYY/MM/DD`; `None` for a month or day out of range; `ValueError` if the text is shorter than 8 characters or not numeric |
| `digit_sum(n)` | Sum of the decimal digits of a positive integer, 0 otherwise |
| `median(values)` | Middle element of the sorted values; `ValueError` when empty |
| `maximum(values)` | Largest value, never less than 0 |
| `compare(a, b)` | `">"`, `"="` or `"<"` |
| `rounded_average(values)` | Mean rounded half away from zero; `ValueError` when empty |
| `odd_sum(values)` | Sum of the odd values |

### `drillbook.level2`

| Function | What it does |
| --- | --- |
| `most_frequent_score(scores)` | Most common score in 0..100, the higher score winning ties; `ValueError` for a score out of range |
| `last_number_seen(n)` | First multiple `k * n` by which all ten digits have appeared among `n, 2n, ...`; `ValueError` for `n < 1` |
| `max_profit(prices)` | Best total profit buying one unit a day and selling at later peaks |
| `factor_counts(n)` | Tuple of the exponents of 2, 3, 5, 7 and 11 in `n`; `ValueError` if `n < 1` or it has another prime factor |
| `snail(n)` | An `n` by `n` grid filled 1, 2, 3, ... clockwise from the top left |
| `count_word_slots(grid, k)` | Horizontal and vertical runs of open cells (`1`) exactly `k` long |
| `alternating_sum(n)` | `1 - 2 + 3 - 4 ...` up to `n` |
| `max_fly_kill(grid, m)` | Largest sum of any `m` by `m` square in the grid, at least 0 |

### `drillbook.level3`

| Function | What it does |
| --- | --- |
| `view_count(heights)` | Floors higher than every building within two places on either side, summed |

Example:

```python
from drillbook.level1 import digit_sum, median
from drillbook.level3 import view_count

digit_sum(6789)                                        # 30
median([3, 1, 2])                                      # 2
view_count([0, 0, 254, 185, 76, 227, 84, 175, 0, 0])   # 111
```

## Command line

```
drillbook PROBLEM [INPUT]
```

`PROBLEM` is a problem number from the table below. `INPUT` is a file to
read; leave it out or give `-` to read standard input. Input is a stream of
whitespace-separated tokens. On bad input the command prints `error: ...`
and exits with status 1.

| Problem | Input | Output |
| --- | --- | --- |
| `1545` | `N` | `countdown(N)` on one line |
| `2027` | nothing | the 5 by 5 diagonal pattern |
| `2050` | one word | its alphabet positions |
| `2056` | `T`, then `T` dates | `#i YYYY/MM/DD` or `#i -1` |
| `2058` | `N` | `digit_sum(N)` |
| `2063` | count, then the values | the median |
| `2068` | `T`, then 10 integers per case | `#i maximum` |
| `2070` | `T`, then pairs `a b` | `#1` and the comparison; only the first case is answered |
| `2071` | `T`, then 10 integers per case | `#1` to `#3` rounded averages, always three lines (missing ones are 0) |
| `2072` | `T`, then 10 integers per case | `#i` sum of odd values |
| `1204` | `T`, then per case a label and 1000 scores | `#label` most frequent score |
| `1288` | `T`, then `N` per case | `#i last_number_seen(N)` |
| `1859` | `T`, then per case a count and the prices | `#i` maximum profit |
| `1945` | `T`, then `N` per case | `#i` exponents of 2, 3, 5, 7, 11 |
| `1954` | `T`, then `N` per case | `#i` and the snail grid |
| `1979` | `T`, then per case `N K` and an `N` by `N` grid | `#i` word slot count |
| `2001` | `T`, then per case `N M` and an `N` by `N` grid | `#i` best square sum |
| `1986` | `T`, then `N` per case | `#i alternating_sum(N)` |
| `1206` | ten cases, each a count and the heights | `#i view_count` |

```
echo "3 12 5 7" | drillbook 1945
drillbook --help
```

The same runner is available from Python as `drillbook.cli.run(problem, text)`,
which returns the text that would be printed.