"""Command-line runner that reads problem input and prints the answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from drillbook import level1, level2, level3


class _Tokens:
    """Whitespace-separated tokens read in order."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def grid(self, size: int) -> list[list[int]]:
        return [self.integers(size) for _ in range(size)]


def _cases(tokens: _Tokens) -> range:
    return range(1, tokens.integer() + 1)


def _countdown(tokens: _Tokens) -> str:
    return "".join(f"{value} " for value in level1.countdown(tokens.integer()))


def _diagonal(tokens: _Tokens) -> str:
    return "".join(f"{row}\n" for row in level1.diagonal_pattern())


def _alphabet(tokens: _Tokens) -> str:
    return "".join(f"{value} " for value in level1.alphabet_positions(tokens.word()))


def _dates(tokens: _Tokens) -> str:
    lines = []
    for case in _cases(tokens):
        formatted = level1.format_date(tokens.word())
        lines.append(f"#{case} {formatted if formatted is not None else '-1'}\n")
    return "".join(lines)


def _digit_sum(tokens: _Tokens) -> str:
    return str(level1.digit_sum(tokens.integer()))


def _median(tokens: _Tokens) -> str:
    return str(level1.median(tokens.integers(tokens.integer())))


def _maximum(tokens: _Tokens) -> str:
    return "".join(f"#{case} {level1.maximum(tokens.integers(10))}\n" for case in _cases(tokens))


def _compare(tokens: _Tokens) -> str:
    # Only the first case is answered; the rest of the input is left unread.
    for case in _cases(tokens):
        a, b = tokens.integers(2)
        return f"#{case} {level1.compare(a, b)}\n"
    return ""


def _averages(tokens: _Tokens) -> str:
    averages = [level1.rounded_average(tokens.integers(10)) for _ in _cases(tokens)]
    averages = (averages + [0, 0, 0])[:3]
    return "".join(f"#{case} {value}\n" for case, value in enumerate(averages, start=1))


def _odd_sum(tokens: _Tokens) -> str:
    return "".join(f"#{case} {level1.odd_sum(tokens.integers(10))}\n" for case in _cases(tokens))


def _scores(tokens: _Tokens) -> str:
    lines = []
    for _ in _cases(tokens):
        label = tokens.integer()
        lines.append(f"#{label} {level2.most_frequent_score(tokens.integers(1000))}\n")
    return "".join(lines)


def _sheep(tokens: _Tokens) -> str:
    return "".join(f"#{case} {level2.last_number_seen(tokens.integer())}\n" for case in _cases(tokens))


def _profit(tokens: _Tokens) -> str:
    lines = []
    for case in _cases(tokens):
        prices = tokens.integers(tokens.integer())
        lines.append(f"#{case} {level2.max_profit(prices)}\n")
    return "".join(lines)


def _factors(tokens: _Tokens) -> str:
    lines = []
    for case in _cases(tokens):
        counts = level2.factor_counts(tokens.integer())
        lines.append(f"#{case} {' '.join(str(c) for c in counts)}\n")
    return "".join(lines)


def _snail(tokens: _Tokens) -> str:
    parts = []
    for case in _cases(tokens):
        parts.append(f"#{case}\n")
        for row in level2.snail(tokens.integer()):
            parts.append("".join(f"{value} " for value in row) + "\n")
    return "".join(parts)


def _word_slots(tokens: _Tokens) -> str:
    lines = []
    for case in _cases(tokens):
        size, k = tokens.integers(2)
        lines.append(f"#{case} {level2.count_word_slots(tokens.grid(size), k)}\n")
    return "".join(lines)


def _alternating(tokens: _Tokens) -> str:
    return "".join(f"#{case} {level2.alternating_sum(tokens.integer())}\n" for case in _cases(tokens))


def _fly_kill(tokens: _Tokens) -> str:
    lines = []
    for case in _cases(tokens):
        size, m = tokens.integers(2)
        lines.append(f"#{case} {level2.max_fly_kill(tokens.grid(size), m)}\n")
    return "".join(lines)


def _view(tokens: _Tokens) -> str:
    lines = []
    for case in range(1, 11):
        heights = tokens.integers(tokens.integer())
        lines.append(f"#{case} {level3.view_count(heights)}\n")
    return "".join(lines)


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "1545": _countdown,
    "2027": _diagonal,
    "2050": _alphabet,
    "2056": _dates,
    "2058": _digit_sum,
    "2063": _median,
    "2068": _maximum,
    "2070": _compare,
    "2071": _averages,
    "2072": _odd_sum,
    "1204": _scores,
    "1288": _sheep,
    "1859": _profit,
    "1945": _factors,
    "1954": _snail,
    "1979": _word_slots,
    "1986": _alternating,
    "2001": _fly_kill,
    "1206": _view,
}


def run(problem: str, text: str) -> str:
    """Solve ``problem`` for the given input text and return the printed answer."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    return solver(_Tokens(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(prog="drillbook", description="Solve a practice problem.")
    parser.add_argument("problem", choices=sorted(_SOLVERS), help="problem number")
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for standard input")
    args = parser.parse_args(argv)

    if args.input == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as error:
            parser.exit(1, f"error: {error}\n")

    try:
        output = run(args.problem, text)
    except ValueError as error:
        parser.exit(1, f"error: {error}\n")
    sys.stdout.write(output)
    return 0