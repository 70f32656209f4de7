"""Solutions to contest problems from 2000 to 2007."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import cycle

WEEK_HEADER = "Sun Mon Tue Wed Thr Fri Sat"

_FLIPPED_DIGITS = {"0": "0", "1": "1", "8": "8", "6": "9", "9": "6"}

_WIN_ROUND = (35, 100, 10)
_WIN_REWARD = (30, 60, 9)

_SHORTHAND = {
    "CU": "see you",
    ":-)": "I'm happy",
    ":-(": "I'm unhappy",
    ";-)": "wink",
    ":-P": "stick out my tongue",
    "(~.~)": "sleepy",
    "TA": "totally awesome",
    "CCC": "Canadian Computing Competition",
    "CUZ": "because",
    "TY": "thank-you",
    "YW": "you're welcome",
    "TTYL": "talk to you later",
}
_FAREWELL = "talk to you later"


def calendar(start_day: int, days: int) -> list[str]:
    """Lay out a month starting on weekday ``start_day`` (1 = Sunday)."""
    lines = [WEEK_HEADER]
    current = "    " * (start_day - 1)
    last_position = days + start_day - 1
    for day, position in enumerate(range(start_day, last_position + 1), start=1):
        current += f"{day:3d}"
        if position % 7 == 0 or position == last_position:
            lines.append(current)
            current = ""
        else:
            current += " "
    if current:
        lines.append(current)
    return lines


def is_rotatable(n: int) -> bool:
    """Whether ``n`` reads the same when turned upside down."""
    if n < 0:
        return False
    digits = str(n)
    if any(d not in _FLIPPED_DIGITS for d in digits):
        return False
    rotated = "".join(_FLIPPED_DIGITS[d] for d in reversed(digits))
    return int(rotated) == n


def count_rotatable(start: int, end: int) -> int:
    """Count rotatable numbers in the half-open range ``[start, end)``."""
    return sum(1 for n in range(start, end) if is_rotatable(n))


def slot_plays(quarters: int, since_win: Sequence[int]) -> int:
    """Number of plays on the three machines before the quarters run out."""
    counters = list(since_win)
    if len(counters) != len(_WIN_ROUND):
        raise ValueError("exactly three machine counters are required")
    plays = 0
    for machine in cycle(range(len(counters))):
        if quarters <= 0:
            break
        quarters -= 1
        counters[machine] += 1
        if counters[machine] == _WIN_ROUND[machine]:
            counters[machine] = 0
            quarters += _WIN_REWARD[machine]
        plays += 1
    return plays


def star_bow(height: int) -> list[str]:
    """Rows of the bow-tie shaped star pattern of the given height."""
    width = height * 2
    sizes = [*range(1, height + 1, 2), *range(height - 2, 0, -2)]
    return ["*" * i + " " * (width - i * 2) + "*" * i for i in sizes]


def trident(tine: int, spacing: int, handle: int) -> list[str]:
    """Rows of a trident drawing."""
    prong = "*" + (" " * spacing + "*") * 2
    rows = [prong] * tine
    rows.append("*" * (3 + 2 * spacing))
    rows.extend([" " * (spacing + 1) + "*"] * handle)
    return rows


def similes(adjectives: Iterable[str], nouns: Iterable[str]) -> list[str]:
    """Every ``<adjective> as <noun>`` combination, adjectives first."""
    noun_list = list(nouns)
    return [f"{adjective} as {noun}" for adjective in adjectives for noun in noun_list]


def middle(a: int, b: int, c: int) -> int:
    """The middle of three numbers."""
    if min(b, c) < a < max(b, c):
        return a
    if min(a, c) < b < max(a, c):
        return b
    return c


def expand_shorthand(words: Iterable[str]) -> Iterator[str]:
    """Expand chat shorthand, stopping after the farewell phrase."""
    for word in words:
        expanded = _SHORTHAND.get(word, word)
        yield expanded
        if expanded == _FAREWELL:
            return


def _ints(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def _take(values: Sequence[int], count: int) -> list[int]:
    if len(values) < count:
        raise ValueError(f"expected {count} numbers, got {len(values)}")
    return list(values[:count])


def _solve_calendar(text: str) -> list[str]:
    start, days = _take(_ints(text), 2)
    return calendar(start, days)


def _solve_rotatable(text: str) -> list[str]:
    start, end = _take(_ints(text), 2)
    return [str(count_rotatable(start, end))]


def _solve_slots(text: str) -> list[str]:
    quarters, *since = _take(_ints(text), 4)
    return [f"Martha plays {slot_plays(quarters, since)} times before going broke."]


def _solve_bow(text: str) -> list[str]:
    (height,) = _take(_ints(text), 1)
    return star_bow(height)


def _solve_trident(text: str) -> list[str]:
    tine, spacing, handle = _take(_ints(text), 3)
    return trident(tine, spacing, handle)


def _solve_similes(text: str) -> list[str]:
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("missing adjective and noun counts")
    n, m = int(tokens[0]), int(tokens[1])
    words = tokens[2:]
    if len(words) < n + m:
        raise ValueError("not enough adjectives and nouns")
    return similes(words[:n], words[n : n + m])


def _solve_middle(text: str) -> list[str]:
    a, b, c = _take(_ints(text), 3)
    return [str(middle(a, b, c))]


def _solve_shorthand(text: str) -> list[str]:
    return list(expand_shorthand(text.split()))


_PROBLEMS: dict[str, Callable[[str], list[str]]] = {
    "00-j1": _solve_calendar,
    "00-j2": _solve_rotatable,
    "00-s1": _solve_slots,
    "01-j1": _solve_bow,
    "03-j1": _solve_trident,
    "04-j3": _solve_similes,
    "07-j1": _solve_middle,
    "07-j2": _solve_shorthand,
}


def solve(problem: str, text: str) -> str:
    """Run the named problem on the given input text and return its output."""
    try:
        handler = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return "".join(f"{line}\n" for line in handler(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(description="Solve a 2000-2007 contest problem.")
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    sys.stdout.write(solve(args.problem, sys.stdin.read()))
    return 0