"""Solutions to contest problems from 2024."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Callable, Iterable, Sequence

_RED, _GREEN, _BLUE = 3, 4, 5
_HARVEST_VALUES = {"L": 10, "M": 5, "S": 1}
_BLOCKED = "*"


def sushi_cost(red: int, green: int, blue: int) -> int:
    """Total price of the plates eaten."""
    return red * _RED + green * _GREEN + blue * _BLUE


def dusa_size(start: int, yobis: Iterable[int]) -> int:
    """Dusa's size when she first meets a yobi at least as large as she is."""
    size = start
    for yobi in yobis:
        if yobi >= size:
            return size
        size += yobi
    raise ValueError("ran out of yobis before meeting a large one")


def bronze_count(scores: Iterable[int]) -> tuple[int, int]:
    """The third-highest distinct score and how many people reached it."""
    counts = Counter(scores)
    ranked = sorted(counts, reverse=True)
    if len(ranked) < 3:
        raise ValueError("fewer than three distinct scores")
    bronze = ranked[2]
    return bronze, counts[bronze]


def keyboard_keys(typed: str, shown: str) -> tuple[str | None, str | None, str | None]:
    """The silly key (typed, shown) pair and the quiet key; ``None`` where absent."""
    silly_typed: str | None = None
    silly_shown: str | None = None
    quiet: str | None = None
    ti = si = 0
    while ti < len(typed) and si < len(shown):
        ct, cs = typed[ti], shown[si]
        if ct == cs or (silly_shown is not None and cs == silly_shown):
            ti += 1
            si += 1
            continue
        if quiet is not None and ct == quiet:
            ti += 1
            continue
        if len(typed) == len(shown):
            return ct, cs, None
        following = typed[ti + 1 : ti + 2]
        if following == cs:
            quiet = ct
            ti += 1
        elif following == ct:
            raise ValueError("cannot tell the silly key from the quiet key")
        else:
            silly_typed, silly_shown = ct, cs
            ti += 1
            si += 1
    if quiet is None and ti < len(typed):
        quiet = typed[ti]
    return silly_typed, silly_shown, quiet


def harvest(field: Sequence[str], row: int, col: int) -> int:
    """Value of the pumpkins reachable from ``(row, col)`` without crossing ``*``."""
    seen: set[tuple[int, int]] = set()
    stack = [(row, col)]
    total = 0
    while stack:
        r, c = stack.pop()
        if not (0 <= r < len(field) and 0 <= c < len(field[r])):
            continue
        if (r, c) in seen or field[r][c] == _BLOCKED:
            continue
        seen.add((r, c))
        total += _HARVEST_VALUES.get(field[r][c], 0)
        stack.extend(((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))
    return total


def matching_hats(numbers: Iterable[int]) -> int:
    """People who see a matching hat directly across the circle."""
    values = list(numbers)
    half = len(values) // 2
    return 2 * sum(1 for a, b in zip(values[:half], values[half:]) if a == b)


def is_alternating(word: str) -> bool:
    """Whether heavy (repeated) and light letters strictly alternate."""
    counts = Counter(word)
    heavy = [counts[ch] > 1 for ch in word]
    if not heavy:
        return True
    first = heavy[0]
    return all(h == first for h in heavy[::2]) and all(h != first for h in heavy[1::2])


def heavy_light(words: Iterable[str]) -> list[bool]:
    """Alternation check for each word."""
    return [is_alternating(word) for word in words]


def _ints(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def _take(values: Sequence, count: int) -> list:
    if count < 0 or len(values) < count:
        raise ValueError(f"expected {count} values, got {len(values)}")
    return list(values[:count])


def _fixed_width(tokens: Iterable[str], width: int) -> list[str]:
    rows = []
    for token in tokens:
        if len(token) < width:
            raise ValueError(f"expected at least {width} characters in {token!r}")
        rows.append(token[:width])
    return rows


def _solve_sushi(text: str) -> str:
    red, green, blue = _take(_ints(text), 3)
    return f"{sushi_cost(red, green, blue)}\n"


def _solve_dusa(text: str) -> str:
    values = _ints(text)
    (start,) = _take(values, 1)
    return f"{dusa_size(start, values[1:])}\n"


def _solve_bronze(text: str) -> str:
    values = _ints(text)
    (count,) = _take(values, 1)
    score, people = bronze_count(_take(values[1:], count))
    return f"{score} {people}\n"


def _solve_keyboard(text: str) -> str:
    typed, shown = _take(text.split(), 2)
    silly_typed, silly_shown, quiet = keyboard_keys(typed, shown)
    return f"{silly_typed or chr(0)} {silly_shown or chr(0)}\n{quiet or '-'}\n"


def _solve_harvest(text: str) -> str:
    tokens = text.split()
    rows, cols = (int(token) for token in _take(tokens, 2))
    field = _fixed_width(_take(tokens[2:], rows), cols)
    row, col = (int(token) for token in _take(tokens[2 + rows :], 2))
    return f"{harvest(field, row, col)}\n"


def _solve_hats(text: str) -> str:
    values = _ints(text)
    (count,) = _take(values, 1)
    return f"{matching_hats(_take(values[1:], count))}\n"


def _solve_heavy_light(text: str) -> str:
    tokens = text.split()
    count, width = (int(token) for token in _take(tokens, 2))
    words = _fixed_width(_take(tokens[2:], count), width)
    return "".join("T\n" if good else "F\n" for good in heavy_light(words))


_PROBLEMS: dict[str, Callable[[str], str]] = {
    "24-j1": _solve_sushi,
    "24-j2": _solve_dusa,
    "24-j3": _solve_bronze,
    "24-j4": _solve_keyboard,
    "24-j5": _solve_harvest,
    "24-s1": _solve_hats,
    "24-s2": _solve_heavy_light,
}


def solve(problem: str, text: str) -> str:
    """Run the named problem on the given input text and return its output."""
    try:
        handler = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return handler(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(description="Solve a 2024 contest problem.")
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    sys.stdout.write(solve(args.problem, sys.stdin.read()))
    return 0