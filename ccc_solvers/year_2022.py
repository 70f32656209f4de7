"""Solutions to contest problems from 2022."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

_STUDENTS = 28
_REGULAR_BOX = 8
_SMALL_BOX = 3
_STAR_RATING = 40
_UINT_MOD = 1 << 32


def leftover_cupcakes(regular: int, small: int) -> int:
    """Cupcakes left after every student takes one (unsigned 32-bit)."""
    return (regular * _REGULAR_BOX + small * _SMALL_BOX - _STUDENTS) % _UINT_MOD


def star_players(players: Iterable[tuple[int, int]]) -> tuple[int, bool]:
    """Number of star players and whether every player is a star."""
    stars = total = 0
    for points, fouls in players:
        total += 1
        # Ratings are computed as unsigned 32-bit values.
        if (points * 5 - fouls * 3) % _UINT_MOD > _STAR_RATING:
            stars += 1
    return stars, stars == total


def _is_string_letter(ch: str) -> bool:
    return "A" <= ch <= "T"


def harp_instructions(text: str) -> str:
    """Spell out compact harp tuning instructions, one per line."""
    parts = []
    for i, ch in enumerate(text):
        if _is_string_letter(ch):
            parts.append(ch)
        elif ch == "+":
            parts.append(" tighten ")
        elif ch == "-":
            parts.append(" loosen ")
        else:
            parts.append(ch)
            following = text[i + 1 : i + 2]
            if not following or _is_string_letter(following):
                parts.append("\n")
    return "".join(parts)


def four_five_ways(n: int) -> int:
    """Ways to write ``n`` as a sum of fours and fives."""
    ways = sum(1 for remaining in range(n, 0, -5) if remaining % 4 == 0)
    if n >= 0 and n % 5 == 0:
        ways += 1
    return ways


def art_count(rows: int, cols: int, strokes: Iterable[tuple[str, int]]) -> int:
    """Cells left gold after toggling rows (``R``) and columns."""
    painted_rows: set[int] = set()
    painted_cols: set[int] = set()
    for kind, index in strokes:
        target = painted_rows if kind == "R" else painted_cols
        target.symmetric_difference_update({index})
    r, c = len(painted_rows), len(painted_cols)
    return cols * r + rows * c - 2 * r * c


def _largest_needed_digit(n: int, needed: int) -> int:
    counter = 1
    left = needed - n
    while left > 0:
        left -= n - counter
        counter += 1
    return counter


def good_samples(n: int, m: int, k: int) -> list[int] | None:
    """A sequence of ``n`` values up to ``m`` with ``k`` distinct-valued runs, if any."""
    max_good = sum(n - i for i in range(m))
    if k < n or k > max_good:
        return None
    width = _largest_needed_digit(n, k)
    needed = k - sum(range(n, n - width + 1, -1))
    lead, full = needed % width, needed // width
    rest = n - (lead + full * width)
    sample = list(range(width - lead + 1, width + 1))
    sample.extend(i % width + 1 for i in range(full * width))
    period = max(width - 1, 1)
    sample.extend(i % period + 1 for i in range(max(rest, 0)))
    return sample


def _ints(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def _take(values: Sequence, count: int) -> list:
    if count < 0 or len(values) < count:
        raise ValueError(f"expected {count} values, got {len(values)}")
    return list(values[:count])


def _solve_cupcakes(text: str) -> str:
    regular, small = _take(_ints(text), 2)
    return f"{leftover_cupcakes(regular, small)}\n"


def _solve_stars(text: str) -> str:
    values = _ints(text)
    (count,) = _take(values, 1)
    fields = _take(values[1:], 2 * count)
    stars, gold = star_players(zip(fields[::2], fields[1::2]))
    return f"{stars}{'+' if gold else ''}\n"


def _solve_harp(text: str) -> str:
    tokens = text.split()
    return harp_instructions(tokens[0] if tokens else "")


def _solve_four_five(text: str) -> str:
    (n,) = _take(_ints(text), 1)
    return f"{four_five_ways(n)}\n"


def _solve_art(text: str) -> str:
    tokens = text.split()
    rows, cols, count = (int(token) for token in _take(tokens, 3))
    fields = _take(tokens[3:], 2 * count)
    strokes = []
    for kind, index in zip(fields[::2], fields[1::2]):
        if len(kind) != 1:
            raise ValueError(f"expected a single stroke letter, got {kind!r}")
        strokes.append((kind, int(index)))
    return f"{art_count(rows, cols, strokes)}\n"


def _solve_samples(text: str) -> str:
    n, m, k = _take(_ints(text), 3)
    sample = good_samples(n, m, k)
    if sample is None:
        return "-1\n"
    return "".join(f"{value} " for value in sample) + "\n"


_PROBLEMS: dict[str, Callable[[str], str]] = {
    "22-j1": _solve_cupcakes,
    "22-j2": _solve_stars,
    "22-j3": _solve_harp,
    "22-s1": _solve_four_five,
    "22-s2": _solve_art,
    "22-s3": _solve_samples,
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
    parser = argparse.ArgumentParser(description="Solve a 2022 contest problem.")
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    sys.stdout.write(solve(args.problem, sys.stdin.read()))
    return 0