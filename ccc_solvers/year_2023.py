"""Solutions to contest problems from 2023."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

_PEPPERS = {
    "Poblano": 1500,
    "Mirasol": 6000,
    "Serrano": 15500,
    "Cayenne": 40000,
    "Thai": 75000,
    "Habanero": 125000,
}
_DAYS = 5
_PACKAGE_POINTS = 50
_COLLISION_PENALTY = 10
_BONUS = 500
_STILL = (0, 0)
_DIRECTIONS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != _STILL
)


def delivery_score(packages: int, collisions: int) -> int:
    """Score for delivered packages and collisions, with the delivery bonus."""
    score = packages * _PACKAGE_POINTS - collisions * _COLLISION_PENALTY
    if packages > collisions:
        score += _BONUS
    return score


def spiciness(peppers: Iterable[str]) -> int:
    """Total spiciness of the named peppers."""
    total = 0
    for pepper in peppers:
        try:
            total += _PEPPERS[pepper]
        except KeyError:
            raise ValueError(f"unknown pepper {pepper!r}") from None
    return total


def best_days(availabilities: Iterable[str]) -> list[int]:
    """The 1-based days on which the most people are available."""
    counts = [0] * _DAYS
    for availability in availabilities:
        for day, mark in enumerate(availability[:_DAYS]):
            if mark == "Y":
                counts[day] += 1
    best = max(counts)
    return [day for day, count in enumerate(counts, start=1) if count == best]


def _perpendicular(previous: tuple[int, int], step: tuple[int, int]) -> bool:
    if previous == _STILL:
        return False
    return previous[0] * step[0] + previous[1] * step[1] == 0


def _occurrences(
    word: str,
    grid: Sequence[Sequence[str]],
    r: int,
    c: int,
    turned: bool,
    direction: tuple[int, int],
    depth: int,
) -> int:
    if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
        return 0
    cell = grid[r][c]
    if depth == len(word) - 1:
        return int(cell == word[-1])
    if cell != word[depth]:
        return 0
    total = 0
    for step in _DIRECTIONS:
        turn = _perpendicular(direction, step)
        if depth == 0 or step == direction or (turn and not turned):
            total += _occurrences(
                word, grid, r + step[0], c + step[1], turned or turn, step, depth + 1
            )
    return total


def count_word(word: str, grid: Sequence[Sequence[str]]) -> int:
    """Occurrences of ``word`` along straight lines with at most one right-angle turn."""
    if not word:
        raise ValueError("word must not be empty")
    return sum(
        _occurrences(word, grid, r, c, False, _STILL, 0)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == word[0]
    )


def tape_needed(rows: Sequence[Sequence[int]]) -> int:
    """Edges of wet (``1``) triangular tiles that need warning tape."""
    grid = [list(row) for row in rows]
    if len(grid) != 2 or len(grid[0]) != len(grid[1]):
        raise ValueError("expected two rows of equal length")
    width = len(grid[0])
    sides = 0
    for r, row in enumerate(grid):
        other = grid[1 - r]
        for c, tile in enumerate(row):
            if tile != 1:
                continue
            if c == 0 or row[c - 1] == 0:
                sides += 1
            if c == width - 1 or row[c + 1] == 0:
                sides += 1
            if c % 2 == 1 or other[c] == 0:
                sides += 1
    return sides


def _asymmetry(window: Sequence[int]) -> int:
    half = len(window) // 2
    return sum(abs(a - b) for a, b in zip(window[:half], reversed(window)))


def crop_asymmetries(heights: Iterable[int]) -> list[int]:
    """Smallest asymmetry of any window, for every window length from 1 up."""
    values = list(heights)
    if not values:
        raise ValueError("at least one height is required")
    n = len(values)
    result = [0]
    for length in range(2, n + 1):
        result.append(
            min(
                _asymmetry(values[start : start + length])
                for start in range(n - length + 1)
            )
        )
    return result


def _ints(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def _take(values: Sequence, count: int) -> list:
    if count < 0 or len(values) < count:
        raise ValueError(f"expected {count} values, got {len(values)}")
    return list(values[:count])


def _solve_delivery(text: str) -> str:
    packages, collisions = _take(_ints(text), 2)
    return f"{delivery_score(packages, collisions)}\n"


def _solve_peppers(text: str) -> str:
    tokens = text.split()
    (count,) = _take(tokens, 1)
    return f"{spiciness(_take(tokens[1:], int(count)))}\n"


def _solve_days(text: str) -> str:
    tokens = text.split()
    (count,) = _take(tokens, 1)
    days = best_days(_take(tokens[1:], int(count)))
    return ",".join(str(day) for day in days) + "\n"


def _solve_word_hunt(text: str) -> str:
    tokens = text.split()
    word, rows, cols = _take(tokens, 3)
    r, c = int(rows), int(cols)
    letters = _take("".join(tokens[3:]), r * c)
    grid = [letters[i * c : (i + 1) * c] for i in range(r)]
    return f"{count_word(word, grid)}\n"


def _solve_tape(text: str) -> str:
    values = _ints(text)
    (count,) = _take(values, 1)
    tiles = _take(values[1:], 2 * count)
    return f"{tape_needed([tiles[:count], tiles[count:]])}\n"


def _solve_crops(text: str) -> str:
    values = _ints(text)
    (count,) = _take(values, 1)
    result = crop_asymmetries(_take(values[1:], count))
    return " ".join(str(value) for value in result) + "\n"


_PROBLEMS: dict[str, Callable[[str], str]] = {
    "23-j1": _solve_delivery,
    "23-j2": _solve_peppers,
    "23-j3": _solve_days,
    "23-j5": _solve_word_hunt,
    "23-s1": _solve_tape,
    "23-s2": _solve_crops,
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
    parser = argparse.ArgumentParser(description="Solve a 2023 contest problem.")
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    sys.stdout.write(solve(args.problem, sys.stdin.read()))
    return 0