"""Solutions to contest problems from 2012 to 2014."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

_ICON = ("*x*", " xx", "* *")


def speeding_message(limit: int, speed: int) -> str:
    """The message shown to a driver at ``speed`` in a ``limit`` zone."""
    if speed <= limit:
        return "Congratulations, you are within the speed limit!"
    if speed <= limit + 20:
        fine = 100
    elif speed <= limit + 30:
        fine = 270
    else:
        fine = 500
    return f"You are speeding and your fine is ${fine}."


def fish_finder(a: int, b: int, c: int, d: int) -> str:
    """Classify four successive depth readings."""
    if a < b < c < d:
        return "Fish Rising"
    if a > b > c > d:
        return "Fish Diving"
    if a == b == c == d:
        return "Fish At Constant Depth"
    return "No Fish"


def scale_icon(k: int) -> list[str]:
    """The icon scaled by the factor ``k`` in both directions."""
    return ["".join(ch * k for ch in row) for row in _ICON for _ in range(k)]


def decode_cipher(k: int, word: str) -> str:
    """Undo the position-dependent shift applied to an upper-case word."""
    decoded = []
    for position, ch in enumerate(word, start=1):
        value = (ord(ch) - (3 * position + k)) & 0xFFFF
        if value < ord("A"):
            value += 26
        elif value > ord("Z"):
            value -= 26
        decoded.append(chr(value & 0xFF))
    return "".join(decoded)


def goal_combinations(j: int) -> int:
    """Ways to pick three distinct jersey numbers summing to ``j``'s pattern."""
    if j < 4:
        return 0
    return (j - 1) * (j - 2) * (j - 3) // 6


def winning_score(a: int, b: int) -> int:
    """The next value continuing the arithmetic step from ``a`` to ``b``."""
    return b + (b - a)


def _has_distinct_digits(year: int) -> bool:
    head, tail = divmod(year, 10000)
    if head == 0:
        digits = str(tail)
        return len(set(digits)) == len(digits)
    tail_digits = [int(d) for d in f"{tail:04d}"]
    return head not in tail_digits and len(set(tail_digits)) == len(tail_digits)


def next_distinct_year(year: int) -> int:
    """The first year after ``year`` whose digits are all different."""
    year += 1
    while not _has_distinct_digits(year):
        year += 1
    return year


def _check_index(friends: list[int], index: int) -> None:
    if index >= len(friends):
        raise IndexError(f"position {index + 1} is past the end of the guest list")


def party_invitation(count: int, rounds: Iterable[int]) -> list[int]:
    """Guests left after each round removes every n-th remaining guest."""
    friends = list(range(1, count + 1))
    remaining = count
    for number in rounds:
        if number < 1:
            raise ValueError("round number must be positive")
        for index in range(number - 1, remaining, number):
            _check_index(friends, index)
            friends[index] = -1
        index = number - 1
        while index < remaining:
            _check_index(friends, index)
            if friends[index] == -1:
                remaining -= 1
                del friends[index]
            index += 1
        friends = [friend for friend in friends if friend != -1]
    return friends


def _ints(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def _take(values: Sequence[int], count: int) -> list[int]:
    if len(values) < count:
        raise ValueError(f"expected {count} numbers, got {len(values)}")
    return list(values[:count])


def _solve_speeding(text: str) -> list[str]:
    limit, speed = _take(_ints(text), 2)
    return [speeding_message(limit, speed)]


def _solve_fish(text: str) -> list[str]:
    return [fish_finder(*_take(_ints(text), 4))]


def _solve_icon(text: str) -> list[str]:
    (k,) = _take(_ints(text), 1)
    return scale_icon(k)


def _solve_cipher(text: str) -> list[str]:
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("expected a shift and a word")
    return [decode_cipher(int(tokens[0]), tokens[1])]


def _solve_goals(text: str) -> list[str]:
    (j,) = _take(_ints(text), 1)
    return [str(goal_combinations(j))]


def _solve_score(text: str) -> list[str]:
    a, b = _take(_ints(text), 2)
    return [str(winning_score(a, b))]


def _solve_year(text: str) -> list[str]:
    (year,) = _take(_ints(text), 1)
    return [str(next_distinct_year(year))]


def _solve_party(text: str) -> list[str]:
    values = _ints(text)
    count, round_count = _take(values, 2)
    rounds = _take(values[2:], round_count)
    return [str(friend) for friend in party_invitation(count, rounds)]


_PROBLEMS: dict[str, Callable[[str], list[str]]] = {
    "12-j1": _solve_speeding,
    "12-j2": _solve_fish,
    "12-j3": _solve_icon,
    "12-j4": _solve_cipher,
    "12-s1": _solve_goals,
    "13-j1": _solve_score,
    "13-s1": _solve_year,
    "14-s1": _solve_party,
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
    parser = argparse.ArgumentParser(description="Solve a 2012-2014 contest problem.")
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    sys.stdout.write(solve(args.problem, sys.stdin.read()))
    return 0