"""Solutions to contest problems from 2015 to 2018."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from itertools import accumulate

MAX_FLOAT = 3.4028234663852886e38

_VOWELS = frozenset("aeiou")


def mood(text: str) -> str:
    """Classify a message by its happy and sad emoticons."""
    happy = text.count(":-)")
    sad = text.count(":-(")
    if happy == 0 and sad == 0:
        return "none"
    if happy > sad:
        return "happy"
    if sad > happy:
        return "sad"
    return "unsure"


def is_vowel(c: str) -> bool:
    """Whether ``c`` is a lower-case vowel."""
    return c in _VOWELS


def next_vowel(c: str) -> str:
    """The vowel closest to ``c``, preferring the earlier one on ties."""
    if c <= "c":
        return "a"
    if c <= "g":
        return "e"
    if c <= "l":
        return "i"
    if c <= "r":
        return "o"
    return "u"


def next_consonant(c: str) -> str:
    """The consonant following ``c``; ``z`` stays ``z``."""
    if c == "z":
        return "z"
    following = chr(ord(c) + 1)
    if is_vowel(following):
        return chr(ord(c) + 2)
    return following


def expand_consonants(word: str) -> str:
    """Follow each consonant with its nearest vowel and next consonant."""
    return "".join(
        c if is_vowel(c) else c + next_vowel(c) + next_consonant(c) for c in word
    )


def zero_sum(numbers: Iterable[int]) -> int:
    """Sum of the numbers kept after each zero cancels the latest one."""
    kept: list[int] = []
    for n in numbers:
        if n == 0:
            if kept:
                kept.pop()
        else:
            kept.append(n)
    return sum(kept)


def is_anagram(word: str, pattern: str) -> bool:
    """Whether ``pattern`` can be an anagram of ``word`` with ``*`` wildcards."""
    if len(word) != len(pattern):
        return False
    counts = Counter(word)
    wildcards = pattern.count("*")
    for c in pattern:
        if c in counts:
            counts[c] -= 1
            if counts[c] < 0:
                return False
        else:
            wildcards -= 1
            if wildcards < 0:
                return False
    return True


def quadrant(x: int, y: int) -> int:
    """The quadrant holding the point; anything else counts as 4."""
    if x > 0 and y > 0:
        return 1
    if x < 0 < y:
        return 2
    if x < 0 and y < 0:
        return 3
    return 4


def last_equal_day(team1: Iterable[int], team2: Iterable[int]) -> int:
    """The last day (1-based) on which both running totals match, or 0."""
    last = 0
    totals = zip(accumulate(team1), accumulate(team2))
    for day, (first, second) in enumerate(totals, start=1):
        if first == second:
            last = day
    return last


def smallest_neighbourhood(villages: Iterable[float]) -> float:
    """Size of the smallest neighbourhood among the inner villages."""
    ordered = sorted(float(v) for v in villages)
    sizes = (
        (here - before) / 2 + (after - here) / 2
        for before, here, after in zip(ordered, ordered[1:], ordered[2:])
    )
    return min(sizes, default=MAX_FLOAT)


def _ints(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def _take(values: Sequence[int], count: int) -> list[int]:
    if len(values) < count:
        raise ValueError(f"expected {count} numbers, got {len(values)}")
    return list(values[:count])


def _words(text: str, count: int) -> list[str]:
    tokens = text.split()
    if len(tokens) < count:
        raise ValueError(f"expected {count} words, got {len(tokens)}")
    return tokens[:count]


def _solve_mood(text: str) -> list[str]:
    lines = text.splitlines()
    return [mood(lines[0] if lines else "")]


def _solve_consonants(text: str) -> list[str]:
    (word,) = _words(text, 1)
    return [expand_consonants(word)]


def _solve_zero(text: str) -> list[str]:
    values = _ints(text)
    (count,) = _take(values, 1)
    return [str(zero_sum(_take(values[1:], count)))]


def _solve_anagram(text: str) -> list[str]:
    word, pattern = _words(text, 2)
    return ["A" if is_anagram(word, pattern) else "N"]


def _solve_quadrant(text: str) -> list[str]:
    x, y = _take(_ints(text), 2)
    return [str(quadrant(x, y))]


def _solve_equal_day(text: str) -> list[str]:
    values = _ints(text)
    (count,) = _take(values, 1)
    teams = _take(values[1:], 2 * count)
    return [str(last_equal_day(teams[:count], teams[count:]))]


def _solve_villages(text: str) -> list[str]:
    values = _ints(text)
    (count,) = _take(values, 1)
    return [f"{smallest_neighbourhood(_take(values[1:], count)):.1f}"]


_PROBLEMS: dict[str, Callable[[str], list[str]]] = {
    "15-j2": _solve_mood,
    "15-j3": _solve_consonants,
    "15-s1": _solve_zero,
    "16-s1": _solve_anagram,
    "17-j1": _solve_quadrant,
    "17-s1": _solve_equal_day,
    "18-s1": _solve_villages,
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
    parser = argparse.ArgumentParser(description="Solve a 2015-2018 contest problem.")
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    sys.stdout.write(solve(args.problem, sys.stdin.read()))
    return 0