"""Solutions to contest problems from 2019 to 2021."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from itertools import groupby

_SHOT_POINTS = (3, 2, 1)
_DIRECTIONS_END = 99999
_USHORT_MASK = 0xFFFF


def _shot_total(shots: Sequence[int]) -> int:
    if len(shots) != len(_SHOT_POINTS):
        raise ValueError("expected three-, two- and one-point shot counts")
    return sum(points * made for points, made in zip(_SHOT_POINTS, shots))


def basketball_winner(apple_shots: Sequence[int], banana_shots: Sequence[int]) -> str:
    """``A``, ``B`` or ``T`` depending on which team scored more."""
    apples = _shot_total(apple_shots)
    bananas = _shot_total(banana_shots)
    if apples > bananas:
        return "A"
    if bananas > apples:
        return "B"
    return "T"


def decode_runs(pairs: Iterable[tuple[int, str]]) -> list[str]:
    """Expand ``(count, character)`` pairs into lines."""
    return [ch * count for count, ch in pairs]


def encode_runs(line: str) -> str:
    """Run-length encode a line as ``count char`` groups separated by spaces."""
    return " ".join(f"{len(list(run))} {ch}" for ch, run in groupby(line))


def flip_grid(instructions: str) -> list[list[int]]:
    """Apply horizontal (``H``) and vertical flips to the grid ``1 2 / 3 4``."""
    top, bottom = [1, 2], [3, 4]
    for instruction in instructions:
        if instruction == "H":
            top, bottom = bottom, top
        else:
            top, bottom = top[::-1], bottom[::-1]
    return [top, bottom]


def is_prime(n: int) -> bool:
    """Whether ``n`` is a prime number."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def prime_pair(n: int) -> tuple[int, int] | None:
    """Two primes averaging ``n``, the smaller as small as possible."""
    for a in range(2, n):
        b = 2 * n - a
        if is_prime(a) and is_prime(b):
            return a, b
    return None


def happiness(small: int, medium: int, large: int) -> str:
    """``happy`` when the weighted score reaches ten, otherwise ``sad``."""
    score = small + 2 * medium + 3 * large
    return "happy" if score >= 10 else "sad"


def pressure(temperature: int) -> tuple[int, int]:
    """The pressure reading and whether it is below (1), at (0) or above (-1) sea level."""
    reading = (5 * temperature - 400) & _USHORT_MASK
    if reading > 100:
        return reading, -1
    if reading < 100:
        return reading, 1
    return reading, 0


def highest_bidder(bids: Iterable[tuple[str, int]]) -> str:
    """The first bidder offering the highest positive bid, or an empty name."""
    best_name, best_bid = "", 0
    for name, bid in bids:
        if bid > best_bid:
            best_name, best_bid = name, bid
    return best_name


def decode_directions(instructions: Iterable[int]) -> list[str]:
    """Turn five-digit codes into ``left``/``right`` step instructions."""
    went_left = False
    decoded = []
    for instruction in instructions:
        digit_sum = instruction // 1000 + instruction // 10000
        steps = instruction % 1000
        if digit_sum != 0:
            went_left = digit_sum % 2 == 1
        decoded.append(f"{'left' if went_left else 'right'} {steps}")
    return decoded


def fence_area(heights: Sequence[float], widths: Sequence[float]) -> float:
    """Total area of trapezoidal fence pieces between consecutive heights."""
    if len(heights) != len(widths) + 1:
        raise ValueError("there must be exactly one more height than widths")
    return sum(
        width * (left + right) / 2.0
        for width, left, right in zip(widths, heights, heights[1:])
    )


def _ints(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def _take(values: Sequence, count: int) -> list:
    if count < 0 or len(values) < count:
        raise ValueError(f"expected {count} values, got {len(values)}")
    return list(values[:count])


def _lines(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _solve_basketball(text: str) -> str:
    values = _take(_ints(text), 6)
    return _lines([basketball_winner(values[:3], values[3:])])


def _solve_decode_runs(text: str) -> str:
    tokens = text.split()
    (count,) = _take(tokens, 1)
    fields = _take(tokens[1:], 2 * int(count))
    pairs = []
    for length, ch in zip(fields[::2], fields[1::2]):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        pairs.append((int(length), ch))
    return _lines(decode_runs(pairs))


def _solve_encode_runs(text: str) -> str:
    tokens = text.split()
    (count,) = _take(tokens, 1)
    return _lines(encode_runs(line) for line in _take(tokens[1:], int(count)))


def _solve_flip(text: str) -> str:
    tokens = text.split()
    grid = flip_grid(tokens[0] if tokens else "")
    return _lines(" ".join(str(cell) for cell in row) for row in grid)


def _solve_primes(text: str) -> str:
    values = _ints(text)
    (count,) = _take(values, 1)
    pairs = (prime_pair(n) for n in _take(values[1:], count))
    return _lines(f"{a} {b}" for pair in pairs if pair is not None for a, b in [pair])


def _solve_happiness(text: str) -> str:
    small, medium, large = _take(_ints(text), 3)
    return happiness(small, medium, large)


def _solve_pressure(text: str) -> str:
    (temperature,) = _take(_ints(text), 1)
    reading, level = pressure(temperature)
    return _lines([str(reading), str(level)])


def _solve_bids(text: str) -> str:
    tokens = text.split()
    (count,) = _take(tokens, 1)
    fields = _take(tokens[1:], 2 * int(count))
    bids = [(name, int(bid)) for name, bid in zip(fields[::2], fields[1::2])]
    return _lines([highest_bidder(bids)])


def _solve_directions(text: str) -> str:
    values = _ints(text)
    try:
        end = values.index(_DIRECTIONS_END)
    except ValueError:
        raise ValueError(f"input must end with {_DIRECTIONS_END}") from None
    return _lines(decode_directions(values[:end]))


def _solve_fence(text: str) -> str:
    tokens = text.split()
    (count,) = _take(tokens, 1)
    n = int(count)
    numbers = [float(token) for token in _take(tokens[1:], 2 * n + 1)]
    return _lines([f"{fence_area(numbers[: n + 1], numbers[n + 1 :]):.6f}"])


_PROBLEMS: dict[str, Callable[[str], str]] = {
    "19-j1": _solve_basketball,
    "19-j2": _solve_decode_runs,
    "19-j3": _solve_encode_runs,
    "19-s1": _solve_flip,
    "19-s2": _solve_primes,
    "20-j1": _solve_happiness,
    "21-j1": _solve_pressure,
    "21-j2": _solve_bids,
    "21-j3": _solve_directions,
    "21-s1": _solve_fence,
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
    parser = argparse.ArgumentParser(description="Solve a 2019-2021 contest problem.")
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    sys.stdout.write(solve(args.problem, sys.stdin.read()))
    return 0