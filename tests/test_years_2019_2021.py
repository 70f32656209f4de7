import io
import sys

import pytest

from ccc_solvers.years_2019_2021 import (
    basketball_winner,
    decode_directions,
    decode_runs,
    encode_runs,
    fence_area,
    flip_grid,
    happiness,
    highest_bidder,
    is_prime,
    main,
    pressure,
    prime_pair,
    solve,
)


def test_basketball_tie():
    assert basketball_winner((2, 3, 4), (2, 3, 4)) == "T"


@pytest.mark.parametrize(
    "stronger, weaker",
    [((1, 0, 0), (0, 1, 0)), ((0, 0, 5), (1, 0, 1)), ((0, 3, 0), (1, 1, 0))],
)
def test_basketball_winner_is_symmetric(stronger, weaker):
    assert basketball_winner(stronger, weaker) == "A"
    assert basketball_winner(weaker, stronger) == "B"


def test_basketball_needs_three_counts():
    with pytest.raises(ValueError):
        basketball_winner((1, 2), (1, 2, 3))


def test_decode_runs_lengths_and_characters():
    pairs = [(3, "x"), (1, "#"), (5, "q")]
    lines = decode_runs(pairs)
    assert len(lines) == len(pairs)
    for line, (count, ch) in zip(lines, pairs):
        assert len(line) == count
        assert set(line) == {ch}


@pytest.mark.parametrize("line", ["aaabb", "+++===!!!", "abc", "zzzzzzzzzz", "a"])
def test_encode_then_decode_round_trip(line):
    tokens = encode_runs(line).split()
    pairs = [(int(count), ch) for count, ch in zip(tokens[::2], tokens[1::2])]
    assert "".join(decode_runs(pairs)) == line


def test_encode_runs_example():
    assert encode_runs("aaabb") == "3 a 2 b"


def test_encode_runs_empty():
    assert encode_runs("") == ""


def test_flip_grid_identity():
    assert flip_grid("") == [[1, 2], [3, 4]]


@pytest.mark.parametrize("instructions", ["HH", "VV", "HVHV", "HVVH"])
def test_flip_grid_pairs_cancel(instructions):
    assert flip_grid(instructions) == flip_grid("")


def test_flip_grid_directions():
    start = flip_grid("")
    assert flip_grid("H") == list(reversed(start))
    assert flip_grid("V") == [row[::-1] for row in start]
    assert flip_grid("HV") == flip_grid("VH")


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 29, 97, 7919])
def test_is_prime_primes(p):
    assert is_prime(p) is True


@pytest.mark.parametrize("a, b", [(2, 2), (3, 5), (7, 7), (11, 13), (5, 25)])
def test_is_prime_products(a, b):
    assert is_prime(a * b) is False


@pytest.mark.parametrize("n", [-7, 0, 1])
def test_is_prime_small(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("n", [4, 8, 10, 21, 100, 1000])
def test_prime_pair_invariants(n):
    a, b = prime_pair(n)
    assert a + b == 2 * n
    assert is_prime(a) and is_prime(b)
    assert not any(is_prime(x) and is_prime(2 * n - x) for x in range(2, a))


def test_prime_pair_none_when_range_empty():
    assert prime_pair(2) is None


@pytest.mark.parametrize(
    "small, medium, large, expected",
    [(10, 0, 0, "happy"), (9, 0, 0, "sad"), (0, 5, 0, "happy"), (0, 0, 3, "sad")],
)
def test_happiness(small, medium, large, expected):
    assert happiness(small, medium, large) == expected


def test_pressure_at_sea_level():
    assert pressure(100) == (100, 0)
    assert pressure(80) == (0, 1)


@pytest.mark.parametrize("t", [80, 90, 150, 300])
def test_pressure_grows_by_five(t):
    assert pressure(t + 1)[0] - pressure(t)[0] == 5


def test_pressure_level_follows_reading():
    for t in range(80, 200):
        reading, level = pressure(t)
        assert level == (1 if reading < 100 else -1 if reading > 100 else 0)


def test_pressure_wraps_below_zero():
    assert pressure(79)[1] == -1


def test_highest_bidder_picks_largest():
    bids = [("Ahmed", 300), ("Suzanne", 500), ("Ivona", 450)]
    assert highest_bidder(bids) == "Suzanne"


def test_highest_bidder_first_wins_tie():
    assert highest_bidder([("Ann", 7), ("Bob", 7)]) == "Ann"


def test_highest_bidder_no_positive_bid():
    assert highest_bidder([("Ann", 0)]) == ""


def test_decode_directions_example():
    assert decode_directions([57234, 907, 34100]) == [
        "right 234",
        "right 907",
        "left 100",
    ]


@pytest.mark.parametrize("first", [57234, 34100, 12345, 99000])
def test_decode_directions_zero_repeats_previous(first):
    first_word = decode_directions([first])[0].split()[0]
    second = decode_directions([first, 5])[1]
    assert second == f"{first_word} 5"


def test_fence_area_constant_height():
    widths = [2.0, 3.0, 4.5]
    assert fence_area([4.0] * 4, widths) == pytest.approx(4.0 * sum(widths))


def test_fence_area_length_mismatch():
    with pytest.raises(ValueError):
        fence_area([1.0, 2.0], [1.0, 2.0])


def test_solve_fence_format():
    out = solve("21-s1", "2\n2 4 2\n1 3\n")
    assert out.endswith("\n")
    whole, decimals = out.strip().split(".")
    assert len(decimals) == 6
    assert float(out) == pytest.approx(fence_area([2, 4, 2], [1, 3]))


def test_solve_happiness_has_no_newline():
    assert solve("20-j1", "10 0 0") == "happy"


def test_solve_directions_needs_terminator():
    with pytest.raises(ValueError):
        solve("21-j3", "57234 907")


def test_solve_directions_stops_at_terminator():
    assert solve("21-j3", "57234\n99999\n12345\n") == "right 234\n"


def test_solve_unknown_problem():
    with pytest.raises(ValueError):
        solve("99-j9", "")


def test_solve_runs_round_trip():
    encoded = solve("19-j3", "1\nccccdd\n")
    count_tokens = encoded.split()
    decoded = solve("19-j2", f"{len(count_tokens) // 2}\n" + encoded)
    assert decoded.replace("\n", "") == "ccccdd"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["19-s1"]) == 0
    assert capsys.readouterr().out == "1 2\n3 4\n"