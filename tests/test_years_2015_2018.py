import io
import string

import pytest

from ccc_solvers.years_2015_2018 import (
    MAX_FLOAT,
    expand_consonants,
    is_anagram,
    is_vowel,
    last_equal_day,
    main,
    mood,
    next_consonant,
    next_vowel,
    quadrant,
    smallest_neighbourhood,
    solve,
    zero_sum,
)

CONSONANTS = [c for c in string.ascii_lowercase if c not in "aeiou"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", "none"),
        ("just :- text", "none"),
        ("How are you :-) doing :-( today :-)?", "happy"),
        (":-( :-(", "sad"),
        (":-) :-(", "unsure"),
    ],
)
def test_mood(text, expected):
    assert mood(text) == expected


@pytest.mark.parametrize("c", list("aeiou"))
def test_vowels(c):
    assert is_vowel(c) is True


@pytest.mark.parametrize("c", CONSONANTS)
def test_next_vowel_is_a_vowel(c):
    assert is_vowel(next_vowel(c))


def test_next_vowel_boundaries():
    assert next_vowel("c") == "a"
    assert next_vowel("d") == "e"
    assert next_vowel("s") == "u"


def test_next_consonant_of_z():
    assert next_consonant("z") == "z"


@pytest.mark.parametrize("c", [c for c in CONSONANTS if c != "z"])
def test_next_consonant_skips_vowels(c):
    result = next_consonant(c)
    assert result > c
    assert not is_vowel(result)


def test_expand_consonants_sample():
    assert expand_consonants("joy") == "jikoyuz"


def test_expand_consonants_keeps_vowels_and_triples_consonants():
    assert expand_consonants("aeiou") == "aeiou"
    word = "programming"
    consonants = sum(1 for c in word if not is_vowel(c))
    assert len(expand_consonants(word)) == len(word) + 2 * consonants


def test_zero_sum_sample():
    assert zero_sum([1, 3, 5, 4, 0, 0, 7, 0, 0, 6]) == 7


def test_zero_sum_invariants():
    assert zero_sum([5, 0]) == 0
    assert zero_sum([]) == 0
    assert zero_sum([2, 4, 9]) == sum([2, 4, 9])
    assert zero_sum([0, 0, 5]) == 5


@pytest.mark.parametrize(
    "word, pattern, expected",
    [
        ("cccrocks", "socc*rk*", True),
        ("listen", "silent", True),
        ("abba", "baaa", False),
        ("abc", "abcd", False),
        ("abc", "***", True),
        ("abc", "abx", False),
    ],
)
def test_is_anagram(word, pattern, expected):
    assert is_anagram(word, pattern) is expected


@pytest.mark.parametrize(
    "x, y, expected",
    [(3, 4, 1), (-3, 4, 2), (-3, -4, 3), (3, -4, 4), (0, 5, 4)],
)
def test_quadrant(x, y, expected):
    assert quadrant(x, y) == expected


def test_last_equal_day_identical_teams():
    team = [3, 1, 4, 1, 5]
    assert last_equal_day(team, list(team)) == len(team)


def test_last_equal_day_never_equal():
    assert last_equal_day([1, 1, 1], [2, 2, 2]) == 0


def test_smallest_neighbourhood_too_few_villages():
    assert smallest_neighbourhood([]) == MAX_FLOAT
    assert smallest_neighbourhood([1, 2]) == MAX_FLOAT


def test_smallest_neighbourhood_sample():
    assert smallest_neighbourhood([16, 0, 10, 4, 15]) == 3.0


def test_smallest_neighbourhood_invariant_to_order_and_shift():
    villages = [16, 0, 10, 4, 15, 22]
    base = smallest_neighbourhood(villages)
    assert smallest_neighbourhood(reversed(villages)) == base
    assert smallest_neighbourhood([v + 7 for v in villages]) == base


def test_solve_villages():
    assert solve("18-s1", "5\n16\n0\n10\n4\n15\n") == "3.0\n"


def test_solve_anagram():
    assert solve("16-s1", "cccrocks\nsocc*rk*\n") == "A\n"


def test_solve_mood_reads_first_line():
    assert solve("15-j2", ":-)\n:-( :-(\n") == "happy\n"


def test_solve_unknown_problem():
    with pytest.raises(ValueError):
        solve("15-x9", "")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("-3\n-4\n"))
    assert main(["17-j1"]) == 0
    assert capsys.readouterr().out == "3\n"