# ccc-solvers

Solutions to a selection of problems from the Canadian Computing Competition
(CCC), junior and senior divisions, from contest years between 2000 and 2024.
Every problem is a plain Python function, and every group of years also has a
command that reads a problem's input from standard input and prints the answer
in the contest's output format.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules and problems

Problem codes are written `YY-jN` (junior) or `YY-sN` (senior).

| Module                        | Problem codes                                                        |
|-------------------------------|----------------------------------------------------------------------|
| `ccc_solvers.years_2000_2007` | `00-j1`, `00-j2`, `00-s1`, `01-j1`, `03-j1`, `04-j3`, `07-j1`, `07-j2` |
| `ccc_solvers.years_2012_2014` | `12-j1`, `12-j2`, `12-j3`, `12-j4`, `12-s1`, `13-j1`, `13-s1`, `14-s1` |
| `ccc_solvers.years_2015_2018` | `15-j2`, `15-j3`, `15-s1`, `16-s1`, `17-j1`, `17-s1`, `18-s1`          |
| `ccc_solvers.years_2019_2021` | `19-j1`, `19-j2`, `19-j3`, `19-s1`, `19-s2`, `20-j1`, `21-j1`, `21-j2`, `21-j3`, `21-s1` |
| `ccc_solvers.year_2022`       | `22-j1`, `22-j2`, `22-j3`, `22-s1`, `22-s2`, `22-s3`                   |
| `ccc_solvers.year_2023`       | `23-j1`, `23-j2`, `23-j3`, `23-j5`, `23-s1`, `23-s2`                   |
| `ccc_solvers.year_2024`       | `24-j1`, `24-j2`, `24-j3`, `24-j4`, `24-j5`, `24-s1`, `24-s2`          |

Each module exposes one function per problem that works on Python values
rather than contest text, for example:

```python
from ccc_solvers.years_2000_2007 import middle
from ccc_solvers.years_2019_2021 import is_prime, prime_pair
from ccc_solvers.year_2023 import count_word
from ccc_solvers.year_2024 import harvest

middle(3, 1, 2)                 # 2
is_prime(7)                     # True
prime_pair(8)                   # (3, 13): two primes whose average is 8
count_word("AB", ["AB", "CD"])  # occurrences along lines with at most one turn
harvest(["LM", "*S"], 0, 0)     # 16: pumpkin value reachable from the start
```

Functions that find no answer return `None` (for example `prime_pair` and
`good_samples`), and malformed arguments raise `ValueError`.

Each module also has `solve(problem, text)`, which takes a problem code and
the full contest input as a string and returns the text the contest expects
as output. An unknown problem code or input that is too short raises
`ValueError`.

```python
from ccc_solvers.years_2012_2014 import solve

solve("12-j1", "40 39")
# 'Congratulations, you are within the speed limit!\n'
```

## Commands

Each module has a matching command:

```
ccc-2000-2007
ccc-2012-2014
ccc-2015-2018
ccc-2019-2021
ccc-2022
ccc-2023
ccc-2024
```

Give the command the problem code and feed the contest input on standard
input; the answer is written to standard output:

```
echo "40 39" | ccc-2012-2014 12-j1
```

Run a command with `--help` to see the problem codes it accepts.

## What it does not do

Only the problems listed above are included; other contest years and problems
are not covered. The commands solve one problem per run and do not check
answers against official test data.