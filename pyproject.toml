[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ccc-solvers"
version = "0.1.0"
description = "Solutions to Canadian Computing Competition problems, usable as functions or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["ccc", "competitive-programming", "puzzles", "algorithms", "contest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ccc-2000-2007 = "ccc_solvers.years_2000_2007:main"
ccc-2012-2014 = "ccc_solvers.years_2012_2014:main"
ccc-2015-2018 = "ccc_solvers.years_2015_2018:main"
ccc-2019-2021 = "ccc_solvers.years_2019_2021:main"
ccc-2022 = "ccc_solvers.year_2022:main"
ccc-2023 = "ccc_solvers.year_2023:main"
ccc-2024 = "ccc_solvers.year_2024:main"

[tool.hatch.build.targets.wheel]
packages = ["ccc_solvers"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
