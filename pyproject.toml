[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diceduel"
version = "2.4.0"
description = "A two-player dice duel game for the terminal, with round-by-round matches and a score table."
requires-python = ">=3.10"
dependencies = []
keywords = ["dice", "game", "terminal", "duel", "leaderboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
diceduel = "diceduel.classic:main"
diceduel-match = "diceduel.match:main"
diceduel-leaderboard = "diceduel.leaderboard:main"

[tool.hatch.build.targets.wheel]
packages = ["diceduel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
