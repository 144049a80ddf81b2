"""Player statistics table: random generation, score sorting and display."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEFAULT_NAMES = ("Matt", "Jordan", "Alex", "Riley", "Casey")
COLUMN_WIDTH = 10


@dataclass(frozen=True)
class PlayerStat:
    """One player's score and match time in minutes."""

    name: str
    score: int
    time: int


def default_stats() -> list[PlayerStat]:
    """Return the fixed sample roster."""
    return [
        PlayerStat("Matt", 87, 12),
        PlayerStat("Jordan", 92, 15),
        PlayerStat("Alex", 75, 9),
        PlayerStat("Riley", 98, 18),
        PlayerStat("Casey", 81, 11),
    ]


def generate_random_stats(
    names: Iterable[str] = DEFAULT_NAMES, rng: random.Random | None = None
) -> list[PlayerStat]:
    """Give each name a score from 1 to 100 and a time from 5 to 24 minutes."""
    source = rng if rng is not None else random
    stats = []
    for name in names:
        score = source.randint(1, 100)
        time = source.randint(5, 24)
        stats.append(PlayerStat(name, score, time))
    return stats


def sort_by_score(stats: Iterable[PlayerStat]) -> list[PlayerStat]:
    """Return the stats in descending score order; equal scores keep their order."""
    return sorted(stats, key=lambda stat: stat.score, reverse=True)


def _row(*cells: object) -> str:
    return "".join(str(cell).rjust(COLUMN_WIDTH) for cell in cells)


def format_table(stats: Iterable[PlayerStat]) -> str:
    """Render a right-aligned Name/Score/Time table, one line per player."""
    lines = [_row("Name", "Score", "Time")]
    lines.extend(_row(stat.name, stat.score, stat.time) for stat in stats)
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample roster sorted by score, or a random unsorted roster."""
    parser = argparse.ArgumentParser(
        prog="diceduel-leaderboard",
        description="Show a table of player scores and match times.",
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="generate random scores and times and show them unsorted",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)

    if args.random:
        stats = generate_random_stats(DEFAULT_NAMES, random.Random(args.seed))
    else:
        stats = sort_by_score(default_stats())
    print(format_table(stats), end="")
    return 0