"""Round-by-round dice match: each round's higher roll earns a win."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from diceduel.dice import Winner, compare_scores, roll_dice

DEFAULT_LOG = "gameLog.txt"


@dataclass(frozen=True)
class MatchRound:
    """One round of a match and both players' rolls."""

    number: int
    roll1: int
    roll2: int

    @property
    def winner(self) -> Winner:
        return compare_scores(self.roll1, self.roll2)


@dataclass
class MatchResult:
    """A finished match between two named players."""

    player1: str
    player2: str
    rounds: list[MatchRound] = field(default_factory=list)

    @property
    def wins1(self) -> int:
        return sum(1 for r in self.rounds if r.winner is Winner.PLAYER1)

    @property
    def wins2(self) -> int:
        return sum(1 for r in self.rounds if r.winner is Winner.PLAYER2)

    def winner(self) -> Winner:
        """Return who won more rounds, or a draw."""
        return compare_scores(self.wins1, self.wins2)


def play_match(
    player1: str,
    player2: str,
    total_rounds: int,
    rng: random.Random | None = None,
) -> MatchResult:
    """Play a fixed number of rounds; fewer than one round plays none."""
    rounds = [
        MatchRound(number, roll_dice(rng), roll_dice(rng))
        for number in range(1, total_rounds + 1)
    ]
    return MatchResult(player1, player2, rounds)


def format_round(player1: str, player2: str, match_round: MatchRound) -> str:
    """Render both rolls of a round and who took it."""
    number = match_round.number
    outcome = match_round.winner
    if outcome is Winner.PLAYER1:
        verdict = f"{player1} wins Round {number}!"
    elif outcome is Winner.PLAYER2:
        verdict = f"{player2} wins Round {number}!"
    else:
        verdict = f"Round {number} ends in a tie!"
    lines = [
        "",
        f"--- Round {number} ---",
        f"{player1:<10} rolls a {match_round.roll1}",
        f"{player2:<10} rolls a {match_round.roll2}",
        verdict,
    ]
    return "\n".join(lines) + "\n"


def format_scoreboard(result: MatchResult) -> str:
    """Render the final win counts and the match outcome."""
    outcome = result.winner()
    if outcome is Winner.PLAYER1:
        verdict = f"{result.player1} takes the match!"
    elif outcome is Winner.PLAYER2:
        verdict = f"{result.player2} takes the match!"
    else:
        verdict = "The match ends in a draw!"
    lines = [
        "",
        "=== Final Scoreboard ===",
        f"{result.player1:<10}: {result.wins1} wins",
        f"{result.player2:<10}: {result.wins2} wins",
        verdict,
    ]
    return "\n".join(lines) + "\n"


def log_lines(result: MatchResult) -> list[str]:
    """Return the lines of the match log, without line endings."""
    lines = ["Dice Duel Game Log", f"Players: {result.player1} vs. {result.player2}"]
    lines.extend(
        f"Round {r.number}: {result.player1} rolled {r.roll1}, "
        f"{result.player2} rolled {r.roll2}"
        for r in result.rounds
    )
    lines.append(
        f"Final Score: {result.player1} ({result.wins1}) vs. "
        f"{result.player2} ({result.wins2})"
    )
    return lines


def write_log(result: MatchResult, path: str | Path = DEFAULT_LOG) -> None:
    """Write the match log to a file, replacing any earlier log."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(line + "\n" for line in log_lines(result))


def _parse_rounds(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run one interactive match and log it."""
    parser = argparse.ArgumentParser(
        prog="diceduel-match",
        description="Two players roll each round; the higher roll takes the round.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    parser.add_argument("--log", default=DEFAULT_LOG, help="path of the game log file")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    try:
        print("=== Dice Duel ===")
        player1 = input("Enter Player 1's name: ")
        player2 = input("Enter Player 2's name: ")
        total_rounds = _parse_rounds(input("Enter number of rounds to play: "))
    except EOFError:
        print()
        return 1

    result = play_match(player1, player2, total_rounds, rng)
    for match_round in result.rounds:
        print(format_round(player1, player2, match_round), end="")
    print(format_scoreboard(result), end="")
    write_log(result, args.log)
    print("Thanks for playing Dice Duel!")
    return 0