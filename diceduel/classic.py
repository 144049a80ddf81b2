"""Cumulative dice duel: the first player to reach the target total wins."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from diceduel.dice import Winner, compare_scores, roll_dice

WIN_SCORE = 30
DEFAULT_LOG = "gameLog.txt"


@dataclass(frozen=True)
class DuelRound:
    """One round: both rolls and the running totals after them."""

    number: int
    roll1: int
    roll2: int
    score1: int
    score2: int


@dataclass
class DuelResult:
    """A finished duel between two named players."""

    player1: str
    player2: str
    rounds: list[DuelRound] = field(default_factory=list)

    @property
    def score1(self) -> int:
        return self.rounds[-1].score1 if self.rounds else 0

    @property
    def score2(self) -> int:
        return self.rounds[-1].score2 if self.rounds else 0

    @property
    def rounds_played(self) -> int:
        return len(self.rounds)

    def winner(self) -> Winner:
        """Return who holds the higher final total."""
        return compare_scores(self.score1, self.score2)


def play_duel(
    player1: str,
    player2: str,
    max_rounds: int = 0,
    rng: random.Random | None = None,
) -> DuelResult:
    """Play rounds until a total reaches the target or the round limit is hit.

    A limit of 0 means endless mode: play until someone reaches the target.
    """
    if max_rounds < 0:
        raise ValueError("number of rounds must be a non-negative integer")
    result = DuelResult(player1, player2)
    score1 = score2 = 0
    number = 1
    while max_rounds == 0 or number <= max_rounds:
        roll1 = roll_dice(rng)
        roll2 = roll_dice(rng)
        score1 += roll1
        score2 += roll2
        result.rounds.append(DuelRound(number, roll1, roll2, score1, score2))
        if score1 >= WIN_SCORE or score2 >= WIN_SCORE:
            break
        number += 1
    return result


def format_round_table(player1: str, player2: str, duel_round: DuelRound) -> str:
    """Render the per-round table of rolls and running totals."""
    lines = [
        "",
        f"--- Round {duel_round.number} ---",
        f"{'Player':<10}{'Roll':<8}{'Score':<10}",
        f"{player1:<10}{duel_round.roll1:<8}{duel_round.score1:<10}",
        f"{player2:<10}{duel_round.roll2:<8}{duel_round.score2:<10}",
    ]
    return "\n".join(lines) + "\n"


def _verdict(result: DuelResult) -> str:
    outcome = result.winner()
    if outcome is Winner.TIE:
        return "It's a tie!"
    name = result.player1 if outcome is Winner.PLAYER1 else result.player2
    return f"{name} WINS!"


def format_summary(result: DuelResult) -> str:
    """Render the end-of-game summary with the winner announcement."""
    lines = [
        "",
        "*** GAME OVER ***",
        f"Rounds Played: {result.rounds_played}",
        f"{result.player1} Final Score: {result.score1}",
        f"{result.player2} Final Score: {result.score2}",
        _verdict(result),
    ]
    return "\n".join(lines) + "\n"


def log_lines(result: DuelResult) -> list[str]:
    """Return the lines of the game log, without line endings."""
    lines = ["Dice Duel Game Log", f"Players: {result.player1} vs. {result.player2}"]
    lines.extend(
        f"Round {r.number}: {result.player1} rolled {r.roll1}, "
        f"{result.player2} rolled {r.roll2}"
        for r in result.rounds
    )
    lines.append(
        f"Final Score: {result.player1} ({result.score1}) vs. "
        f"{result.player2} ({result.score2})"
    )
    return lines


def write_log(result: DuelResult, path: str | Path = DEFAULT_LOG) -> None:
    """Write the game log to a file, replacing any earlier log."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(line + "\n" for line in log_lines(result))


def _ask_rounds() -> int:
    text = input("Enter number of rounds (0 for endless mode): ")
    while True:
        try:
            value = int(text.strip())
        except ValueError:
            value = -1
        if value >= 0:
            return value
        text = input("Invalid. Enter non-negative integer: ")


def _ask_again() -> bool:
    text = input("Play again? (Y/N): ").strip()
    while True:
        if not text:
            text = input().strip()
            continue
        answer = text[0]
        if answer in "YyNn":
            return answer in "Yy"
        text = input("Invalid input. Enter Y or N: ").strip()


def main(argv: Sequence[str] | None = None) -> int:
    """Run interactive duels until the players decline a rematch."""
    parser = argparse.ArgumentParser(
        prog="diceduel",
        description="Two players roll dice; the first to reach 30 points wins.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    parser.add_argument("--log", default=DEFAULT_LOG, help="path of the game log file")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    try:
        while True:
            print("=== Dice Duel ===")
            player1 = input("Enter Player 1's name: ")
            player2 = input("Enter Player 2's name (or 'CPU' for solo mode): ")
            max_rounds = _ask_rounds()
            result = play_duel(player1, player2, max_rounds, rng)
            for duel_round in result.rounds:
                print(format_round_table(player1, player2, duel_round), end="")
            print(format_summary(result), end="")
            write_log(result, args.log)
            if not _ask_again():
                break
    except EOFError:
        print()
        return 1
    print("Thanks for playing Dice Duel!")
    return 0