"""Dice rolling and score comparison shared by the duel variants."""

from __future__ import annotations

import random
from enum import IntEnum

DIE_SIDES = 6


class Winner(IntEnum):
    """Outcome of comparing two players' totals."""

    TIE = 0
    PLAYER1 = 1
    PLAYER2 = 2


def roll_dice(rng: random.Random | None = None) -> int:
    """Roll one six-sided die and return a value from 1 to 6."""
    source = rng if rng is not None else random
    return source.randint(1, DIE_SIDES)


def compare_scores(score1: int, score2: int) -> Winner:
    """Return which player has the higher value, or a tie."""
    if score1 == score2:
        return Winner.TIE
    return Winner.PLAYER1 if score1 > score2 else Winner.PLAYER2