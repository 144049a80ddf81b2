"""Dice duel game: cumulative duels, round-by-round matches and a player stats table."""

__version__ = "2.4.0"
__all__ = ["dice", "classic", "match", "leaderboard"]