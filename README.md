# diceduel

A small dice game for the terminal. Two players roll six-sided dice
against each other. Player 2 can be named `CPU` to play solo.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

### `diceduel`: the classic duel

    diceduel [--seed N] [--log PATH]

The command asks for both players' names and then for the number of rounds.
Enter `0` for endless mode. If the answer is not a non-negative integer, it
asks again. In each round both players roll, and each roll is added to that
player's total. A table of the rolls and running totals is printed. The game
ends when the rounds run out or when either total reaches 30. The higher
total wins, and equal totals are a tie.

After each game the log is written to `PATH`, which is `gameLog.txt` by
default. The log holds the players, every round's rolls and the final
totals. Then the command asks `Play again? (Y/N)`.

- `--seed N` seeds the dice, so the games can be repeated.
- `--log PATH` sets where the game log is written.

### `diceduel-match`: a fixed number of rounds

    diceduel-match [--seed N] [--log PATH]

The command asks for both names and for the number of rounds. If the answer
is not a number, no rounds are played. In each round the higher roll wins
the round, and equal rolls give no one the point. At the end a scoreboard of
round wins is printed, and it names who takes the match or says it is a
draw. The log is written to `PATH`, which is `gameLog.txt` by default.

### `diceduel-leaderboard`: player stats table

    diceduel-leaderboard [--random] [--seed N]

With no options, the command prints a fixed sample roster of names, scores
and match times, sorted by score from highest to lowest. With `--random`, it
gives each sample name a random score (1–100) and a random match time (5–24
minutes) and prints them unsorted. `--seed` makes the random values
repeatable.

## Using it as a library

```python
import random

from diceduel.classic import play_duel, format_summary, write_log
from diceduel.match import play_match, format_scoreboard
from diceduel.leaderboard import default_stats, sort_by_score, format_table

rng = random.Random(42)

duel = play_duel("Ann", "CPU", 5, rng)   # 0 rounds means endless mode
print(format_summary(duel))
write_log(duel, "duel.txt")

match = play_match("Ann", "Bob", 3, rng)
print(format_scoreboard(match))

print(format_table(sort_by_score(default_stats())))
```

- `diceduel.dice.roll_dice(rng)` returns a value from 1 to 6.
- `diceduel.dice.compare_scores(score1, score2)` returns a `Winner`
  (`TIE`, `PLAYER1` or `PLAYER2`).
- `diceduel.classic.play_duel` returns a `DuelResult` that holds its
  `DuelRound`s, the `score1`/`score2` totals, `rounds_played` and a
  `winner()` method. A negative round count raises `ValueError`.
- `diceduel.match.play_match` returns a `MatchResult` that holds its
  `MatchRound`s, the `wins1`/`wins2` counts and a `winner()` method.
- `log_lines(result)` and `write_log(result, path)` in `classic` and
  `match` build a game log or save it to a file.
- `diceduel.leaderboard.generate_random_stats(names, rng)` returns a list of
  `PlayerStat` with random scores and times.

## What it does not do

- Solo mode only changes a name. No player is controlled by the computer,
  because every roll is random.
- Game results are not kept between runs. Each game's log replaces the
  previous one, and the leaderboard table does not read game logs.