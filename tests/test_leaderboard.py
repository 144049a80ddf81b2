import random

import pytest

from diceduel.leaderboard import (
    PlayerStat,
    default_stats,
    format_table,
    generate_random_stats,
    main,
    sort_by_score,
)


def test_default_stats_hold_sample_roster():
    stats = default_stats()
    assert [s.name for s in stats] == ["Matt", "Jordan", "Alex", "Riley", "Casey"]
    assert [s.score for s in stats] == [87, 92, 75, 98, 81]
    assert [s.time for s in stats] == [12, 15, 9, 18, 11]


def test_sort_by_score_orders_sample_descending_and_keeps_rows_together():
    result = sort_by_score(default_stats())
    assert [s.name for s in result] == ["Riley", "Jordan", "Matt", "Casey", "Alex"]
    assert [s.score for s in result] == [98, 92, 87, 81, 75]
    assert [s.time for s in result] == [18, 15, 12, 11, 9]


def test_sort_by_score_does_not_modify_input():
    stats = default_stats()
    sort_by_score(stats)
    assert stats == default_stats()


def test_sort_by_score_keeps_order_of_equal_scores():
    stats = [PlayerStat("A", 50, 5), PlayerStat("B", 70, 6), PlayerStat("C", 50, 7)]
    result = sort_by_score(stats)
    assert [s.name for s in result] == ["B", "A", "C"]


def test_sort_by_score_on_random_data_is_descending_permutation():
    stats = generate_random_stats(["p%d" % n for n in range(30)], random.Random(5))
    result = sort_by_score(stats)
    assert sorted(result, key=lambda s: s.name) == sorted(stats, key=lambda s: s.name)
    assert all(a.score >= b.score for a, b in zip(result, result[1:]))


def test_generate_random_stats_ranges_and_names():
    names = ["Matt", "Jordan", "Alex", "Riley", "Casey"]
    stats = generate_random_stats(names, random.Random(11))
    assert [s.name for s in stats] == names
    many = generate_random_stats(["x"] * 500, random.Random(2))
    assert all(1 <= s.score <= 100 for s in many)
    assert all(5 <= s.time <= 24 for s in many)
    assert min(s.time for s in many) == 5
    assert max(s.time for s in many) == 24


def test_generate_random_stats_reproducible_with_seed():
    first = generate_random_stats(["a", "b", "c"], random.Random(8))
    second = generate_random_stats(["a", "b", "c"], random.Random(8))
    assert first == second


def test_generate_random_stats_empty_names():
    assert generate_random_stats([], random.Random(1)) == []


def test_format_table_header_and_alignment():
    table = format_table(default_stats())
    lines = table.splitlines()
    assert lines[0] == "      Name     Score      Time"
    assert len(lines) == 6
    assert all(len(line) == 30 for line in lines)
    assert lines[1].split() == ["Matt", "87", "12"]
    assert table.endswith("\n")


def test_format_table_empty_has_only_header():
    assert format_table([]).splitlines() == ["      Name     Score      Time"]


def test_main_prints_sorted_sample(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines[1:]] == ["Riley", "Jordan", "Matt", "Casey", "Alex"]


def test_main_random_is_unsorted_roster_in_name_order(capsys):
    assert main(["--random", "--seed", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    rows = [line.split() for line in lines[1:]]
    assert [row[0] for row in rows] == ["Matt", "Jordan", "Alex", "Riley", "Casey"]
    expected = generate_random_stats(["Matt", "Jordan", "Alex", "Riley", "Casey"], random.Random(4))
    assert [int(row[1]) for row in rows] == [s.score for s in expected]


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit):
        main(["--random", "--seed", "abc"])