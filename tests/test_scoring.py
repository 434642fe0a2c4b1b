"""Tests for score and XP calculation."""

from typearena.scoring import calculate_score, calculate_xp, get_multiplier, round_half_up


def test_breakdown_literals():
    assert calculate_score(75, 100, 60, "easy").base_score == 750
    assert calculate_score(50, 95, 60, "easy").accuracy_bonus == 190
    assert calculate_score(50, 100, 30, "easy").time_bonus == 45
    assert calculate_score(50, 100, 120, "easy").time_bonus == 0


def test_slow_turn_gets_no_negative_bonus():
    assert calculate_score(50, 100, 300, "easy").time_bonus == 0


def test_zero_time_caps_time_bonus():
    assert calculate_score(0, 100, 0, "easy").time_bonus == 60


def test_total_score():
    breakdown = calculate_score(50, 100, 60, "easy")
    assert breakdown.total_score == 500 + 200 + 30
    assert breakdown.difficulty_multiplier == 1


def test_hard_doubles_easy():
    easy = calculate_score(50, 100, 60, "easy").total_score
    hard = calculate_score(50, 100, 60, "hard").total_score
    assert hard == 2 * easy


def test_medium_and_expert_multipliers():
    assert calculate_score(50, 100, 60, "medium").total_score == 1095
    assert calculate_score(50, 100, 60, "expert").total_score == 2190


def test_unknown_difficulty_counts_as_easy():
    assert get_multiplier("nightmare") == 1
    assert calculate_score(40, 90, 50, "nightmare") == calculate_score(40, 90, 50, "easy")


def test_score_grows_with_wpm_and_accuracy():
    for wpm in range(0, 150, 7):
        assert calculate_score(wpm + 1, 90, 45, "medium").total_score > calculate_score(wpm, 90, 45, "medium").total_score
    for acc in range(0, 100, 3):
        assert calculate_score(60, acc + 1, 45, "medium").total_score > calculate_score(60, acc, 45, "medium").total_score


def test_xp_floor():
    assert calculate_xp(1, 10, "easy") == 10
    assert calculate_xp(0, 0, "expert") == 10


def test_xp_formula():
    assert calculate_xp(80, 100, "easy") == 80
    assert calculate_xp(80, 90, "hard") == 144
    assert calculate_xp(60, 95, "medium") == 86


def test_round_half_up():
    assert round_half_up(62.5) == 63
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4) == 2
