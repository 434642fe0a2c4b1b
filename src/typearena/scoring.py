"""Score and experience calculation for a completed turn."""

from __future__ import annotations

import math

from typearena.config import (
    ACCURACY_BONUS_FACTOR,
    BASE_POINTS_PER_WPM,
    MIN_XP_PER_ROUND,
    TIME_BONUS_FACTOR,
    TIME_BONUS_LIMIT_S,
)
from typearena.models import ScoreBreakdown

DIFFICULTY_MULTIPLIERS: dict[str, float] = {
    "easy": 1,
    "medium": 1.5,
    "hard": 2,
    "expert": 3,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going up (62.5 -> 63)."""
    return math.floor(value + 0.5)


def get_multiplier(difficulty: str) -> float:
    """Multiplier for a difficulty tier; unknown tiers count as 1."""
    return DIFFICULTY_MULTIPLIERS.get(difficulty, 1)


def calculate_score(
    wpm: int,
    accuracy: int,
    time_seconds: float,
    difficulty: str = "medium",
) -> ScoreBreakdown:
    """Break a turn's performance down into its score components.

    Finishing under the time limit earns half a point per second saved;
    slower turns get no time bonus rather than a penalty.
    """
    base_score = wpm * BASE_POINTS_PER_WPM
    accuracy_bonus = round_half_up(accuracy * ACCURACY_BONUS_FACTOR)
    time_bonus = round_half_up(max(0, (TIME_BONUS_LIMIT_S - time_seconds) * TIME_BONUS_FACTOR))
    multiplier = get_multiplier(difficulty)
    total = round_half_up((base_score + accuracy_bonus + time_bonus) * multiplier)

    return ScoreBreakdown(
        base_score=base_score,
        accuracy_bonus=accuracy_bonus,
        time_bonus=time_bonus,
        difficulty_multiplier=multiplier,
        total_score=total,
    )


def calculate_xp(wpm: int, accuracy: int, difficulty: str = "medium") -> int:
    """Experience earned for a turn, never less than the per-round minimum."""
    xp = round_half_up((wpm * accuracy / 100) * get_multiplier(difficulty))
    return max(xp, MIN_XP_PER_ROUND)
