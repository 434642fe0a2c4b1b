"""Levels, achievements, and level-gated content unlocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Protocol

from typearena.config import MAX_LEVEL, XP_PER_LEVEL
from typearena.models import AchievementStats
from typearena.scoring import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Achievement:
    id: str
    name: str
    description: str
    icon: str


ACHIEVEMENTS = [
    Achievement("first_steps", "First Steps", "Complete your first round", "👣"),
    Achievement("speed_demon", "Speed Demon", "Reach 80+ WPM", "⚡"),
    Achievement("centurion", "100 WPM Club", "Reach 100+ WPM", "💯"),
    Achievement("perfectionist", "Perfectionist", "100% accuracy in a round", "✨"),
    Achievement("marathon", "Marathon", "Complete 10 rounds in one session", "🏃"),
    Achievement("scholar", "Scholar", "Complete all Literary Classics", "📚"),
    Achievement("poet", "Poet", "Complete all Poetry challenges", "🎭"),
    Achievement("hacker", "Hacker", "Complete all Code challenges", "💻"),
    Achievement("comedian", "Comedian", "Complete all Humor challenges", "😂"),
    Achievement("completionist", "Completionist", "Unlock all content", "🏆"),
]


@dataclass(frozen=True)
class Difficulty:
    id: str
    name: str
    description: str
    word_range: tuple[int, int]


DIFFICULTIES = [
    Difficulty("easy", "Easy", "20-40 words", (20, 40)),
    Difficulty("medium", "Medium", "40-80 words", (40, 80)),
    Difficulty("hard", "Hard", "80-120 words", (80, 120)),
    Difficulty("expert", "Expert", "120+ words", (120, 200)),
]

# Player level -> content category it unlocks
LEVEL_UNLOCKS: dict[int, str] = {
    3: "poetry",
    5: "code",
    8: "random",
    12: "humor",
}


class UnlockStore(Protocol):
    def unlock_category(self, category_id: str) -> bool: ...


def get_level_from_xp(xp: int) -> int:
    return min(xp // XP_PER_LEVEL + 1, MAX_LEVEL)


def get_xp_for_next_level(xp: int) -> int:
    """XP still needed to reach the next level; 0 once the level cap is reached."""
    level = get_level_from_xp(xp)
    if level >= MAX_LEVEL:
        return 0
    return level * XP_PER_LEVEL - xp


def get_level_progress(xp: int) -> int:
    """Percent through the current level band."""
    return round_half_up((xp % XP_PER_LEVEL) / XP_PER_LEVEL * 100)


def check_achievements(
    stats: AchievementStats,
    existing: Iterable[str] = (),
) -> list[str]:
    """Return ids of achievements the stats qualify for that are not yet held."""
    held = set(existing)
    rules = [
        ("first_steps", stats.rounds_completed >= 1),
        ("speed_demon", stats.wpm >= 80),
        ("centurion", stats.wpm >= 100),
        ("perfectionist", stats.accuracy == 100),
        ("marathon", stats.session_rounds >= 10),
    ]
    return [ach_id for ach_id, earned in rules if earned and ach_id not in held]


def get_achievement(achievement_id: str) -> Achievement | None:
    for achievement in ACHIEVEMENTS:
        if achievement.id == achievement_id:
            return achievement
    return None


def get_difficulty(difficulty_id: str) -> Difficulty | None:
    for difficulty in DIFFICULTIES:
        if difficulty.id == difficulty_id:
            return difficulty
    return None


def categories_for_level(level: int) -> list[str]:
    """Every category whose unlock threshold the level meets."""
    return [cat for req, cat in sorted(LEVEL_UNLOCKS.items()) if level >= req]


def check_level_unlocks(level: int, store: UnlockStore) -> list[str]:
    """Unlock each category the level qualifies for; return the newly unlocked ones."""
    new_unlocks = [cat for cat in categories_for_level(level) if store.unlock_category(cat)]
    for cat in new_unlocks:
        logger.info("Unlocked category %s at level %d", cat, level)
    return new_unlocks
