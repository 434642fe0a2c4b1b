"""Tests for levels, achievements, and unlocks."""

from typearena.models import AchievementStats
from typearena.progression import (
    ACHIEVEMENTS,
    categories_for_level,
    check_achievements,
    check_level_unlocks,
    get_achievement,
    get_difficulty,
    get_level_from_xp,
    get_level_progress,
    get_xp_for_next_level,
)


class MemoryUnlocks:
    def __init__(self, unlocked=("classics",)) -> None:
        self.unlocked = list(unlocked)

    def unlock_category(self, category_id: str) -> bool:
        if category_id in self.unlocked:
            return False
        self.unlocked.append(category_id)
        return True


def test_level_boundaries():
    assert get_level_from_xp(0) == 1
    assert get_level_from_xp(999) == 1
    assert get_level_from_xp(1000) == 2
    assert get_level_from_xp(49000) == 50
    assert get_level_from_xp(100000) == 50


def test_xp_for_next_level():
    assert get_xp_for_next_level(0) == 1000
    assert get_xp_for_next_level(1250) == 750
    assert get_xp_for_next_level(48999) == 1


def test_xp_for_next_level_saturates_at_cap():
    assert get_xp_for_next_level(49000) == 0
    assert get_xp_for_next_level(120000) == 0


def test_level_progress():
    assert get_level_progress(0) == 0
    assert get_level_progress(1250) == 25
    assert get_level_progress(3999) == 100
    assert get_level_progress(2500) == 50


def test_first_round_achievements():
    stats = AchievementStats(rounds_completed=1, wpm=45, accuracy=97, session_rounds=1)
    assert check_achievements(stats) == ["first_steps"]


def test_all_rules_can_fire_together():
    stats = AchievementStats(rounds_completed=12, wpm=105, accuracy=100, session_rounds=10)
    assert set(check_achievements(stats)) == {
        "first_steps", "speed_demon", "centurion", "perfectionist", "marathon",
    }


def test_existing_achievements_are_not_repeated():
    stats = AchievementStats(rounds_completed=3, wpm=85, accuracy=99, session_rounds=2)
    assert check_achievements(stats, ["first_steps", "speed_demon"]) == []


def test_perfectionist_requires_exact_hundred():
    stats = AchievementStats(rounds_completed=0, wpm=10, accuracy=99, session_rounds=0)
    assert check_achievements(stats) == []


def test_catalog_lookup():
    assert get_achievement("centurion").name == "100 WPM Club"
    assert get_achievement("nope") is None
    assert len({a.id for a in ACHIEVEMENTS}) == len(ACHIEVEMENTS)
    assert get_difficulty("hard").word_range == (80, 120)
    assert get_difficulty("impossible") is None


def test_categories_for_level():
    assert categories_for_level(1) == []
    assert categories_for_level(5) == ["poetry", "code"]
    assert categories_for_level(50) == ["poetry", "code", "random", "humor"]


def test_level_unlocks_only_report_new_categories():
    store = MemoryUnlocks()
    assert check_level_unlocks(4, store) == ["poetry"]
    assert check_level_unlocks(9, store) == ["code", "random"]
    assert check_level_unlocks(9, store) == []
    assert store.unlocked == ["classics", "poetry", "code", "random"]
