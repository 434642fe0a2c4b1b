"""Tests for profile persistence."""

import pytest

from typearena.errors import StorageError
from typearena.storage import KEY_PLAYERS, ProfileStore


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_update_xp_creates_profile():
    with ProfileStore(":memory:") as store:
        player, leveled_up = store.update_player_xp("Ada", 120)
        assert player.name == "Ada"
        assert player.xp == 120
        assert player.level == 1
        assert player.games_played == 1
        assert not leveled_up


def test_names_are_case_insensitive():
    with ProfileStore(":memory:") as store:
        store.update_player_xp("Ada", 100)
        store.update_player_xp("ADA", 100)
        assert len(store.get_players()) == 1
        assert store.get_player_by_name("ada").xp == 200
        assert store.get_player_by_name("Bob") is None


def test_level_up_is_reported():
    with ProfileStore(":memory:") as store:
        store.update_player_xp("Ada", 950)
        player, leveled_up = store.update_player_xp("Ada", 100)
        assert leveled_up
        assert player.level == 2


def test_level_is_capped():
    with ProfileStore(":memory:") as store:
        player, _ = store.update_player_xp("Ada", 200000)
        assert player.level == 50


def test_update_stats_keeps_best_wpm():
    with ProfileStore(":memory:") as store:
        store.update_player_xp("Ada", 10)
        store.update_player_stats("Ada", 70, 20)
        store.update_player_stats("Ada", 55, 15)
        player = store.get_player_by_name("Ada")
        assert player.best_wpm == 70
        assert player.total_words_typed == 35


def test_update_stats_ignores_unknown_player():
    with ProfileStore(":memory:") as store:
        store.update_player_stats("Ghost", 70, 20)
        assert store.get_players() == []


def test_unlocks_default_and_add():
    with ProfileStore(":memory:") as store:
        assert store.get_unlocks() == ["classics"]
        assert store.unlock_category("poetry")
        assert not store.unlock_category("poetry")
        assert store.is_category_unlocked("poetry")
        assert not store.is_category_unlocked("humor")


def test_highscores():
    with ProfileStore(":memory:") as store:
        assert store.save_highscore("classics", 900)
        assert not store.save_highscore("classics", 900)
        assert not store.save_highscore("classics", 500)
        assert store.save_highscore("classics", 1200)
        assert store.get_highscores() == {"classics": 1200}


def test_achievements_are_stored_once():
    with ProfileStore(":memory:") as store:
        store.update_player_xp("Ada", 10)
        assert store.add_achievement("Ada", "first_steps")
        assert not store.add_achievement("ada", "first_steps")
        assert store.get_achievements("Ada") == ["first_steps"]
        assert store.get_player_by_name("Ada").achievements == ["first_steps"]
        assert store.get_achievements("Bob") == []


def test_game_state_expires_after_an_hour():
    clock = FakeClock()
    with ProfileStore(":memory:", clock=clock) as store:
        store.save_game_state({"round": 2})
        assert store.load_game_state()["round"] == 2
        clock.now += 3601
        assert store.load_game_state() is None
        assert store.get("game_state") is None


def test_clear_game_state():
    with ProfileStore(":memory:") as store:
        store.save_game_state({"round": 1})
        store.clear_game_state()
        assert store.load_game_state() is None


def test_data_survives_reopen(tmp_path):
    db = tmp_path / "nested" / "profiles.db"
    with ProfileStore(db) as store:
        store.update_player_xp("Ada", 1500)
        store.unlock_category("code")
    with ProfileStore(db) as store:
        assert store.get_player_by_name("Ada").level == 2
        assert "code" in store.get_unlocks()


def test_corrupt_document_is_treated_as_missing(caplog):
    with ProfileStore(":memory:") as store:
        store.conn.execute(
            "INSERT INTO documents (key, value) VALUES (?, ?)", (KEY_PLAYERS, "{not json"),
        )
        assert store.get_players() == []
        assert KEY_PLAYERS in caplog.text


def test_unopenable_database_raises_storage_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    with pytest.raises(StorageError):
        ProfileStore(blocker / "profiles.db")


def test_players_document_of_wrong_shape_is_ignored(caplog):
    with ProfileStore(":memory:") as store:
        store.set(KEY_PLAYERS, {"ada": {"name": "Ada"}})
        profile, leveled_up = store.update_player_xp("Ada", 50)
        assert profile.xp == 50
        assert not leveled_up
        assert "players document" in caplog.text


def test_malformed_player_entries_are_skipped(caplog):
    with ProfileStore(":memory:") as store:
        store.set(KEY_PLAYERS, [
            "Ada",
            {"xp": 10},
            {"name": 7},
            {"name": "Linus", "xp": 120},
        ])
        assert [p.name for p in store.get_players()] == ["Linus"]
        profile, _ = store.update_player_xp("linus", 30)
        assert profile.xp == 150
        assert "Skipping malformed player entry" in caplog.text
