"""Tests for settings persistence."""

import json

from typearena.settings import Settings, load_settings, next_theme, save_settings


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "settings.json")
    assert settings == Settings()
    assert settings.backspace_mode == "allowed"


def test_round_trip_keeps_other_sections(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"window": {"fullscreen": True}}))
    save_settings(Settings(backspace_mode="disabled", difficulty="hard", total_rounds=5), path)

    data = json.loads(path.read_text())
    assert data["window"] == {"fullscreen": True}
    loaded = load_settings(path)
    assert loaded.backspace_mode == "disabled"
    assert loaded.difficulty == "hard"
    assert loaded.total_rounds == 5


def test_invalid_values_are_normalized(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"game": {
        "backspace_mode": "never",
        "difficulty": "nightmare",
        "total_rounds": 0,
        "player_count": 9,
        "unknown_key": 1,
    }}))
    settings = load_settings(path)
    assert settings.backspace_mode == "allowed"
    assert settings.difficulty == "medium"
    assert settings.total_rounds == 1
    assert settings.player_count == 4


def test_unreadable_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{broken")
    assert load_settings(path) == Settings()


def test_theme_toggles_between_dark_and_light():
    assert next_theme("dark") == "light"
    assert next_theme("light") == "dark"
    assert next_theme("neon") == "dark"


def test_theme_and_game_mode_persist(tmp_path):
    path = tmp_path / "settings.json"
    save_settings(Settings(theme="light", game_mode="custom"), path)
    loaded = load_settings(path)
    assert loaded.theme == "light"
    assert loaded.game_mode == "custom"


def test_unknown_game_mode_falls_back_to_quick(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"game": {"game_mode": "arcade"}}))
    assert load_settings(path).game_mode == "quick"
