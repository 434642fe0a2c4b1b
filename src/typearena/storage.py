"""Player profiles, unlocks, and high scores with SQLite persistence."""

from __future__ import annotations

import json
import logging
import sqlite3
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any, Callable

from typearena.config import GAME_STATE_TTL_S, MAX_LEVEL
from typearena.errors import StorageError
from typearena.models import PlayerProfile
from typearena.progression import get_level_from_xp

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".typearena" / "profiles.db"

KEY_PLAYERS = "players"
KEY_UNLOCKS = "unlocks"
KEY_HIGHSCORES = "highscores"
KEY_ACHIEVEMENTS = "achievements"
KEY_GAME_STATE = "game_state"

DEFAULT_UNLOCKS = ["classics"]


def _profile_from_dict(data: dict[str, Any]) -> PlayerProfile:
    profile = PlayerProfile(**{
        k: v for k, v in data.items()
        if k in PlayerProfile.__dataclass_fields__
    })
    if not isinstance(profile.name, str):
        raise TypeError(f"player name must be a string, got {profile.name!r}")
    return profile


class ProfileStore:
    """Key/value store of JSON documents backing player progression.

    Each fixed key holds one document; every public call reads and writes
    whole documents, so a call is a single transaction.
    """

    def __init__(
        self,
        db_path: Path | str = DEFAULT_DB_PATH,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._clock = clock
        try:
            if str(db_path) != ":memory:":
                Path(db_path).parent.mkdir(parents=True, exist_ok=True)
            self.conn = sqlite3.connect(str(db_path))
            self._init_db()
        except (OSError, sqlite3.Error) as exc:
            raise StorageError(f"cannot open profile database {db_path}: {exc}") from exc

    def _init_db(self) -> None:
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS documents (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        self.conn.commit()

    def __enter__(self) -> ProfileStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- raw documents -----------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        row = self.conn.execute(
            "SELECT value FROM documents WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            return default
        try:
            return json.loads(row[0])
        except json.JSONDecodeError:
            logger.warning("Discarding corrupt document under key %s", key)
            return default

    def set(self, key: str, value: Any) -> None:
        try:
            self.conn.execute(
                """INSERT INTO documents (key, value) VALUES (?, ?)
                   ON CONFLICT(key) DO UPDATE SET
                       value = excluded.value,
                       updated_at = CURRENT_TIMESTAMP""",
                (key, json.dumps(value)),
            )
            self.conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(f"cannot write {key}: {exc}") from exc

    def delete(self, key: str) -> None:
        self.conn.execute("DELETE FROM documents WHERE key = ?", (key,))
        self.conn.commit()

    # -- players -----------------------------------------------------------

    def get_players(self) -> list[PlayerProfile]:
        """Saved profiles; entries of the wrong shape are logged and skipped."""
        stored = self.get(KEY_PLAYERS, [])
        if not isinstance(stored, list):
            logger.warning("Ignoring players document of type %s", type(stored).__name__)
            return []
        players = []
        for entry in stored:
            try:
                players.append(_profile_from_dict(entry))
            except (TypeError, AttributeError) as exc:
                logger.warning("Skipping malformed player entry %r: %s", entry, exc)
        return players

    def save_players(self, players: list[PlayerProfile]) -> None:
        self.set(KEY_PLAYERS, [asdict(p) for p in players])

    @staticmethod
    def _find(players: list[PlayerProfile], name: str) -> PlayerProfile | None:
        wanted = name.lower()
        for player in players:
            if player.name.lower() == wanted:
                return player
        return None

    def get_player_by_name(self, name: str) -> PlayerProfile | None:
        return self._find(self.get_players(), name)

    def update_player_xp(self, name: str, xp_delta: int) -> tuple[PlayerProfile, bool]:
        """Add XP to a player, creating the profile on first use.

        Also counts the game as played. Returns the updated profile and
        whether the player gained a level.
        """
        players = self.get_players()
        player = self._find(players, name)
        if player is None:
            player = PlayerProfile(name=name)
            players.append(player)

        player.xp += xp_delta
        player.games_played += 1
        new_level = get_level_from_xp(player.xp)
        leveled_up = new_level > player.level
        player.level = min(new_level, MAX_LEVEL)

        self.save_players(players)
        if leveled_up:
            logger.info("%s reached level %d", player.name, player.level)
        return player, leveled_up

    def update_player_stats(self, name: str, wpm: int, words_typed: int) -> None:
        players = self.get_players()
        player = self._find(players, name)
        if player is None:
            return
        player.best_wpm = max(player.best_wpm, wpm)
        player.total_words_typed += words_typed
        self.save_players(players)

    # -- unlocks -----------------------------------------------------------

    def get_unlocks(self) -> list[str]:
        return self.get(KEY_UNLOCKS, list(DEFAULT_UNLOCKS))

    def unlock_category(self, category_id: str) -> bool:
        unlocks = self.get_unlocks()
        if category_id in unlocks:
            return False
        unlocks.append(category_id)
        self.set(KEY_UNLOCKS, unlocks)
        return True

    def is_category_unlocked(self, category_id: str) -> bool:
        return category_id in self.get_unlocks()

    # -- high scores -------------------------------------------------------

    def get_highscores(self) -> dict[str, int]:
        return self.get(KEY_HIGHSCORES, {})

    def save_highscore(self, category_id: str, score: int) -> bool:
        """Store the score if it beats the category's best. Returns True if it did."""
        highscores = self.get_highscores()
        if category_id in highscores and score <= highscores[category_id]:
            return False
        highscores[category_id] = score
        self.set(KEY_HIGHSCORES, highscores)
        return True

    # -- achievements ------------------------------------------------------

    def get_achievements(self, name: str) -> list[str]:
        return self.get(KEY_ACHIEVEMENTS, {}).get(name.lower(), [])

    def add_achievement(self, name: str, achievement_id: str) -> bool:
        all_achievements = self.get(KEY_ACHIEVEMENTS, {})
        held = all_achievements.setdefault(name.lower(), [])
        if achievement_id in held:
            return False
        held.append(achievement_id)
        self.set(KEY_ACHIEVEMENTS, all_achievements)

        players = self.get_players()
        player = self._find(players, name)
        if player is not None and achievement_id not in player.achievements:
            player.achievements.append(achievement_id)
            self.save_players(players)
        return True

    # -- saved game --------------------------------------------------------

    def save_game_state(self, state: dict[str, Any]) -> None:
        self.set(KEY_GAME_STATE, {**state, "saved_at": self._clock()})

    def load_game_state(self) -> dict[str, Any] | None:
        """Return the saved game, or None if there is none or it has expired."""
        state = self.get(KEY_GAME_STATE)
        if not isinstance(state, dict):
            return None
        saved_at = state.get("saved_at")
        if saved_at is not None and self._clock() - saved_at > GAME_STATE_TTL_S:
            self.clear_game_state()
            return None
        return state

    def clear_game_state(self) -> None:
        self.delete(KEY_GAME_STATE)

    def close(self) -> None:
        self.conn.close()
