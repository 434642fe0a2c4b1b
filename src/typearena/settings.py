"""User settings persisted as JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from typearena.config import DEFAULT_TOTAL_ROUNDS, MAX_PLAYERS
from typearena.content import GAME_MODES
from typearena.models import BackspaceMode
from typearena.scoring import DIFFICULTY_MULTIPLIERS

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".typearena" / "settings.json"
THEMES = ("dark", "light")


@dataclass
class Settings:
    backspace_mode: str = BackspaceMode.ALLOWED.value
    difficulty: str = "medium"
    total_rounds: int = DEFAULT_TOTAL_ROUNDS
    player_count: int = 2
    theme: str = "dark"
    sound_enabled: bool = True
    game_mode: str = "quick"

    def normalized(self) -> Settings:
        """Copy with out-of-range values replaced by usable ones."""
        mode = self.backspace_mode
        if mode not in {m.value for m in BackspaceMode}:
            mode = BackspaceMode.ALLOWED.value
        difficulty = self.difficulty if self.difficulty in DIFFICULTY_MULTIPLIERS else "medium"
        return Settings(
            backspace_mode=mode,
            difficulty=difficulty,
            total_rounds=max(1, int(self.total_rounds)),
            player_count=min(MAX_PLAYERS, max(1, int(self.player_count))),
            theme=self.theme if self.theme in THEMES else "dark",
            sound_enabled=bool(self.sound_enabled),
            game_mode=self.game_mode if self.game_mode in GAME_MODES else "quick",
        )


def load_settings(path: Path = DEFAULT_SETTINGS_PATH) -> Settings:
    """Load settings from disk, returning defaults if absent or unreadable."""
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text())
        game = data.get("game", {})
        return Settings(**{
            k: v for k, v in game.items()
            if k in Settings.__dataclass_fields__
        }).normalized()
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return Settings()


def save_settings(settings: Settings, path: Path = DEFAULT_SETTINGS_PATH) -> None:
    """Persist settings, keeping any other sections already in the file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data: dict = {}
    if path.exists():
        try:
            data = json.loads(path.read_text())
        except ValueError:
            logger.warning("Overwriting unreadable settings file %s", path)
    if not isinstance(data, dict):
        data = {}
    data["game"] = asdict(settings.normalized())
    path.write_text(json.dumps(data, indent=2))


def next_theme(theme: str) -> str:
    return THEMES[(THEMES.index(theme) + 1) % len(THEMES)] if theme in THEMES else THEMES[0]
