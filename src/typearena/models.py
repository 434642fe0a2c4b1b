"""Core data models shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class BackspaceMode(Enum):
    ALLOWED = "allowed"
    DISABLED = "disabled"


class CharState(Enum):
    CORRECT = auto()
    INCORRECT = auto()
    CURRENT = auto()
    UNTYPED = auto()


@dataclass(frozen=True)
class CharacterState:
    char: str
    state: CharState


@dataclass
class LiveStats:
    """Snapshot published while a session is running."""

    wpm: int = 0
    accuracy: int = 100
    progress: float = 0.0  # percent, 0-100
    elapsed_time: int = 0  # whole seconds
    formatted_time: str = "0:00"
    current_index: int = 0
    total_chars: int = 0
    correct_chars: int = 0
    incorrect_chars: int = 0


@dataclass
class FinalStats:
    """Stats fixed at the moment a session completes."""

    wpm: int
    accuracy: int
    time_seconds: int
    formatted_time: str
    correct_chars: int
    incorrect_chars: int
    total_chars: int
    words_typed: int


@dataclass(frozen=True)
class ScoreBreakdown:
    base_score: int
    accuracy_bonus: int
    time_bonus: int
    difficulty_multiplier: float
    total_score: int


@dataclass(frozen=True)
class Player:
    id: int  # 1-based, stable for the match
    name: str
    color: str


@dataclass
class RoundScore:
    wpm: int
    accuracy: int
    time: int  # seconds
    score: int


@dataclass
class MatchScore:
    total_score: int = 0
    total_wpm: int = 0
    total_accuracy: int = 0
    rounds: int = 0


@dataclass
class RoundResult:
    player: Player
    score: RoundScore | None
    rank: int = 0

    @property
    def points(self) -> int:
        return self.score.score if self.score else 0


@dataclass
class MatchResult:
    player: Player
    total_score: int
    total_wpm: int
    total_accuracy: int
    rounds: int
    avg_wpm: int
    avg_accuracy: int
    rank: int = 0


@dataclass
class TextItem:
    text: str
    source: str


@dataclass
class PlayerProfile:
    """Persistent per-player record, keyed case-insensitively by name."""

    name: str
    xp: int = 0
    level: int = 1
    games_played: int = 0
    best_wpm: int = 0
    total_words_typed: int = 0
    achievements: list[str] = field(default_factory=list)


@dataclass
class AchievementStats:
    rounds_completed: int = 0
    wpm: int = 0
    accuracy: int = 0
    session_rounds: int = 0
