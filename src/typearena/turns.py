"""Turn coordinator: turns a finished session into scores, XP, and progress."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Protocol

from typearena.match import MatchController
from typearena.models import AchievementStats, FinalStats, Player, PlayerProfile, ScoreBreakdown
from typearena.progression import check_achievements, check_level_unlocks
from typearena.scoring import calculate_score, calculate_xp

logger = logging.getLogger(__name__)


class ProgressStore(Protocol):
    def update_player_xp(self, name: str, xp_delta: int) -> tuple[PlayerProfile, bool]: ...
    def update_player_stats(self, name: str, wpm: int, words_typed: int) -> None: ...
    def get_achievements(self, name: str) -> list[str]: ...
    def add_achievement(self, name: str, achievement_id: str) -> bool: ...
    def unlock_category(self, category_id: str) -> bool: ...
    def save_highscore(self, category_id: str, score: int) -> bool: ...


@dataclass
class TurnOutcome:
    player: Player
    stats: FinalStats
    breakdown: ScoreBreakdown
    xp_earned: int
    profile: PlayerProfile
    leveled_up: bool
    new_achievements: list[str] = field(default_factory=list)
    new_unlocks: list[str] = field(default_factory=list)
    new_highscore: bool = False
    is_last_player: bool = False
    is_match_end: bool = False


class TurnCoordinator:
    """Applies each completed turn to the match and the player's saved profile."""

    def __init__(
        self,
        match: MatchController,
        store: ProgressStore,
        difficulty: str = "medium",
        category: str = "classics",
    ) -> None:
        self.match = match
        self.store = store
        self.difficulty = difficulty
        self.category = category
        self.session_rounds = 0

    def finish_turn(self, stats: FinalStats) -> TurnOutcome:
        player = self.match.current_player
        if player is None:
            raise RuntimeError("finish_turn called before players were set")

        self.session_rounds += 1
        breakdown = calculate_score(stats.wpm, stats.accuracy, stats.time_seconds, self.difficulty)
        xp = calculate_xp(stats.wpm, stats.accuracy, self.difficulty)

        self.match.record_score(stats.wpm, stats.accuracy, stats.time_seconds, breakdown.total_score)

        profile, leveled_up = self.store.update_player_xp(player.name, xp)
        self.store.update_player_stats(player.name, stats.wpm, stats.words_typed)

        new_achievements = check_achievements(
            AchievementStats(
                rounds_completed=profile.games_played,
                wpm=stats.wpm,
                accuracy=stats.accuracy,
                session_rounds=self.session_rounds,
            ),
            self.store.get_achievements(player.name),
        )
        for achievement_id in new_achievements:
            self.store.add_achievement(player.name, achievement_id)

        new_unlocks = check_level_unlocks(profile.level, self.store)
        new_highscore = self.store.save_highscore(self.category, breakdown.total_score)

        logger.debug(
            "%s scored %d (+%d xp) in round %d",
            player.name, breakdown.total_score, xp, self.match.current_round,
        )
        return TurnOutcome(
            player=player,
            stats=stats,
            breakdown=breakdown,
            xp_earned=xp,
            profile=profile,
            leveled_up=leveled_up,
            new_achievements=new_achievements,
            new_unlocks=new_unlocks,
            new_highscore=new_highscore,
            is_last_player=self.match.is_last_player_turn(),
            is_match_end=self.match.is_match_over(),
        )

    def advance(self) -> Literal["next_player", "round_results"]:
        """Move on after a turn: hand over to the next player or show results."""
        if self.match.is_round_complete():
            return "round_results"
        self.match.next_player()
        return "next_player"

    def next_round(self) -> bool:
        """Start the next round. Returns False if the match was over and got reset."""
        if self.match.is_final_round():
            self.match.reset_scores()
            self.session_rounds = 0
            return False
        self.match.start_next_round()
        return True
