"""Match controller: players, turn order, round and match scoring."""

from __future__ import annotations

import logging
from typing import Sequence

from typearena.config import DEFAULT_TOTAL_ROUNDS, PLAYER_COLORS
from typearena.errors import ConfigurationError
from typearena.models import MatchResult, MatchScore, Player, RoundResult, RoundScore
from typearena.scoring import round_half_up

logger = logging.getLogger(__name__)


def player_color(index: int) -> str:
    return PLAYER_COLORS[index % len(PLAYER_COLORS)]


class MatchController:
    """Runs a hot-seat match: every player types once per round, for N rounds.

    Rankings are stable: players with equal scores keep their seating order,
    so the earlier player wins a tie.
    """

    def __init__(self, total_rounds: int = DEFAULT_TOTAL_ROUNDS) -> None:
        self.players: list[Player] = []
        self.current_player_index = 0
        self.round_scores: list[RoundScore | None] = []
        self.match_scores: list[MatchScore] = []
        self.current_round = 1
        self.total_rounds = DEFAULT_TOTAL_ROUNDS
        self.set_total_rounds(total_rounds)

    def set_players(self, names: Sequence[str]) -> list[Player]:
        self.players = [
            Player(
                id=i + 1,
                name=name.strip() if name and name.strip() else f"Player {i + 1}",
                color=player_color(i),
            )
            for i, name in enumerate(names)
        ]
        self.reset_scores()
        return list(self.players)

    def set_total_rounds(self, rounds: int) -> None:
        if rounds < 1:
            raise ConfigurationError(f"a match needs at least one round, got {rounds}")
        self.total_rounds = rounds

    def reset_scores(self) -> None:
        """Start the match over, keeping the same players."""
        self.current_player_index = 0
        self.current_round = 1
        self.round_scores = [None] * len(self.players)
        self.match_scores = [MatchScore() for _ in self.players]

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def current_player(self) -> Player | None:
        if not self.players:
            return None
        return self.players[self.current_player_index]

    def next_player(self) -> Player | None:
        """Rotate to the next seat. Does not look at round completion."""
        if not self.players:
            return None
        self.current_player_index = (self.current_player_index + 1) % len(self.players)
        return self.current_player

    def is_last_player_turn(self) -> bool:
        return self.current_player_index == len(self.players) - 1

    def record_score(self, wpm: int, accuracy: int, time: int, score: int) -> None:
        """Record the current player's result for this round.

        A second result for the same player in the same round is treated as a
        re-take: it replaces the first one in both the round and the match
        totals.
        """
        idx = self.current_player_index
        totals = self.match_scores[idx]
        previous = self.round_scores[idx]
        if previous is not None:
            logger.warning(
                "Player %s already has a score for round %d; replacing it",
                self.players[idx].name, self.current_round,
            )
            totals.total_score -= previous.score
            totals.total_wpm -= previous.wpm
            totals.total_accuracy -= previous.accuracy
            totals.rounds -= 1

        self.round_scores[idx] = RoundScore(wpm=wpm, accuracy=accuracy, time=time, score=score)
        totals.total_score += score
        totals.total_wpm += wpm
        totals.total_accuracy += accuracy
        totals.rounds += 1

    def get_round_results(self) -> list[RoundResult]:
        results = [
            RoundResult(player=player, score=self.round_scores[i])
            for i, player in enumerate(self.players)
        ]
        results.sort(key=lambda r: r.points, reverse=True)
        for rank, result in enumerate(results, start=1):
            result.rank = rank
        return results

    def get_match_results(self) -> list[MatchResult]:
        results = []
        for player, totals in zip(self.players, self.match_scores):
            if totals.rounds > 0:
                avg_wpm = round_half_up(totals.total_wpm / totals.rounds)
                avg_accuracy = round_half_up(totals.total_accuracy / totals.rounds)
            else:
                avg_wpm = avg_accuracy = 0
            results.append(MatchResult(
                player=player,
                total_score=totals.total_score,
                total_wpm=totals.total_wpm,
                total_accuracy=totals.total_accuracy,
                rounds=totals.rounds,
                avg_wpm=avg_wpm,
                avg_accuracy=avg_accuracy,
            ))
        results.sort(key=lambda r: r.total_score, reverse=True)
        for rank, result in enumerate(results, start=1):
            result.rank = rank
        return results

    def get_round_winner(self) -> RoundResult | None:
        results = self.get_round_results()
        return results[0] if results else None

    def get_match_winner(self) -> MatchResult | None:
        results = self.get_match_results()
        return results[0] if results else None

    def start_next_round(self) -> None:
        self.current_round += 1
        self.current_player_index = 0
        self.round_scores = [None] * len(self.players)

    def is_round_complete(self) -> bool:
        return all(score is not None for score in self.round_scores)

    def is_final_round(self) -> bool:
        return self.current_round >= self.total_rounds

    def is_match_complete(self) -> bool:
        return self.current_round > self.total_rounds and self.is_round_complete()

    def is_match_over(self) -> bool:
        """True once every player has finished the last configured round."""
        return self.is_final_round() and self.is_round_complete()
