"""Typing session: one player's attempt at one text."""

from __future__ import annotations

import logging
import math
import time
from typing import Callable, Protocol, runtime_checkable

from typearena.config import CHARS_PER_WORD, LIVE_UPDATE_INTERVAL
from typearena.models import BackspaceMode, CharacterState, CharState, FinalStats, LiveStats
from typearena.scoring import round_half_up
from typearena.ticker import FrameTicker, Ticker

logger = logging.getLogger(__name__)


@runtime_checkable
class SessionListener(Protocol):
    """Receives session notifications. Any subset of the hooks may be defined."""

    def on_update(self, stats: LiveStats) -> None: ...
    def on_error(self) -> None: ...
    def on_complete(self, stats: FinalStats) -> None: ...


def calculate_wpm(chars: int, seconds: float) -> float:
    """Words per minute for a character count, with five characters per word."""
    if seconds <= 0:
        return 0.0
    return (chars / CHARS_PER_WORD) / (seconds / 60)


def calculate_accuracy(correct: int, incorrect: int) -> float:
    """Percentage of typed characters that were correct; 100 before any typing."""
    total = correct + incorrect
    if total == 0:
        return 100.0
    return correct / total * 100


def calculate_progress(index: int, total: int) -> float:
    if total == 0:
        return 0.0
    return min(index / total * 100, 100.0)


def format_time(seconds: int) -> str:
    """Format whole seconds as M:SS."""
    mins, secs = divmod(int(seconds), 60)
    return f"{mins}:{secs:02d}"


def parse_backspace_mode(mode: BackspaceMode | str) -> BackspaceMode:
    if isinstance(mode, BackspaceMode):
        return mode
    try:
        return BackspaceMode(mode)
    except ValueError:
        logger.warning("Unknown backspace mode %r, allowing backspace", mode)
        return BackspaceMode.ALLOWED


class TypingSession:
    """Tracks typed input against a target text and reports live and final stats.

    Input is fed as the full contents of the caller's input buffer, not as
    individual keystrokes. process_input() returns the text the buffer should
    hold afterwards; when a deletion is rejected that is the previously
    accepted text and the caller must put it back.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        ticker: Ticker | None = None,
    ) -> None:
        self._clock = clock
        self.ticker: Ticker = ticker if ticker is not None else FrameTicker()
        self._listeners: list[SessionListener] = []
        self.backspace_mode = BackspaceMode.ALLOWED
        self.init("")

    def init(self, text: str) -> None:
        """Reset for a new turn on the given text."""
        self.ticker.stop()
        self.target_text = text
        self.typed_text = ""
        self.start_time: float | None = None
        self.end_time: float | None = None
        self.is_active = False
        self.correct_chars = 0
        self.incorrect_chars = 0
        self.current_index = 0
        self.previous_input_length = 0

    def reset(self) -> None:
        self.init(self.target_text)

    def destroy(self) -> None:
        self.ticker.stop()
        self._listeners.clear()

    def set_backspace_mode(self, mode: BackspaceMode | str) -> None:
        self.backspace_mode = parse_backspace_mode(mode)

    # -- observers ---------------------------------------------------------

    def subscribe(self, listener: SessionListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, hook: str, *args: object) -> None:
        for listener in list(self._listeners):
            handler = getattr(listener, hook, None)
            if handler is not None:
                handler(*args)

    # -- state transitions -------------------------------------------------

    def _start(self) -> None:
        self.is_active = True
        self.start_time = self._clock()
        self.ticker.start(self._tick, LIVE_UPDATE_INTERVAL)
        logger.debug("Session started on %d-character text", len(self.target_text))

    def _tick(self) -> None:
        if self.is_active:
            self._notify("on_update", self.get_stats())

    def process_input(self, input_text: str) -> str:
        """Apply the caller's current input and return the accepted text."""
        if self.start_time is None and input_text:
            self._start()

        if not self.is_active:
            return input_text

        if (
            self.backspace_mode is BackspaceMode.DISABLED
            and len(input_text) < self.previous_input_length
        ):
            return self.typed_text

        self.previous_input_length = len(input_text)
        self.typed_text = input_text
        self.current_index = len(input_text)

        self.correct_chars = 0
        self.incorrect_chars = 0
        for typed, expected in zip(input_text, self.target_text):
            if typed == expected:
                self.correct_chars += 1
            else:
                self.incorrect_chars += 1

        if input_text:
            last = len(input_text) - 1
            if last >= len(self.target_text) or input_text[last] != self.target_text[last]:
                self._notify("on_error")

        self._notify("on_update", self.get_stats())

        if len(input_text) >= len(self.target_text):
            self.complete()

        return input_text

    def complete(self) -> None:
        """End the turn. Errors never block completion, they only lower accuracy."""
        if self.end_time is not None:
            return
        self.is_active = False
        self.end_time = self._clock()
        self.ticker.stop()
        final = self.get_final_stats()
        logger.debug(
            "Session complete: %d correct, %d incorrect, %d wpm",
            self.correct_chars, self.incorrect_chars, final.wpm,
        )
        self._notify("on_complete", final)

    # -- stats -------------------------------------------------------------

    def _elapsed(self) -> float:
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time is not None else self._clock()
        return max(0.0, end - self.start_time)

    def get_stats(self) -> LiveStats:
        seconds = self._elapsed()
        elapsed_whole = math.floor(seconds)
        return LiveStats(
            wpm=round_half_up(calculate_wpm(self.correct_chars, seconds)),
            accuracy=round_half_up(calculate_accuracy(self.correct_chars, self.incorrect_chars)),
            progress=calculate_progress(self.current_index, len(self.target_text)),
            elapsed_time=elapsed_whole,
            formatted_time=format_time(elapsed_whole),
            current_index=self.current_index,
            total_chars=len(self.target_text),
            correct_chars=self.correct_chars,
            incorrect_chars=self.incorrect_chars,
        )

    def get_final_stats(self) -> FinalStats:
        seconds = self._elapsed()
        whole = round_half_up(seconds)
        return FinalStats(
            wpm=round_half_up(calculate_wpm(self.correct_chars, seconds)),
            accuracy=round_half_up(calculate_accuracy(self.correct_chars, self.incorrect_chars)),
            time_seconds=whole,
            formatted_time=format_time(whole),
            correct_chars=self.correct_chars,
            incorrect_chars=self.incorrect_chars,
            total_chars=len(self.target_text),
            words_typed=len(self.target_text.split()),
        )

    def get_character_states(self) -> list[CharacterState]:
        typed = self.typed_text
        states: list[CharacterState] = []
        for i, char in enumerate(self.target_text):
            if i < len(typed):
                state = CharState.CORRECT if typed[i] == char else CharState.INCORRECT
            elif i == len(typed):
                state = CharState.CURRENT
            else:
                state = CharState.UNTYPED
            states.append(CharacterState(char=char, state=state))
        return states
