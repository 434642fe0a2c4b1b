"""Race view: countdown, one player's typing turn, and the turn summary."""

from __future__ import annotations

import pygame

from typearena.config import COUNTDOWN_SECONDS
from typearena.content import get_category
from typearena.models import FinalStats, LiveStats, TextItem
from typearena.progression import get_achievement
from typearena.renderer import colors
from typearena.renderer.hud import render_hud
from typearena.renderer.text import render_text
from typearena.session import TypingSession
from typearena.ticker import FrameTicker
from typearena.turns import TurnOutcome
from typearena.views.base import ViewAction, ViewContext

ERROR_FLASH_S = 0.15


class RaceView:
    name = "race"
    display_name = "Race"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._ticker = FrameTicker()
        self._session = TypingSession(ticker=self._ticker)
        self._text: TextItem | None = None
        self._buffer = ""
        self._stats = LiveStats()
        self._phase = "countdown"  # countdown | typing | summary
        self._countdown = float(COUNTDOWN_SECONDS)
        self._error_flash = 0.0
        self._outcome: TurnOutcome | None = None
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        self._font = pygame.font.SysFont("monospace", 22)
        self._big_font = pygame.font.SysFont("monospace", 96)
        coordinator = context.coordinator
        if coordinator is None:
            return
        self._text = context.library.get_text(coordinator.category, coordinator.difficulty)
        self._session.set_backspace_mode(context.settings.backspace_mode)
        self._session.subscribe(self)
        self._begin_turn()

    def on_exit(self) -> None:
        self._session.destroy()

    def _begin_turn(self) -> None:
        self._session.init(self._text.text if self._text else "")
        self._buffer = ""
        self._stats = LiveStats(total_chars=len(self._session.target_text))
        self._outcome = None
        self._phase = "countdown"
        self._countdown = float(COUNTDOWN_SECONDS)

    # -- session notifications ----------------------------------------------

    def on_update(self, stats: LiveStats) -> None:
        self._stats = stats

    def on_error(self) -> None:
        self._error_flash = ERROR_FLASH_S

    def on_complete(self, stats: FinalStats) -> None:
        if self._context and self._context.coordinator:
            self._outcome = self._context.coordinator.finish_turn(stats)
        self._phase = "summary"

    # -- input ----------------------------------------------------------------

    def _feed(self, text: str) -> None:
        # The session may reject a deletion; keep our buffer in sync with it.
        self._buffer = self._session.process_input(text)

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if event.type == pygame.TEXTINPUT and self._phase == "typing":
            self._feed(self._buffer + event.text)
            return None

        if event.type != pygame.KEYDOWN:
            return None

        if event.key == pygame.K_ESCAPE:
            return ViewAction(kind="switch", target="setup")
        if self._phase == "typing" and event.key == pygame.K_BACKSPACE and self._buffer:
            self._feed(self._buffer[:-1])
        elif self._phase == "summary" and event.key == pygame.K_RETURN:
            return self._continue()
        return None

    def _continue(self) -> ViewAction | None:
        coordinator = self._context.coordinator if self._context else None
        if coordinator is None:
            return None
        if coordinator.advance() == "next_player":
            self._begin_turn()
            return None
        return ViewAction(
            kind="switch",
            target="results",
            context_patch={"last_outcome": self._outcome},
        )

    def update(self, dt: float) -> ViewAction | None:
        if self._phase == "countdown":
            self._countdown -= dt
            if self._countdown <= 0:
                self._phase = "typing"
        elif self._phase == "typing":
            self._ticker.advance(dt)
        self._error_flash = max(0.0, self._error_flash - dt)
        return None

    # -- drawing --------------------------------------------------------------

    def draw(self, surface: pygame.Surface) -> None:
        if not self._font or not self._big_font or self._context is None:
            return

        surface.fill(colors.ACCENT if self._error_flash > 0 else colors.BG)
        w, h = surface.get_size()
        match = self._context.match

        render_hud(
            surface, self._stats, match.current_player,
            round_label=f"Round {match.current_round}/{match.total_rounds}",
        )

        area = pygame.Rect(60, 90, w - 120, h - 220)
        pygame.draw.rect(surface, colors.PANEL, area.inflate(20, 20))
        render_text(surface, self._session.get_character_states(), area, self._font)

        if self._text and self._text.source:
            source = self._font.render(f"- {self._text.source}", True, colors.MUTED)
            surface.blit(source, (w - source.get_width() - 60, h - 110))

        if self._phase == "countdown":
            n = max(1, int(self._countdown) + 1)
            label = self._big_font.render(str(n), True, colors.CHAR_CURRENT)
            surface.blit(label, (w // 2 - label.get_width() // 2, h // 2 - label.get_height() // 2))
        elif self._phase == "typing" and not self._session.is_active:
            prompt = self._font.render("Start typing!", True, colors.HUD_TEXT)
            surface.blit(prompt, (w // 2 - prompt.get_width() // 2, h - 70))
        elif self._phase == "summary" and self._outcome is not None:
            self._draw_summary(surface, self._outcome)

    def _draw_summary(self, surface: pygame.Surface, outcome: TurnOutcome) -> None:
        w, h = surface.get_size()
        box = pygame.Rect(w // 2 - 320, h // 2 - 200, 640, 400)
        pygame.draw.rect(surface, colors.PANEL, box)
        pygame.draw.rect(surface, colors.hex_to_rgb(outcome.player.color), box, 3)

        b = outcome.breakdown
        lines = [
            f"{outcome.player.name} finished!",
            f"WPM {outcome.stats.wpm}   Accuracy {outcome.stats.accuracy}%   Time {outcome.stats.formatted_time}",
            f"Base {b.base_score} + Accuracy {b.accuracy_bonus} + Time {b.time_bonus}",
            f"x{b.difficulty_multiplier:g} = {b.total_score} points   +{outcome.xp_earned} XP",
        ]
        if outcome.leveled_up:
            lines.append(f"Level up! Now level {outcome.profile.level}")
        for ach_id in outcome.new_achievements:
            ach = get_achievement(ach_id)
            if ach:
                lines.append(f"Achievement: {ach.name}")
        for cat_id in outcome.new_unlocks:
            cat = get_category(cat_id)
            if cat:
                lines.append(f"Unlocked: {cat.name}")
        lines.append("Enter: see results" if outcome.is_last_player else "Enter: next player")

        y = box.y + 24
        for line in lines:
            text = self._font.render(line, True, colors.HUD_TEXT)
            surface.blit(text, (box.x + 24, y))
            y += 34
