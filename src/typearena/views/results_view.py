"""Round and match scoreboard."""

from __future__ import annotations

import pygame

from typearena.progression import get_level_progress
from typearena.renderer import colors
from typearena.views.base import ViewAction, ViewContext


class ResultsView:
    name = "results"
    display_name = "Results"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._font: pygame.font.Font | None = None
        self._title_font: pygame.font.Font | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        self._font = pygame.font.SysFont("monospace", 22)
        self._title_font = pygame.font.SysFont("monospace", 40)

    def on_exit(self) -> None:
        pass

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if event.type != pygame.KEYDOWN:
            return None
        if event.key == pygame.K_ESCAPE:
            return ViewAction(kind="quit")
        if event.key == pygame.K_RETURN and self._context and self._context.coordinator:
            if self._context.coordinator.next_round():
                return ViewAction(kind="switch", target="race")
            return ViewAction(kind="switch", target="setup")
        return None

    def update(self, dt: float) -> ViewAction | None:
        return None

    def draw(self, surface: pygame.Surface) -> None:
        if not self._font or not self._title_font or self._context is None:
            return

        surface.fill(colors.BG)
        w, h = surface.get_size()
        match = self._context.match
        match_end = match.is_match_over()

        if match_end:
            winner = match.get_match_winner()
            title = f"{winner.player.name} Wins!" if winner else "Match Over"
            subtitle = "Final Results"
        else:
            title = "Round Complete!"
            subtitle = f"Round {match.current_round} of {match.total_rounds}"

        t = self._title_font.render(title, True, colors.ACCENT)
        surface.blit(t, (w // 2 - t.get_width() // 2, 30))
        st = self._font.render(subtitle, True, colors.MUTED)
        surface.blit(st, (w // 2 - st.get_width() // 2, 85))

        y = 150
        if match_end:
            for r in match.get_match_results():
                line = (
                    f"#{r.rank}  {r.player.name:<16} {r.total_score:>6} pts"
                    f"   avg {r.avg_wpm} wpm  {r.avg_accuracy}%"
                )
                text = self._font.render(line, True, colors.hex_to_rgb(r.player.color))
                surface.blit(text, (120, y))
                y += 36
        else:
            for r in match.get_round_results():
                if r.score is None:
                    line = f"#{r.rank}  {r.player.name:<16}      -"
                else:
                    line = (
                        f"#{r.rank}  {r.player.name:<16} {r.score.score:>6} pts"
                        f"   {r.score.wpm} wpm  {r.score.accuracy}%"
                    )
                text = self._font.render(line, True, colors.hex_to_rgb(r.player.color))
                surface.blit(text, (120, y))
                y += 36

        outcome = self._context.last_outcome
        if outcome is not None:
            xp_line = (
                f"{outcome.player.name}: +{outcome.xp_earned} XP, level {outcome.profile.level}"
                f" ({get_level_progress(outcome.profile.xp)}% to next)"
            )
            text = self._font.render(xp_line, True, colors.HUD_TEXT)
            surface.blit(text, (120, y + 20))

        hint = "Enter: new match" if match_end else "Enter: next round"
        legend = self._font.render(f"{hint} | Esc: quit", True, colors.MUTED)
        surface.blit(legend, (40, h - 40))
