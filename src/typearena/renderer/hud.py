"""Heads-up display: current player, WPM, accuracy, time, progress."""

from __future__ import annotations

import pygame

from typearena.models import LiveStats, Player
from typearena.renderer import colors


def render_hud(
    surface: pygame.Surface,
    stats: LiveStats,
    player: Player | None,
    round_label: str = "",
) -> None:
    font = pygame.font.SysFont("monospace", 20)
    w = surface.get_width()

    if player is not None:
        name = font.render(player.name, True, colors.hex_to_rgb(player.color))
        surface.blit(name, (10, 10))

    line = f"WPM: {stats.wpm}   Accuracy: {stats.accuracy}%   Time: {stats.formatted_time}"
    if round_label:
        line = f"{round_label}   {line}"
    text = font.render(line, True, colors.HUD_TEXT)
    surface.blit(text, (w - text.get_width() - 10, 10))

    # Progress bar
    bar = pygame.Rect(10, 40, w - 20, 6)
    pygame.draw.rect(surface, colors.PANEL, bar)
    filled = bar.copy()
    filled.w = int(bar.w * stats.progress / 100)
    pygame.draw.rect(surface, colors.CHAR_CORRECT, filled)
