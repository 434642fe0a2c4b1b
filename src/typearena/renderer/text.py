"""Render the target text with each character colored by its typing state."""

from __future__ import annotations

import pygame

from typearena.models import CharacterState, CharState
from typearena.renderer import colors


def wrap_lines(text: str, max_cols: int) -> list[tuple[int, int]]:
    """Split text into (start, end) index ranges no wider than max_cols.

    Lines break after a space where possible; a word longer than a whole
    line is split mid-word. Every character index lands in exactly one range.
    """
    if max_cols < 1:
        raise ValueError("max_cols must be at least 1")
    lines: list[tuple[int, int]] = []
    start = 0
    while start < len(text):
        end = min(start + max_cols, len(text))
        if end < len(text):
            brk = text.rfind(" ", start, end)
            if brk >= start:
                end = brk + 1
        lines.append((start, end))
        start = end
    return lines


def _state_color(state: CharState) -> tuple[int, int, int]:
    if state is CharState.CORRECT:
        return colors.CHAR_CORRECT
    if state is CharState.INCORRECT:
        return colors.CHAR_INCORRECT
    if state is CharState.CURRENT:
        return colors.CHAR_CURRENT
    return colors.CHAR_UNTYPED


def render_text(
    surface: pygame.Surface,
    states: list[CharacterState],
    rect: pygame.Rect,
    font: pygame.font.Font,
) -> None:
    """Draw character states inside rect, monospace, wrapped at word boundaries."""
    char_w, line_h = font.size("M")
    max_cols = max(1, rect.w // char_w)
    text = "".join(s.char for s in states)

    y = rect.y
    for start, end in wrap_lines(text, max_cols):
        x = rect.x
        for cs in states[start:end]:
            if cs.state is CharState.CURRENT:
                pygame.draw.rect(surface, colors.PANEL, (x, y, char_w, line_h))
                pygame.draw.line(surface, colors.CHAR_CURRENT, (x, y + line_h - 2), (x + char_w, y + line_h - 2), 2)
            elif cs.state is CharState.INCORRECT and cs.char == " ":
                pygame.draw.rect(surface, colors.CHAR_INCORRECT, (x, y + line_h - 4, char_w, 3))
            glyph = font.render(cs.char, True, _state_color(cs.state))
            surface.blit(glyph, (x, y))
            x += char_w
        y += int(line_h * 1.4)
        if y > rect.bottom:
            break
