"""Match setup: mode, players, rounds, difficulty, category, backspace, theme."""

from __future__ import annotations

import logging

import pygame

from typearena.config import MAX_PLAYERS
from typearena.content import GAME_MODES, get_category, resolve_match_choice, selectable_categories
from typearena.models import BackspaceMode
from typearena.progression import DIFFICULTIES
from typearena.renderer import colors
from typearena.settings import Settings, next_theme, save_settings
from typearena.turns import TurnCoordinator
from typearena.views.base import ViewAction, ViewContext

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 16

MODE_LABELS = {
    "quick": "Quick Play (random, medium)",
    "campaign": "Campaign (unlocked only)",
    "custom": "Custom (all categories)",
}


class SetupView:
    name = "setup"
    display_name = "Match Setup"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._settings = Settings()
        self._names: list[str] = [""] * MAX_PLAYERS
        self._categories: list[str] = []
        self._category = 0
        self._row = 0
        self._font: pygame.font.Font | None = None
        self._title_font: pygame.font.Font | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        self._settings = context.settings
        for i, name in enumerate(context.entered_names[:MAX_PLAYERS]):
            self._names[i] = name
        self._refresh_categories()

    def on_exit(self) -> None:
        pass

    def _refresh_categories(self, keep: str | None = None) -> None:
        if self._context is None:
            return
        self._categories = selectable_categories(
            self._settings.game_mode, self._context.store.get_unlocks(),
        )
        self._category = self._categories.index(keep) if keep in self._categories else 0

    @property
    def category(self) -> str:
        return self._categories[self._category] if self._categories else ""

    # Quick play picks its own category and difficulty, so those rows are hidden.
    def _rows(self) -> list[str]:
        rows = ["mode", "players", "rounds"]
        if self._settings.game_mode != "quick":
            rows += ["difficulty", "category"]
        rows += ["backspace", "theme"]
        return rows + [f"name{i}" for i in range(self._settings.player_count)]

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        rows = self._rows()
        row = rows[self._row]

        if event.type == pygame.TEXTINPUT and row.startswith("name"):
            idx = int(row[4:])
            self._names[idx] = (self._names[idx] + event.text)[:MAX_NAME_LENGTH]
            return None

        if event.type != pygame.KEYDOWN:
            return None

        if event.key == pygame.K_ESCAPE:
            return ViewAction(kind="quit")
        if event.key == pygame.K_RETURN:
            return self._start_match()
        if event.key == pygame.K_UP:
            self._row = (self._row - 1) % len(rows)
        elif event.key in (pygame.K_DOWN, pygame.K_TAB):
            self._row = (self._row + 1) % len(rows)
        elif event.key == pygame.K_BACKSPACE and row.startswith("name"):
            idx = int(row[4:])
            self._names[idx] = self._names[idx][:-1]
        elif event.key in (pygame.K_LEFT, pygame.K_RIGHT):
            self._cycle(row, 1 if event.key == pygame.K_RIGHT else -1)
            self._row = min(self._row, len(self._rows()) - 1)
        return None

    def _cycle(self, row: str, step: int) -> None:
        s = self._settings
        if row == "mode":
            s.game_mode = GAME_MODES[(GAME_MODES.index(s.game_mode) + step) % len(GAME_MODES)]
            self._refresh_categories(keep=self.category)
        elif row == "players":
            s.player_count = (s.player_count - 1 + step) % MAX_PLAYERS + 1
        elif row == "rounds":
            s.total_rounds = max(1, min(10, s.total_rounds + step))
        elif row == "difficulty":
            ids = [d.id for d in DIFFICULTIES]
            s.difficulty = ids[(ids.index(s.difficulty) + step) % len(ids)]
        elif row == "category":
            self._category = (self._category + step) % len(self._categories)
        elif row == "backspace":
            modes = [m.value for m in BackspaceMode]
            s.backspace_mode = modes[(modes.index(s.backspace_mode) + step) % len(modes)]
        elif row == "theme":
            s.theme = next_theme(s.theme)
            colors.apply_theme(s.theme)
            if self._context is not None:
                save_settings(s, self._context.settings_path)
            logger.info("Switched to %s theme", s.theme)

    def _start_match(self) -> ViewAction | None:
        ctx = self._context
        if ctx is None:
            return None
        s = self._settings
        save_settings(s, ctx.settings_path)

        category, difficulty = resolve_match_choice(
            s.game_mode, self.category, s.difficulty, ctx.store.get_unlocks(),
        )
        entered = tuple(self._names[: s.player_count])
        ctx.match.set_players(entered)
        ctx.match.set_total_rounds(s.total_rounds)
        coordinator = TurnCoordinator(ctx.match, ctx.store, difficulty, category)
        return ViewAction(
            kind="switch",
            target="race",
            context_patch={
                "coordinator": coordinator,
                "settings": s,
                "last_outcome": None,
                "entered_names": entered,
            },
        )

    def update(self, dt: float) -> ViewAction | None:
        return None

    def _category_label(self) -> str:
        category = get_category(self.category)
        return category.name if category else self.category

    def draw(self, surface: pygame.Surface) -> None:
        if self._font is None or self._title_font is None:
            self._font = pygame.font.SysFont("monospace", 22)
            self._title_font = pygame.font.SysFont("monospace", 40)

        surface.fill(colors.BG)
        w, h = surface.get_size()

        title = self._title_font.render("TypeArena", True, colors.ACCENT)
        surface.blit(title, (w // 2 - title.get_width() // 2, 30))

        s = self._settings
        labels = {
            "mode": f"Mode:       < {MODE_LABELS[s.game_mode]} >",
            "players": f"Players:    < {s.player_count} >",
            "rounds": f"Rounds:     < {s.total_rounds} >",
            "difficulty": f"Difficulty: < {s.difficulty} >",
            "category": f"Category:   < {self._category_label()} >",
            "backspace": f"Backspace:  < {s.backspace_mode} >",
            "theme": f"Theme:      < {s.theme} >",
        }
        y = 110
        for i, row in enumerate(self._rows()):
            if row.startswith("name"):
                idx = int(row[4:])
                label = f"Player {idx + 1}:   {self._names[idx] or '...'}"
            else:
                label = labels[row]
            selected = i == self._row
            color = colors.CHAR_CURRENT if selected else colors.HUD_TEXT
            text = self._font.render(("> " if selected else "  ") + label, True, color)
            surface.blit(text, (80, y))
            y += 34

        legend = self._font.render(
            "Up/Down: select | Left/Right: change | type names | Enter: start | Esc: quit",
            True, colors.MUTED,
        )
        surface.blit(legend, (40, h - 40))
