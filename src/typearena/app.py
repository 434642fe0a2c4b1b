"""Top-level application: initializes pygame, manages screens, and runs the game loop."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from typearena.config import FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from typearena.content import ContentLibrary
from typearena.errors import StorageError
from typearena.match import MatchController
from typearena.renderer import colors
from typearena.settings import DEFAULT_SETTINGS_PATH, load_settings
from typearena.storage import DEFAULT_DB_PATH, ProfileStore
from typearena.views.base import ViewContext, ViewManager
from typearena.views.race_view import RaceView
from typearena.views.results_view import ResultsView
from typearena.views.setup_view import SetupView

logger = logging.getLogger(__name__)


class App:
    def __init__(
        self,
        db_path: Path = DEFAULT_DB_PATH,
        settings_path: Path = DEFAULT_SETTINGS_PATH,
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.key.start_text_input()
        self.clock = pygame.time.Clock()

        settings = load_settings(settings_path)
        colors.apply_theme(settings.theme)
        self.store = self._open_store(db_path)

        match = MatchController(total_rounds=settings.total_rounds)
        context = ViewContext(
            screen_size=(WINDOW_WIDTH, WINDOW_HEIGHT),
            store=self.store,
            library=ContentLibrary(),
            match=match,
            settings=settings,
            settings_path=settings_path,
        )

        self.views = ViewManager(context)
        self.views.register(SetupView)
        self.views.register(RaceView)
        self.views.register(ResultsView)
        self.views.switch("setup")

    def run(self) -> None:
        try:
            while self._frame():
                pass
        finally:
            self.views.close()
            self.store.close()
            pygame.quit()

    def _frame(self) -> bool:
        """Run one frame; False once the window closes or a view quits."""
        dt = self.clock.tick(FPS) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT or not self.views.handle_event(event):
                return False
        if not self.views.update(dt):
            return False
        self.views.draw(self.screen)
        pygame.display.flip()
        return True

    @staticmethod
    def _open_store(db_path: Path) -> ProfileStore:
        # Unwritable profile file: play on with an in-memory store.
        try:
            return ProfileStore(db_path)
        except StorageError as exc:
            logger.warning("%s; profiles will not be saved this session", exc)
            return ProfileStore(":memory:")
