"""View protocol, ViewContext, ViewAction, and ViewManager."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal, Protocol, runtime_checkable

import pygame

from typearena.settings import DEFAULT_SETTINGS_PATH, Settings

if TYPE_CHECKING:
    from typearena.content import ContentLibrary
    from typearena.match import MatchController
    from typearena.storage import ProfileStore
    from typearena.turns import TurnCoordinator, TurnOutcome


@dataclass
class ViewContext:
    """Shared state passed to views on entry."""

    screen_size: tuple[int, int]
    store: ProfileStore
    library: ContentLibrary
    match: MatchController
    settings: Settings
    settings_path: Path = DEFAULT_SETTINGS_PATH
    coordinator: TurnCoordinator | None = None
    last_outcome: TurnOutcome | None = None
    # Names as typed on the setup screen; blank slots stay blank.
    entered_names: tuple[str, ...] = ()


@dataclass
class ViewAction:
    """Navigation command returned by views."""

    kind: Literal["switch", "quit"]
    target: str | None = None
    context_patch: dict[str, Any] | None = None


@runtime_checkable
class View(Protocol):
    """A full-screen game state."""

    name: str
    display_name: str

    def on_enter(self, context: ViewContext) -> None: ...
    def on_exit(self) -> None: ...
    def handle_event(self, event: pygame.event.Event) -> ViewAction | None: ...
    def update(self, dt: float) -> ViewAction | None: ...
    def draw(self, surface: pygame.Surface) -> None: ...


class ViewManager:
    """Holds the one screen on display and routes the game loop to it.

    Screens are built fresh on every switch; anything that must outlive a
    screen travels in the shared context.
    """

    def __init__(self, context: ViewContext) -> None:
        self._registry: dict[str, type] = {}
        self._active: View | None = None
        self.context = context

    def register(self, view_cls: type) -> None:
        self._registry[view_cls.name] = view_cls

    def switch(self, view_name: str, **context_overrides: Any) -> View:
        self.close()
        known = {k: v for k, v in context_overrides.items() if hasattr(self.context, k)}
        if known:
            self.context = replace(self.context, **known)
        view = self._registry[view_name]()
        view.on_enter(self.context)
        self._active = view
        return view

    def close(self) -> None:
        if self._active is not None:
            self._active.on_exit()
            self._active = None

    @property
    def active_view(self) -> View | None:
        return self._active

    def handle_event(self, event: pygame.event.Event) -> bool:
        if self._active is None:
            return False
        return self._apply(self._active.handle_event(event))

    def update(self, dt: float) -> bool:
        if self._active is None:
            return False
        return self._apply(self._active.update(dt))

    def draw(self, surface: pygame.Surface) -> None:
        if self._active is not None:
            self._active.draw(surface)

    def _apply(self, action: ViewAction | None) -> bool:
        """Carry out a view's request; False means the app should stop."""
        if action is None:
            return True
        if action.kind == "quit":
            return False
        self.switch(action.target, **(action.context_patch or {}))
        return True
