"""Tests for the match setup screen's choices; no display is needed."""

import json

import pygame
import pytest

from typearena.content import CATEGORIES, ContentLibrary
from typearena.match import MatchController
from typearena.renderer import colors
from typearena.settings import Settings
from typearena.storage import ProfileStore
from typearena.views.base import ViewContext, ViewManager
from typearena.views.setup_view import SetupView


@pytest.fixture
def context(tmp_path):
    store = ProfileStore(":memory:")
    yield ViewContext(
        screen_size=(800, 600),
        store=store,
        library=ContentLibrary(),
        match=MatchController(),
        settings=Settings(),
        settings_path=tmp_path / "settings.json",
    )
    store.close()


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def typed(text):
    return pygame.event.Event(pygame.TEXTINPUT, text=text)


def entered(context, mode):
    context.settings.game_mode = mode
    view = SetupView()
    view.on_enter(context)
    return view


def select_row(view, row):
    view._row = view._rows().index(row)


def test_custom_mode_lists_every_category(context):
    view = entered(context, "custom")
    assert view._categories == [c.id for c in CATEGORIES]


def test_campaign_mode_lists_only_unlocks(context):
    context.store.unlock_category("poetry")
    view = entered(context, "campaign")
    assert view._categories == ["classics", "poetry"]


def test_mode_row_switches_to_custom(context):
    view = entered(context, "campaign")
    select_row(view, "mode")
    view.handle_event(key(pygame.K_RIGHT))
    assert context.settings.game_mode == "custom"
    assert len(view._categories) == len(CATEGORIES)


def test_custom_mode_starts_on_a_locked_category(context):
    view = entered(context, "custom")
    view._category = view._categories.index("humor")
    context.settings.difficulty = "hard"
    action = view.handle_event(key(pygame.K_RETURN))
    coordinator = action.context_patch["coordinator"]
    assert (coordinator.category, coordinator.difficulty) == ("humor", "hard")


def test_quick_mode_forces_medium(context):
    context.settings.difficulty = "expert"
    view = entered(context, "quick")
    assert "difficulty" not in view._rows()
    action = view.handle_event(key(pygame.K_RETURN))
    coordinator = action.context_patch["coordinator"]
    assert coordinator.difficulty == "medium"
    assert coordinator.category == "classics"


def test_theme_row_applies_and_saves_theme(context, monkeypatch):
    for name in ("BG", "PANEL", "HUD_TEXT", "CHAR_UNTYPED"):
        monkeypatch.setattr(colors, name, getattr(colors, name))
    view = entered(context, "quick")
    select_row(view, "theme")
    view.handle_event(key(pygame.K_RIGHT))

    assert context.settings.theme == "light"
    assert colors.BG == colors.THEMES["light"][0]
    saved = json.loads(context.settings_path.read_text())
    assert saved["game"]["theme"] == "light"


def test_blank_names_stay_blank_for_the_next_match(context):
    manager = ViewManager(context)
    manager.register(SetupView)
    view = manager.switch("setup")
    select_row(view, "name1")
    for ch in "Linus":
        view.handle_event(typed(ch))
    action = view.handle_event(key(pygame.K_RETURN))

    assert [p.name for p in context.match.players] == ["Player 1", "Linus"]

    again = manager.switch("setup", **action.context_patch)
    assert manager.context.entered_names == ("", "Linus")
    assert again._names[:2] == ["", "Linus"]


def test_manager_stops_on_quit(context):
    manager = ViewManager(context)
    manager.register(SetupView)
    manager.switch("setup")
    assert manager.handle_event(key(pygame.K_DOWN))
    assert not manager.handle_event(key(pygame.K_ESCAPE))
