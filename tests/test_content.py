"""Tests for the built-in text library."""

import random

from typearena.content import (
    CATEGORIES,
    COMMON_WORDS,
    LIBRARY,
    RANDOM_WORD_COUNT,
    ContentLibrary,
    TextProvider,
    get_category,
    resolve_match_choice,
    selectable_categories,
)


def test_every_category_has_every_difficulty():
    for category in CATEGORIES:
        assert set(LIBRARY[category.id]) == {"easy", "medium", "hard", "expert"}


def test_get_text_returns_item_from_library():
    library = ContentLibrary(rng=random.Random(1))
    item = library.get_text("poetry", "easy")
    assert (item.text, item.source) in LIBRARY["poetry"]["easy"]


def test_missing_source_falls_back_to_category():
    library = ContentLibrary(rng=random.Random(2))
    assert library.get_text("random", "easy").source == "random"


def test_unknown_difficulty_uses_easy():
    library = ContentLibrary(rng=random.Random(3))
    item = library.get_text("code", "legendary")
    assert (item.text, item.source) in LIBRARY["code"]["easy"]


def test_unknown_category_generates_random_words(caplog):
    library = ContentLibrary(rng=random.Random(4))
    item = library.get_text("opera", "easy")
    words = item.text.split()
    assert item.source == "Random words"
    assert len(words) == RANDOM_WORD_COUNT
    assert all(w in COMMON_WORDS for w in words)
    assert "opera" in caplog.text


def test_empty_difficulty_list_generates_random_words():
    library = ContentLibrary({"tiny": {"easy": []}}, rng=random.Random(5))
    assert library.get_text("tiny", "easy").source == "Random words"


def test_random_text_uses_unlocked_categories():
    library = ContentLibrary({"a": {"easy": [("alpha", None)]}, "b": {"easy": [("beta", None)]}})
    assert library.get_random_text(["b"], "easy").text == "beta"


def test_random_text_without_unlocks_uses_classics():
    library = ContentLibrary(rng=random.Random(6))
    item = library.get_random_text([], "easy")
    assert (item.text, item.source) in LIBRARY["classics"]["easy"]


def test_library_is_a_text_provider():
    assert isinstance(ContentLibrary(), TextProvider)


def test_get_category():
    assert get_category("humor").unlock_level == 12
    assert get_category("missing") is None


def test_custom_mode_offers_every_category():
    assert selectable_categories("custom", ["classics"]) == [c.id for c in CATEGORIES]


def test_campaign_mode_offers_only_unlocked_categories():
    assert selectable_categories("campaign", ["classics", "poetry", "bogus"]) == ["classics", "poetry"]
    assert selectable_categories("campaign", []) == ["classics"]


def test_quick_mode_forces_medium_on_an_unlocked_category():
    category, difficulty = resolve_match_choice(
        "quick", "humor", "expert", ["classics", "code"], rng=random.Random(3),
    )
    assert category in ("classics", "code")
    assert difficulty == "medium"


def test_custom_mode_keeps_a_locked_category():
    assert resolve_match_choice("custom", "humor", "hard", ["classics"]) == ("humor", "hard")


def test_campaign_mode_replaces_a_locked_category(caplog):
    with caplog.at_level("WARNING", logger="typearena.content"):
        choice = resolve_match_choice("campaign", "humor", "hard", ["classics"])
    assert choice == ("classics", "hard")
    assert "humor" in caplog.text
