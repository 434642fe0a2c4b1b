"""Built-in text library, organized by category and difficulty."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable

from typearena.models import TextItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    icon: str
    unlock_level: int
    description: str


CATEGORIES = [
    Category("classics", "Literary Classics", "📚", 1, "Famous works of literature"),
    Category("poetry", "Poetry", "🎭", 3, "Classic poems and verses"),
    Category("code", "Code", "💻", 5, "Famous algorithms and snippets"),
    Category("random", "Random Words", "🎲", 8, "Random word combinations"),
    Category("humor", "Humor", "😂", 12, "Funny phrases and tongue twisters"),
    Category("modern", "Modern", "🌐", 15, "Contemporary prose"),
]

DEFAULT_CATEGORY = "classics"
RANDOM_WORD_COUNT = 20

# category -> difficulty -> [(text, source)]; a missing source falls back to the category id
LIBRARY: dict[str, dict[str, list[tuple[str, str | None]]]] = {
    "classics": {
        "easy": [
            ("It is a truth universally acknowledged, that a single man in possession of a good fortune, must be in want of a wife.", "Pride and Prejudice - Jane Austen"),
            ("Call me Ishmael. Some years ago, having little or no money in my purse, I thought I would sail about a little and see the watery part of the world.", "Moby Dick - Herman Melville"),
            ("All happy families are alike; each unhappy family is unhappy in its own way.", "Anna Karenina - Leo Tolstoy"),
            ("It was a bright cold day in April, and the clocks were striking thirteen.", "1984 - George Orwell"),
        ],
        "medium": [
            ("Whether I shall turn out to be the hero of my own life, or whether that station will be held by anybody else, these pages must show. To begin my life with the beginning of my life, I record that I was born.", "David Copperfield - Charles Dickens"),
            ("Two households, both alike in dignity, in fair Verona, where we lay our scene, from ancient grudge break to new mutiny, where civil blood makes civil hands unclean.", "Romeo and Juliet - William Shakespeare"),
        ],
        "hard": [
            ("You don't know about me without you have read a book by the name of The Adventures of Tom Sawyer; but that ain't no matter. That book was made by Mr. Mark Twain, and he told the truth, mainly. There was things which he stretched, but mainly he told the truth.", "Adventures of Huckleberry Finn - Mark Twain"),
        ],
        "expert": [
            ("In the late summer of that year we lived in a house in a village that looked across the river and the plain to the mountains. In the bed of the river there were pebbles and boulders, dry and white in the sun, and the water was clear and swiftly moving and blue in the channels.", "A Farewell to Arms - Ernest Hemingway"),
        ],
    },
    "poetry": {
        "easy": [
            ("Two roads diverged in a yellow wood, and sorry I could not travel both and be one traveler, long I stood.", "The Road Not Taken - Robert Frost"),
            ("Shall I compare thee to a summer's day? Thou art more lovely and more temperate.", "Sonnet 18 - William Shakespeare"),
            ("Do not go gentle into that good night. Rage, rage against the dying of the light.", "Do Not Go Gentle - Dylan Thomas"),
        ],
        "medium": [
            ("Once upon a midnight dreary, while I pondered, weak and weary, over many a quaint and curious volume of forgotten lore, while I nodded, nearly napping, suddenly there came a tapping, as of someone gently rapping, rapping at my chamber door.", "The Raven - Edgar Allan Poe"),
            ("If you can keep your head when all about you are losing theirs and blaming it on you, if you can trust yourself when all men doubt you, but make allowance for their doubting too.", "If - Rudyard Kipling"),
        ],
        "hard": [
            ("Tyger Tyger, burning bright, in the forests of the night; what immortal hand or eye, could frame thy fearful symmetry? In what distant deeps or skies, burnt the fire of thine eyes? On what wings dare he aspire? What the hand, dare seize the fire?", "The Tyger - William Blake"),
        ],
        "expert": [
            ("I met a traveller from an antique land, who said: Two vast and trunkless legs of stone stand in the desert. Near them, on the sand, half sunk a shattered visage lies, whose frown, and wrinkled lip, and sneer of cold command, tell that its sculptor well those passions read which yet survive, stamped on these lifeless things.", "Ozymandias - Percy Bysshe Shelley"),
        ],
    },
    "code": {
        "easy": [
            ("for i in range(10): print(i)", "Loop - Python"),
            ("const sum = (a, b) => a + b; console.log(sum(2, 3));", "Arrow Function - JavaScript"),
            ("if x > 10: print('big') else: print('small')", "Conditional - Python"),
        ],
        "medium": [
            ("def fibonacci(n): if n <= 1: return n; return fibonacci(n-1) + fibonacci(n-2)", "Fibonacci - Python"),
        ],
        "hard": [
            ("def merge_sort(arr): if len(arr) <= 1: return arr; mid = len(arr) // 2; left = merge_sort(arr[:mid]); right = merge_sort(arr[mid:]); return merge(left, right)", "Merge Sort - Python"),
        ],
        "expert": [
            ("const debounce = (fn, delay) => { let timeoutId; return (...args) => { clearTimeout(timeoutId); timeoutId = setTimeout(() => fn.apply(this, args), delay); }; };", "Debounce Pattern - JavaScript"),
        ],
    },
    "random": {
        "easy": [
            ("apple banana cherry grape orange lemon mango peach plum strawberry", None),
            ("red blue green yellow purple orange pink brown black white", None),
            ("run jump walk skip hop crawl swim fly climb dance", None),
        ],
        "medium": [
            ("the quick brown fox jumps over the lazy dog near the riverbank while watching sunset", None),
            ("pack my box with five dozen liquor jugs carefully before the journey begins tomorrow", None),
        ],
        "hard": [
            ("cryptographic algorithms fundamentally revolutionize cybersecurity infrastructure methodologies systematically", None),
        ],
        "expert": [
            ("pneumonoultramicroscopicsilicovolcanoconiosis antidisestablishmentarianism floccinaucinihilipilification", None),
        ],
    },
    "humor": {
        "easy": [
            ("Why don't scientists trust atoms? Because they make up everything!", "Classic joke"),
            ("I'm reading a book about anti-gravity. It's impossible to put down!", "Classic joke"),
        ],
        "medium": [
            ("She sells seashells by the seashore. The shells she sells are seashells, I'm sure.", "Tongue Twister"),
            ("How much wood would a woodchuck chuck if a woodchuck could chuck wood?", "Tongue Twister"),
        ],
        "hard": [
            ("According to all known laws of aviation, there is no way a bee should be able to fly. Its wings are too small to get its fat little body off the ground. The bee, of course, flies anyway.", "Bee Movie"),
        ],
        "expert": [
            ("Buffalo buffalo Buffalo buffalo buffalo buffalo Buffalo buffalo. This is a grammatically correct sentence using buffalo as noun, verb, and proper noun simultaneously.", "Linguistic oddity"),
        ],
    },
    "modern": {
        "easy": [
            ("The internet has revolutionized how we communicate, work, and procrastinate.", "Tech blog"),
        ],
        "medium": [
            ("Climate change remains the defining challenge of our generation, requiring unprecedented cooperation between nations, industries, and individuals worldwide.", "News article"),
        ],
        "hard": [
            ("Quantum computing represents a paradigm shift in computational capability, leveraging quantum mechanical phenomena such as superposition and entanglement to process information in ways classical computers cannot match.", "Science article"),
        ],
        "expert": [
            ("The intersection of artificial general intelligence research, quantum computing advancements, and biotechnological breakthroughs suggests we may be approaching a technological singularity, though experts remain divided on timelines and implications.", "Futurism article"),
        ],
    },
}

COMMON_WORDS = (
    "the be to of and a in that have I it for not on with he as you do at "
    "this but his by from they we say her she or an will my one all would "
    "there their what so up out if about who get which go me when make can "
    "like time no just him know take people into year your good some could "
    "them see other than then now look only come its over think also"
).split()


@runtime_checkable
class TextProvider(Protocol):
    def get_text(self, category_id: str, difficulty: str) -> TextItem: ...


def get_category(category_id: str) -> Category | None:
    for category in CATEGORIES:
        if category.id == category_id:
            return category
    return None


class ContentLibrary:
    """Text provider backed by the built-in library."""

    def __init__(
        self,
        library: dict[str, dict[str, list[tuple[str, str | None]]]] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._library = LIBRARY if library is None else library
        self._rng = rng or random.Random()

    def random_words(self, count: int = RANDOM_WORD_COUNT) -> str:
        return " ".join(self._rng.choice(COMMON_WORDS) for _ in range(count))

    def get_text(self, category_id: str, difficulty: str) -> TextItem:
        by_difficulty = self._library.get(category_id)
        if by_difficulty is None:
            logger.warning("Category %s not found, using random words", category_id)
            return TextItem(text=self.random_words(), source="Random words")

        items = by_difficulty.get(difficulty) or by_difficulty.get("easy")
        if not items:
            logger.warning("No content for %s/%s, using random words", category_id, difficulty)
            return TextItem(text=self.random_words(), source="Random words")

        text, source = self._rng.choice(items)
        return TextItem(text=text, source=source or category_id)

    def get_random_text(self, unlocked: Sequence[str], difficulty: str = "medium") -> TextItem:
        """Text from a randomly chosen unlocked category."""
        if not unlocked:
            return self.get_text(DEFAULT_CATEGORY, difficulty)
        return self.get_text(self._rng.choice(list(unlocked)), difficulty)


# Quick play draws an unlocked category at medium; custom ignores unlocks.
GAME_MODES = ("quick", "campaign", "custom")
QUICK_DIFFICULTY = "medium"


def selectable_categories(mode: str, unlocked: Sequence[str]) -> list[str]:
    """Category ids a player may pick by hand in the given game mode."""
    if mode == "custom":
        return [category.id for category in CATEGORIES]
    return [category_id for category_id in unlocked if get_category(category_id)] or [DEFAULT_CATEGORY]


def resolve_match_choice(
    mode: str,
    category_id: str,
    difficulty: str,
    unlocked: Sequence[str],
    rng: random.Random | None = None,
) -> tuple[str, str]:
    """Category and difficulty a match will actually use."""
    if mode == "quick":
        pool = selectable_categories("campaign", unlocked)
        return (rng or random).choice(pool), QUICK_DIFFICULTY
    allowed = selectable_categories(mode, unlocked)
    if category_id not in allowed:
        logger.warning("Category %s is not available in %s mode", category_id, mode)
        category_id = allowed[0]
    return category_id, difficulty
