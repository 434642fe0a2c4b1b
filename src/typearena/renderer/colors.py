"""Color palette."""

# RGB tuples
BG = (22, 22, 34)
PANEL = (34, 34, 52)
HUD_TEXT = (220, 220, 220)
MUTED = (120, 120, 140)
ACCENT = (233, 69, 96)
CHAR_CORRECT = (78, 204, 163)
CHAR_INCORRECT = (233, 69, 96)
CHAR_CURRENT = (255, 217, 61)
CHAR_UNTYPED = (150, 150, 170)

# name -> (bg, panel, text, untyped)
THEMES: dict[str, tuple[tuple[int, int, int], ...]] = {
    "dark": ((22, 22, 34), (34, 34, 52), (220, 220, 220), (150, 150, 170)),
    "light": ((245, 245, 250), (225, 225, 235), (30, 30, 40), (110, 110, 130)),
}


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    value = value.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


def apply_theme(name: str) -> None:
    """Swap the module-level colors used by the renderers at runtime."""
    global BG, PANEL, HUD_TEXT, CHAR_UNTYPED
    BG, PANEL, HUD_TEXT, CHAR_UNTYPED = THEMES.get(name, THEMES["dark"])
