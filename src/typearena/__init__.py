"""TypeArena: local turn-based multiplayer typing game."""

__version__ = "0.1.0"
