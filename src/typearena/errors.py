"""Exceptions raised by the game engine."""


class TypeArenaError(Exception):
    """Base class for errors raised by typearena."""


class ConfigurationError(TypeArenaError, ValueError):
    """Raised when a match or session is configured with an unusable value."""


class StorageError(TypeArenaError):
    """Raised when the profile database cannot be opened or written."""
