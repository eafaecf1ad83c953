"""
Deck errors.

Every error is raised to the immediate caller before any state changes.
Drawing from an empty deck is not an error.
"""


class DeckError(Exception):
    """Base class for deck errors."""
    pass


class InvalidArgumentError(DeckError, TypeError):
    """A required reference is missing or unusable (strategy, card sequence, random source)."""
    pass


class OutOfRangeError(DeckError, ValueError):
    """A numeric setting such as a pass count is out of range."""
    pass


class DeckConfigError(DeckError, ValueError):
    """A configuration value could not be parsed."""
    pass
