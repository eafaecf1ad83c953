"""
Core domain layer.

The core only depends on other core modules, never on the application layer.

Modules:
    deck: cards, decks and shuffle strategies
    exceptions: error taxonomy shared by the core
"""

__all__ = []
