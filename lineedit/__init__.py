"""Editing commands, grapheme-aware word and cursor motions, a kill ring and screen layout."""

__version__ = "0.1.0"

__all__ = ["commands", "kill_ring", "layout", "motions", "words"]