"""Grapheme segmentation and word-boundary tests for the line buffer."""

from __future__ import annotations

import regex

from lineedit.commands import Word

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split ``text`` into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def grapheme_indices(text: str) -> list[tuple[int, str]]:
    """Each grapheme cluster of ``text`` with the index where it starts."""
    return [(m.start(), m.group()) for m in _GRAPHEME.finditer(text)]


def _is_alphanumeric(grapheme: str) -> bool:
    return all(ch.isalnum() for ch in grapheme)


def _has_whitespace(grapheme: str) -> bool:
    return any(ch.isspace() for ch in grapheme)


def _is_vi_word_char(grapheme: str) -> bool:
    return _is_alphanumeric(grapheme) or grapheme == "_"


def is_word_char(word_def: Word, grapheme: str) -> bool:
    """Whether ``grapheme`` belongs to a word under ``word_def``."""
    if word_def is Word.EMACS:
        return _is_alphanumeric(grapheme)
    if word_def is Word.VI:
        return _is_vi_word_char(grapheme)
    if word_def is Word.BIG:
        return not _has_whitespace(grapheme)
    raise ValueError(f"unknown word definition: {word_def!r}")


def is_other_char(grapheme: str) -> bool:
    """Whether ``grapheme`` is punctuation-like: neither blank nor a vi word char."""
    return not (_has_whitespace(grapheme) or _is_vi_word_char(grapheme))


def is_start_of_word(word_def: Word, previous: str, grapheme: str) -> bool:
    """Whether a word starts at ``grapheme``, given the grapheme before it."""
    return (
        not is_word_char(word_def, previous) and is_word_char(word_def, grapheme)
    ) or (word_def is Word.VI and not is_other_char(previous) and is_other_char(grapheme))


def is_end_of_word(word_def: Word, grapheme: str, following: str) -> bool:
    """Whether a word ends at ``grapheme``, given the grapheme after it."""
    return (
        not is_word_char(word_def, following) and is_word_char(word_def, grapheme)
    ) or (word_def is Word.VI and not is_other_char(following) and is_other_char(grapheme))