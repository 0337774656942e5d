"""Cursor target computations over a line of text.

Positions are indices into the Python string. Every function leaves the
text untouched and returns the position it computes. It returns None when
the motion cannot be made.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import TypeVar

from lineedit.commands import At, CharSearch, CharSearchKind, Word
from lineedit.words import grapheme_indices, graphemes, is_end_of_word, is_start_of_word

_T = TypeVar("_T")


def _check_pos(text: str, pos: int) -> None:
    if not 0 <= pos <= len(text):
        raise ValueError(f"position {pos} is outside the text (0..{len(text)})")


def _last_of_first(items: Iterable[_T], n: int) -> _T | None:
    """The last of the first ``n`` items, or None if there are none."""
    last = None
    for item in islice(items, n):
        last = item
    return last


def next_pos(text: str, pos: int, n: int) -> int | None:
    """The position ``n`` graphemes after ``pos``, stopping at the end."""
    _check_pos(text, pos)
    if pos == len(text):
        return None
    found = _last_of_first(grapheme_indices(text[pos:]), n)
    if found is None:
        return None
    i, g = found
    return pos + i + len(g)


def prev_pos(text: str, pos: int, n: int) -> int | None:
    """The position ``n`` graphemes before ``pos``, stopping at the start."""
    _check_pos(text, pos)
    if pos == 0:
        return None
    found = _last_of_first(reversed(grapheme_indices(text[:pos])), n)
    return None if found is None else found[0]


def prev_word_pos(text: str, pos: int, word_def: Word, n: int) -> int | None:
    """The start of the ``n``-th word before ``pos``."""
    _check_pos(text, pos)
    if pos == 0:
        return None
    gis: Iterator[tuple[int, str]] = iter(reversed(grapheme_indices(text[:pos])))
    sow = 0
    for _ in range(n):
        sow = 0
        gj = next(gis, None)
        while True:
            if gj is None:
                return sow
            j, y = gj
            gi = next(gis, None)
            if gi is None:
                return sow
            if is_start_of_word(word_def, gi[1], y):
                sow = j
                break
            gj = gi
    return sow


def next_word_pos(text: str, pos: int, at: At, word_def: Word, n: int) -> int | None:
    """The start or end (per ``at``) of the ``n``-th word after ``pos``."""
    _check_pos(text, pos)
    if pos == len(text):
        return None
    gis: Iterator[tuple[int, str]] = iter(grapheme_indices(text[pos:]))
    gi = next(gis, None) if at is At.BEFORE_END else None
    after = word_def is Word.EMACS or at is At.AFTER_END
    wp = 0
    exhausted = False
    for _ in range(n):
        wp = 0
        gi = next(gis, None)
        while True:
            if gi is None:
                exhausted = True
                break
            i, x = gi
            gj = next(gis, None)
            if gj is None:
                exhausted = True
                break
            j, y = gj
            if at is At.START:
                if is_start_of_word(word_def, x, y):
                    wp = j
                    break
            elif is_end_of_word(word_def, x, y):
                wp = j if after else i
                break
            gi = gj
        if exhausted:
            break
    if wp == 0:
        if after:
            return len(text)
        if gi is not None and gi[0] != 0:
            return gi[0] + pos
        return None
    return wp + pos


def search_char_pos(text: str, pos: int, cs: CharSearch, n: int) -> int | None:
    """Where the character search ``cs`` lands, repeated ``n`` times."""
    _check_pos(text, pos)
    c = cs.char
    shift = 0
    if cs.kind in (CharSearchKind.BACKWARD, CharSearchKind.BACKWARD_AFTER):
        hits = (i for i in range(pos - 1, -1, -1) if text[i] == c)
        found = _last_of_first(hits, n)
    else:
        if pos == len(text):
            return None
        shift = pos + len(graphemes(text[pos:])[0])
        if shift >= len(text):
            return None
        hits = (i for i, ch in enumerate(text[shift:]) if ch == c)
        found = _last_of_first(hits, n)
    if found is None:
        return None
    if cs.kind is CharSearchKind.BACKWARD:
        return found
    if cs.kind is CharSearchKind.BACKWARD_AFTER:
        return found + 1
    if cs.kind is CharSearchKind.FORWARD:
        return shift + found
    return shift + found - 1


def lines_up(text: str, pos: int, n: int) -> tuple[int, int] | None:
    """The range from ``n`` lines above the cursor's line to its end.

    Returns None when the cursor is on the first line.
    """
    _check_pos(text, pos)
    off = text.rfind("\n", 0, pos)
    if off == -1:
        return None
    start = off + 1
    nl = text.find("\n", pos)
    end = len(text) if nl == -1 else nl + 1
    for _ in range(n):
        off = text.rfind("\n", 0, start - 1)
        if off == -1:
            start = 0
            break
        start = off + 1
    return start, end


def lines_down(text: str, pos: int, n: int) -> tuple[int, int] | None:
    """The range from the cursor's line to ``n`` lines below it.

    Returns None when the cursor is on the last line.
    """
    _check_pos(text, pos)
    off = text.find("\n", pos)
    if off == -1:
        return None
    end = off + 1
    start = text.rfind("\n", 0, pos)
    if start == -1:
        start = 0
    for _ in range(n):
        off = text.find("\n", end)
        if off == -1:
            end = len(text)
            break
        end = off + 1
    return start, end