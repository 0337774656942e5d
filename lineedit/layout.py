"""Screen positions and the layout of prompt, input and cursor."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field


@functools.total_ordering
@dataclass
class Position:
    """A screen cell; column 0 is leftmost, row 0 is the top row.

    Positions are ordered by row first, then by column.
    """

    col: int = 0
    row: int = 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.row, self.col) < (other.row, other.col)


@dataclass
class Layout:
    """Where the prompt, cursor and end of input lie on screen."""

    prompt_size: Position = field(default_factory=Position)
    default_prompt: bool = False
    cursor: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)