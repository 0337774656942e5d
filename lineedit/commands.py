"""Editing commands and the movements they act on."""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields, replace


def repeat_count(previous: int, new: int | None) -> int:
    """The count to replay a command with: ``new`` if given, else ``previous``."""
    return previous if new is None else new


class Word(enum.Enum):
    """Different word definitions."""

    BIG = enum.auto()  # non-blank characters
    EMACS = enum.auto()  # alphanumeric characters
    VI = enum.auto()  # alphanumeric characters and '_'


class At(enum.Enum):
    """Where to move with respect to a word boundary."""

    START = enum.auto()
    BEFORE_END = enum.auto()
    AFTER_END = enum.auto()


class Anchor(enum.Enum):
    """Where to paste, relative to the cursor."""

    AFTER = enum.auto()
    BEFORE = enum.auto()


class CharSearchKind(enum.Enum):
    """Direction and landing point of a character search."""

    FORWARD = enum.auto()
    FORWARD_BEFORE = enum.auto()
    BACKWARD = enum.auto()
    BACKWARD_AFTER = enum.auto()


_OPPOSITE_SEARCH = {
    CharSearchKind.FORWARD: CharSearchKind.BACKWARD,
    CharSearchKind.FORWARD_BEFORE: CharSearchKind.BACKWARD_AFTER,
    CharSearchKind.BACKWARD: CharSearchKind.FORWARD,
    CharSearchKind.BACKWARD_AFTER: CharSearchKind.FORWARD_BEFORE,
}


@dataclass(frozen=True)
class CharSearch:
    """A search for one character on the current line."""

    kind: CharSearchKind
    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError("a character search needs exactly one character")

    def opposite(self) -> CharSearch:
        """The same search in the other direction."""
        return CharSearch(_OPPOSITE_SEARCH[self.kind], self.char)


class MovementKind(enum.Enum):
    """Where to move."""

    WHOLE_LINE = enum.auto()
    BEGINNING_OF_LINE = enum.auto()
    END_OF_LINE = enum.auto()
    BACKWARD_WORD = enum.auto()
    FORWARD_WORD = enum.auto()
    VI_CHAR_SEARCH = enum.auto()
    VI_FIRST_PRINT = enum.auto()
    BACKWARD_CHAR = enum.auto()
    FORWARD_CHAR = enum.auto()
    LINE_UP = enum.auto()
    LINE_DOWN = enum.auto()
    WHOLE_BUFFER = enum.auto()
    BEGINNING_OF_BUFFER = enum.auto()
    END_OF_BUFFER = enum.auto()


_MOVEMENT_FIELDS: dict[MovementKind, frozenset[str]] = {
    MovementKind.BACKWARD_WORD: frozenset({"count", "word"}),
    MovementKind.FORWARD_WORD: frozenset({"count", "at", "word"}),
    MovementKind.VI_CHAR_SEARCH: frozenset({"count", "search"}),
    MovementKind.BACKWARD_CHAR: frozenset({"count"}),
    MovementKind.FORWARD_CHAR: frozenset({"count"}),
    MovementKind.LINE_UP: frozenset({"count"}),
    MovementKind.LINE_DOWN: frozenset({"count"}),
}


def _check_count(count: object) -> None:
    if not isinstance(count, int) or isinstance(count, bool) or count < 0:
        raise ValueError("a repeat count must be a non-negative integer")


def _compact_repr(obj: object) -> str:
    parts = [repr(getattr(obj, "kind"))]
    parts += [
        f"{f.name}={getattr(obj, f.name)!r}"
        for f in fields(obj)  # type: ignore[arg-type]
        if f.name != "kind" and getattr(obj, f.name) is not None
    ]
    return f"{type(obj).__name__}({', '.join(parts)})"


@dataclass(frozen=True, repr=False)
class Movement:
    """A cursor movement or a range of the input."""

    kind: MovementKind
    count: int | None = None
    at: At | None = None
    word: Word | None = None
    search: CharSearch | None = None

    def __post_init__(self) -> None:
        required = _MOVEMENT_FIELDS.get(self.kind, frozenset())
        for name in ("count", "at", "word", "search"):
            value = getattr(self, name)
            if name in required and value is None:
                raise ValueError(f"{self.kind.name} movement needs {name}")
            if name not in required and value is not None:
                raise ValueError(f"{self.kind.name} movement takes no {name}")
        if self.count is not None:
            _check_count(self.count)

    def __repr__(self) -> str:
        return _compact_repr(self)

    def redo(self, new: int | None) -> Movement:
        """Replay this movement, possibly with a different repeat count."""
        if self.count is None:
            return self
        return replace(self, count=repeat_count(self.count, new))


class CmdKind(enum.Enum):
    """Editing commands."""

    ABORT = enum.auto()
    ACCEPT_LINE = enum.auto()
    BEGINNING_OF_HISTORY = enum.auto()
    CAPITALIZE_WORD = enum.auto()
    CLEAR_SCREEN = enum.auto()
    PASTE_FROM_CLIPBOARD = enum.auto()
    COMPLETE = enum.auto()
    COMPLETE_BACKWARD = enum.auto()
    COMPLETE_HINT = enum.auto()
    DEDENT = enum.auto()
    DOWNCASE_WORD = enum.auto()
    END_OF_FILE = enum.auto()
    END_OF_HISTORY = enum.auto()
    FORWARD_SEARCH_HISTORY = enum.auto()
    HISTORY_SEARCH_BACKWARD = enum.auto()
    HISTORY_SEARCH_FORWARD = enum.auto()
    INDENT = enum.auto()
    INSERT = enum.auto()
    INTERRUPT = enum.auto()
    KILL = enum.auto()
    MOVE = enum.auto()
    NEXT_HISTORY = enum.auto()
    NOOP = enum.auto()
    OVERWRITE = enum.auto()
    PREVIOUS_HISTORY = enum.auto()
    QUOTED_INSERT = enum.auto()
    REPLACE_CHAR = enum.auto()
    REPLACE = enum.auto()
    REVERSE_SEARCH_HISTORY = enum.auto()
    SELF_INSERT = enum.auto()
    SUSPEND = enum.auto()
    TRANSPOSE_CHARS = enum.auto()
    TRANSPOSE_WORDS = enum.auto()
    UNDO = enum.auto()
    UNKNOWN = enum.auto()
    UPCASE_WORD = enum.auto()
    VI_YANK_TO = enum.auto()
    YANK = enum.auto()
    YANK_POP = enum.auto()
    LINE_UP_OR_PREVIOUS_HISTORY = enum.auto()
    LINE_DOWN_OR_NEXT_HISTORY = enum.auto()
    NEWLINE = enum.auto()
    ACCEPT_OR_INSERT_LINE = enum.auto()


# kind -> (required fields, optional fields)
_CMD_FIELDS: dict[CmdKind, tuple[frozenset[str], frozenset[str]]] = {
    CmdKind.DEDENT: (frozenset({"movement"}), frozenset()),
    CmdKind.INDENT: (frozenset({"movement"}), frozenset()),
    CmdKind.KILL: (frozenset({"movement"}), frozenset()),
    CmdKind.MOVE: (frozenset({"movement"}), frozenset()),
    CmdKind.VI_YANK_TO: (frozenset({"movement"}), frozenset()),
    CmdKind.REPLACE: (frozenset({"movement"}), frozenset({"text"})),
    CmdKind.INSERT: (frozenset({"count", "text"}), frozenset()),
    CmdKind.OVERWRITE: (frozenset({"char"}), frozenset()),
    CmdKind.REPLACE_CHAR: (frozenset({"count", "char"}), frozenset()),
    CmdKind.SELF_INSERT: (frozenset({"count", "char"}), frozenset()),
    CmdKind.TRANSPOSE_WORDS: (frozenset({"count"}), frozenset()),
    CmdKind.UNDO: (frozenset({"count"}), frozenset()),
    CmdKind.YANK: (frozenset({"count", "anchor"}), frozenset()),
    CmdKind.LINE_UP_OR_PREVIOUS_HISTORY: (frozenset({"count"}), frozenset()),
    CmdKind.LINE_DOWN_OR_NEXT_HISTORY: (frozenset({"count"}), frozenset()),
    CmdKind.ACCEPT_OR_INSERT_LINE: (frozenset({"accept_in_the_middle"}), frozenset()),
}

_REPEATABLE_CHANGES = frozenset(
    {
        CmdKind.DEDENT,
        CmdKind.INDENT,
        CmdKind.INSERT,
        CmdKind.KILL,
        CmdKind.REPLACE_CHAR,
        CmdKind.REPLACE,
        CmdKind.SELF_INSERT,
        CmdKind.VI_YANK_TO,
        CmdKind.YANK,
    }
)

_KEEP_KILL_RING = frozenset(
    {
        CmdKind.CLEAR_SCREEN,
        CmdKind.KILL,
        CmdKind.REPLACE,
        CmdKind.NOOP,
        CmdKind.SUSPEND,
        CmdKind.YANK,
        CmdKind.YANK_POP,
    }
)

_CHAR_MOVES = frozenset({MovementKind.BACKWARD_CHAR, MovementKind.FORWARD_CHAR})


@dataclass(frozen=True, repr=False)
class Cmd:
    """One editing command, with the arguments its kind takes."""

    kind: CmdKind
    count: int | None = None
    movement: Movement | None = None
    text: str | None = None
    char: str | None = None
    anchor: Anchor | None = None
    accept_in_the_middle: bool | None = None

    def __post_init__(self) -> None:
        required, optional = _CMD_FIELDS.get(self.kind, (frozenset(), frozenset()))
        for name in ("count", "movement", "text", "char", "anchor", "accept_in_the_middle"):
            value = getattr(self, name)
            if name in required and value is None:
                raise ValueError(f"{self.kind.name} command needs {name}")
            if name not in required and name not in optional and value is not None:
                raise ValueError(f"{self.kind.name} command takes no {name}")
        if self.count is not None:
            _check_count(self.count)
        if self.char is not None and (not isinstance(self.char, str) or len(self.char) != 1):
            raise ValueError("a command character must be exactly one character")

    def __repr__(self) -> str:
        return _compact_repr(self)

    def should_reset_kill_ring(self) -> bool:
        """Whether this command ends a run of kills or yanks."""
        if self.kind is CmdKind.KILL:
            assert self.movement is not None
            return self.movement.kind in _CHAR_MOVES
        return self.kind not in _KEEP_KILL_RING

    def is_repeatable_change(self) -> bool:
        """Whether vi's redo command can replay this change."""
        return self.kind in _REPEATABLE_CHANGES

    def is_repeatable(self) -> bool:
        """Whether a numeric argument can be applied to this command."""
        return self.kind is CmdKind.MOVE or self.is_repeatable_change()

    def redo(self, new: int | None, last_insert: str | None = None) -> Cmd:
        """Replay this command, possibly with a different repeat count.

        ``last_insert`` is the text inserted most recently (vi only).
        Raises ValueError for a command that cannot be repeated.
        """
        kind = self.kind
        if kind in (
            CmdKind.DEDENT,
            CmdKind.INDENT,
            CmdKind.KILL,
            CmdKind.MOVE,
            CmdKind.VI_YANK_TO,
        ):
            assert self.movement is not None
            return replace(self, movement=self.movement.redo(new))
        if kind in (CmdKind.INSERT, CmdKind.REPLACE_CHAR, CmdKind.YANK):
            assert self.count is not None
            return replace(self, count=repeat_count(self.count, new))
        if kind is CmdKind.REPLACE:
            assert self.movement is not None
            if self.text is not None:
                return replace(self, movement=self.movement.redo(new))
            if self.movement == Movement(MovementKind.FORWARD_CHAR, count=0):
                size = len(last_insert) if last_insert is not None else 0
                return Cmd(
                    CmdKind.REPLACE,
                    movement=Movement(MovementKind.FORWARD_CHAR, count=size),
                    text=last_insert,
                )
            return Cmd(CmdKind.REPLACE, movement=self.movement.redo(new), text=last_insert)
        if kind is CmdKind.SELF_INSERT:
            assert self.count is not None
            count = repeat_count(self.count, new)
            # consecutive character inserts are replayed as a whole
            if last_insert is not None:
                return Cmd(CmdKind.INSERT, count=count, text=last_insert)
            return replace(self, count=count)
        raise ValueError(f"{kind.name} command cannot be repeated")