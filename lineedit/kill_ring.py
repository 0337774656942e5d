"""Kill ring: storage for killed text that can be yanked back."""

from __future__ import annotations

import enum


class Direction(enum.Enum):
    """Direction in which text is deleted."""

    FORWARD = enum.auto()
    BACKWARD = enum.auto()


class KillMode(enum.Enum):
    """How consecutive kills are merged into the current slot."""

    APPEND = enum.auto()
    PREPEND = enum.auto()


class _Action(enum.Enum):
    KILL = enum.auto()
    YANK = enum.auto()
    OTHER = enum.auto()


class KillRing:
    """A fixed-size ring of killed texts; size 0 disables it."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("kill ring size must not be negative")
        self._capacity = size
        self._slots: list[str] = []
        self._index = 0
        self._last_action = _Action.OTHER
        self._yank_size = 0
        self._killing = False

    @property
    def slots(self) -> tuple[str, ...]:
        """The stored texts, in slot order."""
        return tuple(self._slots)

    @property
    def index(self) -> int:
        """The current slot."""
        return self._index

    def reset(self) -> None:
        """Forget whether the last command was a kill or a yank."""
        self._last_action = _Action.OTHER

    def kill(self, text: str, mode: KillMode) -> None:
        """Add ``text``, merging it with the previous kill if there was one."""
        if self._last_action is _Action.KILL:
            if self._capacity == 0:
                return
            current = self._slots[self._index]
            if mode is KillMode.APPEND:
                self._slots[self._index] = current + text
            else:
                self._slots[self._index] = text + current
            return
        self._last_action = _Action.KILL
        if self._capacity == 0:
            return
        if self._index == self._capacity - 1:
            self._index = 0
        elif self._slots:
            self._index += 1
        if self._index == len(self._slots):
            self._slots.append(text)
        else:
            self._slots[self._index] = text

    def yank(self) -> str | None:
        """The most recently killed text, or None when the ring is empty."""
        if not self._slots:
            return None
        text = self._slots[self._index]
        self._last_action = _Action.YANK
        self._yank_size = len(text)
        return text

    def yank_pop(self) -> tuple[int, str] | None:
        """Step to the previous slot after a yank.

        Returns the size of the previously yanked text and the new text,
        or None when the last command was not a yank.
        """
        if self._last_action is not _Action.YANK or not self._slots:
            return None
        previous_size = self._yank_size
        self._index = (self._index - 1) % len(self._slots)
        text = self._slots[self._index]
        self._yank_size = len(text)
        return previous_size, text

    def start_killing(self) -> None:
        """Begin recording deletions as kills."""
        self._killing = True

    def delete(self, idx: int, string: str, direction: Direction) -> None:
        """Record deleted text while killing is active."""
        if not self._killing:
            return
        mode = KillMode.APPEND if direction is Direction.FORWARD else KillMode.PREPEND
        self.kill(string, mode)

    def stop_killing(self) -> None:
        """Stop recording deletions."""
        self._killing = False