# lineedit

The building blocks of an interactive line editor. None of them need a
terminal.

- `lineedit.commands` holds the editing commands (`Cmd`, `CmdKind`) and the
  movements they act on (`Movement`, `MovementKind`). It also holds the
  options those take: `Word`, `At`, `Anchor` and `CharSearch` /
  `CharSearchKind`. Commands and movements are frozen dataclasses. Each one
  checks that its kind has the arguments it needs. `Cmd.redo` replays a
  repeatable command with a new repeat count, and `repeat_count` picks which
  count to use.
- `lineedit.words` splits text into extended grapheme clusters (`graphemes`,
  `grapheme_indices`). It also tests word boundaries under the three word
  definitions (`is_word_char`, `is_other_char`, `is_start_of_word`,
  `is_end_of_word`):
  - `Word.EMACS` counts only alphanumerics as word characters.
  - `Word.VI` adds `_` and treats punctuation runs as words of their own.
  - `Word.BIG` counts everything that is not blank.
- `lineedit.motions` works out cursor targets over a plain string. It never
  changes the text: each function returns the new position, or `None` when
  the motion cannot be made. The functions are `next_pos`, `prev_pos`,
  `prev_word_pos`, `next_word_pos`, `search_char_pos`, `lines_up` and
  `lines_down`. A position outside the text raises `ValueError`.
- `lineedit.kill_ring` provides `KillRing`, an Emacs-style ring of killed
  text with `kill`, `yank`, `yank_pop` and `reset`. It also provides
  `KillMode` and `Direction`. The ring can listen for deletions through
  `start_killing`, `delete` and `stop_killing`.
- `lineedit.layout` provides `Position` and `Layout`, which record where the
  prompt, cursor and end of input sit on screen. Positions are ordered by row,
  then by column.

## Installation

```
pip install lineedit
```

## Examples

Word and character motions:

```python
from lineedit.commands import At, CharSearch, CharSearchKind, Word
from lineedit.motions import lines_up, next_word_pos, prev_word_pos, search_char_pos

text = "hello brave world"
assert next_word_pos(text, 0, At.AFTER_END, Word.EMACS, 1) == 5
assert prev_word_pos(text, len(text), Word.EMACS, 1) == 12
assert search_char_pos(text, 0, CharSearch(CharSearchKind.FORWARD, "o"), 1) == 4
assert search_char_pos(text, 0, CharSearch(CharSearchKind.FORWARD_BEFORE, "o"), 1) == 3

assert lines_up("aa\nbb\ncc", 7, 1) == (3, 8)
```

Kill ring:

```python
from lineedit.kill_ring import KillMode, KillRing

ring = KillRing(2)
ring.kill("word1", KillMode.APPEND)
ring.reset()
ring.kill("word2", KillMode.APPEND)
assert ring.yank() == "word2"
assert ring.yank_pop() == (5, "word1")
```

Replaying a command with a new count:

```python
from lineedit.commands import Cmd, CmdKind

cmd = Cmd(CmdKind.SELF_INSERT, count=1, char="a")
assert cmd.redo(3).count == 3
```

## What this package does not do

This package does not read keys from a terminal and does not decode key
presses or modifiers. It does not map keys to commands in Emacs or Vi mode.
It has no editable buffer object that applies commands, and it does not
render, prompt or keep history. It supplies the command and movement values,
the grapheme and word rules, the position arithmetic and the kill ring that
such an editor is built on.

## Running the tests

```
pip install -e .[test]
pytest
```