import pytest

from lineedit.commands import (
    Anchor,
    At,
    CharSearch,
    CharSearchKind,
    Cmd,
    CmdKind,
    Movement,
    MovementKind,
    Word,
    repeat_count,
)


def fwd(n):
    return Movement(MovementKind.FORWARD_CHAR, count=n)


def back(n):
    return Movement(MovementKind.BACKWARD_CHAR, count=n)


def test_repeat_count():
    assert repeat_count(4, None) == 4
    assert repeat_count(4, 7) == 7
    assert repeat_count(4, 0) == 0


@pytest.mark.parametrize("kind", list(CharSearchKind))
def test_char_search_opposite_is_involution(kind):
    cs = CharSearch(kind, "x")
    opp = cs.opposite()
    assert opp.kind is not kind
    assert opp.char == "x"
    assert opp.opposite() == cs


def test_char_search_opposite_pairs():
    assert CharSearch(CharSearchKind.FORWARD, "a").opposite() == CharSearch(
        CharSearchKind.BACKWARD, "a"
    )
    assert CharSearch(CharSearchKind.FORWARD_BEFORE, "a").opposite() == CharSearch(
        CharSearchKind.BACKWARD_AFTER, "a"
    )


def test_char_search_needs_one_char():
    with pytest.raises(ValueError):
        CharSearch(CharSearchKind.FORWARD, "ab")


def test_movement_redo_counted():
    mvt = Movement(MovementKind.FORWARD_WORD, count=2, at=At.START, word=Word.VI)
    assert mvt.redo(None) == mvt
    redone = mvt.redo(5)
    assert redone.count == 5
    assert redone.at is At.START and redone.word is Word.VI


@pytest.mark.parametrize(
    "kind",
    [
        MovementKind.WHOLE_LINE,
        MovementKind.BEGINNING_OF_LINE,
        MovementKind.END_OF_LINE,
        MovementKind.VI_FIRST_PRINT,
        MovementKind.WHOLE_BUFFER,
        MovementKind.BEGINNING_OF_BUFFER,
        MovementKind.END_OF_BUFFER,
    ],
)
def test_movement_redo_uncounted_unchanged(kind):
    mvt = Movement(kind)
    assert mvt.redo(9) == mvt


def test_movement_redo_char_search():
    cs = CharSearch(CharSearchKind.FORWARD, "z")
    mvt = Movement(MovementKind.VI_CHAR_SEARCH, count=1, search=cs)
    redone = mvt.redo(3)
    assert redone.count == 3
    assert redone.search == cs


def test_movement_validation():
    with pytest.raises(ValueError):
        Movement(MovementKind.FORWARD_CHAR)
    with pytest.raises(ValueError):
        Movement(MovementKind.END_OF_LINE, count=1)
    with pytest.raises(ValueError):
        Movement(MovementKind.BACKWARD_WORD, count=1)
    with pytest.raises(ValueError):
        Movement(MovementKind.LINE_UP, count=-1)


def test_cmd_validation():
    with pytest.raises(ValueError):
        Cmd(CmdKind.KILL)
    with pytest.raises(ValueError):
        Cmd(CmdKind.NOOP, count=1)
    with pytest.raises(ValueError):
        Cmd(CmdKind.SELF_INSERT, count=1, char="ab")
    with pytest.raises(ValueError):
        Cmd(CmdKind.ACCEPT_OR_INSERT_LINE)


def test_should_reset_kill_ring():
    assert Cmd(CmdKind.KILL, movement=back(1)).should_reset_kill_ring() is True
    assert Cmd(CmdKind.KILL, movement=fwd(1)).should_reset_kill_ring() is True
    assert (
        Cmd(CmdKind.KILL, movement=Movement(MovementKind.END_OF_LINE)).should_reset_kill_ring()
        is False
    )
    for cmd in (
        Cmd(CmdKind.CLEAR_SCREEN),
        Cmd(CmdKind.REPLACE, movement=fwd(1)),
        Cmd(CmdKind.NOOP),
        Cmd(CmdKind.SUSPEND),
        Cmd(CmdKind.YANK, count=1, anchor=Anchor.BEFORE),
        Cmd(CmdKind.YANK_POP),
    ):
        assert cmd.should_reset_kill_ring() is False
    assert Cmd(CmdKind.ACCEPT_LINE).should_reset_kill_ring() is True
    assert Cmd(CmdKind.SELF_INSERT, count=1, char="a").should_reset_kill_ring() is True


def test_repeatable():
    move = Cmd(CmdKind.MOVE, movement=fwd(1))
    assert move.is_repeatable() is True
    assert move.is_repeatable_change() is False
    kill = Cmd(CmdKind.KILL, movement=fwd(1))
    assert kill.is_repeatable() and kill.is_repeatable_change()
    undo = Cmd(CmdKind.UNDO, count=1)
    assert undo.is_repeatable() is False
    assert Cmd(CmdKind.TRANSPOSE_CHARS).is_repeatable_change() is False


def test_redo_movement_commands():
    for kind in (CmdKind.KILL, CmdKind.MOVE, CmdKind.INDENT, CmdKind.DEDENT, CmdKind.VI_YANK_TO):
        cmd = Cmd(kind, movement=back(1))
        assert cmd.redo(None) == cmd
        assert cmd.redo(4) == Cmd(kind, movement=back(4))


def test_redo_counted_commands():
    ins = Cmd(CmdKind.INSERT, count=1, text="abc")
    assert ins.redo(3) == Cmd(CmdKind.INSERT, count=3, text="abc")
    rc = Cmd(CmdKind.REPLACE_CHAR, count=2, char="q")
    assert rc.redo(None) == rc
    yank = Cmd(CmdKind.YANK, count=1, anchor=Anchor.AFTER)
    assert yank.redo(6) == Cmd(CmdKind.YANK, count=6, anchor=Anchor.AFTER)


def test_redo_self_insert():
    cmd = Cmd(CmdKind.SELF_INSERT, count=1, char="a")
    assert cmd.redo(2) == Cmd(CmdKind.SELF_INSERT, count=2, char="a")
    assert cmd.redo(None, "hello") == Cmd(CmdKind.INSERT, count=1, text="hello")


def test_redo_replace_overwrite_mode_uses_last_insert():
    cmd = Cmd(CmdKind.REPLACE, movement=fwd(0))
    text = "abc"
    assert cmd.redo(None, text) == Cmd(CmdKind.REPLACE, movement=fwd(len(text)), text=text)
    assert cmd.redo(None, None) == Cmd(CmdKind.REPLACE, movement=fwd(0))


def test_redo_replace_other_movement():
    cmd = Cmd(CmdKind.REPLACE, movement=fwd(1))
    assert cmd.redo(3, "xy") == Cmd(CmdKind.REPLACE, movement=fwd(3), text="xy")
    with_text = Cmd(CmdKind.REPLACE, movement=fwd(1), text="kept")
    assert with_text.redo(2, "other") == Cmd(CmdKind.REPLACE, movement=fwd(2), text="kept")


def test_redo_unrepeatable_raises():
    with pytest.raises(ValueError):
        Cmd(CmdKind.ABORT).redo(None)
    with pytest.raises(ValueError):
        Cmd(CmdKind.UNDO, count=1).redo(2)


def test_cmd_equality_and_hash():
    a = Cmd(CmdKind.ACCEPT_OR_INSERT_LINE, accept_in_the_middle=True)
    b = Cmd(CmdKind.ACCEPT_OR_INSERT_LINE, accept_in_the_middle=True)
    c = Cmd(CmdKind.ACCEPT_OR_INSERT_LINE, accept_in_the_middle=False)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert "ACCEPT_OR_INSERT_LINE" in repr(a)