from __future__ import annotations

import pytest

from bonekey.core.animation import Animation, Animator
from bonekey.core.channels import Channel
from bonekey.core.errors import TransactionError
from bonekey.core.factory import KeyframeFactory
from bonekey.core.selection import KeyframeSelection
from bonekey.core.undo import UndoHistory


def _animation() -> Animation:
    anim = Animation("idle")
    anim.add_animator(Animator("body"))
    return anim


def test_commit_then_undo_and_redo() -> None:
    anim = _animation()
    body = anim.get_animator("body")
    selection = KeyframeSelection()
    history = UndoHistory()

    tx = history.begin("Key body", anim, selection)
    kf = KeyframeFactory().request_keyframe(body, Channel.POSITION, 1.0)
    assert kf is not None
    selection.add(kf)
    entry = history.commit(tx, "Key body at 1")

    assert entry.label == "Key body at 1"
    assert history.undo_label() == "Key body at 1"
    assert history.open_transaction is None

    history.undo()
    assert body.keyframe_count() == 0
    assert len(selection) == 0
    assert kf.selected is False
    assert history.can_redo()

    history.redo()
    assert body.curve(Channel.POSITION).at(1.0) is kf
    assert kf in selection
    assert kf.selected is True


def test_empty_transaction_still_records_an_entry() -> None:
    anim = _animation()
    history = UndoHistory()
    tx = history.begin("Nothing", anim, KeyframeSelection())
    history.commit(tx)
    assert len(history) == 1
    assert history.undo_label() == "Nothing"


def test_abort_rolls_back_without_entry() -> None:
    anim = _animation()
    body = anim.get_animator("body")
    history = UndoHistory()

    tx = history.begin("Key body", anim, KeyframeSelection())
    KeyframeFactory().request_keyframe(body, Channel.SCALE, 0.0)
    history.abort(tx)

    assert body.keyframe_count() == 0
    assert not history.can_undo()


def test_only_the_open_handle_can_be_closed() -> None:
    anim = _animation()
    selection = KeyframeSelection()
    history = UndoHistory()

    tx = history.begin("first", anim, selection)
    with pytest.raises(TransactionError):
        history.begin("second", anim, selection)
    with pytest.raises(TransactionError):
        history.undo()

    history.commit(tx)
    with pytest.raises(TransactionError):
        history.commit(tx)
    with pytest.raises(ValueError):
        history.begin("  ", anim, selection)


def test_new_commit_clears_redo() -> None:
    anim = _animation()
    selection = KeyframeSelection()
    history = UndoHistory()

    history.commit(history.begin("a", anim, selection))
    history.undo()
    assert history.redo_label() == "a"

    history.commit(history.begin("b", anim, selection))
    assert not history.can_redo()
    assert history.undo_label() == "b"
