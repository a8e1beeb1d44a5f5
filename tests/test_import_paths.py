from __future__ import annotations


def test_top_level_exports() -> None:
    import bonekey

    assert bonekey.BatchKeyframeInserter is not None
    assert bonekey.add_keyframes_to_visible_bones is not None
    assert bonekey.EDITOR is not None
    assert bonekey.SETTINGS is not None
    assert bonekey.PLUGIN.id == "optimized_add_keyfames_to_all_bones"
    assert bonekey.ACTION_ID == "optimized_add_keyframe_all_bones"


def test_package_paths_work() -> None:
    from bonekey.commands import BatchKeyframeInserter, InsertResult
    from bonekey.core import KeyframeFactory, KeyframeSelection, UndoHistory
    from bonekey.runtime import EDITOR, EditorContext, preserve_scroll

    assert BatchKeyframeInserter is not None
    assert InsertResult is not None
    assert KeyframeFactory is not None
    assert KeyframeSelection is not None
    assert UndoHistory is not None
    assert EDITOR is not None
    assert EditorContext is not None
    assert preserve_scroll is not None
