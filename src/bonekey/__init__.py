from __future__ import annotations

from .commands.insert_keyframes import BatchKeyframeInserter, InsertResult, add_keyframes_to_visible_bones
from .core.animation import Animation, Animator
from .core.channels import CHANNEL_ORDER, Channel
from .core.errors import KeyframeInsertError, NoActiveAnimation, NoAnimators
from .core.keyframes import Keyframe
from .core.settings import SETTINGS, InserterSettings
from .plugin import ACTION_ID, PLUGIN, on_load, on_unload
from .runtime.context import EditorContext
from .runtime.editor import EDITOR, EditorState

__all__ = [
    "Animation",
    "Animator",
    "Channel",
    "CHANNEL_ORDER",
    "Keyframe",
    "EditorContext",
    "EditorState",
    "EDITOR",
    "InserterSettings",
    "SETTINGS",
    "BatchKeyframeInserter",
    "InsertResult",
    "add_keyframes_to_visible_bones",
    "KeyframeInsertError",
    "NoActiveAnimation",
    "NoAnimators",
    "PLUGIN",
    "ACTION_ID",
    "on_load",
    "on_unload",
]
