from __future__ import annotations

from .insert_keyframes import BatchKeyframeInserter, InsertResult, add_keyframes_to_visible_bones, success_message

__all__ = [
    "BatchKeyframeInserter",
    "InsertResult",
    "add_keyframes_to_visible_bones",
    "success_message",
]
