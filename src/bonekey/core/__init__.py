from __future__ import annotations

from .animation import Animation, Animator
from .channels import CHANNEL_ORDER, Channel
from .errors import (
    KeyframeCreationError,
    KeyframeInsertError,
    NoActiveAnimation,
    NoAnimators,
    TransactionError,
)
from .factory import KeyframeFactory
from .keyframes import ChannelCurve, Keyframe, normalize_time, normalize_vec3
from .selection import KeyframeSelection
from .settings import SETTINGS, InserterSettings, SettingsStore
from .undo import DocumentState, Transaction, UndoEntry, UndoHistory

__all__ = [
    "Channel",
    "CHANNEL_ORDER",
    "Keyframe",
    "ChannelCurve",
    "normalize_vec3",
    "normalize_time",
    "Animator",
    "Animation",
    "KeyframeFactory",
    "KeyframeSelection",
    "UndoHistory",
    "Transaction",
    "UndoEntry",
    "DocumentState",
    "InserterSettings",
    "SettingsStore",
    "SETTINGS",
    "KeyframeInsertError",
    "NoActiveAnimation",
    "NoAnimators",
    "KeyframeCreationError",
    "TransactionError",
]
