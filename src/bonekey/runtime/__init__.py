from __future__ import annotations

from .context import EditorContext, KeyframeSource, Notifier, Previewer, TransactionManager
from .editor import EDITOR, EditorState
from .notifications import Notification, NotificationCenter
from .preview import PreviewRenderer
from .viewport import ScrollState, ViewportScroll, preserve_scroll

__all__ = [
    "EditorContext",
    "KeyframeSource",
    "TransactionManager",
    "Previewer",
    "Notifier",
    "EditorState",
    "EDITOR",
    "Notification",
    "NotificationCenter",
    "PreviewRenderer",
    "ScrollState",
    "ViewportScroll",
    "preserve_scroll",
]
