from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..core.animation import Animation, Animator
from ..core.channels import Channel
from ..core.keyframes import Keyframe
from ..core.selection import KeyframeSelection
from ..core.undo import Transaction, UndoEntry
from .viewport import ScrollState


class KeyframeSource(Protocol):
    def request_keyframe(
        self,
        track: Animator,
        channel: Channel | str,
        time: float,
        force_duplicate: bool = True,
    ) -> Keyframe | None: ...


class TransactionManager(Protocol):
    def begin(self, label: str, animation: Animation, selection: KeyframeSelection) -> Transaction: ...
    def commit(self, tx: Transaction, label: str | None = None) -> UndoEntry: ...
    def abort(self, tx: Transaction) -> None: ...


class Previewer(Protocol):
    def refresh(self) -> None: ...


class Notifier(Protocol):
    def show(self, message: str, duration_ms: int = 2000) -> object: ...


@dataclass(frozen=True)
class EditorContext:
    """Everything the batch keyframe command reads or mutates.

    ``animation`` is the active animation (None when nothing is selected) and
    ``time`` the timeline cursor.
    """

    animation: Animation | None
    time: float
    selection: KeyframeSelection
    keyframes: KeyframeSource
    history: TransactionManager
    preview: Previewer
    notifications: Notifier
    viewport: ScrollState | None = None

    def tracks(self) -> list[Animator]:
        if self.animation is None:
            return []
        return self.animation.tracks()
