from __future__ import annotations

import itertools
import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any

from .animation import Animation, Animator
from .errors import TransactionError
from .selection import KeyframeSelection, SelectionSnapshot

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentState:
    """Curves of every animator of one animation plus the timeline selection."""

    curves: tuple[tuple[Animator, Any], ...]
    selection: SelectionSnapshot

    @classmethod
    def capture(cls, animation: Animation, selection: KeyframeSelection) -> "DocumentState":
        return cls(
            curves=tuple((a, a.snapshot()) for a in animation.tracks()),
            selection=selection.snapshot(),
        )

    def apply(self, selection: KeyframeSelection) -> None:
        for animator, snap in self.curves:
            animator.restore(snap)
        selection.restore(self.selection)


@dataclass(frozen=True)
class Transaction:
    id: int
    label: str
    animation: Animation
    selection: KeyframeSelection
    before: DocumentState
    opened_at: float = field(default_factory=time.time)


@dataclass(frozen=True)
class UndoEntry:
    label: str
    before: DocumentState
    after: DocumentState
    selection: KeyframeSelection
    committed_at: float = field(default_factory=time.time)


class UndoHistory:
    """Linear undo/redo history of committed transactions.

    At most one transaction is open at a time and its handle must be passed
    back to ``commit`` or ``abort``.
    """

    def __init__(self, limit: int = 128) -> None:
        if int(limit) <= 0:
            raise ValueError("limit must be a positive integer")
        self._lock = threading.RLock()
        self._limit = int(limit)
        self._ids = itertools.count(1)
        self._open: Transaction | None = None
        self._undo: list[UndoEntry] = []
        self._redo: list[UndoEntry] = []

    @property
    def open_transaction(self) -> Transaction | None:
        with self._lock:
            return self._open

    def begin(self, label: str, animation: Animation, selection: KeyframeSelection) -> Transaction:
        name = str(label).strip()
        if not name:
            raise ValueError("label cannot be empty")
        with self._lock:
            if self._open is not None:
                raise TransactionError(f"Transaction '{self._open.label}' is still open")
            tx = Transaction(
                id=next(self._ids),
                label=name,
                animation=animation,
                selection=selection,
                before=DocumentState.capture(animation, selection),
            )
            self._open = tx
            _log.debug("Opened transaction #%d '%s'", tx.id, tx.label)
            return tx

    def _close_locked(self, tx: Transaction) -> None:
        if self._open is None:
            raise TransactionError("No transaction is open")
        if self._open is not tx:
            raise TransactionError(f"Transaction #{tx.id} is not the open transaction")
        self._open = None

    def commit(self, tx: Transaction, label: str | None = None) -> UndoEntry:
        with self._lock:
            self._close_locked(tx)
            entry = UndoEntry(
                label=str(label).strip() if label else tx.label,
                before=tx.before,
                after=DocumentState.capture(tx.animation, tx.selection),
                selection=tx.selection,
            )
            self._undo.append(entry)
            if len(self._undo) > self._limit:
                del self._undo[0]
            self._redo.clear()
            _log.debug("Committed transaction #%d as '%s'", tx.id, entry.label)
            return entry

    def abort(self, tx: Transaction) -> None:
        with self._lock:
            self._close_locked(tx)
            tx.before.apply(tx.selection)
            _log.debug("Aborted transaction #%d '%s'", tx.id, tx.label)

    def can_undo(self) -> bool:
        with self._lock:
            return bool(self._undo)

    def can_redo(self) -> bool:
        with self._lock:
            return bool(self._redo)

    def undo_label(self) -> str | None:
        with self._lock:
            return self._undo[-1].label if self._undo else None

    def redo_label(self) -> str | None:
        with self._lock:
            return self._redo[-1].label if self._redo else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._undo)

    def undo(self) -> UndoEntry | None:
        with self._lock:
            if self._open is not None:
                raise TransactionError("Cannot undo while a transaction is open")
            if not self._undo:
                return None
            entry = self._undo.pop()
            entry.before.apply(entry.selection)
            self._redo.append(entry)
            return entry

    def redo(self) -> UndoEntry | None:
        with self._lock:
            if self._open is not None:
                raise TransactionError("Cannot redo while a transaction is open")
            if not self._redo:
                return None
            entry = self._redo.pop()
            entry.after.apply(entry.selection)
            self._undo.append(entry)
            return entry

    def clear(self) -> None:
        with self._lock:
            self._undo.clear()
            self._redo.clear()
