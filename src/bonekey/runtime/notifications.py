from __future__ import annotations

import logging
import threading
import time
from collections import deque
from dataclasses import dataclass, field

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    message: str
    duration_ms: int
    created_at: float = field(default_factory=time.time)


class NotificationCenter:
    """Transient quick messages shown to the user."""

    def __init__(self, maxlen: int = 64) -> None:
        self._lock = threading.RLock()
        self._items: deque[Notification] = deque(maxlen=int(maxlen))

    def show(self, message: str, duration_ms: int = 2000) -> Notification:
        duration = int(duration_ms)
        if duration <= 0:
            raise ValueError("duration_ms must be a positive integer")
        note = Notification(message=str(message), duration_ms=duration)
        with self._lock:
            self._items.append(note)
        _log.info("%s", note.message)
        return note

    def history(self) -> list[Notification]:
        with self._lock:
            return list(self._items)

    def last(self) -> Notification | None:
        with self._lock:
            return self._items[-1] if self._items else None

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
