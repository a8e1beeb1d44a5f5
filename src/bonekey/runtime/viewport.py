from __future__ import annotations

import contextlib
import threading
from typing import Iterator, Protocol

import numpy as np


class ScrollState(Protocol):
    def get(self) -> float: ...
    def set(self, offset: float) -> None: ...


class ViewportScroll:
    """Vertical scroll offset of the timeline view."""

    def __init__(self, offset: float = 0.0) -> None:
        self._lock = threading.RLock()
        self._offset = 0.0
        self.set(offset)

    def get(self) -> float:
        with self._lock:
            return self._offset

    def set(self, offset: float) -> None:
        v = float(offset)
        if not np.isfinite(v):
            raise ValueError("scroll offset must be finite")
        with self._lock:
            self._offset = max(0.0, v)


@contextlib.contextmanager
def preserve_scroll(viewport: ScrollState | None) -> Iterator[float | None]:
    """Restore the viewport offset captured on entry, however the block exits."""

    if viewport is None:
        yield None
        return
    offset = viewport.get()
    try:
        yield offset
    finally:
        viewport.set(offset)
