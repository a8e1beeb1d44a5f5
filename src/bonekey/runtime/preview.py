from __future__ import annotations

import threading
from typing import Any, Callable

from ..core.animation import Animation

PoseSource = Callable[[], tuple[Animation | None, float]]


class PreviewRenderer:
    """Keeps the displayed pose in sync with the animation at the cursor time.

    ``source`` returns the animation to display and the timeline time; the
    editor wires it to its own state.
    """

    def __init__(self, source: PoseSource | None = None) -> None:
        self._lock = threading.RLock()
        self._source = source
        self._refresh_count = 0
        self._last_pose: dict[str, dict[str, Any]] | None = None
        self._last_time: float | None = None

    def bind(self, source: PoseSource) -> None:
        with self._lock:
            self._source = source

    @property
    def refresh_count(self) -> int:
        with self._lock:
            return self._refresh_count

    @property
    def last_pose(self) -> dict[str, dict[str, Any]] | None:
        with self._lock:
            return self._last_pose

    @property
    def last_time(self) -> float | None:
        with self._lock:
            return self._last_time

    def refresh(self) -> None:
        with self._lock:
            animation, time = self._source() if self._source is not None else (None, 0.0)
            self._last_pose = animation.evaluate(time) if animation is not None else {}
            self._last_time = float(time)
            self._refresh_count += 1
