from __future__ import annotations

import threading

import numpy as np

from ..core.animation import Animation
from ..core.factory import KeyframeFactory
from ..core.selection import KeyframeSelection
from ..core.undo import UndoHistory
from .context import EditorContext
from .notifications import NotificationCenter
from .preview import PreviewRenderer
from .viewport import ViewportScroll


class EditorState:
    """In-memory animation editor: animations, active selection and timeline cursor."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._animations: dict[str, Animation] = {}
        self._active: str | None = None
        self._time = 0.0
        self.selection = KeyframeSelection()
        self.history = UndoHistory()
        self.factory = KeyframeFactory()
        self.notifications = NotificationCenter()
        self.viewport = ViewportScroll()
        self.preview = PreviewRenderer(source=lambda: (self.active_animation(), self.time))

    @property
    def time(self) -> float:
        with self._lock:
            return self._time

    def set_time(self, time: float) -> float:
        t = float(time)
        if not np.isfinite(t):
            raise ValueError("time must be finite")
        if t < 0.0:
            raise ValueError("time must be >= 0")
        with self._lock:
            self._time = t
            return self._time

    def add_animation(self, animation: Animation, *, select: bool = False) -> Animation:
        with self._lock:
            if animation.name in self._animations:
                raise ValueError(f"Animation '{animation.name}' already exists")
            self._animations[animation.name] = animation
            if select:
                self._active = animation.name
            return animation

    def remove_animation(self, name: str) -> bool:
        with self._lock:
            existed = self._animations.pop(name, None) is not None
            if existed and self._active == name:
                self._active = None
                self.selection.clear()
            return existed

    def animations(self) -> list[Animation]:
        with self._lock:
            return list(self._animations.values())

    def select_animation(self, name: str | None) -> Animation | None:
        with self._lock:
            if name is None:
                self._active = None
                return None
            if name not in self._animations:
                raise KeyError(name)
            if self._active != name:
                self.selection.clear()
            self._active = name
            return self._animations[name]

    def active_animation(self) -> Animation | None:
        with self._lock:
            if self._active is None:
                return None
            return self._animations.get(self._active)

    def context(self) -> EditorContext:
        with self._lock:
            return EditorContext(
                animation=self.active_animation(),
                time=self._time,
                selection=self.selection,
                keyframes=self.factory,
                history=self.history,
                preview=self.preview,
                notifications=self.notifications,
                viewport=self.viewport,
            )


EDITOR = EditorState()
