from __future__ import annotations

from typing import Iterator

from .keyframes import Keyframe


SelectionSnapshot = tuple[tuple[Keyframe, bool], ...]


class KeyframeSelection:
    """Keyframes currently selected in the timeline, in selection order."""

    def __init__(self) -> None:
        self._items: list[Keyframe] = []
        self._ids: set[int] = set()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Keyframe]:
        return iter(list(self._items))

    def __contains__(self, keyframe: object) -> bool:
        return id(keyframe) in self._ids

    def add(self, keyframe: Keyframe) -> None:
        if id(keyframe) not in self._ids:
            self._items.append(keyframe)
            self._ids.add(id(keyframe))
        keyframe.selected = True

    def discard(self, keyframe: Keyframe) -> None:
        if id(keyframe) in self._ids:
            self._items = [k for k in self._items if k is not keyframe]
            self._ids.discard(id(keyframe))
        keyframe.selected = False

    def clear(self) -> None:
        for k in self._items:
            k.selected = False
        self._items = []
        self._ids = set()

    def snapshot(self) -> SelectionSnapshot:
        return tuple((k, bool(k.selected)) for k in self._items)

    def restore(self, snapshot: SelectionSnapshot) -> None:
        for k in self._items:
            k.selected = False
        self._items = []
        self._ids = set()
        for keyframe, selected in snapshot:
            keyframe.selected = selected
            self._items.append(keyframe)
            self._ids.add(id(keyframe))
