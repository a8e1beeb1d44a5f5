from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Any

from .channels import CHANNEL_ORDER, Channel


@dataclass(frozen=True)
class InserterSettings:
    """Preferences of the batch keyframe command.

    These live in memory only; nothing is read from the environment or disk.
    """

    notice_duration_ms: int = 2000
    undo_label: str = "Add keyframes to all visible bones"
    channels: tuple[Channel, ...] = CHANNEL_ORDER
    force_duplicate: bool = True


class SettingsStore:
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._settings = InserterSettings()

    def get(self) -> InserterSettings:
        with self._lock:
            return self._settings

    def update(self, **changes: Any) -> InserterSettings:
        with self._lock:
            merged = replace(self._settings, **changes)
            self._settings = validate_settings(merged)
            return self._settings

    def reset(self) -> InserterSettings:
        with self._lock:
            self._settings = InserterSettings()
            return self._settings


def validate_settings(settings: InserterSettings) -> InserterSettings:
    duration = int(settings.notice_duration_ms)
    if duration <= 0:
        raise ValueError("notice_duration_ms must be a positive integer")
    label = str(settings.undo_label).strip()
    if not label:
        raise ValueError("undo_label cannot be empty")

    channels = tuple(Channel.from_any(c) for c in settings.channels)
    if not channels:
        raise ValueError("channels cannot be empty")
    if len(set(channels)) != len(channels):
        raise ValueError("channels must not repeat")
    # Whatever subset is enabled, it is walked in the canonical order.
    ordered = tuple(ch for ch in CHANNEL_ORDER if ch in channels)

    return InserterSettings(
        notice_duration_ms=duration,
        undo_label=label,
        channels=ordered,
        force_duplicate=bool(settings.force_duplicate),
    )


SETTINGS = SettingsStore()
