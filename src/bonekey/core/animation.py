from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from .channels import CHANNEL_ORDER, Channel, Vec3
from .keyframes import ChannelCurve, CurveSnapshot, Keyframe


@dataclass(eq=False)
class Animator:
    """Per-bone binding of the transform channel curves of one animation.

    Channel support is fixed when the animator is created.
    """

    name: str
    hidden: bool = False
    has_position: bool = True
    has_rotation: bool = True
    has_scale: bool = True
    uuid: str = field(default_factory=lambda: uuid.uuid4().hex)
    _curves: dict[Channel, ChannelCurve] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        name = str(self.name).strip()
        if not name:
            raise ValueError("animator name cannot be empty")
        self.name = name
        flags = {
            Channel.POSITION: self.has_position,
            Channel.ROTATION: self.has_rotation,
            Channel.SCALE: self.has_scale,
        }
        self._curves = {ch: ChannelCurve(ch) for ch in CHANNEL_ORDER if flags[ch]}

    def supports(self, channel: Channel | str) -> bool:
        # Fixed by the curves built at construction, not the current flag values.
        return Channel.from_any(channel) in self._curves

    def supported_channels(self) -> tuple[Channel, ...]:
        return tuple(ch for ch in CHANNEL_ORDER if self.supports(ch))

    def curve(self, channel: Channel | str) -> ChannelCurve:
        ch = Channel.from_any(channel)
        curve = self._curves.get(ch)
        if curve is None:
            raise ValueError(f"Animator '{self.name}' does not animate {ch.value}")
        return curve

    def keyframes(self, channel: Channel | str | None = None) -> list[Keyframe]:
        if channel is not None:
            return self.curve(channel).keyframes()
        out: list[Keyframe] = []
        for ch in self.supported_channels():
            out.extend(self._curves[ch].keyframes())
        return out

    def keyframe_count(self) -> int:
        return sum(len(c) for c in self._curves.values())

    def effective_value(self, channel: Channel | str, time: float) -> Vec3:
        return self.curve(channel).evaluate(time)

    def snapshot(self) -> dict[Channel, CurveSnapshot]:
        return {ch: curve.snapshot() for ch, curve in self._curves.items()}

    def restore(self, snapshot: dict[Channel, CurveSnapshot]) -> None:
        for ch, curve in self._curves.items():
            curve.restore(snapshot.get(ch, ()))


@dataclass(eq=False)
class Animation:
    name: str
    length: float = 0.0
    uuid: str = field(default_factory=lambda: uuid.uuid4().hex)
    _animators: list[Animator] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        name = str(self.name).strip()
        if not name:
            raise ValueError("animation name cannot be empty")
        self.name = name
        if float(self.length) < 0.0:
            raise ValueError("length must be >= 0")
        self.length = float(self.length)

    def add_animator(self, animator: Animator) -> Animator:
        if any(a.name == animator.name for a in self._animators):
            raise ValueError(f"Animation '{self.name}' already has an animator named '{animator.name}'")
        self._animators.append(animator)
        return animator

    def get_animator(self, name: str) -> Animator:
        for a in self._animators:
            if a.name == name:
                return a
        raise KeyError(name)

    def tracks(self) -> list[Animator]:
        """Animators in the order they were added (not sorted)."""
        return list(self._animators)

    def keyframe_count(self) -> int:
        return sum(a.keyframe_count() for a in self._animators)

    def evaluate(self, time: float) -> dict[str, dict[str, Any]]:
        pose: dict[str, dict[str, Any]] = {}
        for a in self._animators:
            pose[a.name] = {ch.value: list(a.effective_value(ch, time)) for ch in a.supported_channels()}
        return pose
