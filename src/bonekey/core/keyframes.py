from __future__ import annotations

import uuid
from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field

import numpy as np

from .channels import Channel, Vec3


def normalize_vec3(value: Vec3 | list[float] | np.ndarray, *, name: str = "value") -> Vec3:
    arr = np.asarray(value, dtype=np.float64).reshape(3)
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} must contain finite numeric values")
    return (float(arr[0]), float(arr[1]), float(arr[2]))


def normalize_time(time: float) -> float:
    t = float(time)
    if not np.isfinite(t):
        raise ValueError("time must be finite")
    return t


@dataclass(eq=False)
class Keyframe:
    time: float
    channel: Channel
    value: Vec3
    selected: bool = False
    uuid: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        self.time = normalize_time(self.time)
        self.channel = Channel.from_any(self.channel)
        self.value = normalize_vec3(self.value, name=f"{self.channel.value} value")


CurveSnapshot = tuple[tuple[Keyframe, Vec3, float], ...]


@dataclass
class ChannelCurve:
    """Time-sorted keyframes of a single channel.

    At most one keyframe exists per exact time; inserting at an occupied time
    replaces the previous keyframe.
    """

    channel: Channel
    _keys: list[Keyframe] = field(default_factory=list, init=False, repr=False)
    _times: list[float] = field(default_factory=list, init=False, repr=False)

    def __len__(self) -> int:
        return len(self._keys)

    def keyframes(self) -> list[Keyframe]:
        return list(self._keys)

    def at(self, time: float) -> Keyframe | None:
        t = normalize_time(time)
        idx = bisect_left(self._times, t)
        if idx < len(self._keys) and self._times[idx] == t:
            return self._keys[idx]
        return None

    def insert(self, keyframe: Keyframe) -> Keyframe:
        if keyframe.channel is not self.channel:
            raise ValueError(f"Cannot insert a {keyframe.channel.value} keyframe into a {self.channel.value} curve")
        idx = bisect_left(self._times, keyframe.time)
        if idx < len(self._keys) and self._times[idx] == keyframe.time:
            self._keys[idx] = keyframe
        else:
            self._keys.insert(idx, keyframe)
            self._times.insert(idx, keyframe.time)
        return keyframe

    def remove(self, keyframe: Keyframe) -> bool:
        for i, k in enumerate(self._keys):
            if k is keyframe:
                del self._keys[i]
                del self._times[i]
                return True
        return False

    def bounds(self) -> tuple[float, float] | None:
        if not self._keys:
            return None
        return self._keys[0].time, self._keys[-1].time

    def evaluate(self, time: float) -> Vec3:
        t = normalize_time(time)
        if not self._keys:
            return self.channel.rest_value

        times = self._times
        if t <= times[0]:
            return self._keys[0].value
        if t >= times[-1]:
            return self._keys[-1].value

        hi = bisect_right(times, t)
        before = self._keys[hi - 1]
        if before.time == t:
            return before.value
        after = self._keys[hi]

        # Linear blend between the surrounding keyframes.
        alpha = (t - before.time) / (after.time - before.time)
        a = np.asarray(before.value, dtype=np.float64)
        b = np.asarray(after.value, dtype=np.float64)
        return normalize_vec3(a + (b - a) * alpha)

    def snapshot(self) -> CurveSnapshot:
        return tuple((k, k.value, k.time) for k in self._keys)

    def restore(self, snapshot: CurveSnapshot) -> None:
        keys: list[Keyframe] = []
        for keyframe, value, time in snapshot:
            keyframe.value = value
            keyframe.time = time
            keys.append(keyframe)
        self._keys = keys
        self._times = [k.time for k in keys]
