from __future__ import annotations

from enum import Enum
from typing import Any


Vec3 = tuple[float, float, float]


class Channel(str, Enum):
    """Transform channel of a bone animator.

    Notes:
    - Channels are always processed in ``CHANNEL_ORDER``.
    - Rotation values are euler angles in degrees.
    """

    POSITION = "position"
    ROTATION = "rotation"
    SCALE = "scale"

    @classmethod
    def from_any(cls, value: Any) -> "Channel":
        if isinstance(value, cls):
            return value

        v = str(value).strip().lower()
        aliases: dict[str, Channel] = {
            "position": cls.POSITION,
            "rotation": cls.ROTATION,
            "scale": cls.SCALE,
            "pos": cls.POSITION,
            "rot": cls.ROTATION,
            "scl": cls.SCALE,
        }
        if v in aliases:
            return aliases[v]

        raise ValueError(f"Unsupported channel {value!r}. Use 'position', 'rotation' or 'scale'.")

    @property
    def rest_value(self) -> Vec3:
        return _REST_VALUES[self]


_REST_VALUES: dict[Channel, Vec3] = {
    Channel.POSITION: (0.0, 0.0, 0.0),
    Channel.ROTATION: (0.0, 0.0, 0.0),
    Channel.SCALE: (1.0, 1.0, 1.0),
}

CHANNEL_ORDER: tuple[Channel, ...] = (Channel.POSITION, Channel.ROTATION, Channel.SCALE)
