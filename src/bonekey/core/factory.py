from __future__ import annotations

import logging

import numpy as np

from .animation import Animator
from .channels import Channel
from .keyframes import Keyframe

_log = logging.getLogger(__name__)


class KeyframeFactory:
    """Create-or-reuse keyframes on animator channel curves."""

    def request_keyframe(
        self,
        track: Animator,
        channel: Channel | str,
        time: float,
        force_duplicate: bool = True,
    ) -> Keyframe | None:
        """Return the keyframe of ``track``/``channel`` at exactly ``time``.

        An existing keyframe is returned unmodified. Otherwise a new one is
        inserted; with ``force_duplicate`` it copies the track's effective value
        at ``time``, without it the channel rest value is used.

        Returns None when the channel is not animatable on the track or the
        time is not finite.
        """

        ch = Channel.from_any(channel)
        if not track.supports(ch):
            return None
        t = float(time)
        if not np.isfinite(t):
            return None

        curve = track.curve(ch)
        existing = curve.at(t)
        if existing is not None:
            _log.debug("Reusing %s keyframe of '%s' at %s", ch.value, track.name, t)
            return existing

        value = track.effective_value(ch, t) if force_duplicate else ch.rest_value
        keyframe = curve.insert(Keyframe(time=t, channel=ch, value=value))
        _log.debug("Created %s keyframe of '%s' at %s: %s", ch.value, track.name, t, value)
        return keyframe
