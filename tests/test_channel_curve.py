from __future__ import annotations

import numpy as np
import pytest

from bonekey.core.animation import Animation, Animator
from bonekey.core.channels import CHANNEL_ORDER, Channel
from bonekey.core.keyframes import ChannelCurve, Keyframe


def test_channel_aliases_and_order() -> None:
    assert CHANNEL_ORDER == (Channel.POSITION, Channel.ROTATION, Channel.SCALE)
    assert Channel.from_any("POS") is Channel.POSITION
    assert Channel.from_any(" rotation ") is Channel.ROTATION
    assert Channel.from_any(Channel.SCALE) is Channel.SCALE
    with pytest.raises(ValueError):
        Channel.from_any("color")


def test_empty_curve_evaluates_to_rest_value() -> None:
    assert ChannelCurve(Channel.POSITION).evaluate(3.0) == (0.0, 0.0, 0.0)
    assert ChannelCurve(Channel.SCALE).evaluate(3.0) == (1.0, 1.0, 1.0)


def test_insert_keeps_time_order_and_replaces_same_time() -> None:
    curve = ChannelCurve(Channel.POSITION)
    k2 = curve.insert(Keyframe(time=2.0, channel=Channel.POSITION, value=(2.0, 0.0, 0.0)))
    k0 = curve.insert(Keyframe(time=0.0, channel=Channel.POSITION, value=(0.0, 0.0, 0.0)))
    assert curve.keyframes() == [k0, k2]
    assert curve.bounds() == (0.0, 2.0)

    replacement = curve.insert(Keyframe(time=2.0, channel=Channel.POSITION, value=(9.0, 0.0, 0.0)))
    assert len(curve) == 2
    assert curve.at(2.0) is replacement

    with pytest.raises(ValueError):
        curve.insert(Keyframe(time=1.0, channel=Channel.SCALE, value=(1.0, 1.0, 1.0)))


def test_evaluate_holds_ends_and_interpolates_between() -> None:
    curve = ChannelCurve(Channel.ROTATION)
    curve.insert(Keyframe(time=1.0, channel=Channel.ROTATION, value=(0.0, 10.0, 0.0)))
    curve.insert(Keyframe(time=3.0, channel=Channel.ROTATION, value=(0.0, 30.0, 90.0)))

    assert curve.evaluate(0.0) == (0.0, 10.0, 0.0)
    assert curve.evaluate(5.0) == (0.0, 30.0, 90.0)
    assert curve.evaluate(3.0) == (0.0, 30.0, 90.0)
    assert np.allclose(curve.evaluate(2.0), (0.0, 20.0, 45.0))
    assert np.allclose(curve.evaluate(1.5), (0.0, 15.0, 22.5))


def test_keyframe_rejects_non_finite_values() -> None:
    with pytest.raises(ValueError):
        Keyframe(time=0.0, channel=Channel.POSITION, value=(np.nan, 0.0, 0.0))
    with pytest.raises(ValueError):
        Keyframe(time=np.inf, channel=Channel.POSITION, value=(0.0, 0.0, 0.0))


def test_animator_capabilities_are_fixed_at_construction() -> None:
    arm = Animator("arm", has_scale=False)
    assert arm.supported_channels() == (Channel.POSITION, Channel.ROTATION)
    assert arm.supports("position")
    assert not arm.supports(Channel.SCALE)
    with pytest.raises(ValueError):
        arm.curve(Channel.SCALE)


def test_animation_keeps_insertion_order_and_evaluates_pose() -> None:
    anim = Animation("walk", length=2.0)
    for name in ["spine", "arm", "head"]:
        anim.add_animator(Animator(name))
    assert [a.name for a in anim.tracks()] == ["spine", "arm", "head"]

    with pytest.raises(ValueError):
        anim.add_animator(Animator("arm"))
    with pytest.raises(KeyError):
        anim.get_animator("tail")

    pose = anim.evaluate(0.5)
    assert pose["head"] == {"position": [0.0, 0.0, 0.0], "rotation": [0.0, 0.0, 0.0], "scale": [1.0, 1.0, 1.0]}


def test_remove_and_restore_keep_lookup_consistent() -> None:
    curve = ChannelCurve(Channel.SCALE)
    keys = [curve.insert(Keyframe(time=float(t), channel=Channel.SCALE, value=(1.0, 1.0, 1.0))) for t in [3, 1, 2]]
    snap = curve.snapshot()

    assert curve.remove(keys[2])
    assert curve.at(2.0) is None
    assert curve.at(3.0) is keys[0]
    assert not curve.remove(keys[2])

    curve.restore(snap)
    assert [k.time for k in curve.keyframes()] == [1.0, 2.0, 3.0]
    assert curve.at(2.0) is keys[2]
