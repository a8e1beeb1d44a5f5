import logging

import numpy as np

import bonekey
from bonekey.core import Channel, Keyframe
from bonekey.plugin import ACTIONS, ACTION_ID


def _build_walk() -> bonekey.Animation:
    walk = bonekey.Animation("walk", length=2.0)
    for name in ["root", "spine", "left_leg", "right_leg"]:
        walk.add_animator(bonekey.Animator(name))
    walk.add_animator(bonekey.Animator("cape", hidden=True))

    # Swing the legs so the duplicated pose is something other than the rest value.
    for name, sign in [("left_leg", 1.0), ("right_leg", -1.0)]:
        curve = walk.get_animator(name).curve(Channel.ROTATION)
        for t in np.linspace(0.0, 2.0, 5):
            angle = sign * 30.0 * float(np.sin(np.pi * t))
            curve.insert(Keyframe(time=float(t), channel=Channel.ROTATION, value=(angle, 0.0, 0.0)))
    return walk


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    bonekey.EDITOR.add_animation(_build_walk(), select=True)
    bonekey.EDITOR.set_time(0.25)
    bonekey.on_load()

    action = ACTIONS.get(ACTION_ID)
    result = action.trigger()
    print(result.to_dict())
    print(bonekey.EDITOR.preview.last_pose)

    bonekey.EDITOR.history.undo()
    print("after undo:", bonekey.EDITOR.active_animation().keyframe_count(), "keyframes")


if __name__ == "__main__":
    main()
