from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable

from .commands.insert_keyframes import InsertResult, add_keyframes_to_visible_bones
from .runtime.editor import EDITOR, EditorState

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginInfo:
    id: str
    title: str
    author: str
    description: str
    icon: str
    version: str
    variant: str = "both"


PLUGIN = PluginInfo(
    id="optimized_add_keyfames_to_all_bones",
    title="Optimized Add Keyframes to All Bones",
    author="bonekey",
    description="Adds keyframes for position, rotation, and scale for all visible bones at the current timeline time.",
    icon="fa-plus-circle",
    version="1.0.0",
)

ACTION_ID = "optimized_add_keyframe_all_bones"
ANIMATION_MENU = "animation"


@dataclass(eq=False)
class Action:
    """A user-triggerable command.

    The action is disabled while its handler runs, so a second trigger during
    that time is ignored.
    """

    id: str
    name: str
    description: str
    click: Callable[[], Any]
    icon: str = ""
    enabled: bool = True
    _running: bool = field(default=False, init=False, repr=False)

    def trigger(self) -> Any:
        if not self.enabled or self._running:
            _log.warning("Ignoring trigger of '%s' while it is disabled or running", self.id)
            return None
        self._running = True
        self.enabled = False
        try:
            return self.click()
        finally:
            self.enabled = True
            self._running = False


class ActionRegistry:
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._actions: dict[str, Action] = {}

    def register(self, action: Action) -> Action:
        with self._lock:
            if action.id in self._actions:
                raise ValueError(f"Action '{action.id}' is already registered")
            self._actions[action.id] = action
            return action

    def get(self, action_id: str) -> Action | None:
        with self._lock:
            return self._actions.get(action_id)

    def remove(self, action_id: str) -> bool:
        with self._lock:
            return self._actions.pop(action_id, None) is not None

    def __contains__(self, action_id: object) -> bool:
        with self._lock:
            return action_id in self._actions


class MenuBar:
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._menus: dict[str, list[Action]] = {}

    def add_action(self, action: Action, menu: str) -> None:
        key = str(menu).strip()
        if not key:
            raise ValueError("menu cannot be empty")
        with self._lock:
            items = self._menus.setdefault(key, [])
            if action not in items:
                items.append(action)

    def remove_action(self, action_id: str) -> int:
        removed = 0
        with self._lock:
            for key, items in self._menus.items():
                kept = [a for a in items if a.id != action_id]
                removed += len(items) - len(kept)
                self._menus[key] = kept
        return removed

    def actions(self, menu: str) -> list[Action]:
        with self._lock:
            return list(self._menus.get(menu, []))


ACTIONS = ActionRegistry()
MENU_BAR = MenuBar()


def build_action(editor: EditorState) -> Action:
    def _click() -> InsertResult:
        return add_keyframes_to_visible_bones(editor.context())

    return Action(
        id=ACTION_ID,
        name="Add Keyframe to All Visible Bones",
        description="Adds keyframes to all visible bones at the current timeline position.",
        icon=PLUGIN.icon,
        click=_click,
    )


def on_load(
    editor: EditorState | None = None,
    actions: ActionRegistry | None = None,
    menus: MenuBar | None = None,
) -> Action:
    editor = editor if editor is not None else EDITOR
    actions = actions if actions is not None else ACTIONS
    menus = menus if menus is not None else MENU_BAR

    action = actions.register(build_action(editor))
    menus.add_action(action, ANIMATION_MENU)
    _log.info("Loaded plugin '%s' %s", PLUGIN.id, PLUGIN.version)
    return action


def on_unload(actions: ActionRegistry | None = None, menus: MenuBar | None = None) -> None:
    actions = actions if actions is not None else ACTIONS
    menus = menus if menus is not None else MENU_BAR

    menus.remove_action(ACTION_ID)
    actions.remove(ACTION_ID)
    _log.info("Unloaded plugin '%s'", PLUGIN.id)
