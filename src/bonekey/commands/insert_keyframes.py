from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..core.animation import Animation, Animator
from ..core.errors import KeyframeCreationError, KeyframeInsertError, NoActiveAnimation, NoAnimators
from ..core.keyframes import Keyframe
from ..core.settings import SETTINGS, InserterSettings, validate_settings
from ..core.undo import UndoEntry
from ..runtime.context import EditorContext
from ..runtime.viewport import preserve_scroll

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsertResult:
    created_count: int
    reused_count: int = 0
    keyframes: tuple[Keyframe, ...] = field(default_factory=tuple)
    error: KeyframeInsertError | None = None
    undo_entry: UndoEntry | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {"createdCount": int(self.created_count)}


def success_message(count: int) -> str:
    return f"{int(count)} keyframes added successfully."


class BatchKeyframeInserter:
    """Key position, rotation and scale of every visible bone at the timeline cursor.

    One invocation is one undo step. Channels that already carry a keyframe at
    the cursor time keep it; every touched keyframe ends up selected.
    """

    def __init__(self, context: EditorContext, settings: InserterSettings | None = None) -> None:
        self.context = context
        self.settings = validate_settings(settings) if settings is not None else SETTINGS.get()

    def _check_preconditions(self) -> Animation:
        animation = self.context.animation
        if animation is None:
            raise NoActiveAnimation()
        if not self.context.tracks():
            raise NoAnimators()
        return animation

    def run(self) -> InsertResult:
        ctx = self.context
        settings = self.settings

        try:
            animation = self._check_preconditions()
        except KeyframeInsertError as exc:
            _log.warning("Keyframe insertion aborted: %s", exc)
            ctx.notifications.show(str(exc), settings.notice_duration_ms)
            return InsertResult(created_count=0, error=exc)

        with preserve_scroll(ctx.viewport):
            tx = ctx.history.begin(settings.undo_label, animation, ctx.selection)
            try:
                touched, created = self._insert_all(ctx.tracks(), float(ctx.time))
            except Exception:
                ctx.history.abort(tx)
                raise
            entry = ctx.history.commit(tx, settings.undo_label)
            ctx.preview.refresh()

        result = InsertResult(
            created_count=created,
            reused_count=len(touched) - created,
            keyframes=tuple(touched),
            undo_entry=entry,
        )
        _log.info(
            "Keyed '%s' at %s: %d created, %d reused",
            animation.name,
            ctx.time,
            result.created_count,
            result.reused_count,
        )
        ctx.notifications.show(success_message(result.created_count), settings.notice_duration_ms)
        return result

    def _insert_all(self, tracks: list[Animator], time: float) -> tuple[list[Keyframe], int]:
        touched: list[Keyframe] = []
        created = 0
        for track in tracks:
            if track.hidden:
                continue
            for channel in self.settings.channels:
                if not track.supports(channel):
                    continue
                try:
                    existing = track.curve(channel).at(time)
                    keyframe = self.context.keyframes.request_keyframe(
                        track,
                        channel,
                        time,
                        force_duplicate=self.settings.force_duplicate,
                    )
                except (KeyframeCreationError, ValueError) as exc:
                    _log.debug("Skipping %s of '%s': %s", channel.value, track.name, exc)
                    continue
                if keyframe is None:
                    continue
                self.context.selection.add(keyframe)
                touched.append(keyframe)
                if keyframe is not existing:
                    created += 1
        return touched, created


def add_keyframes_to_visible_bones(
    context: EditorContext,
    settings: InserterSettings | None = None,
) -> InsertResult:
    return BatchKeyframeInserter(context, settings).run()
