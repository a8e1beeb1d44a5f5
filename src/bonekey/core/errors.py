from __future__ import annotations


class KeyframeInsertError(RuntimeError):
    """A precondition of the batch keyframe command is not met.

    The message is shown to the user as-is.
    """


class NoActiveAnimation(KeyframeInsertError):
    def __init__(self, message: str = "No animation selected!") -> None:
        super().__init__(message)


class NoAnimators(KeyframeInsertError):
    def __init__(self, message: str = "No animators found in the timeline.") -> None:
        super().__init__(message)


class KeyframeCreationError(RuntimeError):
    """A keyframe could not be created for one animator channel."""


class TransactionError(RuntimeError):
    pass
