"""RemoteControl — applies reversible actions and keeps an undo history."""

from __future__ import annotations

import logging

from ..ports.action import IReversibleAction
from ..primitives.exceptions import ActionContractError

logger = logging.getLogger("pattern_demos.command")


def _action_name(action: IReversibleAction) -> str:
    return getattr(action, "name", None) or type(action).__name__


class RemoteControl:
    """Invoker that applies actions and undoes them in LIFO order.

    The history holds applied-but-not-yet-undone actions, oldest first.
    Undone actions move to a redo stack that is discarded as soon as a new
    action is submitted.

    Usage::

        remote = RemoteControl()
        remote.submit(TurnOnLight(light=light))
        remote.submit(VolumeUp(tv=tv))

        remote.undo()  # reverses VolumeUp
        remote.undo()  # reverses TurnOnLight
        remote.undo()  # empty history, nothing happens
    """

    def __init__(self) -> None:
        self._history: list[IReversibleAction] = []
        self._undone: list[IReversibleAction] = []

    def submit(self, action: IReversibleAction) -> None:
        """Apply *action* and record it as the most recent history entry.

        Raises:
            ActionContractError: If *action* has no ``apply``/``reverse``.
        """
        if not isinstance(action, IReversibleAction):
            raise ActionContractError(action)

        name = _action_name(action)
        try:
            action.apply()
        except Exception:
            logger.exception("Failed to apply action '%s'", name)
            raise

        self._history.append(action)
        self._undone.clear()
        logger.debug("Submitted %s (history=%d)", name, len(self._history))

    def undo(self) -> IReversibleAction | None:
        """Reverse the most recently applied action.

        Returns:
            The reversed action, or ``None`` if the history is empty.
        """
        if not self._history:
            logger.debug("Nothing to undo")
            return None

        action = self._history.pop()
        name = _action_name(action)
        try:
            action.reverse()
        except Exception:
            # Not undone: keep it where it was.
            self._history.append(action)
            logger.exception("Failed to undo action '%s'", name)
            raise

        self._undone.append(action)
        logger.debug("Undid %s (history=%d)", name, len(self._history))
        return action

    def redo(self) -> IReversibleAction | None:
        """Re-apply the most recently undone action.

        Returns:
            The re-applied action, or ``None`` if nothing was undone.
        """
        if not self._undone:
            logger.debug("Nothing to redo")
            return None

        action = self._undone[-1]
        name = _action_name(action)
        try:
            action.apply()
        except Exception:
            logger.exception("Failed to redo action '%s'", name)
            raise

        self._undone.pop()
        self._history.append(action)
        logger.debug("Redid %s (history=%d)", name, len(self._history))
        return action

    @property
    def history(self) -> tuple[IReversibleAction, ...]:
        """Applied actions that have not been undone, oldest first."""
        return tuple(self._history)

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def can_redo(self) -> bool:
        return bool(self._undone)

    def clear_history(self) -> None:
        """Forget both stacks. Receivers keep their current state."""
        self._history.clear()
        self._undone.clear()

    def __len__(self) -> int:
        return len(self._history)
