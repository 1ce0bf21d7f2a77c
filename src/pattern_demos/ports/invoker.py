"""IActionInvoker — interface for applying actions with undo history."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .action import IReversibleAction


class IActionInvoker(Protocol):
    """
    Interface for applying reversible actions and undoing them in LIFO order.
    """

    def submit(self, action: IReversibleAction) -> None: ...

    def undo(self) -> IReversibleAction | None: ...

    def redo(self) -> IReversibleAction | None: ...
