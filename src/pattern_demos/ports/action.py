"""IReversibleAction — the capability every command must provide."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IReversibleAction(Protocol):
    """
    Port for a unit of work that can be applied and reversed.

    ``reverse()`` undoes exactly the effect of the most recent ``apply()``
    on the same instance. Implementations do not track whether they have
    been applied; the invoker owns that bookkeeping.
    """

    def apply(self) -> None:
        """Perform the forward effect on the target."""
        ...

    def reverse(self) -> None:
        """Perform the inverse of the most recent ``apply()``."""
        ...
