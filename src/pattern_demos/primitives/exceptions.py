"""Exceptions for pattern-demos."""

from __future__ import annotations


class PatternDemoError(Exception):
    """Root exception for the entire pattern-demos package."""


class ActionContractError(PatternDemoError, TypeError):
    """Raised when an object handed to an invoker is not a reversible action.

    Usage: RemoteControl raises this from ``submit()`` when the object
    does not expose callable ``apply()`` and ``reverse()`` methods.
    """

    def __init__(self, obj: object) -> None:
        self.obj = obj
        super().__init__(
            f"{type(obj).__name__} does not satisfy the reversible action "
            "contract (apply/reverse)"
        )
