"""ReversibleAction base class — an applied effect that knows its inverse."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field


class ReversibleAction(BaseModel, ABC):
    """
    Base for all actions submitted to a :class:`RemoteControl`.

    Actions are immutable bindings of an effect to a target. They:
    - Hold a reference to their receiver, never a copy
    - Implement ``apply()`` and its exact inverse ``reverse()``
    - Carry no history state; applying one twice without an intervening
      ``reverse()`` is unsupported

    Usage::

        class Mute(ReversibleAction):
            tv: TV

            def apply(self) -> None:
                self.tv.mute()

            def reverse(self) -> None:
                self.tv.unmute()
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    action_id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def name(self) -> str:
        """Human readable name used in log lines."""
        return type(self).__name__

    @abstractmethod
    def apply(self) -> None:
        """Perform the forward effect on the receiver."""
        ...

    @abstractmethod
    def reverse(self) -> None:
        """Undo the effect of the most recent ``apply()``."""
        ...


class CallbackAction(ReversibleAction):
    """Action built from a pair of zero-argument callables.

    Useful when a dedicated subclass would only forward to two methods::

        action = CallbackAction(forward=tv.volume_up, inverse=tv.volume_down)
    """

    forward: Callable[[], object]
    inverse: Callable[[], object]
    label: str | None = None

    @property
    def name(self) -> str:
        return self.label or type(self).__name__

    def apply(self) -> None:
        self.forward()

    def reverse(self) -> None:
        self.inverse()
