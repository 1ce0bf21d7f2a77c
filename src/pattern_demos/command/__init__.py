"""Command pattern: reversible actions, receivers and the remote control."""

from __future__ import annotations

from .action import CallbackAction, ReversibleAction
from .actions import TurnOffLight, TurnOnLight, VolumeDown, VolumeUp
from .invoker import RemoteControl
from .receivers import TV, Light

__all__ = [
    "CallbackAction",
    "Light",
    "RemoteControl",
    "ReversibleAction",
    "TV",
    "TurnOffLight",
    "TurnOnLight",
    "VolumeDown",
    "VolumeUp",
]
