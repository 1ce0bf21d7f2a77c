"""pattern-demos — classic object-oriented design patterns in Python.

The Command pattern lives in :mod:`pattern_demos.command`; run
``python -m pattern_demos.demo`` for the living-room walkthrough.
"""

from __future__ import annotations

# ── Command ──────────────────────────────────────────────────────
from .command import (
    TV,
    CallbackAction,
    Light,
    RemoteControl,
    ReversibleAction,
    TurnOffLight,
    TurnOnLight,
    VolumeDown,
    VolumeUp,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IActionInvoker, IReversibleAction

# ── Primitives ──────────────────────────────────────────────────
from .primitives import ActionContractError, PatternDemoError

__all__: list[str] = [
    # Command
    "CallbackAction",
    "Light",
    "RemoteControl",
    "ReversibleAction",
    "TV",
    "TurnOffLight",
    "TurnOnLight",
    "VolumeDown",
    "VolumeUp",
    # Ports
    "IActionInvoker",
    "IReversibleAction",
    # Primitives
    "ActionContractError",
    "PatternDemoError",
]
