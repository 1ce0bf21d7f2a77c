"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import ActionContractError, PatternDemoError

__all__ = [
    "ActionContractError",
    "PatternDemoError",
]
