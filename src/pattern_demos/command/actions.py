"""Concrete actions binding receivers to the remote control."""

from __future__ import annotations

from .action import ReversibleAction
from .receivers import TV, Light


class TurnOnLight(ReversibleAction):
    light: Light

    def apply(self) -> None:
        self.light.turn_on()

    def reverse(self) -> None:
        self.light.turn_off()


class TurnOffLight(ReversibleAction):
    light: Light

    def apply(self) -> None:
        self.light.turn_off()

    def reverse(self) -> None:
        self.light.turn_on()


class VolumeUp(ReversibleAction):
    tv: TV

    def apply(self) -> None:
        self.tv.volume_up()

    def reverse(self) -> None:
        self.tv.volume_down()


class VolumeDown(ReversibleAction):
    tv: TV

    def apply(self) -> None:
        self.tv.volume_down()

    def reverse(self) -> None:
        self.tv.volume_up()
