#!/usr/bin/env python
"""Demo: a remote control driving a living-room light and TV."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .command import (
    TV,
    Light,
    RemoteControl,
    TurnOffLight,
    TurnOnLight,
    VolumeUp,
)

logger = logging.getLogger("pattern_demos.demo")


@dataclass
class LivingRoom:
    """Receivers plus the remote wired to them."""

    light: Light = field(default_factory=lambda: Light(name="Living room light"))
    tv: TV = field(default_factory=lambda: TV(name="Living room TV"))
    remote: RemoteControl = field(default_factory=RemoteControl)


def build_living_room() -> LivingRoom:
    return LivingRoom()


def run_demo(room: LivingRoom | None = None) -> LivingRoom:
    """Submit four actions, then undo the last two.

    Ends with the light ON, the TV at volume 11 and
    ``[TurnOnLight, VolumeUp]`` left in the history.
    """
    room = room or build_living_room()
    remote = room.remote

    turn_on_light = TurnOnLight(light=room.light)
    turn_off_light = TurnOffLight(light=room.light)
    volume_up = VolumeUp(tv=room.tv)

    logger.info("=== Submitting actions ===")
    remote.submit(turn_on_light)
    remote.submit(volume_up)
    remote.submit(volume_up)
    remote.submit(turn_off_light)

    logger.info("=== Undoing the last two ===")
    remote.undo()
    remote.undo()

    return room


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run_demo()


if __name__ == "__main__":
    main()
