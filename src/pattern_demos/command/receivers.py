"""Receivers — the devices that commands act upon."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger("pattern_demos.receivers")


class Light(BaseModel):
    """A switchable light. Starts OFF."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = "Light"
    is_on: bool = False

    def turn_on(self) -> None:
        self.is_on = True
        logger.info("%s is turned ON", self.name)

    def turn_off(self) -> None:
        self.is_on = False
        logger.info("%s is turned OFF", self.name)


class TV(BaseModel):
    """A TV whose volume is a plain unbounded counter."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = "TV"
    volume: int = 10

    def volume_up(self) -> None:
        self.volume += 1
        logger.info("%s volume increased to %d", self.name, self.volume)

    def volume_down(self) -> None:
        self.volume -= 1
        logger.info("%s volume decreased to %d", self.name, self.volume)
