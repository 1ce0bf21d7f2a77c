"""Tests for ReversibleAction and the concrete actions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pattern_demos.command import (
    TV,
    CallbackAction,
    Light,
    ReversibleAction,
    TurnOffLight,
    TurnOnLight,
    VolumeDown,
    VolumeUp,
)
from pattern_demos.ports import IReversibleAction


class TestConcreteActions:
    """apply()/reverse() pairs on each receiver."""

    def test_turn_on_light(self) -> None:
        light = Light()
        action = TurnOnLight(light=light)

        action.apply()
        assert light.is_on
        action.reverse()
        assert not light.is_on

    def test_turn_off_light(self) -> None:
        light = Light(is_on=True)
        action = TurnOffLight(light=light)

        action.apply()
        assert not light.is_on
        action.reverse()
        assert light.is_on

    def test_volume_up(self) -> None:
        tv = TV()
        action = VolumeUp(tv=tv)

        action.apply()
        assert tv.volume == 11
        action.reverse()
        assert tv.volume == 10

    def test_volume_down(self) -> None:
        tv = TV()
        action = VolumeDown(tv=tv)

        action.apply()
        assert tv.volume == 9
        action.reverse()
        assert tv.volume == 10

    def test_action_keeps_receiver_identity(self) -> None:
        """The action must act on the caller's receiver, not a copy."""
        light = Light()
        action = TurnOnLight(light=light)

        assert action.light is light


class TestReversibleActionBase:
    def test_actions_satisfy_protocol(self) -> None:
        assert isinstance(VolumeUp(tv=TV()), IReversibleAction)

    def test_action_ids_are_unique(self) -> None:
        tv = TV()
        assert VolumeUp(tv=tv).action_id != VolumeUp(tv=tv).action_id

    def test_actions_are_frozen(self) -> None:
        action = VolumeUp(tv=TV())
        with pytest.raises(ValidationError):
            action.tv = TV()  # type: ignore[misc]

    def test_abstract_base_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            ReversibleAction()  # type: ignore[abstract]

    def test_name_defaults_to_class_name(self) -> None:
        assert TurnOnLight(light=Light()).name == "TurnOnLight"


class TestCallbackAction:
    def test_forward_and_inverse(self) -> None:
        tv = TV()
        action = CallbackAction(forward=tv.volume_up, inverse=tv.volume_down)

        action.apply()
        action.apply()
        assert tv.volume == 12
        action.reverse()
        assert tv.volume == 11

    def test_label_used_as_name(self) -> None:
        action = CallbackAction(
            forward=lambda: None, inverse=lambda: None, label="noop"
        )
        assert action.name == "noop"

    def test_name_without_label(self) -> None:
        action = CallbackAction(forward=lambda: None, inverse=lambda: None)
        assert action.name == "CallbackAction"

    def test_rejects_non_callables(self) -> None:
        with pytest.raises(ValidationError):
            CallbackAction(forward=42, inverse=lambda: None)  # type: ignore[arg-type]
