"""A light switch modelled as a finite state machine with shared state objects."""

from __future__ import annotations

from typing import TypeVar

_S = TypeVar("_S", bound="LightState")


def _announce(light: Light, message: str) -> str:
    """Record ``message`` in the light's log, print it and return it."""
    light.messages.append(message)
    print(message)
    return message


class LightState:
    """A state of a :class:`Light`.

    The base behaviour only reports what happens; concrete states decide
    which state follows when the light is toggled.
    """

    def enter(self, light: Light) -> None:
        _announce(light, "Entering state")

    def toggle(self, light: Light) -> None:
        _announce(light, "Toggling state")

    def exit(self, light: Light) -> None:
        _announce(light, "Exiting state")


_instances: dict[type, LightState] = {}


def _shared(cls: type[_S]) -> _S:
    """Return the one instance of ``cls``, creating it on first use."""
    instance = _instances.get(cls)
    if instance is None:
        instance = cls()
        _instances[cls] = instance
    return instance  # type: ignore[return-value]


class _NamedState(LightState):
    """A state that announces itself by class name on entry and exit."""

    def enter(self, light: Light) -> None:
        _announce(light, f"entering state {type(self).__name__}")

    def exit(self, light: Light) -> None:
        _announce(light, f"exiting  state {type(self).__name__}")


class LightOff(_NamedState):
    """The light is switched off; toggling turns it on at low intensity."""

    @classmethod
    def get_instance(cls) -> LightOff:
        return _shared(cls)

    def toggle(self, light: Light) -> None:
        light.set_state(LowIntensity.get_instance())


class LowIntensity(_NamedState):
    """Low intensity; toggling moves to medium intensity."""

    @classmethod
    def get_instance(cls) -> LowIntensity:
        return _shared(cls)

    def toggle(self, light: Light) -> None:
        light.set_state(MediumIntensity.get_instance())


class MediumIntensity(_NamedState):
    """Medium intensity; toggling moves to high intensity."""

    @classmethod
    def get_instance(cls) -> MediumIntensity:
        return _shared(cls)

    def toggle(self, light: Light) -> None:
        light.set_state(HighIntensity.get_instance())


class HighIntensity(_NamedState):
    """High intensity; toggling switches the light off."""

    @classmethod
    def get_instance(cls) -> HighIntensity:
        return _shared(cls)

    def toggle(self, light: Light) -> None:
        light.set_state(LightOff.get_instance())


class Light:
    """A light whose transitions are decided by its current state.

    ``messages`` holds every message the states have announced, in order.
    """

    def __init__(self) -> None:
        self._current_state: LightState = LightOff.get_instance()
        self.messages: list[str] = []

    @property
    def current_state(self) -> LightState:
        return self._current_state

    def toggle(self) -> None:
        """Let the current state choose the next one."""
        self._current_state.toggle(self)

    def set_state(self, new_state: LightState) -> None:
        """Leave the current state and enter ``new_state``."""
        self._current_state.exit(self)
        self._current_state = new_state
        new_state.enter(self)


def run_light_switch() -> Light:
    """Toggle a fresh light six times and return it."""
    light = Light()
    for _ in range(6):
        light.toggle()
    return light