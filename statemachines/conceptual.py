"""A minimal state pattern: a context alternating between two states."""

from __future__ import annotations

from abc import ABC, abstractmethod


class StateBase(ABC):
    """A state that decides what the context becomes on a request."""

    @abstractmethod
    def handle(self, context: Context) -> None:
        """Move ``context`` on to its next state."""

    @property
    @abstractmethod
    def description(self) -> str:
        """A short human-readable name of the state."""


class ConcreteStateA(StateBase):
    """State A; a request moves the context to state B."""

    @property
    def description(self) -> str:
        return "State A"

    def handle(self, context: Context) -> None:
        context.set_state(ConcreteStateB())


class ConcreteStateB(StateBase):
    """State B; a request moves the context to state A."""

    @property
    def description(self) -> str:
        return "State B"

    def handle(self, context: Context) -> None:
        context.set_state(ConcreteStateA())


class Context:
    """Holds the current state and forwards requests to it."""

    def __init__(self, state: StateBase) -> None:
        self._state: StateBase
        self.set_state(state)

    @property
    def state(self) -> StateBase:
        return self._state

    def request(self) -> None:
        self._state.handle(self)

    def set_state(self, state: StateBase) -> None:
        self._state = state
        print(f"Current state: {state.description}")


def _run(requests: int = 6) -> Context:
    context = Context(ConcreteStateA())
    for _ in range(requests):
        context.request()
    return context


def run_example_01() -> Context:
    """Start in state A, issue six requests and return the context."""
    return _run()


def run_example_02() -> Context:
    """Start in state A with a shared context, issue six requests, return it."""
    return _run()