"""A state pattern where states hold a back-reference to their context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class State(ABC):
    """A state bound to a context, able to move that context elsewhere."""

    def __init__(self) -> None:
        self.context: Optional[Context] = None

    @abstractmethod
    def handle1(self) -> None:
        """React to the first kind of request."""

    @abstractmethod
    def handle2(self) -> None:
        """React to the second kind of request."""


class ConcreteStateA(State):
    """Moves to state B on the first request."""

    def handle1(self) -> None:
        print("ConcreteStateA handles request1.")
        print("ConcreteStateA wants to change the state of the context.")
        assert self.context is not None
        self.context.transition_to(ConcreteStateB())

    def handle2(self) -> None:
        print("ConcreteStateA handles request2.")


class ConcreteStateB(State):
    """Moves to state A on the second request."""

    def handle1(self) -> None:
        print("ConcreteStateB handles request1.")

    def handle2(self) -> None:
        print("ConcreteStateB handles request2.")
        print("ConcreteStateB wants to change the state of the context.")
        assert self.context is not None
        self.context.transition_to(ConcreteStateA())


class Context:
    """Delegates requests to its current state."""

    def __init__(self, state: State) -> None:
        self._state: State
        self.transition_to(state)

    @property
    def state(self) -> State:
        return self._state

    def transition_to(self, state: State) -> None:
        """Replace the current state and bind the new one to this context."""
        print(f"Context: Transition to {type(state).__name__}.")
        self._state = state
        state.context = self

    def request1(self) -> None:
        self._state.handle1()

    def request2(self) -> None:
        self._state.handle2()


def client_code() -> Context:
    """Run the demonstration sequence of requests and return the context."""
    context = Context(ConcreteStateA())
    context.request1()
    context.request2()
    context.request1()
    context.request2()
    return context