"""A department store item tracked as a state machine over value states and events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class OutOfStock:
    """No items are on the shelf, but more may be delivered."""


@dataclass(frozen=True)
class Available:
    """``count`` items are on the shelf."""

    count: int


@dataclass(frozen=True)
class NoMoreProduced:
    """The item has been discontinued."""


@dataclass(frozen=True)
class DeliveryArrived:
    """A delivery of ``count`` items arrived."""

    count: int


@dataclass(frozen=True)
class Purchased:
    """Customers bought ``count`` items."""

    count: int


@dataclass(frozen=True)
class Discontinued:
    """The manufacturer stopped producing the item."""


StoreState = Union[OutOfStock, Available, NoMoreProduced]
StoreEvent = Union[DeliveryArrived, Purchased, Discontinued]


class UnsupportedTransition(Exception):
    """Raised when an event cannot be applied in the current state."""


def on_event(state: StoreState, event: StoreEvent) -> StoreState:
    """Return the state that follows ``state`` when ``event`` happens."""
    match state, event:
        case _, Discontinued():
            return NoMoreProduced()
        case Available(count=count), DeliveryArrived(count=delivered):
            return Available(count + delivered)
        case Available(count=count), Purchased(count=bought):
            remaining = count - bought
            return Available(remaining) if remaining > 0 else OutOfStock()
        case OutOfStock(), DeliveryArrived(count=delivered):
            return Available(delivered)
    raise UnsupportedTransition("Unsupported state transition")


class DepartmentStore:
    """Tracks the stock state of a single item."""

    def __init__(self) -> None:
        self._state: StoreState = OutOfStock()

    @property
    def state(self) -> StoreState:
        return self._state

    def process_event(self, event: StoreEvent) -> None:
        """Apply ``event``; the state is left unchanged if the transition is unsupported."""
        self._state = on_event(self._state, event)

    def report_current_state(self) -> str:
        match self._state:
            case Available(count=count):
                return f"{count} items available"
            case OutOfStock():
                return "Item is temporarily out of stock"
            case NoMoreProduced():
                return "Item is no more produced"
        raise TypeError(f"unknown state {self._state!r}")


_SCRIPT: tuple[StoreEvent, ...] = (
    DeliveryArrived(3),
    Purchased(2),
    DeliveryArrived(2),
    Purchased(3),
    Discontinued(),
)


def _run_script() -> list[str]:
    store = DepartmentStore()
    reports = [store.report_current_state()]
    print(reports[0])
    for event in _SCRIPT:
        store.process_event(event)
        report = store.report_current_state()
        print(report)
        reports.append(report)
    return reports


def run_example() -> list[str]:
    """Run the demonstration twice and return every report printed."""
    reports = _run_script()
    print()
    reports.extend(_run_script())
    return reports