# statemachines

Small, self-contained state machines built on the State pattern.

## Modules

- `statemachines.light` is a light switch that cycles
  `LightOff` → `LowIntensity` → `MediumIntensity` → `HighIntensity` → `LightOff`.
  Each state class has a single shared instance, which you get from
  `get_instance()`. `Light.toggle()` lets the current state pick the next one.
  `Light.set_state(new_state)` calls `exit` on the old state and `enter` on the
  new one. Every message a state prints is also kept in `Light.messages`.
  `Light.current_state` returns the active state. `run_light_switch()` toggles
  a new light six times and returns it.
- `statemachines.conceptual` has a `Context` whose `request()` switches it
  between `ConcreteStateA` and `ConcreteStateB`, printing
  `Current state: State A` or `Current state: State B` on each change. The
  current state is available as `Context.state`, and each state has a
  `description` property. `run_example_01()` and `run_example_02()` each run
  six requests and return the context.
- `statemachines.transitions` has a `Context` with `request1()` and
  `request2()`. The current state handles each request. `ConcreteStateA` moves
  the context to `ConcreteStateB` on the first request, and `ConcreteStateB`
  moves it back on the second. `Context.transition_to(state)` binds the state
  to the context through `state.context`. `client_code()` runs a short
  sequence of requests and returns the context.
- `statemachines.department_store` is an event-driven `DepartmentStore`.
  - Its states are `OutOfStock`, `Available(count)` and `NoMoreProduced`.
  - Its events are `DeliveryArrived(count)`, `Purchased(count)` and
    `Discontinued()`.
  - `on_event(state, event)` returns the next state. It raises
    `UnsupportedTransition` for a combination it does not handle, for example
    a delivery after the item has been discontinued.
  - `DepartmentStore.process_event(event)` applies an event.
  - `report_current_state()` describes the stock as text.
  - `run_example()` runs the demonstration twice and returns all reports.
- `statemachines.job_application` has a `JobApplication` that starts out
  `Received` and accepts only these moves:
  - `Received` → `Incomplete`, `Interviewed`
  - `Incomplete` → `Refused`, `Received`
  - `Interviewed` → `Refused`, `Invited`
  - `Invited` → `Talentpool`, `Hired`, `Refused`

  `Refused`, `Talentpool` and `Hired` are final. `set_state(next_state)`
  returns whether `next_state` is now current. It prints
  `State <name> not allowed here!` when a move is refused. `print_state()`
  prints the current state's name and returns it. Each state records the
  `inform()` and `process()` calls made on it in `actions`. `run_example()`
  walks an application through allowed and refused moves.

## Installation

```
pip install .
```

## Usage

```python
from statemachines.light import Light, MediumIntensity

light = Light()
light.toggle()
light.toggle()
assert light.current_state is MediumIntensity.get_instance()
```

```python
from statemachines.department_store import (
    DepartmentStore, DeliveryArrived, Purchased,
)

store = DepartmentStore()
store.process_event(DeliveryArrived(5))
store.process_event(Purchased(2))
print(store.report_current_state())  # 3 items available
```

```python
from statemachines.job_application import JobApplication, Interviewed, Hired

app = JobApplication()
app.set_state(Hired())        # False: not allowed from Received
app.set_state(Interviewed())  # True
app.print_state()             # Interviewed
```

## Command line

The following command runs every demonstration in turn and prints each one's transitions:

```
statemachines
```

It takes no options other than `--help`.

## Tests

```
pip install .[test]
pytest
```