"""A job application whose state changes are restricted to allowed transitions."""

from __future__ import annotations


class ApplicationState:
    """A stage of a job application.

    ``actions`` records, in order, which actions were taken in this stage.
    """

    def __init__(self) -> None:
        self.actions: list[str] = []

    def inform(self) -> None:
        """Inform the applicant about this stage."""
        self.actions.append("inform")

    def process(self) -> None:
        """Process the application in this stage."""
        self.actions.append("process")

    def __str__(self) -> str:
        return type(self).__name__


class Refused(ApplicationState):
    """The application was turned down."""


class Received(ApplicationState):
    """The application has been received."""


class Invited(ApplicationState):
    """The applicant has been invited."""


class Hired(ApplicationState):
    """The applicant has been hired."""


class Interviewed(ApplicationState):
    """The applicant has been interviewed."""


class Talentpool(ApplicationState):
    """The applicant was put into the talent pool."""


class Incomplete(ApplicationState):
    """The application lacks documents."""


_ALLOWED: dict[type[ApplicationState], tuple[type[ApplicationState], ...]] = {
    Received: (Incomplete, Interviewed),
    Incomplete: (Refused, Received),
    Interviewed: (Refused, Invited),
    Refused: (),
    Invited: (Talentpool, Hired, Refused),
    Talentpool: (),
    Hired: (),
}


class JobApplication:
    """A job application that starts out received."""

    def __init__(self) -> None:
        self._state: ApplicationState = Received()

    @property
    def state(self) -> ApplicationState:
        return self._state

    def _accepts(self, next_state: ApplicationState) -> bool:
        allowed = next(
            (targets for source, targets in _ALLOWED.items() if isinstance(self._state, source)),
            (),
        )
        return isinstance(next_state, allowed)

    def set_state(self, next_state: ApplicationState) -> bool:
        """Move to ``next_state`` if allowed; return whether it is now the current state."""
        if next_state is self._state:
            return True
        if not self._accepts(next_state):
            print(f"State {next_state} not allowed here!")
            return False
        self._state = next_state
        return True

    def inform(self) -> None:
        self._state.inform()

    def process(self) -> None:
        self._state.process()

    def print_state(self) -> str:
        """Print the name of the current state and return it."""
        text = str(self._state)
        print(text)
        return text


def run_example() -> JobApplication:
    """Walk an application through allowed and refused transitions and return it."""
    application = JobApplication()
    application.print_state()

    application.set_state(Hired())
    application.set_state(Interviewed())
    application.print_state()
    application.inform()
    application.process()

    application.set_state(Talentpool())
    application.set_state(Invited())
    application.print_state()

    application.set_state(Received())
    application.set_state(Hired())
    application.print_state()
    return application