"""Command that runs every state machine demonstration in turn."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

from statemachines import conceptual, department_store, job_application, light, transitions


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run all demonstrations and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="statemachines",
        description="Run the state machine demonstrations.",
    )
    parser.parse_args(argv)

    conceptual.run_example_01()
    conceptual.run_example_02()
    transitions.client_code()
    job_application.run_example()
    department_store.run_example()
    light.run_light_switch()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())