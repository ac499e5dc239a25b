import pytest

from statemachines.program import main


def test_main_returns_zero():
    assert main([]) == 0


def test_main_runs_demonstrations_in_order(capsys):
    main([])
    out = capsys.readouterr().out
    positions = [
        out.index("Current state: State B"),
        out.index("ConcreteStateA handles request1."),
        out.index("Item is no more produced"),
        out.index("entering state LowIntensity"),
    ]
    assert positions == sorted(positions)


def test_main_output_is_repeatable(capsys):
    main([])
    first = capsys.readouterr().out
    main([])
    second = capsys.readouterr().out
    assert first == second


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2