import pytest

from statemachines.transitions import (
    ConcreteStateA,
    ConcreteStateB,
    Context,
    State,
    client_code,
)


def test_client_code_transitions(capsys):
    context = client_code()
    assert isinstance(context.state, ConcreteStateA)
    cycle = [
        "ConcreteStateA handles request1.",
        "ConcreteStateA wants to change the state of the context.",
        "Context: Transition to ConcreteStateB.",
        "ConcreteStateB handles request2.",
        "ConcreteStateB wants to change the state of the context.",
        "Context: Transition to ConcreteStateA.",
    ]
    expected = ["Context: Transition to ConcreteStateA."] + cycle + cycle
    assert capsys.readouterr().out.splitlines() == expected


def test_client_code_can_run_twice():
    first = client_code()
    second = client_code()
    assert first is not second
    assert isinstance(second.state, ConcreteStateA)


def test_transition_binds_context():
    state = ConcreteStateA()
    context = Context(state)
    assert state.context is context
    assert context.state is state


def test_state_a_ignores_request2(capsys):
    context = Context(ConcreteStateA())
    capsys.readouterr()
    context.request2()
    assert isinstance(context.state, ConcreteStateA)
    assert capsys.readouterr().out == "ConcreteStateA handles request2.\n"


def test_state_b_ignores_request1(capsys):
    context = Context(ConcreteStateB())
    capsys.readouterr()
    context.request1()
    assert isinstance(context.state, ConcreteStateB)
    assert capsys.readouterr().out == "ConcreteStateB handles request1.\n"


def test_request1_moves_a_to_b():
    context = Context(ConcreteStateA())
    context.request1()
    assert isinstance(context.state, ConcreteStateB)
    assert context.state.context is context


def test_state_is_abstract():
    with pytest.raises(TypeError):
        State()