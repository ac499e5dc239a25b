import pytest

from statemachines.department_store import (
    Available,
    DeliveryArrived,
    DepartmentStore,
    Discontinued,
    NoMoreProduced,
    OutOfStock,
    Purchased,
    UnsupportedTransition,
    on_event,
    run_example,
)


def test_initial_state_is_out_of_stock():
    store = DepartmentStore()
    assert store.state == OutOfStock()
    assert store.report_current_state() == "Item is temporarily out of stock"


def test_delivery_arrived_adds_items():
    store = DepartmentStore()
    store.process_event(DeliveryArrived(5))
    assert store.report_current_state() == "5 items available"


def test_purchase_reduces_items():
    store = DepartmentStore()
    store.process_event(DeliveryArrived(5))
    store.process_event(Purchased(2))
    assert store.report_current_state() == "3 items available"


def test_discontinued_marks_as_no_longer_produced():
    store = DepartmentStore()
    store.process_event(Discontinued())
    assert store.report_current_state() == "Item is no more produced"


def test_delivery_accumulates_when_available():
    store = DepartmentStore()
    store.process_event(DeliveryArrived(3))
    store.process_event(DeliveryArrived(2))
    assert store.state == Available(5)


@pytest.mark.parametrize("bought", [3, 4])
def test_buying_everything_runs_out_of_stock(bought):
    store = DepartmentStore()
    store.process_event(DeliveryArrived(3))
    store.process_event(Purchased(bought))
    assert store.state == OutOfStock()


def test_purchase_when_out_of_stock_is_unsupported():
    store = DepartmentStore()
    with pytest.raises(UnsupportedTransition):
        store.process_event(Purchased(1))
    assert store.state == OutOfStock()


def test_delivery_after_discontinued_is_unsupported():
    store = DepartmentStore()
    store.process_event(Discontinued())
    with pytest.raises(UnsupportedTransition):
        store.process_event(DeliveryArrived(1))
    assert store.state == NoMoreProduced()


@pytest.mark.parametrize("state", [OutOfStock(), Available(7), NoMoreProduced()])
def test_discontinued_from_any_state(state):
    assert on_event(state, Discontinued()) == NoMoreProduced()


def test_run_example_reports(capsys):
    reports = run_example()
    assert len(reports) == 12
    assert reports[:6] == reports[6:]
    assert reports[0] == "Item is temporarily out of stock"
    assert reports[5] == "Item is no more produced"
    out = capsys.readouterr().out
    assert out.count("Item is no more produced") == 2