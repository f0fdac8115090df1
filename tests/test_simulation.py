from types import SimpleNamespace

import pytest

from starhaul.matrix import SymmetricMatrix
from starhaul.simulation import (
    InvalidActionError,
    MoveAction,
    PutAction,
    Simulation,
    SimulationError,
    TakeAction,
    Task,
)


def _distances():
    mat = SymmetricMatrix.with_order(3)
    mat[0, 1] = 5
    mat[1, 2] = 2
    mat[0, 2] = 9
    return mat


def _tasks():
    return {0: Task(0, 2), 1: Task(1, 0)}


@pytest.fixture
def simulation():
    return Simulation(4, _distances(), [2, 3], 0, _tasks())


def test_initial_placement(simulation):
    assert simulation.location_items(0) == {0}
    assert simulation.location_items(1) == {1}
    assert simulation.location_items(2) == set()
    assert simulation.hauler_location == 0
    assert simulation.number_of_locations == 3
    assert simulation.number_of_total_items == 2
    assert simulation.hauler_capacity == 4


def test_initial_fingerprint(simulation):
    assert simulation.state.fingerprint() == "0|[]|[0];[1];[];"


def test_initial_actions(simulation):
    assert simulation.gen_actions() == [MoveAction(1), MoveAction(2), TakeAction(0)]


def test_move_cost_and_position(simulation):
    cost = MoveAction(1).apply(simulation)
    assert cost == 5 + 1.0
    assert simulation.hauler_location == 1


def test_move_to_invalid_location(simulation):
    with pytest.raises(InvalidActionError):
        MoveAction(3).apply(simulation)
    assert simulation.hauler_location == 0


def test_take_updates_load_and_location(simulation):
    assert TakeAction(0).apply(simulation) == 0.0
    assert simulation.hauler_items() == {0}
    assert simulation.current_location_items() == set()
    assert simulation.hauler_load() == simulation.volume_of_item(0)


def test_take_over_capacity(simulation):
    TakeAction(0).apply(simulation)
    MoveAction(1).apply(simulation)
    with pytest.raises(InvalidActionError):
        TakeAction(1).apply(simulation)
    assert simulation.location_items(1) == {1}


def test_actions_skip_items_that_do_not_fit(simulation):
    TakeAction(0).apply(simulation)
    MoveAction(1).apply(simulation)
    assert simulation.gen_actions() == [MoveAction(0), MoveAction(2), PutAction(0)]


def test_take_missing_item(simulation):
    with pytest.raises(InvalidActionError):
        simulation.take_item(1)
    with pytest.raises(InvalidActionError):
        simulation.take_item(5)


def test_put_item_not_in_hauler(simulation):
    with pytest.raises(InvalidActionError):
        PutAction(0).apply(simulation)


def test_delivery_completes_task(simulation):
    TakeAction(0).apply(simulation)
    MoveAction(2).apply(simulation)
    PutAction(0).apply(simulation)
    assert 0 not in simulation.state.tasks
    assert simulation.location_items(2) == set()
    assert simulation.hauler_items() == set()
    assert list(simulation.state.tasks) == [1]


def test_put_elsewhere_keeps_task(simulation):
    TakeAction(0).apply(simulation)
    MoveAction(1).apply(simulation)
    PutAction(0).apply(simulation)
    assert simulation.location_items(1) == {0, 1}
    assert set(simulation.state.tasks) == {0, 1}


def test_remove_completed_tasks_with_nothing_done(simulation):
    assert simulation.remove_completed_tasks() == 0
    assert simulation.state.tasks == _tasks()


def test_copy_is_independent(simulation):
    snapshot = simulation.state.copy()
    assert snapshot == simulation.state
    TakeAction(0).apply(simulation)
    assert snapshot != simulation.state
    assert snapshot.location_items if False else snapshot.items_in_locations[0] == {0}
    assert snapshot.hauler_items == set()


def test_state_restore(simulation):
    before = simulation.state.copy()
    fingerprint = before.fingerprint()
    TakeAction(0).apply(simulation)
    MoveAction(2).apply(simulation)
    PutAction(0).apply(simulation)
    assert simulation.state.fingerprint() != fingerprint
    simulation.state = before
    assert simulation.state.fingerprint() == fingerprint
    assert simulation.state.tasks == _tasks()


def test_fingerprint_distinguishes_hauler_contents(simulation):
    first = simulation.state.fingerprint()
    TakeAction(0).apply(simulation)
    second = simulation.state.fingerprint()
    assert first != second
    assert second.startswith("0|[0]|")


def test_distance(simulation):
    assert simulation.distance(2, 1) == simulation.distance(1, 2)
    with pytest.raises(SimulationError):
        simulation.distance(0, 3)


def test_location_items_invalid(simulation):
    with pytest.raises(SimulationError):
        simulation.location_items(-1)


def test_task_from_unknown_location_rejected():
    with pytest.raises(SimulationError):
        Simulation(4, _distances(), [2], 0, {0: Task(7, 0)})


def test_constructor_does_not_share_tasks():
    tasks = _tasks()
    sim = Simulation(4, _distances(), [2, 3], 0, tasks)
    sim.take_item(0)
    sim.move_hauler(2)
    sim.put_item(0)
    assert tasks == _tasks()
    assert 0 not in sim.state.tasks


def test_from_config():
    config = SimpleNamespace(
        hauler_capacity=4,
        distances=_distances(),
        items=[2, 3],
        hauler_start_location=1,
        tasks=_tasks(),
    )
    sim = Simulation.from_config(config)
    assert sim.hauler_location == 1
    assert sim.location_items(0) == {0}
    assert sim.state.tasks == _tasks()


def test_descriptions():
    assert MoveAction(2).description() == "move to location 2"
    assert TakeAction(1).description() == "take item 1"
    assert PutAction(0).description() == "put item 0"