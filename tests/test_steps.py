"""
Unit tests for Step records and their snapshots.
"""

import math

import pytest

from dijkstra_engine import dijkstra
from edge_list import sample_graph
from steps import Snapshot, Step, StepKind, make_step


def test_snapshot_is_a_copy():
    distances = {1: 0, 2: math.inf}
    step = make_step(StepKind.INIT, "init", distances, nodes=[1])

    distances[2] = 5

    assert step.snapshot.distances == {1: 0, 2: math.inf}
    assert step.highlighted_nodes == (1,)
    assert step.highlighted_edges == ()


def test_snapshot_is_read_only():
    snapshot = Snapshot.capture({1: 0}, {1: None})

    with pytest.raises(TypeError):
        snapshot.distances[1] = 3  # type: ignore[index]
    with pytest.raises(TypeError):
        snapshot.previous[1] = 2  # type: ignore[index]


def test_held_steps_do_not_change_as_run_continues():
    trace = dijkstra(sample_graph(), 1)
    init = next(trace)
    list(trace)

    assert init.snapshot.distances == {1: 0, 2: math.inf, 3: math.inf, 4: math.inf, 5: math.inf}


def test_step_without_state_has_no_snapshot():
    step = make_step(StepKind.INFO, "hello")

    assert step == Step(StepKind.INFO, None, "hello")
    assert StepKind("finished") is StepKind.FINISHED
