"""
Unit tests for the Dijkstra trace using AdjacencyListGraph.
"""

import math

import pytest

from adjacency_list_graph import AdjacencyListGraph
from dijkstra_engine import DijkstraTraceEngine, dijkstra
from edge_list import sample_graph
from steps import StepKind


def test_sample_graph_finishes_with_expected_routes():
    steps = list(dijkstra(sample_graph(), 1))
    final = steps[-1]

    assert final.kind is StepKind.FINISHED
    assert final.message == "Dijkstra completed."
    assert final.snapshot.distances == {1: 0, 2: 4, 3: 2, 4: 9, 5: 11}
    assert final.snapshot.previous == {1: None, 2: 1, 3: 1, 4: 2, 5: 4}


def test_sample_graph_step_sequence():
    """Stale frontier entries (4 at 10, 5 at 12) are skipped without a step."""
    steps = list(dijkstra(sample_graph(), 1))

    assert [s.kind.value for s in steps] == [
        "init",
        "visit", "check", "update", "check", "update",
        "visit", "check", "update", "check", "update",
        "visit", "check", "check", "update",
        "visit", "check", "update",
        "visit",
        "finished",
    ]
    visits = [s.message for s in steps if s.kind is StepKind.VISIT]
    assert visits == [
        "Visiting Node 1 (Current Dist: 0)",
        "Visiting Node 3 (Current Dist: 2)",
        "Visiting Node 2 (Current Dist: 4)",
        "Visiting Node 4 (Current Dist: 9)",
        "Visiting Node 5 (Current Dist: 11)",
    ]


def test_check_precedes_update_with_highlights():
    steps = list(dijkstra(sample_graph(), 1))
    init, visit, check, update = steps[:4]

    assert init.message == "Initialized distances. Start node: 1"
    assert init.highlighted_nodes == (1,)
    assert visit.highlighted_nodes == (1,)

    assert check.message == "Checking edge 1 -> 2 (weight: 4)"
    assert check.highlighted_nodes == (1, 2)
    assert check.highlighted_edges == ("1-2",)
    assert check.snapshot.distances[2] == math.inf

    assert update.message == "Updated distance for Node 2 to 4"
    assert update.highlighted_nodes == (2,)
    assert update.highlighted_edges == ("1-2",)
    assert update.snapshot.distances[2] == 4
    assert update.snapshot.previous is None


def test_failed_relaxation_still_emits_check():
    g = AdjacencyListGraph()
    g.add_edge(1, 2, 1)
    g.add_edge(1, 3, 5)
    g.add_edge(2, 3, 10)

    steps = list(dijkstra(g, 1))
    checks = [s.message for s in steps if s.kind is StepKind.CHECK]
    updates = [s.message for s in steps if s.kind is StepKind.UPDATE]

    assert "Checking edge 2 -> 3 (weight: 10)" in checks
    assert "Updated distance for Node 3 to 11" not in updates


def test_equal_distances_visit_in_insertion_order():
    g = AdjacencyListGraph()
    for node in (1, 4, 3, 2):
        g.add_node(node)
    g.add_edge(1, 4, 1)
    g.add_edge(1, 3, 1)
    g.add_edge(1, 2, 1)

    visits = [s.highlighted_nodes[0] for s in dijkstra(g, 1) if s.kind is StepKind.VISIT]
    assert visits == [1, 4, 3, 2]


def test_unreachable_node_keeps_infinity():
    g = AdjacencyListGraph()
    g.add_edge("A", "B", 2)
    g.add_node("C")  # unreachable from A

    final = list(dijkstra(g, "A"))[-1]

    assert final.snapshot.distances["C"] == math.inf
    assert final.snapshot.previous["C"] is None


def test_negative_cycle_is_not_reported():
    """Dijkstra has no cycle check; it still terminates with a finished step."""
    g = AdjacencyListGraph()
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, -2)
    g.add_edge(3, 2, 1)

    steps = list(dijkstra(g, 1))

    assert all(s.kind is not StepKind.ERROR for s in steps)
    assert steps[-1].kind is StepKind.FINISHED


def test_trace_is_lazy_and_not_restartable():
    g = sample_graph()
    trace = DijkstraTraceEngine().trace(g, 1)

    # Graph changes before the first pull are visible to the run
    g.add_node(6)
    first = next(trace)
    assert 6 in first.snapshot.distances

    rest = list(trace)
    assert rest[-1].kind is StepKind.FINISHED
    assert list(trace) == []


def test_abandoned_trace_leaves_graph_untouched():
    g = sample_graph()
    edges_before = g.all_edges()
    trace = dijkstra(g, 1)
    next(trace)
    next(trace)
    trace.close()

    assert g.all_edges() == edges_before
    with pytest.raises(StopIteration):
        next(trace)
