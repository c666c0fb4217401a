"""
Unit tests for the final routing table.
"""

import math

import pytest

from dijkstra_engine import dijkstra
from edge_list import sample_graph
from routing_table import RouteRow, build_routing_table, format_routing_table
from steps import Snapshot


def test_rows_from_finished_step():
    final = list(dijkstra(sample_graph(), 1))[-1]

    rows = build_routing_table(final.snapshot)

    assert rows[0] == RouteRow(1, 0, None)
    assert rows[3] == RouteRow(4, 9, 2)
    assert [r.destination for r in rows] == [1, 2, 3, 4, 5]


def test_requires_predecessor_map():
    with pytest.raises(ValueError):
        build_routing_table(Snapshot.capture({1: 0}))


def test_format_marks_unreachable_and_missing_hops():
    snapshot = Snapshot.capture({1: 0, 2: 3, 3: math.inf}, {1: None, 2: 1, 3: None})

    lines = format_routing_table(build_routing_table(snapshot)).splitlines()

    assert lines[0] == "Final Routing Table"
    assert lines[1].split() == ["Destination", "Cost", "Prev", "Hop"]
    assert lines[2].split() == ["1", "0", "-"]
    assert lines[3].split() == ["2", "3", "1"]
    assert lines[4].split() == ["3", "∞", "-"]
    assert not RouteRow(3, math.inf, None).reachable
