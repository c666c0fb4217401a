"""
Simulated link-state routing.

Once LSPs have flooded every router holds the full topology and runs
Dijkstra on it, so the trace is a narrative step followed by Dijkstra's.
"""

from typing import Iterator

from algorithms import TraceEngine, missing_start_step
from dijkstra_engine import DijkstraTraceEngine
from graph import GraphView
from nodes import NodeId
from steps import Step, StepKind, make_step


class LinkStateTraceEngine(TraceEngine):
    name = "link-state"

    def __init__(self, dijkstra: DijkstraTraceEngine | None = None) -> None:
        self._dijkstra = dijkstra or DijkstraTraceEngine()

    def trace(self, graph: GraphView, start: NodeId) -> Iterator[Step]:
        if start not in graph.list_node_ids():
            yield missing_start_step(start)
            return

        yield make_step(
            StepKind.INFO,
            "Link State: 1. Nodes Flood LSPs. 2. Build Graph. 3. Run Dijkstra.",
        )
        yield from self._dijkstra.trace(graph, start)


_ENGINE = LinkStateTraceEngine()


def link_state(graph: GraphView, start: NodeId) -> Iterator[Step]:
    return _ENGINE.trace(graph, start)
