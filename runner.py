"""
Entry point the UI uses to start an algorithm run.
"""

from typing import Dict, Iterator

from algorithms import TraceEngine, missing_start_step
from bellman_ford_engine import BellmanFordTraceEngine
from dijkstra_engine import DijkstraTraceEngine
from distance_vector_engine import DistanceVectorTraceEngine
from graph import GraphView
from link_state_engine import LinkStateTraceEngine
from nodes import normalize_node_id
from steps import Step


class UnknownAlgorithmError(ValueError):
    """Raised when run_algorithm is asked for an algorithm it does not know."""


ENGINES: Dict[str, TraceEngine] = {
    engine.name: engine
    for engine in (
        DijkstraTraceEngine(),
        BellmanFordTraceEngine(),
        LinkStateTraceEngine(),
        DistanceVectorTraceEngine(),
    )
}

DESCRIPTIONS: Dict[str, str] = {
    "dijkstra": "Dijkstra's Algorithm: Finds the shortest path from a source node to all other nodes.",
    "bellman": "Bellman-Ford: Handles negative weights, relaxes edges V-1 times.",
    "link-state": "Link State: Floods information to build a map, then runs Dijkstra.",
    "distance-vector": "Distance Vector: Iterative distributed algorithm (simulated).",
}


def _engine_for(name: str) -> TraceEngine:
    try:
        return ENGINES[name]
    except KeyError:
        known = ", ".join(sorted(ENGINES))
        raise UnknownAlgorithmError(f"Unknown algorithm {name!r} (expected one of: {known})") from None


def describe_algorithm(name: str) -> str:
    _engine_for(name)
    return DESCRIPTIONS[name]


def run_algorithm(name: str, graph: GraphView, start: object) -> Iterator[Step]:
    """
    Start a lazy trace of algorithm ``name`` over graph from start.

    The start id is normalised the same way graph ids are, so "1" finds
    node 1. An id that cannot be normalised (an empty string, a bool) can
    never name a node, so the trace is the single not-found error step.
    """
    engine = _engine_for(name)
    try:
        start_id = normalize_node_id(start)
    except ValueError:
        return _unknown_start(start)
    return engine.trace(graph, start_id)


def _unknown_start(start: object) -> Iterator[Step]:
    yield missing_start_step(start)  # type: ignore[arg-type]
