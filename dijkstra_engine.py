"""
Heap-based Dijkstra trace.

Uses Python's heapq for the frontier. Entries are keyed on
(distance, push sequence), so equal distances come out in the order they
were pushed.
"""

from typing import Iterator, List, Set, Tuple
import heapq
import itertools
import math

from algorithms import TraceEngine, initial_state, missing_start_step
from graph import GraphView, edge_id
from nodes import NodeId
from steps import Step, StepKind, make_step


class DijkstraTraceEngine(TraceEngine):
    """
    Single-source Dijkstra emitting init/visit/check/update/finished steps.

    Negative weights are not rejected; they may give wrong distances, and no
    error step is produced for them.
    """

    name = "dijkstra"

    def trace(self, graph: GraphView, start: NodeId) -> Iterator[Step]:
        node_ids = graph.list_node_ids()
        if start not in node_ids:
            yield missing_start_step(start)
            return

        adj = graph.adjacency()
        distances, previous = initial_state(node_ids, start)
        finalized: Set[NodeId] = set()
        counter = itertools.count()
        pq: List[Tuple[float, int, NodeId]] = [(0, next(counter), start)]

        yield make_step(
            StepKind.INIT,
            f"Initialized distances. Start node: {start}",
            distances,
            nodes=[start],
        )

        while pq:
            d_u, _, u = heapq.heappop(pq)

            # Skip outdated entries
            if d_u > distances[u] or u in finalized:
                continue
            finalized.add(u)

            yield make_step(
                StepKind.VISIT, f"Visiting Node {u} (Current Dist: {d_u})", distances, nodes=[u]
            )

            for v, w in adj.get(u, []):
                eid = edge_id(u, v)
                yield make_step(
                    StepKind.CHECK,
                    f"Checking edge {u} -> {v} (weight: {w})",
                    distances,
                    nodes=[u, v],
                    edges=[eid],
                )

                alt = distances[u] + w
                if alt < distances.get(v, math.inf):
                    distances[v] = alt
                    previous[v] = u
                    heapq.heappush(pq, (alt, next(counter), v))
                    yield make_step(
                        StepKind.UPDATE,
                        f"Updated distance for Node {v} to {alt}",
                        distances,
                        nodes=[v],
                        edges=[eid],
                    )

        yield make_step(StepKind.FINISHED, "Dijkstra completed.", distances, previous)


_ENGINE = DijkstraTraceEngine()


def dijkstra(graph: GraphView, start: NodeId) -> Iterator[Step]:
    return _ENGINE.trace(graph, start)
