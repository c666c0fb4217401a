"""
Simulated distance-vector exchange.

Each round every node "sends" its current cost to its neighbours, which is
the same as relaxing every edge once. ``previous`` holds the next hop a node
learned its route from.
"""

from typing import Iterator
import math

from algorithms import TraceEngine, initial_state, missing_start_step
from graph import GraphView
from nodes import NodeId
from steps import Step, StepKind, make_step


class DistanceVectorTraceEngine(TraceEngine):
    """
    Synchronous DV rounds until convergence or N-1 rounds.

    No negative-cycle check: the simulated protocol does not detect them.
    """

    name = "distance-vector"

    def trace(self, graph: GraphView, start: NodeId) -> Iterator[Step]:
        node_ids = graph.list_node_ids()
        if start not in node_ids:
            yield missing_start_step(start)
            return

        edges = graph.all_edges()
        distances, previous = initial_state(node_ids, start)

        yield make_step(
            StepKind.INIT,
            "Initialized Distance Vector. Nodes will exchange vectors.",
            distances,
            nodes=[start],
        )

        for i in range(len(node_ids) - 1):
            changed = False
            yield make_step(StepKind.ITERATION, f"Round {i + 1}: Exchanging Vectors...", distances)

            for edge in edges:
                u, v, w = edge.source, edge.target, edge.weight
                advertised = distances.get(u, math.inf)
                # u advertises its cost to v
                if advertised != math.inf and advertised + w < distances.get(v, math.inf):
                    distances[v] = advertised + w
                    previous[v] = u
                    changed = True
                    yield make_step(
                        StepKind.UPDATE,
                        f"Node {u} updates Node {v}: New Path Cost {distances[v]}",
                        distances,
                        nodes=[v],
                        edges=[edge.id],
                    )

            if not changed:
                yield make_step(StepKind.INFO, "Convergence reached. No more updates.", distances)
                break

        yield make_step(
            StepKind.FINISHED,
            "Distance Vector Protocol Converged (Simulated).",
            distances,
            previous,
        )


_ENGINE = DistanceVectorTraceEngine()


def distance_vector(graph: GraphView, start: NodeId) -> Iterator[Step]:
    return _ENGINE.trace(graph, start)
