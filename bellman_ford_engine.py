"""
Bellman-Ford trace with early stop and negative-cycle detection.
"""

from typing import Iterator
import math

from algorithms import TraceEngine, initial_state, missing_start_step
from graph import GraphView
from nodes import NodeId
from steps import Step, StepKind, make_step


class BellmanFordTraceEngine(TraceEngine):
    """
    Relax every edge, in enumeration order, for up to N-1 rounds.

    A round with no improvement ends relaxation early. One extra pass over
    the edges then looks for a still-relaxable edge; finding one means a
    negative cycle is reachable and the run ends on an error step.
    """

    name = "bellman"

    def trace(self, graph: GraphView, start: NodeId) -> Iterator[Step]:
        node_ids = graph.list_node_ids()
        if start not in node_ids:
            yield missing_start_step(start)
            return

        edges = graph.all_edges()
        distances, previous = initial_state(node_ids, start)
        rounds = len(node_ids) - 1

        yield make_step(
            StepKind.INIT,
            f"Initialized Bellman-Ford. Relaxing edges {rounds} times.",
            distances,
            nodes=[start],
        )

        for i in range(rounds):
            changed = False
            yield make_step(StepKind.ITERATION, f"Iteration {i + 1}/{rounds}", distances)

            for edge in edges:
                u, v, w = edge.source, edge.target, edge.weight
                d_u = distances.get(u, math.inf)
                if d_u != math.inf and d_u + w < distances.get(v, math.inf):
                    distances[v] = d_u + w
                    previous[v] = u
                    changed = True
                    yield make_step(
                        StepKind.UPDATE,
                        f"Relaxed {u}->{v}: New dist {distances[v]}",
                        distances,
                        nodes=[v],
                        edges=[edge.id],
                    )

            if not changed:
                yield make_step(
                    StepKind.INFO, "No changes in this iteration, stopping early.", distances
                )
                break

        for edge in edges:
            u, v, w = edge.source, edge.target, edge.weight
            d_u = distances.get(u, math.inf)
            if d_u != math.inf and d_u + w < distances.get(v, math.inf):
                yield make_step(
                    StepKind.ERROR,
                    "Negative weight cycle detected!",
                    distances,
                    nodes=[u, v],
                    edges=[edge.id],
                )
                return

        yield make_step(StepKind.FINISHED, "Bellman-Ford completed.", distances, previous)


_ENGINE = BellmanFordTraceEngine()


def bellman_ford(graph: GraphView, start: NodeId) -> Iterator[Step]:
    return _ENGINE.trace(graph, start)
