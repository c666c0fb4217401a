"""
Reference shortest-path costs used to check algorithm traces.

Plain Floyd-Warshall over a dense numpy matrix; fine for the small graphs the
tool edits.
"""

from typing import Dict, List, Tuple

import numpy as np

from graph import GraphView
from nodes import NodeId


def all_pairs_shortest_paths(graph: GraphView) -> Tuple[List[NodeId], np.ndarray]:
    """
    Compute every pairwise shortest-path cost.

    Returns:
        (node_ids, costs) where costs[i, j] is the cost node_ids[i] -> node_ids[j],
        ``inf`` when unreachable. Assumes no negative cycles.
    """
    node_ids = graph.list_node_ids()
    index = {node: i for i, node in enumerate(node_ids)}
    n = len(node_ids)

    costs = np.full((n, n), np.inf)
    np.fill_diagonal(costs, 0.0)
    for edge in graph.all_edges():
        i, j = index[edge.source], index[edge.target]
        costs[i, j] = min(costs[i, j], float(edge.weight))

    for k in range(n):
        costs = np.minimum(costs, costs[:, k, None] + costs[None, k, :])

    return node_ids, costs


def shortest_costs_from(graph: GraphView, source: NodeId) -> Dict[NodeId, float]:
    node_ids, costs = all_pairs_shortest_paths(graph)
    row = costs[node_ids.index(source)]
    return {node: float(row[i]) for i, node in enumerate(node_ids)}


def has_negative_cycle(graph: GraphView) -> bool:
    """A negative diagonal entry means some node reaches itself at negative cost."""
    _, costs = all_pairs_shortest_paths(graph)
    return bool(np.any(np.diag(costs) < 0))
