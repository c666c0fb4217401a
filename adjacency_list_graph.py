"""
Concrete directed, weighted graph used by the editor and the tests.

Implements the GraphView interface with an insertion-ordered adjacency list.
"""

from typing import Dict, List

from graph import Edge, GraphView, Neighbor
from nodes import NodeId, normalize_node_id


class AdjacencyListGraph(GraphView):
    """
    Directed, weighted graph backed by a node -> (neighbor -> weight) mapping.

    At most one edge exists per ordered pair; dicts keep insertion order, so
    edge enumeration order is the order edges were added.
    """

    def __init__(self) -> None:
        self._adj: Dict[NodeId, Dict[NodeId, int]] = {}
        self._edge_order: List[tuple[NodeId, NodeId]] = []

    # --- Mutation API (editor only, not part of GraphView) ------------------

    def add_node(self, node: object) -> NodeId:
        """Ensure node exists in the graph and return its normalised id."""
        node_id = normalize_node_id(node)
        self._adj.setdefault(node_id, {})
        return node_id

    def add_edge(self, src: object, dst: object, weight: int) -> bool:
        """
        Add a directed edge src -> dst with weight.

        Auto-adds missing endpoints. Re-adding an existing pair is a no-op;
        returns whether a new edge was created.
        """
        u = self.add_node(src)
        v = self.add_node(dst)
        if v in self._adj[u]:
            return False
        self._adj[u][v] = int(weight)
        self._edge_order.append((u, v))
        return True

    def remove_edge(self, src: object, dst: object) -> bool:
        u = normalize_node_id(src)
        v = normalize_node_id(dst)
        if v not in self._adj.get(u, {}):
            return False
        del self._adj[u][v]
        self._edge_order.remove((u, v))
        return True

    def remove_node(self, node: object) -> bool:
        """Remove node together with every edge touching it."""
        node_id = normalize_node_id(node)
        if node_id not in self._adj:
            return False
        del self._adj[node_id]
        for out in self._adj.values():
            out.pop(node_id, None)
        self._edge_order = [
            (u, v) for u, v in self._edge_order if node_id not in (u, v)
        ]
        return True

    def clear(self) -> None:
        self._adj.clear()
        self._edge_order.clear()

    def has_node(self, node: object) -> bool:
        try:
            return normalize_node_id(node) in self._adj
        except ValueError:
            return False

    # --- GraphView interface ------------------------------------------------

    def list_node_ids(self) -> List[NodeId]:
        return list(self._adj)

    def adjacency(self) -> Dict[NodeId, List[Neighbor]]:
        adj: Dict[NodeId, List[Neighbor]] = {node: [] for node in self._adj}
        for u, v in self._edge_order:
            adj[u].append(Neighbor(v, self._adj[u][v]))
        return adj

    def all_edges(self) -> List[Edge]:
        return [Edge(u, v, self._adj[u][v]) for u, v in self._edge_order]
