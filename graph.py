"""
Read-only, directed, weighted graph view consumed by the trace engines.

Edges are directed: u -> v with an integer weight. Implementations must
reflect the current graph on every call; engines never cache across runs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, NamedTuple

from nodes import NodeId


def edge_id(source: NodeId, target: NodeId) -> str:
    """Conventional identifier for the edge source -> target."""
    return f"{source}-{target}"


class Neighbor(NamedTuple):
    to: NodeId
    weight: int


@dataclass(frozen=True)
class Edge:
    """
    Directed edge source -> target.
    """
    source: NodeId
    target: NodeId
    weight: int

    @property
    def id(self) -> str:
        return edge_id(self.source, self.target)


class GraphView(ABC):
    """Directed, weighted graph as seen by an algorithm run."""

    @abstractmethod
    def list_node_ids(self) -> List[NodeId]:
        """Return all node ids in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def adjacency(self) -> Dict[NodeId, List[Neighbor]]:
        """
        Outgoing neighbours for every node.

        Nodes without outgoing edges map to an empty list.
        """
        raise NotImplementedError

    @abstractmethod
    def all_edges(self) -> List[Edge]:
        """Return every edge in enumeration order."""
        raise NotImplementedError
