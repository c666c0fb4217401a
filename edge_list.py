"""
Edge-list mini-format and the graphs built from it.

One edge per line: ``<from> <to> <weight>``, fields separated by whitespace
or commas, all three integers. Malformed lines are skipped silently.
"""

from typing import Iterable, List, Tuple
import re

from adjacency_list_graph import AdjacencyListGraph
from graph import GraphView

_FIELD_SEP = re.compile(r"[\s,]+")

# Default graph the editor opens with.
SAMPLE_EDGES: Tuple[Tuple[int, int, int], ...] = (
    (1, 2, 4),
    (1, 3, 2),
    (2, 3, 1),
    (2, 4, 5),
    (3, 4, 8),
    (3, 5, 10),
    (4, 5, 2),
)
SAMPLE_NODE_COUNT = 5
MIN_NODE_COUNT = 2


def parse_edge_list(text: str) -> List[Tuple[int, int, int]]:
    """
    Parse edge-list text into (from, to, weight) triples.

    Fields past the third are ignored, as in the editor's bulk input.
    """
    edges: List[Tuple[int, int, int]] = []
    for line in text.splitlines():
        parts = [p for p in _FIELD_SEP.split(line.strip()) if p]
        if len(parts) < 3:
            continue
        try:
            u, v, w = (int(p) for p in parts[:3])
        except ValueError:
            continue
        edges.append((u, v, w))
    return edges


def format_edge_list(graph: GraphView) -> str:
    return "\n".join(f"{e.source} {e.target} {e.weight}" for e in graph.all_edges())


def build_graph(node_count: int, edges: Iterable[Tuple[int, int, int]]) -> AdjacencyListGraph:
    """
    Nodes 1..node_count followed by the given edges.

    Raises:
        ValueError: if node_count is below two.
    """
    if node_count < MIN_NODE_COUNT:
        raise ValueError(f"Please enter a valid number of nodes (min {MIN_NODE_COUNT}).")
    graph = AdjacencyListGraph()
    for node in range(1, node_count + 1):
        graph.add_node(node)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    return graph


def generate_graph(node_count: int, text: str) -> AdjacencyListGraph:
    """Build the graph the bulk-input dialog produces from a node count and edge text."""
    return build_graph(node_count, parse_edge_list(text))


def sample_graph() -> AdjacencyListGraph:
    return build_graph(SAMPLE_NODE_COUNT, SAMPLE_EDGES)
