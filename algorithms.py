"""
Trace engine interface.

Keeps the algorithms separate from graph editing and from playback: an
engine reads a GraphView and yields Step records, nothing else.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Tuple
import math

from graph import GraphView
from nodes import NodeId
from steps import Step, StepKind, make_step


class TraceEngine(ABC):
    """
    Interface for a step-by-step single-source routing computation.
    """

    #: Registry key used by runner.run_algorithm.
    name: str = ""

    @abstractmethod
    def trace(self, graph: GraphView, start: NodeId) -> Iterator[Step]:
        """
        Lazily trace the algorithm from start.

        Returns a generator: nothing is computed until the first step is
        requested, and an exhausted generator cannot be restarted.
        """
        raise NotImplementedError


def missing_start_step(start: NodeId) -> Step:
    return make_step(StepKind.ERROR, f"Start node {start} not found.")


def initial_state(
    node_ids: List[NodeId], start: NodeId
) -> Tuple[Dict[NodeId, float], Dict[NodeId, Optional[NodeId]]]:
    """Fresh run state: every node at infinity with no predecessor, start at 0."""
    distances: Dict[NodeId, float] = {node: math.inf for node in node_ids}
    previous: Dict[NodeId, Optional[NodeId]] = {node: None for node in node_ids}
    distances[start] = 0
    return distances, previous
