"""
Step records emitted by the trace engines.

A Step is one observable event of an algorithm run. Its snapshot is copied
at emission time, so a caller may keep a Step while the run moves on.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from nodes import NodeId


class StepKind(str, Enum):
    INIT = "init"
    VISIT = "visit"
    CHECK = "check"
    UPDATE = "update"
    ITERATION = "iteration"
    INFO = "info"
    ERROR = "error"
    FINISHED = "finished"


@dataclass(frozen=True)
class Snapshot:
    """
    Read-only copy of a run's state.

    ``previous`` is only carried by ``finished`` steps; every other step
    exposes distances alone.
    """
    distances: Mapping[NodeId, float]
    previous: Optional[Mapping[NodeId, Optional[NodeId]]] = None

    @classmethod
    def capture(
        cls,
        distances: Mapping[NodeId, float],
        previous: Optional[Mapping[NodeId, Optional[NodeId]]] = None,
    ) -> "Snapshot":
        return cls(
            distances=MappingProxyType(dict(distances)),
            previous=None if previous is None else MappingProxyType(dict(previous)),
        )


@dataclass(frozen=True)
class Step:
    kind: StepKind
    snapshot: Optional[Snapshot]
    message: str
    highlighted_nodes: Tuple[NodeId, ...] = ()
    highlighted_edges: Tuple[str, ...] = ()


def make_step(
    kind: StepKind,
    message: str,
    distances: Optional[Mapping[NodeId, float]] = None,
    previous: Optional[Mapping[NodeId, Optional[NodeId]]] = None,
    nodes: Sequence[NodeId] = (),
    edges: Sequence[str] = (),
) -> Step:
    """Build a Step, copying whatever run state is passed in."""
    snapshot = None if distances is None else Snapshot.capture(distances, previous)
    return Step(kind, snapshot, message, tuple(nodes), tuple(edges))
