"""
Final routing table derived from a finished step.
"""

from dataclasses import dataclass
from typing import List, Optional
import math

from nodes import NodeId
from steps import Snapshot

INFINITY_SYMBOL = "∞"
NO_HOP = "-"


@dataclass(frozen=True)
class RouteRow:
    """
    Single entry of the final routing table.
    """
    destination: NodeId
    cost: float
    previous_hop: Optional[NodeId]  # predecessor (or DV next hop); None if none

    @property
    def reachable(self) -> bool:
        return self.cost != math.inf


def build_routing_table(snapshot: Snapshot) -> List[RouteRow]:
    """
    Rows in distance-map order.

    Raises:
        ValueError: if the snapshot carries no predecessor map (only
        ``finished`` steps do).
    """
    if snapshot.previous is None:
        raise ValueError("Routing table needs a finished snapshot with a predecessor map.")
    return [
        RouteRow(node, cost, snapshot.previous.get(node))
        for node, cost in snapshot.distances.items()
    ]


def format_routing_table(rows: List[RouteRow]) -> str:
    header = ("Destination", "Cost", "Prev Hop")
    body = [
        (
            str(row.destination),
            str(row.cost) if row.reachable else INFINITY_SYMBOL,
            NO_HOP if row.previous_hop is None else str(row.previous_hop),
        )
        for row in rows
    ]
    widths = [max(len(r[i]) for r in [header, *body]) for i in range(3)]
    lines = ["Final Routing Table"]
    for cells in [header, *body]:
        lines.append("  ".join(c.ljust(widths[i]) for i, c in enumerate(cells)).rstrip())
    return "\n".join(lines)
