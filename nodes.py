"""
Node identifiers for the trace engine.

Nodes carry no attributes beyond their id; positions and styling belong to
whatever renders the graph.
"""

from typing import Union

NodeId = Union[int, str]


def normalize_node_id(value: object) -> NodeId:
    """
    Coerce a caller-supplied identifier to the graph's id type.

    Integers pass through, strings holding an integer literal become that
    integer, and any other non-empty string is kept (stripped).
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid node id: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Node id must not be empty.")
        try:
            return int(text)
        except ValueError:
            return text
    raise ValueError(f"Invalid node id: {value!r}")
