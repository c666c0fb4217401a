"""
CLI to play an algorithm trace in the terminal.

Reads traces/trace.yml (or the path given on the command line), builds the
graph, then pulls steps one at a time at the configured speed, echoing each
step the way the log panel does and printing the final routing table.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence
import csv
import math
import sys
import time

from adjacency_list_graph import AdjacencyListGraph
from edge_list import generate_graph, sample_graph
from graph import GraphView
from nodes import normalize_node_id
from reference_paths import has_negative_cycle, shortest_costs_from
from routing_table import build_routing_table, format_routing_table
from runner import describe_algorithm, run_algorithm
from steps import Step, StepKind

DEFAULT_CONFIG = Path(__file__).parent / "traces" / "trace.yml"
MAX_SPEED = 100


@dataclass(frozen=True)
class PlayerConfig:
    algorithm: str
    start_node: str
    speed: int = 50
    node_count: Optional[int] = None
    edges: Optional[str] = None
    verify: bool = False
    trace_csv: Optional[Path] = None

    @property
    def delay_sec(self) -> float:
        """Pause between steps: 1000 ms at speed 0 down to 100 ms at speed 100."""
        return (1000 - self.speed * 9) / 1000.0


def load_config(path: Path) -> PlayerConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text()) or {}
    speed = int(data.get("speed", 50))
    if not 0 <= speed <= MAX_SPEED:
        raise ValueError(f"speed must be between 0 and {MAX_SPEED}, got {speed}")
    trace_csv = data.get("trace_csv")
    node_count = data.get("node_count")
    start_node = data.get("start_node")
    return PlayerConfig(
        algorithm=str(data["algorithm"]),
        start_node="1" if start_node is None else str(start_node),
        speed=speed,
        node_count=None if node_count is None else int(node_count),
        edges=data.get("edges"),
        verify=bool(data.get("verify", False)),
        trace_csv=None if trace_csv is None else Path(trace_csv),
    )


def build_graph_from_config(cfg: PlayerConfig) -> AdjacencyListGraph:
    """Bulk-input graph when a node count is configured, otherwise the sample graph."""
    if cfg.node_count is None:
        return sample_graph()
    return generate_graph(cfg.node_count, cfg.edges or "")


def format_step(step: Step) -> str:
    return f"> {step.message}"


def play(
    steps: Iterable[Step],
    delay_sec: float = 0.0,
    emit: Callable[[str], None] = print,
    sleep: Callable[[float], None] = time.sleep,
) -> List[Step]:
    """
    Pull steps one at a time, emitting each and pausing between them.

    A finished step carrying a predecessor map is followed by the routing
    table. Returns the steps played.
    """
    played: List[Step] = []
    for step in steps:
        played.append(step)
        emit(format_step(step))
        if step.kind is StepKind.FINISHED and step.snapshot and step.snapshot.previous is not None:
            emit(format_routing_table(build_routing_table(step.snapshot)))
        if delay_sec > 0:
            sleep(delay_sec)
    return played


def verify_against_reference(graph: GraphView, start: object, steps: Sequence[Step]) -> List[str]:
    """
    Compare the finished distances with the reference computation.

    Returns one message per mismatching node; an empty list when the run
    agrees, did not finish, or the graph has a negative cycle (the reference
    has no meaningful costs then).
    """
    finished = [s for s in steps if s.kind is StepKind.FINISHED]
    if not finished or finished[-1].snapshot is None or has_negative_cycle(graph):
        return []
    expected = shortest_costs_from(graph, start)
    mismatches = []
    for node, cost in finished[-1].snapshot.distances.items():
        want = expected.get(node, math.inf)
        if not math.isclose(float(cost), want) and not (math.isinf(cost) and math.isinf(want)):
            mismatches.append(f"node {node}: traced {cost}, reference {want}")
    return mismatches


def step_rows(steps: Iterable[Step]) -> Iterator[Dict[str, object]]:
    for index, step in enumerate(steps):
        distances = step.snapshot.distances if step.snapshot else {}
        yield {
            "index": index,
            "kind": step.kind.value,
            "message": step.message,
            "highlighted_nodes": " ".join(str(n) for n in step.highlighted_nodes),
            "highlighted_edges": " ".join(step.highlighted_edges),
            "distances": " ".join(f"{n}={d}" for n, d in distances.items()),
        }


def write_trace_csv(steps: Iterable[Step], path: Path) -> None:
    """
    Write one CSV row per step for offline inspection.
    """
    fieldnames = ["index", "kind", "message", "highlighted_nodes", "highlighted_edges", "distances"]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in step_rows(steps):
            writer.writerow(row)


def run_trace(
    cfg: PlayerConfig,
    emit: Callable[[str], None] = print,
    sleep: Callable[[float], None] = time.sleep,
) -> List[Step]:
    graph = build_graph_from_config(cfg)
    emit(f"[trace] {describe_algorithm(cfg.algorithm)}")
    emit(
        f"[trace] graph nodes={len(graph.list_node_ids())} edges={len(graph.all_edges())} "
        f"start={cfg.start_node}"
    )

    started = time.time()
    steps = play(run_algorithm(cfg.algorithm, graph, cfg.start_node), cfg.delay_sec, emit, sleep)
    emit(f"[trace] completed {len(steps)} steps in {time.time() - started:.2f}s")

    if cfg.verify:
        if has_negative_cycle(graph):
            emit("[trace] reference check skipped: graph has a negative cycle")
        elif graph.has_node(cfg.start_node):
            start_id = normalize_node_id(cfg.start_node)
            for mismatch in verify_against_reference(graph, start_id, steps):
                emit(f"[trace] reference mismatch {mismatch}")
    if cfg.trace_csv is not None:
        write_trace_csv(steps, cfg.trace_csv)
        emit(f"[trace] wrote steps to {cfg.trace_csv}")
    return steps


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    config_path = Path(args[0]) if args else DEFAULT_CONFIG
    run_trace(load_config(config_path))


if __name__ == "__main__":
    main()
