from __future__ import annotations

import time
from dataclasses import dataclass

from notegraph.core.workspace import WorkspaceIndex


@dataclass(frozen=True)
class GraphSnapshot:
    nodes: list[str]
    edges: list[tuple[str, str]]
    stats: dict

    def to_dict(self) -> dict:
        return {
            "nodes": list(self.nodes),
            "edges": [list(e) for e in self.edges],
            "stats": dict(self.stats),
        }


def build_graph_snapshot(
    index: WorkspaceIndex,
    *,
    mode: str = "global",
    center: str | None = None,
    depth: int = 1,
    include_dangling: bool = False,
) -> GraphSnapshot:
    """
    Node/edge view of the index.

    ``mode="local"`` keeps only nodes within ``depth`` hops of ``center``,
    following links in both directions. Dangling targets are left out unless
    ``include_dangling`` is set. Self-links are kept as edges.
    """
    if mode not in ("global", "local"):
        raise ValueError(f"unknown graph mode: {mode!r}")

    t0 = time.perf_counter()

    outgoing = index.outgoing_snapshot()
    registered = {note.canonical_id for note in index.notes()}

    node_set = set(registered)
    edges_all: list[tuple[str, str]] = []
    for src, dsts in outgoing.items():
        for dst in dsts:
            if dst not in registered and not include_dangling:
                continue
            node_set.add(dst)
            edges_all.append((src, dst))

    edges_all.sort()
    nodes_all = sorted(node_set)
    nodes, edges = nodes_all, edges_all

    if mode == "local" and center in node_set:
        adj: dict[str, set[str]] = {}
        for a, b in edges_all:
            adj.setdefault(a, set()).add(b)
            adj.setdefault(b, set()).add(a)

        visited = {center}
        frontier = {center}
        for _ in range(max(1, int(depth))):
            nxt = set()
            for v in frontier:
                nxt |= adj.get(v, set())
            nxt -= visited
            visited |= nxt
            frontier = nxt

        nodes = sorted(visited)
        edges = [(a, b) for (a, b) in edges_all if a in visited and b in visited]
    elif mode == "local":
        nodes, edges = [], []

    return GraphSnapshot(
        nodes=nodes,
        edges=edges,
        stats={
            "mode": mode,
            "center": center,
            "depth": int(depth),
            "nodes_all": len(nodes_all),
            "edges_all": len(edges_all),
            "time_ms": (time.perf_counter() - t0) * 1000.0,
        },
    )
