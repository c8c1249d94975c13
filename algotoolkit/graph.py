"""Weighted directed graphs as adjacency matrices and adjacency lists."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from algotoolkit.sequences import format_value

INF = math.inf

Graph = Sequence[Sequence[float]]
SparseGraph = Sequence[Sequence["Hop"]]


@dataclass(frozen=True)
class Hop:
    """A weighted step towards ``vertex``; hops order by weight alone."""

    weight: float
    vertex: int

    def __lt__(self, other: Hop) -> bool:
        return self.weight < other.weight

    def __str__(self) -> str:
        return f"({format_value(self.weight)},{self.vertex})"


TEST_GRAPH: tuple[tuple[float, ...], ...] = (
    (INF, 4, INF, INF, INF, INF, INF, 8, INF),
    (INF, INF, INF, INF, INF, INF, INF, 11, INF),
    (INF, INF, INF, INF, INF, 4, INF, INF, 2),
    (INF, INF, INF, INF, 9, 14, INF, INF, INF),
    (INF, INF, INF, INF, INF, 10, INF, INF, INF),
    (INF, INF, INF, INF, INF, INF, 2, INF, INF),
    (INF, INF, INF, 3, INF, INF, INF, 1, 6),
    (INF, INF, INF, INF, INF, INF, INF, INF, 7),
    (INF, INF, INF, INF, INF, INF, INF, INF, INF),
)

SPARSE_TEST_GRAPH: tuple[tuple[Hop, ...], ...] = (
    (Hop(4, 1), Hop(8, 7)),
    (Hop(11, 7),),
    (Hop(4, 5), Hop(2, 8)),
    (Hop(9, 4), Hop(14, 5)),
    (Hop(10, 5),),
    (Hop(2, 6),),
    (Hop(3, 3), Hop(1, 7), Hop(6, 8)),
    (Hop(7, 8),),
    (),
)


def to_sparse(graph: Graph) -> list[list[Hop]]:
    """Convert an adjacency matrix to adjacency lists, dropping infinite weights."""
    return [
        [Hop(weight, v) for v, weight in enumerate(row) if math.isfinite(weight)]
        for row in graph
    ]


def to_dot(sparse_graph: SparseGraph) -> str:
    """Render adjacency lists in Graphviz dot syntax, edges labelled by weight."""
    lines = ["digraph G {"]
    for u, hops in enumerate(sparse_graph):
        for hop in hops:
            lines.append(
                f"    {u} -> {hop.vertex} [label= {format_value(hop.weight)}];"
            )
    lines.append("}")
    return "\n".join(lines) + "\n"


def percent_encode(text: str) -> str:
    """Encode every byte of ``text`` (UTF-8) as ``%xx`` with lowercase hex."""
    return "".join(f"%{byte:02x}" for byte in text.encode("utf-8"))