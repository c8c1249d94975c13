"""Single-source and all-pairs shortest paths on adjacency matrices.

Results are lists of :class:`Hop`: the weight is the path length and the
vertex is the predecessor on the path, ``-1`` for the source or when the
vertex is unreachable.
"""

from __future__ import annotations

import math
import operator
from typing import NamedTuple

from algotoolkit.graph import INF, Graph, Hop
from algotoolkit.heap import priority_dequeue, priority_enqueue


class BellmanFordResult(NamedTuple):
    """Distances with predecessors, and whether a negative cycle was seen."""

    distances: list[Hop]
    has_negative_cycle: bool


def relax(graph: Graph, dp: list[Hop], r: int, v: int) -> bool:
    """Improve the path to ``v`` by going through ``r``; return whether it improved."""
    via_r = dp[r].weight + graph[r][v]
    if via_r < dp[v].weight:
        dp[v] = Hop(via_r, r)
        return True
    return False


def _initial(graph: Graph, source: int) -> list[Hop]:
    size = len(graph)
    if not 0 <= source < size:
        raise ValueError(f"source {source} outside 0..{size - 1}")
    dp = [Hop(INF, -1)] * size
    dp[source] = Hop(0, -1)
    return dp


def bellman_ford(graph: Graph, source: int) -> BellmanFordResult:
    """Run Bellman-Ford from ``source``.

    A negative cycle is reported when the last of the ``V - 1`` rounds
    still improved some distance.
    """
    dp = _initial(graph, source)
    size = len(graph)
    has_negative_cycle = False
    for _ in range(size - 1):
        has_negative_cycle = False
        for r in range(size):
            for v in range(size):
                has_negative_cycle |= relax(graph, dp, r, v)
    return BellmanFordResult(dp, has_negative_cycle)


def dijkstra(graph: Graph, source: int) -> list[Hop]:
    """Run Dijkstra's algorithm from ``source`` picking the open vertex by scan."""
    dp = _initial(graph, source)
    is_open = [True] * len(graph)
    while True:
        candidates = [
            (hop.weight, v) for v, hop in enumerate(dp) if is_open[v] and hop.weight < INF
        ]
        if not candidates:
            break
        _, v_star = min(candidates)
        is_open[v_star] = False
        for v, weight in enumerate(graph[v_star]):
            if is_open[v] and math.isfinite(weight):
                relax(graph, dp, v_star, v)
    return dp


def dijkstra_priority(graph: Graph, source: int) -> list[Hop]:
    """Run Dijkstra's algorithm from ``source`` using a min-priority queue."""
    dp = _initial(graph, source)
    queue: list[Hop] = []
    priority_enqueue(queue, Hop(0, source), operator.lt)
    while queue:
        v_star = priority_dequeue(queue, operator.lt).vertex
        for v, weight in enumerate(graph[v_star]):
            if math.isfinite(weight) and relax(graph, dp, v_star, v):
                priority_enqueue(queue, Hop(dp[v].weight, v), operator.lt)
    return dp


def floyd_warshall(graph: Graph) -> list[list[Hop]]:
    """Compute shortest paths between all pairs; row ``u`` is rooted at ``u``."""
    size = len(graph)
    dp = [[Hop(INF, -1)] * size for _ in range(size)]
    for u in range(size):
        for v in range(size):
            if u == v:
                dp[u][v] = Hop(0, -1)
            elif math.isfinite(graph[u][v]):
                dp[u][v] = Hop(graph[u][v], u)

    for r in range(size):
        for u in range(size):
            for v in range(size):
                through_r = dp[u][r].weight + dp[r][v].weight
                if through_r < dp[u][v].weight:
                    dp[u][v] = Hop(through_r, dp[r][v].vertex)
    return dp