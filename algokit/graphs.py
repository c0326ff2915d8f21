"""Shortest-path problems on weighted graphs."""

from __future__ import annotations

import heapq
from typing import Dict, List, Sequence, Tuple


def network_delay_time(times: Sequence[Sequence[int]], n: int, k: int) -> int:
    """Time for a signal from node ``k`` to reach all of nodes ``1..n``.

    ``times`` holds directed edges ``(source, target, weight)``. Returns -1
    when some node can never be reached.
    """
    if not 1 <= k <= n:
        raise ValueError(f"start node {k} is outside 1..{n}")

    graph: Dict[int, List[Tuple[int, int]]] = {}
    for source, target, weight in times:
        graph.setdefault(source, []).append((target, weight))

    inf = float("inf")
    dist = [inf] * (n + 1)
    dist[k] = 0
    visited = [False] * (n + 1)
    queue: List[Tuple[float, int]] = [(0, k)]

    while queue:
        _, node = heapq.heappop(queue)
        if visited[node]:
            continue
        visited[node] = True
        for target, weight in graph.get(node, ()):
            candidate = dist[node] + weight
            if candidate < dist[target]:
                dist[target] = candidate
                heapq.heappush(queue, (candidate, target))

    longest = max(dist[1:])
    return -1 if longest == inf else int(longest)