"""Single-source shortest paths on undirected weighted graphs."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from typing import Optional

Edge = tuple[int, int, int]


def build_adjacency(node_count: int, edges: Iterable[Edge]) -> list[dict[int, int]]:
    """Build a 1-based undirected adjacency list, keeping the lightest parallel edge."""
    adjacency: list[dict[int, int]] = [{} for _ in range(node_count + 1)]
    for u, v, weight in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= node_count:
                raise ValueError(f"vertex {vertex} is outside 1..{node_count}")
        for a, b in ((u, v), (v, u)):
            current = adjacency[a].get(b)
            if current is None or weight < current:
                adjacency[a][b] = weight
    return adjacency


def dijkstra(adjacency: Sequence[dict[int, int]], source: int) -> list[Optional[int]]:
    """Return the shortest distance from ``source`` to every vertex, ``None`` if unreachable."""
    if not 0 <= source < len(adjacency):
        raise IndexError(f"source {source} is out of range")
    distances: list[Optional[int]] = [None] * len(adjacency)
    distances[source] = 0
    done = [False] * len(adjacency)
    heap = [(0, source)]
    while heap:
        distance, vertex = heapq.heappop(heap)
        if done[vertex]:
            continue
        done[vertex] = True
        for neighbour, weight in adjacency[vertex].items():
            if done[neighbour]:
                continue
            candidate = distance + weight
            known = distances[neighbour]
            if known is None or candidate < known:
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distances


def shortest_reach(node_count: int, edges: Iterable[Edge], start: int) -> list[int]:
    """Distances from ``start`` to vertices 1..node_count, -1 for unreachable.

    Vertices at distance zero, the start among them, are left out.
    """
    distances = dijkstra(build_adjacency(node_count, edges), start)
    result: list[int] = []
    for distance in distances[1:]:
        if distance is None:
            result.append(-1)
        elif distance != 0:
            result.append(distance)
    return result