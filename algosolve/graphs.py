"""Problems on graphs given as edge lists."""

from __future__ import annotations

import heapq
import math
from typing import Sequence

_IMPOSSIBLE_WEIGHT = 2_000_000_000


def remove_stones(stones: Sequence[Sequence[int]]) -> int:
    """Return how many stones can go, each sharing a row or column with one that stays."""
    count = len(stones)
    neighbours: list[list[int]] = [[] for _ in range(count)]
    for i in range(count):
        for j in range(i + 1, count):
            if stones[i][0] == stones[j][0] or stones[i][1] == stones[j][1]:
                neighbours[i].append(j)
                neighbours[j].append(i)

    seen: set[int] = set()
    components = 0
    for first in range(count):
        if first in seen:
            continue
        components += 1
        seen.add(first)
        stack = [first]
        while stack:
            for other in neighbours[stack.pop()]:
                if other not in seen:
                    seen.add(other)
                    stack.append(other)
    return count - components


def max_probability(
    n: int,
    edges: Sequence[Sequence[int]],
    succ_prob: Sequence[float],
    start: int,
    end: int,
) -> float:
    """Return the highest product of edge probabilities on a path from start to end."""
    graph: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for (u, v), prob in zip(edges, succ_prob):
        graph[u].append((v, prob))
        graph[v].append((u, prob))

    seen = [False] * n
    heap = [(-1.0, start)]
    while heap:
        negative, node = heapq.heappop(heap)
        prob = -negative
        if node == end:
            return prob
        if seen[node]:
            continue
        seen[node] = True
        for other, edge_prob in graph[node]:
            if not seen[other]:
                heapq.heappush(heap, (-(prob * edge_prob), other))
    return 0.0


def _shortest_distance(graph: list[list[tuple[int, int]]], src: int, dst: int) -> float:
    dist = [math.inf] * len(graph)
    dist[src] = 0
    heap = [(0, src)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for other, weight in graph[node]:
            if d + weight < dist[other]:
                dist[other] = d + weight
                heapq.heappush(heap, (dist[other], other))
    return dist[dst]


def modified_graph_edges(
    n: int,
    edges: Sequence[Sequence[int]],
    source: int,
    destination: int,
    target: int,
) -> list[list[int]]:
    """Give every -1 edge a positive weight so the shortest path equals ``target``.

    Returns the edges with their new weights, or [] when that cannot be done.
    """
    result = [list(edge) for edge in edges]
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in result:
        if w != -1:
            graph[u].append((v, w))
            graph[v].append((u, w))

    distance = _shortest_distance(graph, source, destination)
    if distance < target:
        return []
    if distance == target:
        for edge in result:
            if edge[2] == -1:
                edge[2] = _IMPOSSIBLE_WEIGHT
        return result

    for index, edge in enumerate(result):
        u, v, w = edge
        if w != -1:
            continue
        edge[2] = 1
        graph[u].append((v, 1))
        graph[v].append((u, 1))
        distance = _shortest_distance(graph, source, destination)
        if distance <= target:
            edge[2] += int(target - distance)
            for later in result[index + 1:]:
                if later[2] == -1:
                    later[2] = _IMPOSSIBLE_WEIGHT
            return result

    return []