"""Point updates and path-sum queries on a tree, via an Euler tour and a Fenwick tree."""

from __future__ import annotations

from collections.abc import Iterable


class PathSumTree:
    """A tree rooted at node 0 whose nodes carry integer values, all 0 at first."""

    def __init__(self, node_count: int, edges: Iterable[tuple[int, int]] = ()) -> None:
        if node_count < 1:
            raise ValueError("a tree needs at least one node")
        edge_list = list(edges)
        if len(edge_list) != node_count - 1:
            raise ValueError(f"a tree of {node_count} nodes needs {node_count - 1} edges")
        adjacency: list[list[int]] = [[] for _ in range(node_count)]
        for u, v in edge_list:
            for node in (u, v):
                if not 0 <= node < node_count:
                    raise ValueError(f"node {node} is outside 0..{node_count - 1}")
            adjacency[u].append(v)
            adjacency[v].append(u)

        self._size = node_count
        self._depth = [0] * node_count
        parent = [0] * node_count
        self._first = [0] * node_count
        self._last = [0] * node_count
        visited = [False] * node_count

        visited[0] = True
        position = 1
        self._first[0] = position
        position += 1
        stack = [(0, iter(adjacency[0]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if visited[child]:
                    continue
                visited[child] = True
                parent[child] = node
                self._depth[child] = self._depth[node] + 1
                self._first[child] = position
                position += 1
                stack.append((child, iter(adjacency[child])))
                break
            else:
                stack.pop()
                self._last[node] = position
                position += 1
        if not all(visited):
            raise ValueError("the edges do not connect every node")

        self._up = [parent]
        for _ in range(1, max(1, node_count.bit_length())):
            previous = self._up[-1]
            self._up.append([previous[ancestor] for ancestor in previous])

        self._fenwick = [0] * position
        self._values = [0] * node_count

    def _check(self, node: int) -> None:
        if not 0 <= node < self._size:
            raise IndexError(f"node {node} is out of range")

    def _add(self, index: int, delta: int) -> None:
        while index < len(self._fenwick):
            self._fenwick[index] += delta
            index += index & -index

    def _prefix(self, index: int) -> int:
        total = 0
        while index > 0:
            total += self._fenwick[index]
            index -= index & -index
        return total

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        for level in reversed(self._up):
            if self._depth[level[u]] >= self._depth[v]:
                u = level[u]
        if u == v:
            return u
        for level in reversed(self._up):
            if level[u] != level[v]:
                u, v = level[u], level[v]
        return self._up[0][u]

    def update(self, node: int, value: int) -> None:
        """Set the value carried by ``node``."""
        self._check(node)
        delta = value - self._values[node]
        self._add(self._first[node], delta)
        self._add(self._last[node], -delta)
        self._values[node] = value

    def path_sum(self, u: int, v: int) -> int:
        """Return the sum of the values on the path from ``u`` to ``v``, both ends included."""
        ancestor = self.lca(u, v)
        return (
            self._prefix(self._first[u])
            + self._prefix(self._first[v])
            - 2 * self._prefix(self._first[ancestor])
            + self._values[ancestor]
        )