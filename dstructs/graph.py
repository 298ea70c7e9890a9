"""Directed weighted graph kept as adjacency lists and an adjacency matrix."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass
class _Edge:
    dest: str
    weight: int


class Graph:
    """Graph over single-letter vertices 'A', 'B', ... with at most ``max_vertices``.

    Vertex labels map to matrix rows by their distance from 'A'. Vertices and
    edges are listed newest first, which fixes the order of list traversals.
    """

    def __init__(self, max_vertices):
        if max_vertices < 0:
            raise ValueError("max_vertices must not be negative")
        self.max_vertices = max_vertices
        self._adjacency: dict[str, list[_Edge]] = {}
        self._matrix = [[0] * max_vertices for _ in range(max_vertices)]

    def _index(self, label: str) -> int:
        if not isinstance(label, str) or len(label) != 1:
            raise ValueError(f"vertex label must be a single character: {label!r}")
        index = ord(label) - ord("A")
        if not 0 <= index < self.max_vertices:
            raise ValueError(f"vertex label {label!r} is outside the graph's range")
        return index

    def _vertices(self):
        return reversed(self._adjacency)

    def add_vertex(self, label):
        """Add a vertex; return False if the graph is full or it already exists."""
        self._index(label)
        if len(self._adjacency) >= self.max_vertices or label in self._adjacency:
            return False
        self._adjacency[label] = []
        return True

    def add_edge(self, src, dest, weight):
        """Add a directed edge; nothing happens unless both vertices exist."""
        if src not in self._adjacency or dest not in self._adjacency:
            return False
        self._adjacency[src].insert(0, _Edge(dest, weight))
        self._matrix[self._index(src)][self._index(dest)] = weight
        return True

    def remove_edge(self, src, dest):
        """Remove the newest edge from src to dest and clear its matrix cell."""
        edges = self._adjacency.get(src)
        if edges is None:
            return False
        j = self._index(dest)
        removed = False
        for position, edge in enumerate(edges):
            if edge.dest == dest:
                del edges[position]
                removed = True
                break
        self._matrix[self._index(src)][j] = 0
        return removed

    def bfs_list(self, start):
        """Breadth-first order using the adjacency lists."""
        if start not in self._adjacency:
            return []
        visited = {start}
        queue = deque([start])
        order = []
        while queue:
            label = queue.popleft()
            order.append(label)
            for edge in self._adjacency[label]:
                if edge.dest not in visited:
                    visited.add(edge.dest)
                    queue.append(edge.dest)
        return order

    def bfs_matrix(self, start):
        """Breadth-first order using the adjacency matrix."""
        first = self._index(start)
        visited = {first}
        queue = deque([first])
        order = []
        while queue:
            u = queue.popleft()
            order.append(chr(u + ord("A")))
            for v, weight in enumerate(self._matrix[u]):
                if weight != 0 and v not in visited:
                    visited.add(v)
                    queue.append(v)
        return order

    def dfs_list(self, start):
        """Depth-first order using the adjacency lists."""
        if start not in self._adjacency:
            return []
        visited = set()
        stack = [start]
        order = []
        while stack:
            label = stack.pop()
            if label in visited:
                continue
            visited.add(label)
            order.append(label)
            stack.extend(
                edge.dest for edge in self._adjacency[label] if edge.dest not in visited
            )
        return order

    def dfs_matrix(self, start):
        """Depth-first order using the adjacency matrix, lower labels first."""
        stack = [self._index(start)]
        visited = set()
        order = []
        while stack:
            u = stack.pop()
            if u in visited:
                continue
            visited.add(u)
            order.append(chr(u + ord("A")))
            row = self._matrix[u]
            stack.extend(
                v
                for v in reversed(range(self.max_vertices))
                if row[v] != 0 and v not in visited
            )
        return order

    def has_cycle(self):
        """Detect a cycle, treating an edge back to the parent as no cycle."""
        visited: set[str] = set()

        def visit(label: str, parent: str | None) -> bool:
            visited.add(label)
            for edge in self._adjacency[label]:
                if edge.dest not in visited:
                    if visit(edge.dest, label):
                        return True
                elif edge.dest != parent:
                    return True
            return False

        return any(
            visit(label, None) for label in self._vertices() if label not in visited
        )

    def format_list(self):
        """Adjacency lists, one vertex per line, as 'A: B(5) C(2) '."""
        lines = []
        for label in self._vertices():
            edges = "".join(f"{e.dest}({e.weight}) " for e in self._adjacency[label])
            lines.append(f"{label}: {edges}\n")
        return "".join(lines)

    def format_matrix(self):
        """Adjacency matrix, one row per line, each value followed by a space."""
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self._matrix
        )