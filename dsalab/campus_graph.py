"""Depth-first and breadth-first walks over a small campus map."""

import sys
from collections import deque

LANDMARKS = (
    "College Main Gate",
    "Library",
    "Cafeteria",
    "Auditorium",
    "Hostel",
    "Sports Complex",
)
EDGES = ((0, 1), (0, 2), (1, 3), (2, 4), (4, 5), (3, 5))


class CampusGraph:
    """An undirected graph of landmarks.

    It is kept both as an adjacency matrix, which the depth-first walk uses
    (neighbours in index order), and as adjacency lists, which the
    breadth-first walk uses (neighbours in the order the edges were given).
    """

    def __init__(self, landmarks=LANDMARKS, edges=EDGES):
        self.landmarks = tuple(landmarks)
        size = len(self.landmarks)
        self._matrix = [[False] * size for _ in range(size)]
        self._adjacency = [[] for _ in range(size)]
        for u, v in edges:
            if not (0 <= u < size and 0 <= v < size):
                raise ValueError(f"edge ({u}, {v}) names a landmark that does not exist")
            self._matrix[u][v] = self._matrix[v][u] = True
            self._adjacency[u].append(v)
            self._adjacency[v].append(u)

    def _check(self, start):
        if not 0 <= start < len(self.landmarks):
            raise IndexError(f"no landmark number {start}")

    def _matrix_neighbours(self, node):
        row = self._matrix[node]
        return (other for other, linked in enumerate(row) if linked)

    def dfs(self, start=0):
        """Return landmark names in depth-first order from ``start``."""
        self._check(start)
        seen = {start}
        order = [start]
        stack = [self._matrix_neighbours(start)]
        while stack:
            for nxt in stack[-1]:
                if nxt not in seen:
                    seen.add(nxt)
                    order.append(nxt)
                    stack.append(self._matrix_neighbours(nxt))
                    break
            else:
                stack.pop()
        return [self.landmarks[node] for node in order]

    def bfs(self, start=0):
        """Return landmark names in breadth-first order from ``start``."""
        self._check(start)
        seen = {start}
        queue = deque([start])
        order = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self._adjacency[node]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append(neighbour)
        return [self.landmarks[node] for node in order]


def _walk(names):
    return " -> ".join([*names, "END"])


def main(argv=None):
    """Print both walks of the campus map from the main gate."""
    graph = CampusGraph()
    print(f"DFS Traversal (using Adjacency Matrix) starting from {LANDMARKS[0]}:")
    print(_walk(graph.dfs(0)))
    print()
    print(f"BFS Traversal (using Adjacency List) starting from {LANDMARKS[0]}:")
    print(_walk(graph.bfs(0)))
    return 0


if __name__ == "__main__":
    sys.exit(main())