"""Breadth-first traversal over a directed graph of named people."""

from collections import deque
from collections.abc import Iterator


class Graph:
    """A directed graph stored as an adjacency list."""

    def __init__(self) -> None:
        self.adjacency_list: dict[str, list[str]] = {}

    def add_edge(self, person1: str, person2: str) -> None:
        """Add a directed edge from ``person1`` to ``person2``."""
        self.adjacency_list.setdefault(person1, []).append(person2)

    def _traverse(self, start: str) -> Iterator[str]:
        visited = {start}
        queue = deque([start])
        while queue:
            person = queue.popleft()
            yield person
            for neighbor in self.adjacency_list.get(person, ()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

    def bfs(self, start: str) -> str:
        """Return the visit order from ``start``, each name followed by a space."""
        return "".join(f"{person} " for person in self._traverse(start))

    def bfs_find(self, start: str, target: str) -> bool:
        """Return True if ``target`` is reachable from ``start``."""
        return any(person == target for person in self._traverse(start))