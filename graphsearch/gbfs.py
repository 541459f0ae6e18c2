"""Greedy best-first search guided by a per-node heuristic."""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class _Frontier:
    """Binary min-heap on priority; ties resolve by array-heap position."""

    def __init__(self) -> None:
        self._items: list[tuple[int, str]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, name: str, priority: int) -> None:
        self._items.append((priority, name))
        self._sift_up(len(self._items) - 1)

    def pop(self) -> str:
        last = len(self._items) - 1
        self._swap(0, last)
        self._sift_down(0, last)
        return self._items.pop()[1]

    def _less(self, i: int, j: int) -> bool:
        return self._items[i][0] < self._items[j][0]

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _sift_up(self, j: int) -> None:
        while j > 0:
            parent = (j - 1) // 2
            if not self._less(j, parent):
                break
            self._swap(j, parent)
            j = parent

    def _sift_down(self, i: int, n: int) -> None:
        while True:
            child = 2 * i + 1
            if child >= n:
                break
            right = child + 1
            if right < n and self._less(right, child):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child


@dataclass
class Graph:
    """A graph with an adjacency list and a heuristic value per node."""

    adjacency_list: dict[str, list[str]] = field(default_factory=dict)
    heuristic: dict[str, int] = field(default_factory=dict)

    def _h(self, node: str) -> int:
        return self.heuristic.get(node, 0)

    def greedy_best_first_search(self, start: str, goal: str) -> list[str] | None:
        """Search from ``start`` to ``goal`` always expanding the lowest heuristic.

        Returns the path found, or None if ``goal`` cannot be reached.
        """
        frontier = _Frontier()
        frontier.push(start, self._h(start))
        came_from: dict[str, str] = {}
        in_frontier = {start}
        visited: set[str] = set()

        logger.debug("searching from %s to %s", start, goal)
        while frontier:
            current = frontier.pop()
            logger.debug("exploring %s (h=%d)", current, self._h(current))
            if current in visited:
                continue
            visited.add(current)
            in_frontier.discard(current)

            if current == goal:
                return _reconstruct_path(came_from, start, goal)

            for neighbor in self.adjacency_list.get(current, ()):
                if neighbor in visited or neighbor in in_frontier:
                    continue
                came_from[neighbor] = current
                frontier.push(neighbor, self._h(neighbor))
                in_frontier.add(neighbor)

        logger.debug("no path found")
        return None


def _reconstruct_path(came_from: dict[str, str], start: str, goal: str) -> list[str]:
    path = [goal]
    current = goal
    while current != start:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path