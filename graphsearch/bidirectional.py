"""Bidirectional breadth-first search over an undirected graph."""

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Graph:
    """An undirected graph stored as an adjacency list."""

    adjacency_list: dict[str, list[str]] = field(default_factory=dict)

    def add_edge(self, u: str, v: str) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self.adjacency_list.setdefault(u, []).append(v)
        self.adjacency_list.setdefault(v, []).append(u)


def _walk(node: str | None, parents: dict[str, str | None]) -> Iterator[str]:
    while node is not None:
        yield node
        node = parents[node]


def bidirectional_search(graph: Graph, start: str, goal: str) -> list[str] | None:
    """Find a path from ``start`` to ``goal`` by searching from both ends.

    The two frontiers take turns expanding one node each; the search stops
    when a node taken from one frontier has already been reached by the other.
    Returns None when the two searches never meet.
    """
    if start == goal:
        return [start]

    start_parents: dict[str, str | None] = {start: None}
    goal_parents: dict[str, str | None] = {goal: None}
    start_queue = deque([start])
    goal_queue = deque([goal])
    sides = (
        (start_queue, start_parents, goal_parents),
        (goal_queue, goal_parents, start_parents),
    )

    meeting: str | None = None
    while meeting is None and (start_queue or goal_queue):
        for queue, visited, other in sides:
            if not queue:
                continue
            node = queue.popleft()
            if node in other:
                meeting = node
                break
            for neighbor in graph.adjacency_list.get(node, ()):
                if neighbor not in visited:
                    visited[neighbor] = node
                    queue.append(neighbor)

    if meeting is None:
        return None

    path = list(_walk(meeting, start_parents))
    path.reverse()
    path.extend(_walk(goal_parents[meeting], goal_parents))
    return path