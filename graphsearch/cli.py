"""Command that prints a breadth-first traversal of a sample graph."""

import argparse

from graphsearch.bfs import Graph


def _sample_graph() -> Graph:
    graph = Graph()
    graph.add_edge("Alice", "Bob")
    graph.add_edge("Alice", "Charlie")
    graph.add_edge("Bob", "David")
    graph.add_edge("Bob", "Eve")
    graph.add_edge("Charlie", "Frank")
    graph.add_edge("Charlie", "Grace")
    return graph


def main(argv: list[str] | None = None) -> int:
    """Print the breadth-first traversal of the sample graph."""
    parser = argparse.ArgumentParser(
        prog="graphsearch",
        description="Print a breadth-first traversal of a sample graph.",
    )
    parser.add_argument("start", nargs="?", default="Alice", help="person to start from")
    args = parser.parse_args(argv)

    graph = _sample_graph()
    print(f"BFS traversal starting from {args.start}:")
    print(graph.bfs(args.start))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())