"""Undirected graphs with union, intersection and complement."""

from __future__ import annotations

import argparse
import sys
from itertools import combinations
from typing import Iterator


class Graph:
    """An undirected graph on vertices 0..n-1."""

    def __init__(self, size: int = 0) -> None:
        self.adjacency: list[set[int]] = [set() for _ in range(size)]

    def __len__(self) -> int:
        return len(self.adjacency)

    def _grow(self, size: int) -> None:
        self.adjacency.extend(set() for _ in range(size - len(self.adjacency)))

    def add_edge(self, u: int, v: int) -> None:
        self.adjacency[u].add(v)
        self.adjacency[v].add(u)

    def remove_edge(self, u: int, v: int) -> None:
        self.adjacency[u].discard(v)
        self.adjacency[v].discard(u)

    def union(self, other: Graph) -> None:
        """Add every edge of other, growing to its size if needed."""
        self._grow(len(other))
        for mine, theirs in zip(self.adjacency, other.adjacency):
            mine |= theirs

    def intersection(self, other: Graph) -> None:
        """Keep only edges that other has too."""
        original = len(self)
        self._grow(len(other))
        for mine, theirs in zip(self.adjacency, other.adjacency):
            mine &= theirs
        for extra in self.adjacency[len(other) : original]:
            extra.clear()

    def complement(self) -> None:
        """Toggle every edge between distinct vertices."""
        for u, v in combinations(range(len(self)), 2):
            if v in self.adjacency[u]:
                self.remove_edge(u, v)
            else:
                self.add_edge(u, v)

    def is_reachable(self, start: int, target: int) -> bool:
        for vertex in (start, target):
            if not 0 <= vertex < len(self):
                raise IndexError(f"no vertex {vertex}")
        seen = {start}
        stack = [start]
        while stack:
            vertex = stack.pop()
            if vertex == target:
                return True
            for neighbour in self.adjacency[vertex] - seen:
                seen.add(neighbour)
                stack.append(neighbour)
        return False

    def render(self) -> str:
        """One line per vertex listing its neighbours in ascending order."""
        return "".join(
            f"Vertex {i}: " + "".join(f"{x} " for x in sorted(neighbours)) + "\n"
            for i, neighbours in enumerate(self.adjacency)
        )


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_int(tokens: Iterator[str]) -> int:
    return int(_take(tokens))


def _read_graph(tokens: Iterator[str]) -> Graph:
    _take(tokens)  # label word preceding the graph
    size, edges = _take_int(tokens), _take_int(tokens)
    graph = Graph(size)
    for _ in range(edges):
        graph.add_edge(_take_int(tokens), _take_int(tokens))
    return graph


def run_program(text: str) -> str:
    """Read a graph and commands from text until ``end``; return the output."""
    tokens = iter(text.split())
    graph = _read_graph(tokens)
    out: list[str] = []
    for command in tokens:
        if command == "end":
            break
        if command == "union":
            graph.union(_read_graph(tokens))
        elif command == "complement":
            graph.complement()
        elif command == "intersection":
            graph.intersection(_read_graph(tokens))
        elif command == "isReachable":
            start, target = _take_int(tokens), _take_int(tokens)
            out.append("Yes\n" if graph.is_reachable(start, target) else "No\n")
        elif command == "printGraph":
            out.append(graph.render())
        elif command == "remove_edge":
            graph.remove_edge(_take_int(tokens), _take_int(tokens))
        elif command == "add_edge":
            graph.add_edge(_take_int(tokens), _take_int(tokens))
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run graph commands read from stdin.")
    parser.parse_args(argv)
    sys.stdout.write(run_program(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())