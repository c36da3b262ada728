"""Islands of different shapes and the longest chain of neighbouring islands."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Iterable, Iterator, Sequence

Point = tuple[int, int]


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _distance(a: Point, b: Point) -> float:
    dx, dy = a[0] - b[0], a[1] - b[1]
    return math.sqrt(dx * dx + dy * dy)


def _points(vertices: Iterable[Sequence[int]], count: int) -> list[Point]:
    points = [(int(v[0]), int(v[1])) for v in vertices]
    if len(points) != count:
        raise ValueError(f"expected {count} vertices, got {len(points)}")
    return points


class Island:
    """An island known by its centre and the farthest reach from that centre."""

    def __init__(self, island_id: str, centre: Point, max_dist: float) -> None:
        self.island_id = island_id
        self.centre = centre
        self.max_dist = max_dist

    def distance_to(self, other: Island) -> float:
        """Distance between the centres of two islands."""
        return _distance(self.centre, other.centre)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.island_id!r}, centre={self.centre}, "
            f"max_dist={self.max_dist})"
        )


class Rectangle(Island):
    """A rectangular island given by its four corners in order."""

    def __init__(self, island_id: str, vertices: Iterable[Sequence[int]]) -> None:
        self.vertices = _points(vertices, 4)
        first, _, third, _ = self.vertices
        centre = (
            _trunc_div(first[0] + third[0], 2),
            _trunc_div(first[1] + third[1], 2),
        )
        super().__init__(island_id, centre, _distance(first, centre))


class Triangle(Island):
    """A triangular island given by its three corners."""

    def __init__(self, island_id: str, vertices: Iterable[Sequence[int]]) -> None:
        self.vertices = _points(vertices, 3)
        centre = (
            _trunc_div(sum(x for x, _ in self.vertices), 3),
            _trunc_div(sum(y for _, y in self.vertices), 3),
        )
        reach = max(_distance(vertex, centre) for vertex in self.vertices)
        super().__init__(island_id, centre, reach)


class Circle(Island):
    """A circular island."""

    def __init__(self, island_id: str, centre: Sequence[int], radius: int) -> None:
        self.radius = int(radius)
        super().__init__(island_id, (int(centre[0]), int(centre[1])), self.radius)


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_point(tokens: Iterator[str]) -> Point:
    return int(_take(tokens)), int(_take(tokens))


def read_island(shape: str, fields: Iterable[str]) -> Island:
    """Build an island from its shape name and the tokens that describe it.

    Only the tokens the shape needs are consumed; any shape other than
    RECTANGLE or TRIANGLE is read as a circle.
    """
    tokens = iter(fields)
    island_id = _take(tokens)
    if shape == "RECTANGLE":
        return Rectangle(island_id, [_take_point(tokens) for _ in range(4)])
    if shape == "TRIANGLE":
        return Triangle(island_id, [_take_point(tokens) for _ in range(3)])
    centre = _take_point(tokens)
    return Circle(island_id, centre, int(_take(tokens)))


class Sea:
    """Islands linked wherever their reaches touch."""

    def __init__(self, islands: Iterable[Island]) -> None:
        self.islands = list(islands)
        self.graph = [
            [j for j, b in enumerate(self.islands) if j != i and self._near(a, b)]
            for i, a in enumerate(self.islands)
        ]

    @staticmethod
    def _near(a: Island, b: Island) -> bool:
        return a.distance_to(b) <= a.max_dist + b.max_dist

    def longest_path(self) -> list[Island]:
        """Longest chain of distinct neighbouring islands, from its last island back."""
        count = len(self.islands)
        if not count:
            return []
        full = 1 << count
        prev_of = [[-1] * count for _ in range(full)]
        for node in range(count):
            prev_of[1 << node][node] = node

        best_mask = best_end = best_len = 0
        for mask in range(1, full):
            size = bin(mask).count("1")
            for node, before in enumerate(prev_of[mask]):
                if before == -1:
                    continue
                for nxt in self.graph[node]:
                    bit = 1 << nxt
                    if not mask & bit:
                        prev_of[mask | bit][nxt] = node
                if size > best_len:
                    best_mask, best_end, best_len = mask, node, size

        mask, end = best_mask, best_end
        prev = prev_of[mask][end]
        path = [self.islands[end]]
        while end != prev:
            mask ^= 1 << end
            end, prev = prev, prev_of[mask][prev]
            path.append(self.islands[end])
        return path


def run_program(text: str) -> str:
    """Read islands from text and report the longest chain through them."""
    tokens = iter(text.split())
    count = int(_take(tokens))
    islands = [read_island(_take(tokens), tokens) for _ in range(count)]
    path = Sea(islands).longest_path()
    lines = ["YES" if len(path) == count else "NO"]
    if len(path) != count:
        lines.append(str(len(path)))
    lines.append("".join(f"{island.island_id} " for island in path))
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Longest island chain, read from stdin.")
    parser.parse_args(argv)
    sys.stdout.write(run_program(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())