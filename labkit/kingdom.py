"""Kingdom of sentinels on a tree of roads: vertex cover and rank queries."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import IntEnum


class Rank(IntEnum):
    SENAPATI = 1
    DANDANAYAKA = 2
    CHATURANGINI = 3


@dataclass(frozen=True)
class Sentinel:
    name: str
    sentinel_id: int
    rank: Rank


class Kingdom:
    """Sentinels placed on the nodes of a tree of roads."""

    def __init__(self, size: int) -> None:
        self.roads: list[list[int]] = [[] for _ in range(size)]
        self.sentinels: list[Sentinel] = []
        self._cover: int | None = None

    def add_road(self, u: int, v: int) -> None:
        self.roads[u].append(v)
        self.roads[v].append(u)
        self._cover = None

    def add_sentinel(self, sentinel: Sentinel) -> None:
        self.sentinels.append(sentinel)

    def min_vertex_cover(self) -> int:
        """Size of the smallest node set touching every road reachable from node 0."""
        if self._cover is None:
            self._cover = self._compute_cover()
        return self._cover

    def _compute_cover(self) -> int:
        if not self.roads:
            return 0
        parent = {0: -1}
        order = []
        stack = [0]
        while stack:
            node = stack.pop()
            order.append(node)
            for neighbour in self.roads[node]:
                if neighbour not in parent:
                    parent[neighbour] = node
                    stack.append(neighbour)

        excluded: dict[int, int] = {}
        included: dict[int, int] = {}
        for node in reversed(order):
            children = [c for c in self.roads[node] if parent.get(c) == node]
            excluded[node] = sum(included[c] for c in children)
            included[node] = 1 + sum(min(included[c], excluded[c]) for c in children)
        return min(included[0], excluded[0])

    def sorted_ids(self) -> list[int]:
        """Sentinel ids ordered by rank, then id."""
        ordered = sorted(self.sentinels, key=lambda s: (s.rank, s.sentinel_id))
        return [s.sentinel_id for s in ordered]

    def count_higher_ranked(self, sentinel_id: int) -> int:
        """Number of sentinels whose rank is above the given one's."""
        rank = self.sentinels[sentinel_id].rank
        return sum(1 for s in self.sentinels if s.rank < rank)


def run_program(text: str) -> str:
    """Read a kingdom and its queries from text; return the printed answers."""
    tokens = iter(text.split())
    size = int(next(tokens))
    kingdom = Kingdom(size)
    for _ in range(size - 1):
        kingdom.add_road(int(next(tokens)), int(next(tokens)))
    for index in range(size):
        name, rank_name = next(tokens), next(tokens)
        rank = Rank.__members__.get(rank_name)
        if rank is not None:
            kingdom.add_sentinel(Sentinel(name, index, rank))

    out: list[str] = []
    for _ in range(int(next(tokens))):
        query = int(next(tokens))
        if query == 1:
            out.append(str(kingdom.min_vertex_cover()))
        elif query == 2:
            out.append("".join(f"{i} " for i in kingdom.sorted_ids()))
        elif query == 3:
            out.append(str(kingdom.count_higher_ranked(int(next(tokens)))))
    return "".join(line + "\n" for line in out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Answer kingdom queries read from stdin.")
    parser.parse_args(argv)
    sys.stdout.write(run_program(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())