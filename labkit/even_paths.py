"""Shortest walk that uses an even number of corridors."""

from __future__ import annotations

import argparse
import heapq
import sys
from typing import Hashable, Iterable


def shortest_even_path(
    rooms: Iterable[Hashable],
    corridors: Iterable[tuple[Hashable, Hashable, int]],
    source: Hashable,
    dest: Hashable,
) -> int | None:
    """Least total time from source to dest over an even number of corridors.

    Corridors are undirected; a repeated corridor keeps its last time.
    Returns None when no such walk exists.
    """
    adjacency: dict = {room: {} for room in rooms}
    for a, b, time in corridors:
        for room in (a, b):
            if room not in adjacency:
                raise KeyError(room)
        adjacency[a][b] = time
        adjacency[b][a] = time
    for room in (source, dest):
        if room not in adjacency:
            raise KeyError(room)

    best: dict = {(source, 0): 0}
    heap = [(0, 0, source)]
    counter = 1
    order: dict = {}
    while heap:
        distance, _, room = heapq.heappop(heap)
        parity = order.pop(_, 0) if _ else 0
        if distance > best[(room, parity)]:
            continue
        for neighbour, time in adjacency[room].items():
            state = (neighbour, 1 - parity)
            candidate = distance + time
            if state not in best or candidate < best[state]:
                best[state] = candidate
                order[counter] = 1 - parity
                heapq.heappush(heap, (candidate, counter, neighbour))
                counter += 1
    return best.get((dest, 0))


def run_program(text: str) -> str:
    """Read rooms, corridors and endpoints from text; return the printed answer."""
    tokens = iter(text.split())
    room_count, corridor_count = int(next(tokens)), int(next(tokens))
    rooms = [next(tokens) for _ in range(room_count)]
    corridors = [
        (next(tokens), next(tokens), int(next(tokens))) for _ in range(corridor_count)
    ]
    source, dest = next(tokens), next(tokens)
    answer = shortest_even_path(rooms, corridors, source, dest)
    return f"{-1 if answer is None else answer}\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Shortest even-length path, read from stdin.")
    parser.parse_args(argv)
    sys.stdout.write(run_program(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())