"""Board commands: row sorting, inversion counting and the closest pair of points."""

from __future__ import annotations

import argparse
import bisect
import heapq
import sys
from typing import Iterable, Iterator, Sequence

Point = tuple[int, int]
PointPair = tuple[Point, Point]


def _sort_count(values: list[int]) -> tuple[list[int], int]:
    """Sorted copy of values and the number of inversions in them."""
    if len(values) < 2:
        return list(values), 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_count(values[:mid])
    right, right_count = _sort_count(values[mid:])
    cross = sum(len(left) - bisect.bisect_right(left, value) for value in right)
    return list(heapq.merge(left, right)), left_count + right_count + cross


class Board:
    """A square board of numbers."""

    def __init__(self, rows: Iterable[Iterable[int]] = ()) -> None:
        self.rows = [list(row) for row in rows]

    def create(self, rows: Iterable[Iterable[int]]) -> None:
        """Replace the board's contents."""
        self.rows = [list(row) for row in rows]

    def sort_rows(self, ascending: bool) -> None:
        for row in self.rows:
            row.sort(reverse=not ascending)

    def count_inversions(self) -> int:
        """Inversions in the board read row by row."""
        flat = [value for row in self.rows for value in row]
        return _sort_count(flat)[1]

    def display(self) -> list[str]:
        """One line per row, each value followed by a space."""
        return ["".join(f"{value} " for value in row) for row in self.rows]


def _sq_distance(pair: PointPair) -> int:
    (x1, y1), (x2, y2) = pair
    return (x1 - x2) ** 2 + (y1 - y2) ** 2


def _better(a: PointPair, b: PointPair) -> PointPair:
    """Choose between two equally close pairs; b wins remaining ties."""
    if a[0] != b[0]:
        return a if a[0] < b[0] else b
    return a if a[1][0] < b[1][0] else b


def closest_pair(points: Iterable[Sequence[int]]) -> PointPair:
    """Closest two points, the one read first leading.

    Ties between equally close pairs favour the smaller leading point.
    """
    pts = [(int(p[0]), int(p[1])) for p in points]
    if len(pts) < 2:
        raise ValueError("at least two points are needed")
    index = {point: i for i, point in enumerate(pts)}

    def ordered(p: Point, q: Point) -> PointPair:
        return (p, q) if index[p] < index[q] else (q, p)

    def solve(by_x: list[Point]) -> PointPair:
        n = len(by_x)
        if n == 2:
            return ordered(by_x[0], by_x[1])
        if n == 3:
            return solve_three(list(by_x))

        left, right = by_x[: n // 2], by_x[n // 2 :]
        line = left[-1][0]
        from_left, from_right = solve(left), solve(right)
        d_left, d_right = _sq_distance(from_left), _sq_distance(from_right)
        best_d = min(d_left, d_right)
        best = from_left if d_left <= d_right else from_right

        strip = sorted((p for p in by_x if (p[0] - line) ** 2 < best_d), key=lambda p: p[1])
        for i, a in enumerate(strip):
            for b in strip[i + 1 : i + 16]:
                d = _sq_distance((a, b))
                if d < best_d:
                    best = ordered(a, b)
                    best_d = d
                elif d == best_d:
                    pair = (b, a) if index[a] > index[b] else (a, b)
                    best = _better(pair, best)
        return best

    def solve_three(p: list[Point]) -> PointPair:
        best = ordered(p[0], p[1])
        best_d = _sq_distance((p[0], p[1]))
        d = _sq_distance((p[0], p[2]))
        if d < best_d:
            best = ordered(p[0], p[2])
            best_d = d
        elif d == best_d:
            if index[p[0]] > index[p[2]]:
                p[0], p[2] = p[2], p[0]
            best = _better((p[0], p[2]), best)
            p[0], p[2] = p[2], p[0]

        d = _sq_distance((p[1], p[2]))
        if d < best_d:
            best = ordered(p[1], p[2])
        elif d == best_d:
            if index[p[1]] > index[p[2]]:
                p[1], p[2] = p[2], p[1]
            best = _better((p[1], p[2]), best)
        return best

    return solve(sorted(pts, key=lambda p: p[0]))


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_int(tokens: Iterator[str]) -> int:
    return int(_take(tokens))


def run_program(text: str) -> str:
    """Run board commands from text until END; return what they print."""
    tokens = iter(text.split())
    board = Board()
    out: list[str] = []
    for command in tokens:
        if command == "END":
            break
        if command == "CREATE_2D":
            size = _take_int(tokens)
            board.create([[_take_int(tokens) for _ in range(size)] for _ in range(size)])
        elif command == "SORT_2D":
            order = _take(tokens)
            if order in ("ascending", "descending"):
                board.sort_rows(order == "ascending")
        elif command == "INVERSION_2D":
            out.append(str(board.count_inversions()))
        elif command == "DISPLAY_2D":
            out.extend(board.display())
        elif command == "CLOSEST_2D":
            count = _take_int(tokens)
            points = [(_take_int(tokens), _take_int(tokens)) for _ in range(count)]
            (x1, y1), (x2, y2) = closest_pair(points)
            out.append(f"{x1} {y1} {x2} {y2}")
    return "".join(line + "\n" for line in out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run board commands read from stdin.")
    parser.parse_args(argv)
    sys.stdout.write(run_program(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())