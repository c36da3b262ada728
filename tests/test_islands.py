import math

import pytest

from labkit.islands import (
    Circle,
    Rectangle,
    Sea,
    Triangle,
    read_island,
    run_program,
)


def test_rectangle_centre_and_reach():
    rect = Rectangle("R", [(0, 0), (4, 0), (4, 4), (0, 4)])
    assert rect.centre == (2, 2)
    assert rect.max_dist == math.sqrt(8)


def test_rectangle_centre_truncates_toward_zero():
    rect = Rectangle("R", [(-3, -3), (0, -3), (0, 0), (-3, 0)])
    assert rect.centre == (-1, -1)


def test_triangle_reach_is_farthest_vertex():
    tri = Triangle("T", [(0, 0), (3, 0), (0, 3)])
    assert tri.centre == (1, 1)
    assert tri.max_dist == math.sqrt(5)


def test_wrong_vertex_count_rejected():
    with pytest.raises(ValueError):
        Triangle("T", [(0, 0), (1, 1)])


def test_circle_distance():
    a = Circle("A", (0, 0), 1)
    b = Circle("B", (3, 4), 1)
    assert a.distance_to(b) == 5.0
    assert b.distance_to(a) == a.distance_to(b)


def test_read_island_consumes_only_its_fields():
    tokens = iter(["A", "0", "0", "2", "rest"])
    island = read_island("CIRCLE", tokens)
    assert island.island_id == "A"
    assert island.max_dist == 2
    assert next(tokens) == "rest"


def test_read_island_rectangle():
    island = read_island("RECTANGLE", "R 0 0 4 0 4 4 0 4".split())
    assert isinstance(island, Rectangle)
    assert island.centre == (2, 2)


def test_read_island_short_input():
    with pytest.raises(ValueError):
        read_island("TRIANGLE", ["T", "0", "0"])


def test_chain_puts_middle_island_in_middle():
    islands = [Circle("A", (0, 0), 1), Circle("B", (2, 0), 1), Circle("C", (4, 0), 1)]
    path = Sea(islands).longest_path()
    assert len(path) == 3
    assert path[1].island_id == "B"
    assert {i.island_id for i in path} == {"A", "B", "C"}


def test_path_steps_are_neighbours():
    islands = [
        Circle("A", (0, 0), 2),
        Rectangle("R", [(3, -1), (5, -1), (5, 1), (3, 1)]),
        Triangle("T", [(6, 0), (8, 0), (7, 2)]),
        Circle("Far", (100, 100), 1),
    ]
    sea = Sea(islands)
    path = sea.longest_path()
    assert len(path) == len({id(i) for i in path})
    for a, b in zip(path, path[1:]):
        assert a.distance_to(b) <= a.max_dist + b.max_dist
    assert all(i.island_id != "Far" for i in path) or len(path) == 1


def test_empty_sea():
    assert Sea([]).longest_path() == []


def test_run_program_all_connected():
    text = "2\nCIRCLE A 0 0 2\nCIRCLE B 3 0 2\n"
    assert run_program(text) == "YES\nA B \n"


def test_run_program_disconnected():
    text = "3 CIRCLE A 0 0 2 CIRCLE B 3 0 2 CIRCLE C 50 50 1"
    lines = run_program(text).splitlines()
    assert lines[0] == "NO"
    assert lines[1] == "2"
    assert set(lines[2].split()) == {"A", "B"}