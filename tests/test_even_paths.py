import pytest

from labkit.even_paths import run_program, shortest_even_path


def test_two_corridor_path():
    result = shortest_even_path("abc", [("a", "b", 5), ("b", "c", 7)], "a", "c")
    assert result == 12


def test_single_corridor_has_no_even_path():
    assert shortest_even_path("ab", [("a", "b", 5)], "a", "b") is None


def test_source_equals_dest_is_zero():
    assert shortest_even_path("ab", [("a", "b", 5)], "a", "a") == 0


def test_odd_cycle_goes_around():
    corridors = [("a", "b", 1), ("b", "c", 2), ("c", "a", 4)]
    # The only even route a->b avoids the direct corridor.
    assert shortest_even_path("abc", corridors, "a", "b") == 6


def test_symmetric():
    corridors = [("a", "b", 3), ("b", "c", 4), ("c", "d", 2), ("a", "d", 9), ("b", "d", 1)]
    rooms = "abcd"
    for x in rooms:
        for y in rooms:
            assert shortest_even_path(rooms, corridors, x, y) == shortest_even_path(
                rooms, corridors, y, x
            )


def test_repeated_corridor_keeps_last_time():
    with_repeat = [("a", "b", 10), ("a", "b", 1), ("b", "c", 1)]
    plain = [("a", "b", 1), ("b", "c", 1)]
    assert shortest_even_path("abc", with_repeat, "a", "c") == shortest_even_path(
        "abc", plain, "a", "c"
    )


def test_unknown_room_raises():
    with pytest.raises(KeyError):
        shortest_even_path("ab", [("a", "z", 1)], "a", "b")
    with pytest.raises(KeyError):
        shortest_even_path("ab", [("a", "b", 1)], "q", "b")


def test_run_program_prints_answer():
    text = "3 2\na b c\na b 5\nb c 7\na c\n"
    assert run_program(text) == f"{shortest_even_path('abc', [('a','b',5),('b','c',7)], 'a', 'c')}\n"


def test_run_program_unreachable_prints_minus_one():
    assert run_program("2 1\na b\na b 4\na b\n") == "-1\n"