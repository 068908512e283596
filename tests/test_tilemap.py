import io

import pytest

from aockit.gmath import manhattan_distance
from aockit.tilemap import Container, Point, TileMap, to_ints, to_runes


def _grid(text):
    return TileMap.from_input(io.StringIO(text))


def test_to_runes_identity():
    assert to_runes("x") == "x"


def test_to_ints_parses_digit():
    assert to_ints("7") == 7


def test_to_ints_rejects_non_digit():
    with pytest.raises(ValueError):
        to_ints("x")


def test_from_input_size_and_tiles():
    grid = _grid("ab\ncd\n")
    assert grid.size() == (2, 2)
    assert grid.tile_at(1, 0) == "b"
    assert grid.tile_at(0, 1) == "c"


def test_from_input_with_converter():
    grid = TileMap.from_input(io.StringIO("12\n34"), to_ints)
    assert grid.tile_at(1, 1) == 4


def test_from_input_empty_raises():
    with pytest.raises(ValueError):
        TileMap.from_input(io.StringIO(""))


def test_tile_at_out_of_bounds_is_none():
    grid = _grid("ab\ncd")
    assert grid.tile_at(-1, 0) is None
    assert grid.tile_at(2, 0) is None
    assert grid.container_at(0, 2) is None


def test_set_tile_round_trip():
    grid = TileMap.of(3, 2)
    grid.set_tile(2, 1, "z")
    assert grid.tile_at(2, 1) == "z"
    container = grid.container_at(2, 1)
    assert container.location() == (2, 1)
    assert container.position == Point(2, 1)


def test_set_tile_out_of_bounds_raises():
    grid = TileMap.of(2, 2)
    with pytest.raises(IndexError, match=r"\[2, 0\] is not within the 2x2 map"):
        grid.set_tile(2, 0, "a")


def test_values_visits_in_row_order():
    grid = _grid("ab\ncd")
    assert list(grid.values()) == [
        ("a", Point(0, 0)),
        ("b", Point(1, 0)),
        ("c", Point(0, 1)),
        ("d", Point(1, 1)),
    ]


def test_first_and_all_containers_with():
    grid = _grid("x.x\n..x")
    first = grid.first_container_with("x")
    assert first.location() == (0, 0)
    assert [c.location() for c in grid.all_containers_with("x")] == [(0, 0), (2, 0), (2, 1)]
    assert grid.first_container_with("q") is None
    assert grid.all_containers_with("q") == []


def test_cardinal_neighbors_order():
    grid = _grid("abc\ndef\nghi")
    assert list(grid.cardinal_neighbors(1, 1)) == [
        ("d", Point(0, 1)),
        ("f", Point(2, 1)),
        ("b", Point(1, 0)),
        ("h", Point(1, 2)),
    ]


def test_cardinal_neighbors_at_corner():
    grid = _grid("abc\ndef\nghi")
    assert list(grid.cardinal_neighbors(0, 0)) == [("b", Point(1, 0)), ("d", Point(0, 1))]


def test_all_neighbors_cardinals_then_diagonals():
    grid = _grid("abc\ndef\nghi")
    result = list(grid.all_neighbors(1, 1))
    assert result[:4] == list(grid.cardinal_neighbors(1, 1))
    assert result[4:] == [
        ("a", Point(0, 0)),
        ("g", Point(0, 2)),
        ("c", Point(2, 0)),
        ("i", Point(2, 2)),
    ]


def test_container_default_costs():
    grid = _grid("abc\ndef\nghi")
    a = grid.container_at(0, 0)
    i = grid.container_at(2, 2)
    assert a.path_neighbor_cost(i) == 1.0
    assert a.path_estimated_cost(i) == float(manhattan_distance(0, 0, 2, 2))
    assert {c.location() for c in a.path_neighbors()} == {(1, 0), (0, 1)}


def test_path_between_open_grid():
    grid = _grid("....\n....\n....")
    found = grid.path_between(0, 0, 3, 2)
    assert found is not None
    path, cost = found
    assert cost == manhattan_distance(0, 0, 3, 2)
    assert len(path) == cost + 1
    assert path[0].location() == (3, 2)
    assert path[-1].location() == (0, 0)
    for here, there in zip(path, path[1:]):
        hx, hy = here.location()
        tx, ty = there.location()
        assert manhattan_distance(hx, hy, tx, ty) == 1


def test_path_between_respects_neighbor_func():
    grid = _grid("...\n.#.\n...")

    def open_neighbors(container):
        x, y = container.location()
        return [
            grid.container_at(p.x, p.y)
            for value, p in grid.cardinal_neighbors(x, y)
            if value != "#"
        ]

    grid.neighbor_func = open_neighbors
    path, cost = grid.path_between(1, 0, 1, 2)
    assert all(c.value != "#" for c in path)
    assert len(path) == cost + 1
    assert cost > manhattan_distance(1, 0, 1, 2)


def test_path_between_no_path():
    grid = _grid(".#.")
    grid.neighbor_func = lambda c: [
        grid.container_at(p.x, p.y)
        for v, p in grid.cardinal_neighbors(*c.location())
        if v != "#"
    ]
    assert grid.path_between(0, 0, 2, 0) is None


def test_path_between_out_of_bounds():
    grid = _grid("..")
    assert grid.path_between(0, 0, 5, 5) is None
    assert grid.path_between(-1, 0, 1, 0) is None


def test_custom_cost_func_is_used():
    grid = _grid("...")
    grid.cost_func = lambda a, b: 2.5
    _, cost = grid.path_between(0, 0, 2, 0)
    container = grid.container_at(0, 0)
    assert cost == 2 * container.path_neighbor_cost(grid.container_at(1, 0))


def test_containers_equal_by_value_and_position():
    grid = TileMap.of(1, 1)
    grid.set_tile(0, 0, "a")
    other = TileMap.of(1, 1)
    other.set_tile(0, 0, "a")
    assert grid.container_at(0, 0) == other.container_at(0, 0)
    assert grid.container_at(0, 0) == Container("a", Point(0, 0), grid)