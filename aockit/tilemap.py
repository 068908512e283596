"""Fixed-size grids of tiles with neighbour walking and A* path finding."""

import heapq
import itertools
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import IO, Dict, Generic, List, Optional, Set, Tuple, TypeVar

from aockit.gmath import manhattan_distance
from aockit.inputs import lines
from aockit.strconv import must_atoi

T = TypeVar("T")

_CARDINALS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def to_runes(value: str) -> str:
    """Keep a character as a plain string."""
    return str(value)


def to_ints(value: str) -> int:
    """Convert a single digit character to an int."""
    return must_atoi(value)


@dataclass(frozen=True)
class Point:
    """A location in a tile map."""

    x: int
    y: int


@dataclass(frozen=True)
class Container(Generic[T]):
    """A tile's value together with its position and the map it lives in.

    By default neighbours are the cardinal tiles in the map, every step costs 1
    and the estimate between two tiles is their Manhattan distance. The map's
    neighbor_func, cost_func and estimate_func override these.
    """

    value: Optional[T]
    position: Point
    tile_map: "TileMap[T]" = field(repr=False, compare=False)

    def location(self) -> Tuple[int, int]:
        """Return the (x, y) coordinates of this tile."""
        return self.position.x, self.position.y

    def path_neighbors(self) -> List["Container[T]"]:
        """Return the tiles reachable in one step from this one."""
        tile_map = self.tile_map
        if tile_map.neighbor_func is not None:
            return list(tile_map.neighbor_func(self))
        result = []
        for _, pos in tile_map.cardinal_neighbors(self.position.x, self.position.y):
            neighbor = tile_map.container_at(pos.x, pos.y)
            if neighbor is not None:
                result.append(neighbor)
        return result

    def path_neighbor_cost(self, to: "Container[T]") -> float:
        """Return the cost of stepping from this tile to a neighbour."""
        if self.tile_map.cost_func is not None:
            return self.tile_map.cost_func(self, to)
        return 1.0

    def path_estimated_cost(self, to: "Container[T]") -> float:
        """Return the estimated cost of travelling from this tile to another."""
        if self.tile_map.estimate_func is not None:
            return self.tile_map.estimate_func(self, to)
        return float(
            manhattan_distance(self.position.x, self.position.y, to.position.x, to.position.y)
        )


class TileMap(Generic[T]):
    """A width x height grid of tiles; (0, 0) is the top-left corner."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid map size: {width}x{height}")
        self._width = width
        self._height = height
        self._tiles: List[Container[T]] = [
            Container(None, Point(i % width, i // width), self) for i in range(width * height)
        ]
        self.neighbor_func: Optional[Callable[[Container[T]], List[Container[T]]]] = None
        self.cost_func: Optional[Callable[[Container[T], Container[T]], float]] = None
        self.estimate_func: Optional[Callable[[Container[T], Container[T]], float]] = None

    @classmethod
    def from_input(
        cls, stream: IO[str], convert: Callable[[str], T] = to_runes
    ) -> "TileMap[T]":
        """Build a map with one row per line and one column per character, converted by convert."""
        rows = list(lines(stream))
        if not rows:
            raise ValueError("cannot build a tile map from empty input")
        tile_map = cls(len(rows[0]), len(rows))
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                tile_map.set_tile(x, y, convert(char))
        return tile_map

    @classmethod
    def of(cls, width: int, height: int) -> "TileMap[T]":
        """Create an empty map of the given size."""
        return cls(width, height)

    def size(self) -> Tuple[int, int]:
        """Return (width, height)."""
        return self._width, self._height

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set_tile(self, x: int, y: int, tile: T) -> None:
        """Store tile at (x, y), raising IndexError outside the map."""
        if not self._in_bounds(x, y):
            raise IndexError(
                f"out of bounds tile access: [{x}, {y}] is not within the "
                f"{self._width}x{self._height} map"
            )
        self._tiles[x + self._width * y] = Container(tile, Point(x, y), self)

    def container_at(self, x: int, y: int) -> Optional[Container[T]]:
        """Return the container at (x, y), or None outside the map."""
        if not self._in_bounds(x, y):
            return None
        return self._tiles[x + self._width * y]

    def tile_at(self, x: int, y: int) -> Optional[T]:
        """Return the value at (x, y), or None outside the map."""
        container = self.container_at(x, y)
        return None if container is None else container.value

    def first_container_with(self, value: T) -> Optional[Container[T]]:
        """Return the first container, in row order, holding value, or None."""
        return next((c for c in self._tiles if c.value == value), None)

    def all_containers_with(self, value: T) -> List[Container[T]]:
        """Return every container, in row order, holding value."""
        return [c for c in self._tiles if c.value == value]

    def values(self) -> Iterator[Tuple[Optional[T], Point]]:
        """Yield (value, point) for every tile, row by row from (0, 0)."""
        for container in list(self._tiles):
            yield container.value, container.position

    def _offsets(self, x: int, y: int, offsets) -> Iterator[Tuple[Optional[T], Point]]:
        for dx, dy in offsets:
            nx, ny = x + dx, y + dy
            if self._in_bounds(nx, ny):
                yield self._tiles[nx + self._width * ny].value, Point(nx, ny)

    def cardinal_neighbors(self, x: int, y: int) -> Iterator[Tuple[Optional[T], Point]]:
        """Yield (value, point) for the tiles west, east, north and south of (x, y) in the map."""
        yield from self._offsets(x, y, _CARDINALS)

    def all_neighbors(self, x: int, y: int) -> Iterator[Tuple[Optional[T], Point]]:
        """Yield the cardinal neighbours of (x, y), then its diagonal neighbours."""
        yield from self._offsets(x, y, _CARDINALS)
        yield from self._offsets(x, y, _DIAGONALS)

    def path_between(
        self, start_x: int, start_y: int, end_x: int, end_y: int
    ) -> Optional[Tuple[List[Container[T]], float]]:
        """Find the cheapest path with A*.

        Returns (path, cost) with the path ordered from the end tile back to
        the start tile, or None when either end is outside the map or no path
        exists.
        """
        start = self.container_at(start_x, start_y)
        end = self.container_at(end_x, end_y)
        if start is None or end is None:
            return None
        return _a_star(start, end)


def _a_star(
    start: Container[T], goal: Container[T]
) -> Optional[Tuple[List[Container[T]], float]]:
    goal_key = goal.location()
    start_key = start.location()
    nodes: Dict[Tuple[int, int], Container[T]] = {start_key: start}
    costs: Dict[Tuple[int, int], float] = {start_key: 0.0}
    parents: Dict[Tuple[int, int], Optional[Tuple[int, int]]] = {start_key: None}
    closed: Set[Tuple[int, int]] = set()
    counter = itertools.count()
    frontier = [(0.0, next(counter), 0.0, start_key)]

    while frontier:
        _, _, cost, key = heapq.heappop(frontier)
        if key in closed or cost > costs[key]:
            continue
        closed.add(key)
        current = nodes[key]

        if key == goal_key:
            path = []
            step: Optional[Tuple[int, int]] = key
            while step is not None:
                path.append(nodes[step])
                step = parents[step]
            return path, costs[key]

        for neighbor in current.path_neighbors():
            neighbor_key = neighbor.location()
            new_cost = costs[key] + current.path_neighbor_cost(neighbor)
            if neighbor_key in costs and new_cost >= costs[neighbor_key]:
                continue
            costs[neighbor_key] = new_cost
            parents[neighbor_key] = key
            nodes[neighbor_key] = neighbor
            closed.discard(neighbor_key)
            rank = new_cost + neighbor.path_estimated_cost(goal)
            heapq.heappush(frontier, (rank, next(counter), new_cost, neighbor_key))

    return None