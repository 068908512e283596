# aockit

A small toolkit for solving daily programming puzzles, plus a command line
runner for the solutions it ships with.

## Modules

- `aockit.inputs`
  - `input_file(path)` opens an input file as text. Called without a path, it
    opens `input.txt` in the directory of the calling module.
  - `raw(stream)` returns the whole stream as one string.
  - `lines(stream)` yields lines with `\n` or `\r\n` stripped.
  - `ints(stream)` yields each line parsed as an integer. A bad line raises
    `ValueError`.
  - `sections_of(stream, delim)` yields the pieces between occurrences of
    `delim`. Empty pieces are skipped. An empty delimiter raises `ValueError`.
  - `sections(stream)` splits on blank lines (`"\n\n"`) and strips whitespace
    from each block.
  - `fields(line, via)` splits a line on whitespace and yields `via(field)`
    for each field.
- `aockit.tilemap`
  - `TileMap` is a fixed-size grid with `(0, 0)` at the top-left.
    - Build one with `TileMap.of(width, height)`, which leaves every tile
      `None`.
    - Or build one with `TileMap.from_input(stream, convert)`: one row per
      line, one column per character, each character passed through
      `convert`. The default converter is `to_runes`, which keeps the
      character; `to_ints` turns a digit into an `int`.
    - `size()` returns `(width, height)`.
    - `set_tile(x, y, tile)` raises `IndexError` outside the map.
    - `tile_at(x, y)` and `container_at(x, y)` return `None` outside the map.
    - `first_container_with(value)` and `all_containers_with(value)` search
      in row order.
    - `values()` yields `(value, Point)` for every tile.
    - `cardinal_neighbors(x, y)` and `all_neighbors(x, y)` yield
      `(value, Point)` for the neighbours that lie inside the map.
      `all_neighbors` gives the cardinal ones first, then the diagonals.
    - `path_between(start_x, start_y, end_x, end_y)` runs A*. It returns
      `(path, cost)`, with the path listed from the end tile back to the
      start tile. It returns `None` if either end is outside the map or no
      path exists.
    - By default a step goes to a cardinal neighbour, costs 1, and the
      estimate is the Manhattan distance. Set `neighbor_func`, `cost_func`
      or `estimate_func` on the map to change this.
  - `Container` holds a tile's `value` and `position` (a `Point` with `x`
    and `y`).
- `aockit.gmath`
  - `absolute`, `minimum`, `maximum`, `sign`.
  - `clamp(low, n, high)` raises `ValueError` when `low > high`.
  - `manhattan_distance(x1, y1, x2, y2)`.
  - `gcd(a, b)`.
  - `lcm(*values)` needs at least two values.
- `aockit.iterutil`
  - `first(iterable)` returns `(item, True)`, or `(None, False)` when the
    iterable is empty.
  - `must_pull(iterator)` returns the next item, or raises `ValueError` when
    the iterator is exhausted.
- `aockit.strconv`
  - `must_atoi(text)` strictly parses a signed 64-bit decimal integer.
  - `must_atoui(text)` strictly parses an unsigned 64-bit decimal integer.
  - Both raise `ValueError` on bad input.
- `aockit.example`
  - `part_a(stream)` returns the first integer line of the input, or 0 if
    there is none.

## Example

```python
import io

from aockit.inputs import ints, sections
from aockit.tilemap import TileMap

print(list(sections(io.StringIO("a\nb\n\nc\nd"))))   # ['a\nb', 'c\nd']
print(list(ints(io.StringIO("1\n2\n3"))))           # [1, 2, 3]

grid = TileMap.from_input(io.StringIO("S..\n.#.\n..E"))
start = grid.first_container_with("S")
end = grid.first_container_with("E")
result = grid.path_between(*start.location(), *end.location())
if result is not None:
    path, cost = result
    print(cost)                                      # 4.0
```

## Command line

Run a solution against an input file:

```
aockit example a -i input.txt
```

The runner prints `Answer: <n>` and then how long the run took.

- `--profile` prints the 20 functions with the most cumulative time to
  standard error.
- Without `-i`, it reads `input.txt` from the directory holding the
  solution's module.
- If the input cannot be read or parsed, it prints the error to standard
  error and exits with status 1.
- With no part given, it prints help.

## What it does not do

The runner ships with a single solution, `example`. It does not download
puzzle inputs, and it does not create files for new days.

## Tests

```
pip install -e .[test]
pytest
```