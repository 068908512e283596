"""Example puzzle: the answer is the first integer of the input."""

from typing import IO

from aockit.inputs import ints
from aockit.iterutil import first


def part_a(stream: IO[str]) -> int:
    """Return the first integer line of the input, or 0 if there is none."""
    value, found = first(ints(stream))
    return value if found else 0