"""Small helpers for consuming iterables."""

from collections.abc import Iterable, Iterator
from typing import Any, Optional, Tuple, TypeVar

T = TypeVar("T")


def first(iterable: Iterable[T]) -> Tuple[Optional[T], bool]:
    """Return the first item and True, or (None, False) when the iterable is empty."""
    for item in iterable:
        return item, True
    return None, False


def must_pull(iterator: Iterator[T]) -> T:
    """Return the next item of the iterator, raising ValueError if it is exhausted."""
    sentinel: Any = object()
    value = next(iterator, sentinel)
    if value is sentinel:
        raise ValueError("expected value but iterator empty")
    return value