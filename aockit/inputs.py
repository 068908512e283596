"""Readers for puzzle input."""

import inspect
import os
from collections.abc import Callable, Iterator
from typing import IO, Optional, TypeVar

from aockit.strconv import must_atoi

T = TypeVar("T")

_CHUNK_SIZE = 64 * 1024


def input_file(path: Optional[str] = None) -> IO[str]:
    """Open the given input file, or input.txt beside the calling module when no path is given."""
    if not path:
        caller = inspect.stack()[1].filename
        if not caller or caller.startswith("<"):
            raise RuntimeError("failed to determine input path, provide it explicitly instead")
        path = os.path.join(os.path.dirname(os.path.abspath(caller)), "input.txt")
    return open(path, encoding="utf-8")


def raw(stream: IO[str]) -> str:
    """Return the entire contents of the stream."""
    return stream.read()


def lines(stream: IO[str]) -> Iterator[str]:
    """Yield each line of the stream without its line terminator."""
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def sections_of(stream: IO[str], delim: str) -> Iterator[str]:
    """Yield the non-empty pieces of the stream separated by delim."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    buffer = ""
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        buffer += chunk
        while (index := buffer.find(delim)) >= 0:
            token = buffer[:index]
            buffer = buffer[index + len(delim):]
            if token:
                yield token
    if buffer:
        yield buffer


def sections(stream: IO[str]) -> Iterator[str]:
    """Yield blank-line separated blocks of the stream, trimmed of surrounding whitespace."""
    for section in sections_of(stream, "\n\n"):
        yield section.strip()


def ints(stream: IO[str]) -> Iterator[int]:
    """Yield each line of the stream parsed as an integer."""
    for line in lines(stream):
        yield must_atoi(line)


def fields(line: str, via: Callable[[str], T]) -> Iterator[T]:
    """Yield each whitespace-separated field of line converted with via."""
    for field in line.split():
        yield via(field)