"""Toolkit for puzzle input parsing, tile maps with A* path finding, math helpers and a solution runner."""

__version__ = "0.1.0"