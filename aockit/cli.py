"""Command line entry point for running puzzle solutions."""

import argparse
import os
import sys
import time
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from types import ModuleType
from typing import IO, Callable, Dict, List, Optional, Sequence, Tuple

from aockit import example
from aockit.inputs import input_file


@dataclass(frozen=True)
class _Part:
    short: str
    solve: Callable[[IO[str]], int]


@dataclass(frozen=True)
class _Day:
    name: str
    short: str
    module: ModuleType
    parts: Dict[str, _Part]
    aliases: Tuple[str, ...] = field(default=())

    def default_input(self) -> str:
        return os.path.join(os.path.dirname(os.path.abspath(self.module.__file__)), "input.txt")


_DAYS = (
    _Day(
        name="example",
        short="Problems for Day Example",
        module=example,
        parts={"a": _Part("Example Day, Problem A", example.part_a)},
    ),
)

_FuncKey = Tuple[str, int, str]


class _Profiler:
    """Collects cumulative wall time and call counts per function."""

    def __init__(self) -> None:
        self._stack: List[Tuple[_FuncKey, float]] = []
        self.totals: Dict[_FuncKey, float] = defaultdict(float)
        self.calls: Counter = Counter()

    def _hook(self, frame, event, arg) -> None:
        if event == "call":
            code = frame.f_code
            key = (code.co_filename, code.co_firstlineno, code.co_name)
            self._stack.append((key, time.perf_counter()))
        elif event == "c_call":
            name = getattr(arg, "__qualname__", None) or repr(arg)
            self._stack.append((("~", 0, name), time.perf_counter()))
        elif event in ("return", "c_return", "c_exception") and self._stack:
            key, started = self._stack.pop()
            self.totals[key] += time.perf_counter() - started
            self.calls[key] += 1

    def enable(self) -> None:
        sys.setprofile(self._hook)

    def disable(self) -> None:
        sys.setprofile(None)

    def report(self, stream: IO[str], limit: int = 20) -> None:
        ranked = sorted(self.totals.items(), key=lambda item: item[1], reverse=True)
        print(f"{'ncalls':>10} {'cumtime':>12}  function", file=stream)
        for (filename, line, name), total in ranked[:limit]:
            where = name if filename == "~" else f"{filename}:{line}({name})"
            print(f"{self.calls[(filename, line, name)]:>10} {total:>12.6f}  {where}", file=stream)


def _add_shared_flags(parser: argparse.ArgumentParser, root: bool) -> None:
    default_input = None if root else argparse.SUPPRESS
    default_profile = False if root else argparse.SUPPRESS
    parser.add_argument(
        "-i",
        "--input",
        default=default_input,
        help="Input file to read. If not specified, assumes input.txt beside the running challenge",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        default=default_profile,
        help="Profile implementation performance",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per day and per part."""
    parser = argparse.ArgumentParser(
        prog="aockit",
        description="Advent of Code solutions",
        epilog="example: aockit example a -i ./input.txt",
    )
    _add_shared_flags(parser, root=True)
    parser.set_defaults(command_parser=parser, solver=None, day=None)

    days = parser.add_subparsers(title="days", metavar="DAY")
    for day in _DAYS:
        day_parser = days.add_parser(
            day.name, aliases=list(day.aliases), help=day.short, description=day.short
        )
        _add_shared_flags(day_parser, root=False)
        day_parser.set_defaults(command_parser=day_parser, day=day)
        parts = day_parser.add_subparsers(title="parts", metavar="PART")
        for name, part in day.parts.items():
            part_parser = parts.add_parser(name, help=part.short, description=part.short)
            _add_shared_flags(part_parser, root=False)
            part_parser.set_defaults(command_parser=part_parser, solver=part.solve)
    return parser


def _format_duration(seconds: float) -> str:
    for limit, scale, unit in ((1e-6, 1e9, "ns"), (1e-3, 1e6, "µs"), (1.0, 1e3, "ms")):
        if seconds < limit:
            value = seconds * scale
            break
    else:
        value, unit = seconds, "s"
    return f"{value:.3f}".rstrip("0").rstrip(".") + unit


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the selected solution and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.solver is None:
        args.command_parser.print_help()
        return 0

    path = args.input or args.day.default_input()
    profiler = _Profiler() if args.profile else None
    start = time.perf_counter()
    try:
        if profiler is not None:
            profiler.enable()
        try:
            with input_file(path) as stream:
                answer = args.solver(stream)
        finally:
            if profiler is not None:
                profiler.disable()
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 1

    print(f"Answer: {answer}")
    if profiler is not None:
        profiler.report(sys.stderr, 20)
    print("Took", _format_duration(time.perf_counter() - start))
    return 0


if __name__ == "__main__":
    sys.exit(main())