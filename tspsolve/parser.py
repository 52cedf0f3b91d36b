"""Command-line argument and TSPLIB coordinate file parsing."""

from __future__ import annotations

import enum
import math
import os
import re
from collections.abc import Iterator, Sequence
from pathlib import Path

from tspsolve.graph import Graph

USAGE = "Usage: tspsolve --mode [mst|held-karp|myalgo] --input <file.tsp>"

_DIMENSION = "DIMENSION"
_COORD_SECTION = "NODE_COORD_SECTION"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class Mode(enum.Enum):
    """Tour construction algorithm selected on the command line."""

    MST = "mst"
    HELD_KARP = "held-karp"
    MYALGO = "myalgo"


class UsageError(Exception):
    """Raised when the command-line arguments are invalid."""


class TspParseError(ValueError):
    """Raised when a TSP file cannot be read or is malformed."""


def parse_args(argv: Sequence[str]) -> tuple[Mode, str]:
    """Parse ``--mode`` and ``--input`` options (program name excluded)."""
    args = list(argv)
    if len(args) != 4:
        raise UsageError(USAGE)

    mode = Mode.MST
    input_path: str | None = None
    for option, value in zip(args[0::2], args[1::2]):
        if option == "--mode":
            try:
                mode = Mode(value)
            except ValueError:
                raise UsageError(f"Unknown mode: {value}") from None
        elif option == "--input":
            input_path = value
        else:
            raise UsageError(f"Unknown option: {option}")

    if input_path is None:
        raise UsageError("--input option is required")
    return mode, input_path


def _dimension(lines: list[str]) -> int:
    for line in lines:
        if line.startswith(_DIMENSION) and ":" in line:
            match = _LEADING_INT.match(line.split(":", 1)[1])
            return int(match.group(1)) if match else 0
    return 0


def _read_node(tokens: Iterator[str]) -> tuple[int, float, float]:
    fields = [next(tokens, None) for _ in range(3)]
    ident, x, y = fields
    if ident is None or x is None or y is None:
        raise TspParseError("unexpected end of node coordinate section")
    if not _INT.fullmatch(ident):
        raise TspParseError(f"invalid node id: {ident!r}")
    for value in (x, y):
        if not _FLOAT.fullmatch(value):
            raise TspParseError(f"invalid coordinate: {value!r}")
    return int(ident), float(x), float(y)


def parse_tsp_file(path: str | os.PathLike[str]) -> Graph:
    """Read a TSPLIB file with 2-D coordinates into a rounded Euclidean graph."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise TspParseError(f"cannot read {os.fspath(path)}: {exc}") from exc

    lines = text.splitlines()
    n = _dimension(lines)
    if n <= 0:
        raise TspParseError("missing or invalid DIMENSION")

    section = next(
        (i for i, line in enumerate(lines) if line.startswith(_COORD_SECTION)),
        None,
    )
    if section is None:
        raise TspParseError(f"missing {_COORD_SECTION}")

    tokens = iter(" ".join(lines[section + 1 :]).split())
    graph = Graph(n)
    for _ in range(n):
        ident, x, y = _read_node(tokens)
        if not 1 <= ident <= n:
            raise TspParseError(f"node id {ident} out of range 1..{n}")
        graph.coords[ident - 1] = (x, y)

    for u, (ux, uy) in enumerate(graph.coords):
        for v, (vx, vy) in enumerate(graph.coords):
            if u == v:
                continue
            dx = ux - vx
            dy = uy - vy
            graph.set_edge(u, v, int(math.sqrt(dx * dx + dy * dy) + 0.5))
    return graph