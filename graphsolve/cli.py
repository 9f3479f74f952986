"""Command line front end reading problem input in the usual text format."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

from graphsolve.graphs import ImpossibleError, all_pairs_distances, roads_to_connect
from graphsolve.grids import labyrinth_path


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("input ended early") from None


def _roads(tokens: Iterator[str]) -> list[str]:
    n, m = _next_int(tokens), _next_int(tokens)
    edges = [(_next_int(tokens), _next_int(tokens)) for _ in range(m)]
    roads = roads_to_connect(n, edges)
    return [str(len(roads))] + [f"{a} {b}" for a, b in roads]


def _routes(tokens: Iterator[str]) -> list[str]:
    n, m, q = _next_int(tokens), _next_int(tokens), _next_int(tokens)
    edges = [(_next_int(tokens), _next_int(tokens), _next_int(tokens)) for _ in range(m)]
    dist = all_pairs_distances(n, edges)
    lines = []
    for _ in range(q):
        a, b = _next_int(tokens), _next_int(tokens)
        d = dist[a - 1][b - 1]
        lines.append("-1" if d is None else str(d))
    return lines


def _labyrinth(tokens: Iterator[str]) -> list[str]:
    n, m = _next_int(tokens), _next_int(tokens)
    chars = "".join(tokens)
    if n <= 0 or m <= 0 or len(chars) < n * m:
        raise ValueError("grid is incomplete")
    grid = [chars[i * m:(i + 1) * m] for i in range(n)]
    try:
        path = labyrinth_path(grid)
    except ImpossibleError:
        return ["NO"]
    return ["YES", str(len(path)), path]


_COMMANDS: dict[str, Callable[[Iterator[str]], list[str]]] = {
    "roads": _roads,
    "routes": _routes,
    "labyrinth": _labyrinth,
}


def main(argv: list[str] | None = None) -> int:
    """Solve one problem from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="graphsolve", description="Solve graph problems given as text."
    )
    parser.add_argument("problem", choices=sorted(_COMMANDS))
    parser.add_argument(
        "input", nargs="?", default="-", help="input file, '-' for standard input"
    )
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    try:
        lines = _COMMANDS[args.problem](iter(text.split()))
    except (ValueError, IndexError) as exc:
        parser.error(f"malformed input: {exc}")
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())