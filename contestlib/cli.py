"""Command line entry point: min-cut and Dijkstra problems read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from contestlib.flows import min_cut
from contestlib.shortest_paths import dijkstra


class _Tokens:
    """Whitespace-separated integers read one at a time."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def next_int(self) -> int:
        try:
            token = next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        return int(token)


def _solve_min_cut(tokens: _Tokens) -> str:
    n = tokens.next_int()
    m = tokens.next_int()
    edges = [
        (tokens.next_int(), tokens.next_int(), tokens.next_int()) for _ in range(m)
    ]
    capacity, ids = min_cut(n, edges)
    return f"{len(ids)} {capacity}\n{' '.join(map(str, ids))}\n"


def _solve_dijkstra(tokens: _Tokens) -> str:
    lines = []
    for _ in range(tokens.next_int()):
        vertices = tokens.next_int()
        edge_count = tokens.next_int()
        edges = [
            (tokens.next_int(), tokens.next_int(), tokens.next_int())
            for _ in range(edge_count)
        ]
        source = tokens.next_int()
        distances = dijkstra(vertices, edges, source)
        lines.append("".join(f"{distance} " for distance in distances) + "\n")
    return "".join(lines)


_SOLVERS = {
    "min-cut": _solve_min_cut,
    "dijkstra": _solve_dijkstra,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem from standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="contestlib", description="Solve a graph problem read from standard input."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("min-cut", help="minimum cut between vertex 1 and vertex n")
    commands.add_parser("dijkstra", help="shortest distances for several graphs")
    args = parser.parse_args(argv)

    try:
        output = _SOLVERS[args.command](_Tokens(sys.stdin.read()))
    except ValueError as exc:
        print(f"contestlib: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())