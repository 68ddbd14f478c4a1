"""Distance-vector routing tables computed from a link cost matrix."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import product


@dataclass(frozen=True)
class Route:
    """One entry of a router's table; node indices are zero-based."""

    destination: int
    next_hop: int
    distance: int


def compute_routes(costs: Sequence[Sequence[int]]) -> list[list[Route]]:
    """Exchange distance vectors until no table changes; the diagonal counts as zero."""
    matrix = [list(row) for row in costs]
    size = len(matrix)
    for index, row in enumerate(matrix):
        if len(row) != size:
            raise ValueError("cost matrix must be square")
        if min(row, default=0) < 0:
            raise ValueError("link costs must not be negative")
        row[index] = 0

    distance = [row[:] for row in matrix]
    via = [list(range(size)) for _ in matrix]
    changed = True
    while changed:
        changed = False
        for i, j, k in product(range(size), repeat=3):
            if distance[i][j] > matrix[i][k] + distance[k][j]:
                distance[i][j] = distance[i][k] + distance[k][j]
                via[i][j] = k
                changed = True
    return [[Route(j, via[i][j], distance[i][j]) for j in range(size)] for i in range(size)]


def format_routes(routes: Iterable[Iterable[Route]]) -> str:
    """Render routing tables with one-based node numbers."""
    parts = []
    for number, table in enumerate(routes, start=1):
        parts.append(f"\n\nFor router {number}\n")
        parts.extend(
            f"\tnode {r.destination + 1} via {r.next_hop + 1} Distance {r.distance}"
            for r in table
        )
    parts.append("\n\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a node count and cost matrix from standard input and print the tables."""
    tokens = iter(sys.stdin.read().split())
    try:
        print("\nEnter the number of nodes: ", end="", flush=True)
        nodes = int(next(tokens))
        if nodes < 0:
            raise ValueError("number of nodes must not be negative")
        print("\nEnter the cost matrix:\n", end="", flush=True)
        costs = [[int(next(tokens)) for _ in range(nodes)] for _ in range(nodes)]
        routes = compute_routes(costs)
    except StopIteration:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(format_routes(routes), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())