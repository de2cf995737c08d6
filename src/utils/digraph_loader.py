from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

import numpy as np

from core.graph.digraph import Digraph


COMMENT_CHAR = "#"

VertexSide = Union[int, List[int]]


def parse_digraph(text: str) -> Digraph:
    """
    Parse a digraph from the whitespace-separated text format:

        V
        E
        v1 w1
        v2 w2
        ...

    Exactly E edge pairs must follow the two header integers.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("Digraph input must start with vertex and edge counts")
    try:
        values = [int(t) for t in tokens]
    except ValueError as exc:
        raise ValueError(f"Digraph input contains a non-integer token: {exc}") from None

    num_vertices, num_edges = values[0], values[1]
    if num_vertices < 0 or num_edges < 0:
        raise ValueError("Vertex and edge counts must be non-negative")
    body = values[2:]
    if len(body) != 2 * num_edges:
        raise ValueError(
            f"Expected {num_edges} edges ({2 * num_edges} integers), got {len(body)} integers"
        )

    edges = list(zip(body[0::2], body[1::2]))
    try:
        return Digraph(num_vertices, edges)
    except IndexError as exc:
        raise ValueError(f"Edge endpoint out of range: {exc}") from None


def read_digraph(path: str | Path) -> Digraph:
    """Load a digraph file in the format accepted by parse_digraph()."""
    return parse_digraph(Path(path).read_text())


def parse_vertex_side(token: str) -> VertexSide:
    """
    Parse one side of a query.

        "3"      -> 3
        "1,4,7"  -> [1, 4, 7]
    """
    parts = [p for p in token.split(",") if p]
    if not parts:
        raise ValueError(f"Empty vertex side: {token!r}")
    try:
        vertices = [int(p) for p in parts]
    except ValueError:
        raise ValueError(f"Vertex side must be comma-separated integers, got {token!r}") from None
    if len(vertices) == 1 and "," not in token:
        return vertices[0]
    return vertices


def read_queries(lines: Iterable[str]) -> Iterator[Tuple[VertexSide, VertexSide]]:
    """
    Yield (v_side, w_side) pairs from query lines.

    Each non-blank line that does not start with '#' holds two fields
    separated by whitespace; a field is a vertex or a comma-separated set.
    """
    for lineno, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_CHAR):
            continue
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"Line {lineno}: expected two vertex sides, got {len(fields)} fields")
        yield parse_vertex_side(fields[0]), parse_vertex_side(fields[1])


def generate_random_dag(
    num_vertices: int,
    extra_edges: int,
    *,
    seed: int = 0,
) -> Digraph:
    """
    Generate a rooted DAG for tests and benchmarks.

    Vertex 0 is the root. Every other vertex gets one edge to a random
    lower-indexed vertex (so everything reaches the root), then
    `extra_edges` more edges are added, also pointing downwards in index.

    Args:
        num_vertices: number of vertices, must be > 0
        extra_edges: number of additional edges on top of the spanning tree
        seed: RNG seed for reproducibility
    """
    if num_vertices <= 0:
        raise ValueError("num_vertices must be > 0")
    if extra_edges < 0:
        raise ValueError("extra_edges must be >= 0")

    rng = np.random.default_rng(seed)
    edges: List[Tuple[int, int]] = []
    for v in range(1, num_vertices):
        edges.append((v, int(rng.integers(0, v))))

    if num_vertices > 1:
        for _ in range(extra_edges):
            v = int(rng.integers(1, num_vertices))
            edges.append((v, int(rng.integers(0, v))))
    return Digraph(num_vertices, edges)


def generate_query_pairs(
    num_vertices: int,
    count: int,
    *,
    seed: int = 0,
    max_side: int = 1,
) -> List[Tuple[VertexSide, VertexSide]]:
    """
    Sample `count` random queries. With max_side == 1 every side is a
    single vertex; otherwise each side is a list of 1..max_side distinct vertices.
    """
    if num_vertices <= 0:
        raise ValueError("num_vertices must be > 0")
    if max_side <= 0:
        raise ValueError("max_side must be > 0")

    rng = np.random.default_rng(seed)
    upper = min(max_side, num_vertices)

    def side() -> VertexSide:
        if upper == 1:
            return int(rng.integers(0, num_vertices))
        k = int(rng.integers(1, upper + 1))
        return [int(x) for x in rng.choice(num_vertices, size=k, replace=False)]

    return [(side(), side()) for _ in range(count)]
