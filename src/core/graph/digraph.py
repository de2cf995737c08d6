from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from core.graph.base import GraphBase


class Digraph(GraphBase):
    """
    Неизменяемый ориентированный граф на списках смежности.

    Вершины — плотные целые 0..V-1. Рёбра фиксируются в конструкторе и
    больше не меняются, поэтому один экземпляр можно безопасно разделять
    между несколькими SAP-движками без защитного копирования.

    Ацикличность и единственность корня здесь НЕ проверяются: движку
    нужна только семантика достижимости.
    """

    def __init__(self, num_vertices: int, edges: Iterable[Tuple[int, int]] = ()):
        if num_vertices < 0:
            raise ValueError(f"num_vertices должно быть >= 0, получено {num_vertices}")
        self.V = num_vertices

        adj: List[List[int]] = [[] for _ in range(num_vertices)]
        indeg = [0] * num_vertices
        e = 0
        for v, w in edges:
            self._check(v)
            self._check(w)
            adj[v].append(w)
            indeg[w] += 1
            e += 1

        self.E = e
        # кортежи: снаружи список соседей не поменять
        self._adj: Tuple[Tuple[int, ...], ...] = tuple(tuple(a) for a in adj)
        self._indegree = tuple(indeg)

    # ------------------------------------------------------------
    # Альтернативные конструкторы
    # ------------------------------------------------------------
    @classmethod
    def from_adjacency(
        cls,
        adjacency_list: Dict[int, List[int]],
        num_vertices: Optional[int] = None,
    ) -> Digraph:
        """
        Построить граф из словаря {v: [w, ...]}.
        Если num_vertices не задан, берётся len(adjacency_list).
        """
        if num_vertices is None:
            num_vertices = len(adjacency_list)
        edges = [(v, w) for v in sorted(adjacency_list) for w in adjacency_list[v]]
        return cls(num_vertices, edges)

    @classmethod
    def from_graph(cls, graph: GraphBase) -> Digraph:
        """Снимок произвольного GraphBase (копия списков смежности)."""
        n = graph.num_vertices()
        return cls(n, ((v, w) for v in range(n) for w in graph.neighbors(v)))

    # ------------------------------------------------------------
    # GraphBase
    # ------------------------------------------------------------
    def neighbors(self, v: int) -> Tuple[int, ...]:
        self._check(v)
        return self._adj[v]

    def num_vertices(self) -> int:
        return self.V

    # ------------------------------------------------------------
    # Прочее
    # ------------------------------------------------------------
    def num_edges(self) -> int:
        return self.E

    def edges(self) -> Iterator[Tuple[int, int]]:
        for v in range(self.V):
            for w in self._adj[v]:
                yield v, w

    def outdegree(self, v: int) -> int:
        self._check(v)
        return len(self._adj[v])

    def indegree(self, v: int) -> int:
        self._check(v)
        return self._indegree[v]

    def reverse(self) -> Digraph:
        """Граф с развёрнутыми рёбрами."""
        return Digraph(self.V, ((w, v) for v, w in self.edges()))

    def copy(self) -> Digraph:
        return Digraph(self.V, self.edges())

    def _check(self, v: int) -> None:
        if not 0 <= v < self.V:
            raise IndexError(f"вершина {v} вне диапазона [0, {self.V})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Digraph):
            return NotImplemented
        return self.V == other.V and self._adj == other._adj

    def __hash__(self) -> int:
        return hash((self.V, self._adj))

    def __repr__(self) -> str:
        return f"Digraph(V={self.V}, E={self.E})"
