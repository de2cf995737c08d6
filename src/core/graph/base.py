from typing import Protocol, Iterable

class GraphBase(Protocol):
    def neighbors(self, v: int) -> Iterable[int]:
        """Вершины, в которые ведут рёбра из v (в порядке добавления)."""
        ...

    def num_vertices(self) -> int:
        """Количество вершин в графе (вершины — это 0..V-1)."""
        ...
