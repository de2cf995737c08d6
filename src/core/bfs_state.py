from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

import numpy as np
from numpy.typing import NDArray


# "бесконечное" расстояние для недостигнутых вершин
INFINITY = np.iinfo(np.int64).max
# нет предшественника (источник или недостигнутая вершина)
NO_VERTEX = -1


@dataclass(eq=False)
class BFSState:
    """
    Переиспользуемый буфер одного прогона BFS.

    Хранит:
        distance     : NDArray[int64]
            distance[v] — длина кратчайшего пути от ближайшего источника,
            INFINITY если v не достигнута.

        predecessor  : NDArray[int64]
            Вершина перед v на этом пути, NO_VERTEX для источников
            и недостигнутых вершин.

        visited      : NDArray[bool]
            Достигнута ли v в этом прогоне.

        touched      : list[int]
            Индексы, изменённые с момента последней очистки. Благодаря
            им clear() стоит O(|touched|), а не O(V).

    Инвариант: visited[v] <=> distance[v] != INFINITY.
    """

    size: int
    distance: NDArray[np.int64] = field(init=False, repr=False)
    predecessor: NDArray[np.int64] = field(init=False, repr=False)
    visited: NDArray[np.bool_] = field(init=False, repr=False)
    touched: List[int] = field(init=False, repr=False)

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"size должен быть >= 0, получено {self.size}")
        self.distance = np.full(self.size, INFINITY, dtype=np.int64)
        self.predecessor = np.full(self.size, NO_VERTEX, dtype=np.int64)
        self.visited = np.zeros(self.size, dtype=np.bool_)
        self.touched = []

    def mark(self, v: int, dist: int, pred: int = NO_VERTEX) -> None:
        """Отметить v достигнутой на расстоянии dist через pred."""
        self.visited[v] = True
        self.distance[v] = dist
        self.predecessor[v] = pred
        self.touched.append(v)

    def clear(self) -> int:
        """
        Вернуть буфер в исходное состояние, сбросив только touched-индексы.
        Возвращает число сброшенных индексов.
        """
        n = len(self.touched)
        if n:
            idx = np.fromiter(self.touched, dtype=np.intp, count=n)
            self.visited[idx] = False
            self.distance[idx] = INFINITY
            self.predecessor[idx] = NO_VERTEX
            self.touched.clear()
        return n

    def is_dirty(self) -> bool:
        return bool(self.touched)

    def is_pristine(self) -> bool:
        """Полная O(V)-проверка чистоты (для тестов и отладки)."""
        return (
            not self.touched
            and not self.visited.any()
            and bool((self.distance == INFINITY).all())
            and bool((self.predecessor == NO_VERTEX).all())
        )

    def __repr__(self) -> str:
        return f"BFSState(size={self.size}, touched={len(self.touched)})"
