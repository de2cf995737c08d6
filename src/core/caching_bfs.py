from __future__ import annotations
from collections import deque
from typing import Iterable, List, Optional, Union

import numpy as np
from numpy.typing import NDArray

from core.bfs_state import BFSState, NO_VERTEX
from core.graph.base import GraphBase
from core.query import normalize_side


class CachingBFS:
    """
    BFS из одного или нескольких источников поверх переиспользуемого BFSState.

    Буфер можно передать снаружи (например, из ScratchCache): тогда
    массивы не переаллоцируются, а грязный буфер чистится только по
    touched-индексам. Без буфера выделяется новый.

    Все источники получают distance = 0 и попадают в очередь в порядке,
    заданном вызывающим, поэтому при равных расстояниях вершину
    "забирает" тот источник, который дошёл до неё первым.
    """

    def __init__(self, graph: GraphBase, state: Optional[BFSState] = None):
        self.graph = graph
        n = graph.num_vertices()
        if state is None:
            state = BFSState(n)
        elif state.size != n:
            raise RuntimeError(
                f"размер буфера {state.size} не совпадает с числом вершин графа {n}"
            )
        self._state = state
        self.sources: tuple[int, ...] = ()

    @property
    def state(self) -> BFSState:
        return self._state

    def run(self, sources: Union[int, Iterable[int]]) -> CachingBFS:
        """
        Запустить BFS. sources — вершина или непустой набор вершин.
        Проверка аргументов идёт до любой записи в буфер.
        """
        srcs = normalize_side(sources, self.graph.num_vertices())

        st = self._state
        if st.is_dirty():
            st.clear()

        q = deque()
        for s in srcs:
            st.mark(s, 0)
            q.append(s)

        visited = st.visited
        distance = st.distance
        while q:
            v = q.popleft()
            d = int(distance[v]) + 1
            for w in self.graph.neighbors(v):
                if not visited[w]:
                    st.mark(w, d, v)
                    q.append(w)

        self.sources = srcs
        return self

    # ------------------------------------------------------------
    # Запросы к последнему прогону
    # ------------------------------------------------------------
    def reachable(self, v: int) -> bool:
        """Есть ли путь из какого-либо источника в v."""
        self._check(v)
        return bool(self._state.visited[v])

    def distance_to(self, v: int) -> int:
        """Длина кратчайшего пути до v. Для недостижимой v — ValueError."""
        self._check(v)
        if not self._state.visited[v]:
            raise ValueError(f"вершина {v} недостижима из {list(self.sources)}")
        return int(self._state.distance[v])

    def path_to(self, v: int) -> Optional[List[int]]:
        """Кратчайший путь от источника до v (включительно) или None."""
        self._check(v)
        if not self._state.visited[v]:
            return None
        pred = self._state.predecessor
        path = [v]
        x = int(pred[v])
        while x != NO_VERTEX:
            path.append(x)
            x = int(pred[x])
        path.reverse()
        return path

    def reached(self) -> NDArray[np.intp]:
        """Достигнутые вершины по возрастанию индекса."""
        return np.flatnonzero(self._state.visited)

    def _check(self, v: int) -> None:
        if not 0 <= v < self._state.size:
            raise IndexError(f"вершина {v} вне диапазона [0, {self._state.size})")

    def __repr__(self) -> str:
        return f"CachingBFS(sources={self.sources}, reached={len(self._state.touched)})"
