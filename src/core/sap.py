from __future__ import annotations
import logging
import threading
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from core.bfs_state import BFSState
from core.caching_bfs import CachingBFS
from core.graph.base import GraphBase
from core.graph.digraph import Digraph
from core.query import NO_PATH, SAPQuery, SAPResult, Side

from strategies.buffer_pool.base import BufferPool
from strategies.buffer_pool.scratch_cache import ScratchCache
from strategies.memo.base import QueryMemo
from strategies.memo.last_query import LastQueryMemo

logger = logging.getLogger(__name__)


@dataclass
class SAP:
    """
    Кратчайшие предковые пути (shortest ancestral path) в орграфе.

    Параметры:
        graph       : GraphBase    — граф (DAG или просто орграф); берётся снимок
        pool        : BufferPool   — пул BFS-буферов (по умолчанию ScratchCache)
        memo        : QueryMemo    — кэш запросов (по умолчанию LastQueryMemo)
        thread_safe : bool         — сериализовать запросы через Lock

    Каждая сторона запроса — вершина или непустой набор вершин.
    Вершина вне [0, V) → IndexError, пустой набор → ValueError; в обоих
    случаях пул и кэш не трогаются.

    Главные методы:
        length(v, w)   -> int          (-1, если общего предка нет)
        ancestor(v, w) -> int | None   (None, если общего предка нет)
    """

    graph: GraphBase
    pool: Optional[BufferPool] = None
    memo: Optional[QueryMemo] = None
    thread_safe: bool = False
    _lock: object = field(init=False, repr=False)

    def __post_init__(self):
        # Digraph неизменяем, делим ссылку; любой другой граф копируем,
        # чтобы движок не увидел его последующих изменений.
        if not isinstance(self.graph, Digraph):
            self.graph = Digraph.from_graph(self.graph)
        n = self.graph.num_vertices()

        if self.pool is None:
            self.pool = ScratchCache(n)
        elif self.pool.size != n:
            raise RuntimeError(f"пул рассчитан на {self.pool.size} вершин, в графе {n}")

        if self.memo is None:
            self.memo = LastQueryMemo()

        self._lock = threading.Lock() if self.thread_safe else nullcontext()

        self._queries = 0
        self._memo_hits = 0
        self._short_circuits = 0
        self._bfs_runs = 0

    # ------------------------------------------------------------
    # Публичный интерфейс
    # ------------------------------------------------------------
    def length(self, v: Side, w: Side) -> int:
        """Длина кратчайшего предкового пути между v и w; -1 если пути нет."""
        return self.query(v, w).length

    def ancestor(self, v: Side, w: Side) -> Optional[int]:
        """
        Общий предок на кратчайшем предковом пути; None если пути нет.
        При нескольких предках с одинаковой суммой берётся меньший индекс.
        """
        return self.query(v, w).ancestor

    def query(self, v: Side, w: Side) -> SAPResult:
        """(length, ancestor) одним вызовом."""
        q = SAPQuery.build(v, w, self.graph.num_vertices())

        with self._lock:
            self._queries += 1
            cached = self.memo.lookup(q)
            if cached is not None:
                self._memo_hits += 1
                return cached

            result = self._compute(q)
            self.memo.store(q, result)
            return result

    def path(self, v: Side, w: Side) -> Optional[List[int]]:
        """
        Вершины одного кратчайшего предкового пути: от источника стороны v
        вверх до предка и вниз до источника стороны w. None если пути нет.
        В кэш запросов не попадает.
        """
        q = SAPQuery.build(v, w, self.graph.num_vertices())

        with self._lock:
            shared = q.shared()
            if shared:
                return [min(shared)]

            sv = self.pool.acquire()
            sw = self.pool.acquire()
            try:
                bfs_v = CachingBFS(self.graph, sv).run(q.v_side)
                bfs_w = CachingBFS(self.graph, sw).run(q.w_side)
                self._bfs_runs += 2
                result = _combine(sv, sw)
                if not result.found:
                    return None
                up = bfs_v.path_to(result.ancestor)
                down = bfs_w.path_to(result.ancestor)
            finally:
                self.pool.release(sv)
                self.pool.release(sw)

        down.reverse()
        return up + down[1:]

    def stats(self) -> Dict[str, object]:
        return {
            "queries": self._queries,
            "memo_hits": self._memo_hits,
            "short_circuits": self._short_circuits,
            "bfs_runs": self._bfs_runs,
            "pool": self.pool.stats() if hasattr(self.pool, "stats") else {},
            "memo": self.memo.stats(),
        }

    # ------------------------------------------------------------
    # Внутреннее
    # ------------------------------------------------------------
    def _compute(self, q: SAPQuery) -> SAPResult:
        # Общая вершина сторон: предок с суммой 0.
        shared = q.shared()
        if shared:
            self._short_circuits += 1
            return SAPResult(0, min(shared))

        sv = self.pool.acquire()
        sw = self.pool.acquire()
        try:
            CachingBFS(self.graph, sv).run(q.v_side)
            CachingBFS(self.graph, sw).run(q.w_side)
            self._bfs_runs += 2
            result = _combine(sv, sw)
        finally:
            self.pool.release(sv)
            self.pool.release(sw)

        logger.debug(
            "SAP %s / %s -> length=%d ancestor=%s",
            q.v_side, q.w_side, result.length, result.ancestor,
        )
        return result

    def __repr__(self) -> str:
        return f"SAP(graph={self.graph!r}, thread_safe={self.thread_safe})"


def _combine(a: BFSState, b: BFSState) -> SAPResult:
    """
    Минимум distance_a[x] + distance_b[x] по вершинам, достигнутым из обеих
    сторон. flatnonzero идёт по возрастанию индекса, а argmin берёт первое
    вхождение минимума — отсюда предок с наименьшим индексом при равенстве.
    """
    common = np.flatnonzero(a.visited & b.visited)
    if common.size == 0:
        return NO_PATH
    sums = a.distance[common] + b.distance[common]
    k = int(np.argmin(sums))
    return SAPResult(int(sums[k]), int(common[k]))
