from __future__ import annotations
from typing import Dict, Optional

from core.query import SAPQuery, SAPResult
from .base import QueryMemo


class LastQueryMemo(QueryMemo):
    """
    Однослотовый кэш: помнит только последний вычисленный запрос.

    Закрывает частый сценарий length(v, w) + ancestor(v, w) подряд:
    второй вызов не делает ни одного BFS.
    """

    def __init__(self):
        self._query: Optional[SAPQuery] = None
        self._result: Optional[SAPResult] = None
        self._hits = 0
        self._misses = 0

    def lookup(self, query: SAPQuery) -> Optional[SAPResult]:
        if self._query is not None and self._query == query:
            self._hits += 1
            return self._result
        self._misses += 1
        return None

    def store(self, query: SAPQuery, result: SAPResult) -> None:
        self._query = query
        self._result = result

    def invalidate(self) -> None:
        self._query = None
        self._result = None

    def stats(self) -> Dict[str, int]:
        return {"hits": self._hits, "misses": self._misses}


class NoMemo(QueryMemo):
    """Ничего не кэширует: каждый запрос считается заново."""

    def __init__(self):
        self._misses = 0

    def lookup(self, query: SAPQuery) -> Optional[SAPResult]:
        self._misses += 1
        return None

    def store(self, query: SAPQuery, result: SAPResult) -> None:
        pass

    def invalidate(self) -> None:
        pass

    def stats(self) -> Dict[str, int]:
        return {"hits": 0, "misses": self._misses}
