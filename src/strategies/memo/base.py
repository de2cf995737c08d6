from __future__ import annotations
from typing import Dict, Optional, Protocol

from core.query import SAPQuery, SAPResult


class QueryMemo(Protocol):
    """
    Интерфейс кэша результатов SAP-запросов.

    Ключ — нормализованный SAPQuery (неупорядоченная пара множеств),
    поэтому (v, w) и (w, v) попадают в одну запись.
    """

    def lookup(self, query: SAPQuery) -> Optional[SAPResult]:
        """Сохранённый результат для query или None при промахе."""
        ...

    def store(self, query: SAPQuery, result: SAPResult) -> None:
        """Запомнить результат (перезаписывает прежнюю запись)."""
        ...

    def invalidate(self) -> None:
        """Забыть всё."""
        ...

    def stats(self) -> Dict[str, int]:
        ...
