from __future__ import annotations
from dataclasses import dataclass, field
from numbers import Integral
from typing import FrozenSet, Iterable, Optional, Tuple, Union


Side = Union[int, Iterable[int]]


def normalize_side(side: Side, num_vertices: int) -> Tuple[int, ...]:
    """
    Привести сторону запроса (вершину или набор вершин) к кортежу int.

    Порядок первых вхождений сохраняется, дубликаты выбрасываются.
    Ошибки:
        TypeError  — не целое число (bool тоже не считается вершиной)
        IndexError — вершина вне [0, num_vertices)
        ValueError — пустой набор
    """
    if isinstance(side, Integral) and not isinstance(side, bool):
        items: Iterable = (side,)
    else:
        try:
            items = iter(side)
        except TypeError:
            raise TypeError(f"ожидалась вершина или набор вершин, получено {side!r}") from None

    seen = set()
    out = []
    for v in items:
        if not isinstance(v, Integral) or isinstance(v, bool):
            raise TypeError(f"вершина должна быть целым числом, получено {v!r}")
        v = int(v)
        if not 0 <= v < num_vertices:
            raise IndexError(f"вершина {v} вне диапазона [0, {num_vertices})")
        if v not in seen:
            seen.add(v)
            out.append(v)

    if not out:
        raise ValueError("набор вершин не должен быть пустым")
    return tuple(out)


@dataclass(frozen=True)
class SAPResult:
    """
    Ответ на SAP-запрос.

    length   : суммарная длина кратчайшего предкового пути, -1 если его нет
    ancestor : общий предок на этом пути, None если его нет
    """
    length: int
    ancestor: Optional[int]

    @property
    def found(self) -> bool:
        return self.ancestor is not None


NO_PATH = SAPResult(-1, None)


@dataclass(frozen=True)
class SAPQuery:
    """
    Нормализованный запрос: неупорядоченная пара наборов вершин.

    (v, w) и (w, v) дают одинаковый key, а порядок вершин внутри стороны
    не важен — сравнение идёт по множествам. Сами стороны хранятся в
    порядке вызывающего: от него зависит порядок источников в BFS.
    """
    v_side: Tuple[int, ...]
    w_side: Tuple[int, ...]
    key: FrozenSet[FrozenSet[int]] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # frozen → ставим вычисляемое поле через object.__setattr__
        object.__setattr__(
            self, "key", frozenset((frozenset(self.v_side), frozenset(self.w_side)))
        )

    @classmethod
    def build(cls, v: Side, w: Side, num_vertices: int) -> SAPQuery:
        return cls(normalize_side(v, num_vertices), normalize_side(w, num_vertices))

    def shared(self) -> FrozenSet[int]:
        """Вершины, входящие в обе стороны."""
        return frozenset(self.v_side).intersection(self.w_side)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SAPQuery):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)
