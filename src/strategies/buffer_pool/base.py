# strategies/buffer_pool/base.py
from __future__ import annotations
from typing import Protocol

from core.bfs_state import BFSState


class BufferPool(Protocol):
    """
    Интерфейс пула BFS-буферов.

    Где это используется:
        - SAP берёт по буферу на каждую сторону запроса (acquire)
        - после объединения результатов возвращает их обратно (release)

    Пул привязан к одному размеру (числу вершин графа) на всё время жизни.
    """

    size: int

    def acquire(self) -> BFSState:
        """
        Выдать буфер в исходном состоянии (всё INFINITY / не посещено).
        Чистый он должен быть к моменту использования, а не к моменту release.
        """
        ...

    def release(self, state: BFSState) -> None:
        """Вернуть буфер в пул. Очистка может быть отложена до следующего acquire."""
        ...
