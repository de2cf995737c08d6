# strategies/buffer_pool/scratch_cache.py
from __future__ import annotations
import logging
from collections import deque
from contextlib import contextmanager
from typing import Deque, Dict, Iterator, Optional

from core.bfs_state import BFSState

from .base import BufferPool

logger = logging.getLogger(__name__)


class ScratchCache(BufferPool):
    """
    Пул переиспользуемых BFS-буферов с отложенной очисткой.

    Идея:
        - release() кладёт буфер в очередь свободных как есть, грязным
        - acquire() берёт самый старый свободный буфер и сбрасывает в нём
          только touched-индексы прошлого прогона (O(|touched|), не O(V))
        - если свободных нет — выделяется новый буфер нужного размера

    Очистка переносится на acquire, поэтому платим за неё только тогда,
    когда буфер действительно переиспользуется.
    """

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"size должен быть >= 0, получено {size}")
        self.size = size
        self._idle: Deque[BFSState] = deque()
        self._allocated = 0
        self._reused = 0
        self._cleared = 0

    def acquire(self, size: Optional[int] = None) -> BFSState:
        if size is not None and size != self.size:
            raise RuntimeError(f"пул рассчитан на размер {self.size}, запрошен {size}")

        if self._idle:
            state = self._idle.popleft()
            self._cleared += state.clear()
            self._reused += 1
            return state

        self._allocated += 1
        logger.debug("ScratchCache: новый буфер #%d размера %d", self._allocated, self.size)
        return BFSState(self.size)

    def release(self, state: BFSState) -> None:
        if state.size != self.size:
            raise RuntimeError(
                f"буфер размера {state.size} не принадлежит пулу размера {self.size}"
            )
        if any(s is state for s in self._idle):
            raise RuntimeError("буфер уже возвращён в пул")
        self._idle.append(state)

    @contextmanager
    def borrow(self) -> Iterator[BFSState]:
        """acquire() + гарантированный release() в одном with-блоке."""
        state = self.acquire()
        try:
            yield state
        finally:
            self.release(state)

    def idle_count(self) -> int:
        return len(self._idle)

    def stats(self) -> Dict[str, int]:
        return {
            "allocated": self._allocated,
            "reused": self._reused,
            "idle": len(self._idle),
            "cleared_indices": self._cleared,
        }

    def __repr__(self) -> str:
        return f"ScratchCache(size={self.size}, idle={len(self._idle)}, allocated={self._allocated})"
