from __future__ import annotations

import queue
import threading
from typing import Generic, Iterator, TypeVar

from spinarak.exceptions import QueueClosedError

T = TypeVar("T")

_CLOSED = object()


class WorkQueue(Generic[T]):
    """Bounded multi-producer/multi-consumer queue with an explicit close.

    `close()` enqueues a single marker behind any pending items. A consumer
    that receives it puts it back before stopping, so every other consumer
    sees it too. One slot beyond `maxsize` is reserved for the marker, so
    neither `close()` nor the re-publish can block.
    """

    def __init__(self, maxsize: int):
        if maxsize < 1:
            raise ValueError("maxsize must be >= 1")
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=maxsize + 1)
        self._maxsize = maxsize
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def put(self, item: T) -> None:
        with self._lock:
            if self._closed:
                raise QueueClosedError("put on closed WorkQueue")
            if self._queue.qsize() >= self._maxsize:
                raise queue.Full
            self._queue.put_nowait(item)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put_nowait(_CLOSED)

    def get(self) -> T:
        """Block until an item is available; raise QueueClosedError once drained."""
        item = self._queue.get()
        if item is _CLOSED:
            self._queue.put_nowait(_CLOSED)
            raise QueueClosedError("WorkQueue is closed")
        return item

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.get()
            except QueueClosedError:
                return
