# pathviz/world/coord_queue.py
from __future__ import annotations
from collections import deque
from typing import Iterator, Optional
from pathviz.world.coords import Coord

class CoordinateQueue:
    """FIFO of grid coordinates (the flood-fill worklist).

    capacity bounds the number of queued entries; a flood fill never needs
    more than cols * rows since each cell is enqueued at most once.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: deque[Coord] = deque()

    def push(self, c: Coord) -> None:
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise OverflowError(f"queue full ({self.capacity} entries)")
        self._items.append(c)

    def pop(self) -> Coord:
        if not self._items:
            raise IndexError("pop from an empty CoordinateQueue")
        return self._items.popleft()

    def front(self) -> Coord:
        if not self._items:
            raise IndexError("front of an empty CoordinateQueue")
        return self._items[0]

    def empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._items)
