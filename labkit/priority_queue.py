"""A max-priority queue of string values keyed by integers."""

from __future__ import annotations


class QueueEmptyError(LookupError):
    """Raised when the maximum of an empty queue is requested or removed."""


class PriorityQueue:
    """Binary max-heap of ``(key, value)`` entries."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, str]] = []

    def add(self, key: int, value: str) -> None:
        """Insert ``value`` with priority ``key``."""
        if value is None:
            raise ValueError("value must not be None")
        self._heap.append((key, value))
        self._sift_up(len(self._heap) - 1)

    def find_max(self) -> str:
        """Return the value with the highest key."""
        if not self._heap:
            raise QueueEmptyError("queue is empty")
        return self._heap[0][1]

    def remove_max(self) -> str:
        """Remove and return the value with the highest key."""
        if not self._heap:
            raise QueueEmptyError("queue is empty")
        top = self._heap[0][1]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def merge(self, other: PriorityQueue) -> PriorityQueue:
        """Add every entry of ``other`` to this queue and return this queue."""
        for key, value in list(other._heap):
            self.add(key, value)
        return self

    def clear(self) -> None:
        """Remove all entries."""
        self._heap.clear()

    def is_empty(self) -> bool:
        """Return whether the queue holds no entries."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def copy(self) -> PriorityQueue:
        """Return an independent queue with the same entries."""
        duplicate = PriorityQueue()
        duplicate._heap = list(self._heap)
        return duplicate

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index][0] <= heap[parent][0]:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            largest = index
            if left < size and heap[left][0] > heap[largest][0]:
                largest = left
            if right < size and heap[right][0] > heap[largest][0]:
                largest = right
            if largest == index:
                break
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest