"""Array-backed binary heaps.

The heap is a complete binary tree stored in a Python list: the children of
index ``i`` live at ``2*i + 1`` and ``2*i + 2``, its parent at ``(i - 1) // 2``.
Subclasses decide the ordering by implementing ``_dominates``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

V = TypeVar("V")


class BinaryHeap(ABC, Generic[V]):
    """
    Binary heap with a configurable ordering.

    Complexity:
        insert / pop: O(log n)
        peek: O(1)
        construction from n values: O(n)
    """

    def __init__(self, values: Optional[Iterable[V]] = None) -> None:
        self._heap: List[V] = list(values) if values is not None else []
        self._heapify()

    @abstractmethod
    def _dominates(self, parent: V, child: V) -> bool:
        """Return True if ``parent`` may sit above ``child``."""
        raise NotImplementedError

    def _in_order(self, parent: int, child: int) -> bool:
        return self._dominates(self._heap[parent], self._heap[child])

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if self._in_order(parent, index):
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def _sift_down(self, index: int, n: int) -> None:
        heap = self._heap
        while True:
            left = 2 * index + 1
            right = left + 1
            best = index

            # left child wins ties with the right child
            if left < n and not self._in_order(best, left):
                best = left
            if right < n and not self._in_order(best, right):
                best = right

            if best == index:
                return
            heap[best], heap[index] = heap[index], heap[best]
            index = best

    def _heapify(self) -> None:
        n = len(self._heap)
        # n // 2 - 1 is the last internal node; empty range for n < 2
        for i in reversed(range(n // 2)):
            self._sift_down(i, n)

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[V]:
        """Iterate over the stored values in array (not priority) order."""
        return iter(self._heap)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._heap!r})"

    def insert(self, value: V) -> None:
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def peek(self) -> Optional[V]:
        """Return the root value without removing it, or None if empty."""
        return self._heap[0] if self._heap else None

    def pop(self) -> Optional[V]:
        """Remove and return the root value, or None if the heap is empty."""
        heap = self._heap
        if not heap:
            return None
        heap[0], heap[-1] = heap[-1], heap[0]
        value = heap.pop()
        self._sift_down(0, len(heap))
        return value


class MaxHeap(BinaryHeap[V]):
    """Heap that keeps the greatest value at the root."""

    def _dominates(self, parent: Any, child: Any) -> bool:
        return parent >= child


class MinHeap(BinaryHeap[V]):
    """Heap that keeps the least value at the root."""

    def _dominates(self, parent: Any, child: Any) -> bool:
        return parent <= child
