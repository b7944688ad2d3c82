"""
Indexed binary min-heap with decrease-key.

Backs Dijkstra's algorithm: every node is inserted once with its tentative
distance and lowered in place as shorter paths are found. An item -> position
index, maintained on every swap, makes decrease-key O(log n) instead of a
linear scan.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 6.5 (Priority queues).
"""

from itertools import count
from typing import Dict, Hashable, List, Tuple

from ..diagnostics import assert_heap_ordered, is_debug_enabled
from ..exceptions import EmptyQueueError
from ..logging import get_logger

logger = get_logger(__name__)

# (key, insertion sequence, item)
_Entry = Tuple[float, int, Hashable]


class MinPriorityQueue:
    """
    Binary min-heap over (key, item) pairs with decrease-key by identity.

    Items must be hashable and unique within the queue. Equal keys are
    extracted earliest-inserted-first, so extraction order is deterministic.

    Attributes:
        heap: Heap array of (key, sequence, item) entries.
        index: Mapping item -> position of its entry in ``heap``.

    Complexity:
        - insert: O(log n)
        - extract_min: O(log n)
        - decrease_key: O(log n)
        - is_empty, peek_min: O(1)
    """

    def __init__(self) -> None:
        self.heap: List[_Entry] = []
        self.index: Dict[Hashable, int] = {}
        self._counter = count()

    def __len__(self) -> int:
        return len(self.heap)

    def __contains__(self, item: Hashable) -> bool:
        return item in self.index

    def __repr__(self) -> str:
        return f"MinPriorityQueue(size={len(self.heap)})"

    def is_empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self.heap

    def insert(self, key: float, item: Hashable) -> None:
        """
        Add an item with the given priority key.

        Args:
            key: Priority; smaller keys are extracted first.
            item: Hashable item, unique within the queue.

        Raises:
            ValueError: If the item is already queued.
        """
        if item in self.index:
            raise ValueError(f"Item {item!r} is already in the queue")

        self.heap.append((key, next(self._counter), item))
        self.index[item] = len(self.heap) - 1
        self._sift_up(len(self.heap) - 1)
        self._check()

    def peek_min(self) -> Tuple[float, Hashable]:
        """
        Return (key, item) of the minimum entry without removing it.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self.heap:
            raise EmptyQueueError("peek at an empty priority queue")
        key, _, item = self.heap[0]
        return key, item

    def extract_min(self) -> Hashable:
        """
        Remove and return the item with the smallest key.

        Returns:
            The item; ties go to the earliest inserted.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self.heap:
            raise EmptyQueueError()

        _, _, item = self.heap[0]
        last = self.heap.pop()
        del self.index[item]

        if self.heap:
            self.heap[0] = last
            self.index[last[2]] = 0
            self._sift_down(0)

        self._check()
        return item

    def decrease_key(self, item: Hashable, new_key: float) -> bool:
        """
        Lower the key of a queued item and restore heap order.

        Keys only ever decrease: if ``new_key`` is not strictly smaller than
        the current key, or the item is not queued, nothing changes.

        Args:
            item: Item to update.
            new_key: Candidate new priority.

        Returns:
            True if the key was lowered, False otherwise.
        """
        position = self.index.get(item)
        if position is None:
            logger.debug("decrease_key ignored for %r: not queued", item)
            return False

        key, seq, _ = self.heap[position]
        if not new_key < key:
            return False

        self.heap[position] = (new_key, seq, item)
        self._sift_up(position)
        self._check()
        return True

    def key_of(self, item: Hashable) -> float:
        """
        Return the current key of a queued item.

        Raises:
            KeyError: If the item is not queued.
        """
        return self.heap[self.index[item]][0]

    def _less(self, i: int, j: int) -> bool:
        # Sequence numbers are unique, so items are never compared.
        return self.heap[i][:2] < self.heap[j][:2]

    def _swap(self, i: int, j: int) -> None:
        heap = self.heap
        heap[i], heap[j] = heap[j], heap[i]
        self.index[heap[i][2]] = i
        self.index[heap[j][2]] = j

    def _sift_up(self, position: int) -> None:
        while position > 0:
            parent = (position - 1) // 2
            if not self._less(position, parent):
                break
            self._swap(position, parent)
            position = parent

    def _sift_down(self, position: int) -> None:
        size = len(self.heap)
        while True:
            smallest = position
            left = 2 * position + 1
            right = left + 1

            if left < size and self._less(left, smallest):
                smallest = left
            if right < size and self._less(right, smallest):
                smallest = right

            if smallest == position:
                break

            self._swap(position, smallest)
            position = smallest

    def _check(self) -> None:
        if is_debug_enabled():
            assert_heap_ordered(self)
