"""Tests for the indexed min-priority queue."""

import math

import pytest

from routegraph import EmptyQueueError, MinPriorityQueue, is_heap_ordered


class TestMinPriorityQueue:
    """Tests for insert / extract_min / decrease_key."""

    def test_empty_queue(self):
        """Test a fresh queue is empty."""
        pq = MinPriorityQueue()
        assert pq.is_empty()
        assert len(pq) == 0

    def test_extract_in_key_order(self):
        """Test items come out in ascending key order."""
        pq = MinPriorityQueue()
        for key, item in [(5, "e"), (1, "a"), (3, "c"), (2, "b"), (4, "d")]:
            pq.insert(key, item)

        out = [pq.extract_min() for _ in range(5)]
        assert out == ["a", "b", "c", "d", "e"]
        assert pq.is_empty()

    def test_extract_empty_raises(self):
        """Test extract_min on an empty queue."""
        pq = MinPriorityQueue()
        with pytest.raises(EmptyQueueError):
            pq.extract_min()

    def test_empty_queue_error_is_index_error(self):
        """Test EmptyQueueError can be caught as IndexError."""
        pq = MinPriorityQueue()
        with pytest.raises(IndexError):
            pq.peek_min()

    def test_peek_does_not_remove(self):
        """Test peek_min returns the root without removing it."""
        pq = MinPriorityQueue()
        pq.insert(2.0, "x")
        pq.insert(1.0, "y")

        assert pq.peek_min() == (1.0, "y")
        assert len(pq) == 2

    def test_ties_extract_in_insertion_order(self):
        """Test equal keys are extracted earliest-inserted-first."""
        pq = MinPriorityQueue()
        for item in ["D", "B", "A", "C"]:
            pq.insert(math.inf, item)
        pq.insert(0.0, "S")

        out = [pq.extract_min() for _ in range(5)]
        assert out == ["S", "D", "B", "A", "C"]

    def test_duplicate_insert_rejected(self):
        """Test an item can be queued only once."""
        pq = MinPriorityQueue()
        pq.insert(1, "a")
        with pytest.raises(ValueError, match="already"):
            pq.insert(2, "a")


class TestDecreaseKey:
    """Tests for decrease_key."""

    def test_decrease_moves_item_to_front(self):
        """Test lowering a key reorders the heap."""
        pq = MinPriorityQueue()
        pq.insert(1, "a")
        pq.insert(5, "b")
        pq.insert(9, "c")

        assert pq.decrease_key("c", 0) is True
        assert pq.key_of("c") == 0
        assert pq.extract_min() == "c"

    def test_increase_is_noop(self):
        """Test a larger key never replaces the current one."""
        pq = MinPriorityQueue()
        pq.insert(3, "a")
        pq.insert(4, "b")

        assert pq.decrease_key("a", 10) is False
        assert pq.key_of("a") == 3
        assert pq.extract_min() == "a"

    def test_equal_key_is_noop(self):
        """Test the new key must be strictly smaller."""
        pq = MinPriorityQueue()
        pq.insert(3, "a")
        assert pq.decrease_key("a", 3) is False

    def test_unknown_item_is_noop(self):
        """Test decrease_key on an item that is not queued."""
        pq = MinPriorityQueue()
        pq.insert(1, "a")
        assert pq.decrease_key("zzz", 0) is False
        assert len(pq) == 1

    def test_extracted_item_is_noop(self):
        """Test decrease_key after the item was extracted."""
        pq = MinPriorityQueue()
        pq.insert(1, "a")
        pq.insert(2, "b")
        pq.extract_min()

        assert "a" not in pq
        assert pq.decrease_key("a", 0) is False
        assert pq.extract_min() == "b"

    def test_identity_among_tied_keys(self):
        """Test the right item is updated when several share a key."""
        pq = MinPriorityQueue()
        for item in ["a", "b", "c", "d"]:
            pq.insert(math.inf, item)

        pq.decrease_key("c", 7)

        assert pq.key_of("c") == 7
        for item in ["a", "b", "d"]:
            assert pq.key_of(item) == math.inf
        assert pq.extract_min() == "c"

    def test_heap_order_maintained(self, rng):
        """Test heap order and index stay valid under random operations."""
        pq = MinPriorityQueue()
        keys = {}
        for item in range(50):
            keys[item] = float(rng.integers(0, 1000))
            pq.insert(keys[item], item)

        for _ in range(100):
            item = int(rng.integers(0, 50))
            if item in pq:
                new_key = keys[item] - float(rng.integers(-5, 50))
                if pq.decrease_key(item, new_key):
                    keys[item] = new_key
            assert is_heap_ordered(pq.heap)

        out = []
        while not pq.is_empty():
            out.append(keys[pq.extract_min()])
        assert out == sorted(out)
