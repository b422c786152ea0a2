"""
Fixed-capacity container that keeps the largest items of a stream.

.. testcode::

    from shortlist import Shortlist

    sl = Shortlist(3)
    sl.extend([4, 8, 2, 7, 5, 5, 1, 2, 9, 8])
    print(sl.into_sorted_ascending())

.. testoutput::

    [8, 8, 9]

Items are compared with ``<`` only. Internally, the retained items are kept in a :mod:`heapq` min-heap so that
the smallest retained item, the one evicted next, sits at the root. Insertion of an item that does not beat the
root is a no-op and costs a single comparison, so for most streams insertion is amortized constant time
(``O(log capacity)`` in the worst case, e.g., for strictly increasing inputs).

When an incoming item is equal to the smallest retained item it is discarded, but which of several equal retained
items is evicted by a larger incoming item is unspecified.
"""

import copy
import heapq
import logging
import os
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar
from shortlist.validation import check_capacity, check_option, choices

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

EXTRACTION_MODES = ["safe", "fast"]

EXTRACTION = (
    check_option(
        "SHORTLIST_EXTRACTION",
        os.getenv("SHORTLIST_EXTRACTION"),
        EXTRACTION_MODES,
        ignore_list=[None, ""],
    )
    or "safe"
)
"""
Default extraction strategy used by :meth:`Shortlist.into_sorted_ascending` and :meth:`Shortlist.into_unordered`. Set with environment variable ``SHORTLIST_EXTRACTION`` (``'safe'`` or ``'fast'``). Defaults to ``'safe'``.
"""


class ConsumedShortlistError(RuntimeError):
    def __init__(self):
        super().__init__(
            "The shortlist was consumed by an extraction and can no longer be used."
        )


class Shortlist(Generic[T]):
    """
    Keeps the ``capacity`` largest items inserted so far.

    The container has two states: usable and consumed. The owning extractions :meth:`into_sorted_ascending` and
    :meth:`into_unordered` move the retained items out and leave the shortlist consumed, after which any
    further operation raises :exc:`ConsumedShortlistError`. :meth:`clear` and :meth:`drain` leave it usable.
    """

    @choices("extraction", [None] + EXTRACTION_MODES)
    def __init__(self, capacity: int, extraction: Optional[str] = None):
        """
        :param capacity: Maximum number of retained items. Must be a positive integer.
        :param extraction: Strategy of the owning extractions. With ``'fast'``, the backing list is handed to the caller as is. With ``'safe'``, a new list is built item by item and the backing list is released. Both produce the same output. Defaults to :attr:`EXTRACTION`.
        """
        self._capacity = check_capacity(capacity)
        self.extraction = extraction or EXTRACTION
        self._heap: Optional[List[T]] = []
        LOGGER.debug(
            f"Created {type(self).__name__} with capacity={self._capacity} and extraction={self.extraction!r}."
        )

    @classmethod
    def from_batch(
        cls, capacity: int, items: Iterable[T], extraction: Optional[str] = None
    ) -> "Shortlist[T]":
        """
        Creates a shortlist and inserts all ``items`` into it.
        """
        out = cls(capacity, extraction=extraction)
        out.extend(items)
        return out

    def _usable_heap(self) -> List[T]:
        if self._heap is None:
            raise ConsumedShortlistError()
        return self._heap

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def consumed(self) -> bool:
        return self._heap is None

    def __len__(self):
        return len(self._usable_heap())

    def is_empty(self) -> bool:
        return not self._usable_heap()

    def is_full(self) -> bool:
        return len(self._usable_heap()) == self._capacity

    def __repr__(self):
        if self._heap is None:
            return f"{type(self).__name__}(capacity={self._capacity}, consumed)"
        return f"{type(self).__name__}(capacity={self._capacity}, len={len(self._heap)})"

    # Insertion

    def insert(self, item: T):
        """
        Adds ``item`` if the shortlist is not full. Otherwise, ``item`` replaces the smallest retained item if it is larger than it, and is discarded silently if not.
        """
        heap = self._usable_heap()
        if len(heap) < self._capacity:
            heapq.heappush(heap, item)
        elif heap[0] < item:
            heapq.heapreplace(heap, item)

    def insert_copy(self, item: T):
        """
        Same as :meth:`insert`, but stores a shallow copy of ``item``. The copy is only made if the item is retained.
        """
        heap = self._usable_heap()
        if len(heap) < self._capacity:
            heapq.heappush(heap, copy.copy(item))
        elif heap[0] < item:
            heapq.heapreplace(heap, copy.copy(item))

    def extend(self, items: Iterable[T]):
        for item in items:
            self.insert(item)

    def extend_copies(self, items: Iterable[T]):
        for item in items:
            self.insert_copy(item)

    def merge(self, other: "Shortlist[T]"):
        """
        Moves all items of ``other`` into this shortlist, one :meth:`insert` at a time. The capacities of both shortlists can differ. ``other`` is left empty but usable.

        ``other`` is emptied before the first insertion. If an insertion raises (e.g., for items that cannot be compared), the items of ``other`` not yet inserted are lost.
        """
        if other is self:
            raise ValueError("Cannot merge a shortlist into itself.")
        self._usable_heap()
        num_items = len(other)
        self.extend(other.drain())
        LOGGER.debug(f"Merged {num_items} items into {self}.")

    # Removal

    def peek_min(self) -> Optional[T]:
        """
        Returns the smallest retained item (the next one to be evicted) or ``None`` if the shortlist is empty.
        """
        heap = self._usable_heap()
        return heap[0] if heap else None

    def pop_min(self) -> T:
        """
        Removes and returns the smallest retained item. Raises :exc:`IndexError` if the shortlist is empty.
        """
        heap = self._usable_heap()
        if not heap:
            raise IndexError("pop from an empty shortlist")
        return heapq.heappop(heap)

    def clear(self):
        """
        Discards all retained items. The capacity and the backing list are kept.
        """
        self._usable_heap().clear()
        LOGGER.debug(f"Cleared {self}.")

    def drain(self) -> Iterator[T]:
        """
        Removes all retained items and returns a one-shot iterator over them in unspecified order. The shortlist is
        empty (and usable) as soon as this method returns. Items not consumed from the iterator are discarded with it.
        """
        heap = self._usable_heap()
        items = heap[:]
        heap.clear()
        return self._drain(items)

    def _drain(self, items: List[T]) -> Iterator[T]:
        while items:
            yield items.pop()

    # Views

    def __iter__(self) -> Iterator[T]:
        """
        Iterates over the retained items in unspecified order without removing them.
        """
        return iter(self._usable_heap())

    def snapshot_sorted_ascending(self) -> List[T]:
        """
        Returns shallow copies of the retained items in ascending order. The shortlist is not modified.
        """
        return sorted(copy.copy(item) for item in self._usable_heap())

    # Owning extractions

    def _take(self) -> List[T]:
        heap = self._usable_heap()
        self._heap = None
        if self.extraction == "fast":
            out = heap
        else:
            out = [item for item in heap]
            heap.clear()
        LOGGER.debug(
            f"Consumed {type(self).__name__} with {len(out)} items ({self.extraction} extraction)."
        )
        return out

    def into_sorted_ascending(self) -> List[T]:
        """
        Returns the retained items in ascending order and consumes the shortlist.
        """
        out = self._take()
        out.sort()
        return out

    def into_unordered(self) -> List[T]:
        """
        Returns the retained items in unspecified (heap) order and consumes the shortlist.
        """
        return self._take()
