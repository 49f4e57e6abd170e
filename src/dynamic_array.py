"""
Dynamic Array - growable array with indexed insert/remove and quicksort.

Storage is a preallocated Python list with a separate logical size, so the
capacity/size split of a raw array is visible: appends fill free slots and a
full array grows geometrically by CAPACITY_SCALE. Sorting is in place using
the Hoare partition scheme with a midpoint pivot.
"""

import logging
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)


class DynamicArray(Generic[T]):
    """Growable array of elements of any type.

    Not safe for concurrent mutation; callers sharing an instance across
    threads must synchronize externally.
    """

    INITIAL_CAPACITY = 10
    CAPACITY_SCALE = 1.5

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is None:
            capacity = self.INITIAL_CAPACITY
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        self._capacity = capacity
        self._size = 0
        self._data: List[Optional[T]] = [None] * capacity

    def add(self, element: T) -> None:
        if self._is_full():
            self._grow()
        self._data[self._size] = element
        self._size += 1

    def add_at(self, index: int, element: T) -> None:
        if index < 0 or index > self._size:
            raise IndexError("DynamicArray.add_at: index out of range")
        if self._is_full():
            self._grow()
        for i in range(self._size, index, -1):
            self._data[i] = self._data[i - 1]
        self._data[index] = element
        self._size += 1

    def get(self, index: int) -> T:
        self._check_index(index, "get")
        return self._data[index]

    def set(self, index: int, element: T) -> None:
        self._check_index(index, "set")
        self._data[index] = element

    def remove(self, index: int) -> None:
        self._check_index(index, "remove")
        for i in range(index, self._size - 1):
            self._data[i] = self._data[i + 1]
        self._size -= 1
        self._data[self._size] = None

    def clear(self) -> None:
        """Remove all elements and reset capacity to INITIAL_CAPACITY."""
        logger.debug("clear: capacity %d -> %d", self._capacity, self.INITIAL_CAPACITY)
        self._capacity = self.INITIAL_CAPACITY
        self._data = [None] * self._capacity
        self._size = 0

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return self._size == 0

    def sort(self, comparator: Optional[Callable[[T, T], int]] = None) -> None:
        """Sort the elements in place, smallest first.

        Without a comparator the elements' own ``<`` and ``>`` are used, and
        a TypeError propagates if they cannot be ordered. A comparator
        takes two elements and returns a negative number, zero or a
        positive number, like ``functools.cmp_to_key`` expects.

        The sort is not stable.
        """
        if self._size < 2:
            return
        logger.debug(
            "sort: %d elements, %s ordering",
            self._size,
            "natural" if comparator is None else "comparator",
        )
        if comparator is None:
            less = _natural_less
            greater = _natural_greater
        else:
            def less(a, b):
                return comparator(a, b) < 0

            def greater(a, b):
                return comparator(a, b) > 0

        # Explicit stack keeps deep partitions off the interpreter call stack.
        stack = [(0, self._size - 1)]
        while stack:
            low, high = stack.pop()
            if low < high:
                p = self._partition(low, high, less, greater)
                stack.append((p + 1, high))
                stack.append((low, p))

    def _partition(self, low: int, high: int, less, greater) -> int:
        data = self._data
        pivot = data[(low + high) // 2]
        i = low
        j = high
        while True:
            while less(data[i], pivot):
                i += 1
            while greater(data[j], pivot):
                j -= 1
            if i >= j:
                return j
            data[i], data[j] = data[j], data[i]
            i += 1
            j -= 1

    def _is_full(self) -> bool:
        return self._size == self._capacity

    def _grow(self) -> None:
        new_cap = max(int(self._capacity * self.CAPACITY_SCALE), self._capacity + 1)
        logger.debug("grow: capacity %d -> %d", self._capacity, new_cap)
        new_data: List[Optional[T]] = [None] * new_cap
        for i in range(self._size):
            new_data[i] = self._data[i]
        self._data = new_data
        self._capacity = new_cap

    def _check_index(self, index: int, op: str) -> None:
        if index < 0 or index >= self._size:
            raise IndexError(f"DynamicArray.{op}: index out of range")

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, element: T) -> None:
        self.set(index, element)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DynamicArray({self._data[:self._size]})"

    def __str__(self) -> str:
        parts = ["["]
        for i in range(self._size):
            parts.append(str(self._data[i]))
        parts.append("]")
        return " ".join(parts)


def _natural_less(a, b) -> bool:
    return a < b


def _natural_greater(a, b) -> bool:
    return a > b
