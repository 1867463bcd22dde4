import heapq
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Max(Generic[T]):
    """Inverts the ordering of the wrapped item, turns heapq into a max heap"""

    __slots__ = ["item"]

    def __init__(self, item: T):
        self.item = item

    def __lt__(self, other: "Max[T]") -> bool:
        return other.item < self.item

    def __eq__(self, other) -> bool:
        if not isinstance(other, Max):
            return NotImplemented
        return self.item == other.item

    def __repr__(self):
        return repr(self.item)


class MinHeap(Generic[T]):
    def __init__(self):
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, item: T) -> None:
        heapq.heappush(self._items, item)

    def pop(self) -> T:
        """Remove and return the smallest item, IndexError when empty"""
        return heapq.heappop(self._items)

    def peek(self) -> Optional[T]:
        if self._items:
            return self._items[0]
        return None

    def items(self) -> List[T]:
        return sorted(self._items)

    def __repr__(self):
        return f"MinHeap({self._items})"


class MaxHeap(Generic[T]):
    def __init__(self):
        self._items: List[Max[T]] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, item: T) -> None:
        heapq.heappush(self._items, Max(item))

    def pop(self) -> T:
        """Remove and return the largest item, IndexError when empty"""
        return heapq.heappop(self._items).item

    def peek(self) -> Optional[T]:
        if self._items:
            return self._items[0].item
        return None

    def items(self) -> List[T]:
        return sorted(m.item for m in self._items)

    def __repr__(self):
        return f"MaxHeap({self._items})"
