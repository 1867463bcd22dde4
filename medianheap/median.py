from decimal import InvalidOperation
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from .heaps import MaxHeap, MinHeap
from .monitoring import logger
from .numberops import Average, arithmetic_mean

T = TypeVar("T")


class UnorderableItemError(ValueError):
    pass


class MedianHeap(Generic[T]):
    """
    Running median over a growing collection, kept in two heaps

    lower: max heap, every item <= every item of upper
    upper: min heap
    len(lower) - len(upper) is 0 or 1, lower holds the extra item when the count is odd

    push is O(log n), median is O(1).

    The cross-heap invariants are restored only in push,
    any new mutating method has to go through the same rebalancing.
    """

    def __init__(self, items: Iterable[T] = (), average: Average = arithmetic_mean):
        self._lower: MaxHeap[T] = MaxHeap()
        self._upper: MinHeap[T] = MinHeap()
        self._average = average
        self.extend(items)

    @classmethod
    def create(cls, average: Average = arithmetic_mean) -> "MedianHeap[T]":
        return cls(average=average)

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)

    def __bool__(self) -> bool:
        return bool(self._lower)

    def is_empty(self) -> bool:
        return not self

    @property
    def lower(self) -> List[T]:
        return self._lower.items()

    @property
    def upper(self) -> List[T]:
        return self._upper.items()

    def push(self, item: T) -> None:
        try:
            unordered = item != item
        except InvalidOperation:
            unordered = True
        if unordered:
            raise UnorderableItemError(f"{item!r} is not comparable to itself")

        if not self._lower or item <= self._lower.peek():
            self._lower.push(item)
        else:
            self._upper.push(item)

        self._rebalance()

    insert = push

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.push(item)

    def _rebalance(self) -> None:
        if len(self._lower) - len(self._upper) > 1:
            moved = self._lower.pop()
            self._upper.push(moved)
            logger.trace(f"moved {moved!r} from lower to upper")
        elif len(self._upper) > len(self._lower):
            moved = self._upper.pop()
            self._lower.push(moved)
            logger.trace(f"moved {moved!r} from upper to lower")

    def middle(self) -> Tuple[T, ...]:
        """The one or two middlemost items, without averaging"""
        if not self._lower:
            return ()
        if len(self._lower) > len(self._upper):
            return (self._lower.peek(),)
        return (self._lower.peek(), self._upper.peek())

    def median(self) -> Optional[T]:
        """
        None if empty
        the middle item if the count is odd
        the average of the two middle items if the count is even
        """
        middle = self.middle()
        if not middle:
            return None
        if len(middle) == 1:
            return middle[0]
        low, high = middle
        return self._average(low, high)

    def __repr__(self):
        return f"MedianHeap(lower={self._lower!r}, upper={self._upper!r})"
