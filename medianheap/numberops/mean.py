from decimal import Decimal
from typing import Any, Callable, Protocol, TypeVar

T = TypeVar("T")

Average = Callable[[Any, Any], Any]

DECIMAL_2 = Decimal(2)


class AverageWith(Protocol):
    """Values that know how to average themselves with another value of the same type"""

    def average_with(self: T, other: T) -> T:
        ...


def average_with(a: AverageWith, b: AverageWith) -> AverageWith:
    return a.average_with(b)


def arithmetic_mean(a, b):
    """Exact halving when the sum divides evenly, keeps the item type
    arithmetic_mean(1, 3) -> 2
    arithmetic_mean(1, 2) -> 1.5
    arithmetic_mean(Decimal("1"), Decimal("2")) -> Decimal("1.5")

    Odd int sums fall back to true division, use int_mean to stay an int.
    """
    total = a + b
    half, rest = divmod(total, 2)
    if rest:
        return total / 2
    return half


def int_mean(a: int, b: int) -> int:
    """Mean truncated toward zero, stays an int
    int_mean(1, 4) -> 2
    int_mean(-1, -4) -> -2
    """
    total = a + b
    half = abs(total) // 2
    return half if total >= 0 else -half


def decimal_mean(a, b) -> Decimal:
    return (Decimal(a) + Decimal(b)) / DECIMAL_2
