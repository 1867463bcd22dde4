from .heaps import Max, MaxHeap, MinHeap
from .median import MedianHeap, UnorderableItemError
from .numberops import (
    AverageWith,
    arithmetic_mean,
    average_with,
    decimal_mean,
    int_mean,
)

__version__ = "0.1.0"
