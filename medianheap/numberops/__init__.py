from .mean import (
    Average,
    AverageWith,
    arithmetic_mean,
    average_with,
    decimal_mean,
    int_mean,
)
