"""Descriptive statistics over sequences of numbers."""

from __future__ import annotations

import math
from collections.abc import Iterable


def _values(numbers: Iterable[float]) -> list[float]:
    values = list(numbers)
    if not values:
        raise ValueError("statistics of an empty sequence are undefined")
    return values


def _running_sum(values: Iterable[float]) -> float:
    total = 0.0
    for value in values:
        total += value
    return total


def mode(numbers: Iterable[float]) -> float:
    """Return the most frequent value; ties go to the value seen first."""
    counts: dict[float, int] = {}
    for value in _values(numbers):
        counts[value] = counts.get(value, 0) + 1
    return max(counts, key=counts.__getitem__)


def mean(numbers: Iterable[float]) -> float:
    """Return the arithmetic mean."""
    values = _values(numbers)
    return _running_sum(values) / len(values)


def median(numbers: Iterable[float]) -> float:
    """Return the middle element of the sequence as given (it is not sorted)."""
    values = _values(numbers)
    middle = len(values) // 2
    if len(values) % 2 == 0:
        return (values[middle] + values[middle - 1]) * 0.5
    return values[middle]


def largest(numbers: Iterable[float]) -> float:
    """Return the largest value."""
    return max(_values(numbers))


def smallest(numbers: Iterable[float]) -> float:
    """Return the smallest value."""
    return min(_values(numbers))


def data_range(numbers: Iterable[float]) -> float:
    """Return the distance between the largest and the smallest value."""
    values = _values(numbers)
    return largest(values) - smallest(values)


def variance(numbers: Iterable[float], sample: bool) -> float:
    """Return the variance; a sample divides by n - 1 instead of n."""
    values = _values(numbers)
    if sample and len(values) < 2:
        raise ValueError("sample variance needs at least two values")
    average = mean(values)
    squares = ((value - average) * (value - average) for value in values)
    total = _running_sum(squares)
    divisor = len(values) - 1 if sample else len(values)
    return total / divisor


def std_deviation(numbers: Iterable[float], sample: bool) -> float:
    """Return the standard deviation."""
    return math.sqrt(variance(numbers, sample))