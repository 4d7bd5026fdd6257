"""Pure number crunching behind the demo endpoints: no I/O."""
from __future__ import annotations
import math
from typing import List, Optional, Sequence

from app.domain.common.result import Result
from app.domain.numbers.models import Stats

# Fixed input for the bubble-sort demo
DEMO_ARRAY: List[int] = [64, 34, 25, 12, 22, 11, 90]

EMPTY_NUMBERS_ERROR = "Request body must contain a non-empty JSON array of numbers."
NON_FINITE_ERROR = "Numbers must be finite and their sum must fit in a double-precision float."


def sum_range(start: int = 1, stop: int = 100) -> int:
    """Running total of every integer from `start` to `stop`, both inclusive."""
    total = 0
    for i in range(start, stop + 1):
        total += i
    return total


def bubble_sort(values: Sequence[int]) -> List[int]:
    """
    Returns a new ascending list. Stops early once a pass makes no swap.
    The input is left untouched.
    """
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def calculate_stats(numbers: Optional[Sequence[float]]) -> Result[Stats, str]:
    """
    Count, sum, average, min and max. Fails on an empty or missing list, on NaN/infinite
    input, and when the running sum leaves the float range.
    """
    if not numbers:
        return Result.fail(EMPTY_NUMBERS_ERROR)
    if not all(math.isfinite(x) for x in numbers):
        return Result.fail(NON_FINITE_ERROR)

    total = float(sum(numbers))
    if not math.isfinite(total):
        return Result.fail(NON_FINITE_ERROR)

    return Result.ok(Stats(
        count=len(numbers),
        sum=total,
        average=total / len(numbers),
        min=float(min(numbers)),
        max=float(max(numbers)),
    ))
