"""Iterative nth-term Fibonacci calculation with 64-bit overflow detection."""
from __future__ import annotations

from app.domain.common.result import Result
from app.domain.fibonacci.models import FibonacciError, Overflow
from app.domain.fibonacci.rules import validate_index, would_overflow


def compute(n: int) -> Result[int, FibonacciError]:
    """
    Returns Result.ok(F(n)) with F(0)=0, F(1)=1, or Result.fail(InvalidInput | Overflow).
    Valid range is 0 <= n <= 92.
    """
    validation = validate_index(n)
    if not validation.is_success:
        return validation

    if n == 0:
        return Result.ok(0)
    if n == 1:
        return Result.ok(1)

    prev, curr = 0, 1
    for step in range(2, n + 1):
        # Checked before the addition so the sum never leaves the int64 range
        if would_overflow(prev, curr):
            return Result.fail(Overflow(n=n, step=step))
        prev, curr = curr, prev + curr
    return Result.ok(curr)
