"""Input rules for the Fibonacci calculator."""
from __future__ import annotations
from app.domain.common.result import Result
from app.domain.fibonacci.models import InvalidInput

# Largest value of a signed 64-bit integer
INT64_MAX = 2**63 - 1

# F(92) is the last term that fits in INT64_MAX
MAX_INDEX = 92


def validate_index(n: int) -> Result[int, InvalidInput]:
    """Negative indices are rejected; zero is a valid index."""
    if n < 0:
        return Result.fail(InvalidInput(n))
    return Result.ok(n)


def would_overflow(prev: int, curr: int) -> bool:
    """True when `prev + curr` would not fit in a signed 64-bit integer."""
    return prev > INT64_MAX - curr
