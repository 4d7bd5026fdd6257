"""Unit tests for the Fibonacci calculator."""
import pytest

from app.domain.fibonacci.calculator import compute
from app.domain.fibonacci.models import InvalidInput, Overflow
from app.domain.fibonacci.rules import INT64_MAX, MAX_INDEX, validate_index, would_overflow


def test_base_cases():
    assert compute(0).value == 0
    assert compute(1).value == 1


def test_tenth_term():
    assert compute(10).value == 55


def test_largest_representable_term():
    result = compute(MAX_INDEX)
    assert result.is_success
    assert result.value == 7540113804746346429
    assert result.value <= INT64_MAX


@pytest.mark.parametrize("n", range(2, MAX_INDEX + 1))
def test_recurrence(n):
    assert compute(n).value == compute(n - 1).value + compute(n - 2).value


def test_negative_is_invalid():
    result = compute(-1)
    assert not result.is_success
    assert result.error == InvalidInput(n=-1)
    assert result.error.kind == "invalid_input"
    assert result.error.message == "Input 'n' cannot be negative."


def test_first_overflowing_index():
    # F(93) = 12200160415121876738
    result = compute(93)
    assert not result.is_success
    assert result.error == Overflow(n=93, step=93)
    assert result.error.kind == "overflow"
    assert "n=93" in result.error.message


def test_overflow_reports_first_failing_step():
    result = compute(500)
    assert result.error == Overflow(n=500, step=93)


def test_failure_has_no_value():
    result = compute(-3)
    assert not hasattr(result, "value")


def test_success_has_no_error():
    result = compute(5)
    assert not hasattr(result, "error")


def test_idempotent():
    assert compute(42) == compute(42)
    assert compute(93) == compute(93)


def test_validate_index_accepts_zero():
    assert validate_index(0).is_success


def test_would_overflow_boundary():
    assert not would_overflow(0, INT64_MAX)
    assert would_overflow(1, INT64_MAX)
