"""Unit tests for the numbers and greeting domain."""
from app.domain.greeting.rules import greet
from app.domain.numbers.models import Stats
from app.domain.numbers.service import DEMO_ARRAY, bubble_sort, calculate_stats, sum_range


def test_sum_range_default():
    assert sum_range() == 5050


def test_sum_range_empty():
    assert sum_range(5, 4) == 0


def test_bubble_sort_does_not_mutate_input():
    values = list(DEMO_ARRAY)
    assert bubble_sort(values) == sorted(DEMO_ARRAY)
    assert values == DEMO_ARRAY


def test_bubble_sort_edge_cases():
    assert bubble_sort([]) == []
    assert bubble_sort([1]) == [1]
    assert bubble_sort([3, 1, 3, 2]) == [1, 2, 3, 3]


def test_stats():
    result = calculate_stats([2.5, -1, 4.5])
    assert result.is_success
    assert result.value == Stats(count=3, sum=6.0, average=2.0, min=-1.0, max=4.5)


def test_stats_rejects_empty_and_missing():
    assert not calculate_stats([]).is_success
    assert not calculate_stats(None).is_success


def test_greet():
    assert greet("Grace").value == "Hello, Grace! Welcome."
    assert not greet("   ").is_success
    assert not greet("{name}").is_success


def test_stats_rejects_non_finite_input():
    assert not calculate_stats([float("nan"), 1.0]).is_success
    assert not calculate_stats([float("inf")]).is_success


def test_stats_rejects_sum_outside_float_range():
    result = calculate_stats([1e308, 1e308])
    assert not result.is_success
    assert "finite" in result.error


def test_stats_large_but_finite():
    result = calculate_stats([1e308, -1e308, 5.0])
    assert result.value.sum == 5.0
