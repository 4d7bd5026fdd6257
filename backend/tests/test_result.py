from dataclasses import FrozenInstanceError

import pytest

from app.domain.common.result import Fail, Ok, Result


def test_ok_carries_value_only():
    r = Result.ok(3)
    assert isinstance(r, Ok)
    assert r.is_success
    assert r.value == 3
    assert not hasattr(r, "error")


def test_fail_carries_error_only():
    r = Result.fail("boom")
    assert isinstance(r, Fail)
    assert not r.is_success
    assert r.error == "boom"
    assert not hasattr(r, "value")


def test_results_are_immutable():
    r = Result.ok(1)
    with pytest.raises(FrozenInstanceError):
        r.value = 2


def test_repr():
    assert repr(Result.ok(1)) == "Result.ok(1)"
    assert repr(Result.fail("x")) == "Result.fail('x')"


def test_equality_by_value():
    assert Result.ok(1) == Result.ok(1)
    assert Result.ok(1) != Result.fail(1)


def test_result_is_generic():
    assert Result[int, str] is not None
    assert isinstance(Ok[int, str](1), Result)
    assert isinstance(Fail[int, str]("x"), Result)
