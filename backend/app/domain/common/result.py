"""Result<T, E> pattern: domain functions return this instead of raising exceptions for normal flow.

`Result.ok(value)` gives an `Ok` that only carries a value, `Result.fail(error)` gives a
`Fail` that only carries an error. Check `is_success` before touching either.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TypeVar, Generic

T = TypeVar("T")
E = TypeVar("E")


class Result(Generic[T, E]):
    is_success: bool

    @staticmethod
    def ok(value: T) -> "Ok[T, E]":
        return Ok(value)

    @staticmethod
    def fail(error: E) -> "Fail[T, E]":
        return Fail(error)


@dataclass(frozen=True)
class Ok(Result[T, E]):
    value: T
    is_success = True

    def __repr__(self) -> str:
        return f"Result.ok({self.value!r})"


@dataclass(frozen=True)
class Fail(Result[T, E]):
    error: E
    is_success = False

    def __repr__(self) -> str:
        return f"Result.fail({self.error!r})"
