"""Fibonacci error reasons: pure Python, no HTTP dependencies."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class InvalidInput:
    n: int
    kind = "invalid_input"

    @property
    def message(self) -> str:
        return "Input 'n' cannot be negative."


@dataclass(frozen=True)
class Overflow:
    n: int
    step: int
    kind = "overflow"

    @property
    def message(self) -> str:
        return f"Fibonacci number exceeds the signed 64-bit limit for n={self.n} at step {self.step}"


FibonacciError = Union[InvalidInput, Overflow]
