"""Numbers domain models."""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Stats:
    count: int
    sum: float
    average: float
    min: float
    max: float
