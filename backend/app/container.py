"""Dependency injection container: one shared instance of each application service."""
from __future__ import annotations
from functools import lru_cache

from app.application.fibonacci_app_service import FibonacciAppService
from app.application.greeting_app_service import GreetingAppService
from app.application.numbers_app_service import NumbersAppService


@lru_cache(maxsize=1)
def get_fibonacci_app_service() -> FibonacciAppService:
    return FibonacciAppService()


@lru_cache(maxsize=1)
def get_numbers_app_service() -> NumbersAppService:
    return NumbersAppService()


@lru_cache(maxsize=1)
def get_greeting_app_service() -> GreetingAppService:
    return GreetingAppService()
