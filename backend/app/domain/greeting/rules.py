"""Greeting messages and name validation."""
from __future__ import annotations
from app.domain.common.result import Result

HOME_MESSAGE = "This is the home page."
HELLO_MESSAGE = "Hello, World! Welcome to the Demo Numbers API!"

# Literal left behind when a client forgets to fill in the route template
NAME_PLACEHOLDER = "{name}"


def greet(name: str) -> Result[str, str]:
    """Returns Result.ok(greeting) or Result.fail(reason) for a blank or placeholder name."""
    if not (name or "").strip() or name == NAME_PLACEHOLDER:
        return Result.fail("Name in path cannot be empty or placeholder.")
    return Result.ok(f"Hello, {name}! Welcome.")
