"""Application service for the greeting endpoints."""
from __future__ import annotations
import logging

from app.domain.common.result import Result
from app.domain.greeting.rules import HELLO_MESSAGE, HOME_MESSAGE, greet

logger = logging.getLogger(__name__)


class GreetingAppService:
    def home(self) -> str:
        return HOME_MESSAGE

    def hello(self) -> str:
        return HELLO_MESSAGE

    def greet(self, name: str) -> Result[str, str]:
        result = greet(name)
        if not result.is_success:
            logger.info("Greeting rejected for name=%r", name)
        return result
