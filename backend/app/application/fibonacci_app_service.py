"""Application service: runs the Fibonacci calculator and logs the outcome."""
from __future__ import annotations
import logging

from app.domain.common.result import Result
from app.domain.fibonacci.calculator import compute
from app.domain.fibonacci.models import FibonacciError

logger = logging.getLogger(__name__)


class FibonacciAppService:
    def calculate(self, n: int) -> Result[int, FibonacciError]:
        result = compute(n)
        if not result.is_success:
            logger.warning("Fibonacci rejected n=%d (%s): %s", n, result.error.kind, result.error.message)
        else:
            logger.debug("Fibonacci n=%d -> %d", n, result.value)
        return result
