"""Application service for the summation, sorting and statistics demos."""
from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Tuple

from app.domain.common.result import Result
from app.domain.numbers.models import Stats
from app.domain.numbers.service import DEMO_ARRAY, bubble_sort, calculate_stats, sum_range

logger = logging.getLogger(__name__)


class NumbersAppService:
    def sum_demo(self) -> int:
        return sum_range(1, 100)

    def bubble_sort_demo(self) -> Tuple[List[int], List[int]]:
        original = list(DEMO_ARRAY)
        return original, bubble_sort(original)

    def calculate_stats(self, numbers: Optional[Sequence[float]]) -> Result[Stats, str]:
        result = calculate_stats(numbers)
        if not result.is_success:
            logger.info("Stats request rejected: %s", result.error)
        return result
