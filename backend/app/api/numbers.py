"""Summation, bubble-sort and statistics endpoints."""
from __future__ import annotations
from typing import List, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from app.application.numbers_app_service import NumbersAppService
from app.container import get_numbers_app_service
from app.domain.numbers.models import Stats

router = APIRouter(tags=["numbers"])


def _serialize_stats(s: Stats) -> dict:
    return {
        "count": s.count,
        "sum": s.sum,
        "average": s.average,
        "min": s.min,
        "max": s.max,
    }


@router.get("/sum", response_class=PlainTextResponse)
def sum_demo(svc: NumbersAppService = Depends(get_numbers_app_service)):
    return f"Sum of 1 to 100 is: {svc.sum_demo()}"


@router.get("/bubblesort")
def bubble_sort_demo(svc: NumbersAppService = Depends(get_numbers_app_service)):
    original, sorted_values = svc.bubble_sort_demo()
    return {"original": original, "sorted": sorted_values}


@router.post("/calculate-stats")
def calculate_stats(
    numbers: Optional[List[float]] = Body(None),
    svc: NumbersAppService = Depends(get_numbers_app_service),
):
    """Count, sum, average, min and max of a JSON array of numbers."""
    result = svc.calculate_stats(numbers)
    if not result.is_success:
        return JSONResponse(status_code=400, content={"error": result.error})
    return _serialize_stats(result.value)
