"""Fibonacci API endpoints: fixed, query parameter, path segment and JSON body variants."""
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.application.fibonacci_app_service import FibonacciAppService
from app.container import get_fibonacci_app_service
from app.domain.common.result import Result
from app.domain.fibonacci.models import FibonacciError
from app.domain.fibonacci.rules import MAX_INDEX

router = APIRouter(tags=["fibonacci"])

# Index served by the fixed GET /fibonacci route
DEMO_N = 10

N_DESCRIPTION = f"Index in the sequence, F(0)=0. Valid range is 0..{MAX_INDEX}."


# ------------------------------------------------------------------
# Pydantic schemas
# ------------------------------------------------------------------
class FibonacciBody(BaseModel):
    n: int = Field(description=N_DESCRIPTION)


class FibonacciResponse(BaseModel):
    n: int
    result: Optional[int] = None
    error: Optional[str] = None


# ------------------------------------------------------------------
# Serializers
# ------------------------------------------------------------------
def _to_response(n: int, result: Result[int, FibonacciError]) -> JSONResponse:
    if result.is_success:
        body = FibonacciResponse(n=n, result=result.value)
        return JSONResponse(status_code=200, content=body.model_dump())
    body = FibonacciResponse(n=n, error=result.error.message)
    return JSONResponse(status_code=400, content=body.model_dump())


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------
@router.get("/fibonacci", response_model=FibonacciResponse)
def fibonacci_demo(svc: FibonacciAppService = Depends(get_fibonacci_app_service)):
    """Always the 10th term."""
    return _to_response(DEMO_N, svc.calculate(DEMO_N))


@router.get("/fibonacci-param", response_model=FibonacciResponse)
def fibonacci_param(
    n: int = Query(0, description=N_DESCRIPTION),
    svc: FibonacciAppService = Depends(get_fibonacci_app_service),
):
    return _to_response(n, svc.calculate(n))


@router.get("/fibonacci/{n}", response_model=FibonacciResponse)
def fibonacci_path(
    n: int = Path(description=N_DESCRIPTION),
    svc: FibonacciAppService = Depends(get_fibonacci_app_service),
):
    return _to_response(n, svc.calculate(n))


@router.post("/fibonacci", response_model=FibonacciResponse)
def fibonacci_body(body: FibonacciBody, svc: FibonacciAppService = Depends(get_fibonacci_app_service)):
    return _to_response(body.n, svc.calculate(body.n))
