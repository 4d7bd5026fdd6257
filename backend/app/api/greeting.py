"""Home, hello, greeting and health endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from app.application.greeting_app_service import GreetingAppService
from app.container import get_greeting_app_service

router = APIRouter(tags=["greeting"])


@router.get("/", response_class=PlainTextResponse)
def home(svc: GreetingAppService = Depends(get_greeting_app_service)):
    return svc.home()


@router.get("/hello", response_class=PlainTextResponse)
def hello(svc: GreetingAppService = Depends(get_greeting_app_service)):
    return svc.hello()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/greet/{name}")
def greet_user(name: str, svc: GreetingAppService = Depends(get_greeting_app_service)):
    result = svc.greet(name)
    if not result.is_success:
        return JSONResponse(status_code=400, content={"error": result.error})
    return {"message": result.value}
