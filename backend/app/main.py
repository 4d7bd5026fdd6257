"""FastAPI application entry point."""
from __future__ import annotations
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.api import fibonacci, greeting, numbers
from app.core.config import (
    APP_DESCRIPTION,
    APP_TITLE,
    APP_VERSION,
    CORS_ALLOW_CREDENTIALS,
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGINS,
    HOST,
    LOG_LEVEL,
    PORT,
)
from app.core.logging_config import configure_logging

configure_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

# ------------------------------------------------------------------
# App creation
# ------------------------------------------------------------------
app = FastAPI(
    title=APP_TITLE,
    description=APP_DESCRIPTION,
    version=APP_VERSION,
)

# CORS: the frontend dev server by default, see CORS_ORIGINS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=CORS_ALLOW_CREDENTIALS,
    allow_methods=CORS_METHODS,
    allow_headers=CORS_HEADERS,
)


# ------------------------------------------------------------------
# Startup
# ------------------------------------------------------------------
@app.on_event("startup")
def on_startup():
    logger.info("%s %s started (CORS origins: %s)", APP_TITLE, APP_VERSION, ", ".join(CORS_ORIGINS))


# ------------------------------------------------------------------
# Routers
# ------------------------------------------------------------------
app.include_router(greeting.router)
app.include_router(numbers.router)
app.include_router(fibonacci.router)


def run() -> None:
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
