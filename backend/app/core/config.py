import os
from dotenv import load_dotenv

# Load .env from the repository root
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env"))


def _csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


APP_TITLE: str = os.getenv("APP_TITLE", "Demo Numbers API")
APP_DESCRIPTION: str = "Greeting, summation, bubble sort, Fibonacci and statistics demo endpoints"
APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# CORS: the frontend dev server by default
CORS_ORIGINS: list[str] = _csv(os.getenv("CORS_ORIGINS", "http://localhost:5173"))
CORS_METHODS: list[str] = _csv(os.getenv("CORS_METHODS", "GET,POST,PUT,DELETE,OPTIONS"))
CORS_HEADERS: list[str] = ["*"]
CORS_ALLOW_CREDENTIALS: bool = os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"

# Server bind address for `python -m app.main` / the demo-numbers-api script
HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "8000"))
