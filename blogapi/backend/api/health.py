"""
Root and Health Endpoints.

Endpoints:
- /: Greeting text, doubles as a browser-friendly check
- /health: Liveness check (process running)
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from blogapi.backend.core.config import get_app_config

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def home() -> str:
    """Return the configured greeting."""
    return get_app_config().application.greeting


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Returns 200 if the process is running. No dependency checks.
    """
    return {"status": "healthy"}
