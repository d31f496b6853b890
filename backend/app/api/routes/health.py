"""Health check endpoints."""

from typing import Any

from fastapi import APIRouter

from backend.app.config import get_settings

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz")
async def healthz() -> dict[str, Any]:
    """Health check with component details.

    The planning service is reported as "stub" when no API key is configured;
    the app still serves requests in that mode.
    """
    settings = get_settings()
    api_key = settings.openai_api_key
    llm_status = "configured" if api_key and api_key.get_secret_value() else "stub"

    return {
        "status": "ok",
        "components": {
            "llm": llm_status,
            "model": settings.openai_model,
        },
    }
