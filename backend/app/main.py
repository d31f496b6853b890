"""FastAPI application exposing the planning actions."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api.routes.actions import router as actions_router
from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.metrics import router as metrics_router
from backend.app.config import get_settings

app = FastAPI(title="RoamFree Exploration Planner API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_settings().ui_origin],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(actions_router, tags=["actions"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "RoamFree Exploration Planner API", "version": "0.1.0"}
