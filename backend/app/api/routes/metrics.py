"""Prometheus scrape endpoint for planning call metrics."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, CollectorRegistry, generate_latest

router = APIRouter()


def render_metrics(registry: CollectorRegistry = REGISTRY) -> bytes:
    """Text exposition of every collector in the registry.

    Includes planning_latency_ms{operation, outcome} and
    planning_errors_total{operation, reason} once the gateway has run.
    """
    return generate_latest(registry)


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    return Response(content=render_metrics(), media_type=CONTENT_TYPE_LATEST)
