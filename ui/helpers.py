"""Helper functions for UI - HTTP client for the action endpoints + session wiring."""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from backend.app.adapters.geolocation import IpGeolocationSource
from backend.app.adapters.places import NominatimPlaceSearch
from backend.app.config import Settings
from backend.app.db.store import JsonFileKeyValueStore, KeyValueStore
from backend.app.db.wishlist import WishlistRepository
from backend.app.models.actions import (
    ActionError,
    AdjustRouteResult,
    GenerateRouteResult,
    SummarizeRouteResult,
)
from backend.app.models.adjustment import RouteAdjustment, RouteAdjustmentInput
from backend.app.models.common import CamelModel
from backend.app.models.route import GenerateRouteInput, GenerateRouteOutput
from backend.app.models.summary import RouteSummary, SummarizeRouteInput
from backend.app.orchestration.session import ExplorationSession

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)


class HttpActions:
    """PlanningActions implementation calling the backend over HTTP.

    Transport failures and malformed bodies become ActionError values, like
    any other planning failure.
    """

    def __init__(
        self,
        backend_url: str,
        timeout_seconds: float = 90.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.backend_url = backend_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.client = client

    async def _post(
        self, path: str, body: CamelModel, output_model: type[OutputT]
    ) -> OutputT | ActionError:
        close_client = False
        client = self.client
        if client is None:
            client = httpx.AsyncClient(timeout=self.timeout_seconds)
            close_client = True

        try:
            response = await client.post(f"{self.backend_url}{path}", json=body.to_wire())
            response.raise_for_status()
            payload: dict[str, Any] = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Backend call {path} failed: {e}")
            return ActionError(error=f"Could not reach the planning service: {e}")
        finally:
            if close_client:
                await client.aclose()

        if isinstance(payload, dict) and "error" in payload:
            return ActionError(error=str(payload["error"]))

        try:
            return output_model.model_validate(payload)
        except ValidationError:
            return ActionError(error="The planning service returned invalid data.")

    async def generate_exploration_route(self, data: GenerateRouteInput) -> GenerateRouteResult:
        return await self._post("/actions/generate-route", data, GenerateRouteOutput)

    async def summarize_generated_route(self, data: SummarizeRouteInput) -> SummarizeRouteResult:
        return await self._post("/actions/summarize-route", data, RouteSummary)

    async def adjust_exploration_route(self, data: RouteAdjustmentInput) -> AdjustRouteResult:
        return await self._post("/actions/adjust-route", data, RouteAdjustment)


def build_local_store(settings: Settings) -> KeyValueStore:
    return JsonFileKeyValueStore(settings.wishlist_store_path)


def build_session(settings: Settings, store: KeyValueStore) -> ExplorationSession:
    """Wire a session against the HTTP backend and the real collaborators."""
    return ExplorationSession(
        actions=HttpActions(settings.backend_url),
        wishlist=WishlistRepository(store),
        geolocation=IpGeolocationSource(
            url=settings.geolocation_url, timeout_seconds=settings.http_timeout_seconds
        ),
        places=NominatimPlaceSearch(
            base_url=settings.nominatim_url, timeout_seconds=settings.http_timeout_seconds
        ),
    )


def alternative_rows(adjustment: RouteAdjustment) -> list[dict[str, str]]:
    """Table rows for the adjustment view, in the order the model returned them."""
    return [
        {
            "Alternative": alt.route,
            "Estimated arrival": alt.estimated_arrival_time or "unknown",
            "Why": alt.reason or "unknown",
        }
        for alt in adjustment.alternatives()
    ]
