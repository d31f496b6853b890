"""Place search: free-text predictions and place-id geocoding."""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from backend.app.errors import PlaceResolutionFailed
from backend.app.models.common import Coordinates

logger = logging.getLogger(__name__)

USER_AGENT = "roamfree-exploration-planner/0.1"


@dataclass(frozen=True)
class PlacePrediction:
    """One search suggestion; both fields are opaque to callers."""

    description: str
    place_id: str


class PlaceSearch(Protocol):
    """Protocol for place search collaborators. Callers debounce."""

    async def predict(self, query: str) -> list[PlacePrediction]:
        """Return ordered predictions for a free-text query."""
        ...

    async def resolve(self, place_id: str) -> Coordinates:
        """Geocode a prediction.

        Raises:
            PlaceResolutionFailed: If the place cannot be turned into coordinates
        """
        ...


class StaticPlaceSearch:
    """In-memory catalogue of places, matched by case-insensitive substring."""

    def __init__(self, places: dict[str, tuple[str, Coordinates]]) -> None:
        # place_id -> (description, coordinates)
        self.places = places

    async def predict(self, query: str) -> list[PlacePrediction]:
        needle = query.strip().lower()
        if not needle:
            return []
        return [
            PlacePrediction(description=description, place_id=place_id)
            for place_id, (description, _) in self.places.items()
            if needle in description.lower()
        ]

    async def resolve(self, place_id: str) -> Coordinates:
        try:
            return self.places[place_id][1]
        except KeyError as e:
            raise PlaceResolutionFailed(f"Unknown place: {place_id}") from e


def _osm_place_id(item: dict[str, Any]) -> str | None:
    """Nominatim lookup ids look like N123, W456 or R789."""
    osm_type = item.get("osm_type")
    osm_id = item.get("osm_id")
    if not osm_type or osm_id is None:
        return None
    return f"{str(osm_type)[0].upper()}{osm_id}"


class NominatimPlaceSearch:
    """OpenStreetMap Nominatim-backed place search."""

    def __init__(
        self,
        base_url: str = "https://nominatim.openstreetmap.org",
        limit: int = 5,
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.limit = limit
        self.timeout_seconds = timeout_seconds
        self.client = client

    async def _get(self, path: str, params: dict[str, str | int]) -> Any:
        close_client = False
        client = self.client
        if client is None:
            client = httpx.AsyncClient(timeout=self.timeout_seconds)
            close_client = True

        try:
            response = await client.get(
                f"{self.base_url}{path}",
                params=params,
                headers={"User-Agent": USER_AGENT},
            )
            response.raise_for_status()
            return response.json()
        finally:
            if close_client:
                await client.aclose()

    async def predict(self, query: str) -> list[PlacePrediction]:
        """Search Nominatim for a free-text query.

        Raises:
            httpx.HTTPError: On network or HTTP errors
        """
        if not query.strip():
            return []

        results = await self._get(
            "/search", {"q": query.strip(), "format": "jsonv2", "limit": self.limit}
        )

        predictions = []
        for item in results or []:
            place_id = _osm_place_id(item)
            if place_id and item.get("display_name"):
                predictions.append(
                    PlacePrediction(description=item["display_name"], place_id=place_id)
                )
        return predictions

    async def resolve(self, place_id: str) -> Coordinates:
        try:
            results = await self._get("/lookup", {"osm_ids": place_id, "format": "jsonv2"})
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Nominatim lookup failed for {place_id}: {e}")
            raise PlaceResolutionFailed(f"Could not look up place {place_id}.") from e

        if not results:
            raise PlaceResolutionFailed(f"No coordinates found for place {place_id}.")

        try:
            return Coordinates(lat=float(results[0]["lat"]), lng=float(results[0]["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            raise PlaceResolutionFailed(f"Place {place_id} has no usable coordinates.") from e
