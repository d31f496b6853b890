"""Geolocation sources: one-shot "get current position" capability."""

import logging
from typing import Protocol

import httpx

from backend.app.errors import GeolocationError, GeolocationErrorKind
from backend.app.models.common import Coordinates

logger = logging.getLogger(__name__)


class GeolocationSource(Protocol):
    """Protocol for position providers. May be invoked repeatedly."""

    async def get_current_position(self) -> Coordinates:
        """Return the current position.

        Raises:
            GeolocationError: With kind PermissionDenied, PositionUnavailable,
                Timeout or Unsupported
        """
        ...


class FixedGeolocationSource:
    """Always reports the same position (desktop runs, tests)."""

    def __init__(self, coordinates: Coordinates) -> None:
        self.coordinates = coordinates

    async def get_current_position(self) -> Coordinates:
        return self.coordinates


class UnsupportedGeolocationSource:
    """Environment without any position capability."""

    async def get_current_position(self) -> Coordinates:
        raise GeolocationError(GeolocationErrorKind.unsupported)


class IpGeolocationSource:
    """Approximate position from the caller's public IP (ip-api.com JSON format)."""

    def __init__(
        self,
        url: str = "http://ip-api.com/json/",
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.client = client

    async def get_current_position(self) -> Coordinates:
        close_client = False
        client = self.client
        if client is None:
            client = httpx.AsyncClient(timeout=self.timeout_seconds)
            close_client = True

        try:
            response = await client.get(self.url)
            if response.status_code in (401, 403):
                raise GeolocationError(GeolocationErrorKind.permission_denied)
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            raise GeolocationError(GeolocationErrorKind.timeout) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"IP geolocation lookup failed: {e}")
            raise GeolocationError(GeolocationErrorKind.position_unavailable) from e
        finally:
            if close_client:
                await client.aclose()

        if not isinstance(data, dict):
            logger.warning(f"IP geolocation returned a {type(data).__name__}, expected an object")
            raise GeolocationError(GeolocationErrorKind.position_unavailable)

        if data.get("status") != "success" or "lat" not in data or "lon" not in data:
            raise GeolocationError(
                GeolocationErrorKind.position_unavailable,
                data.get("message") or "Your position could not be determined.",
            )

        try:
            return Coordinates(lat=data["lat"], lng=data["lon"])
        except ValueError as e:
            raise GeolocationError(GeolocationErrorKind.position_unavailable) from e
