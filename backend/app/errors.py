"""Error taxonomy for the exploration planner.

Every failure the session can observe maps onto one of these kinds. Only the
gateway and the collaborator adapters raise them; the action layer turns them
into ``ActionError`` values so nothing crosses into orchestration as an
exception.
"""

from enum import Enum


class ExplorationError(Exception):
    """Base class for planner errors carrying a human-readable message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LocationUnavailable(ExplorationError):
    """No live or custom start location when one is required."""


class GenerationFailed(ExplorationError):
    """The model call failed, timed out, or returned an invalid payload."""

    def __init__(self, message: str, *, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class PersistenceCorrupt(ExplorationError):
    """Stored data could not be parsed."""


class PlaceResolutionFailed(ExplorationError):
    """A place-search prediction could not be geocoded."""


class GeolocationErrorKind(str, Enum):
    """Reason a position lookup failed."""

    permission_denied = "PermissionDenied"
    position_unavailable = "PositionUnavailable"
    timeout = "Timeout"
    unsupported = "Unsupported"


class GeolocationError(ExplorationError):
    """The device position could not be determined."""

    def __init__(self, kind: GeolocationErrorKind, message: str | None = None):
        super().__init__(message or _DEFAULT_GEO_MESSAGES[kind])
        self.kind = kind


_DEFAULT_GEO_MESSAGES = {
    GeolocationErrorKind.permission_denied: "Location permission was denied.",
    GeolocationErrorKind.position_unavailable: "Your position could not be determined.",
    GeolocationErrorKind.timeout: "Timed out while fetching your location.",
    GeolocationErrorKind.unsupported: "Geolocation is not supported in this environment.",
}
