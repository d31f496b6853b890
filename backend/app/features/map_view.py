"""Map widget view model built from session state."""

from pydantic import Field

from backend.app.config import get_settings
from backend.app.models.common import CamelModel, Coordinates, RouteLocation
from backend.app.orchestration.state import SessionState


class MapView(CamelModel):
    """Everything the map widget needs to render one frame."""

    center_point: Coordinates
    markers: list[RouteLocation] = Field(default_factory=list)
    user_marker: Coordinates | None = None
    custom_start_marker: Coordinates | None = None


def default_center() -> Coordinates:
    settings = get_settings()
    return Coordinates(lat=settings.default_center_lat, lng=settings.default_center_lng)


def build_map_view(state: SessionState) -> MapView:
    """Center on the first stop, else the custom start, else the user, else the default."""
    markers = list(state.generated_route.locations) if state.generated_route else []

    if markers:
        center = markers[0].coordinates
    else:
        center = state.custom_start_location or state.live_location or default_center()

    return MapView(
        center_point=center,
        markers=markers,
        user_marker=state.live_location,
        custom_start_marker=state.custom_start_location,
    )


def map_points(view: MapView) -> list[dict[str, float | str]]:
    """Flatten a view into rows for point-map widgets (lat/lon/label)."""
    rows: list[dict[str, float | str]] = [
        {"lat": m.latitude, "lon": m.longitude, "label": f"{i + 1}. {m.name}"}
        for i, m in enumerate(view.markers)
    ]
    if view.user_marker:
        rows.append({"lat": view.user_marker.lat, "lon": view.user_marker.lng, "label": "You"})
    if view.custom_start_marker:
        rows.append(
            {
                "lat": view.custom_start_marker.lat,
                "lon": view.custom_start_marker.lng,
                "label": "Custom start",
            }
        )
    return rows
