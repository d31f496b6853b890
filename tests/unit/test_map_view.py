"""Tests for the map view model."""

from backend.app.features.map_view import build_map_view, default_center, map_points
from backend.app.models.common import Coordinates
from backend.app.orchestration.state import SessionState
from tests.fakes import make_route

LIVE = Coordinates(lat=40.0, lng=-75.0)
CUSTOM = Coordinates(lat=51.5, lng=-0.12)


def test_center_prefers_first_stop() -> None:
    route = make_route(locations=3)
    state = SessionState(generated_route=route, live_location=LIVE, custom_start_location=CUSTOM)

    view = build_map_view(state)

    assert view.center_point == route.locations[0].coordinates
    assert view.markers == route.locations
    assert view.user_marker == LIVE
    assert view.custom_start_marker == CUSTOM


def test_center_falls_back_to_custom_start_then_user() -> None:
    assert build_map_view(SessionState(live_location=LIVE, custom_start_location=CUSTOM)).center_point == CUSTOM
    assert build_map_view(SessionState(live_location=LIVE)).center_point == LIVE


def test_center_uses_default_without_any_location() -> None:
    """Test that a route with no stops and no location centers on the default."""
    view = build_map_view(SessionState(generated_route=make_route(locations=0)))

    assert view.center_point == default_center()
    assert view.center_point == Coordinates(lat=40.7128, lng=-74.006)
    assert view.markers == []


def test_map_points_label_stops_in_visit_order() -> None:
    route = make_route(locations=2)
    view = build_map_view(SessionState(generated_route=route, live_location=LIVE, custom_start_location=CUSTOM))

    rows = map_points(view)

    assert [row["label"] for row in rows] == ["1. Stop 0", "2. Stop 1", "You", "Custom start"]
    assert rows[0]["lat"] == route.locations[0].latitude
    assert rows[0]["lon"] == route.locations[0].longitude
    assert rows[2] == {"lat": 40.0, "lon": -75.0, "label": "You"}


def test_map_view_wire_names() -> None:
    wire = build_map_view(SessionState(live_location=LIVE)).to_wire()

    assert wire["centerPoint"] == {"lat": 40.0, "lng": -75.0}
    assert wire["userMarker"] == {"lat": 40.0, "lng": -75.0}
    assert wire["customStartMarker"] is None
