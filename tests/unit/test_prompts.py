"""Unit tests for the fixed prompt templates."""

from backend.app.models.adjustment import RouteAdjustmentInput
from backend.app.models.common import Coordinates
from backend.app.models.route import GenerateRouteInput
from backend.app.models.summary import SummarizeRouteInput
from backend.app.planning.prompts import (
    UNKNOWN_DISTANCE,
    render_adjust_prompt,
    render_generate_prompt,
    render_summarize_prompt,
)


def test_generate_prompt_interpolates_all_fields() -> None:
    prompt = render_generate_prompt(
        GenerateRouteInput(
            prompt="scenic walk, coffee stop",
            radius=2000,
            time_limit=120,
            current_location=Coordinates(lat=40.0, lng=-75.0),
        )
    )

    assert "latitude: 40.0, longitude: -75.0" in prompt
    assert "radius of 2000 meters" in prompt
    assert "time limit of 120 minutes" in prompt
    assert "scenic walk, coffee stop" in prompt


def test_generate_prompt_passes_values_through_unconverted() -> None:
    prompt = render_generate_prompt(
        GenerateRouteInput(
            prompt="quick loop around the block",
            radius=2.5,
            time_limit=0.5,
            current_location=Coordinates(lat=1.5, lng=2.5),
        )
    )

    assert "radius of 2.5 meters" in prompt
    assert "time limit of 0.5 minutes" in prompt


def test_summarize_prompt_marks_unknown_distance() -> None:
    prompt = render_summarize_prompt(
        SummarizeRouteInput(
            route_description="A 2km loop past the river",
            estimated_time="90 minutes",
            attraction_preferences="parks, cafes",
        )
    )

    assert "Route Description: A 2km loop past the river" in prompt
    assert "Estimated Time: 90 minutes" in prompt
    assert f"Estimated Distance: {UNKNOWN_DISTANCE}" in prompt
    assert "Attraction Preferences: parks, cafes" in prompt


def test_summarize_prompt_uses_known_distance() -> None:
    prompt = render_summarize_prompt(
        SummarizeRouteInput(
            route_description="Loop",
            estimated_time="30 minutes",
            estimated_distance="2.1 km",
            attraction_preferences="",
        )
    )

    assert "Estimated Distance: 2.1 km" in prompt


def test_adjust_prompt_interpolates_all_fields() -> None:
    prompt = render_adjust_prompt(
        RouteAdjustmentInput(
            current_route="A 2km loop past the river",
            traffic_conditions="Bridge closed",
            time_constraints="Back by 5pm",
            radius=5000,
        )
    )

    assert "Current Route: A 2km loop past the river" in prompt
    assert "Traffic Conditions: Bridge closed" in prompt
    assert "Time Constraints: Back by 5pm" in prompt
    assert "Radius: 5000 meters" in prompt
