"""Fixed prompt templates for the three planning operations.

Templates only interpolate validated input fields; they carry no branching.
"""

from backend.app.models.adjustment import RouteAdjustmentInput
from backend.app.models.route import GenerateRouteInput
from backend.app.models.summary import SummarizeRouteInput

UNKNOWN_DISTANCE = "not available"

GENERATE_ROUTE_TEMPLATE = """You are an expert route planner specializing in creating personalized exploration routes.

Given the user's current location (latitude: {latitude}, longitude: {longitude}), a desired exploration radius of {radius} meters, a time limit of {time_limit} minutes, and the following prompt: {prompt},
generate a route that satisfies the user's request.

The route should include a list of locations (name, latitude, longitude, description) in visit order and a high-level description of the route. Also provide an estimated total travel time in minutes.

Consider typical traffic conditions and the time limit to generate the best route for local exploration."""

SUMMARIZE_ROUTE_TEMPLATE = """You are an expert travel assistant. Please summarize the following route for the user, including the estimated time, distance, and a list of key attractions based on their preferences.

Route Description: {route_description}
Estimated Time: {estimated_time}
Estimated Distance: {estimated_distance}
Attraction Preferences: {attraction_preferences}"""

ADJUST_ROUTE_TEMPLATE = """You are a route optimization expert. Given the user's current route, traffic conditions, and time constraints, suggest alternative routes that avoid traffic delays and help the user reach their destination on time.

Current Route: {current_route}
Traffic Conditions: {traffic_conditions}
Time Constraints: {time_constraints}
Radius: {radius} meters

Suggest alternative routes, the estimated arrival time for each route, and the reason for suggesting each route. Keep the three lists in the same order, one entry per alternative."""


def _number(value: float) -> str:
    """Render 2000.0 as "2000" and 2.5 as "2.5"."""
    return f"{value:g}"


def render_generate_prompt(data: GenerateRouteInput) -> str:
    return GENERATE_ROUTE_TEMPLATE.format(
        latitude=data.current_location.lat,
        longitude=data.current_location.lng,
        radius=_number(data.radius),
        time_limit=_number(data.time_limit),
        prompt=data.prompt,
    )


def render_summarize_prompt(data: SummarizeRouteInput) -> str:
    return SUMMARIZE_ROUTE_TEMPLATE.format(
        route_description=data.route_description,
        estimated_time=data.estimated_time,
        estimated_distance=data.estimated_distance or UNKNOWN_DISTANCE,
        attraction_preferences=data.attraction_preferences,
    )


def render_adjust_prompt(data: RouteAdjustmentInput) -> str:
    return ADJUST_ROUTE_TEMPLATE.format(
        current_route=data.current_route,
        traffic_conditions=data.traffic_conditions,
        time_constraints=data.time_constraints,
        radius=_number(data.radius),
    )
