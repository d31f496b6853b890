"""Route summarization contract."""

from pydantic import Field

from backend.app.models.common import CamelModel


class SummarizeRouteInput(CamelModel):
    """Input for summarizing a generated route."""

    route_description: str
    estimated_time: str = Field(..., description="e.g. '90 minutes'")
    estimated_distance: str | None = Field(
        default=None, description="e.g. '15.5 km'; None when the distance is not known"
    )
    attraction_preferences: str = Field(
        "", description="Comma-separated attraction types, e.g. 'parks, cafes'"
    )


class RouteSummary(CamelModel):
    """A concise, user-facing summary of a route."""

    summary: str
