"""Route generation contract and the route records built from it."""

import uuid
from datetime import datetime, timezone

from pydantic import Field

from backend.app.models.common import CamelModel, Coordinates, RouteLocation


class GenerateRouteInput(CamelModel):
    """Input for route generation.

    ``radius`` is in meters and ``time_limit`` in minutes; both are forwarded
    to the model unchanged.
    """

    prompt: str = Field(..., min_length=1)
    radius: float = Field(..., gt=0, description="Exploration radius in meters")
    time_limit: float = Field(..., gt=0, description="Time budget in minutes")
    current_location: Coordinates


class GenerateRouteOutput(CamelModel):
    """Route as returned by the model (no id yet)."""

    route_description: str = Field(..., description="A description of the generated route.")
    locations: list[RouteLocation] = Field(
        ..., description="Stops in visit order (name, latitude, longitude, description)."
    )
    total_estimated_time: int = Field(
        ..., ge=0, description="Total estimated travel time in minutes."
    )


def new_route_id() -> str:
    """Client-side id for a freshly generated route."""
    return uuid.uuid4().hex


class GeneratedRoute(GenerateRouteOutput):
    """A generated route owned by the current session."""

    id: str

    @classmethod
    def from_output(cls, output: GenerateRouteOutput, route_id: str | None = None) -> "GeneratedRoute":
        """Attach a fresh id to a model response."""
        return cls(id=route_id or new_route_id(), **output.model_dump())


class SavedRoute(GeneratedRoute):
    """A wishlist entry: a generated route plus the moment it was saved."""

    saved_at: datetime

    @classmethod
    def from_route(cls, route: GeneratedRoute, saved_at: datetime | None = None) -> "SavedRoute":
        return cls(
            saved_at=saved_at or datetime.now(timezone.utc),
            **route.model_dump(exclude={"saved_at"}),
        )

    def as_route(self) -> GeneratedRoute:
        return GeneratedRoute(**self.model_dump(exclude={"saved_at"}))
