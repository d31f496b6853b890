"""Common types and enums shared across all models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model whose wire/persisted form uses camelCase keys.

    Attributes stay snake_case in Python; either spelling is accepted on input.
    Unknown keys are dropped.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict:
        """Dump to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class Coordinates(CamelModel):
    """Geographic coordinates (WGS84)."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class RouteLocation(CamelModel):
    """A named stop on a generated route."""

    model_config = ConfigDict(frozen=True)

    name: str
    latitude: float
    longitude: float
    description: str

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(lat=self.latitude, lng=self.longitude)


class AttractionPreference(str, Enum):
    """Attraction types a user can ask the route to favour."""

    monuments = "monuments"
    malls = "malls"
    parks = "parks"
    restaurants = "restaurants"
    museums = "museums"
    cafes = "cafes"
    historical_sites = "historical sites"


class PlanningOperation(str, Enum):
    """The three prompt-backed operations of the planning service."""

    generate_route = "generate_route"
    summarize_route = "summarize_route"
    adjust_route = "adjust_route"
