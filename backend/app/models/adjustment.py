"""Route adjustment contract.

The three sequences of ``RouteAdjustment`` are index aligned: position i of
each describes the same alternative. Secondary sequences may be shorter than
``alternative_routes``; a missing entry means "unknown". Nothing in this
package reorders them independently.
"""

from dataclasses import dataclass

from pydantic import Field

from backend.app.models.common import CamelModel


class RouteAdjustmentInput(CamelModel):
    """Input for suggesting alternatives to the active route."""

    current_route: str
    traffic_conditions: str
    time_constraints: str
    radius: float = Field(..., gt=0, description="Search radius in meters")


@dataclass(frozen=True)
class AlternativeRoute:
    """One suggested alternative with its aligned details."""

    index: int
    route: str
    estimated_arrival_time: str | None
    reason: str | None


class RouteAdjustment(CamelModel):
    """Alternative routes suggested for current traffic and time constraints."""

    alternative_routes: list[str]
    estimated_arrival_times: list[str]
    reasons_for_suggestion: list[str]

    def alternatives(self) -> list[AlternativeRoute]:
        """Zip the sequences by index, keeping the order of ``alternative_routes``."""
        return [
            AlternativeRoute(
                index=i,
                route=route,
                estimated_arrival_time=_at(self.estimated_arrival_times, i),
                reason=_at(self.reasons_for_suggestion, i),
            )
            for i, route in enumerate(self.alternative_routes)
        ]


def _at(values: list[str], index: int) -> str | None:
    if index < len(values) and values[index]:
        return values[index]
    return None
