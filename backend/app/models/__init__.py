"""Models package - re-exports for convenience."""

from backend.app.models.actions import (
    ActionError,
    AdjustRouteResult,
    GenerateRouteResult,
    SummarizeRouteResult,
)
from backend.app.models.adjustment import AlternativeRoute, RouteAdjustment, RouteAdjustmentInput
from backend.app.models.common import (
    AttractionPreference,
    CamelModel,
    Coordinates,
    PlanningOperation,
    RouteLocation,
)
from backend.app.models.forms import RouteAdjusterForm, RouteGeneratorForm
from backend.app.models.route import (
    GeneratedRoute,
    GenerateRouteInput,
    GenerateRouteOutput,
    SavedRoute,
    new_route_id,
)
from backend.app.models.summary import RouteSummary, SummarizeRouteInput

__all__ = [
    # Common
    "CamelModel",
    "Coordinates",
    "RouteLocation",
    "AttractionPreference",
    "PlanningOperation",
    # Generate
    "GenerateRouteInput",
    "GenerateRouteOutput",
    "GeneratedRoute",
    "SavedRoute",
    "new_route_id",
    # Summarize
    "SummarizeRouteInput",
    "RouteSummary",
    # Adjust
    "RouteAdjustmentInput",
    "RouteAdjustment",
    "AlternativeRoute",
    # Actions
    "ActionError",
    "GenerateRouteResult",
    "SummarizeRouteResult",
    "AdjustRouteResult",
    # Forms
    "RouteGeneratorForm",
    "RouteAdjusterForm",
]
