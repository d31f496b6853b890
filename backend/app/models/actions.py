"""Tagged results returned by the action layer."""

from typing import TypeAlias

from pydantic import BaseModel

from backend.app.models.adjustment import RouteAdjustment
from backend.app.models.route import GenerateRouteOutput
from backend.app.models.summary import RouteSummary


class ActionError(BaseModel):
    """Uniform failure value: the only thing orchestration ever sees of an error."""

    error: str


GenerateRouteResult: TypeAlias = GenerateRouteOutput | ActionError
SummarizeRouteResult: TypeAlias = RouteSummary | ActionError
AdjustRouteResult: TypeAlias = RouteAdjustment | ActionError
