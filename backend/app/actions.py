"""Action layer - the only boundary the session controller talks to.

Each action wraps one gateway call, applies a minimal sanity check and
converts every failure into an ``ActionError`` value instead of raising.
"""

import logging
from typing import Protocol

from backend.app.models.actions import (
    ActionError,
    AdjustRouteResult,
    GenerateRouteResult,
    SummarizeRouteResult,
)
from backend.app.models.adjustment import RouteAdjustmentInput
from backend.app.models.route import GenerateRouteInput
from backend.app.models.summary import SummarizeRouteInput
from backend.app.planning.gateway import PlanningGateway, get_planning_gateway

logger = logging.getLogger(__name__)


class PlanningActions(Protocol):
    """Protocol for anything that can serve the three planning actions."""

    async def generate_exploration_route(self, data: GenerateRouteInput) -> GenerateRouteResult:
        ...

    async def summarize_generated_route(self, data: SummarizeRouteInput) -> SummarizeRouteResult:
        ...

    async def adjust_exploration_route(self, data: RouteAdjustmentInput) -> AdjustRouteResult:
        ...


def _error_message(e: Exception, fallback: str) -> str:
    message = getattr(e, "message", None) or str(e)
    return message or fallback


async def generate_exploration_route(
    data: GenerateRouteInput, gateway: PlanningGateway | None = None
) -> GenerateRouteResult:
    """Generate a route, or return an ActionError describing why not."""
    gateway = gateway or get_planning_gateway()
    try:
        result = await gateway.generate_route(data)
    except Exception as e:
        logger.error(f"Error in generate_exploration_route: {e}", exc_info=True)
        return ActionError(
            error=_error_message(e, "An unknown error occurred while generating the route.")
        )

    if result is None or result.locations is None:
        return ActionError(error="Failed to generate route: AI returned invalid data.")
    return result


async def summarize_generated_route(
    data: SummarizeRouteInput, gateway: PlanningGateway | None = None
) -> SummarizeRouteResult:
    """Summarize a route, or return an ActionError describing why not."""
    gateway = gateway or get_planning_gateway()
    try:
        result = await gateway.summarize_route(data)
    except Exception as e:
        logger.error(f"Error in summarize_generated_route: {e}", exc_info=True)
        return ActionError(
            error=_error_message(e, "An unknown error occurred while summarizing the route.")
        )

    if result is None or not isinstance(result.summary, str):
        return ActionError(error="Failed to summarize route: AI returned invalid data.")
    return result


async def adjust_exploration_route(
    data: RouteAdjustmentInput, gateway: PlanningGateway | None = None
) -> AdjustRouteResult:
    """Suggest route adjustments, or return an ActionError describing why not."""
    gateway = gateway or get_planning_gateway()
    try:
        result = await gateway.suggest_adjustments(data)
    except Exception as e:
        logger.error(f"Error in adjust_exploration_route: {e}", exc_info=True)
        return ActionError(
            error=_error_message(e, "An unknown error occurred while adjusting the route.")
        )

    if result is None or result.alternative_routes is None:
        return ActionError(error="Failed to adjust route: AI returned invalid data.")
    return result


class LocalActions:
    """In-process PlanningActions bound to one gateway."""

    def __init__(self, gateway: PlanningGateway | None = None):
        self.gateway = gateway or get_planning_gateway()

    async def generate_exploration_route(self, data: GenerateRouteInput) -> GenerateRouteResult:
        return await generate_exploration_route(data, self.gateway)

    async def summarize_generated_route(self, data: SummarizeRouteInput) -> SummarizeRouteResult:
        return await summarize_generated_route(data, self.gateway)

    async def adjust_exploration_route(self, data: RouteAdjustmentInput) -> AdjustRouteResult:
        return await adjust_exploration_route(data, self.gateway)
