"""Planning action endpoints - POST /actions/*.

Each endpoint wraps one action. Planning failures are not HTTP errors: the
response is 200 with either the output object or ``{"error": "..."}``.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from backend.app.actions import (
    adjust_exploration_route,
    generate_exploration_route,
    summarize_generated_route,
)
from backend.app.models.actions import ActionError
from backend.app.models.adjustment import RouteAdjustment, RouteAdjustmentInput
from backend.app.models.route import GenerateRouteInput, GenerateRouteOutput
from backend.app.models.summary import RouteSummary, SummarizeRouteInput
from backend.app.planning.gateway import PlanningGateway, get_planning_gateway

router = APIRouter(prefix="/actions", tags=["actions"])
logger = logging.getLogger(__name__)


@router.post(
    "/generate-route",
    response_model=GenerateRouteOutput | ActionError,
    status_code=status.HTTP_200_OK,
)
async def generate_route(
    data: GenerateRouteInput,
    gateway: Annotated[PlanningGateway, Depends(get_planning_gateway)],
) -> GenerateRouteOutput | ActionError:
    """Generate an exploration route around the given location."""
    logger.info(
        f"[POST /actions/generate-route] radius={data.radius}m, time_limit={data.time_limit}min"
    )
    return await generate_exploration_route(data, gateway)


@router.post(
    "/summarize-route",
    response_model=RouteSummary | ActionError,
    status_code=status.HTTP_200_OK,
)
async def summarize_route(
    data: SummarizeRouteInput,
    gateway: Annotated[PlanningGateway, Depends(get_planning_gateway)],
) -> RouteSummary | ActionError:
    """Summarize a generated route."""
    logger.info("[POST /actions/summarize-route]")
    return await summarize_generated_route(data, gateway)


@router.post(
    "/adjust-route",
    response_model=RouteAdjustment | ActionError,
    status_code=status.HTTP_200_OK,
)
async def adjust_route(
    data: RouteAdjustmentInput,
    gateway: Annotated[PlanningGateway, Depends(get_planning_gateway)],
) -> RouteAdjustment | ActionError:
    """Suggest alternatives to a route under traffic and time constraints."""
    logger.info(f"[POST /actions/adjust-route] radius={data.radius}m")
    return await adjust_exploration_route(data, gateway)
