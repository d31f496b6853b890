"""Test doubles shared across unit and integration tests."""

import asyncio
from datetime import datetime, timezone
from typing import Any

from backend.app.models.actions import (
    ActionError,
    AdjustRouteResult,
    GenerateRouteResult,
    SummarizeRouteResult,
)
from backend.app.models.adjustment import RouteAdjustmentInput
from backend.app.models.common import PlanningOperation, RouteLocation
from backend.app.models.route import GeneratedRoute, GenerateRouteInput
from backend.app.models.summary import SummarizeRouteInput

FIXED_NOW = datetime(2025, 6, 10, 12, 0, tzinfo=timezone.utc)


class FakeCompletionClient:
    """Structured completion client returning scripted payloads per operation.

    A scripted value that is an exception instance is raised instead.
    """

    def __init__(self, responses: dict[PlanningOperation, Any] | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[dict[str, Any]] = []

    async def complete_json(
        self,
        *,
        operation: PlanningOperation,
        prompt: str,
        response_schema: dict[str, Any],
    ) -> dict[str, Any] | None:
        self.calls.append(
            {"operation": operation, "prompt": prompt, "response_schema": response_schema}
        )
        response = self.responses.get(operation)
        if isinstance(response, BaseException):
            raise response
        return response


class FakeActions:
    """Scripted PlanningActions that records every request.

    Results are popped from per-action queues. If a gate (asyncio.Event) is
    queued alongside a result, the call waits for it before returning.
    """

    def __init__(self) -> None:
        self.generate_results: list[tuple[GenerateRouteResult, asyncio.Event | None]] = []
        self.summarize_results: list[tuple[SummarizeRouteResult, asyncio.Event | None]] = []
        self.adjust_results: list[tuple[AdjustRouteResult, asyncio.Event | None]] = []
        self.generate_calls: list[GenerateRouteInput] = []
        self.summarize_calls: list[SummarizeRouteInput] = []
        self.adjust_calls: list[RouteAdjustmentInput] = []

    def queue_generate(self, result: GenerateRouteResult, gate: asyncio.Event | None = None) -> None:
        self.generate_results.append((result, gate))

    def queue_summarize(
        self, result: SummarizeRouteResult, gate: asyncio.Event | None = None
    ) -> None:
        self.summarize_results.append((result, gate))

    def queue_adjust(self, result: AdjustRouteResult, gate: asyncio.Event | None = None) -> None:
        self.adjust_results.append((result, gate))

    @staticmethod
    async def _next(queue: list, default: Any) -> Any:
        if not queue:
            return default
        result, gate = queue.pop(0)
        if gate is not None:
            await gate.wait()
        return result

    async def generate_exploration_route(self, data: GenerateRouteInput) -> GenerateRouteResult:
        self.generate_calls.append(data)
        return await self._next(self.generate_results, ActionError(error="no scripted route"))

    async def summarize_generated_route(self, data: SummarizeRouteInput) -> SummarizeRouteResult:
        self.summarize_calls.append(data)
        return await self._next(self.summarize_results, ActionError(error="no scripted summary"))

    async def adjust_exploration_route(self, data: RouteAdjustmentInput) -> AdjustRouteResult:
        self.adjust_calls.append(data)
        return await self._next(self.adjust_results, ActionError(error="no scripted adjustment"))


def make_route(route_id: str = "route-1", *, locations: int = 1) -> GeneratedRoute:
    return GeneratedRoute(
        id=route_id,
        route_description=f"Route {route_id}",
        locations=[
            RouteLocation(
                name=f"Stop {i}",
                latitude=40.0 + i / 1000,
                longitude=-75.0 - i / 1000,
                description=f"Stop number {i}",
            )
            for i in range(locations)
        ],
        total_estimated_time=45,
    )


