"""Planning service gateway.

Turns each validated input into a fixed-template prompt, sends it to the
structured completion client and validates the answer against the output
schema. Every failure mode (transport error, timeout, empty answer, schema
mismatch) surfaces as ``GenerationFailed``. The gateway never retries.
"""

import asyncio
import logging
import time
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from backend.app.config import get_settings
from backend.app.errors import GenerationFailed
from backend.app.llm.client import StructuredCompletionClient, get_llm_client
from backend.app.models.adjustment import RouteAdjustment, RouteAdjustmentInput
from backend.app.models.common import PlanningOperation
from backend.app.models.route import GenerateRouteInput, GenerateRouteOutput
from backend.app.models.summary import RouteSummary, SummarizeRouteInput
from backend.app.planning.prompts import (
    render_adjust_prompt,
    render_generate_prompt,
    render_summarize_prompt,
)
from backend.app.utils.logging import StructuredPlanningLogger
from backend.app.utils.metrics import PrometheusPlanningMetrics

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)


class PlanningGateway:
    """Stateless wrapper around the three prompt-backed operations."""

    def __init__(
        self,
        client: StructuredCompletionClient,
        *,
        timeout_seconds: float | None = 60.0,
        metrics: PrometheusPlanningMetrics | None = None,
        call_logger: StructuredPlanningLogger | None = None,
    ):
        self.client = client
        self.timeout_seconds = timeout_seconds
        self.metrics = metrics or PrometheusPlanningMetrics()
        self.call_logger = call_logger or StructuredPlanningLogger()

    async def generate_route(self, data: GenerateRouteInput) -> GenerateRouteOutput:
        """Generate an exploration route around the user's location."""
        return await self._complete(
            PlanningOperation.generate_route,
            render_generate_prompt(data),
            GenerateRouteOutput,
        )

    async def summarize_route(self, data: SummarizeRouteInput) -> RouteSummary:
        """Summarize a generated route for the user's preferences."""
        return await self._complete(
            PlanningOperation.summarize_route,
            render_summarize_prompt(data),
            RouteSummary,
        )

    async def suggest_adjustments(self, data: RouteAdjustmentInput) -> RouteAdjustment:
        """Suggest alternatives to a route under traffic and time constraints."""
        return await self._complete(
            PlanningOperation.adjust_route,
            render_adjust_prompt(data),
            RouteAdjustment,
        )

    async def _complete(
        self,
        operation: PlanningOperation,
        prompt: str,
        output_model: type[OutputT],
    ) -> OutputT:
        start = time.perf_counter()
        try:
            payload = await asyncio.wait_for(
                self.client.complete_json(
                    operation=operation,
                    prompt=prompt,
                    response_schema=output_model.model_json_schema(by_alias=True),
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            self._record_failure(operation, "timeout", start)
            raise GenerationFailed(
                f"The planning service did not answer within {self.timeout_seconds:g} seconds.",
                operation=operation.value,
            ) from e
        except Exception as e:
            self._record_failure(operation, type(e).__name__, start)
            raise GenerationFailed(
                f"The planning service call failed: {e}", operation=operation.value
            ) from e

        if not payload:
            self._record_failure(operation, "empty_response", start)
            raise GenerationFailed(
                "The planning service returned an empty response.", operation=operation.value
            )

        try:
            result = output_model.model_validate(payload)
        except ValidationError as e:
            self._record_failure(operation, "schema_validation", start)
            raise GenerationFailed(
                f"The planning service returned invalid data: {e.error_count()} validation error(s).",
                operation=operation.value,
            ) from e

        latency_ms = (time.perf_counter() - start) * 1000
        self.metrics.record_latency(operation.value, "success", latency_ms)
        self.call_logger.log_call(operation.value, "success", latency_ms)
        return result

    def _record_failure(self, operation: PlanningOperation, reason: str, start: float) -> None:
        latency_ms = (time.perf_counter() - start) * 1000
        self.metrics.record_latency(operation.value, "error", latency_ms)
        self.metrics.inc_error(operation.value, reason)
        self.call_logger.log_call(operation.value, "error", latency_ms, error_reason=reason)


def get_planning_gateway() -> PlanningGateway:
    """Build a gateway from settings."""
    settings = get_settings()
    return PlanningGateway(
        get_llm_client(),
        timeout_seconds=settings.planning_timeout_seconds,
    )
