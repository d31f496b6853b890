"""Structured completion clients backed by OpenAI.

Security: Reads API key from settings/environment only, never hardcoded.
Provides a deterministic stub when no key is present, for local runs and tests.
"""

import json
import logging
from typing import Any, Protocol

from openai import AsyncOpenAI

from backend.app.config import get_settings
from backend.app.models.common import PlanningOperation

logger = logging.getLogger(__name__)


class StructuredCompletionClient(Protocol):
    """Protocol for clients that answer a prompt with one JSON object."""

    async def complete_json(
        self,
        *,
        operation: PlanningOperation,
        prompt: str,
        response_schema: dict[str, Any],
    ) -> dict[str, Any] | None:
        """Send a single prompt and return the decoded JSON object.

        Args:
            operation: Which planning operation the prompt belongs to
            prompt: Fully rendered natural-language instruction
            response_schema: JSON schema the answer must follow

        Returns:
            Decoded JSON object, or None when the service returned nothing
        """
        ...


class DeterministicStubClient:
    """Deterministic stub client for testing (no API key required)."""

    async def complete_json(
        self,
        *,
        operation: PlanningOperation,
        prompt: str,
        response_schema: dict[str, Any],
    ) -> dict[str, Any] | None:
        """Return a canned payload that satisfies the operation's schema."""
        if operation == PlanningOperation.generate_route:
            return {
                "routeDescription": (
                    "Placeholder route generated without a language model. "
                    "Configure OPENAI_API_KEY for real suggestions."
                ),
                "locations": [],
                "totalEstimatedTime": 0,
            }
        if operation == PlanningOperation.summarize_route:
            return {"summary": "This is a stub summary generated without LLM synthesis."}
        return {
            "alternativeRoutes": ["Keep the current route (stub suggestion)"],
            "estimatedArrivalTimes": ["unknown"],
            "reasonsForSuggestion": ["No language model configured"],
        }


class OpenAIClient:
    """OpenAI-backed structured completion client."""

    def __init__(self, api_key: str, model: str = "gpt-4o-mini", temperature: float = 0.4):
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key (read from environment)
            model: Model name to use (default: gpt-4o-mini for cost efficiency)
            temperature: Sampling temperature
        """
        self.client = AsyncOpenAI(api_key=api_key)
        self.model = model
        self.temperature = temperature

    async def complete_json(
        self,
        *,
        operation: PlanningOperation,
        prompt: str,
        response_schema: dict[str, Any],
    ) -> dict[str, Any] | None:
        """Run the prompt in JSON mode and decode the answer."""
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": self._build_system_prompt(response_schema)},
                {"role": "user", "content": prompt},
            ],
            response_format={"type": "json_object"},
            temperature=self.temperature,
        )

        if not response.choices:
            logger.warning(f"OpenAI returned no choices for {operation.value}")
            return None

        content = response.choices[0].message.content or ""
        if not content.strip():
            logger.warning(f"OpenAI returned empty content for {operation.value}")
            return None

        decoded = json.loads(content)
        if not isinstance(decoded, dict):
            raise ValueError(f"expected a JSON object, got {type(decoded).__name__}")
        return decoded

    def _build_system_prompt(self, response_schema: dict[str, Any]) -> str:
        """Build system prompt pinning the answer to the response schema."""
        return (
            "You answer with exactly one JSON object and nothing else.\n"
            "The object MUST validate against this JSON schema:\n"
            f"{json.dumps(response_schema, indent=2)}\n"
            "Use the exact property names from the schema. Do not add commentary."
        )


def get_llm_client() -> StructuredCompletionClient:
    """Factory function to get appropriate client based on config.

    Returns:
        OpenAIClient if API key is configured, DeterministicStubClient otherwise
    """
    settings = get_settings()
    api_key = settings.openai_api_key

    if api_key and api_key.get_secret_value():
        logger.info("Using OpenAI client for planning")
        return OpenAIClient(
            api_key=api_key.get_secret_value(),
            model=settings.openai_model,
            temperature=settings.openai_temperature,
        )
    else:
        logger.warning("No OpenAI API key configured, using deterministic stub client")
        return DeterministicStubClient()
