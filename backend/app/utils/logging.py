"""Structured logging for planning service calls."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class StructuredPlanningLogger:
    """Structured logger for planning model calls."""

    def log_call(
        self,
        operation: str,
        outcome: str,
        latency_ms: float,
        error_reason: str | None = None,
    ) -> None:
        """Log one model call with structured data."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        }

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Planning call: {operation} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
