"""Prometheus metrics for planning service calls."""

from prometheus_client import Counter, Histogram

planning_latency_ms = Histogram(
    "planning_latency_ms",
    "Planning model call latency in milliseconds",
    ["operation", "outcome"],
    buckets=[100, 250, 500, 1000, 2000, 4000, 8000, 16000, 32000, 64000],
)

planning_errors_total = Counter(
    "planning_errors_total",
    "Total planning model call failures",
    ["operation", "reason"],
)


class PrometheusPlanningMetrics:
    """Prometheus-based planning metrics implementation."""

    def record_latency(self, operation: str, outcome: str, latency_ms: float) -> None:
        """Record model call latency."""
        planning_latency_ms.labels(operation=operation, outcome=outcome).observe(latency_ms)

    def inc_error(self, operation: str, reason: str) -> None:
        """Increment error counter."""
        planning_errors_total.labels(operation=operation, reason=reason).inc()
