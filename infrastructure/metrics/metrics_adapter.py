"""
Metrics adapter that implements MetricsPort protocol.

Wraps the Prometheus collectors exposed on /metrics.
"""
from domain.interfaces import MetricsPort
from infrastructure.metrics.metrics import (
    seed_runs_total,
    store_query_failures_total,
    report_latency_seconds,
)


class MetricsAdapter(MetricsPort):
    """Adapter that implements MetricsPort with prometheus_client collectors."""

    def increment_seed_total(self, outcome: str) -> None:
        seed_runs_total.labels(outcome=outcome).inc()

    def increment_store_failure(self, operation: str) -> None:
        store_query_failures_total.labels(operation=operation).inc()

    def observe_report_latency(self, report: str, seconds: float) -> None:
        report_latency_seconds.labels(report=report).observe(seconds)
