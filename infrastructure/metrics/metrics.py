# infrastructure/metrics/metrics.py
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

seed_runs_total = Counter(
    "seed_runs_total",
    "Seed runs by outcome",
    ["outcome"]  # success|source_error|store_error
)

seed_fetch_failures_total = Counter(
    "seed_fetch_failures_total",
    "Failed fetches of the seed dataset"
)

store_query_failures_total = Counter(
    "store_query_failures_total",
    "Transaction store failures",
    ["operation"]
)

report_latency_seconds = Histogram(
    "report_latency_seconds",
    "Time spent building a report",
    ["report"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5]
)


def metrics_endpoint():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
