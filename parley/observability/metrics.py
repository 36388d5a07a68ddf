"""Prometheus metrics for Parley.

Tracks transcript growth, reply generation outcomes and latency, queue
depth and persistence failures.
"""

from prometheus_client import Counter, Gauge, Histogram

MESSAGES_APPENDED = Counter(
    "parley_messages_appended_total",
    "Total number of messages appended to transcripts",
    labelnames=["origin"],
)

GENERATIONS = Counter(
    "parley_generations_total",
    "Total number of settled reply generations",
    labelnames=["outcome"],
)

GENERATION_LATENCY = Histogram(
    "parley_generation_latency_seconds",
    "Reply generation latency in seconds",
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 3.0, 5.0, 10.0, 30.0),
)

PENDING_REPLIES = Gauge(
    "parley_pending_replies",
    "Number of user texts waiting for the responder",
)

STORAGE_ERRORS = Counter(
    "parley_storage_errors_total",
    "Total number of absorbed persistence failures",
    labelnames=["operation"],
)


def setup_metrics() -> None:
    """Initialize metrics configuration.

    Called at startup by hosts that expose metrics. Currently a no-op as
    prometheus_client registers collectors on definition.
    """
    pass
