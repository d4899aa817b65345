"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at the /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Use case outcomes
webinar_operations = Counter(
    'webinar_operations_total',
    'Webinar use case executions',
    ['operation', 'outcome']  # organize/change_seats/find, success/<error code>
)

# HTTP
request_latency = Histogram(
    'http_request_latency_seconds',
    'HTTP request latency',
    ['method'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)

# Database
db_operations = Counter(
    'db_operations_total',
    'Total database operations',
    ['operation']  # create, update, read, conflict
)

# Cache
cache_operations = Counter(
    'cache_operations_total',
    'Cache operations',
    ['operation', 'result']  # get/set/invalidate, hit/miss/error/ok
)


def metrics_endpoint() -> Response:
    """Prometheus exposition of the default registry."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_webinar_operation(operation: str, outcome: str):
    """Outcome is "success" or the lower-cased domain error code."""
    webinar_operations.labels(operation=operation, outcome=outcome).inc()

def record_db_operation(operation: str):
    db_operations.labels(operation=operation).inc()

def record_cache_operation(operation: str, result: str):
    cache_operations.labels(operation=operation, result=result).inc()
