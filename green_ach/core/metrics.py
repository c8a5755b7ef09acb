"""Prometheus metrics for ACH gateway calls.

- green_ach_request_total: Vendor API calls by method and status
- green_ach_request_failures_total: Failed calls by method and error type
- green_ach_request_latency_seconds: Vendor API call latency by method
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest


request_total = Counter(
    "green_ach_request_total",
    "Total number of ACH gateway API calls",
    ["method", "status"],  # success, failure
)

request_failures = Counter(
    "green_ach_request_failures_total",
    "Total number of failed ACH gateway API calls",
    ["method", "error_type"],  # transport, parse, soap
)

request_latency = Histogram(
    "green_ach_request_latency_seconds",
    "ACH gateway API call latency in seconds",
    ["method"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)


@contextmanager
def track_request_latency(method: str) -> Generator[None, None, None]:
    """Context manager to track vendor API call latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        request_latency.labels(method=method).observe(duration)


def record_request_success(method: str) -> None:
    """Record a successful vendor API call."""
    request_total.labels(method=method, status="success").inc()


def record_request_failure(method: str, error_type: str) -> None:
    """Record a failed vendor API call."""
    request_total.labels(method=method, status="failure").inc()
    request_failures.labels(method=method, error_type=error_type).inc()


def get_metrics() -> bytes:
    """
    Get current metrics in Prometheus text format.

    The gateway runs no server; applications that scrape metrics serve
    this from their own endpoint.
    """
    return generate_latest(REGISTRY)
