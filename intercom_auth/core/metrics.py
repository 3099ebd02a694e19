"""Prometheus metric helpers."""
from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "intercom_auth_requests_total",
    "HTTP requests processed by the API",
    ("method", "path", "status"),
)

REQUEST_LATENCY = Histogram(
    "intercom_auth_request_latency_seconds",
    "Latency of HTTP requests processed by the API",
    ("method", "path"),
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

PROFILE_FETCHES = Counter(
    "intercom_auth_profile_fetches_total",
    "Outcomes of user profile fetches against the identity provider",
    ("provider", "outcome"),
)

LOGIN_CALLBACKS = Counter(
    "intercom_auth_login_callbacks_total",
    "Outcomes of OAuth login callbacks, by provider",
    ("provider", "outcome"),
)


def record_request(method: str, path: str, status_code: int, duration: float) -> None:
    """Record counters and histograms for a processed HTTP request."""

    REQUEST_COUNT.labels(method, path, str(status_code)).inc()
    REQUEST_LATENCY.labels(method, path).observe(duration)


def record_profile_fetch(provider: str, outcome: str) -> None:
    PROFILE_FETCHES.labels(provider, outcome).inc()


def record_login_callback(provider: str, outcome: str) -> None:
    """Count a login callback as ``success``, ``oauth_error``, ``exchange_error`` or ``profile_error``."""

    LOGIN_CALLBACKS.labels(provider, outcome).inc()
