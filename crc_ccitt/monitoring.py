"""Monitoring helpers and Prometheus metrics exporters."""
from __future__ import annotations

from typing import Final

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

_HTTP_REQUEST_TOTAL: Final = Counter(
    "crc_ccitt_http_requests_total",
    "Total HTTP requests",
    labelnames=("method", "route", "status"),
)
_HTTP_REQUEST_LATENCY: Final = Histogram(
    "crc_ccitt_http_request_duration_seconds",
    "Latency of HTTP requests",
    labelnames=("method", "route"),
    buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1),
)
_SERVICE_ERRORS_TOTAL: Final = Counter(
    "crc_ccitt_service_errors_total",
    "Service-level errors by code",
    labelnames=("code", "route"),
)
_CHECKSUMS_TOTAL: Final = Counter(
    "crc_ccitt_checksums_total",
    "Checksums computed",
)
_PAYLOAD_LENGTH: Final = Histogram(
    "crc_ccitt_payload_length_chars",
    "Length of checksummed payloads in characters",
    buckets=(1, 8, 32, 128, 512, 2048, 8192),
)


def observe_request(method: str, route: str, status_code: int, duration_ms: float) -> None:
    _HTTP_REQUEST_TOTAL.labels(method=method, route=route, status=str(status_code)).inc()
    _HTTP_REQUEST_LATENCY.labels(method=method, route=route).observe(duration_ms / 1000)


def record_service_error(code: str, route: str) -> None:
    _SERVICE_ERRORS_TOTAL.labels(code=code, route=route).inc()


def record_checksum(payload_length: int) -> None:
    _CHECKSUMS_TOTAL.inc()
    _PAYLOAD_LENGTH.observe(payload_length)


def metrics_payload() -> tuple[bytes, str]:
    """Return Prometheus exposition payload and content type."""

    return generate_latest(), CONTENT_TYPE_LATEST
