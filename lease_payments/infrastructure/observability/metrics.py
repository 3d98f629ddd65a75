"""Prometheus metrics for monitoring schedule generation and payment statuses"""

from typing import Iterable

from prometheus_client import Counter, Histogram

# Schedule metrics
schedule_counter = Counter(
    "lease_schedule_generated_total",
    "Total payment schedules generated",
    ["frequency"],
)

payments_scheduled_counter = Counter(
    "lease_payments_scheduled_total",
    "Payments produced by schedule generation",
    ["payment_type"],
)

unknown_frequency_counter = Counter(
    "lease_unknown_frequency_total",
    "Requests rejected for an unknown payment frequency",
)

# Status metrics
status_counter = Counter(
    "lease_payment_status_total",
    "Payments classified by effective status",
    ["status"],  # paid | pending | late | advanced | undefined
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_schedule(frequency: str, payment_types: Iterable[str]) -> None:
    """Record one generated schedule and the payments it contains"""
    schedule_counter.labels(frequency=frequency).inc()
    for payment_type in payment_types:
        payments_scheduled_counter.labels(payment_type=payment_type).inc()


def record_statuses(statuses: Iterable[str]) -> None:
    """Record effective statuses handed out for display"""
    for status in statuses:
        status_counter.labels(status=status).inc()
