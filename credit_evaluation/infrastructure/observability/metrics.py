"""Prometheus metrics for monitoring approval rates and payment burden"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Evaluation metrics
evaluation_counter = Counter(
    "credit_evaluation_total",
    "Total credit evaluations made",
    ["outcome"],  # approved | rejected
)

evaluation_tier_counter = Counter(
    "credit_evaluation_tier_total",
    "Credit evaluations by approval tier",
    ["tier"],
)

payment_to_income_histogram = Histogram(
    "credit_payment_to_income_ratio",
    "Monthly installment divided by monthly income",
    buckets=[0.05, 0.1, 0.15, 0.2, 0.25, 0.3, 0.4, 0.5, 1.0],
)

invalid_input_counter = Counter(
    "credit_invalid_input_total",
    "Requests rejected by domain validation",
    ["error"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_evaluation(approved: bool, tier: str, payment_to_income_ratio: Optional[float]) -> None:
    """Record evaluation metrics for monitoring approval rates and tier distribution"""
    outcome = "approved" if approved else "rejected"
    evaluation_counter.labels(outcome=outcome).inc()
    evaluation_tier_counter.labels(tier=tier).inc()

    # No ratio when income is zero
    if payment_to_income_ratio is not None:
        payment_to_income_histogram.observe(payment_to_income_ratio)
