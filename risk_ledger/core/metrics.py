"""Prometheus metrics for the Risk Ledger service.

Metrics are organized into two categories:

Business Metrics (for Product/Finance):
- risk_ledger_applications_total: Applications by outcome
- risk_ledger_loans_disbursed_total: Loans disbursed
- risk_ledger_amount_disbursed_total: Principal disbursed
- risk_ledger_payments_total: Repayments recorded
- risk_ledger_loans_repaid_total: Loans repaid in full
- risk_ledger_assessments_total: Assessments by risk category

Technical Metrics (for Engineering/SRE):
- risk_ledger_assessment_latency_seconds: Assessment latency
- risk_ledger_http_requests_total: HTTP requests by endpoint/status
- risk_ledger_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product/Finance dashboards)
# =============================================================================

applications_total = Counter(
    "risk_ledger_applications_total",
    "Total number of loan applications",
    ["outcome"],  # submitted, rejected
)

loans_disbursed_total = Counter(
    "risk_ledger_loans_disbursed_total",
    "Total number of loans disbursed",
)

amount_disbursed_total = Counter(
    "risk_ledger_amount_disbursed_total",
    "Total principal disbursed in monetary units",
)

payments_total = Counter(
    "risk_ledger_payments_total",
    "Total number of repayments recorded",
)

loans_repaid_total = Counter(
    "risk_ledger_loans_repaid_total",
    "Total number of loans repaid in full",
)

assessments_total = Counter(
    "risk_ledger_assessments_total",
    "Comprehensive risk assessments by resulting category",
    ["risk_category"],
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

assessment_latency = Histogram(
    "risk_ledger_assessment_latency_seconds",
    "Comprehensive assessment latency in seconds",
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)

http_requests_total = Counter(
    "risk_ledger_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "risk_ledger_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_application(submitted: bool) -> None:
    """Record an application outcome."""
    applications_total.labels(outcome="submitted" if submitted else "rejected").inc()


def record_disbursement(amount: int) -> None:
    """Record a disbursed loan."""
    loans_disbursed_total.inc()
    amount_disbursed_total.inc(amount)


def record_payment(repaid: bool) -> None:
    """Record a repayment, and the loan's payoff if it reached zero."""
    payments_total.inc()
    if repaid:
        loans_repaid_total.inc()


def record_assessment(risk_category: str) -> None:
    """Record a comprehensive assessment."""
    assessments_total.labels(risk_category=risk_category).inc()


@contextmanager
def track_assessment_latency() -> Generator[None, None, None]:
    """Context manager to track assessment latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        assessment_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
