"""Prometheus metrics for monitoring approval rates, loan sizes, and persistence health"""

from decimal import Decimal

from prometheus_client import Counter

from loan_origination.domain.models import ApplicationStatus

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # Approved | Rejected
)

loan_amount_bucket_counter = Counter(
    "loan_amount_bucket_total",
    "Decided loan amounts by bucket",
    ["bucket"],  # <=10k, 10k-50k, 50k-100k, >100k
)

# Submission metrics
submission_counter = Counter(
    "loan_application_submitted_total",
    "Loan applications accepted into the store",
)

# Persistence health
persistence_failure_counter = Counter(
    "loan_persistence_failures_total",
    "Blob load/save failures recovered with a safe default",
    ["operation"],  # load | save
)


def amount_bucket(loan_amount: Decimal) -> str:
    """Bucket label for a loan amount"""
    if loan_amount <= 10_000:
        return "<=10k"
    elif loan_amount <= 50_000:
        return "10k-50k"
    elif loan_amount <= 100_000:
        return "50k-100k"
    else:
        return ">100k"


def record_decision(status: ApplicationStatus, loan_amount: Decimal) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    decision_counter.labels(outcome=status.value).inc()
    loan_amount_bucket_counter.labels(bucket=amount_bucket(loan_amount)).inc()
