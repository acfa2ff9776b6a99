"""Prometheus metrics for monitoring quote volume, bill sizes, and payout allocations"""

from prometheus_client import Counter, Histogram

# Schedule metrics
schedule_quote_counter = Counter(
    "fuzzycat_schedule_quotes_total",
    "Payment schedule quotes requested",
    ["outcome"],  # quoted | rejected
)

bill_amount_bucket_counter = Counter(
    "fuzzycat_bill_amount_bucket",
    "Quoted bills by size bucket",
    ["bucket"],  # $500-$1k, $1k-$5k, $5k-$10k, $10k+
)

# Payout metrics
payout_breakdown_counter = Counter(
    "fuzzycat_payout_breakdowns_total",
    "Payout breakdowns calculated",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_schedule_quote(bill_amount_cents: int) -> None:
    """Record a successful quote and bucket the bill for size distribution analysis"""
    schedule_quote_counter.labels(outcome="quoted").inc()

    if bill_amount_cents < 100_000:
        bucket = "$500-$1k"
    elif bill_amount_cents < 500_000:
        bucket = "$1k-$5k"
    elif bill_amount_cents < 1_000_000:
        bucket = "$5k-$10k"
    else:
        bucket = "$10k+"

    bill_amount_bucket_counter.labels(bucket=bucket).inc()


def record_schedule_rejection() -> None:
    schedule_quote_counter.labels(outcome="rejected").inc()
