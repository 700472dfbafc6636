"""Prometheus metrics for monitoring bonus outcomes, penalties and exports"""

from prometheus_client import Counter, Histogram
from bonus_gateway.domain.models import BonusResult
from bonus_gateway.domain.bonus import SCORE_FLOOR_PENALTY

# Calculation metrics
calculation_counter = Counter(
    "bonus_calculation_total",
    "Total bonus calculations made",
    ["outcome"],  # paid | reduced | zeroed
)

penalty_counter = Counter(
    "bonus_penalty_total",
    "Penalties applied to calculated bonuses",
    ["penalty"],
)

# Export metrics
export_counter = Counter(
    "record_export_total",
    "Calculation records exported",
    ["format"],  # html | xlsx
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(result: BonusResult) -> None:
    """Record outcome and penalty metrics for one calculation"""
    if SCORE_FLOOR_PENALTY in result.penalties:
        outcome = "zeroed"
    elif result.penalties:
        outcome = "reduced"
    else:
        outcome = "paid"
    calculation_counter.labels(outcome=outcome).inc()

    for penalty in result.penalties:
        penalty_counter.labels(penalty=penalty).inc()
