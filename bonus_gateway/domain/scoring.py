"""Composite score aggregation - weighted composite scores from achievement rates"""

from typing import Union
from bonus_gateway.domain.models import FinancialRates, NonFinancialRates, ScoreKind
from bonus_gateway.utils.number_utils import round_half_up

FINANCIAL_WEIGHTS = {
    "investment_rate": 0.25,
    "insurance_rate": 0.25,
    "ca_rate": 0.20,
    "nnm_rate": 0.10,
    "wealth_penetration_rate": 0.20,
}

NON_FINANCIAL_WEIGHT = 0.20
PERFECT_NPS_WEIGHT = 0.25
PERFECT_NPS_RATE = 100.0


def compute_financial_score(rates: FinancialRates) -> float:
    """
    Weighted financial score, 2 decimals.

    Weights:
    - 25%: Investment income
    - 25%: Insurance income
    - 20%: CA
    - 10%: NNM
    - 20%: Wealth penetration

    NNM and wealth penetration rates go up to 200%, so the score can
    exceed 100 (at most 130 when the other three sit at 100%).
    Total income is not weighted; it only drives a penalty.
    """
    score = sum(getattr(rates, name) * weight for name, weight in FINANCIAL_WEIGHTS.items())
    return round_half_up(score, 2)


def compute_non_financial_score(rates: NonFinancialRates) -> float:
    """
    Weighted non-financial score, 2 decimals.

    Each metric is weighted 20%. A perfect NPS (100%) is weighted 25%
    instead, on top of the other four, so the score tops out at 105.
    """
    nps_weight = PERFECT_NPS_WEIGHT if rates.nps_rate >= PERFECT_NPS_RATE else NON_FINANCIAL_WEIGHT

    score = (
        rates.risk_rate * NON_FINANCIAL_WEIGHT
        + rates.quality_rate * NON_FINANCIAL_WEIGHT
        + rates.client_appointment_rate * NON_FINANCIAL_WEIGHT
        + rates.complaint_rate * NON_FINANCIAL_WEIGHT
        + rates.nps_rate * nps_weight
    )
    return round_half_up(score, 2)


def compute_score(rates: Union[FinancialRates, NonFinancialRates], kind: ScoreKind) -> float:
    """Compute the composite score of the given kind"""
    kind = ScoreKind(kind)

    if kind is ScoreKind.FINANCIAL:
        if not isinstance(rates, FinancialRates):
            raise TypeError("financial score needs FinancialRates")
        return compute_financial_score(rates)

    if not isinstance(rates, NonFinancialRates):
        raise TypeError("non-financial score needs NonFinancialRates")
    return compute_non_financial_score(rates)
