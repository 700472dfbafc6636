"""Achievement rate calculation for financial and non-financial metrics"""

from typing import Dict, Optional
from bonus_gateway.domain.models import (
    FinancialMetrics,
    NonFinancialMetrics,
    CalculationTargets,
    FinancialRates,
    NonFinancialRates,
    RateCap,
)
from bonus_gateway.utils.number_utils import round_half_up

NNM_RATE_CAP = 200.0
WEALTH_PENETRATION_RATE_CAP = 200.0
NON_FINANCIAL_RATE_CAP = 100.0

CLIENT_APPOINTMENT_TARGET = 3
NPS_TARGET = 100

# Display thresholds
RATE_MET = 100.0
RATE_NEAR = 70.0


def calculate_rate(actual: float, target: float) -> float:
    """
    Achievement rate as a percentage with 2 decimals.

    A zero target gives full credit (100.0) instead of dividing by zero.
    """
    if target == 0:
        return 100.0
    return round_half_up((actual / target) * 10000) / 100


def check_rate_cap(rate: float, cap: float) -> RateCap:
    """Flag a rate above its cap and return the value to display"""
    if rate > cap:
        return RateCap(is_capped=True, display_rate=cap)
    return RateCap(is_capped=False, display_rate=rate)


def rate_status(rate: float, cap: Optional[float] = None) -> str:
    """Classify a rate for display: capped, met, near or below"""
    if cap is not None and rate > cap:
        return "capped"
    if rate >= RATE_MET:
        return "met"
    if rate >= RATE_NEAR:
        return "near"
    return "below"


def _incident_rate(count: float) -> float:
    # Any incident forfeits the whole metric; there is no partial credit
    return 100.0 if count == 0 else 0.0


def compute_financial_rates(metrics: FinancialMetrics, targets: CalculationTargets) -> FinancialRates:
    """
    Financial achievement rates.

    NNM and wealth penetration are capped at 200%; the others are uncapped.
    """
    return FinancialRates(
        investment_rate=calculate_rate(metrics.investment_income, targets.investment_target),
        insurance_rate=calculate_rate(metrics.insurance_income, targets.insurance_target),
        total_income_rate=calculate_rate(metrics.total_income, targets.total_income_target),
        ca_rate=calculate_rate(metrics.ca, targets.ca_target),
        nnm_rate=min(calculate_rate(metrics.nnm, targets.nnm_target), NNM_RATE_CAP),
        wealth_penetration_rate=min(
            calculate_rate(metrics.wealth_penetration, targets.wealth_penetration_target),
            WEALTH_PENETRATION_RATE_CAP,
        ),
    )


def compute_non_financial_rates(metrics: NonFinancialMetrics) -> NonFinancialRates:
    """
    Non-financial achievement rates, each capped at 100%.

    Risk, quality and complaint are incident counts: zero incidents is 100%,
    anything else is 0%. Client appointments are measured against 3 and NPS
    against 100.
    """
    return NonFinancialRates(
        risk_rate=min(_incident_rate(metrics.risk), NON_FINANCIAL_RATE_CAP),
        quality_rate=min(_incident_rate(metrics.quality), NON_FINANCIAL_RATE_CAP),
        complaint_rate=min(_incident_rate(metrics.complaint), NON_FINANCIAL_RATE_CAP),
        client_appointment_rate=min(
            calculate_rate(metrics.client_appointment, CLIENT_APPOINTMENT_TARGET),
            NON_FINANCIAL_RATE_CAP,
        ),
        nps_rate=min(calculate_rate(metrics.nps, NPS_TARGET), NON_FINANCIAL_RATE_CAP),
    )


def _uncapped(actual: float, target: float) -> float:
    # Zero target shows as 0% on screen, unlike calculate_rate
    if target == 0:
        return 0.0
    return (actual / target) * 100


def raw_financial_rates(metrics: FinancialMetrics, targets: CalculationTargets) -> Dict[str, float]:
    """Uncapped financial rates, for showing how far past a cap a metric went"""
    return {
        "investment_rate": _uncapped(metrics.investment_income, targets.investment_target),
        "insurance_rate": _uncapped(metrics.insurance_income, targets.insurance_target),
        "total_income_rate": _uncapped(metrics.total_income, targets.total_income_target),
        "ca_rate": _uncapped(metrics.ca, targets.ca_target),
        "nnm_rate": _uncapped(metrics.nnm, targets.nnm_target),
        "wealth_penetration_rate": _uncapped(metrics.wealth_penetration, targets.wealth_penetration_target),
    }


def raw_non_financial_rates(metrics: NonFinancialMetrics) -> Dict[str, float]:
    """Uncapped non-financial rates for display"""
    return {
        "risk_rate": _incident_rate(metrics.risk),
        "quality_rate": _incident_rate(metrics.quality),
        "complaint_rate": _incident_rate(metrics.complaint),
        "client_appointment_rate": _uncapped(metrics.client_appointment, CLIENT_APPOINTMENT_TARGET),
        "nps_rate": _uncapped(metrics.nps, NPS_TARGET),
    }


# Caps by rate name, used when rendering raw rates. None means uncapped.
RATE_CAPS: Dict[str, Optional[float]] = {
    "investment_rate": None,
    "insurance_rate": None,
    "total_income_rate": None,
    "ca_rate": None,
    "nnm_rate": NNM_RATE_CAP,
    "wealth_penetration_rate": WEALTH_PENETRATION_RATE_CAP,
    "risk_rate": NON_FINANCIAL_RATE_CAP,
    "quality_rate": NON_FINANCIAL_RATE_CAP,
    "complaint_rate": NON_FINANCIAL_RATE_CAP,
    "client_appointment_rate": NON_FINANCIAL_RATE_CAP,
    "nps_rate": NON_FINANCIAL_RATE_CAP,
}
