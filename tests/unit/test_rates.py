"""Unit tests for achievement rate calculation"""

import pytest
from bonus_gateway.domain.models import FinancialMetrics, NonFinancialMetrics, CalculationTargets
from bonus_gateway.domain.rates import (
    calculate_rate,
    check_rate_cap,
    rate_status,
    compute_financial_rates,
    compute_non_financial_rates,
    raw_financial_rates,
    raw_non_financial_rates,
)
from bonus_gateway.domain.targets import derive_targets


@pytest.mark.parametrize("target", [1, 3, 6, 12, 825_000, 4_000_000])
def test_calculate_rate_at_target_is_100(target):
    assert calculate_rate(target, target) == 100.0


@pytest.mark.parametrize("actual", [0, 1, 500, 1_000_000])
def test_calculate_rate_zero_target_is_full_credit(actual):
    assert calculate_rate(actual, 0) == 100.0


def test_calculate_rate_two_decimals():
    """Test percentage rounding to 2 decimals"""
    assert calculate_rate(1, 3) == 33.33
    assert calculate_rate(2, 3) == 66.67
    assert calculate_rate(1, 8) == 12.5
    assert calculate_rate(0, 12) == 0.0


def test_calculate_rate_monotonic():
    """Test rate never decreases as actual grows"""
    target = 825_000
    rates = [calculate_rate(actual, target) for actual in range(0, 2_000_000, 12_345)]
    assert rates == sorted(rates)


def test_financial_rates_on_target(assoc, on_target_financials):
    """Test every financial rate is 100% when actuals equal targets"""
    rates = compute_financial_rates(on_target_financials, derive_targets(assoc, 100))

    assert rates.investment_rate == 100.0
    assert rates.insurance_rate == 100.0
    assert rates.total_income_rate == 100.0
    assert rates.ca_rate == 100.0
    assert rates.nnm_rate == 100.0
    assert rates.wealth_penetration_rate == 100.0


def test_financial_rates_caps(assoc):
    """Test NNM and wealth penetration cap at 200%, the rest do not"""
    targets = derive_targets(assoc, 100)
    metrics = FinancialMetrics(
        investment_income=1_650_000,  # 200%
        insurance_income=2_475_000,  # 300%
        ca=36,  # 300%
        nnm=40_000_000,  # 1000%
        wealth_penetration=60,  # 1000%
    )

    rates = compute_financial_rates(metrics, targets)

    assert rates.investment_rate == 200.0
    assert rates.insurance_rate == 300.0
    assert rates.total_income_rate == 250.0
    assert rates.ca_rate == 300.0
    assert rates.nnm_rate == 200.0
    assert rates.wealth_penetration_rate == 200.0


def test_financial_rates_zero_targets():
    """Test zero targets give full credit rather than failing"""
    targets = CalculationTargets(0, 0, 0, 0, 0, 0)
    rates = compute_financial_rates(FinancialMetrics(), targets)

    assert rates.investment_rate == 100.0
    assert rates.nnm_rate == 100.0
    assert rates.wealth_penetration_rate == 100.0


def test_non_financial_rates_perfect(perfect_non_financials):
    rates = compute_non_financial_rates(perfect_non_financials)

    assert rates.risk_rate == 100.0
    assert rates.quality_rate == 100.0
    assert rates.complaint_rate == 100.0
    assert rates.client_appointment_rate == 100.0
    assert rates.nps_rate == 100.0


@pytest.mark.parametrize("count, expected", [(0, 100.0), (0.01, 0.0), (1, 0.0), (7, 0.0)])
def test_incident_rates_are_all_or_nothing(count, expected):
    """Test any incident zeroes risk, quality and complaint"""
    rates = compute_non_financial_rates(NonFinancialMetrics(risk=count, quality=count, complaint=count))

    assert rates.risk_rate == expected
    assert rates.quality_rate == expected
    assert rates.complaint_rate == expected


def test_non_financial_rates_partial_and_capped():
    """Test appointment and NPS are proportional and capped at 100%"""
    partial = compute_non_financial_rates(NonFinancialMetrics(client_appointment=1, nps=85))
    assert partial.client_appointment_rate == 33.33
    assert partial.nps_rate == 85.0

    over = compute_non_financial_rates(NonFinancialMetrics(client_appointment=6, nps=150))
    assert over.client_appointment_rate == 100.0
    assert over.nps_rate == 100.0


def test_check_rate_cap():
    assert check_rate_cap(250.0, 200).is_capped is True
    assert check_rate_cap(250.0, 200).display_rate == 200
    assert check_rate_cap(150.0, 200).is_capped is False
    assert check_rate_cap(150.0, 200).display_rate == 150.0
    assert check_rate_cap(200.0, 200).is_capped is False  # At cap is not over it


def test_rate_status_bands():
    """Test display bands: capped, met (>=100), near (>=70), below"""
    assert rate_status(300.0, 200) == "capped"
    assert rate_status(150.0, 200) == "met"
    assert rate_status(100.0) == "met"
    assert rate_status(70.0) == "near"
    assert rate_status(69.99) == "below"
    assert rate_status(0.0, 100) == "below"


def test_raw_rates_are_uncapped(assoc):
    """Test display rates keep values past the cap"""
    targets = derive_targets(assoc, 100)
    raw = raw_financial_rates(FinancialMetrics(nnm=12_000_000, wealth_penetration=3), targets)

    assert raw["nnm_rate"] == pytest.approx(300.0)
    assert raw["wealth_penetration_rate"] == pytest.approx(50.0)
    assert raw["investment_rate"] == 0.0

    raw_nf = raw_non_financial_rates(NonFinancialMetrics(risk=2, client_appointment=6, nps=120))
    assert raw_nf["risk_rate"] == 0.0
    assert raw_nf["client_appointment_rate"] == pytest.approx(200.0)
    assert raw_nf["nps_rate"] == pytest.approx(120.0)


def test_raw_rates_zero_target_show_zero():
    raw = raw_financial_rates(FinancialMetrics(ca=5), CalculationTargets(0, 0, 0, 0, 0, 0))
    assert raw["ca_rate"] == 0.0
