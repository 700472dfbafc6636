"""Unit tests for composite score aggregation"""

import pytest
from bonus_gateway.domain.models import FinancialRates, NonFinancialRates, ScoreKind
from bonus_gateway.domain.scoring import compute_financial_score, compute_non_financial_score, compute_score


def financial_rates(**overrides) -> FinancialRates:
    values = dict(
        investment_rate=100.0,
        insurance_rate=100.0,
        total_income_rate=100.0,
        ca_rate=100.0,
        nnm_rate=100.0,
        wealth_penetration_rate=100.0,
    )
    values.update(overrides)
    return FinancialRates(**values)


def non_financial_rates(**overrides) -> NonFinancialRates:
    values = dict(risk_rate=100.0, quality_rate=100.0, complaint_rate=100.0, client_appointment_rate=100.0, nps_rate=100.0)
    values.update(overrides)
    return NonFinancialRates(**values)


def test_financial_score_all_on_target():
    assert compute_financial_score(financial_rates()) == 100.0


def test_financial_score_weights():
    """Test 25/25/20/10/20 weighting"""
    assert compute_financial_score(financial_rates(investment_rate=0.0)) == 75.0
    assert compute_financial_score(financial_rates(ca_rate=0.0)) == 80.0
    assert compute_financial_score(financial_rates(nnm_rate=0.0)) == 90.0
    assert compute_financial_score(financial_rates(wealth_penetration_rate=0.0)) == 80.0


def test_financial_score_ignores_total_income_rate():
    assert compute_financial_score(financial_rates(total_income_rate=0.0)) == 100.0


def test_financial_score_over_achievement_ceiling():
    """Test capped NNM and wealth penetration lift the score to 130"""
    rates = financial_rates(nnm_rate=200.0, wealth_penetration_rate=200.0)
    assert compute_financial_score(rates) == 130.0


def test_financial_score_rounds_two_decimals():
    # 33.33*0.25 + 66.67*0.25 + 0 + 0 + 0 = 25.0
    rates = financial_rates(investment_rate=33.33, insurance_rate=66.67, ca_rate=0.0, nnm_rate=0.0, wealth_penetration_rate=0.0)
    assert compute_financial_score(rates) == 25.0


def test_non_financial_score_perfect_nps_bonus_weight():
    """Test perfect NPS is weighted 25% on top of four 20% weights"""
    assert compute_non_financial_score(non_financial_rates()) == 105.0


def test_non_financial_score_equal_weights_below_perfect_nps():
    assert compute_non_financial_score(non_financial_rates(nps_rate=90.0)) == 98.0
    assert compute_non_financial_score(non_financial_rates(nps_rate=99.99)) == 100.0  # 80 + 19.998


def test_non_financial_score_incident_zeroes_a_fifth():
    rates = non_financial_rates(risk_rate=0.0, nps_rate=80.0)
    assert compute_non_financial_score(rates) == 76.0


def test_compute_score_dispatch():
    assert compute_score(financial_rates(), ScoreKind.FINANCIAL) == 100.0
    assert compute_score(non_financial_rates(), ScoreKind.NON_FINANCIAL) == 105.0
    assert compute_score(non_financial_rates(nps_rate=50.0), "non_financial") == 90.0


def test_compute_score_rejects_mismatched_rates():
    with pytest.raises(TypeError):
        compute_score(non_financial_rates(), ScoreKind.FINANCIAL)
    with pytest.raises(TypeError):
        compute_score(financial_rates(), ScoreKind.NON_FINANCIAL)
