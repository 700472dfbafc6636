"""Unit tests for quarterly target derivation"""

import pytest
from bonus_gateway.domain.grades import get_grade_profile
from bonus_gateway.domain.targets import derive_targets, adjusted_bonus_base, clamp_recognition_ratio


def test_derive_targets_full_recognition(assoc):
    """Test Assoc targets at 100% recognition"""
    targets = derive_targets(assoc, 100)

    assert targets.investment_target == 825_000
    assert targets.insurance_target == 825_000
    assert targets.total_income_target == 1_650_000
    assert targets.ca_target == 12
    assert targets.nnm_target == 4_000_000  # Not tripled
    assert targets.wealth_penetration_target == 6
    assert adjusted_bonus_base(assoc, 100) == 92_400


def test_derive_targets_half_recognition(assoc):
    """Test pro-rating everything except wealth penetration"""
    targets = derive_targets(assoc, 50)

    assert targets.investment_target == 412_500  # 137,500 x 3
    assert targets.insurance_target == 412_500
    assert targets.total_income_target == 825_000
    assert targets.ca_target == 6
    assert targets.nnm_target == 2_000_000
    assert targets.wealth_penetration_target == 6  # Never pro-rated
    assert adjusted_bonus_base(assoc, 50) == 46_200


def test_derive_targets_rounds_half_up():
    """Test half of an odd monthly target rounds up, not to even"""
    profile = get_grade_profile("Sr. PRM1")  # Monthly target 1,545,000
    targets = derive_targets(profile, 0.1)

    # 1,545 monthly -> half is 772.5 -> 773 -> x3
    assert targets.investment_target == 2_319
    assert targets.insurance_target == 2_319
    assert targets.total_income_target == 4_635


def test_derive_targets_clamps_ratio(assoc):
    """Test ratios outside 0-100 are clamped"""
    assert derive_targets(assoc, 150) == derive_targets(assoc, 100)
    assert adjusted_bonus_base(assoc, 150) == 92_400

    zero = derive_targets(assoc, -10)
    assert zero.investment_target == 0
    assert zero.total_income_target == 0
    assert zero.ca_target == 0
    assert zero.nnm_target == 0
    assert zero.wealth_penetration_target == 6
    assert adjusted_bonus_base(assoc, -10) == 0


def test_derive_targets_tripled_nnm_policy(assoc):
    """Test the alternative NNM policy triples the pro-rated figure"""
    assert derive_targets(assoc, 100, triple_nnm=True).nnm_target == 12_000_000
    assert derive_targets(assoc, 50, triple_nnm=True).nnm_target == 6_000_000


@pytest.mark.parametrize("value, expected", [(-5, 0.0), (0, 0.0), (42.5, 42.5), (100, 100.0), (250, 100.0)])
def test_clamp_recognition_ratio(value, expected):
    assert clamp_recognition_ratio(value) == expected
