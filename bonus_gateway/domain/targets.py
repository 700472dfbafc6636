"""Quarterly target derivation from a grade profile and recognition ratio"""

from bonus_gateway.domain.models import GradeProfile, CalculationTargets
from bonus_gateway.utils.number_utils import round_to_int

QUARTER_MONTHS = 3


def clamp_recognition_ratio(value: float) -> float:
    """Clamp a recognition ratio percentage to [0, 100]"""
    return max(0.0, min(float(value), 100.0))


def adjusted_bonus_base(profile: GradeProfile, recognition_ratio: float) -> int:
    """Grade bonus base (QTI) pro-rated by the recognition ratio"""
    ratio = clamp_recognition_ratio(recognition_ratio) / 100
    return round_to_int(profile.bonus_base * ratio)


def derive_targets(
    profile: GradeProfile,
    recognition_ratio: float,
    *,
    triple_nnm: bool = False,
) -> CalculationTargets:
    """
    Derive the quarterly targets used for achievement rates.

    Rules:
    - Monthly performance target is pro-rated and rounded first
    - Investment and insurance each get half of it, rounded, times 3
    - Total income target is the pro-rated monthly target times 3
    - CA target is pro-rated and tripled, then rounded
    - NNM target is pro-rated only; the grade figure is already quarterly.
      ``triple_nnm`` switches to the alternative policy of tripling it too
    - Wealth penetration is tripled and never pro-rated

    Args:
        profile: Grade profile to derive from
        recognition_ratio: Percentage credited for the period (clamped to 0-100)
        triple_nnm: Apply the tripled NNM policy

    Example:
        Assoc at 100% -> investment 825,000, insurance 825,000,
        total income 1,650,000, CA 12, NNM 4,000,000, wealth penetration 6
    """
    ratio = clamp_recognition_ratio(recognition_ratio) / 100

    adjusted_monthly = round_to_int(profile.monthly_target * ratio)
    half_monthly = round_to_int(adjusted_monthly * 0.5)

    nnm_months = QUARTER_MONTHS if triple_nnm else 1

    return CalculationTargets(
        investment_target=half_monthly * QUARTER_MONTHS,
        insurance_target=half_monthly * QUARTER_MONTHS,
        total_income_target=adjusted_monthly * QUARTER_MONTHS,
        ca_target=round_to_int(profile.ca_target * ratio * QUARTER_MONTHS),
        nnm_target=round_to_int(profile.nnm_target * ratio * nnm_months),
        wealth_penetration_target=profile.wealth_penetration_target * QUARTER_MONTHS,
    )
