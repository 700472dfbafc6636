"""Bonus resolution - core business logic for quarterly bonus payouts"""

from bonus_gateway.domain.models import (
    GradeProfile,
    FinancialMetrics,
    NonFinancialMetrics,
    CalculationTargets,
    BonusResult,
    BonusEvaluation,
)
from bonus_gateway.domain.targets import derive_targets, adjusted_bonus_base, clamp_recognition_ratio
from bonus_gateway.domain.rates import compute_financial_rates, compute_non_financial_rates
from bonus_gateway.domain.scoring import compute_financial_score, compute_non_financial_score
from bonus_gateway.utils.number_utils import round_half_up, round_to_int

SCORE_FLOOR = 70.0

SCORE_FLOOR_PENALTY = "financial or non-financial score below 70%"
CA_NNM_SHORTFALL_PENALTY = "CA and NNM both below target (-10%)"
INCOME_SHORTFALL_PENALTY = "total income below performance target (-50%)"

CA_NNM_SHORTFALL_FACTOR = 0.9
INCOME_SHORTFALL_FACTOR = 0.5


def resolve_bonus(
    bonus_base: float,
    financial_score: float,
    non_financial_score: float,
    metrics: FinancialMetrics,
    targets: CalculationTargets,
) -> BonusResult:
    """
    Turn composite scores into a bonus and apply penalty rules.

    Rules, checked in order:
    1. Either score below 70: no bonus at all, nothing else is checked
    2. Base bonus = bonus base x financial% x non-financial%
    3. CA and NNM both strictly below target: -10%
    4. Investment + insurance income below total income target: -50%

    Rules 3 and 4 compound. Comparisons use raw actuals against targets,
    not rates. Bonus figures are rounded only at the end.
    """
    if financial_score < SCORE_FLOOR or non_financial_score < SCORE_FLOOR:
        return BonusResult(
            financial_score=financial_score,
            non_financial_score=non_financial_score,
            base_bonus=0,
            final_bonus=0,
            penalties=[SCORE_FLOOR_PENALTY],
        )

    penalties = []
    base_bonus = bonus_base * (financial_score / 100) * (non_financial_score / 100)
    final_bonus = base_bonus

    if metrics.ca < targets.ca_target and metrics.nnm < targets.nnm_target:
        final_bonus *= CA_NNM_SHORTFALL_FACTOR
        penalties.append(CA_NNM_SHORTFALL_PENALTY)

    if metrics.total_income < targets.total_income_target:
        final_bonus *= INCOME_SHORTFALL_FACTOR
        penalties.append(INCOME_SHORTFALL_PENALTY)

    return BonusResult(
        financial_score=financial_score,
        non_financial_score=non_financial_score,
        base_bonus=round_to_int(base_bonus),
        final_bonus=round_to_int(final_bonus),
        penalties=penalties,
    )


def disbursal_ratio(final_bonus: float, total_income: float) -> float:
    """Final bonus as a percentage of total income, 0.0 when there is no income"""
    if total_income <= 0:
        return 0.0
    return round_half_up(final_bonus / total_income * 100, 2)


def evaluate_bonus(
    profile: GradeProfile,
    recognition_ratio: float,
    financial_metrics: FinancialMetrics,
    non_financial_metrics: NonFinancialMetrics,
    *,
    triple_nnm: bool = False,
) -> BonusEvaluation:
    """
    Main entry point: derive targets, rate every metric, score and resolve the bonus.

    Returns complete BonusEvaluation with targets, rates and result.
    """
    recognition_ratio = clamp_recognition_ratio(recognition_ratio)
    targets = derive_targets(profile, recognition_ratio, triple_nnm=triple_nnm)
    bonus_base = adjusted_bonus_base(profile, recognition_ratio)

    financial_rates = compute_financial_rates(financial_metrics, targets)
    non_financial_rates = compute_non_financial_rates(non_financial_metrics)

    result = resolve_bonus(
        bonus_base,
        compute_financial_score(financial_rates),
        compute_non_financial_score(non_financial_rates),
        financial_metrics,
        targets,
    )

    return BonusEvaluation(
        grade=profile.name,
        recognition_ratio=recognition_ratio,
        bonus_base=bonus_base,
        targets=targets,
        financial_rates=financial_rates,
        non_financial_rates=non_financial_rates,
        result=result,
    )
