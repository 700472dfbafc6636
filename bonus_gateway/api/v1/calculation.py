"""POST /v1/calculation - Live bonus calculation preview"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from bonus_gateway.api.v1.schemas import CalculationRequest, CalculationResponse, RateSchema, TargetsSchema
from bonus_gateway.api.dependencies import get_request_id, get_triple_nnm
from bonus_gateway.domain.bonus import evaluate_bonus
from bonus_gateway.domain.exceptions import UnknownGradeError
from bonus_gateway.domain.grades import get_grade_profile
from bonus_gateway.domain.models import BonusEvaluation, RateCap
from bonus_gateway.domain.rates import (
    RATE_CAPS,
    check_rate_cap,
    rate_status,
    raw_financial_rates,
    raw_non_financial_rates,
)
from bonus_gateway.infrastructure.observability.metrics import record_calculation
from bonus_gateway.utils.number_utils import round_half_up
from bonus_gateway.infrastructure.observability.logging import log_calculation

router = APIRouter()


def run_calculation(body: CalculationRequest, request_id: str, triple_nnm: bool) -> BonusEvaluation:
    """
    Evaluate a request body, recording metrics and a structured log line.

    Raises:
        UnknownGradeError: If the grade is not in the grade table
    """
    start_time = time.time()

    profile = get_grade_profile(body.grade)
    evaluation = evaluate_bonus(
        profile,
        body.recognition_ratio,
        body.financial_metrics.to_domain(),
        body.non_financial_metrics.to_domain(),
        triple_nnm=triple_nnm,
    )

    result = evaluation.result
    duration_ms = (time.time() - start_time) * 1000
    record_calculation(result)
    log_calculation(
        request_id,
        evaluation.grade,
        result.financial_score,
        result.non_financial_score,
        result.final_bonus,
        len(result.penalties),
        duration_ms,
    )
    return evaluation


def _rate_schemas(scored: dict, raw: dict) -> dict:
    schemas = {}
    for name, rate in scored.items():
        cap = RATE_CAPS[name]
        raw_rate = round_half_up(raw[name], 2)
        shown = check_rate_cap(raw_rate, cap) if cap is not None else RateCap(is_capped=False, display_rate=raw_rate)
        schemas[name] = RateSchema(
            rate=rate,
            raw_rate=raw_rate,
            display_rate=shown.display_rate,
            cap=cap,
            is_capped=shown.is_capped,
            status=rate_status(raw_rate, cap),
        )
    return schemas


def build_calculation_response(body: CalculationRequest, evaluation: BonusEvaluation) -> CalculationResponse:
    """Shape an evaluation for the API, pairing each scored rate with its raw display rate"""
    financial_metrics = body.financial_metrics.to_domain()
    non_financial_metrics = body.non_financial_metrics.to_domain()
    result = evaluation.result

    return CalculationResponse(
        grade=evaluation.grade,
        recognition_ratio=evaluation.recognition_ratio,
        bonus_base=evaluation.bonus_base,
        targets=TargetsSchema(**asdict(evaluation.targets)),
        financial_rates=_rate_schemas(
            asdict(evaluation.financial_rates),
            raw_financial_rates(financial_metrics, evaluation.targets),
        ),
        non_financial_rates=_rate_schemas(
            asdict(evaluation.non_financial_rates),
            raw_non_financial_rates(non_financial_metrics),
        ),
        financial_score=result.financial_score,
        non_financial_score=result.non_financial_score,
        base_bonus=result.base_bonus,
        final_bonus=result.final_bonus,
        penalties=list(result.penalties),
    )


@router.post("/calculation", response_model=CalculationResponse)
def calculate(
    body: CalculationRequest,
    request: Request,
    triple_nnm: bool = Depends(get_triple_nnm),
):
    """
    Compute targets, achievement rates, scores and bonus without saving.

    Called on every form change, so it must stay side-effect free apart
    from metrics and logs.
    """
    request_id = get_request_id(request)

    try:
        evaluation = run_calculation(body, request_id, triple_nnm)
    except UnknownGradeError as e:
        logging.warning(f"Unknown grade: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    return build_calculation_response(body, evaluation)
