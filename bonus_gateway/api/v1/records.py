"""/v1/records - Saved calculation history"""

import time
import uuid
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.orm import Session

from bonus_gateway.api.v1.schemas import (
    RecordCreateRequest,
    RecordUpdateRequest,
    RecordResponse,
    RecordListResponse,
    FinancialMetricsSchema,
    NonFinancialMetricsSchema,
)
from bonus_gateway.api.v1.calculation import run_calculation
from bonus_gateway.api.dependencies import get_request_id, get_triple_nnm, get_record_repository
from bonus_gateway.config import settings
from bonus_gateway.domain.exceptions import UnknownGradeError, RecordNotFoundError
from bonus_gateway.infrastructure.database.models import CalculationRecord
from bonus_gateway.infrastructure.database.repositories import RecordRepository
from bonus_gateway.infrastructure.database.session import get_db

router = APIRouter()


def parse_record_id(record_id: str) -> uuid.UUID:
    """Validate a record id path parameter"""
    try:
        return uuid.UUID(record_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid record ID format")


def to_record_response(record: CalculationRecord) -> RecordResponse:
    return RecordResponse(
        record_id=str(record.id),
        grade=record.grade,
        recognition_ratio=record.recognition_ratio,
        financial_metrics=FinancialMetricsSchema(**record.financial_metrics),
        non_financial_metrics=NonFinancialMetricsSchema(**record.non_financial_metrics),
        financial_score=record.financial_score,
        non_financial_score=record.non_financial_score,
        base_bonus=record.base_bonus,
        final_bonus=record.final_bonus,
        penalties=list(record.penalties or []),
        note=record.note,
        created_at=record.created_at.isoformat(),
    )


@router.post("/records", response_model=RecordResponse, status_code=201)
def create_record(
    body: RecordCreateRequest,
    request: Request,
    db: Session = Depends(get_db),
    triple_nnm: bool = Depends(get_triple_nnm),
):
    """
    Calculate a bonus and save it to history.

    Flow:
    1. Resolve the grade profile and run the calculation
    2. Persist inputs, scores and result
    3. Return the stored record with its assigned id and timestamp
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        evaluation = run_calculation(body, request_id, triple_nnm)

        record_repo = RecordRepository(db)
        db_record = record_repo.create_record(
            evaluation,
            body.financial_metrics.to_domain(),
            body.non_financial_metrics.to_domain(),
            note=body.note,
        )
        db.commit()

        logging.info(
            "Record saved",
            extra={
                "request_id": request_id,
                "record_id": str(db_record.id),
                "step": "record_saved",
                "duration_ms": (time.time() - start_time) * 1000,
            },
        )
        return to_record_response(db_record)

    except UnknownGradeError as e:
        db.rollback()
        logging.warning(f"Unknown grade: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error saving record: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/records", response_model=RecordListResponse)
def list_records(
    limit: int = Query(settings.history_page_size, ge=1, le=200, description="Maximum records to return"),
    record_repo: RecordRepository = Depends(get_record_repository),
):
    """Saved records, newest first"""
    return RecordListResponse(records=[to_record_response(r) for r in record_repo.list_records(limit=limit)])


@router.get("/records/{record_id}", response_model=RecordResponse)
def get_record(record_id: str, record_repo: RecordRepository = Depends(get_record_repository)):
    """Retrieve one saved record"""
    record = record_repo.get_record(parse_record_id(record_id))

    if not record:
        raise HTTPException(status_code=404, detail="Record not found")

    return to_record_response(record)


@router.patch("/records/{record_id}", response_model=RecordResponse)
def update_record(
    record_id: str,
    body: RecordUpdateRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """Update the note on a saved record; omitted fields are left as they are"""
    record_uuid = parse_record_id(record_id)
    request_id = get_request_id(request)

    try:
        updates = body.model_dump(exclude_unset=True)
        db_record = RecordRepository(db).update_record(record_uuid, **updates)
        db.commit()
    except RecordNotFoundError as e:
        db.rollback()
        logging.warning(f"Update of missing record: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail="Record not found")

    return to_record_response(db_record)


@router.delete("/records/{record_id}", status_code=204)
def delete_record(record_id: str, request: Request, db: Session = Depends(get_db)):
    """Delete a saved record"""
    record_uuid = parse_record_id(record_id)
    request_id = get_request_id(request)

    try:
        RecordRepository(db).delete_record(record_uuid)
        db.commit()
    except RecordNotFoundError as e:
        db.rollback()
        logging.warning(f"Delete of missing record: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail="Record not found")

    logging.info("Record deleted", extra={"request_id": request_id, "record_id": record_id})
    return Response(status_code=204)
