"""Data access layer for calculation records"""

import uuid
from dataclasses import asdict
from typing import List, Optional
from sqlalchemy.orm import Session
from bonus_gateway.infrastructure.database.models import CalculationRecord
from bonus_gateway.domain.models import BonusEvaluation, FinancialMetrics, NonFinancialMetrics
from bonus_gateway.domain.exceptions import RecordNotFoundError

# Columns a caller may change after a record is saved
UPDATABLE_FIELDS = {"note"}


class RecordRepository:
    """Repository for calculation records"""

    def __init__(self, db: Session):
        self.db = db

    def create_record(
        self,
        evaluation: BonusEvaluation,
        financial_metrics: FinancialMetrics,
        non_financial_metrics: NonFinancialMetrics,
        note: Optional[str] = None,
    ) -> CalculationRecord:
        """Persist a calculation; id and timestamp are assigned by the store"""
        result = evaluation.result
        db_record = CalculationRecord(
            grade=evaluation.grade,
            recognition_ratio=evaluation.recognition_ratio,
            financial_metrics=asdict(financial_metrics),
            non_financial_metrics=asdict(non_financial_metrics),
            financial_score=result.financial_score,
            non_financial_score=result.non_financial_score,
            base_bonus=result.base_bonus,
            final_bonus=result.final_bonus,
            penalties=list(result.penalties),
            note=note,
        )
        self.db.add(db_record)
        self.db.flush()  # Get ID without committing
        return db_record

    def list_records(self, limit: int = 20) -> List[CalculationRecord]:
        """Fetch most recent records first"""
        return (
            self.db.query(CalculationRecord)
            .order_by(CalculationRecord.created_at.desc(), CalculationRecord.id.desc())
            .limit(limit)
            .all()
        )

    def get_record(self, record_id: uuid.UUID) -> Optional[CalculationRecord]:
        """Fetch a single record, or None"""
        return (
            self.db.query(CalculationRecord)
            .filter(CalculationRecord.id == record_id)
            .first()
        )

    def update_record(self, record_id: uuid.UUID, **updates) -> CalculationRecord:
        """
        Apply field updates to a saved record.

        Raises:
            RecordNotFoundError: If no record has this id
            ValueError: If a field is not updatable
        """
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

        db_record = self.get_record(record_id)
        if db_record is None:
            raise RecordNotFoundError(f"Record {record_id} not found")

        for name, value in updates.items():
            setattr(db_record, name, value)
        self.db.flush()
        return db_record

    def delete_record(self, record_id: uuid.UUID) -> None:
        """
        Remove a saved record.

        Raises:
            RecordNotFoundError: If no record has this id
        """
        db_record = self.get_record(record_id)
        if db_record is None:
            raise RecordNotFoundError(f"Record {record_id} not found")

        self.db.delete(db_record)
        self.db.flush()
