"""SQLAlchemy ORM models for persisted calculation records"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, BigInteger, Float, DateTime, Text, JSON, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CalculationRecord(Base):
    """One saved bonus calculation: inputs, scores and result"""

    __tablename__ = "calculation_record"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    grade = Column(String(64), nullable=False, index=True)
    recognition_ratio = Column(Float, nullable=False)
    financial_metrics = Column(JSON, nullable=False)
    non_financial_metrics = Column(JSON, nullable=False)
    financial_score = Column(Float, nullable=False)
    non_financial_score = Column(Float, nullable=False)
    base_bonus = Column(BigInteger, nullable=False)
    final_bonus = Column(BigInteger, nullable=False)
    penalties = Column(JSON, nullable=False, default=list)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, server_default=func.now(), index=True)
