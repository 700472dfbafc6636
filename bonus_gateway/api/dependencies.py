"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from bonus_gateway.config import settings
from bonus_gateway.infrastructure.database.session import get_db
from bonus_gateway.infrastructure.database.repositories import RecordRepository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_triple_nnm() -> bool:
    """NNM target policy for this deployment"""
    return settings.nnm_target_tripled


def get_record_repository(db: Session = Depends(get_db)) -> RecordRepository:
    """Provide a record repository bound to the request's session"""
    return RecordRepository(db)
