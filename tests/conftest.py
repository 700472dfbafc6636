"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from bonus_gateway.api.main import create_app
from bonus_gateway.infrastructure.database.models import Base
from bonus_gateway.infrastructure.database.session import get_db
from bonus_gateway.domain.grades import get_grade_profile
from bonus_gateway.domain.models import GradeProfile, FinancialMetrics, NonFinancialMetrics


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def assoc() -> GradeProfile:
    """Entry grade: QTI 92,400, monthly target 550,000, NNM 4M, CA 4, WP 2"""
    return get_grade_profile("Assoc")


@pytest.fixture
def on_target_financials() -> FinancialMetrics:
    """Assoc actuals exactly at 100% recognition targets"""
    return FinancialMetrics(
        investment_income=825_000,
        insurance_income=825_000,
        ca=12,
        nnm=4_000_000,
        wealth_penetration=6,
    )


@pytest.fixture
def perfect_non_financials() -> NonFinancialMetrics:
    """No incidents, 3 appointments, NPS 100"""
    return NonFinancialMetrics(risk=0, quality=0, complaint=0, client_appointment=3, nps=100)


@pytest.fixture
def calculation_payload() -> dict:
    """Request body for an on-target Assoc quarter"""
    return {
        "grade": "Assoc",
        "recognition_ratio": 100,
        "financial_metrics": {
            "investment_income": 825000,
            "insurance_income": 825000,
            "ca": 12,
            "nnm": 4000000,
            "wealth_penetration": 6,
        },
        "non_financial_metrics": {
            "risk": 0,
            "quality": 0,
            "complaint": 0,
            "client_appointment": 3,
            "nps": 100,
        },
    }
