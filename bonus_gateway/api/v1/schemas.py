"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional

from bonus_gateway.domain.models import FinancialMetrics, NonFinancialMetrics
from bonus_gateway.utils.number_utils import parse_number


class FinancialMetricsSchema(BaseModel):
    """Quarterly financial actuals; numbers or numeric strings, blanks count as 0"""

    investment_income: float = Field(0.0, ge=0)
    insurance_income: float = Field(0.0, ge=0)
    ca: float = Field(0.0, ge=0)
    nnm: float = Field(0.0, ge=0)
    wealth_penetration: float = Field(0.0, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def coerce_number(cls, value):
        return parse_number(value)

    def to_domain(self) -> FinancialMetrics:
        return FinancialMetrics(**self.model_dump())


class NonFinancialMetricsSchema(BaseModel):
    """Quarterly non-financial actuals; numbers or numeric strings, blanks count as 0"""

    risk: float = Field(0.0, ge=0)
    quality: float = Field(0.0, ge=0)
    complaint: float = Field(0.0, ge=0)
    client_appointment: float = Field(0.0, ge=0)
    nps: float = Field(0.0, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def coerce_number(cls, value):
        return parse_number(value)

    def to_domain(self) -> NonFinancialMetrics:
        return NonFinancialMetrics(**self.model_dump())


class CalculationRequest(BaseModel):
    """Request body for POST /v1/calculation"""

    grade: str = Field(..., min_length=1, description="Job grade name")
    recognition_ratio: float = Field(100.0, description="Percentage of the period credited, clamped to 0-100")
    financial_metrics: FinancialMetricsSchema = Field(default_factory=FinancialMetricsSchema)
    non_financial_metrics: NonFinancialMetricsSchema = Field(default_factory=NonFinancialMetricsSchema)

    @field_validator("recognition_ratio", mode="before")
    @classmethod
    def coerce_ratio(cls, value):
        return parse_number(value, default=100.0)


class RecordCreateRequest(CalculationRequest):
    """Request body for POST /v1/records"""

    note: Optional[str] = Field(None, max_length=500)


class RecordUpdateRequest(BaseModel):
    """Request body for PATCH /v1/records/{record_id}"""

    note: Optional[str] = Field(None, max_length=500)


class TargetsSchema(BaseModel):
    """Derived quarterly targets"""

    investment_target: float
    insurance_target: float
    total_income_target: float
    ca_target: float
    nnm_target: float
    wealth_penetration_target: float


class RateSchema(BaseModel):
    """Achievement rate of one metric"""

    rate: float  # value used for scoring
    raw_rate: float  # uncapped
    display_rate: float  # raw rate, or the cap when it is exceeded
    cap: Optional[float] = None
    is_capped: bool = False
    status: str  # capped | met | near | below


class CalculationResponse(BaseModel):
    """Response for POST /v1/calculation"""

    grade: str
    recognition_ratio: float
    bonus_base: int
    targets: TargetsSchema
    financial_rates: Dict[str, RateSchema]
    non_financial_rates: Dict[str, RateSchema]
    financial_score: float
    non_financial_score: float
    base_bonus: int
    final_bonus: int
    penalties: List[str]


class RecordResponse(BaseModel):
    """A saved calculation record"""

    record_id: str
    grade: str
    recognition_ratio: float
    financial_metrics: FinancialMetricsSchema
    non_financial_metrics: NonFinancialMetricsSchema
    financial_score: float
    non_financial_score: float
    base_bonus: int
    final_bonus: int
    penalties: List[str]
    note: Optional[str] = None
    created_at: str


class RecordListResponse(BaseModel):
    """Response for GET /v1/records"""

    records: List[RecordResponse]


class GradeSchema(BaseModel):
    """Base targets of one job grade"""

    name: str
    bonus_base: int
    monthly_target: int
    nnm_target: int
    ca_target: int
    wealth_penetration_target: int


class GradesResponse(BaseModel):
    """Response for GET /v1/grades"""

    grades: List[GradeSchema]
