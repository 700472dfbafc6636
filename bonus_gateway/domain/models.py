"""Domain models - pure Python dataclasses representing bonus calculation entities"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


@dataclass(frozen=True)
class GradeProfile:
    """Base targets for one job grade"""

    name: str
    bonus_base: int  # QTI: maximum quarterly bonus before score multipliers
    monthly_target: int
    nnm_target: int
    ca_target: int
    wealth_penetration_target: int


@dataclass(frozen=True)
class FinancialMetrics:
    """Quarterly financial actuals"""

    investment_income: float = 0.0
    insurance_income: float = 0.0
    ca: float = 0.0
    nnm: float = 0.0
    wealth_penetration: float = 0.0

    @property
    def total_income(self) -> float:
        return self.investment_income + self.insurance_income


@dataclass(frozen=True)
class NonFinancialMetrics:
    """Quarterly non-financial actuals"""

    risk: float = 0.0  # incident count
    quality: float = 0.0  # incident count
    complaint: float = 0.0  # incident count
    client_appointment: float = 0.0
    nps: float = 0.0


@dataclass(frozen=True)
class CalculationTargets:
    """Quarterly targets derived from a grade profile and recognition ratio"""

    investment_target: float
    insurance_target: float
    total_income_target: float
    ca_target: float
    nnm_target: float
    wealth_penetration_target: float


@dataclass(frozen=True)
class FinancialRates:
    """Achievement rates (percent) for the financial metrics"""

    investment_rate: float
    insurance_rate: float
    total_income_rate: float
    ca_rate: float
    nnm_rate: float
    wealth_penetration_rate: float


@dataclass(frozen=True)
class NonFinancialRates:
    """Achievement rates (percent) for the non-financial metrics"""

    risk_rate: float
    quality_rate: float
    complaint_rate: float
    client_appointment_rate: float
    nps_rate: float


class ScoreKind(str, Enum):
    """Which composite score to compute"""

    FINANCIAL = "financial"
    NON_FINANCIAL = "non_financial"


@dataclass(frozen=True)
class RateCap:
    """Result of comparing a raw rate against its cap"""

    is_capped: bool
    display_rate: float


@dataclass(frozen=True)
class BonusResult:
    """Output of bonus resolution"""

    financial_score: float
    non_financial_score: float
    base_bonus: int
    final_bonus: int
    penalties: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class BonusEvaluation:
    """Everything computed for one evaluation, from targets to final bonus"""

    grade: str
    recognition_ratio: float
    bonus_base: int
    targets: CalculationTargets
    financial_rates: FinancialRates
    non_financial_rates: NonFinancialRates
    result: BonusResult
