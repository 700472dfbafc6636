"""GET /v1/grades - Job grade profiles"""

from dataclasses import asdict
from fastapi import APIRouter

from bonus_gateway.api.v1.schemas import GradesResponse, GradeSchema
from bonus_gateway.domain.grades import grade_names, get_grade_profile

router = APIRouter()


@router.get("/grades", response_model=GradesResponse)
def list_grades():
    """Grade profiles in the order they are offered for selection"""
    return GradesResponse(grades=[GradeSchema(**asdict(get_grade_profile(name))) for name in grade_names()])
