"""Job grade profile table"""

from types import MappingProxyType
from typing import List, Mapping
from bonus_gateway.domain.models import GradeProfile
from bonus_gateway.domain.exceptions import UnknownGradeError


def _build_table(*profiles: GradeProfile) -> Mapping[str, GradeProfile]:
    return MappingProxyType({p.name: p for p in profiles})


# Read-only after import. Order matters: it is the order grades are offered to users.
GRADE_PROFILES: Mapping[str, GradeProfile] = _build_table(
    GradeProfile("Assoc", bonus_base=92_400, monthly_target=550_000, nnm_target=4_000_000, ca_target=4, wealth_penetration_target=2),
    GradeProfile("PRM2", bonus_base=134_904, monthly_target=770_000, nnm_target=7_000_000, ca_target=3, wealth_penetration_target=2),
    GradeProfile("PRM1", bonus_base=180_576, monthly_target=990_000, nnm_target=8_500_000, ca_target=3, wealth_penetration_target=2),
    GradeProfile("Sr. PRM2", bonus_base=286_200, monthly_target=1_325_000, nnm_target=10_000_000, ca_target=3, wealth_penetration_target=2),
    GradeProfile("Sr. PRM1", bonus_base=344_844, monthly_target=1_545_000, nnm_target=11_500_000, ca_target=3, wealth_penetration_target=2),
    GradeProfile("AVP", bonus_base=406_656, monthly_target=1_765_000, nnm_target=13_000_000, ca_target=2, wealth_penetration_target=2),
    GradeProfile("VP", bonus_base=582_120, monthly_target=2_205_000, nnm_target=14_500_000, ca_target=2, wealth_penetration_target=2),
    GradeProfile("Director2", bonus_base=863_880, monthly_target=3_130_000, nnm_target=16_000_000, ca_target=2, wealth_penetration_target=2),
    GradeProfile("Director1", bonus_base=1_203_840, monthly_target=4_180_000, nnm_target=17_500_000, ca_target=2, wealth_penetration_target=2),
)


def grade_names() -> List[str]:
    """Known grade names in table order"""
    return list(GRADE_PROFILES)


def get_grade_profile(name: str) -> GradeProfile:
    """
    Look up a grade profile by name.

    Raises:
        UnknownGradeError: If the grade is not in the table
    """
    try:
        return GRADE_PROFILES[name]
    except KeyError:
        raise UnknownGradeError(f"Unknown grade: {name!r}") from None
