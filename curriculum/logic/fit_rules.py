"""
Fit Rules

Individual rules scoring how well a curriculum standard fits a user context.
Each rule either does not fire (returns None) or returns a RuleOutcome with
confidence points, exactly one reason and any expected outcomes.
All logic is deterministic - no AI/ML components.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .contracts import CurriculumStandard, UserContext
from .constants import (
    Region,
    Priority,
    ImplementationComplexity,
    SchoolType,
    Language,
    TeachingExperience,
    ResourceAvailability,
    NATIONAL_FRAMEWORK_ID,
    CENTRAL_BOARD_ID,
    BOARD_EXAM_IDS,
    INTERNATIONALLY_RECOGNIZED_IDS,
    INDIA_LOCATION_KEYWORD,
    INDIA_ISO_CODE,
    GEOGRAPHIC_WEIGHTS,
    SCHOOL_TYPE_WEIGHTS,
    LANGUAGE_WEIGHTS,
    GRADE_WEIGHTS,
    PRIMARY_GRADE_MAX,
    SECONDARY_GRADE_MIN,
    EXPERIENCE_WEIGHT,
    RESOURCE_WEIGHT,
)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


@dataclass
class RuleOutcome:
    """Contribution of a single rule that fired."""
    points: int
    reason: str
    expected_outcomes: List[str] = field(default_factory=list)
    priority: Optional[Priority] = None
    implementation_complexity: Optional[ImplementationComplexity] = None


FitRule = Callable[[CurriculumStandard, UserContext], Optional[RuleOutcome]]


def is_india(location: str) -> bool:
    """Case-insensitive 'india' substring, or the exact ISO code."""
    return INDIA_LOCATION_KEYWORD in location.lower() or location == INDIA_ISO_CODE


def parse_grade(grade_level: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a grade string ("9", " 10th").
    Returns None when there is nothing to parse.
    """
    if not grade_level:
        return None
    match = _LEADING_INT.match(grade_level)
    if not match:
        return None
    return int(match.group(1))


def score_geographic_fit(
    standard: CurriculumStandard,
    context: UserContext
) -> Optional[RuleOutcome]:
    """
    Score geographic and cultural alignment. This is the dominant factor.
    """
    if is_india(context.location):
        if standard.region == Region.NATIONAL:
            return RuleOutcome(
                points=GEOGRAPHIC_WEIGHTS["india_national"],
                reason="Designed specifically for Indian educational ecosystem",
                expected_outcomes=["Seamless integration with existing Indian school systems"],
                priority=Priority.PRIMARY,
                implementation_complexity=ImplementationComplexity.LOW,
            )
        return RuleOutcome(
            points=GEOGRAPHIC_WEIGHTS["india_international"],
            reason="Provides valuable international perspective",
            expected_outcomes=["Enhanced global awareness for students"],
            priority=Priority.SECONDARY,
            implementation_complexity=ImplementationComplexity.HIGH,
        )

    if standard.region == Region.INTERNATIONAL:
        return RuleOutcome(
            points=GEOGRAPHIC_WEIGHTS["global_international"],
            reason="International standard suitable for global schools",
            priority=Priority.PRIMARY,
        )
    return None


def score_school_type_fit(
    standard: CurriculumStandard,
    context: UserContext
) -> Optional[RuleOutcome]:
    """
    Score alignment with the kind of school.

    Government schools follow the national framework, with a smaller bonus
    for the central board built on top of it. Private schools lean towards
    board exams; international schools towards globally recognized programs.
    """
    if context.school_type == SchoolType.GOVERNMENT:
        if standard.id == NATIONAL_FRAMEWORK_ID:
            return RuleOutcome(
                points=SCHOOL_TYPE_WEIGHTS["government_national_framework"],
                reason="NCERT is the official framework for government schools",
                expected_outcomes=["Direct alignment with government education policies"],
            )
        if standard.id == CENTRAL_BOARD_ID:
            return RuleOutcome(
                points=SCHOOL_TYPE_WEIGHTS["government_central_board"],
                reason="CBSE builds upon NCERT foundation",
            )
    elif context.school_type == SchoolType.PRIVATE:
        if standard.id in BOARD_EXAM_IDS:
            return RuleOutcome(
                points=SCHOOL_TYPE_WEIGHTS["private_board_exam"],
                reason="Widely adopted by private schools for board exam preparation",
                expected_outcomes=["Strong board exam performance"],
            )
    elif context.school_type == SchoolType.INTERNATIONAL:
        if standard.id in INTERNATIONALLY_RECOGNIZED_IDS:
            return RuleOutcome(
                points=SCHOOL_TYPE_WEIGHTS["international_recognized"],
                reason="Internationally recognized for student mobility",
                expected_outcomes=["Global university admission advantages"],
                implementation_complexity=ImplementationComplexity.HIGH,
            )
    return None


def score_language_fit(
    standard: CurriculumStandard,
    context: UserContext
) -> Optional[RuleOutcome]:
    if context.language == Language.HINDI and standard.region == Region.NATIONAL:
        return RuleOutcome(
            points=LANGUAGE_WEIGHTS["hindi_national"],
            reason="Strong Hindi language support and cultural integration",
            expected_outcomes=["Better student comprehension in native language"],
        )
    if context.language == Language.ENGLISH and standard.region == Region.INTERNATIONAL:
        return RuleOutcome(
            points=LANGUAGE_WEIGHTS["english_international"],
            reason="English-medium instruction with global perspective",
        )
    return None


def score_grade_fit(
    standard: CurriculumStandard,
    context: UserContext
) -> Optional[RuleOutcome]:
    """
    Primary grades favor the national framework, secondary grades the
    board-exam curricula. An unparseable grade never fires.
    """
    grade = parse_grade(context.grade_level)
    if grade is None:
        return None

    if grade <= PRIMARY_GRADE_MAX and standard.id == NATIONAL_FRAMEWORK_ID:
        return RuleOutcome(
            points=GRADE_WEIGHTS["primary_national_framework"],
            reason="NCERT provides excellent foundation for primary education",
            expected_outcomes=["Strong conceptual foundation building"],
        )
    if grade >= SECONDARY_GRADE_MIN and standard.id in BOARD_EXAM_IDS:
        return RuleOutcome(
            points=GRADE_WEIGHTS["secondary_board_exam"],
            reason="Optimized for board exam preparation",
            expected_outcomes=["Enhanced board exam performance"],
        )
    return None


def score_experience_fit(
    standard: CurriculumStandard,
    context: UserContext
) -> Optional[RuleOutcome]:
    if context.teaching_experience == TeachingExperience.BEGINNER and standard.id == NATIONAL_FRAMEWORK_ID:
        return RuleOutcome(
            points=EXPERIENCE_WEIGHT,
            reason="NCERT provides comprehensive teacher support materials",
            implementation_complexity=ImplementationComplexity.LOW,
        )
    if context.teaching_experience == TeachingExperience.EXPERT and standard.region == Region.INTERNATIONAL:
        return RuleOutcome(
            points=EXPERIENCE_WEIGHT,
            reason="International standards offer advanced pedagogical approaches",
        )
    return None


def score_resource_fit(
    standard: CurriculumStandard,
    context: UserContext
) -> Optional[RuleOutcome]:
    if context.resource_availability == ResourceAvailability.LIMITED and standard.region == Region.NATIONAL:
        return RuleOutcome(
            points=RESOURCE_WEIGHT,
            reason="Designed for diverse resource environments in India",
            implementation_complexity=ImplementationComplexity.LOW,
        )
    if context.resource_availability == ResourceAvailability.ABUNDANT and standard.region == Region.INTERNATIONAL:
        return RuleOutcome(
            points=RESOURCE_WEIGHT,
            reason="Can leverage advanced resources for international curriculum",
        )
    return None


# Evaluation order matters for reasons and for the last priority/complexity write
FIT_RULES: List[FitRule] = [
    score_geographic_fit,
    score_school_type_fit,
    score_language_fit,
    score_grade_fit,
    score_experience_fit,
    score_resource_fit,
]
