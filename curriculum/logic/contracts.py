"""
Data Contracts for the Curriculum Recommendation Engine

Defines Pydantic models for UserContext (input) and RecommendationResult /
RecommendationAnalytics (output). These contracts are the API boundary for
the engine.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from .constants import (
    Region,
    Priority,
    ImplementationComplexity,
    SchoolType,
    Language,
    TeachingExperience,
    ClassSize,
    ResourceAvailability,
)


# =============================================================================
# CATALOG CONTRACTS
# =============================================================================

class CurriculumStandard(BaseModel):
    """
    A curriculum standard from the static catalog.
    Loaded once at startup and never mutated.
    """
    id: str
    name: str
    name_hindi: str
    description: str
    description_hindi: str
    priority: Priority  # primary/secondary
    region: Region
    grades: List[str] = Field(default_factory=list)
    subjects: List[str] = Field(default_factory=list)
    website: str = ""

    class Config:
        frozen = True


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class UserContext(BaseModel):
    """
    Input contract for the recommendation engine.
    Describes the teacher's school and preferences for one run.
    """
    location: str
    school_type: SchoolType
    language: Language

    grade_level: Optional[str] = None  # e.g. "3", parsed leniently
    previous_selections: List[str] = Field(default_factory=list)

    teaching_experience: Optional[TeachingExperience] = None
    class_size: Optional[ClassSize] = None
    resource_availability: Optional[ResourceAvailability] = None

    class Config:
        frozen = True


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class RecommendationResult(BaseModel):
    """Single standard recommendation with reasoning."""
    standard: CurriculumStandard
    confidence: int = Field(ge=0, le=100)
    reasons: List[str] = Field(default_factory=list)
    priority: Priority = Priority.ALTERNATIVE
    implementation_complexity: ImplementationComplexity = ImplementationComplexity.MEDIUM
    expected_outcomes: List[str] = Field(default_factory=list)


class RecommendationAnalytics(BaseModel):
    """Aggregate statistics over a ranked result set."""
    total_recommendations: int = 0
    average_confidence: float = 0.0
    top_category: Optional[str] = None  # Indian/International
    user_satisfaction_prediction: float = 0.0
    implementation_time_estimate: str = ""


class ImplementationGuidance(BaseModel):
    """How much work adopting a recommended standard takes."""
    complexity: str
    time_estimate: str
    steps: List[str] = Field(default_factory=list)
    resources: List[str] = Field(default_factory=list)


class TopicAlignment(BaseModel):
    """Mapping of a lesson topic onto one curriculum standard."""
    topic_id: str
    standard_id: str
    alignment_level: str = "partial"  # full/partial/supplementary
    learning_objectives: List[str] = Field(default_factory=list)
    assessment_criteria: List[str] = Field(default_factory=list)
    prerequisites: List[str] = Field(default_factory=list)
