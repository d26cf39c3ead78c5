"""
Curriculum Recommendation Logic Module

Provides the deterministic engine that ranks curriculum standards for a
teacher's context.
"""

from .contracts import (
    CurriculumStandard,
    UserContext,
    RecommendationResult,
    RecommendationAnalytics,
    ImplementationGuidance,
    TopicAlignment,
)
from .catalog import CurriculumCatalog, default_catalog
from .engine import RecommendationEngine, RecommendationSession, get_recommendations
from .alignment import create_content_mapping
from .constants import (
    AnalysisStatus,
    ImplementationComplexity,
    Language,
    Priority,
    Region,
    SchoolType,
)

__all__ = [
    # Main engine
    "RecommendationEngine",
    "RecommendationSession",
    "get_recommendations",

    # Catalog
    "CurriculumCatalog",
    "default_catalog",
    "create_content_mapping",

    # Contracts
    "CurriculumStandard",
    "UserContext",
    "RecommendationResult",
    "RecommendationAnalytics",
    "ImplementationGuidance",
    "TopicAlignment",

    # Enums
    "AnalysisStatus",
    "ImplementationComplexity",
    "Language",
    "Priority",
    "Region",
    "SchoolType",
]
