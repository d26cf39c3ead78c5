"""
Guidance Lookups

Reasoning and implementation guidance for standards in a result set.
Missing ids never raise; they resolve to explicit "not found" values.
"""

from typing import List, Optional

from .contracts import RecommendationResult, ImplementationGuidance
from .constants import (
    COMPLEXITY_LABELS,
    TIME_ESTIMATES,
    IMPLEMENTATION_STEPS,
    IMPLEMENTATION_RESOURCES,
    UNKNOWN_COMPLEXITY_LABEL,
    UNKNOWN_TIME_ESTIMATE,
)


def unknown_guidance() -> ImplementationGuidance:
    return ImplementationGuidance(
        complexity=UNKNOWN_COMPLEXITY_LABEL,
        time_estimate=UNKNOWN_TIME_ESTIMATE,
        steps=[],
        resources=[],
    )


def find_result(
    results: List[RecommendationResult],
    standard_id: str
) -> Optional[RecommendationResult]:
    for result in results:
        if result.standard.id == standard_id:
            return result
    return None


def reasoning_for(results: List[RecommendationResult], standard_id: str) -> List[str]:
    """Reasons accumulated for the standard, or [] when it is not in the set."""
    result = find_result(results, standard_id)
    return list(result.reasons) if result else []


def guidance_for(
    results: List[RecommendationResult],
    standard_id: str
) -> ImplementationGuidance:
    """
    Map a result's implementation complexity onto the guidance tables.

    Args:
        results: Most recent result set
        standard_id: Standard to look up

    Returns:
        ImplementationGuidance, or the unknown guidance when absent
    """
    result = find_result(results, standard_id)
    if result is None:
        return unknown_guidance()

    complexity = result.implementation_complexity
    return ImplementationGuidance(
        complexity=COMPLEXITY_LABELS[complexity],
        time_estimate=TIME_ESTIMATES[complexity],
        steps=list(IMPLEMENTATION_STEPS[complexity]),
        resources=list(IMPLEMENTATION_RESOURCES[complexity]),
    )
