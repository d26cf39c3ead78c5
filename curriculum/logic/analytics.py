"""
Recommendation Analytics

Aggregates a ranked result set into summary statistics.
"""

from typing import Dict, List

from .contracts import RecommendationResult, RecommendationAnalytics
from .constants import (
    Region,
    INDIAN_CATEGORY,
    INTERNATIONAL_CATEGORY,
    SATISFACTION_BONUS,
    SATISFACTION_CAP,
    TIME_ESTIMATES,
    UNKNOWN_TIME_ESTIMATE,
)


def category_for(result: RecommendationResult) -> str:
    return INDIAN_CATEGORY if result.standard.region == Region.NATIONAL else INTERNATIONAL_CATEGORY


def compute_analytics(results: List[RecommendationResult]) -> RecommendationAnalytics:
    """
    Compute analytics over a ranked result set.

    An empty set yields a zeroed object rather than a division by zero.

    Args:
        results: Ranked recommendations, best first

    Returns:
        RecommendationAnalytics
    """
    if not results:
        return RecommendationAnalytics(
            total_recommendations=0,
            average_confidence=0.0,
            top_category=None,
            user_satisfaction_prediction=0.0,
            implementation_time_estimate=UNKNOWN_TIME_ESTIMATE,
        )

    total = len(results)
    average_confidence = sum(r.confidence for r in results) / total

    category_counts: Dict[str, int] = {}
    for result in results:
        category = category_for(result)
        category_counts[category] = category_counts.get(category, 0) + 1

    # max() keeps the first maximal key, i.e. the first category encountered
    top_category = max(category_counts, key=category_counts.get)

    return RecommendationAnalytics(
        total_recommendations=total,
        average_confidence=average_confidence,
        top_category=top_category,
        user_satisfaction_prediction=min(average_confidence + SATISFACTION_BONUS, SATISFACTION_CAP),
        implementation_time_estimate=TIME_ESTIMATES[results[0].implementation_complexity],
    )
