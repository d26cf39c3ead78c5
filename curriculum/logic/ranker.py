"""
Ranker

Filters scored standards by the inclusion threshold and ranks them by
confidence plus priority weight.
"""

from typing import List

from .contracts import RecommendationResult
from .constants import PRIORITY_WEIGHTS, MIN_CONFIDENCE_THRESHOLD


def composite_score(result: RecommendationResult) -> int:
    return result.confidence + PRIORITY_WEIGHTS[result.priority]


def filter_by_confidence(
    results: List[RecommendationResult],
    min_confidence: int = MIN_CONFIDENCE_THRESHOLD
) -> List[RecommendationResult]:
    """Drop results below the inclusion threshold."""
    return [r for r in results if r.confidence >= min_confidence]


def rank_results(
    results: List[RecommendationResult]
) -> List[RecommendationResult]:
    """
    Rank results by composite score (descending).

    sorted() is stable, so equal composite scores keep catalog order.
    """
    return sorted(results, key=composite_score, reverse=True)
