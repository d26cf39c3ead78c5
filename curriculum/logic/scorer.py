"""
Standard Scorer

Runs every fit rule for a standard and folds the outcomes into a single
RecommendationResult.
"""

from typing import List, Sequence

from .contracts import CurriculumStandard, UserContext, RecommendationResult
from .constants import Priority, ImplementationComplexity, MAX_CONFIDENCE
from .fit_rules import FIT_RULES, FitRule


def score_standard(
    standard: CurriculumStandard,
    context: UserContext,
    rules: Sequence[FitRule] = FIT_RULES
) -> RecommendationResult:
    """
    Compute confidence, reasons and implementation profile for one standard.

    Points are additive. Priority and complexity keep whichever value the
    last firing rule assigned.

    Args:
        standard: Catalog standard to score
        context: User context for this run

    Returns:
        RecommendationResult with confidence clamped to [0, 100]
    """
    confidence = 0
    reasons: List[str] = []
    expected_outcomes: List[str] = []
    priority = Priority.ALTERNATIVE
    complexity = ImplementationComplexity.MEDIUM

    for rule in rules:
        outcome = rule(standard, context)
        if outcome is None:
            continue
        confidence += outcome.points
        reasons.append(outcome.reason)
        expected_outcomes.extend(outcome.expected_outcomes)
        if outcome.priority is not None:
            priority = outcome.priority
        if outcome.implementation_complexity is not None:
            complexity = outcome.implementation_complexity

    return RecommendationResult(
        standard=standard,
        confidence=max(0, min(MAX_CONFIDENCE, confidence)),
        reasons=reasons,
        priority=priority,
        implementation_complexity=complexity,
        expected_outcomes=expected_outcomes,
    )


def score_catalog(
    standards: Sequence[CurriculumStandard],
    context: UserContext
) -> List[RecommendationResult]:
    """Score every standard, preserving catalog order."""
    return [score_standard(standard, context) for standard in standards]
