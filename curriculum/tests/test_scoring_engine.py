"""
Test the curriculum scoring rules, ranking and analytics.
"""

import asyncio

import pytest

from curriculum.logic import (
    RecommendationEngine,
    UserContext,
    Priority,
    ImplementationComplexity,
    default_catalog,
)
from curriculum.logic.analytics import compute_analytics
from curriculum.logic.fit_rules import RuleOutcome, is_india, parse_grade
from curriculum.logic.ranker import composite_score
from curriculum.logic.scorer import score_standard


INDIA_GOVERNMENT = UserContext(
    location="india",
    school_type="government",
    language="hindi",
    grade_level="3",
)

USA_INTERNATIONAL = UserContext(
    location="usa",
    school_type="international",
    language="english",
)

INDIA_PRIVATE_SECONDARY = UserContext(
    location="India",
    school_type="private",
    language="english",
    grade_level="10",
    teaching_experience="expert",
    resource_availability="abundant",
)

ALL_CONTEXTS = [INDIA_GOVERNMENT, USA_INTERNATIONAL, INDIA_PRIVATE_SECONDARY]


def _recommend(context, **kwargs):
    engine = RecommendationEngine(analysis_delay=0, **kwargs)
    return engine, asyncio.run(engine.recommend(context))


def _standard(standard_id):
    return default_catalog.get(standard_id)


# =============================================================================
# LOCATION / GRADE PARSING
# =============================================================================

@pytest.mark.parametrize("location,expected", [
    ("india", True),
    ("New Delhi, INDIA", True),
    ("in", True),
    ("IN", False),
    ("usa", False),
    ("", False),
])
def test_is_india(location, expected):
    assert is_india(location) is expected


@pytest.mark.parametrize("grade,expected", [
    ("3", 3),
    (" 10th", 10),
    ("9", 9),
    ("abc", None),
    ("३", None),
    ("", None),
    (None, None),
])
def test_parse_grade(grade, expected):
    assert parse_grade(grade) == expected


# =============================================================================
# SCORING
# =============================================================================

def test_national_framework_for_indian_government_school():
    result = score_standard(_standard("ncert"), INDIA_GOVERNMENT)

    assert result.confidence == 90
    assert result.priority == Priority.PRIMARY
    assert result.implementation_complexity == ImplementationComplexity.LOW
    assert result.reasons == [
        "Designed specifically for Indian educational ecosystem",
        "NCERT is the official framework for government schools",
        "Strong Hindi language support and cultural integration",
        "NCERT provides excellent foundation for primary education",
    ]
    assert result.expected_outcomes == [
        "Seamless integration with existing Indian school systems",
        "Direct alignment with government education policies",
        "Better student comprehension in native language",
        "Strong conceptual foundation building",
    ]


def test_central_board_gets_smaller_government_bonus():
    assert score_standard(_standard("cbse"), INDIA_GOVERNMENT).confidence == 70
    assert score_standard(_standard("icse"), INDIA_GOVERNMENT).confidence == 55


def test_international_standard_in_india_is_secondary_and_high_complexity():
    result = score_standard(_standard("ib"), INDIA_GOVERNMENT)

    assert result.confidence == 15
    assert result.priority == Priority.SECONDARY
    assert result.implementation_complexity == ImplementationComplexity.HIGH
    assert result.reasons == ["Provides valuable international perspective"]


def test_national_standard_outside_india_gets_nothing():
    result = score_standard(_standard("ncert"), USA_INTERNATIONAL)

    assert result.confidence == 0
    assert result.reasons == []
    assert result.priority == Priority.ALTERNATIVE
    assert result.implementation_complexity == ImplementationComplexity.MEDIUM


def test_international_school_forces_high_complexity():
    result = score_standard(_standard("cambridge"), USA_INTERNATIONAL)

    assert result.confidence == 70
    assert result.priority == Priority.PRIMARY
    assert result.implementation_complexity == ImplementationComplexity.HIGH

    common_core = score_standard(_standard("common-core"), USA_INTERNATIONAL)
    assert common_core.confidence == 45
    assert common_core.implementation_complexity == ImplementationComplexity.MEDIUM


def test_later_rules_overwrite_complexity():
    context = UserContext(
        location="usa",
        school_type="government",
        language="english",
        teaching_experience="beginner",
    )
    result = score_standard(_standard("ncert"), context)

    # Government bonus (25) + beginner bonus (5); no geographic rule fired
    assert result.confidence == 30
    assert result.priority == Priority.ALTERNATIVE
    assert result.implementation_complexity == ImplementationComplexity.LOW


def test_all_rules_fire_in_order():
    context = UserContext(
        location="india",
        school_type="government",
        language="hindi",
        grade_level="2",
        teaching_experience="beginner",
        resource_availability="limited",
    )
    result = score_standard(_standard("ncert"), context)

    assert result.confidence == 100
    assert result.reasons[-2:] == [
        "NCERT provides comprehensive teacher support materials",
        "Designed for diverse resource environments in India",
    ]


def test_unparseable_grade_is_ignored():
    context = UserContext(location="india", school_type="private", language="english", grade_level="abc")
    result = score_standard(_standard("cbse"), context)

    assert result.confidence == 55
    assert "Optimized for board exam preparation" not in result.reasons


def test_confidence_is_clamped():
    def generous_rule(standard, context):
        return RuleOutcome(points=80, reason="Generous")

    result = score_standard(_standard("ncert"), INDIA_GOVERNMENT, rules=[generous_rule, generous_rule])

    assert result.confidence == 100
    assert result.reasons == ["Generous", "Generous"]


@pytest.mark.parametrize("context", ALL_CONTEXTS)
def test_confidence_always_in_range(context):
    for standard in default_catalog.all_standards():
        assert 0 <= score_standard(standard, context).confidence <= 100


# =============================================================================
# RANKING
# =============================================================================

def test_recommend_ranks_ncert_first_for_indian_government_school():
    _, results = _recommend(INDIA_GOVERNMENT)

    assert [r.standard.id for r in results] == ["ncert", "cbse", "icse"]
    assert results[0].priority == Priority.PRIMARY


def test_recommend_ranks_international_above_national_outside_india():
    _, results = _recommend(USA_INTERNATIONAL)

    ids = [r.standard.id for r in results]
    assert ids[0] in ("ib", "cambridge")
    # Equal composite scores keep catalog order
    assert ids == ["ib", "cambridge", "common-core"]


@pytest.mark.parametrize("context", ALL_CONTEXTS)
def test_recommend_is_sorted_and_thresholded(context):
    _, results = _recommend(context)

    scores = [composite_score(r) for r in results]
    assert scores == sorted(scores, reverse=True)
    assert all(r.confidence >= 30 for r in results)


def test_custom_threshold():
    _, results = _recommend(INDIA_GOVERNMENT, min_confidence=10)

    assert len(results) == 6
    assert results[-1].standard.id == "common-core"


# =============================================================================
# ANALYTICS
# =============================================================================

def test_analytics_over_results():
    _, results = _recommend(INDIA_GOVERNMENT)
    analytics = compute_analytics(results)

    assert analytics.total_recommendations == 3
    assert analytics.average_confidence == pytest.approx((90 + 70 + 55) / 3)
    assert analytics.top_category == "Indian"
    assert analytics.user_satisfaction_prediction == pytest.approx((90 + 70 + 55) / 3 + 10)
    assert analytics.implementation_time_estimate == "1-2 weeks"


def test_analytics_for_international_context():
    _, results = _recommend(USA_INTERNATIONAL)
    analytics = compute_analytics(results)

    assert analytics.top_category == "International"
    assert analytics.implementation_time_estimate == "6-8 weeks"


def test_analytics_category_tie_keeps_first_encountered():
    _, results = _recommend(INDIA_PRIVATE_SECONDARY)

    assert [r.standard.id for r in results] == ["cbse", "icse", "ncert", "ib", "cambridge", "common-core"]
    analytics = compute_analytics(results)
    assert analytics.top_category == "Indian"
    assert analytics.average_confidence == pytest.approx(47.5)

    international_first = sorted(results, key=lambda r: r.standard.region.value != "international")
    assert compute_analytics(international_first).top_category == "International"


def test_satisfaction_prediction_is_capped():
    context = UserContext(
        location="india",
        school_type="government",
        language="hindi",
        grade_level="1",
        teaching_experience="beginner",
        resource_availability="limited",
    )
    engine = RecommendationEngine(analysis_delay=0)
    top = engine.score(_standard("ncert"), context)

    assert compute_analytics([top]).user_satisfaction_prediction == 95


def test_analytics_for_empty_results():
    analytics = compute_analytics([])

    assert analytics.total_recommendations == 0
    assert analytics.average_confidence == 0.0
    assert analytics.top_category is None
