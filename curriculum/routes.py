"""
Curriculum Recommendation API Routes

Exposes the curriculum recommendation engine via REST API.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

import config
from .logic.engine import RecommendationEngine
from .logic.contracts import UserContext, RecommendationResult, CurriculumStandard
from .logic.catalog import CurriculumCatalog, default_catalog
from .logic.alignment import create_content_mapping
from .logic.constants import Language, CURRICULUM_QA_CHECKLIST

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/curriculum", tags=["curriculum"])

_engine = RecommendationEngine(analysis_delay=config.RECOMMENDATION_DELAY_SECONDS)


def get_engine() -> RecommendationEngine:
    return _engine


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class RecommendationRequest(BaseModel):
    """Request body for recommendations endpoint."""
    user_context: Dict[str, Any] = Field(
        ...,
        description="Teacher's school context and preferences",
        examples=[{
            "location": "india",
            "school_type": "government",
            "language": "hindi",
            "grade_level": "3",
            "teaching_experience": "beginner",
            "resource_availability": "limited",
        }],
    )
    include_analytics: bool = Field(
        default=True,
        description="Include aggregate analytics over the ranked set"
    )


class AlignmentRequest(BaseModel):
    topic: str = Field(..., min_length=1)
    grade: str
    subject: str


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/recommendations", summary="Rank curriculum standards for a context")
async def recommend_standards(
    request: RecommendationRequest,
    engine: RecommendationEngine = Depends(get_engine)
):
    """
    Score every catalog standard against the user context.

    **Response:**
    - Ranked recommendations with confidence, reasons and priority
    - Analytics over the ranked set (if requested)
    """
    try:
        try:
            context = UserContext(**request.user_context)
        except Exception as e:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid user context: {str(e)}"
            )

        results = await engine.recommend(context)

        response_data = {
            "recommendations": [_serialize_result(r, context.language) for r in results],
            "count": len(results),
            "engine_version": engine.version,
        }
        if request.include_analytics:
            response_data["analytics"] = engine.analytics(results).model_dump()

        return response_data

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Curriculum recommendation failed")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


@router.get("/recommendations/{standard_id}/reasoning", summary="Reasons for a recommended standard")
def get_reasoning(standard_id: str, engine: RecommendationEngine = Depends(get_engine)):
    """Returns an empty list when the standard is not in the latest result set."""
    return {"standard_id": standard_id, "reasons": engine.reasoning_for(standard_id)}


@router.get("/recommendations/{standard_id}/guidance", summary="Implementation guidance for a standard")
def get_guidance(standard_id: str, engine: RecommendationEngine = Depends(get_engine)):
    guidance = engine.implementation_guidance_for(standard_id)
    return {"standard_id": standard_id, **guidance.model_dump()}


@router.get("/standards", summary="List catalog standards")
def list_standards(language: Language = Language.ENGLISH):
    return {
        "national": [_serialize_standard(s, language) for s in default_catalog.national],
        "international": [_serialize_standard(s, language) for s in default_catalog.international],
    }


@router.post("/alignment", summary="Map a topic onto catalog standards")
def align_topic(request: AlignmentRequest):
    mappings = create_content_mapping(
        topic=request.topic,
        grade=request.grade,
        subject=request.subject,
        standards=default_catalog.all_standards(),
    )
    return {standard_id: alignment.model_dump() for standard_id, alignment in mappings.items()}


@router.get("/qa-checklist", summary="Curriculum quality assurance checklist")
def qa_checklist():
    return CURRICULUM_QA_CHECKLIST


def _serialize_standard(standard: CurriculumStandard, language: Optional[Language] = None) -> Dict[str, Any]:
    """Convert CurriculumStandard to JSON-serializable dict."""
    language = language or Language.ENGLISH
    return {
        "id": standard.id,
        "name": CurriculumCatalog.display_name(standard, language),
        "description": CurriculumCatalog.display_description(standard, language),
        "priority": standard.priority.value,
        "region": standard.region.value,
        "grades": standard.grades,
        "subjects": standard.subjects,
        "website": standard.website,
    }


def _serialize_result(result: RecommendationResult, language: Optional[Language] = None) -> Dict[str, Any]:
    """Convert RecommendationResult to JSON-serializable dict."""
    return {
        "standard": _serialize_standard(result.standard, language),
        "confidence": result.confidence,
        "reasons": result.reasons,
        "priority": result.priority.value,
        "implementation_complexity": result.implementation_complexity.value,
        "expected_outcomes": result.expected_outcomes,
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Curriculum engine health check")
def health_check():
    """Check if recommendation engine is operational."""
    return {"status": "ok", "engine": "curriculum", "version": _engine.version}
