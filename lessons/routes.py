"""
Lesson API Routes

Lesson pack generation and uploaded-material analysis.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from uploads.validation import validate_educational_file
from .constants import CLASS_LEVELS, Subject, GlobalStyle, STYLE_DESCRIPTIONS, TOPIC_SUGGESTIONS
from .contracts import LessonRequest, UploadAnalysisRequest
from .service import LessonService, get_lesson_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lessons", tags=["lessons"])


@router.post("", summary="Generate a lesson pack")
@router.post("/", summary="Generate a lesson pack", include_in_schema=False)
def generate_lesson(
    request: LessonRequest,
    service: LessonService = Depends(get_lesson_service)
):
    """
    Generate a lesson pack for the wizard selections.

    Falls back to demo content when no API key is configured.
    """
    try:
        lesson = service.generate_lesson(request)
        return {"lesson": lesson.model_dump(), "demo_mode": service.demo_mode}
    except Exception as e:
        logger.exception("Lesson generation crashed")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.post("/uploads/analyze", summary="Analyze uploaded teaching material")
def analyze_upload(
    request: UploadAnalysisRequest,
    service: LessonService = Depends(get_lesson_service)
):
    validation = validate_educational_file(request.file_name, request.content_type, request.size)
    if not validation.is_valid:
        raise HTTPException(status_code=400, detail=validation.error)

    analysis = service.analyze_upload(request, warnings=validation.warnings)
    return analysis.model_dump()


@router.get("/options", summary="Wizard choices")
def wizard_options() -> Dict[str, Any]:
    return {
        "class_levels": CLASS_LEVELS,
        "subjects": [s.value for s in Subject],
        "global_styles": [
            {"id": style.value, "description": STYLE_DESCRIPTIONS[style]}
            for style in GlobalStyle
        ],
    }


@router.get("/topics/{subject}", summary="Topic suggestions for a subject")
def topic_suggestions(subject: Subject):
    return {"subject": subject.value, "suggestions": TOPIC_SUGGESTIONS[subject]}
