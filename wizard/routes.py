"""
Wizard API Routes

Step-by-step selections, uploads and curriculum recommendations for one
wizard session.
"""

import logging
import uuid
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, field_validator

from curriculum.logic.contracts import UserContext
from curriculum.logic.catalog import default_catalog
from curriculum.logic.engine import RecommendationEngine
from curriculum.routes import get_engine, _serialize_result, _serialize_standard
from lessons.constants import CLASS_LEVELS, GlobalStyle, Subject
from lessons.service import LessonService, get_lesson_service
from uploads.validation import validate_educational_file
from .session import SessionStore, WizardSession, UploadedFile, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/wizard", tags=["wizard"])


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class SelectionUpdate(BaseModel):
    class_level: Optional[str] = None
    subject: Optional[Subject] = None
    topic: Optional[str] = None
    global_style: Optional[GlobalStyle] = None

    @field_validator("class_level")
    @classmethod
    def check_class_level(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in CLASS_LEVELS:
            raise ValueError(f"class_level must be one of {', '.join(CLASS_LEVELS)}")
        return v


class UploadRequest(BaseModel):
    file_name: str
    content_type: str
    size: int = Field(ge=0)
    text_content: Optional[str] = None


class StandardSelection(BaseModel):
    standard_id: str


# =============================================================================
# HELPERS
# =============================================================================

def _get_session(session_id: str, store: SessionStore) -> WizardSession:
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Wizard session not found")
    return session


def _serialize_session(session: WizardSession) -> Dict[str, Any]:
    rec = session.recommendation
    language = rec.context.language if rec.context else None
    return {
        "session_id": session.id,
        "selections": {
            "class_level": session.class_level,
            "subject": session.subject.value if session.subject else None,
            "topic": session.topic,
            "global_style": session.global_style.value if session.global_style else None,
        },
        "uploads": [
            {"id": f.id, "name": f.name, "content_type": f.content_type, "size": f.size}
            for f in session.uploads
        ],
        "curriculum": {
            "status": rec.status.value,
            "recommendations": [_serialize_result(r, language) for r in rec.recommendations],
            "analytics": rec.analytics.model_dump() if rec.analytics else None,
            "selected_standard": (
                _serialize_standard(rec.selected_standard, language) if rec.selected_standard else None
            ),
        },
    }


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/sessions", summary="Start a wizard session", status_code=201)
def create_session(
    store: SessionStore = Depends(get_store),
    engine: RecommendationEngine = Depends(get_engine)
):
    session = store.create(engine)
    logger.info(f"🧭 Wizard session created: {session.id}")
    return _serialize_session(session)


@router.get("/sessions/{session_id}", summary="Wizard session state")
def get_session(session_id: str, store: SessionStore = Depends(get_store)):
    return _serialize_session(_get_session(session_id, store))


@router.delete("/sessions/{session_id}", summary="Discard a wizard session")
def delete_session(session_id: str, store: SessionStore = Depends(get_store)):
    if not store.delete(session_id):
        raise HTTPException(status_code=404, detail="Wizard session not found")
    return {"deleted": session_id}


@router.patch("/sessions/{session_id}/selections", summary="Update wizard selections")
def update_selections(
    session_id: str,
    update: SelectionUpdate,
    store: SessionStore = Depends(get_store)
):
    session = _get_session(session_id, store)
    for name, value in update.model_dump(exclude_unset=True).items():
        if name == "topic" and value is not None:
            value = value.strip() or None
        setattr(session, name, value)
    return _serialize_session(session)


@router.post("/sessions/{session_id}/uploads", summary="Attach teaching material")
def add_upload(
    session_id: str,
    upload: UploadRequest,
    store: SessionStore = Depends(get_store)
):
    session = _get_session(session_id, store)

    validation = validate_educational_file(upload.file_name, upload.content_type, upload.size)
    if not validation.is_valid:
        raise HTTPException(status_code=400, detail=validation.error)

    uploaded = UploadedFile(
        id=f"file-{uuid.uuid4().hex[:12]}",
        name=upload.file_name,
        content_type=upload.content_type,
        size=upload.size,
        text_content=upload.text_content if upload.content_type == "text/plain" else None,
    )
    session.uploads.append(uploaded)
    return {"file": {"id": uploaded.id, "name": uploaded.name}, "warnings": validation.warnings}


@router.delete("/sessions/{session_id}/uploads/{file_id}", summary="Remove teaching material")
def remove_upload(session_id: str, file_id: str, store: SessionStore = Depends(get_store)):
    session = _get_session(session_id, store)
    remaining = [f for f in session.uploads if f.id != file_id]
    if len(remaining) == len(session.uploads):
        raise HTTPException(status_code=404, detail="Upload not found")
    session.uploads = remaining
    return {"deleted": file_id}


@router.post("/sessions/{session_id}/uploads/{file_id}/analyze", summary="Analyze attached material")
def analyze_session_upload(
    session_id: str,
    file_id: str,
    store: SessionStore = Depends(get_store),
    service: LessonService = Depends(get_lesson_service)
):
    """Analyze an attached file for the session's class level and subject."""
    session = _get_session(session_id, store)
    uploaded = session.get_upload(file_id)
    if uploaded is None:
        raise HTTPException(status_code=404, detail="Upload not found")

    try:
        request = session.upload_analysis_request(uploaded)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    validation = validate_educational_file(uploaded.name, uploaded.content_type, uploaded.size)
    analysis = service.analyze_upload(request, warnings=validation.warnings)
    return analysis.model_dump()


@router.put("/sessions/{session_id}/context", summary="Set the curriculum context")
async def update_context(
    session_id: str,
    user_context: Dict[str, Any],
    wait: bool = False,
    store: SessionStore = Depends(get_store)
):
    """
    Start a curriculum analysis for the new context. A run still in
    flight for an older context is replaced. With `wait=true` the
    response is sent once the analysis is ready.
    """
    session = _get_session(session_id, store)
    try:
        context = UserContext(**user_context)
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Invalid user context: {str(e)}")

    session.recommendation.update_context(context)
    if wait:
        await session.recommendation.wait_until_ready()
    return _serialize_session(session)


@router.post("/sessions/{session_id}/standard", summary="Choose a curriculum standard")
def select_standard(
    session_id: str,
    selection: StandardSelection,
    store: SessionStore = Depends(get_store)
):
    session = _get_session(session_id, store)
    standard = default_catalog.get(selection.standard_id)
    if standard is None:
        raise HTTPException(status_code=404, detail="Curriculum standard not found")
    session.recommendation.select_standard(standard)
    return _serialize_session(session)


@router.get("/sessions/{session_id}/recommendations/{standard_id}/reasoning")
def session_reasoning(session_id: str, standard_id: str, store: SessionStore = Depends(get_store)):
    session = _get_session(session_id, store)
    return {"standard_id": standard_id, "reasons": session.recommendation.reasoning_for(standard_id)}


@router.get("/sessions/{session_id}/recommendations/{standard_id}/guidance")
def session_guidance(session_id: str, standard_id: str, store: SessionStore = Depends(get_store)):
    session = _get_session(session_id, store)
    guidance = session.recommendation.implementation_guidance_for(standard_id)
    return {"standard_id": standard_id, **guidance.model_dump()}


@router.post("/sessions/{session_id}/lesson", summary="Generate the lesson for this session")
def generate_session_lesson(
    session_id: str,
    is_global_version: bool = False,
    store: SessionStore = Depends(get_store),
    service: LessonService = Depends(get_lesson_service)
):
    session = _get_session(session_id, store)
    try:
        request = session.lesson_request(is_global_version)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    lesson = service.generate_lesson(request)
    return {"lesson": lesson.model_dump(), "demo_mode": service.demo_mode}
