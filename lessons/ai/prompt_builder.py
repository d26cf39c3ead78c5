from typing import Optional

from ..constants import class_number, age_range_for, UPLOAD_TEXT_PROMPT_LIMIT
from ..contracts import LessonRequest, UploadAnalysisRequest
from .prompts import (
    SYSTEM_ROLE_DEFINITION,
    PROFESSIONAL_LESSON_PROMPT,
    GLOBAL_VERSION_PROMPT,
    IMAGE_ANALYSIS_PROMPT,
    TEXT_ANALYSIS_PROMPT,
    DOCUMENT_ANALYSIS_PROMPT,
    AUDIO_ANALYSIS_PROMPT,
)


def build_system_prompt() -> str:
    """Constructs the static system prompt."""
    return SYSTEM_ROLE_DEFINITION.strip()


def build_lesson_prompt(request: LessonRequest) -> str:
    """Fills the base or global lesson template from the wizard selections."""
    template = GLOBAL_VERSION_PROMPT if request.is_global_version else PROFESSIONAL_LESSON_PROMPT
    return template.substitute(
        class_number=class_number(request.class_level),
        topic=request.topic,
        subject=request.subject.value,
        global_style=request.global_style.value,
        age_range=age_range_for(request.class_level),
    )


def upload_kind(content_type: str) -> Optional[str]:
    """
    Classify an upload for prompt selection.
    Returns None for types no prompt exists for.
    """
    if content_type.startswith("image/"):
        return "image"
    if content_type == "text/plain":
        return "text"
    if "pdf" in content_type or "word" in content_type:
        return "document"
    if content_type.startswith("audio/"):
        return "audio"
    return None


def build_upload_prompt(request: UploadAnalysisRequest) -> Optional[str]:
    fields = {
        "file_name": request.file_name,
        "content_type": request.content_type,
        "class_number": class_number(request.class_level),
        "subject": request.subject.value,
    }

    kind = upload_kind(request.content_type)
    if kind == "image":
        return IMAGE_ANALYSIS_PROMPT.substitute(fields)
    if kind == "text":
        content = (request.text_content or "")[:UPLOAD_TEXT_PROMPT_LIMIT]
        return TEXT_ANALYSIS_PROMPT.substitute(fields, content=content)
    if kind == "document":
        return DOCUMENT_ANALYSIS_PROMPT.substitute(fields)
    if kind == "audio":
        return AUDIO_ANALYSIS_PROMPT.substitute(fields)
    return None
