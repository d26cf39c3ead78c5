"""
Wizard Sessions

In-memory state for one teacher walking through the lesson wizard:
selections made so far, accepted uploads and the curriculum
recommendation workflow.
"""

import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from curriculum.logic.engine import RecommendationEngine, RecommendationSession
from lessons.constants import GlobalStyle, Subject
from lessons.contracts import LessonRequest, UploadAnalysisRequest


@dataclass
class UploadedFile:
    id: str
    name: str
    content_type: str
    size: int
    text_content: Optional[str] = None


@dataclass
class WizardSession:
    id: str
    recommendation: RecommendationSession
    class_level: Optional[str] = None
    subject: Optional[Subject] = None
    topic: Optional[str] = None
    global_style: Optional[GlobalStyle] = None
    uploads: List[UploadedFile] = field(default_factory=list)

    def missing_selections(self) -> List[str]:
        return [
            name for name in ("class_level", "subject", "topic", "global_style")
            if getattr(self, name) is None
        ]

    def get_upload(self, file_id: str) -> Optional[UploadedFile]:
        return next((f for f in self.uploads if f.id == file_id), None)

    def upload_analysis_request(self, uploaded: UploadedFile) -> UploadAnalysisRequest:
        """Raises ValueError until class level and subject are chosen."""
        missing = [name for name in ("class_level", "subject") if getattr(self, name) is None]
        if missing:
            raise ValueError(f"Missing wizard selections: {', '.join(missing)}")
        return UploadAnalysisRequest(
            file_name=uploaded.name,
            content_type=uploaded.content_type,
            size=uploaded.size,
            text_content=uploaded.text_content,
            class_level=self.class_level,
            subject=self.subject,
        )

    def lesson_request(self, is_global_version: bool = False) -> LessonRequest:
        """Raises ValueError while a selection is still missing."""
        missing = self.missing_selections()
        if missing:
            raise ValueError(f"Missing wizard selections: {', '.join(missing)}")
        return LessonRequest(
            class_level=self.class_level,
            subject=self.subject,
            topic=self.topic,
            global_style=self.global_style,
            is_global_version=is_global_version,
        )


class SessionStore:
    """Process-local session registry. Nothing survives a restart."""

    def __init__(self):
        self._sessions: Dict[str, WizardSession] = {}

    def create(self, engine: RecommendationEngine) -> WizardSession:
        session = WizardSession(id=str(uuid.uuid4()), recommendation=RecommendationSession(engine))
        self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> Optional[WizardSession]:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None


store = SessionStore()


def get_store() -> SessionStore:
    return store
