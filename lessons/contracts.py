"""
Data Contracts for Lesson Generation

Request and response models exchanged with the lesson wizard UI.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from .constants import CLASS_LEVELS, Subject, GlobalStyle


class LessonRequest(BaseModel):
    """What the teacher picked in the wizard."""
    class_level: str = Field(..., description="class-1 ... class-10")
    subject: Subject
    topic: str = Field(..., min_length=1)
    global_style: GlobalStyle
    is_global_version: bool = False

    @field_validator("class_level")
    @classmethod
    def check_class_level(cls, v: str) -> str:
        if v not in CLASS_LEVELS:
            raise ValueError(f"class_level must be one of {', '.join(CLASS_LEVELS)}")
        return v

    @field_validator("topic")
    @classmethod
    def strip_topic(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("topic must not be blank")
        return v


class QuizQuestion(BaseModel):
    question: str
    options: List[str] = Field(default_factory=list)
    correct: int = Field(ge=0)
    explanation: str = ""


class LessonContent(BaseModel):
    """Lesson pack ready for display and text-to-speech."""
    explanation: str
    questions: List[QuizQuestion] = Field(default_factory=list)
    activity: str = ""
    global_method: str = ""
    hindi_translation: Dict[str, str] = Field(default_factory=dict)
    is_global_version: bool = False
    lesson_data: Dict[str, Any] = Field(default_factory=dict)
    source: str = "ai"  # ai/demo


class UploadAnalysisRequest(BaseModel):
    """Metadata of an uploaded teaching material."""
    file_name: str
    content_type: str
    size: int = Field(ge=0)
    text_content: Optional[str] = None
    class_level: str
    subject: Subject

    @field_validator("class_level")
    @classmethod
    def check_class_level(cls, v: str) -> str:
        if v not in CLASS_LEVELS:
            raise ValueError(f"class_level must be one of {', '.join(CLASS_LEVELS)}")
        return v


class UploadAnalysis(BaseModel):
    file_name: str
    analysis: str
    source: str = "ai"  # ai/demo
    warnings: List[str] = Field(default_factory=list)
