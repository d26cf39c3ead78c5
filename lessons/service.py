"""
Lesson Service

Front door for lesson generation. Wraps an injected LessonGenerator and
falls back to demo content whenever the generator is unconfigured or fails,
so the wizard always receives a lesson.
"""

import logging
from typing import List, Optional

from .ai.generator import LessonGenerator, LessonGenerationError, OpenAILessonGenerator
from .contracts import LessonRequest, LessonContent, UploadAnalysisRequest, UploadAnalysis
from .demo import demo_lesson, demo_upload_analysis
from .formatter import to_lesson_content

logger = logging.getLogger(__name__)


class LessonService:
    def __init__(self, generator: LessonGenerator):
        self.generator = generator

    @property
    def demo_mode(self) -> bool:
        return not self.generator.configured()

    def generate_lesson(self, request: LessonRequest) -> LessonContent:
        if self.demo_mode:
            return demo_lesson(request)

        try:
            lesson_data = self.generator.generate_lesson(request)
            return to_lesson_content(lesson_data, request.is_global_version)
        except (LessonGenerationError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"❌ Lesson generation failed for topic {request.topic!r}: {e}")
            return demo_lesson(request)

    def analyze_upload(
        self,
        request: UploadAnalysisRequest,
        warnings: Optional[List[str]] = None
    ) -> UploadAnalysis:
        warnings = list(warnings or [])

        if self.demo_mode:
            return UploadAnalysis(
                file_name=request.file_name,
                analysis=demo_upload_analysis(request),
                source="demo",
                warnings=warnings,
            )

        try:
            analysis = self.generator.analyze_upload(request)
            return UploadAnalysis(
                file_name=request.file_name,
                analysis=analysis,
                source="ai",
                warnings=warnings,
            )
        except LessonGenerationError as e:
            logger.error(f"❌ Upload analysis failed for {request.file_name!r}: {e}")
            return UploadAnalysis(
                file_name=request.file_name,
                analysis=demo_upload_analysis(request),
                source="demo",
                warnings=warnings,
            )


_service: Optional[LessonService] = None


def get_lesson_service() -> LessonService:
    """Lazily build the default service so importing never touches the network."""
    global _service
    if _service is None:
        _service = LessonService(OpenAILessonGenerator())
    return _service
