"""
Test lesson generation, demo fallback and prompt construction.
"""

from types import SimpleNamespace

import pytest

from lessons.ai.generator import LessonGenerationError, OpenAILessonGenerator, parse_lesson_document
from lessons.ai.prompt_builder import build_lesson_prompt, build_upload_prompt, upload_kind
from lessons.contracts import LessonRequest, UploadAnalysisRequest
from lessons.demo import demo_lesson, demo_upload_analysis
from lessons.service import LessonService


def _request(**overrides):
    data = {
        "class_level": "class-4",
        "subject": "mathematics",
        "topic": "Fractions",
        "global_style": "japanese",
    }
    data.update(overrides)
    return LessonRequest(**data)


def _upload(**overrides):
    data = {
        "file_name": "worksheet.txt",
        "content_type": "text/plain",
        "size": 2048,
        "text_content": "Plants need sunlight and water.",
        "class_level": "class-3",
        "subject": "science",
    }
    data.update(overrides)
    return UploadAnalysisRequest(**data)


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _openai_generator(completions, temperature=0.7):
    generator = OpenAILessonGenerator(api_key="", model="test-model", temperature=temperature)
    generator.client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return generator


# =============================================================================
# REQUEST VALIDATION
# =============================================================================

def test_lesson_request_strips_topic():
    assert _request(topic="  Shapes ").topic == "Shapes"


@pytest.mark.parametrize("overrides", [
    {"topic": "   "},
    {"class_level": "class-11"},
    {"subject": "latin"},
    {"global_style": "martian"},
])
def test_lesson_request_rejects_invalid_input(overrides):
    with pytest.raises(ValueError):
        _request(**overrides)


# =============================================================================
# SERVICE
# =============================================================================

def test_demo_mode_serves_demo_lesson(demo_generator):
    service = LessonService(demo_generator)

    lesson = service.generate_lesson(_request())

    assert service.demo_mode is True
    assert lesson.source == "demo"
    assert demo_generator.lesson_requests == []
    assert len(lesson.questions) == 3
    assert "Fractions Lesson for Class 4" in lesson.explanation
    assert "9-10 years" in lesson.explanation


def test_generated_lesson_is_formatted(fake_generator):
    service = LessonService(fake_generator)

    lesson = service.generate_lesson(_request())

    assert service.demo_mode is False
    assert lesson.source == "ai"
    assert lesson.explanation.startswith("## Exploring Fractions")
    assert "1. Numerator" in lesson.explanation
    assert lesson.questions[0].correct == 1
    assert lesson.hindi_translation == {"fraction": "भिन्न", "half": "आधा"}
    assert lesson.activity.startswith("**Paper Folding**")
    assert lesson.global_method == "Step-by-step folding builds precision"


def test_generator_failure_falls_back_to_demo(failing_generator):
    lesson = LessonService(failing_generator).generate_lesson(_request(is_global_version=True))

    assert lesson.source == "demo"
    assert lesson.is_global_version is True
    assert lesson.hindi_translation["global"] == "वैश्विक"
    assert "Enhanced Global Lesson: Fractions" in lesson.explanation


def test_incomplete_document_falls_back_to_demo(fake_generator, lesson_document):
    del lesson_document["teacherNotes"]
    fake_generator.lesson_data = lesson_document

    lesson = LessonService(fake_generator).generate_lesson(_request())

    assert lesson.source == "demo"


def test_null_style_and_language_support_are_tolerated(fake_generator, lesson_document):
    lesson_document["globalMethod"]["style"] = None
    lesson_document["languageSupport"] = None
    fake_generator.lesson_data = lesson_document

    lesson = LessonService(fake_generator).generate_lesson(_request())

    assert lesson.source == "ai"
    assert lesson.hindi_translation == {}
    assert "**Style:** \n" in lesson.explanation


def test_malformed_section_falls_back_to_demo(fake_generator, lesson_document):
    lesson_document["globalMethod"] = "japanese"
    fake_generator.lesson_data = lesson_document

    lesson = LessonService(fake_generator).generate_lesson(_request())

    assert lesson.source == "demo"


def test_upload_analysis_uses_generator(fake_generator):
    analysis = LessonService(fake_generator).analyze_upload(_upload(), warnings=["note"])

    assert analysis.source == "ai"
    assert analysis.analysis == "Looks useful"
    assert analysis.warnings == ["note"]
    assert fake_generator.upload_requests[0].file_name == "worksheet.txt"


def test_upload_analysis_falls_back_to_demo(failing_generator):
    analysis = LessonService(failing_generator).analyze_upload(_upload(content_type="image/png", file_name="leaf.png"))

    assert analysis.source == "demo"
    assert analysis.analysis.startswith("📸 **Image Analysis for Class 3 Science**")


# =============================================================================
# DEMO CONTENT
# =============================================================================

def test_demo_lesson_hindi_map():
    base = demo_lesson(_request())
    global_version = demo_lesson(_request(is_global_version=True))

    assert base.hindi_translation["Fractions"] == "Fractions (विषय)"
    assert "global" not in base.hindi_translation
    assert set(global_version.hindi_translation) - set(base.hindi_translation) == {
        "global", "international", "culture", "world",
    }


@pytest.mark.parametrize("content_type,heading", [
    ("image/jpeg", "📸 **Image Analysis"),
    ("audio/mpeg", "🎵 **Audio Analysis"),
    ("application/pdf", "📄 **Document Analysis"),
    ("text/plain", "📄 **Document Analysis"),
])
def test_demo_upload_analysis_kinds(content_type, heading):
    text = demo_upload_analysis(_upload(content_type=content_type))

    assert text.startswith(heading)
    assert "Align with NCERT/CBSE curriculum standards" in text


# =============================================================================
# PROMPTS
# =============================================================================

def test_lesson_prompt_fills_selections():
    prompt = build_lesson_prompt(_request(class_level="class-7", subject="science", topic="Light"))

    assert "Light" in prompt
    assert "science" in prompt
    assert "12-13 years" in prompt
    assert "$" not in prompt


def test_global_prompt_differs_from_base():
    assert build_lesson_prompt(_request()) != build_lesson_prompt(_request(is_global_version=True))


@pytest.mark.parametrize("content_type,kind", [
    ("image/webp", "image"),
    ("text/plain", "text"),
    ("application/pdf", "document"),
    ("application/msword", "document"),
    ("audio/wav", "audio"),
    ("video/mp4", None),
])
def test_upload_kind(content_type, kind):
    assert upload_kind(content_type) == kind


def test_text_upload_prompt_truncates_content():
    prompt = build_upload_prompt(_upload(text_content="a" * 1500))

    assert "a" * 1000 in prompt
    assert "a" * 1001 not in prompt


def test_unknown_upload_has_no_prompt():
    assert build_upload_prompt(_upload(content_type="video/mp4")) is None


# =============================================================================
# OPENAI GENERATOR
# =============================================================================

def test_parse_lesson_document_strips_fences():
    assert parse_lesson_document('```json\n{"lessonTitle": "Plants"}\n```') == {"lessonTitle": "Plants"}


@pytest.mark.parametrize("text", ["not json", "[1, 2]"])
def test_parse_lesson_document_rejects_bad_replies(text):
    with pytest.raises(LessonGenerationError):
        parse_lesson_document(text)


def test_generator_without_key_is_unconfigured():
    generator = OpenAILessonGenerator(api_key="")

    assert generator.configured() is False
    with pytest.raises(LessonGenerationError):
        generator.generate_lesson(_request())


def test_generator_requests_json_lesson():
    completions = FakeCompletions(content='{"lessonTitle": "Fractions"}')
    generator = _openai_generator(completions)

    assert generator.generate_lesson(_request()) == {"lessonTitle": "Fractions"}

    call = completions.calls[0]
    assert call["model"] == "test-model"
    assert call["response_format"] == {"type": "json_object"}
    assert call["max_tokens"] == 2048
    assert call["messages"][0]["role"] == "system"


def test_global_version_uses_warmer_settings():
    completions = FakeCompletions(content='{"lessonTitle": "Fractions"}')
    _openai_generator(completions).generate_lesson(_request(is_global_version=True))

    call = completions.calls[0]
    assert call["temperature"] == pytest.approx(0.8)
    assert call["top_p"] == 0.9
    assert call["max_tokens"] == 3072


def test_empty_reply_raises():
    generator = _openai_generator(FakeCompletions(content=""))

    with pytest.raises(LessonGenerationError):
        generator.generate_lesson(_request())


def test_upload_analysis_is_plain_text():
    completions = FakeCompletions(content="Great worksheet")
    generator = _openai_generator(completions)

    assert generator.analyze_upload(_upload()) == "Great worksheet"
    assert "response_format" not in completions.calls[0]


def test_upload_analysis_unknown_type_raises():
    generator = _openai_generator(FakeCompletions(content="unused"))

    with pytest.raises(LessonGenerationError):
        generator.analyze_upload(_upload(content_type="video/mp4"))
