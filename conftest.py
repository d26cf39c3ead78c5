"""
Pytest configuration and shared fixtures
"""
import copy

import pytest
from fastapi.testclient import TestClient

from main import app
from curriculum.logic.engine import RecommendationEngine
from curriculum.routes import get_engine
from lessons.ai.generator import LessonGenerator, LessonGenerationError
from lessons.service import LessonService, get_lesson_service
from wizard.session import SessionStore, get_store


SAMPLE_LESSON_DOCUMENT = {
    "lessonTitle": "Exploring Fractions",
    "ageGroup": "9-10 years",
    "duration": "25 minutes",
    "introduction": {
        "hook": "Have you ever shared a roti with your sibling?",
        "objective": "Understand halves and quarters",
    },
    "explanation": {
        "mainContent": "A fraction is a part of a whole.",
        "keyPoints": ["Numerator", "Denominator", "Equal parts"],
        "examples": "Cutting a mango into equal pieces",
    },
    "interactiveSection": {
        "questions": [
            {
                "question": "What is half of 8?",
                "options": ["2", "4", "6", "8"],
                "correct": 1,
                "explanation": "8 divided into 2 equal parts is 4",
            },
        ],
        "participation": "Students fold paper into halves",
    },
    "handsonActivity": {
        "title": "Paper Folding",
        "materials": "Old newspaper",
        "steps": ["Fold the paper", "Colour one part", "Name the fraction"],
        "timeNeeded": "5 minutes",
    },
    "globalMethod": {
        "style": "japanese",
        "application": "Step-by-step folding builds precision",
        "culturalBridge": "Like rangoli, patterns need care",
    },
    "conclusion": {
        "summary": "Fractions are equal parts",
        "homework": "Find fractions in your kitchen",
        "nextLesson": "Adding fractions",
    },
    "languageSupport": {
        "hindiKeyTerms": {"fraction": "भिन्न", "half": "आधा"},
        "pronunciationGuide": "bhinn, aadha",
    },
    "teacherNotes": {
        "tips": "Use real objects",
        "commonMistakes": "Unequal parts",
        "extensions": "Try thirds",
    },
}


class FakeLessonGenerator(LessonGenerator):
    """In-memory stand-in for the OpenAI generator."""

    def __init__(self, lesson_data=None, analysis="Looks useful", error=None, is_configured=True):
        self.lesson_data = lesson_data
        self.analysis = analysis
        self.error = error
        self.is_configured = is_configured
        self.lesson_requests = []
        self.upload_requests = []

    def configured(self) -> bool:
        return self.is_configured

    def generate_lesson(self, request):
        self.lesson_requests.append(request)
        if self.error:
            raise self.error
        return self.lesson_data

    def analyze_upload(self, request):
        self.upload_requests.append(request)
        if self.error:
            raise self.error
        return self.analysis


@pytest.fixture
def lesson_document():
    return copy.deepcopy(SAMPLE_LESSON_DOCUMENT)


@pytest.fixture
def fake_generator(lesson_document):
    return FakeLessonGenerator(lesson_data=lesson_document)


@pytest.fixture
def failing_generator():
    return FakeLessonGenerator(error=LessonGenerationError("model unavailable"))


@pytest.fixture
def demo_generator():
    return FakeLessonGenerator(is_configured=False)


@pytest.fixture
def engine():
    return RecommendationEngine(analysis_delay=0)


@pytest.fixture
def lesson_service(demo_generator):
    return LessonService(demo_generator)


@pytest.fixture
def client(engine, lesson_service):
    store = SessionStore()
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_lesson_service] = lambda: lesson_service
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
