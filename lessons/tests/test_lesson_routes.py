"""
Test the lesson API endpoints.
"""

import pytest

from lessons.service import LessonService


LESSON_BODY = {
    "class_level": "class-5",
    "subject": "science",
    "topic": "Plants",
    "global_style": "american",
}


def test_generate_lesson_in_demo_mode(client):
    response = client.post("/lessons", json=LESSON_BODY)

    assert response.status_code == 200
    data = response.json()
    assert data["demo_mode"] is True
    assert data["lesson"]["source"] == "demo"
    assert data["lesson"]["questions"][1]["correct"] == 1


def test_generate_lesson_rejects_unknown_class(client):
    response = client.post("/lessons", json={**LESSON_BODY, "class_level": "class-12"})

    assert response.status_code == 422


def test_options(client):
    data = client.get("/lessons/options").json()

    assert data["class_levels"][0] == "class-1"
    assert len(data["class_levels"]) == 10
    assert "social-studies" in data["subjects"]
    assert [s["id"] for s in data["global_styles"]] == ["chinese", "japanese", "american", "european"]


def test_topic_suggestions(client):
    data = client.get("/lessons/topics/science").json()

    assert "Water Cycle" in data["suggestions"]
    assert client.get("/lessons/topics/latin").status_code == 422


def test_analyze_upload_returns_warnings(client):
    response = client.post("/lessons/uploads/analyze", json={
        "file_name": "song.mp3",
        "content_type": "audio/mpeg",
        "size": 1024,
        "class_level": "class-2",
        "subject": "english",
    })

    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "demo"
    assert data["warnings"] == ["Ensure audio is clear and appropriate for classroom playback"]


def test_analyze_upload_rejects_invalid_file(client):
    response = client.post("/lessons/uploads/analyze", json={
        "file_name": "clip.mp4",
        "content_type": "video/mp4",
        "size": 1024,
        "class_level": "class-2",
        "subject": "english",
    })

    assert response.status_code == 400
    assert response.json()["detail"].startswith('File type "video/mp4" not supported')


class TestWithGenerator:
    @pytest.fixture
    def lesson_service(self, fake_generator):
        return LessonService(fake_generator)

    def test_generated_lesson(self, client, fake_generator):
        response = client.post("/lessons/", json={**LESSON_BODY, "is_global_version": True})

        data = response.json()
        assert data["demo_mode"] is False
        assert data["lesson"]["source"] == "ai"
        assert data["lesson"]["is_global_version"] is True
        assert fake_generator.lesson_requests[0].topic == "Plants"
