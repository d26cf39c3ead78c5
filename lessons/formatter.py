"""
Lesson Formatter

Turns the structured lesson document returned by the language model into
the LessonContent shown by the wizard.
"""

from typing import Any, Dict, List

from .contracts import LessonContent, QuizQuestion


def _numbered(items: List[str]) -> str:
    return "\n".join(f"{index}. {item}" for index, item in enumerate(items, 1))


def to_lesson_content(lesson_data: Dict[str, Any], is_global_version: bool) -> LessonContent:
    """
    Build LessonContent from a lesson document.

    Raises KeyError/TypeError/AttributeError when required sections are
    missing or malformed; the lesson service treats that as a generation
    failure. Null style or languageSupport values are tolerated.
    """
    intro = lesson_data["introduction"]
    explanation = lesson_data["explanation"]
    activity = lesson_data["handsonActivity"]
    method = lesson_data["globalMethod"]
    conclusion = lesson_data["conclusion"]
    notes = lesson_data["teacherNotes"]
    interactive = lesson_data["interactiveSection"]
    # Optional sections may come back as null
    style = str(method.get("style") or "")
    language_support = lesson_data.get("languageSupport") or {}

    full_explanation = f"""
## {lesson_data["lessonTitle"]}
**Duration:** {lesson_data["duration"]} | **Age Group:** {lesson_data["ageGroup"]}

### 🎯 Learning Objective
{intro["objective"]}

### 📖 Lesson Introduction
{intro["hook"]}

### 📚 Main Content
{explanation["mainContent"]}

#### Key Learning Points:
{_numbered(explanation["keyPoints"])}

#### Real-Life Examples
{explanation["examples"]}

### 🎯 Hands-On Activity: {activity["title"]}
**Materials Needed:** {activity["materials"]}
**Time Required:** {activity["timeNeeded"]}

**Steps:**
{_numbered(activity["steps"])}

### 🌍 Global Teaching Method
**Style:** {style.capitalize()}
{method["application"]}

**Cultural Connection:** {method["culturalBridge"]}

### 📝 Lesson Summary
{conclusion["summary"]}

**Take-Home Activity:** {conclusion["homework"]}
**Next Lesson Preview:** {conclusion["nextLesson"]}

### 👨‍🏫 Teacher Notes
**Teaching Tips:** {notes["tips"]}
**Common Student Mistakes:** {notes["commonMistakes"]}
**For Advanced Students:** {notes["extensions"]}

### 🗣️ Student Participation
{interactive["participation"]}
""".strip()

    questions = [
        QuizQuestion(
            question=q["question"],
            options=q["options"],
            correct=q["correct"],
            explanation=q.get("explanation", ""),
        )
        for q in interactive["questions"]
    ]

    activity_text = (
        f"**{activity['title']}**\n\n"
        f"**Materials:** {activity['materials']}\n\n"
        f"**Instructions:**\n{_numbered(activity['steps'])}"
    )

    return LessonContent(
        explanation=full_explanation,
        questions=questions,
        activity=activity_text,
        global_method=method["application"],
        hindi_translation=language_support.get("hindiKeyTerms") or {},
        is_global_version=is_global_version,
        lesson_data=lesson_data,
        source="ai",
    )
