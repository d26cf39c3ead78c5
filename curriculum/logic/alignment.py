"""
Topic Alignment

Maps a lesson topic onto every catalog standard that covers its grade and
subject.
"""

import re
from typing import Dict, Sequence

from .contracts import CurriculumStandard, TopicAlignment

_WHITESPACE = re.compile(r"\s+")


def topic_id_for(topic: str, grade: str, subject: str) -> str:
    slug = _WHITESPACE.sub("-", topic.lower())
    return f"{subject}-{grade}-{slug}"


def create_content_mapping(
    topic: str,
    grade: str,
    subject: str,
    standards: Sequence[CurriculumStandard]
) -> Dict[str, TopicAlignment]:
    """
    Build a standard_id -> TopicAlignment map.

    Only standards listing both the grade and the subject are included.
    Alignment level is always "partial" until real content analysis exists.
    """
    mappings: Dict[str, TopicAlignment] = {}

    for standard in standards:
        if grade not in standard.grades or subject not in standard.subjects:
            continue
        mappings[standard.id] = TopicAlignment(
            topic_id=topic_id_for(topic, grade, subject),
            standard_id=standard.id,
            alignment_level="partial",
            learning_objectives=[
                f"Understand fundamental concepts of {topic}",
                f"Apply {topic} knowledge in practical situations",
                "Demonstrate mastery through assessment",
            ],
            assessment_criteria=[
                "Conceptual understanding",
                "Practical application",
                "Problem-solving ability",
            ],
            prerequisites=[
                "Basic foundational knowledge",
                "Age-appropriate reading level",
                "Previous grade concepts mastery",
            ],
        )

    return mappings
