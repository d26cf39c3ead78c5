"""
Lesson Wizard Constants

Class levels, subjects, global teaching styles and topic suggestions used
by the lesson wizard.
"""

from enum import Enum
from typing import Dict, List

CLASS_LEVELS: List[str] = [f"class-{n}" for n in range(1, 11)]


class Subject(str, Enum):
    MATHEMATICS = "mathematics"
    SCIENCE = "science"
    ENGLISH = "english"
    HINDI = "hindi"
    SOCIAL_STUDIES = "social-studies"
    ART = "art"


class GlobalStyle(str, Enum):
    """Teaching traditions a lesson can borrow from."""
    CHINESE = "chinese"
    JAPANESE = "japanese"
    AMERICAN = "american"
    EUROPEAN = "european"


STYLE_DESCRIPTIONS: Dict[GlobalStyle, str] = {
    GlobalStyle.CHINESE: "Systematic practice with repetition for mastery. Students work through structured exercises to build strong foundations.",
    GlobalStyle.JAPANESE: "Disciplined, step-by-step approach with respect for process. Each step is carefully explained and practiced.",
    GlobalStyle.AMERICAN: "Question-based exploration that encourages curiosity. Students discover concepts through guided inquiry.",
    GlobalStyle.EUROPEAN: "Creative expression through collaborative activities. Students learn through artistic and group-based methods.",
}

STYLE_BENEFITS: Dict[GlobalStyle, str] = {
    GlobalStyle.CHINESE: "building strong foundational skills through consistent practice",
    GlobalStyle.JAPANESE: "developing discipline and attention to detail in learning",
    GlobalStyle.AMERICAN: "encouraging critical thinking and natural curiosity",
    GlobalStyle.EUROPEAN: "fostering creativity and collaborative learning skills",
}

TOPIC_SUGGESTIONS: Dict[Subject, List[str]] = {
    Subject.MATHEMATICS: ["Addition", "Subtraction", "Multiplication", "Division", "Fractions", "Geometry", "Shapes", "Numbers"],
    Subject.SCIENCE: ["Plants", "Animals", "Weather", "Solar System", "Human Body", "Water Cycle", "Magnetism", "Light"],
    Subject.ENGLISH: ["Alphabets", "Phonics", "Reading", "Grammar", "Stories", "Poems", "Vocabulary", "Writing"],
    Subject.HINDI: ["वर्णमाला", "व्याकरण", "कहानी", "कविता", "शब्द", "वाक्य", "लेखन", "पठन"],
    Subject.SOCIAL_STUDIES: ["Family", "Community", "India", "Geography", "History", "Culture", "Government", "Environment"],
    Subject.ART: ["Drawing", "Painting", "Colors", "Crafts", "Dance", "Music", "Theatre", "Creativity"],
}

AGE_RANGES: Dict[str, str] = {
    "1": "6-7 years", "2": "7-8 years", "3": "8-9 years", "4": "9-10 years", "5": "10-11 years",
    "6": "11-12 years", "7": "12-13 years", "8": "13-14 years", "9": "14-15 years", "10": "15-16 years",
}
DEFAULT_AGE_RANGE = "6-16 years"

# Generation settings (base lesson / enhanced global version)
BASE_MAX_TOKENS = 2048
GLOBAL_MAX_TOKENS = 3072
BASE_TOP_P = 0.8
GLOBAL_TOP_P = 0.9
GLOBAL_TEMPERATURE_BOOST = 0.1

UPLOAD_TEXT_PROMPT_LIMIT = 1000


def class_number(class_level: str) -> str:
    return class_level.replace("class-", "")


def age_range_for(class_level: str) -> str:
    return AGE_RANGES.get(class_number(class_level), DEFAULT_AGE_RANGE)
