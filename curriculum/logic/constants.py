"""
Recommendation Engine Constants

Defines enums, rule weights, thresholds and lookup tables used by the
curriculum recommendation engine. All values are deterministic.
"""

from enum import Enum
from typing import Dict, List


# =============================================================================
# ENUMS
# =============================================================================

class Region(str, Enum):
    """Where a curriculum standard originates."""
    NATIONAL = "national"
    STATE = "state"
    INTERNATIONAL = "international"


class Priority(str, Enum):
    """Priority tier of a standard or a recommendation."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ALTERNATIVE = "alternative"  # Only ever assigned to recommendations


class ImplementationComplexity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SchoolType(str, Enum):
    GOVERNMENT = "government"
    PRIVATE = "private"
    INTERNATIONAL = "international"


class Language(str, Enum):
    ENGLISH = "english"
    HINDI = "hindi"


class TeachingExperience(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


class ClassSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ResourceAvailability(str, Enum):
    LIMITED = "limited"
    MODERATE = "moderate"
    ABUNDANT = "abundant"


class AnalysisStatus(str, Enum):
    """Lifecycle of a recommendation run as seen by the consuming workflow."""
    IDLE = "idle"
    ANALYZING = "analyzing"
    READY = "ready"


# =============================================================================
# WELL-KNOWN STANDARD IDS
# =============================================================================

NATIONAL_FRAMEWORK_ID = "ncert"          # Canonical national framework
CENTRAL_BOARD_ID = "cbse"                # Built on the national framework
BOARD_EXAM_IDS = ("cbse", "icse")        # Board-exam oriented
INTERNATIONALLY_RECOGNIZED_IDS = ("ib", "cambridge")

INDIA_LOCATION_KEYWORD = "india"
INDIA_ISO_CODE = "in"

# =============================================================================
# RULE WEIGHTS (additive confidence points)
# =============================================================================

GEOGRAPHIC_WEIGHTS: Dict[str, int] = {
    "india_national": 35,
    "india_international": 15,
    "global_international": 30,
}

SCHOOL_TYPE_WEIGHTS: Dict[str, int] = {
    "government_national_framework": 25,
    "government_central_board": 15,
    "private_board_exam": 20,
    "international_recognized": 25,
}

LANGUAGE_WEIGHTS: Dict[str, int] = {
    "hindi_national": 20,
    "english_international": 15,
}

GRADE_WEIGHTS: Dict[str, int] = {
    "primary_national_framework": 10,
    "secondary_board_exam": 10,
}

PRIMARY_GRADE_MAX = 5
SECONDARY_GRADE_MIN = 9

EXPERIENCE_WEIGHT = 5
RESOURCE_WEIGHT = 5

MAX_CONFIDENCE = 100

# =============================================================================
# RANKING CONFIGURATION
# =============================================================================

# Minimum confidence for a result to be included in the output set
MIN_CONFIDENCE_THRESHOLD = 30

PRIORITY_WEIGHTS: Dict[Priority, int] = {
    Priority.PRIMARY: 100,
    Priority.SECONDARY: 50,
    Priority.ALTERNATIVE: 10,
}

# Simulated analysis latency, seconds
DEFAULT_ANALYSIS_DELAY = 1.5

# =============================================================================
# ANALYTICS
# =============================================================================

INDIAN_CATEGORY = "Indian"
INTERNATIONAL_CATEGORY = "International"

SATISFACTION_BONUS = 10
SATISFACTION_CAP = 95

# =============================================================================
# IMPLEMENTATION GUIDANCE TABLES (total over ImplementationComplexity)
# =============================================================================

COMPLEXITY_LABELS: Dict[ImplementationComplexity, str] = {
    ImplementationComplexity.LOW: "Low - Minimal changes required",
    ImplementationComplexity.MEDIUM: "Medium - Moderate integration effort",
    ImplementationComplexity.HIGH: "High - Significant restructuring needed",
}

TIME_ESTIMATES: Dict[ImplementationComplexity, str] = {
    ImplementationComplexity.LOW: "1-2 weeks",
    ImplementationComplexity.MEDIUM: "3-4 weeks",
    ImplementationComplexity.HIGH: "6-8 weeks",
}

IMPLEMENTATION_STEPS: Dict[ImplementationComplexity, List[str]] = {
    ImplementationComplexity.LOW: [
        "Update content templates with new standard requirements",
        "Train teachers on new curriculum elements",
        "Implement gradual rollout across classes",
    ],
    ImplementationComplexity.MEDIUM: [
        "Conduct comprehensive content audit",
        "Develop new assessment frameworks",
        "Create teacher training programs",
        "Implement phased rollout with feedback collection",
    ],
    ImplementationComplexity.HIGH: [
        "Complete curriculum restructuring",
        "Develop new content from scratch",
        "Extensive teacher retraining programs",
        "Pilot testing with select schools",
        "Full implementation with ongoing support",
    ],
}

IMPLEMENTATION_RESOURCES: Dict[ImplementationComplexity, List[str]] = {
    ImplementationComplexity.LOW: [
        "Existing teaching materials",
        "Basic training sessions",
        "Online documentation",
    ],
    ImplementationComplexity.MEDIUM: [
        "New curriculum guides",
        "Teacher workshops",
        "Assessment tools",
        "Student materials",
    ],
    ImplementationComplexity.HIGH: [
        "Complete curriculum overhaul",
        "Extensive training programs",
        "New technology platforms",
        "Ongoing support systems",
    ],
}

UNKNOWN_COMPLEXITY_LABEL = "Unknown"
UNKNOWN_TIME_ESTIMATE = "Not available"

# =============================================================================
# CURRICULUM QA CHECKLIST
# =============================================================================

CURRICULUM_QA_CHECKLIST: Dict[str, List[str]] = {
    "content_alignment": [
        "Learning objectives match curriculum standards",
        "Content depth appropriate for grade level",
        "Assessment criteria clearly defined",
        "Prerequisites properly identified",
    ],
    "cultural_relevance": [
        "Examples use Indian cultural context",
        "Language appropriate for Indian students",
        "Values align with Indian educational philosophy",
        "Festivals and traditions appropriately referenced",
    ],
    "language_support": [
        "Key terms available in Hindi",
        "Instructions clear in both languages",
        "Cultural concepts properly translated",
        "Pronunciation guides provided where needed",
    ],
    "technical_quality": [
        "Content loads properly on all devices",
        "Interactive elements function correctly",
        "Audio quality suitable for classroom use",
        "Visual elements culturally appropriate",
    ],
}
