"""
Curriculum Catalog

Static, ordered catalog of the curriculum standards the engine scores
against. National standards come first, then international ones.
"""

from typing import List, Optional, Sequence

from .constants import Region, Priority, Language
from .contracts import CurriculumStandard

_ALL_GRADES = [str(grade) for grade in range(1, 11)]
_NATIONAL_SUBJECTS = ["mathematics", "science", "english", "hindi", "social-studies", "art"]
_INTERNATIONAL_SUBJECTS = ["mathematics", "science", "english", "social-studies", "art"]


INDIAN_CURRICULUM_STANDARDS: List[CurriculumStandard] = [
    CurriculumStandard(
        id="ncert",
        name="NCERT (National Council of Educational Research and Training)",
        name_hindi="राष्ट्रीय शैक्षिक अनुसंधान और प्रशिक्षण परिषद",
        description="National curriculum framework for Indian schools",
        description_hindi="भारतीय स्कूलों के लिए राष्ट्रीय पाठ्यक्रम ढांचा",
        priority=Priority.PRIMARY,
        region=Region.NATIONAL,
        grades=_ALL_GRADES,
        subjects=_NATIONAL_SUBJECTS,
        website="https://ncert.nic.in",
    ),
    CurriculumStandard(
        id="cbse",
        name="CBSE (Central Board of Secondary Education)",
        name_hindi="केंद्रीय माध्यमिक शिक्षा बोर्ड",
        description="Central board curriculum for Indian schools",
        description_hindi="भारतीय स्कूलों के लिए केंद्रीय बोर्ड पाठ्यक्रम",
        priority=Priority.PRIMARY,
        region=Region.NATIONAL,
        grades=_ALL_GRADES,
        subjects=_NATIONAL_SUBJECTS,
        website="https://cbse.gov.in",
    ),
    CurriculumStandard(
        id="icse",
        name="ICSE (Indian Certificate of Secondary Education)",
        name_hindi="भारतीय माध्यमिक शिक्षा प्रमाणपत्र",
        description="Council for Indian School Certificate Examinations curriculum",
        description_hindi="भारतीय स्कूल प्रमाणपत्र परीक्षा परिषद पाठ्यक्रम",
        priority=Priority.PRIMARY,
        region=Region.NATIONAL,
        grades=_ALL_GRADES,
        subjects=_NATIONAL_SUBJECTS,
        website="https://cisce.org",
    ),
]

INTERNATIONAL_STANDARDS: List[CurriculumStandard] = [
    CurriculumStandard(
        id="ib",
        name="International Baccalaureate (IB)",
        name_hindi="अंतर्राष्ट्रीय स्नातक",
        description="Global education program with international perspective",
        description_hindi="अंतर्राष्ट्रीय दृष्टिकोण के साथ वैश्विक शिक्षा कार्यक्रम",
        priority=Priority.SECONDARY,
        region=Region.INTERNATIONAL,
        grades=_ALL_GRADES,
        subjects=_INTERNATIONAL_SUBJECTS,
        website="https://ibo.org",
    ),
    CurriculumStandard(
        id="cambridge",
        name="Cambridge International",
        name_hindi="कैम्ब्रिज अंतर्राष्ट्रीय",
        description="British curriculum with global recognition",
        description_hindi="वैश्विक मान्यता के साथ ब्रिटिश पाठ्यक्रम",
        priority=Priority.SECONDARY,
        region=Region.INTERNATIONAL,
        grades=_ALL_GRADES,
        subjects=_INTERNATIONAL_SUBJECTS,
        website="https://cambridgeinternational.org",
    ),
    CurriculumStandard(
        id="common-core",
        name="Common Core State Standards",
        name_hindi="सामान्य मूल राज्य मानक",
        description="American educational standards",
        description_hindi="अमेरिकी शैक्षिक मानक",
        priority=Priority.SECONDARY,
        region=Region.INTERNATIONAL,
        grades=_ALL_GRADES,
        subjects=_INTERNATIONAL_SUBJECTS,
        website="https://corestandards.org",
    ),
]


class CurriculumCatalog:
    """
    Read-only collection of curriculum standards.

    The two lists are kept separate so callers can tell national from
    international standards, but scoring always walks the combined list
    (national first) so that ranking ties resolve in catalog order.
    """

    def __init__(
        self,
        national: Optional[Sequence[CurriculumStandard]] = None,
        international: Optional[Sequence[CurriculumStandard]] = None,
    ):
        self._national = tuple(INDIAN_CURRICULUM_STANDARDS if national is None else national)
        self._international = tuple(INTERNATIONAL_STANDARDS if international is None else international)

    @property
    def national(self) -> List[CurriculumStandard]:
        return list(self._national)

    @property
    def international(self) -> List[CurriculumStandard]:
        return list(self._international)

    def all_standards(self) -> List[CurriculumStandard]:
        return list(self._national + self._international)

    def get(self, standard_id: str) -> Optional[CurriculumStandard]:
        for standard in self._national + self._international:
            if standard.id == standard_id:
                return standard
        return None

    @staticmethod
    def display_name(standard: CurriculumStandard, language: Language) -> str:
        return standard.name_hindi if language == Language.HINDI else standard.name

    @staticmethod
    def display_description(standard: CurriculumStandard, language: Language) -> str:
        return standard.description_hindi if language == Language.HINDI else standard.description


default_catalog = CurriculumCatalog()
