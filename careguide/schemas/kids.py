from __future__ import annotations

from enum import Enum

from pydantic import Field

from careguide.schemas.catalog import CatalogModel
from careguide.schemas.symptoms import UrgencyLevel


class KidsSymptomCategory(str, Enum):
    RESPIRATORY = "respiratory"
    DIGESTIVE = "digestive"
    SKIN = "skin"
    FEVER = "fever"
    NEUROLOGICAL = "neurological"
    BEHAVIORAL = "behavioral"
    EAR_NOSE_THROAT = "ear_nose_throat"
    EYE = "eye"
    MUSCULOSKELETAL = "musculoskeletal"
    URINARY = "urinary"
    GENERAL = "general"
    ALLERGIC = "allergic"
    DENTAL = "dental"
    DEVELOPMENTAL = "developmental"


class AgeGroup(str, Enum):
    NEWBORN = "newborn"
    INFANT = "infant"
    TODDLER = "toddler"
    PRESCHOOL = "preschool"


class AgeGroupInfo(CatalogModel):
    label: str
    range: str
    emoji: str


class CategoryInfo(CatalogModel):
    label: str
    emoji: str
    color: str


class KidsSymptom(CatalogModel):
    """A symptom in children under five. No age list means every age group."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    name_hindi: str | None = None
    category: KidsSymptomCategory
    urgency: UrgencyLevel
    description: str
    emoji: str | None = None
    age_relevance: tuple[AgeGroup, ...] | None = None
    related_symptoms: tuple[str, ...] = ()

    def applies_to(self, age_group: AgeGroup) -> bool:
        return self.age_relevance is None or age_group in self.age_relevance


class KidsSymptomsDocument(CatalogModel):
    age_groups: dict[AgeGroup, AgeGroupInfo] = Field(default_factory=dict)
    categories: dict[KidsSymptomCategory, CategoryInfo] = Field(default_factory=dict)
    symptoms: tuple[KidsSymptom, ...] = ()


class KidsReferenceResponse(CatalogModel):
    age_groups: dict[AgeGroup, AgeGroupInfo]
    categories: dict[KidsSymptomCategory, CategoryInfo]
    emergency_note: str
