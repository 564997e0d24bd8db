from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MedicineType(str, Enum):
    OTC = "OTC"
    PRESCRIPTION = "Prescription"
    AYURVEDIC = "Ayurvedic"
    HOMEOPATHIC = "Homeopathic"


class SafetyClass(str, Enum):
    GENERALLY_SAFE = "Generally Safe"
    USE_CAUTION = "Use Caution"
    CONSULT_DOCTOR = "Consult Doctor"
    PRESCRIPTION_ONLY = "Prescription Only"


class PregnancyCategory(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    X = "X"
    NOT_CLASSIFIED = "Not Classified"


class Effectiveness(str, Enum):
    HIGHLY_EFFECTIVE = "Highly Effective"
    MODERATELY_EFFECTIVE = "Moderately Effective"
    SUPPORTIVE_CARE = "Supportive Care"
    PREVENTIVE = "Preventive"


class NaturalRemedyType(str, Enum):
    HERB = "Herb"
    SPICE = "Spice"
    ESSENTIAL_OIL = "Essential Oil"
    FOOD = "Food"
    TECHNIQUE = "Technique"


class CatalogModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class DosageGuidelines(CatalogModel):
    adults: str
    children: str | None = None
    elderly: str | None = None
    frequency: str
    max_duration: str


class SideEffects(CatalogModel):
    common: tuple[str, ...] = ()
    rare: tuple[str, ...] = ()
    serious: tuple[str, ...] = ()


class Medicine(CatalogModel):
    id: str = Field(min_length=1)
    name: str
    generic_name: str
    brand_examples: tuple[str, ...] = ()
    category: str
    type: MedicineType
    used_for: tuple[str, ...] = ()
    how_it_works: str
    dosage_guidelines: DosageGuidelines
    side_effects: SideEffects
    warnings: tuple[str, ...] = ()
    contraindications: tuple[str, ...] = ()
    interactions: tuple[str, ...] = ()
    safety_class: SafetyClass
    pregnancy_category: PregnancyCategory
    icon: str = ""


class HomeCareRemedy(CatalogModel):
    id: str = Field(min_length=1)
    name: str
    description: str
    for_symptoms: tuple[str, ...] = ()
    instructions: tuple[str, ...] = ()
    ingredients: tuple[str, ...] | None = None
    benefits: tuple[str, ...] = ()
    precautions: tuple[str, ...] = ()
    effectiveness: Effectiveness
    icon: str = ""


class NaturalRemedy(CatalogModel):
    id: str = Field(min_length=1)
    name: str
    type: NaturalRemedyType
    description: str
    for_symptoms: tuple[str, ...] = ()
    how_to_use: tuple[str, ...] = ()
    scientific_basis: str
    precautions: tuple[str, ...] = ()
    icon: str = ""


class SymptomMapping(CatalogModel):
    """Recommendation ids for one symptom label; each list points into its own catalog."""

    medicines: tuple[str, ...] = ()
    home_care: tuple[str, ...] = ()
    natural: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not (self.medicines or self.home_care or self.natural)


class SafetyDisclaimer(CatalogModel):
    title: str
    points: tuple[str, ...]
    emergency_note: str


class MedicineGuidelines(CatalogModel):
    before_taking: tuple[str, ...]
    red_flags: tuple[str, ...]


class CatalogDocument(CatalogModel):
    medicines: tuple[Medicine, ...]
    home_care_remedies: tuple[HomeCareRemedy, ...]
    natural_remedies: tuple[NaturalRemedy, ...]
    symptom_map: dict[str, SymptomMapping]
    emergency_conditions: tuple[str, ...]
    safety_disclaimer: SafetyDisclaimer
    medicine_guidelines: MedicineGuidelines
