from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from careguide.schemas.catalog import (
    HomeCareRemedy,
    Medicine,
    MedicineGuidelines,
    NaturalRemedy,
    SafetyDisclaimer,
)
from careguide.schemas.symptoms import Severity, SymptomDetail, SymptomRecommendations


DISCLAIMER = (
    "This is educational information, not a diagnosis. "
    "If symptoms are severe or worsening, seek in-person medical care."
)


class RecommendationBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    medicines: tuple[Medicine, ...] = ()
    home_care: tuple[HomeCareRemedy, ...] = ()
    natural: tuple[NaturalRemedy, ...] = ()
    has_emergency: bool = False
    emergency_symptoms: tuple[str, ...] = ()


class DetailedRecommendations(BaseModel):
    model_config = ConfigDict(frozen=True)

    symptom_detail: SymptomDetail
    urgency_level: Severity
    recommendations: SymptomRecommendations


class RecommendationRequest(BaseModel):
    symptoms: list[str] = Field(default_factory=list, max_length=50)

    @field_validator("symptoms")
    @classmethod
    def validate_labels(cls, value: list[str]) -> list[str]:
        for label in value:
            if len(label) > 100:
                raise ValueError("Symptom labels must be at most 100 characters.")
        return value


class RecommendationResponse(RecommendationBundle):
    emergency_note: str | None = None
    disclaimer: str = DISCLAIMER


class SymptomTextRequest(BaseModel):
    text: str = Field(max_length=2000)


class SymptomTextResponse(RecommendationResponse):
    matched_symptoms: tuple[str, ...] = ()


class AssessmentResponse(DetailedRecommendations):
    emergency_note: str | None = None
    disclaimer: str = DISCLAIMER


class SymptomIndexResponse(BaseModel):
    symptoms: list[str]
    emergency_conditions: list[str]
    questionnaires: list[str]


class SafetyInfoResponse(BaseModel):
    disclaimer: SafetyDisclaimer
    guidelines: MedicineGuidelines
