from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from careguide.schemas.catalog import CatalogModel


class Severity(str, Enum):
    """Severity tag on an answer option, and the urgency level produced by triage."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EMERGENCY = "emergency"


UrgencyLevel = Severity


class CareUrgency(str, Enum):
    ROUTINE = "routine"
    SOON = "soon"
    URGENT = "urgent"
    EMERGENCY = "emergency"


class FollowUpOption(CatalogModel):
    value: str = Field(min_length=1)
    label: str
    emoji: str | None = None
    severity: Severity | None = None


class FollowUpQuestion(CatalogModel):
    id: str = Field(min_length=1)
    question: str
    options: tuple[FollowUpOption, ...]
    multiple: bool = False

    def find_option(self, value: str) -> FollowUpOption | None:
        for option in self.options:
            if option.value == value:
                return option
        return None


class DosageAdvice(CatalogModel):
    name: str
    dosage: str
    frequency: str
    notes: str | None = None
    age_group: Literal["all", "adult", "child", "infant"] | None = None


class HomeRemedyAdvice(CatalogModel):
    name: str
    instructions: str
    emoji: str | None = None


class NaturalRemedyAdvice(CatalogModel):
    name: str
    benefits: str
    how_to_use: str
    emoji: str | None = None


class DoctorRecommendation(CatalogModel):
    specialty: str
    urgency: CareUrgency
    reason: str


class SymptomRecommendations(CatalogModel):
    medicines: tuple[DosageAdvice, ...] = ()
    home_remedies: tuple[HomeRemedyAdvice, ...] = ()
    natural_remedies: tuple[NaturalRemedyAdvice, ...] = ()
    doctor_recommendations: tuple[DoctorRecommendation, ...] = ()
    warnings: tuple[str, ...] = ()
    general_advice: tuple[str, ...] = ()


class SymptomDetail(CatalogModel):
    id: str = Field(min_length=1)
    name: str
    description: str
    emoji: str = ""
    follow_up_questions: tuple[FollowUpQuestion, ...]
    recommendations: SymptomRecommendations

    def find_question(self, question_id: str) -> FollowUpQuestion | None:
        for question in self.follow_up_questions:
            if question.id == question_id:
                return question
        return None


class SymptomDetailsDocument(CatalogModel):
    symptom_details: dict[str, SymptomDetail]


class SymptomAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    symptom_id: str = Field(min_length=1, max_length=100)
    answers: dict[str, str | list[str]] = Field(default_factory=dict)

    @field_validator("answers")
    @classmethod
    def limit_answers(cls, value: dict[str, str | list[str]]) -> dict[str, str | list[str]]:
        if len(value) > 50:
            raise ValueError("Too many answered questions.")
        return value
