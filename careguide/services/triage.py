from __future__ import annotations

from collections.abc import Mapping

from careguide.knowledge.base import KnowledgeBase
from careguide.schemas.recommendations import DetailedRecommendations
from careguide.schemas.symptoms import Severity, SymptomAssessment, SymptomDetail, UrgencyLevel
from careguide.utils.logging import logger


def escalate_urgency(current: UrgencyLevel, severity: Severity | None) -> UrgencyLevel:
    """Apply one answer's severity. Levels only move up and emergency is final."""
    if severity is Severity.EMERGENCY:
        return UrgencyLevel.EMERGENCY
    if severity is Severity.HIGH and current is not UrgencyLevel.EMERGENCY:
        return UrgencyLevel.HIGH
    if severity is Severity.MEDIUM and current is UrgencyLevel.LOW:
        return UrgencyLevel.MEDIUM
    return current


def _as_list(answer: str | list[str]) -> list[str]:
    if isinstance(answer, str):
        return [answer]
    return list(answer)


def _reduce_answers(detail: SymptomDetail, answers: Mapping[str, str | list[str]]) -> UrgencyLevel:
    urgency = UrgencyLevel.LOW
    for question_id, answer in answers.items():
        question = detail.find_question(question_id)
        if question is None:
            logger.debug("Skipping unknown question %r for symptom %r", question_id, detail.id)
            continue
        for value in _as_list(answer):
            option = question.find_option(value)
            if option is None:
                continue
            urgency = escalate_urgency(urgency, option.severity)
    return urgency


def classify_urgency(kb: KnowledgeBase, assessment: SymptomAssessment) -> UrgencyLevel | None:
    detail = kb.symptom_details.get(assessment.symptom_id)
    if detail is None:
        return None
    return _reduce_answers(detail, assessment.answers)


def get_detailed_recommendations(
    kb: KnowledgeBase, assessment: SymptomAssessment
) -> DetailedRecommendations | None:
    detail = kb.symptom_details.get(assessment.symptom_id)
    if detail is None:
        return None

    urgency = _reduce_answers(detail, assessment.answers)
    if urgency is UrgencyLevel.EMERGENCY:
        logger.info("Assessment for %r classified as emergency", detail.id)
    return DetailedRecommendations(
        symptom_detail=detail,
        urgency_level=urgency,
        recommendations=detail.recommendations,
    )
