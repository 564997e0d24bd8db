from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, status

from careguide.knowledge.base import KnowledgeBase
from careguide.routers.deps import enforce_rate_limit, get_kb
from careguide.schemas.recommendations import (
    AssessmentResponse,
    RecommendationBundle,
    RecommendationRequest,
    RecommendationResponse,
    SymptomIndexResponse,
    SymptomTextRequest,
    SymptomTextResponse,
)
from careguide.schemas.symptoms import SymptomAssessment, SymptomDetail, UrgencyLevel
from careguide.services.recommendations import get_recommendations_for_symptoms
from careguide.services.symptom_matching import extract_symptom_labels
from careguide.services.triage import get_detailed_recommendations
from careguide.utils.logging import logger, preview


router = APIRouter(prefix="/symptoms", tags=["symptoms"])


def _emergency_note(kb: KnowledgeBase, is_emergency: bool) -> str | None:
    return kb.safety_disclaimer.emergency_note if is_emergency else None


def _bundle_response(kb: KnowledgeBase, bundle: RecommendationBundle) -> RecommendationResponse:
    return RecommendationResponse(
        **dict(bundle),
        emergency_note=_emergency_note(kb, bundle.has_emergency),
    )


@router.get("", response_model=SymptomIndexResponse)
def list_symptoms(kb: KnowledgeBase = Depends(get_kb)) -> SymptomIndexResponse:
    return SymptomIndexResponse(
        symptoms=kb.symptom_labels(),
        emergency_conditions=list(kb.emergency_condition_order),
        questionnaires=list(kb.symptom_details),
    )


@router.post(
    "/recommendations",
    response_model=RecommendationResponse,
    dependencies=[Depends(enforce_rate_limit)],
)
def recommendations(
    payload: RecommendationRequest,
    kb: KnowledgeBase = Depends(get_kb),
) -> RecommendationResponse:
    bundle = get_recommendations_for_symptoms(kb, payload.symptoms)
    return _bundle_response(kb, bundle)


@router.post(
    "/analyze",
    response_model=SymptomTextResponse,
    dependencies=[Depends(enforce_rate_limit)],
)
def analyze_text(
    payload: SymptomTextRequest,
    kb: KnowledgeBase = Depends(get_kb),
) -> SymptomTextResponse:
    if not payload.text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Please describe your symptoms.")

    labels = extract_symptom_labels(kb, payload.text)
    logger.debug("Matched %s in %r", labels, preview(payload.text))
    bundle = get_recommendations_for_symptoms(kb, labels)
    return SymptomTextResponse(
        **dict(bundle),
        emergency_note=_emergency_note(kb, bundle.has_emergency),
        matched_symptoms=tuple(labels),
    )


@router.get("/details/{name}", response_model=SymptomDetail)
def symptom_detail(
    name: str = Path(..., min_length=1, max_length=100),
    kb: KnowledgeBase = Depends(get_kb),
) -> SymptomDetail:
    detail = kb.get_symptom_detail(name)
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No questionnaire for '{name}'.")
    return detail


@router.post(
    "/assess",
    response_model=AssessmentResponse,
    dependencies=[Depends(enforce_rate_limit)],
)
def assess(
    payload: SymptomAssessment,
    kb: KnowledgeBase = Depends(get_kb),
) -> AssessmentResponse:
    result = get_detailed_recommendations(kb, payload)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown symptom id '{payload.symptom_id}'.",
        )
    return AssessmentResponse(
        **dict(result),
        emergency_note=_emergency_note(kb, result.urgency_level is UrgencyLevel.EMERGENCY),
    )
