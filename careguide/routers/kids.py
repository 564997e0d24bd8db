from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from careguide.knowledge.base import KnowledgeBase
from careguide.routers.deps import get_kb
from careguide.schemas.kids import AgeGroup, KidsReferenceResponse, KidsSymptom, KidsSymptomCategory
from careguide.schemas.symptoms import UrgencyLevel
from careguide.services.kids_symptoms import find_kids_symptoms


router = APIRouter(prefix="/kids", tags=["kids"])


@router.get("/symptoms", response_model=list[KidsSymptom])
def list_kids_symptoms(
    q: str | None = Query(None, max_length=100, description="Name or description, English or Hindi"),
    category: KidsSymptomCategory | None = Query(None),
    age_group: AgeGroup | None = Query(None, description="newborn, infant, toddler or preschool"),
    urgency: UrgencyLevel | None = Query(None),
    kb: KnowledgeBase = Depends(get_kb),
) -> list[KidsSymptom]:
    return find_kids_symptoms(kb, category=category, age_group=age_group, urgency=urgency, query=q)


@router.get("/symptoms/{symptom_id}", response_model=KidsSymptom)
def kids_symptom_detail(symptom_id: str, kb: KnowledgeBase = Depends(get_kb)) -> KidsSymptom:
    symptom = kb.get_kids_symptom(symptom_id)
    if symptom is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No kids symptom with id '{symptom_id}'.")
    return symptom


@router.get("/reference", response_model=KidsReferenceResponse)
def kids_reference(kb: KnowledgeBase = Depends(get_kb)) -> KidsReferenceResponse:
    return KidsReferenceResponse(
        age_groups=kb.kids_catalog.age_groups,
        categories=kb.kids_catalog.categories,
        emergency_note=kb.safety_disclaimer.emergency_note,
    )
