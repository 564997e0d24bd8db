from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from careguide.knowledge.base import KnowledgeBase
from careguide.routers.deps import get_kb
from careguide.schemas.catalog import Medicine, MedicineType
from careguide.schemas.recommendations import SafetyInfoResponse
from careguide.services.medicines import search_medicines


router = APIRouter(tags=["medicines"])


@router.get("/medicines", response_model=list[Medicine])
def list_medicines(
    q: str | None = Query(None, max_length=100, description="Name, brand or symptom"),
    type: MedicineType | None = Query(None, description="OTC, Prescription, Ayurvedic or Homeopathic"),
    kb: KnowledgeBase = Depends(get_kb),
) -> list[Medicine]:
    return search_medicines(kb, q, type)


@router.get("/medicines/{medicine_id}", response_model=Medicine)
def medicine_detail(medicine_id: str, kb: KnowledgeBase = Depends(get_kb)) -> Medicine:
    medicine = kb.get_medicine_by_id(medicine_id)
    if medicine is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No medicine with id '{medicine_id}'.")
    return medicine


@router.get("/safety", response_model=SafetyInfoResponse)
def safety_info(kb: KnowledgeBase = Depends(get_kb)) -> SafetyInfoResponse:
    return SafetyInfoResponse(disclaimer=kb.safety_disclaimer, guidelines=kb.medicine_guidelines)
