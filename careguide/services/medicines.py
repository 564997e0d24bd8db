from __future__ import annotations

from careguide.knowledge.base import KnowledgeBase
from careguide.schemas.catalog import Medicine, MedicineType


def _searchable_text(medicine: Medicine) -> list[str]:
    return [
        medicine.name,
        medicine.generic_name,
        *medicine.brand_examples,
        *medicine.used_for,
    ]


def search_medicines(
    kb: KnowledgeBase,
    query: str | None = None,
    medicine_type: MedicineType | None = None,
) -> list[Medicine]:
    needle = (query or "").strip().lower()
    results: list[Medicine] = []
    for medicine in kb.medicines:
        if medicine_type is not None and medicine.type is not medicine_type:
            continue
        if needle and not any(needle in field.lower() for field in _searchable_text(medicine)):
            continue
        results.append(medicine)
    return results


def medicines_for_symptom(kb: KnowledgeBase, label: str) -> list[Medicine]:
    wanted = label.strip().lower()
    return [m for m in kb.medicines if any(used.lower() == wanted for used in m.used_for)]
