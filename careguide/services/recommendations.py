from __future__ import annotations

from collections.abc import Iterable

from careguide.knowledge.base import KnowledgeBase
from careguide.schemas.recommendations import RecommendationBundle
from careguide.utils.logging import logger


def get_recommendations_for_symptoms(kb: KnowledgeBase, symptoms: Iterable[str]) -> RecommendationBundle:
    """
    Collect the catalog entries that apply to any of the given symptom labels.

    Ids are deduplicated across symptoms and returned in catalog order. Emergency
    labels are reported in input order, repeats included; they carry no mapping
    ids, so they add a flag and nothing else. Unknown labels are ignored.
    """
    medicine_ids: set[str] = set()
    home_care_ids: set[str] = set()
    natural_ids: set[str] = set()
    emergency_symptoms: list[str] = []

    for symptom in symptoms:
        if kb.is_emergency_condition(symptom):
            emergency_symptoms.append(symptom)

        mapping = kb.get_symptom_mapping(symptom)
        if mapping is None:
            logger.debug("No recommendation mapping for symptom label %r", symptom)
            continue
        medicine_ids.update(mapping.medicines)
        home_care_ids.update(mapping.home_care)
        natural_ids.update(mapping.natural)

    if emergency_symptoms:
        logger.info("Emergency symptoms reported: %s", ", ".join(emergency_symptoms))

    return RecommendationBundle(
        medicines=tuple(m for m in kb.medicines if m.id in medicine_ids),
        home_care=tuple(h for h in kb.home_care_remedies if h.id in home_care_ids),
        natural=tuple(n for n in kb.natural_remedies if n.id in natural_ids),
        has_emergency=bool(emergency_symptoms),
        emergency_symptoms=tuple(emergency_symptoms),
    )
