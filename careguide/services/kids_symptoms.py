from __future__ import annotations

from careguide.knowledge.base import KnowledgeBase
from careguide.schemas.kids import AgeGroup, KidsSymptom, KidsSymptomCategory
from careguide.schemas.symptoms import UrgencyLevel


def get_symptoms_by_category(kb: KnowledgeBase, category: KidsSymptomCategory) -> list[KidsSymptom]:
    return [s for s in kb.kids_catalog.symptoms if s.category is category]


def get_symptoms_by_age(kb: KnowledgeBase, age_group: AgeGroup) -> list[KidsSymptom]:
    """Symptoms relevant to the age group, including those listed for every age."""
    return [s for s in kb.kids_catalog.symptoms if s.applies_to(age_group)]


def get_symptoms_by_urgency(kb: KnowledgeBase, urgency: UrgencyLevel) -> list[KidsSymptom]:
    return [s for s in kb.kids_catalog.symptoms if s.urgency is urgency]


def _matches(symptom: KidsSymptom, needle: str, raw: str) -> bool:
    if needle in symptom.name.lower() or needle in symptom.description.lower():
        return True
    return bool(symptom.name_hindi) and raw in symptom.name_hindi


def search_symptoms(kb: KnowledgeBase, query: str) -> list[KidsSymptom]:
    """
    Substring search over English name and description (case-insensitive) and the
    Hindi name (as typed). A blank query matches every symptom.
    """
    raw = (query or "").strip()
    needle = raw.lower()
    return [s for s in kb.kids_catalog.symptoms if _matches(s, needle, raw)]


def find_kids_symptoms(
    kb: KnowledgeBase,
    *,
    category: KidsSymptomCategory | None = None,
    age_group: AgeGroup | None = None,
    urgency: UrgencyLevel | None = None,
    query: str | None = None,
) -> list[KidsSymptom]:
    """All filters combined; each one left out does not narrow the result."""
    results = search_symptoms(kb, query or "")
    narrowing: list[list[KidsSymptom]] = []
    if category is not None:
        narrowing.append(get_symptoms_by_category(kb, category))
    if age_group is not None:
        narrowing.append(get_symptoms_by_age(kb, age_group))
    if urgency is not None:
        narrowing.append(get_symptoms_by_urgency(kb, urgency))
    for selected in narrowing:
        ids = {s.id for s in selected}
        results = [s for s in results if s.id in ids]
    return results
