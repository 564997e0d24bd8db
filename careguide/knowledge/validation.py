"""
Consistency checks over a loaded knowledge base.

The engine drops unknown ids silently at request time, so broken references
only show up here. Nothing in this module raises; callers decide whether an
issue is fatal (the test suite) or worth a warning (application startup).
"""

from __future__ import annotations

from dataclasses import dataclass

from careguide.knowledge.base import KnowledgeBase


@dataclass(frozen=True)
class DanglingReference:
    symptom: str
    catalog: str
    missing_id: str

    def __str__(self) -> str:
        return f"Symptom {self.symptom!r} references unknown {self.catalog} id {self.missing_id!r}"


@dataclass(frozen=True)
class DuplicateOptionValue:
    symptom_id: str
    question_id: str
    value: str

    def __str__(self) -> str:
        return (
            f"Question {self.question_id!r} of symptom {self.symptom_id!r} "
            f"repeats option value {self.value!r}"
        )


def find_dangling_references(kb: KnowledgeBase) -> list[DanglingReference]:
    issues: list[DanglingReference] = []
    for symptom, mapping in kb.symptom_map.items():
        for medicine_id in mapping.medicines:
            if kb.get_medicine_by_id(medicine_id) is None:
                issues.append(DanglingReference(symptom, "medicine", medicine_id))
        for remedy_id in mapping.home_care:
            if kb.get_home_care_by_id(remedy_id) is None:
                issues.append(DanglingReference(symptom, "home-care", remedy_id))
        for remedy_id in mapping.natural:
            if kb.get_natural_remedy_by_id(remedy_id) is None:
                issues.append(DanglingReference(symptom, "natural-remedy", remedy_id))
    return issues


def find_duplicate_option_values(kb: KnowledgeBase) -> list[DuplicateOptionValue]:
    issues: list[DuplicateOptionValue] = []
    for symptom_id, detail in kb.symptom_details.items():
        for question in detail.follow_up_questions:
            seen: set[str] = set()
            for option in question.options:
                if option.value in seen:
                    issues.append(DuplicateOptionValue(symptom_id, question.id, option.value))
                seen.add(option.value)
    return issues


def find_emergency_mappings_with_recommendations(kb: KnowledgeBase) -> list[str]:
    """Emergency labels whose mapping entry would still suggest self-care."""
    return [
        label
        for label in kb.emergency_condition_order
        if (mapping := kb.get_symptom_mapping(label)) is not None and not mapping.is_empty()
    ]


def find_mismatched_symptom_ids(kb: KnowledgeBase) -> list[str]:
    return [key for key, detail in kb.symptom_details.items() if detail.id != key]


def find_kids_catalog_issues(kb: KnowledgeBase) -> list[str]:
    catalog = kb.kids_catalog
    issues: list[str] = []
    seen: set[str] = set()
    for symptom in catalog.symptoms:
        if symptom.id in seen:
            issues.append(f"Kids symptom id {symptom.id!r} is used more than once")
        seen.add(symptom.id)
        if symptom.category not in catalog.categories:
            issues.append(f"Kids symptom {symptom.id!r} has undescribed category {symptom.category.value!r}")
        for age_group in symptom.age_relevance or ():
            if age_group not in catalog.age_groups:
                issues.append(f"Kids symptom {symptom.id!r} has undescribed age group {age_group.value!r}")
    for symptom in catalog.symptoms:
        for related in symptom.related_symptoms:
            if related not in seen:
                issues.append(f"Kids symptom {symptom.id!r} relates to unknown id {related!r}")
    return issues


def validate_knowledge_base(kb: KnowledgeBase) -> list[str]:
    messages = [str(issue) for issue in find_dangling_references(kb)]
    messages.extend(str(issue) for issue in find_duplicate_option_values(kb))
    messages.extend(
        f"Emergency condition {label!r} maps to self-care recommendations"
        for label in find_emergency_mappings_with_recommendations(kb)
    )
    messages.extend(
        f"Symptom detail stored under {key!r} declares a different id"
        for key in find_mismatched_symptom_ids(kb)
    )
    messages.extend(find_kids_catalog_issues(kb))
    return messages
