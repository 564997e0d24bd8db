from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

from careguide.knowledge.base import KnowledgeBase


# Plain-language phrases that point at an emergency condition label.
EMERGENCY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Chest Pain": ("chest pain", "chest tightness", "pressure in my chest"),
    "Difficulty Breathing": (
        "difficulty breathing",
        "trouble breathing",
        "cannot breathe",
        "can't breathe",
        "cant breathe",
        "not breathing",
        "shortness of breath",
        "short of breath",
    ),
    "Severe Allergic Reaction": ("severe allergic reaction", "anaphylaxis", "throat swelling", "swollen throat"),
    "Sudden Severe Headache": ("sudden severe headache", "thunderclap headache", "worst headache"),
    "Loss of Consciousness": ("loss of consciousness", "unconscious", "passed out", "fainted"),
    "Severe Bleeding": ("severe bleeding", "heavy bleeding", "bleeding heavily", "won't stop bleeding"),
    "Stroke Symptoms": (
        "having a stroke",
        "had a stroke",
        "signs of a stroke",
        "mini stroke",
        "mini-stroke",
        "face drooping",
        "slurred speech",
    ),
    "Heart Attack Symptoms": ("heart attack",),
}

# Everyday wording for mapped symptom labels; the labels themselves always match.
SYMPTOM_ALIASES: dict[str, tuple[str, ...]] = {
    "Headache": ("headaches", "head ache", "head hurts"),
    "Fever": ("feverish", "high temperature"),
    "Cough": ("coughing",),
    "Sore Throat": ("throat pain", "scratchy throat"),
    "Fatigue": ("tired", "exhausted", "weakness"),
    "Body Aches": ("body ache", "body pain", "aching body"),
    "Nausea": ("nauseous", "nauseated", "feel sick", "vomiting"),
    "Dizziness": ("dizzy", "lightheaded", "light-headed"),
    "Abdominal Pain": ("stomach ache", "stomach pain", "tummy ache", "belly pain"),
    "Diarrhea": ("diarrhoea", "loose motions", "loose stools"),
    "Skin Rash": ("rash", "itchy skin", "hives"),
    "Joint Pain": ("aching joints", "sore joints"),
    "Runny Nose": ("blocked nose", "stuffy nose", "sneezing"),
    "Loss of Appetite": ("no appetite", "not hungry"),
}


@lru_cache(maxsize=512)
def _phrase_pattern(phrase: str) -> re.Pattern[str]:
    return re.compile(r"(?<!\w)" + re.escape(phrase.lower()) + r"(?!\w)")


Span = tuple[int, int]


def _spans(text: str, phrases: tuple[str, ...]) -> list[Span]:
    return sorted(m.span() for phrase in phrases for m in _phrase_pattern(phrase).finditer(text))


def _normalize_text(text: str) -> str:
    return re.sub(r"\s+", " ", (text or "").lower().replace("’", "'"))


def _emergency_spans(text: str, labels: Iterable[str]) -> dict[str, list[Span]]:
    found: dict[str, list[Span]] = {}
    for label in labels:
        spans = _spans(text, (label,) + EMERGENCY_KEYWORDS.get(label, ()))
        if spans:
            found[label] = spans
    return found


def _covered(span: Span, covering: list[Span]) -> bool:
    return any(start <= span[0] and span[1] <= end for start, end in covering)


def detect_emergency_conditions(text: str, labels: Iterable[str] | None = None) -> list[str]:
    """Emergency labels whose keywords occur in the text, in order of appearance."""
    found = _emergency_spans(_normalize_text(text), EMERGENCY_KEYWORDS if labels is None else labels)
    return sorted(found, key=lambda label: (found[label][0][0], label))


def extract_symptom_labels(kb: KnowledgeBase, text: str) -> list[str]:
    """
    Reduce free text to catalog symptom labels.

    Matches whole phrases only, ignoring case. Each label appears once, ordered by
    where it is first mentioned. Emergency conditions are included so the
    resolver can raise its flag for them. A word that only occurs inside an
    emergency phrase does not count on its own, so "worst headache" is not also
    an ordinary "Headache".
    """
    normalized = _normalize_text(text)
    if not normalized.strip():
        return []

    emergencies = _emergency_spans(normalized, kb.emergency_condition_order)
    covering = [span for spans in emergencies.values() for span in spans]
    hits = {label: spans[0][0] for label, spans in emergencies.items()}

    for label in kb.symptom_labels():
        if label in hits:
            continue
        spans = [
            span
            for span in _spans(normalized, (label,) + SYMPTOM_ALIASES.get(label, ()))
            if not _covered(span, covering)
        ]
        if spans:
            hits[label] = spans[0][0]

    return [label for label, _ in sorted(hits.items(), key=lambda item: (item[1], item[0]))]
