from __future__ import annotations

import pytest

from careguide.services.recommendations import get_recommendations_for_symptoms
from careguide.services.symptom_matching import detect_emergency_conditions, extract_symptom_labels


def test_labels_in_order_of_mention(kb):
    labels = extract_symptom_labels(kb, "I have a pounding Headache and now a fever too")

    assert labels == ["Headache", "Fever"]


def test_everyday_wording_maps_to_labels(kb):
    labels = extract_symptom_labels(kb, "Feeling dizzy, tired and I have a stomach ache")

    assert labels == ["Dizziness", "Fatigue", "Abdominal Pain"]


def test_each_label_reported_once(kb):
    assert extract_symptom_labels(kb, "cough, cough and more coughing") == ["Cough"]


@pytest.mark.parametrize("text", ["", "   ", "I feel great today", "unicorn flu"])
def test_no_labels(kb, text):
    assert extract_symptom_labels(kb, text) == []


def test_partial_words_do_not_match(kb):
    assert extract_symptom_labels(kb, "feverfew tea and a heatstroke warning") == []


def test_emergency_phrases_become_emergency_labels(kb):
    labels = extract_symptom_labels(kb, "Since this morning I can’t breathe and have chest pain")

    assert labels == ["Difficulty Breathing", "Chest Pain"]


def test_matched_labels_flow_through_resolver(kb):
    labels = extract_symptom_labels(kb, "My grandfather passed out and has a headache")
    bundle = get_recommendations_for_symptoms(kb, labels)

    assert labels == ["Loss of Consciousness", "Headache"]
    assert bundle.has_emergency is True
    assert bundle.emergency_symptoms == ("Loss of Consciousness",)
    assert [m.id for m in bundle.medicines] == ["paracetamol", "ibuprofen"]


def test_detect_emergency_conditions():
    assert detect_emergency_conditions("He passed out after a heart attack") == [
        "Loss of Consciousness",
        "Heart Attack Symptoms",
    ]
    assert detect_emergency_conditions("Slurred speech and face drooping") == ["Stroke Symptoms"]
    assert detect_emergency_conditions("mild headache") == []


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Worst headache of my life", ["Sudden Severe Headache"]),
        ("sudden severe headache since lunch", ["Sudden Severe Headache"]),
        ("a thunderclap headache and a fever", ["Sudden Severe Headache", "Fever"]),
        ("a headache all week, now the worst headache ever", ["Headache", "Sudden Severe Headache"]),
    ],
)
def test_words_inside_emergency_phrases_are_not_counted_again(kb, text, expected):
    assert extract_symptom_labels(kb, text) == expected


def test_emergency_headache_gets_no_self_care(kb):
    bundle = get_recommendations_for_symptoms(kb, extract_symptom_labels(kb, "worst headache of my life"))

    assert bundle.has_emergency is True
    assert bundle.medicines == ()
    assert bundle.home_care == ()
    assert bundle.natural == ()


@pytest.mark.parametrize("text", ["I think I got heat stroke", "worked on my backstroke", "a stroke of luck"])
def test_stroke_needs_a_medical_phrase(kb, text):
    assert extract_symptom_labels(kb, text) == []
    assert detect_emergency_conditions(text) == []


@pytest.mark.parametrize("text", ["I think dad is having a stroke", "signs of a stroke: slurred speech"])
def test_stroke_phrases(kb, text):
    assert extract_symptom_labels(kb, text) == ["Stroke Symptoms"]


def test_extraction_and_detection_agree_on_emergencies(kb):
    text = "Chest pain, fever and then he fainted"
    emergencies = detect_emergency_conditions(text, kb.emergency_condition_order)

    assert emergencies == ["Chest Pain", "Loss of Consciousness"]
    assert [label for label in extract_symptom_labels(kb, text) if kb.is_emergency_condition(label)] == emergencies
