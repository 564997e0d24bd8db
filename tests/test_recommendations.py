from __future__ import annotations

from careguide.services.recommendations import get_recommendations_for_symptoms


def _ids(records):
    return [record.id for record in records]


def test_empty_input(kb):
    bundle = get_recommendations_for_symptoms(kb, [])

    assert bundle.medicines == ()
    assert bundle.home_care == ()
    assert bundle.natural == ()
    assert bundle.has_emergency is False
    assert bundle.emergency_symptoms == ()


def test_unknown_symptom_is_ignored(kb):
    bundle = get_recommendations_for_symptoms(kb, ["Unicorn Flu"])

    assert bundle.medicines == ()
    assert bundle.home_care == ()
    assert bundle.natural == ()
    assert bundle.has_emergency is False


def test_shared_recommendations_are_deduplicated(kb):
    bundle = get_recommendations_for_symptoms(kb, ["Headache", "Fever"])

    assert _ids(bundle.medicines) == ["paracetamol", "ibuprofen"]
    assert _ids(bundle.home_care) == ["rest-recovery", "hydration", "cold-compress"]
    assert _ids(bundle.natural) == ["ginger", "tulsi", "peppermint"]


def test_results_follow_catalog_order_not_input_order(kb):
    forward = get_recommendations_for_symptoms(kb, ["Sore Throat", "Cough"])
    backward = get_recommendations_for_symptoms(kb, ["Cough", "Sore Throat"])

    assert forward == backward
    assert _ids(forward.medicines) == ["paracetamol", "ibuprofen", "dextromethorphan", "guaifenesin", "throat-lozenges"]


def test_repeated_call_returns_equal_results(kb):
    symptoms = ["Cough", "Nausea", "Chest Pain"]

    assert get_recommendations_for_symptoms(kb, symptoms) == get_recommendations_for_symptoms(kb, symptoms)


def test_emergency_symptom_gets_flag_and_no_self_care(kb):
    bundle = get_recommendations_for_symptoms(kb, ["Chest Pain"])

    assert bundle.medicines == ()
    assert bundle.home_care == ()
    assert bundle.natural == ()
    assert bundle.has_emergency is True
    assert bundle.emergency_symptoms == ("Chest Pain",)


def test_unmapped_emergency_condition_still_flags(kb):
    bundle = get_recommendations_for_symptoms(kb, ["Stroke Symptoms"])

    assert bundle.has_emergency is True
    assert bundle.emergency_symptoms == ("Stroke Symptoms",)
    assert bundle.medicines == ()


def test_emergency_list_keeps_input_order_and_repeats(kb):
    bundle = get_recommendations_for_symptoms(
        kb, ["Difficulty Breathing", "Fever", "Chest Pain", "Difficulty Breathing"]
    )

    assert bundle.emergency_symptoms == ("Difficulty Breathing", "Chest Pain", "Difficulty Breathing")
    assert _ids(bundle.medicines) == ["paracetamol", "ibuprofen"]


def test_labels_are_matched_exactly(kb):
    bundle = get_recommendations_for_symptoms(kb, ["headache", "chest pain"])

    assert bundle.medicines == ()
    assert bundle.has_emergency is False


def test_symptom_without_medicines(kb):
    bundle = get_recommendations_for_symptoms(kb, ["Fatigue"])

    assert bundle.medicines == ()
    assert _ids(bundle.home_care) == ["rest-recovery", "hydration"]
    assert _ids(bundle.natural) == ["tulsi"]


def test_accepts_any_iterable(kb):
    bundle = get_recommendations_for_symptoms(kb, (label for label in ["Diarrhea"]))

    assert _ids(bundle.medicines) == ["loperamide", "ors"]
