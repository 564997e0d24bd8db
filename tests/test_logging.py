from __future__ import annotations

import logging

import pytest

from careguide.utils.logging import SymptomTextRedactionFilter, preview, redact


def _record(msg, *args):
    return logging.LogRecord("careguide", logging.INFO, __file__, 1, msg, args, None)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("mail me at jane.doe@example.com", "mail me at [redacted-email]"),
        ("call +91 98765 43210 tonight", "call [redacted-phone] tonight"),
        ("fever of 39.5 for 2 days", "fever of 39.5 for 2 days"),
    ],
)
def test_redact(value, expected):
    assert redact(value) == expected


def test_filter_masks_logged_symptom_labels():
    record = _record("Unmapped labels %s from %r", ["Headache", "call 555-123-4567"], "jane@example.org")

    SymptomTextRedactionFilter().filter(record)

    assert record.getMessage() == "Unmapped labels ['Headache', 'call [redacted-phone]'] from '[redacted-email]'"


def test_filter_masks_message_and_mapping_args():
    record = _record("Answers %(answers)s", {"answers": {"fever_notes": "ring 0208 555 0199"}})

    SymptomTextRedactionFilter().filter(record)

    assert record.getMessage() == "Answers {'fever_notes': 'ring [redacted-phone]'}"


def test_preview_is_short_and_redacted():
    text = "Chest pain since noon,\n reach me on ana@example.com " + "and more detail " * 20

    excerpt = preview(text)

    assert len(excerpt) <= 80
    assert excerpt.endswith("...")
    assert "\n" not in excerpt
    assert "[redacted-email]" in excerpt
    assert preview("  short  text ") == "short text"
