from __future__ import annotations

import logging
import re
from logging.config import dictConfig
from typing import Any


EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_RE = re.compile(r"\+?\d[\d\s().-]{7,}\d")
PREVIEW_CHARS = 80


def redact(value: str) -> str:
    value = EMAIL_RE.sub("[redacted-email]", value)
    value = PHONE_RE.sub("[redacted-phone]", value)
    return value


def _redact_arg(arg: Any) -> Any:
    # Label lists and answer maps are logged as-is, so their strings need masking too.
    if isinstance(arg, str):
        return redact(arg)
    if isinstance(arg, (list, tuple)):
        return type(arg)(_redact_arg(item) for item in arg)
    if isinstance(arg, dict):
        return {key: _redact_arg(item) for key, item in arg.items()}
    return arg


def preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    """A short, redacted, single-line excerpt of user-written symptom text."""
    flat = " ".join(redact(text or "").split())
    if len(flat) <= limit:
        return flat
    return flat[: limit - 3].rstrip() + "..."


class SymptomTextRedactionFilter(logging.Filter):
    """Keeps contact details that users paste into symptom text out of the logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact(record.msg)
        if isinstance(record.args, dict):
            record.args = _redact_arg(record.args)
        elif record.args:
            record.args = tuple(_redact_arg(arg) for arg in record.args)
        return True


def setup_logging(level: str = "INFO") -> None:
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "redact_symptom_text": {
                    "()": SymptomTextRedactionFilter,
                }
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["redact_symptom_text"],
                }
            },
            "loggers": {
                "careguide": {
                    "level": level,
                }
            },
            "root": {
                "handlers": ["console"],
                "level": level,
            },
        }
    )


logger = logging.getLogger("careguide")
