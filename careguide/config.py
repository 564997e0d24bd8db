from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


PACKAGE_ROOT = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_ROOT.parent
ENV_FILE = PROJECT_ROOT / ".env"
DEFAULT_DATA_DIR = PACKAGE_ROOT / "knowledge" / "data"
load_dotenv(ENV_FILE, override=False)

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _as_bool(value: str | None, *, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(
    value: str | None,
    *,
    default: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    if value is None or not value.strip():
        parsed = default
    else:
        try:
            parsed = int(value.strip())
        except ValueError as exc:
            raise ValueError(f"Expected integer value, got: {value!r}") from exc

    if min_value is not None and parsed < min_value:
        raise ValueError(f"Integer value {parsed} is less than allowed minimum {min_value}.")
    if max_value is not None and parsed > max_value:
        raise ValueError(f"Integer value {parsed} exceeds allowed maximum {max_value}.")
    return parsed


def _as_list(value: str | None, *, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


def _as_log_level(value: str | None, *, default: str) -> str:
    level = (value or default).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def _as_path(value: str | None, *, default: Path) -> Path:
    if value is None or not value.strip():
        return default
    return Path(value.strip()).expanduser()


@dataclass(frozen=True)
class Settings:
    app_name: str
    environment: str
    debug: bool
    log_level: str
    port: int

    knowledge_base_dir: Path
    rate_limit_per_minute: int
    cors_origins: list[str]
    trusted_proxies: list[str]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    environment = (os.getenv("APP_ENV") or "development").strip().lower()
    debug = _as_bool(os.getenv("DEBUG"), default=environment != "production")
    return Settings(
        app_name=(os.getenv("APP_NAME") or "CareGuide").strip(),
        environment=environment,
        debug=debug,
        log_level=_as_log_level(os.getenv("LOG_LEVEL"), default="DEBUG" if debug else "INFO"),
        port=_as_int(os.getenv("PORT"), default=8000, min_value=1, max_value=65535),
        knowledge_base_dir=_as_path(os.getenv("KNOWLEDGE_BASE_DIR"), default=DEFAULT_DATA_DIR),
        rate_limit_per_minute=_as_int(
            os.getenv("RATE_LIMIT_PER_MINUTE"),
            default=60,
            min_value=0,
            max_value=100_000,
        ),
        cors_origins=_as_list(
            os.getenv("CORS_ORIGINS"),
            default=[
                "http://localhost:3000",
                "http://127.0.0.1:3000",
                "http://localhost:5173",
                "http://127.0.0.1:5173",
            ],
        ),
        trusted_proxies=_as_list(os.getenv("TRUSTED_PROXIES"), default=[]),
    )
