from __future__ import annotations

import json
import shutil
from dataclasses import replace
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from careguide.config import DEFAULT_DATA_DIR, get_settings
from careguide.knowledge.base import KnowledgeBase, load_knowledge_base
from careguide.main import create_app


@pytest.fixture(scope="session")
def kb() -> KnowledgeBase:
    return load_knowledge_base(DEFAULT_DATA_DIR)


@pytest.fixture
def client(kb: KnowledgeBase) -> TestClient:
    settings = replace(get_settings(), rate_limit_per_minute=0)
    return TestClient(create_app(settings=settings, knowledge_base=kb))


@pytest.fixture
def data_copy(tmp_path: Path) -> Path:
    """A writable copy of the packaged data files."""
    target = tmp_path / "data"
    shutil.copytree(DEFAULT_DATA_DIR, target)
    return target


def read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def write_json(path: Path, payload: dict) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
