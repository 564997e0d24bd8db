from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import ValidationError

from careguide.config import get_settings
from careguide.schemas.catalog import (
    CatalogDocument,
    HomeCareRemedy,
    Medicine,
    MedicineGuidelines,
    NaturalRemedy,
    SafetyDisclaimer,
    SymptomMapping,
)
from careguide.schemas.kids import KidsSymptom, KidsSymptomsDocument
from careguide.schemas.symptoms import SymptomDetail, SymptomDetailsDocument
from careguide.utils.logging import logger


CATALOG_FILE = "catalog.json"
SYMPTOM_DETAILS_FILE = "symptom_details.json"
KIDS_SYMPTOMS_FILE = "kids_symptoms.json"

_WHITESPACE_RE = re.compile(r"\s+")


class KnowledgeBaseError(RuntimeError):
    """Raised when the data files cannot be read or do not match the catalog schema."""


def normalize_symptom_key(name: str) -> str:
    """Map a display label to a questionnaire key: "Sore Throat" -> "sore_throat"."""
    return _WHITESPACE_RE.sub("_", name.lower())


def _index_by_id(items: tuple[Any, ...]) -> Mapping[str, Any]:
    return MappingProxyType({item.id: item for item in items})


@dataclass(frozen=True)
class KnowledgeBase:
    medicines: tuple[Medicine, ...]
    home_care_remedies: tuple[HomeCareRemedy, ...]
    natural_remedies: tuple[NaturalRemedy, ...]
    symptom_map: Mapping[str, SymptomMapping]
    emergency_conditions: frozenset[str]
    symptom_details: Mapping[str, SymptomDetail]
    safety_disclaimer: SafetyDisclaimer
    medicine_guidelines: MedicineGuidelines
    emergency_condition_order: tuple[str, ...] = ()
    kids_catalog: KidsSymptomsDocument = field(default_factory=KidsSymptomsDocument)

    _medicines_by_id: Mapping[str, Medicine] = field(init=False, repr=False, compare=False)
    _home_care_by_id: Mapping[str, HomeCareRemedy] = field(init=False, repr=False, compare=False)
    _natural_by_id: Mapping[str, NaturalRemedy] = field(init=False, repr=False, compare=False)
    _kids_by_id: Mapping[str, KidsSymptom] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_medicines_by_id", _index_by_id(self.medicines))
        object.__setattr__(self, "_home_care_by_id", _index_by_id(self.home_care_remedies))
        object.__setattr__(self, "_natural_by_id", _index_by_id(self.natural_remedies))
        object.__setattr__(self, "_kids_by_id", _index_by_id(self.kids_catalog.symptoms))

    @classmethod
    def from_documents(
        cls,
        catalog: CatalogDocument,
        details: SymptomDetailsDocument,
        kids: KidsSymptomsDocument | None = None,
    ) -> "KnowledgeBase":
        return cls(
            medicines=catalog.medicines,
            home_care_remedies=catalog.home_care_remedies,
            natural_remedies=catalog.natural_remedies,
            symptom_map=MappingProxyType(dict(catalog.symptom_map)),
            emergency_conditions=frozenset(catalog.emergency_conditions),
            emergency_condition_order=catalog.emergency_conditions,
            symptom_details=MappingProxyType(dict(details.symptom_details)),
            safety_disclaimer=catalog.safety_disclaimer,
            medicine_guidelines=catalog.medicine_guidelines,
            kids_catalog=kids if kids is not None else KidsSymptomsDocument(),
        )

    def get_medicine_by_id(self, medicine_id: str) -> Medicine | None:
        return self._medicines_by_id.get(medicine_id)

    def get_home_care_by_id(self, remedy_id: str) -> HomeCareRemedy | None:
        return self._home_care_by_id.get(remedy_id)

    def get_natural_remedy_by_id(self, remedy_id: str) -> NaturalRemedy | None:
        return self._natural_by_id.get(remedy_id)

    def get_kids_symptom(self, symptom_id: str) -> KidsSymptom | None:
        return self._kids_by_id.get(symptom_id)

    def get_symptom_detail(self, name: str) -> SymptomDetail | None:
        """Exact lookup after normalization; no fuzzy or partial matching."""
        return self.symptom_details.get(normalize_symptom_key(name))

    def get_symptom_mapping(self, label: str) -> SymptomMapping | None:
        return self.symptom_map.get(label)

    def is_emergency_condition(self, label: str) -> bool:
        return label in self.emergency_conditions

    def symptom_labels(self) -> list[str]:
        return list(self.symptom_map)


def _read_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise KnowledgeBaseError(f"Cannot read knowledge base file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise KnowledgeBaseError(f"Invalid JSON in {path}: {exc}") from exc


def load_knowledge_base(data_dir: Path | str) -> KnowledgeBase:
    data_dir = Path(data_dir)
    catalog_path = data_dir / CATALOG_FILE
    details_path = data_dir / SYMPTOM_DETAILS_FILE
    kids_path = data_dir / KIDS_SYMPTOMS_FILE

    try:
        catalog = CatalogDocument.model_validate(_read_json(catalog_path))
    except ValidationError as exc:
        raise KnowledgeBaseError(f"{catalog_path} does not match the catalog schema:\n{exc}") from exc
    try:
        details = SymptomDetailsDocument.model_validate(_read_json(details_path))
    except ValidationError as exc:
        raise KnowledgeBaseError(f"{details_path} does not match the symptom detail schema:\n{exc}") from exc
    try:
        kids = KidsSymptomsDocument.model_validate(_read_json(kids_path))
    except ValidationError as exc:
        raise KnowledgeBaseError(f"{kids_path} does not match the kids symptom schema:\n{exc}") from exc

    kb = KnowledgeBase.from_documents(catalog, details, kids)
    logger.info(
        "Loaded knowledge base from %s: %d medicines, %d home-care remedies, "
        "%d natural remedies, %d mapped symptoms, %d questionnaires, %d kids symptoms",
        data_dir,
        len(kb.medicines),
        len(kb.home_care_remedies),
        len(kb.natural_remedies),
        len(kb.symptom_map),
        len(kb.symptom_details),
        len(kb.kids_catalog.symptoms),
    )
    return kb


@lru_cache(maxsize=1)
def get_knowledge_base() -> KnowledgeBase:
    return load_knowledge_base(get_settings().knowledge_base_dir)
