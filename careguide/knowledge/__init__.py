from careguide.knowledge.base import (
    KnowledgeBase,
    KnowledgeBaseError,
    get_knowledge_base,
    load_knowledge_base,
    normalize_symptom_key,
)
from careguide.knowledge.validation import validate_knowledge_base

__all__ = [
    "KnowledgeBase",
    "KnowledgeBaseError",
    "get_knowledge_base",
    "load_knowledge_base",
    "normalize_symptom_key",
    "validate_knowledge_base",
]
