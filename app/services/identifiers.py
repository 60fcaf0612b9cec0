"""
String identifiers for entities nested inside a test document
"""

import copy
import time
import uuid
from typing import Any, Dict, Optional

# Collection key -> prefix used when an id has to be generated
COLLECTION_PREFIXES = {
    "sections": "section",
    "questions": "question",
    "tasks": "task",
    "parts": "part",
    "readingSections": "section",
    "listeningSections": "section",
    "writingTasks": "task",
    "speakingParts": "part",
}

SKILL_WRAPPERS = ("reading", "listening", "writing", "speaking")

INTERNAL_ID_FIELD = "_id"


def generate_id(prefix: str) -> str:
    """Build a new id like ``question-1718030000000-3f9a1c2b7``"""
    timestamp = int(time.time() * 1000)
    return f"{prefix}-{timestamp}-{uuid.uuid4().hex[:9]}"


def _assign_entity_id(entity: Dict[str, Any], prefix: str) -> None:
    if not entity.get("id"):
        internal_id = entity.get(INTERNAL_ID_FIELD)
        entity["id"] = str(internal_id) if internal_id else generate_id(prefix)
    entity.pop(INTERNAL_ID_FIELD, None)


def _walk(node: Dict[str, Any]) -> None:
    for key, prefix in COLLECTION_PREFIXES.items():
        items = node.get(key)
        if not isinstance(items, list):
            continue
        for entity in items:
            if isinstance(entity, dict):
                _assign_entity_id(entity, prefix)
                _walk(entity)

    for wrapper in SKILL_WRAPPERS:
        nested = node.get(wrapper)
        if isinstance(nested, dict):
            _walk(nested)


def assign_ids(raw_content: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Ensure every section, question, task and part carries a string ``id``.

    Works on a deep copy of ``raw_content``. Existing ids are kept, a stored
    ``_id`` is reused when ``id`` is missing, and ``_id`` is always dropped.
    Running it twice gives the same result as running it once.
    """
    if raw_content is None:
        return None

    content = copy.deepcopy(raw_content)
    if isinstance(content, dict):
        _walk(content)
    return content
