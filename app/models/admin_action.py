from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from beanie import Document
from pydantic import Field


class ActionType(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    DUPLICATE = "duplicate"
    STATUS_CHANGE = "status_change"


class AdminAction(Document):
    """Audit entry for one admin write to a test"""

    admin_id: str
    action_type: ActionType
    target_collection: str = "tests"
    target_id: str
    target_title: Optional[str] = None
    changed_fields: List[str] = Field(default_factory=list)
    changes: Dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "admin_actions"
        indexes = [
            "target_id",
            [("admin_id", 1), ("timestamp", -1)],
        ]
