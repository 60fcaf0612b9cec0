from datetime import datetime, timezone
from beanie import Document
from pydantic import ConfigDict, Field


class BaseDocument(Document):
    """Base document class with camelCase storage keys and timestamps"""

    model_config = ConfigDict(populate_by_name=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="createdAt"
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="updatedAt"
    )

    class Settings:
        abstract = True  # Make this an abstract base class

    def update_timestamp(self):
        """Update the last modified timestamp"""
        self.updated_at = datetime.now(timezone.utc)
